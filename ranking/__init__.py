# ranking/__init__.py
# Pure ranking & voting-eligibility pipeline

from .aggregation import aggregate_judge_scores, score_entries, summary_for
from .cooldown import VoteCheck, check_cooldown, normalize_phone
from .eligibility import eligible_pool, unranked_entries
from .leaderboard import COMMUNITY, JUDGE, METRICS, Leaderboard, project_leaderboard
from .podium import community_rank_key, judge_rank_key, select_podium
from .standings import Standings, build_standings
from .types import (
    EligibilityPool,
    EntrySnapshot,
    PodiumSlot,
    RankingSettings,
    ScoredEntry,
    ScoreRecord,
    ScoreSummary,
)
