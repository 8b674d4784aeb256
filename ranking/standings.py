# ranking/standings.py
# The whole pipeline as one pure function: records in, standings out.

from dataclasses import dataclass
from typing import Dict, List

from errors import UnknownMetricError

from .aggregation import aggregate_judge_scores, score_entries
from .eligibility import eligible_pool, unranked_entries
from .leaderboard import COMMUNITY, JUDGE, project_leaderboard
from .podium import community_rank_key, judge_rank_key, select_podium
from .types import EligibilityPool, PodiumSlot, RankingSettings, ScoredEntry


@dataclass(frozen=True)
class Standings:
    scored: Dict[int, ScoredEntry]
    judge_podium: List[PodiumSlot]
    community_podium: List[PodiumSlot]
    pool: EligibilityPool

    def podium(self, metric):
        if metric == COMMUNITY:
            return self.community_podium
        if metric == JUDGE:
            return self.judge_podium
        raise UnknownMetricError(f'Unknown leaderboard metric: {metric!r}')

    def leaderboard(self, metric):
        return project_leaderboard(self.podium(metric), metric)

    @property
    def judge_podium_ids(self):
        return {slot.entry_id for slot in self.judge_podium}

    def unranked(self):
        return unranked_entries(self.scored.values(), self.judge_podium_ids, self.pool)


def build_standings(entries, score_records, judge_ids, settings=None):
    """
    Recomputes everything for one event from the raw records.

    `entries` are EntrySnapshot-like objects in registration order, which is
    also the final tie-break. Running it twice on the same input gives the
    same standings.
    """
    settings = settings or RankingSettings()
    score_records = list(score_records)

    summaries = aggregate_judge_scores(score_records, judge_ids)
    scored = score_entries(entries, summaries)

    judge_podium = select_podium(
        scored,
        rank_key=judge_rank_key,
        partitions=settings.partitions,
        per_partition=settings.per_partition,
        size=settings.podium_size,
    )
    podium_ids = {slot.entry_id for slot in judge_podium}

    # Bootstrap: voting opened before any judge record exists for the event
    bootstrap = not any(s.review_count for s in summaries.values())
    pool = eligible_pool(scored, podium_ids, pool_size=settings.pool_size, bootstrap=bootstrap)

    community_podium = select_podium(
        [e for e in scored if e.id in pool],
        rank_key=community_rank_key,
        partitions=settings.partitions,
        per_partition=settings.per_partition,
        size=settings.podium_size,
        qualifies=None,
    )

    return Standings(
        scored={e.id: e for e in scored},
        judge_podium=judge_podium,
        community_podium=community_podium,
        pool=pool,
    )
