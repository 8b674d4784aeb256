# ranking/leaderboard.py
# Display-ready views of a podium for the judge and community leaderboards.

from dataclasses import dataclass
from typing import Optional, Tuple

from errors import UnknownMetricError

JUDGE = 'judge'
COMMUNITY = 'community'
METRICS = (JUDGE, COMMUNITY)


def format_score(entry, metric):
    if metric == JUDGE:
        return f'{entry.average_score:.1f}/10'
    if metric == COMMUNITY:
        votes = entry.overall_votes
        return f'{votes} vote' if votes == 1 else f'{votes} votes'
    raise UnknownMetricError(f'Unknown leaderboard metric: {metric!r}')


def raw_score(entry, metric):
    if metric == JUDGE:
        return entry.average_score
    if metric == COMMUNITY:
        return entry.overall_votes
    raise UnknownMetricError(f'Unknown leaderboard metric: {metric!r}')


@dataclass(frozen=True)
class LeaderboardRow:
    entry_id: int
    rank: int
    score: float
    display: str
    class_level: Optional[str] = None

    def to_dict(self):
        return {
            'entry_id': self.entry_id,
            'rank': self.rank,
            'score': self.score,
            'display': self.display,
            'class_level': self.class_level,
        }


@dataclass(frozen=True)
class Leaderboard:
    metric: str
    rows: Tuple[LeaderboardRow, ...] = ()

    @property
    def is_empty(self):
        return not self.rows

    @property
    def top_three(self):
        return self.rows[:3]

    @property
    def rest(self):
        return self.rows[3:]

    def to_dict(self):
        return {
            'metric': self.metric,
            'empty': self.is_empty,
            'podium': [row.to_dict() for row in self.top_three],
            'rest': [row.to_dict() for row in self.rest],
        }


def project_leaderboard(podium, metric):
    if metric not in METRICS:
        raise UnknownMetricError(f'Unknown leaderboard metric: {metric!r}')
    rows = tuple(
        LeaderboardRow(
            entry_id=slot.entry.id,
            rank=slot.rank,
            score=raw_score(slot.entry, metric),
            display=format_score(slot.entry, metric),
            class_level=slot.entry.class_level,
        )
        for slot in podium
    )
    return Leaderboard(metric=metric, rows=rows)
