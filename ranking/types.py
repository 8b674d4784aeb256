# ranking/types.py
# Plain value types shared by the ranking pipeline. Nothing here touches the database.

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class EntrySnapshot:
    id: int
    class_level: Optional[str] = None
    overall_votes: int = 0
    overall_views: int = 0


@dataclass(frozen=True)
class ScoreRecord:
    judge_id: int
    entry_id: int
    score: float


@dataclass(frozen=True)
class ScoreSummary:
    average_score: float = 0.0
    review_count: int = 0


@dataclass(frozen=True)
class ScoredEntry:
    id: int
    class_level: Optional[str]
    average_score: float
    review_count: int
    overall_votes: int = 0
    overall_views: int = 0


@dataclass(frozen=True)
class PodiumSlot:
    entry: ScoredEntry
    rank: int

    @property
    def entry_id(self):
        return self.entry.id


@dataclass(frozen=True)
class EligibilityPool:
    """Entry ids open for community voting, best judged first."""
    entry_ids: Tuple[int, ...] = ()
    bootstrap: bool = False

    def __contains__(self, entry_id):
        return entry_id in self.entry_ids

    def __len__(self):
        return len(self.entry_ids)

    def __iter__(self):
        return iter(self.entry_ids)

    def as_set(self):
        return set(self.entry_ids)


@dataclass(frozen=True)
class RankingSettings:
    podium_size: int = 6
    per_partition: int = 2
    pool_size: int = 45
    partitions: Tuple[str, ...] = field(default_factory=tuple)
