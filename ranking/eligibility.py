# ranking/eligibility.py

from .podium import is_reviewed, judge_rank_key, sort_for_ranking
from .types import EligibilityPool


def eligible_pool(entries, podium_ids, pool_size=45, bootstrap=False):
    """
    Entries open for community voting.

    bootstrap=True means no judge has scored anything for the event yet: every
    entry outside the podium is eligible. Otherwise the pool is the next
    `pool_size` reviewed entries after the podium, best judged first.
    """
    podium_ids = set(podium_ids)
    if bootstrap:
        return EligibilityPool(
            entry_ids=tuple(e.id for e in entries if e.id not in podium_ids),
            bootstrap=True,
        )

    ranked = sort_for_ranking([e for e in entries if is_reviewed(e)], judge_rank_key)
    remaining = [e.id for e in ranked if e.id not in podium_ids]
    return EligibilityPool(entry_ids=tuple(remaining[:max(pool_size, 0)]))


def unranked_entries(entries, podium_ids, pool):
    """Ids of entries that are neither on the podium nor open for voting."""
    podium_ids = set(podium_ids)
    return [e.id for e in entries if e.id not in podium_ids and e.id not in pool]
