# ranking/podium.py
# Balanced top-K: best entries per class level first, then global backfill.

from .types import PodiumSlot


def judge_rank_key(entry):
    return (entry.average_score, entry.review_count)


def community_rank_key(entry):
    return (entry.overall_votes,)


def is_reviewed(entry):
    return entry.review_count > 0


def sort_for_ranking(entries, rank_key):
    # sorted() is stable, so equal keys keep input order
    return sorted(entries, key=rank_key, reverse=True)


def select_podium(entries, rank_key=judge_rank_key, partitions=(), per_partition=2, size=6,
                  qualifies=is_reviewed, partition_of=lambda e: e.class_level):
    """
    Picks up to `size` entries for the podium and ranks them.

    Rounds walk the partitions in the given order, each round taking the next
    best entry of every partition, for at most `per_partition` rounds. If that
    picks more than `size`, the best `size` of them by rank_key are kept. If it
    leaves free places (a partition is short of entries), the best remaining
    entries fill them regardless of partition. Entries whose partition is not in
    `partitions` only enter through that backfill. With no partitions this is a
    plain top-K.
    """
    if size <= 0:
        return []

    candidates = [e for e in entries if qualifies is None or qualifies(e)]
    ordered = sort_for_ranking(candidates, rank_key)
    position = {e.id: i for i, e in enumerate(ordered)}

    by_partition = {p: [] for p in partitions}
    for entry in ordered:
        key = partition_of(entry)
        if key in by_partition:
            by_partition[key].append(entry)

    selected = []
    for round_index in range(per_partition if partitions else 0):
        for partition in partitions:
            group = by_partition[partition]
            if round_index < len(group):
                selected.append(group[round_index])

    # Global position is the rank_key order with input order breaking ties
    selected.sort(key=lambda e: position[e.id])
    selected = selected[:size]
    chosen = {e.id for e in selected}

    for entry in ordered:
        if len(selected) >= size:
            break
        if entry.id not in chosen:
            selected.append(entry)
            chosen.add(entry.id)

    selected.sort(key=lambda e: position[e.id])
    return [PodiumSlot(entry=e, rank=i) for i, e in enumerate(selected, start=1)]
