# ranking/aggregation.py

from decimal import Decimal, ROUND_HALF_UP

from .types import ScoredEntry, ScoreSummary

EMPTY_SUMMARY = ScoreSummary()


def round_score(total, count):
    """Average rounded half-up to one decimal (8.25 -> 8.3, 26/3 -> 8.7)."""
    average = Decimal(str(total)) / Decimal(count)
    return float(average.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def aggregate_judge_scores(records, judge_ids):
    """
    Reduces raw score records to {entry_id: ScoreSummary}.

    Only raters in judge_ids count. If the feed carries several records for the
    same (judge, entry) pair the last one wins. Entries without any judge
    record are absent from the result; use summary_for() to read them.
    """
    judge_ids = set(judge_ids)
    latest = {}
    for record in records:
        if record.judge_id not in judge_ids:
            continue
        latest[(record.judge_id, record.entry_id)] = record.score

    totals = {}
    for (_judge_id, entry_id), score in latest.items():
        total, count = totals.get(entry_id, (0, 0))
        totals[entry_id] = (total + score, count + 1)

    return {
        entry_id: ScoreSummary(average_score=round_score(total, count), review_count=count)
        for entry_id, (total, count) in totals.items()
    }


def summary_for(summaries, entry_id):
    return summaries.get(entry_id, EMPTY_SUMMARY)


def score_entries(entries, summaries):
    scored = []
    for entry in entries:
        summary = summary_for(summaries, entry.id)
        scored.append(ScoredEntry(
            id=entry.id,
            class_level=entry.class_level,
            average_score=summary.average_score,
            review_count=summary.review_count,
            overall_votes=entry.overall_votes or 0,
            overall_views=entry.overall_views or 0,
        ))
    return scored
