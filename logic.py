# logic.py
# Binds the pure ranking pipeline to the database: reads, votes, views, judge scores.

import logging
from datetime import timedelta

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from errors import (
    EntryNotFoundError,
    EventNotFoundError,
    InvalidRoleError,
    InvalidScoreError,
    InvalidVoterError,
    NotAJudgeError,
    NotEligibleError,
    UserNotFoundError,
)
from extensions import db, utcnow
from models import Entry, Event, JudgeScore, User, VoteRecord, ViewRecord
from notifications import send_vote_notification
from ranking import (
    EntrySnapshot,
    RankingSettings,
    ScoreRecord,
    VoteCheck,
    build_standings,
    check_cooldown,
    normalize_phone,
)

logger = logging.getLogger(__name__)

# Last successfully computed standings per event, served when the database read fails
_last_standings = {}


def ranking_settings(event):
    config = current_app.config
    return RankingSettings(
        podium_size=config['PODIUM_SIZE'],
        per_partition=config['PODIUM_PER_CLASS_LEVEL'],
        pool_size=config['VOTING_POOL_SIZE'],
        partitions=tuple(config['CLASS_LEVELS']) if event.has_class_levels else (),
    )


def cooldown_window():
    return timedelta(hours=current_app.config['VOTE_COOLDOWN_HOURS'])


def _get_event(event_id):
    event = db.session.get(Event, event_id)
    if event is None:
        raise EventNotFoundError()
    return event


def _get_entry(entry_id):
    entry = db.session.get(Entry, entry_id)
    if entry is None:
        raise EntryNotFoundError()
    return entry


def _load_records(event_id):
    entries = [
        EntrySnapshot(id=e.id, class_level=e.class_level,
                      overall_votes=e.overall_votes, overall_views=e.overall_views)
        for e in Entry.query.filter_by(event_id=event_id).order_by(Entry.created_at, Entry.id)
    ]
    judge_ids = {user_id for (user_id,) in db.session.query(User.id).filter(User.role == 'judge')}
    rows = db.session.query(JudgeScore.user_id, JudgeScore.entry_id, JudgeScore.score) \
        .join(Entry, Entry.id == JudgeScore.entry_id) \
        .filter(Entry.event_id == event_id) \
        .order_by(JudgeScore.updated_at, JudgeScore.id) \
        .all()
    records = [ScoreRecord(judge_id=user_id, entry_id=entry_id, score=score) for user_id, entry_id, score in rows]
    return entries, records, judge_ids


# --- Read side -----------------------------------------------------------

def compute_standings(event_id):
    """
    Rebuilds the standings of an event from the current records.

    Nothing is kept between calls except a copy of the last good result: if
    the records cannot be read, that copy is served instead of failing the
    leaderboard. Without one, the database error propagates.
    """
    try:
        event = _get_event(event_id)
        settings = ranking_settings(event)
        entries, records, judge_ids = _load_records(event_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        cached = _last_standings.get(event_id)
        if cached is None:
            raise
        logger.warning("Serving last computed standings for event %s: %s", event_id, e)
        return cached

    standings = build_standings(entries, records, judge_ids, settings)
    _last_standings[event_id] = standings
    return standings


def refresh_standings(event_id):
    """Recompute trigger for change notifications. Safe to call repeatedly."""
    standings = compute_standings(event_id)
    logger.debug("Standings for event %s recomputed: %d podium, %d eligible",
                 event_id, len(standings.judge_podium), len(standings.pool))
    return standings


def get_podium(event_id, metric):
    standings = compute_standings(event_id)
    return [
        {'entry_id': row.entry_id, 'rank': row.rank, 'score': row.score}
        for row in standings.leaderboard(metric).rows
    ]


def get_eligible_pool(event_id):
    return compute_standings(event_id).pool.as_set()


def get_leaderboards(event_id):
    standings = compute_standings(event_id)
    return {
        'judge': standings.leaderboard('judge'),
        'community': standings.leaderboard('community'),
    }


def unranked_entries(event_id):
    return compute_standings(event_id).unranked()


# --- Community votes -----------------------------------------------------

def last_vote_at(entry_id, phone):
    return db.session.query(func.max(VoteRecord.created_at)) \
        .filter(VoteRecord.entry_id == entry_id, VoteRecord.phone == phone) \
        .scalar()


def can_vote(entry_id, phone, now=None):
    phone = normalize_phone(phone)
    entry = _get_entry(entry_id)
    if entry.id not in compute_standings(entry.event_id).pool:
        return VoteCheck(can_vote=False, eligible=False)
    return check_cooldown(last_vote_at(entry.id, phone), now or utcnow(), cooldown_window())


def cast_vote(entry_id, voter_name, phone, now=None):
    """
    Records one community vote.

    Returns the VoteCheck that decided it: a rejected check (cooldown still
    running) leaves everything untouched. The cooldown is evaluated here again,
    not only when the voter typed their number.
    """
    if voter_name is not None and not isinstance(voter_name, str):
        raise InvalidVoterError('Please enter your name and phone number to vote.')
    voter_name = (voter_name or '').strip()
    if not voter_name:
        raise InvalidVoterError('Please enter your name and phone number to vote.')
    phone = normalize_phone(phone)
    entry = _get_entry(entry_id)
    now = now or utcnow()

    if entry.id not in compute_standings(entry.event_id).pool:
        raise NotEligibleError()

    check = check_cooldown(last_vote_at(entry.id, phone), now, cooldown_window())
    if not check.can_vote:
        logger.info("Vote for entry %s rejected, cooldown %sh left", entry.id, check.hours_remaining)
        return check

    try:
        db.session.add(VoteRecord(entry_id=entry.id, name=voter_name, phone=phone, created_at=now))
        # Single UPDATE ... SET overall_votes = overall_votes + 1
        Entry.query.filter_by(id=entry.id).update(
            {Entry.overall_votes: Entry.overall_votes + 1}, synchronize_session=False)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    db.session.refresh(entry)
    logger.info("Vote recorded for entry %s", entry.id)
    send_vote_notification(entry, voter_name, phone)
    refresh_standings(entry.event_id)
    return check


# --- Views ---------------------------------------------------------------

def record_view(entry_id, phone):
    """Counts a view once per (entry, voter). Returns True if this call counted it."""
    phone = normalize_phone(phone)
    entry = _get_entry(entry_id)

    if ViewRecord.query.filter_by(entry_id=entry.id, voter=phone).first():
        return False

    try:
        db.session.add(ViewRecord(entry_id=entry.id, voter=phone))
        db.session.flush()
        Entry.query.filter_by(id=entry.id).update(
            {Entry.overall_views: Entry.overall_views + 1}, synchronize_session=False)
        db.session.commit()
    except IntegrityError:
        # Concurrent first view from the same voter won the insert
        db.session.rollback()
        return False

    logger.debug("First view of entry %s recorded", entry.id)
    return True


# --- Judge scores --------------------------------------------------------

def submit_judge_score(judge_id, entry_id, score, comment=None):
    judge = db.session.get(User, judge_id)
    if judge is None or not judge.is_judge:
        raise NotAJudgeError()
    try:
        score = float(score)
    except (TypeError, ValueError):
        raise InvalidScoreError()
    if not 0 <= score <= 10:
        raise InvalidScoreError()
    entry = _get_entry(entry_id)

    existing = JudgeScore.query.filter_by(user_id=judge.id, entry_id=entry.id).first()
    try:
        if existing:
            existing.score = score
            existing.comment = comment
            judge_score = existing
        else:
            judge_score = JudgeScore(user_id=judge.id, entry_id=entry.id, score=score, comment=comment)
            db.session.add(judge_score)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info("Judge %s scored entry %s: %s", judge.id, entry.id, score)
    refresh_standings(entry.event_id)
    return judge_score


def set_user_role(user_id, role):
    user = db.session.get(User, user_id)
    if user is None:
        raise UserNotFoundError()
    if role not in ('participant', 'judge', 'admin'):
        raise InvalidRoleError(f'Unknown role: {role}')
    user.role = role
    db.session.commit()
    return user


# --- Admin outcomes ------------------------------------------------------

def event_outcomes(event_id, limit=20):
    _get_event(event_id)
    entries_q = Entry.query.filter_by(event_id=event_id)
    entries_count = entries_q.count()

    votes_q = db.session.query(VoteRecord).join(Entry, Entry.id == VoteRecord.entry_id) \
        .filter(Entry.event_id == event_id)
    total_votes = votes_q.count()
    active_voters = votes_q.with_entities(func.count(func.distinct(VoteRecord.phone))).scalar() or 0

    top_entries = entries_q.order_by(Entry.overall_votes.desc(), Entry.id).limit(limit).all()
    return {
        'total_votes': total_votes,
        'active_voters': active_voters,
        'avg_votes': round(total_votes / entries_count) if entries_count else 0,
        'entries': [
            {
                'entry_id': e.id,
                'story_title': e.story_title,
                'name': e.display_name,
                'votes': e.overall_votes,
                'views': e.overall_views,
            }
            for e in top_entries
        ],
    }
