# routes/main.py
# Public leaderboard and voting endpoints, plus judge scoring

from functools import wraps
from flask import Blueprint, jsonify, request, session

import logic
from errors import RankingError
from extensions import db
from models import Entry


main_bp = Blueprint('main', __name__)


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_id' not in session:
            return jsonify({'success': False, 'message': 'Please log in to continue.'}), 401
        return f(*args, **kwargs)
    return decorated_function


@main_bp.app_errorhandler(RankingError)
def handle_ranking_error(e):
    return jsonify({'success': False, 'message': e.message}), e.status_code


def _form_value(name):
    data = request.get_json(silent=True) or request.form
    return data.get(name)


def _entry_card(row, entries):
    entry = entries.get(row.entry_id)
    card = row.to_dict()
    if entry is not None:
        card.update({
            'name': entry.display_name,
            'story_title': entry.story_title,
            'category': entry.category,
            'yt_link': entry.yt_link,
        })
    return card


# --- Leaderboards --------------------------------------------------------

@main_bp.route('/events/<int:event_id>/podium')
def event_podium(event_id):
    metric = request.args.get('metric', 'judge')
    return jsonify({'success': True, 'metric': metric, 'podium': logic.get_podium(event_id, metric)})


@main_bp.route('/events/<int:event_id>/leaderboard')
def event_leaderboard(event_id):
    boards = logic.get_leaderboards(event_id)
    entry_ids = {row.entry_id for board in boards.values() for row in board.rows}
    entries = {e.id: e for e in Entry.query.filter(Entry.id.in_(entry_ids))} if entry_ids else {}

    result = {'success': True}
    for metric, board in boards.items():
        result[metric] = {
            'empty': board.is_empty,
            'podium': [_entry_card(row, entries) for row in board.top_three],
            'rest': [_entry_card(row, entries) for row in board.rest],
        }
    return jsonify(result)


@main_bp.route('/events/<int:event_id>/eligible')
def event_eligible(event_id):
    pool = logic.compute_standings(event_id).pool
    return jsonify({'success': True, 'bootstrap': pool.bootstrap, 'entry_ids': list(pool.entry_ids)})


# --- Community voting ----------------------------------------------------

@main_bp.route('/entries/<int:entry_id>/vote-status')
def vote_status(entry_id):
    check = logic.can_vote(entry_id, request.args.get('phone', ''))
    return jsonify({'success': True, **check.to_dict()})


@main_bp.route('/entries/<int:entry_id>/vote', methods=['POST'])
def vote(entry_id):
    check = logic.cast_vote(entry_id, _form_value('name'), _form_value('phone') or '')
    if not check.can_vote:
        return jsonify({'success': False, 'message': check.reason, **check.to_dict()}), 429

    entry = db.session.get(Entry, entry_id)
    return jsonify({'success': True, 'entry_id': entry.id, 'overall_votes': entry.overall_votes}), 201


@main_bp.route('/entries/<int:entry_id>/view', methods=['POST'])
def view(entry_id):
    counted = logic.record_view(entry_id, _form_value('phone') or '')
    return jsonify({'success': True, 'counted': counted})


# --- Judging -------------------------------------------------------------

@main_bp.route('/judging/entries/<int:entry_id>/score', methods=['POST'])
@login_required
def judge_score(entry_id):
    saved = logic.submit_judge_score(
        session['user_id'], entry_id, _form_value('score'), comment=_form_value('comment'))
    return jsonify({
        'success': True,
        'entry_id': saved.entry_id,
        'score': saved.score,
    })
