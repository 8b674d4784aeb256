# routes/admin.py

from functools import wraps
from flask import Blueprint, jsonify, request, session

import logic


admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


def admin_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user_role' not in session or session['user_role'] != 'admin':
            return jsonify({'success': False, 'message': 'Admin access required.'}), 403
        return f(*args, **kwargs)
    return decorated_function


@admin_bp.route('/events/<int:event_id>/outcomes')
@admin_required
def event_outcomes(event_id):
    return jsonify({'success': True, **logic.event_outcomes(event_id)})


@admin_bp.route('/events/<int:event_id>/unranked')
@admin_required
def unranked_entries(event_id):
    # Entries outside podium and voting pool; their media can be cleaned up
    return jsonify({'success': True, 'entry_ids': logic.unranked_entries(event_id)})


@admin_bp.route('/events/<int:event_id>/refresh', methods=['POST'])
@admin_required
def refresh_standings(event_id):
    standings = logic.refresh_standings(event_id)
    return jsonify({
        'success': True,
        'podium': [slot.entry_id for slot in standings.judge_podium],
        'eligible': len(standings.pool),
        'bootstrap': standings.pool.bootstrap,
    })


@admin_bp.route('/users/<int:user_id>/role', methods=['POST'])
@admin_required
def update_user_role(user_id):
    data = request.get_json(silent=True) or request.form
    user = logic.set_user_role(user_id, data.get('role'))
    return jsonify({'success': True, 'user_id': user.id, 'role': user.role})
