import pytest

from extensions import db as _db
from models import Entry, Event, User

PHONE = '9000000001'


def login(client, user):
    with client.session_transaction() as sess:
        sess['user_id'] = user.id
        sess['user_role'] = user.role


def test_empty_event_renders_empty_leaderboards(client, event):
    response = client.get(f'/events/{event.id}/leaderboard')

    assert response.status_code == 200
    data = response.get_json()
    assert data['judge'] == {'empty': True, 'podium': [], 'rest': []}
    assert data['community'] == {'empty': True, 'podium': [], 'rest': []}


def test_leaderboard_cards(client, event, make_entry, judges, score):
    entries = [make_entry(f'Story {i}', class_level='Tiny Tales' if i % 2 else 'Young Dreamers')
               for i in range(5)]
    for i, entry in enumerate(entries):
        score(judges[0], entry, 5 + i)

    data = client.get(f'/events/{event.id}/leaderboard').get_json()

    judge = data['judge']
    assert not judge['empty']
    assert [card['rank'] for card in judge['podium']] == [1, 2, 3]
    assert judge['podium'][0]['story_title'] == 'Story 4'
    assert judge['podium'][0]['display'] == '9.0/10'
    assert len(judge['rest']) == 2


def test_podium_endpoint(client, event, make_entry, judges, score):
    entry = make_entry()
    score(judges[0], entry, 7)

    response = client.get(f'/events/{event.id}/podium?metric=judge')

    assert response.get_json()['podium'] == [{'entry_id': entry.id, 'rank': 1, 'score': 7.0}]


def test_podium_unknown_metric_and_event(client, event):
    assert client.get(f'/events/{event.id}/podium?metric=likes').status_code == 400
    assert client.get('/events/404/podium').status_code == 404


def test_eligible_endpoint(client, event, make_entry):
    entries = [make_entry(f'Story {i}') for i in range(3)]

    data = client.get(f'/events/{event.id}/eligible').get_json()

    assert data['bootstrap'] is True
    assert sorted(data['entry_ids']) == sorted(e.id for e in entries)


def test_vote_then_cooldown(client, make_entry):
    entry = make_entry()

    first = client.post(f'/entries/{entry.id}/vote', json={'name': 'Asha', 'phone': PHONE})
    assert first.status_code == 201
    assert first.get_json()['overall_votes'] == 1

    second = client.post(f'/entries/{entry.id}/vote', data={'name': 'Asha', 'phone': PHONE})
    assert second.status_code == 429
    body = second.get_json()
    assert body['can_vote'] is False
    assert body['hours_remaining'] == 24

    status = client.get(f'/entries/{entry.id}/vote-status?phone={PHONE}').get_json()
    assert status['can_vote'] is False


def test_vote_with_bad_phone(client, make_entry):
    entry = make_entry()
    response = client.post(f'/entries/{entry.id}/vote', json={'name': 'Asha', 'phone': '12'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_vote_for_unknown_entry(client):
    response = client.post('/entries/999/vote', json={'name': 'Asha', 'phone': PHONE})
    assert response.status_code == 404


def test_view_endpoint_is_idempotent(client, make_entry):
    entry = make_entry()

    assert client.post(f'/entries/{entry.id}/view', json={'phone': PHONE}).get_json()['counted'] is True
    assert client.post(f'/entries/{entry.id}/view', json={'phone': PHONE}).get_json()['counted'] is False

    _db.session.expire_all()
    assert _db.session.get(Entry, entry.id).overall_views == 1


def test_judge_scoring_requires_login(client, make_entry):
    entry = make_entry()
    response = client.post(f'/judging/entries/{entry.id}/score', json={'score': 8})
    assert response.status_code == 401


def test_judge_scoring(client, make_entry, judges):
    entry = make_entry()
    login(client, judges[0])

    response = client.post(f'/judging/entries/{entry.id}/score', json={'score': 8, 'comment': 'Lovely'})

    assert response.status_code == 200
    assert response.get_json()['score'] == 8.0


def test_non_judge_cannot_score(client, db, make_entry):
    parent = User(name='Parent', role='participant')
    db.session.add(parent)
    db.session.commit()
    entry = make_entry()
    login(client, parent)

    response = client.post(f'/judging/entries/{entry.id}/score', json={'score': 8})

    assert response.status_code == 403


def test_admin_routes_require_admin(client, event, judges):
    assert client.get(f'/admin/events/{event.id}/outcomes').status_code == 403
    login(client, judges[0])
    assert client.get(f'/admin/events/{event.id}/outcomes').status_code == 403


def test_admin_outcomes_refresh_and_unranked(client, db, event, make_entry, judges, score):
    admin = User(name='Admin', role='admin')
    db.session.add(admin)
    db.session.commit()
    login(client, admin)
    entries = [make_entry(f'Story {i}', class_level=None) for i in range(8)]
    for i, entry in enumerate(entries[:7]):
        score(judges[0], entry, 3 + i)

    outcomes = client.get(f'/admin/events/{event.id}/outcomes').get_json()
    assert outcomes['total_votes'] == 0
    assert len(outcomes['entries']) == 8

    refreshed = client.post(f'/admin/events/{event.id}/refresh').get_json()
    assert refreshed['bootstrap'] is False
    assert refreshed['eligible'] == 1

    unranked = client.get(f'/admin/events/{event.id}/unranked').get_json()
    assert unranked['entry_ids'] == [entries[7].id]


def test_admin_promotes_judge(client, db):
    admin = User(name='Admin', role='admin')
    user = User(name='Teacher')
    db.session.add_all([admin, user])
    db.session.commit()
    login(client, admin)

    response = client.post(f'/admin/users/{user.id}/role', json={'role': 'judge'})

    assert response.get_json()['role'] == 'judge'
    assert client.post(f'/admin/users/{user.id}/role', json={'role': 'king'}).status_code == 400


def test_seed_command(app):
    result = app.test_cli_runner().invoke(args=['seed'])

    assert result.exit_code == 0
    assert Event.query.count() == 1
    assert Entry.query.count() == 9


def test_vote_status_reports_eligibility(client, make_entry, judges, score):
    winner = make_entry('Winner')

    status = client.get(f'/entries/{winner.id}/vote-status?phone={PHONE}').get_json()
    assert status['eligible'] is True

    score(judges[0], winner, 9)

    status = client.get(f'/entries/{winner.id}/vote-status?phone={PHONE}').get_json()
    assert status['can_vote'] is False
    assert status['eligible'] is False
    assert status['reason'] == 'This entry is not open for community voting.'


def test_view_accepts_phone_as_json_number(client, make_entry):
    entry = make_entry()

    response = client.post(f'/entries/{entry.id}/view', json={'phone': 9000000001})

    assert response.status_code == 200
    assert response.get_json()['counted'] is True


@pytest.mark.parametrize('payload', [
    {'name': 'Asha', 'phone': ['9000000001']},
    {'name': 'Asha', 'phone': {'n': 1}},
    {'name': 7, 'phone': PHONE},
    {'name': ['Asha'], 'phone': PHONE},
])
def test_vote_with_non_text_fields_is_a_bad_request(client, make_entry, payload):
    entry = make_entry()

    response = client.post(f'/entries/{entry.id}/vote', json=payload)

    assert response.status_code == 400
    assert response.get_json()['success'] is False
