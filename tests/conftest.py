import pytest

import logic
from app import create_app
from config import TestConfig
from extensions import db as _db
from models import Entry, Event, JudgeScore, User


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()
    logic._last_standings.clear()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def event(db):
    event = Event(name='Story Seed Championship', event_type='school')
    db.session.add(event)
    db.session.commit()
    return event


@pytest.fixture
def judges(db):
    judges = [User(name=f'Judge {i}', role='judge') for i in range(1, 4)]
    db.session.add_all(judges)
    db.session.commit()
    return judges


@pytest.fixture
def make_entry(db, event):
    def _make_entry(title='A Story', class_level='Tiny Tales', votes=0, views=0, event_id=None):
        entry = Entry(event_id=event_id or event.id, first_name='Kid', story_title=title,
                      class_level=class_level, overall_votes=votes, overall_views=views)
        db.session.add(entry)
        db.session.commit()
        return entry
    return _make_entry


@pytest.fixture
def score(db):
    def _score(judge, entry, value):
        db.session.add(JudgeScore(user_id=judge.id, entry_id=entry.id, score=value))
        db.session.commit()
    return _score
