# seed_data.py
# Demo data: one school event with judged entries in every class level.
# Run with `flask --app app seed` or `python seed_data.py`.

from extensions import db
from models import Event, Entry, JudgeScore, User, VoteRecord, ViewRecord

STORIES = [
    ('Aarav', 'Tiny Tales', 'The Moon Who Lost Her Shoes', [8, 9, 9]),
    ('Diya', 'Tiny Tales', 'Grandma and the Talking Mango', [9]),
    ('Kabir', 'Tiny Tales', 'A Kite Called Kiran', [6, 7]),
    ('Meera', 'Young Dreamers', 'The Lighthouse Library', [8, 8]),
    ('Rohan', 'Young Dreamers', 'Monsoon Detectives', [7, 9]),
    ('Anaya', 'Young Dreamers', 'Whispers in the Banyan Tree', [5, 6]),
    ('Ishaan', 'Story Champions', 'The Cartographer of Dreams', [10, 9]),
    ('Saanvi', 'Story Champions', 'Letters to the Sea', []),
    ('Vihaan', None, 'The Unfinished Song', [7]),
]


def seed_demo_data():
    # Reverse dependency order
    db.session.query(ViewRecord).delete()
    db.session.query(VoteRecord).delete()
    db.session.query(JudgeScore).delete()
    db.session.query(Entry).delete()
    db.session.query(Event).delete()
    db.session.query(User).delete()
    db.session.commit()

    admin = User(name='Admin', role='admin')
    judges = [User(name=f'Judge {i}', role='judge') for i in range(1, 4)]
    db.session.add_all([admin, *judges])

    event = Event(name='Story Seed Championship', event_type='school')
    db.session.add(event)
    db.session.commit()

    for first_name, class_level, title, scores in STORIES:
        entry = Entry(event_id=event.id, first_name=first_name, story_title=title,
                      category='Storytelling', class_level=class_level)
        db.session.add(entry)
        db.session.flush()
        for judge, score in zip(judges, scores):
            db.session.add(JudgeScore(user_id=judge.id, entry_id=entry.id, score=score))

    db.session.commit()
    return event


if __name__ == '__main__':
    from app import create_app

    app = create_app()
    with app.app_context():
        db.create_all()
        seeded = seed_demo_data()
        print(f"Seeded event '{seeded.name}' with {len(STORIES)} entries.")
