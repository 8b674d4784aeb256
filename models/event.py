# models/event.py

from extensions import db, utcnow
from sqlalchemy import CheckConstraint


class Event(db.Model):
    __tablename__ = 'events'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    # 'college' events have no class levels
    event_type = db.Column(db.String(20), nullable=False, default='school')
    created_at = db.Column(db.DateTime, default=utcnow)

    entries = db.relationship('Entry', backref='event', lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("event_type IN ('school', 'college', 'both')", name="check_event_type"),
    )

    @property
    def has_class_levels(self):
        return self.event_type != 'college'
