# models/entry.py

from extensions import db, utcnow
from sqlalchemy import CheckConstraint


class Entry(db.Model):
    __tablename__ = 'entries'

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey('events.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'), nullable=True)

    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False, default='')
    story_title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(100), nullable=True)
    # Partition key for the podium; NULL for college events
    class_level = db.Column(db.String(50), nullable=True)
    yt_link = db.Column(db.String, nullable=True)

    # Only ever changed through single-statement increments (see logic.py)
    overall_votes = db.Column(db.Integer, nullable=False, default=0)
    overall_views = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow)

    judge_scores = db.relationship('JudgeScore', backref='entry', lazy=True, cascade="all, delete-orphan")
    votes = db.relationship('VoteRecord', backref='entry', lazy=True, cascade="all, delete-orphan")
    views = db.relationship('ViewRecord', backref='entry', lazy=True, cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("overall_votes >= 0", name="check_overall_votes"),
        CheckConstraint("overall_views >= 0", name="check_overall_views"),
    )

    @property
    def display_name(self):
        return f'{self.first_name} {self.last_name}'.strip()
