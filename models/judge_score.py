# models/judge_score.py

from extensions import db, utcnow
from sqlalchemy import CheckConstraint


class JudgeScore(db.Model):
    __tablename__ = 'judge_scores'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    entry_id = db.Column(db.Integer, db.ForeignKey('entries.id', ondelete='CASCADE'), nullable=False, index=True)
    score = db.Column(db.Float, nullable=False)
    comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    judge = db.relationship('User')

    __table_args__ = (
        # One score per judge per entry; re-scoring updates the row
        db.UniqueConstraint('user_id', 'entry_id', name='unique_judge_entry'),
        CheckConstraint("score >= 0 AND score <= 10", name="check_score_range"),
    )
