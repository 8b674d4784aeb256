# models/user.py

from extensions import db, utcnow
from sqlalchemy import CheckConstraint


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=True, index=True)
    phone = db.Column(db.String(10), nullable=True)
    role = db.Column(db.String, nullable=False, default='participant')
    created_at = db.Column(db.DateTime, default=utcnow)

    entries = db.relationship('Entry', backref='user', lazy=True)

    __table_args__ = (
        CheckConstraint("role IN ('participant', 'judge', 'admin')", name="check_role"),
    )

    @property
    def is_judge(self):
        return self.role == 'judge'
