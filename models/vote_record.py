# models/vote_record.py

from extensions import db, utcnow


class VoteRecord(db.Model):
    """A single accepted community vote. Several rows per (phone, entry) are
    allowed; the cooldown only looks at the most recent one."""
    __tablename__ = 'voter_details'
    id = db.Column(db.Integer, primary_key=True)
    entry_id = db.Column(db.Integer, db.ForeignKey('entries.id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(10), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        db.Index('ix_voter_details_entry_phone_created', 'entry_id', 'phone', 'created_at'),
    )
