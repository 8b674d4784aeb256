# models/view_record.py

from extensions import db, utcnow


class ViewRecord(db.Model):
    __tablename__ = 'views'
    id = db.Column(db.Integer, primary_key=True)
    entry_id = db.Column(db.Integer, db.ForeignKey('entries.id', ondelete='CASCADE'), nullable=False)
    # Canonical 10-digit phone of the viewer
    voter = db.Column(db.String(10), nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    __table_args__ = (
        db.UniqueConstraint('entry_id', 'voter', name='unique_entry_viewer'),
    )
