"""
Sponsorship Model
"""

from datetime import date, datetime
from sponsor_portal.extensions import db
from sponsor_portal.models.base import new_id

STATUS_ACTIVE = 'Active'
STATUS_PAUSED = 'Paused'
STATUS_CANCELLED = 'Cancelled'
SPONSORSHIP_STATUSES = (STATUS_ACTIVE, STATUS_PAUSED, STATUS_CANCELLED)


class Sponsorship(db.Model):
    """Link between one sponsor and one child"""
    __tablename__ = 'sponsorships'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    child_id = db.Column(db.String(36), db.ForeignKey('children.id'), nullable=False, index=True)
    sponsor_id = db.Column(db.String(36), db.ForeignKey('users_profile.id'), nullable=False, index=True)
    start_date = db.Column(db.Date, nullable=False, default=date.today)
    status = db.Column(db.String(20), nullable=False, default=STATUS_ACTIVE)
    monthly_amount = db.Column(db.Numeric(10, 2), nullable=False, default=35)
    notes = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    child = db.relationship('Child', back_populates='sponsorships')
    sponsor = db.relationship('UserProfile')

    def __repr__(self):
        return f'<Sponsorship child:{self.child_id} sponsor:{self.sponsor_id} {self.status}>'
