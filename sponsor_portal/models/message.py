"""
Message Model
"""

from datetime import datetime
from sponsor_portal.extensions import db
from sponsor_portal.models.base import new_id

SENDER_SPONSOR = 'Sponsor'
SENDER_STAFF = 'Staff'
SENDER_CHILD = 'Child'
SENDER_TYPES = (SENDER_SPONSOR, SENDER_STAFF, SENDER_CHILD)

STATUS_PENDING = 'Pending Review'
STATUS_APPROVED = 'Approved'
STATUS_REJECTED = 'Rejected'
MESSAGE_STATUSES = (STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED)


class Message(db.Model):
    """Moderated note between a sponsor and a child"""
    __tablename__ = 'messages'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    child_id = db.Column(db.String(36), db.ForeignKey('children.id'), nullable=False, index=True)
    sponsor_id = db.Column(db.String(36), db.ForeignKey('users_profile.id'), nullable=False, index=True)
    sender_type = db.Column(db.String(10), nullable=False, default=SENDER_SPONSOR)
    content = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    child = db.relationship('Child')
    sponsor = db.relationship('UserProfile')

    def __repr__(self):
        return f'<Message {self.sender_type} child:{self.child_id} {self.status}>'
