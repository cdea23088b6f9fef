"""
Child Model
"""

from datetime import datetime
from sponsor_portal.extensions import db
from sponsor_portal.models.base import new_id

GENDERS = ('Male', 'Female')
PROGRAM_STATUSES = ('Enrolled', 'Graduated', 'On Hold')


class Child(db.Model):
    """Child enrolled in the English program"""
    __tablename__ = 'children'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    gender = db.Column(db.String(10), nullable=False, default='Male')
    birthdate = db.Column(db.Date, nullable=False)
    photo_url = db.Column(db.String(500), default='')
    location = db.Column(db.String(200), default='Quimistán, Honduras')
    bio = db.Column(db.Text, default='')
    english_level = db.Column(db.String(50), default='Beginner')
    program_status = db.Column(db.String(20), nullable=False, default='Enrolled')
    is_sponsored = db.Column(db.Boolean, nullable=False, default=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    sponsorships = db.relationship('Sponsorship', back_populates='child', lazy=True)
    progress_updates = db.relationship('ProgressUpdate', back_populates='child', lazy=True)

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def __repr__(self):
        return f'<Child {self.full_name}>'
