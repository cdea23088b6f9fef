"""
User Profile Model
"""

from datetime import datetime
from flask_login import UserMixin
from sponsor_portal.extensions import db

ROLE_ADMIN = 'admin'
ROLE_SPONSOR = 'sponsor'
ROLES = (ROLE_ADMIN, ROLE_SPONSOR)


class UserProfile(UserMixin, db.Model):
    """Profile row for an authenticated user; `id` is the auth user id"""
    __tablename__ = 'users_profile'

    id = db.Column(db.String(36), primary_key=True)
    role = db.Column(db.String(20), nullable=False, default=ROLE_SPONSOR)
    full_name = db.Column(db.String(200), nullable=False, default='')
    email = db.Column(db.String(255), index=True)
    country = db.Column(db.String(100), default='')
    profile_photo_url = db.Column(db.String(500), default='')
    preferred_language = db.Column(db.String(5), default='en')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def __repr__(self):
        return f'<UserProfile {self.full_name} ({self.role})>'
