"""
Progress Update Model
"""

from datetime import datetime
from sponsor_portal.extensions import db
from sponsor_portal.models.base import new_id


class ProgressUpdate(db.Model):
    """Append-only note about a child's development"""
    __tablename__ = 'progress_updates'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    child_id = db.Column(db.String(36), db.ForeignKey('children.id'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    english_level_after = db.Column(db.String(50), default='')
    attachments = db.Column(db.JSON, default=list)
    created_by = db.Column(db.String(36), db.ForeignKey('users_profile.id'))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    child = db.relationship('Child', back_populates='progress_updates')

    def __repr__(self):
        return f'<ProgressUpdate {self.title!r} child:{self.child_id}>'
