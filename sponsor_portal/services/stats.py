"""
Dashboard Statistics
"""

from sponsor_portal.models import Child, UserProfile, Message, ProgressUpdate
from sponsor_portal.models.message import STATUS_PENDING
from sponsor_portal.models.profile import ROLE_SPONSOR


def admin_statistics():
    """Headline counts for the admin dashboard."""
    total_children = Child.query.count()
    sponsored_children = Child.query.filter(Child.is_sponsored.is_(True)).count()

    return {
        'total_children': total_children,
        'sponsored_children': sponsored_children,
        'available_children': total_children - sponsored_children,
        'total_sponsors': UserProfile.query.filter_by(role=ROLE_SPONSOR).count(),
        'pending_messages': Message.query.filter_by(status=STATUS_PENDING).count()
    }


def recent_progress_updates(limit=5):
    return ProgressUpdate.query.order_by(ProgressUpdate.created_at.desc())\
        .limit(limit).all()


def latest_update_date(child_id):
    """Creation time of the child's newest progress update, or None."""
    latest = ProgressUpdate.query.filter_by(child_id=child_id)\
        .order_by(ProgressUpdate.created_at.desc()).first()
    return latest.created_at if latest else None
