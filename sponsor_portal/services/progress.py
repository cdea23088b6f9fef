"""
Progress Update Services
"""

from sponsor_portal.extensions import db
from sponsor_portal.models import Child, ProgressUpdate


def post_progress_update(child_id, created_by, title, description, english_level_after=''):
    """Record a progress update; a non-blank level also updates the child."""
    child = db.session.get(Child, child_id)
    if child is None:
        raise ValueError('Child not found.')

    english_level_after = (english_level_after or '').strip()
    update = ProgressUpdate(
        child_id=child_id,
        created_by=created_by,
        title=title,
        description=description,
        english_level_after=english_level_after,
        attachments=[]
    )
    db.session.add(update)
    if english_level_after:
        child.english_level = english_level_after

    db.session.commit()
    return update
