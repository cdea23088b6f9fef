"""
Child Services

Age calculation and the list queries shared by public and admin pages.
"""

from datetime import date
from sponsor_portal.models import Child

CHILD_FILTERS = ('all', 'sponsored', 'available')


def calculate_age(birthdate, today=None):
    """Age in full years; the birthday itself counts as a completed year."""
    if not birthdate:
        return None
    if isinstance(birthdate, str):
        birthdate = date.fromisoformat(birthdate)
    if today is None:
        today = date.today()

    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


def available_children():
    """Children still waiting for a sponsor, newest first."""
    return Child.query.filter_by(is_sponsored=False)\
        .order_by(Child.created_at.desc()).all()


def filter_children(filter_name='all'):
    """Admin list with the sponsored/available filter applied."""
    query = Child.query.order_by(Child.created_at.desc())
    if filter_name == 'sponsored':
        query = query.filter(Child.is_sponsored.is_(True))
    elif filter_name == 'available':
        query = query.filter(Child.is_sponsored.is_(False))
    return query.all()
