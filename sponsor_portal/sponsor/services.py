"""
Sponsor Services

Data aggregation for the sponsor dashboard and message pages.
"""

from sponsor_portal.models import Sponsorship
from sponsor_portal.models.sponsorship import STATUS_ACTIVE
from sponsor_portal.services.messages import thread
from sponsor_portal.services.stats import latest_update_date


def active_sponsorships(sponsor_id):
    return Sponsorship.query.filter_by(sponsor_id=sponsor_id, status=STATUS_ACTIVE)\
        .order_by(Sponsorship.created_at.asc()).all()


def get_sponsored_children(sponsor_id):
    """Active sponsorships with the child and the date of its latest update."""
    sponsored = []
    for sponsorship in active_sponsorships(sponsor_id):
        sponsored.append({
            'child': sponsorship.child,
            'sponsorship': sponsorship,
            'last_update': latest_update_date(sponsorship.child_id)
        })
    return sponsored


def get_message_threads(sponsor_id):
    """One oldest-first thread per actively sponsored child."""
    threads = []
    for sponsorship in active_sponsorships(sponsor_id):
        threads.append({
            'child': sponsorship.child,
            'messages': thread(sponsorship.child_id, sponsor_id)
        })
    return threads
