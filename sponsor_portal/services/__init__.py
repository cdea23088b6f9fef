"""
Services Package

Exports all services for easy importing.
"""

from sponsor_portal.services.children import calculate_age, available_children, filter_children
from sponsor_portal.services.formatting import format_date, status_badge
from sponsor_portal.services.sponsorships import (
    SponsorshipError, sponsor_child, set_sponsorship_status, has_open_sponsorship
)
from sponsor_portal.services.messages import MessageError, send_message, moderate_message, post_staff_reply
from sponsor_portal.services.progress import post_progress_update
from sponsor_portal.services.stats import admin_statistics, recent_progress_updates

__all__ = [
    'calculate_age',
    'available_children',
    'filter_children',
    'format_date',
    'status_badge',
    'SponsorshipError',
    'sponsor_child',
    'set_sponsorship_status',
    'has_open_sponsorship',
    'MessageError',
    'send_message',
    'moderate_message',
    'post_staff_reply',
    'post_progress_update',
    'admin_statistics',
    'recent_progress_updates'
]
