"""
Models Package

Exports all models for easy importing.
"""

from sponsor_portal.models.profile import UserProfile
from sponsor_portal.models.child import Child
from sponsor_portal.models.sponsorship import Sponsorship
from sponsor_portal.models.progress import ProgressUpdate
from sponsor_portal.models.message import Message

__all__ = ['UserProfile', 'Child', 'Sponsorship', 'ProgressUpdate', 'Message']
