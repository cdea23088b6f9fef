"""
Admin Blueprint

Child records, message moderation, progress updates and sponsorships.
Every route requires a signed-in profile with the admin role.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from sponsor_portal.admin import routes  # noqa: E402, F401
