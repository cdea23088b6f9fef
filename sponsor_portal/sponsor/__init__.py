"""
Sponsor Blueprint

Pages for signed-in sponsors: their dashboard, child profiles and messages.
"""

from flask import Blueprint

sponsor_bp = Blueprint('sponsor', __name__)

from sponsor_portal.sponsor import routes  # noqa: E402, F401
