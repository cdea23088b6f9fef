"""
Auth Blueprint

Sign-in, sign-up and sign-out backed by the hosted auth service.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from sponsor_portal.auth import routes  # noqa: E402, F401
