"""
Main Blueprint

Public pages: home, available children, sponsoring and the language toggle.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from sponsor_portal.main import routes  # noqa: E402, F401
