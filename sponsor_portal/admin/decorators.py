"""
Admin Decorator
"""

from functools import wraps
from flask import redirect, url_for, request
from flask_login import current_user


def admin_required(f):
    """Decorator to ensure the request is from a signed-in admin.

    - Anonymous visitors are sent to /login
    - Signed-in sponsors are sent to their /dashboard
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return redirect(url_for('auth.login', next=request.path))
        if not current_user.is_admin:
            return redirect(url_for('sponsor.dashboard'))
        return f(*args, **kwargs)
    return wrapper
