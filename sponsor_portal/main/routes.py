"""
Main Routes

Public pages that do not require a signed-in user.
"""

import logging
from urllib.parse import urlsplit
from flask import render_template, request, redirect, url_for, flash
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError
from sponsor_portal.main import main_bp
from sponsor_portal.extensions import db
from sponsor_portal.i18n import get_language, set_language, toggle_language
from sponsor_portal.services import available_children, sponsor_child, SponsorshipError

logger = logging.getLogger(__name__)


@main_bp.route('/')
def index():
    """Landing page"""
    return render_template('main/home.html')


@main_bp.route('/children')
def children():
    """Children still waiting for a sponsor"""
    try:
        waiting = available_children()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading children')
        flash('Could not load children.', 'danger')
        waiting = []

    return render_template('main/children.html', children=waiting)


@main_bp.route('/children/<child_id>/sponsor', methods=['POST'])
def sponsor(child_id):
    """Claim an available child for the signed-in sponsor."""
    if not current_user.is_authenticated:
        return redirect(url_for('auth.signup'))

    try:
        sponsorship = sponsor_child(child_id, current_user.id)
        flash(f'Thank you for sponsoring {sponsorship.child.first_name}!', 'success')
        return redirect(url_for('sponsor.dashboard'))
    except SponsorshipError as e:
        flash(str(e), 'warning')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error creating sponsorship for child %s', child_id)
        flash('Failed to create sponsorship', 'danger')

    return redirect(url_for('main.children'))


@main_bp.route('/language', methods=['GET', 'POST'])
def switch_language():
    """Flip between English and Spanish and go back where we came from."""
    set_language(toggle_language(get_language()))

    target = request.referrer
    if target:
        parts = urlsplit(target)
        if parts.netloc == request.host:
            path = parts.path or '/'
            return redirect(path + ('?' + parts.query if parts.query else ''))
    return redirect(url_for('main.index'))
