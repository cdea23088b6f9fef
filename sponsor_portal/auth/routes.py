"""
Auth Routes

Sign-in and sign-up go through the hosted auth service; the profile row
is then mirrored into the Flask-Login session.
"""

import logging
from urllib.parse import urlsplit
from flask import render_template, request, redirect, url_for, flash, session
from flask_login import login_user, logout_user, login_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from sponsor_portal.auth import auth_bp
from sponsor_portal.auth import service as auth_service
from sponsor_portal.extensions import db
from sponsor_portal.i18n import get_language, get_translations
from sponsor_portal.models import UserProfile
from sponsor_portal.models.profile import ROLE_SPONSOR

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
TOKEN_SESSION_KEY = 'access_token'


def home_for(profile):
    """Landing page for a signed-in user, by role."""
    if profile.is_admin:
        return url_for('admin.admin_dashboard')
    return url_for('sponsor.dashboard')


def _is_local(target):
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc and target.startswith('/')


def _start_session(profile, access_token):
    login_user(profile)
    session[TOKEN_SESSION_KEY] = access_token


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Sponsor and admin sign-in"""
    if current_user.is_authenticated:
        return redirect(home_for(current_user))

    t = get_translations()

    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not email or not password:
            flash(t['auth']['requiredFields'], 'danger')
            return render_template('auth/login.html', email=email)

        result = auth_service.sign_in(email, password)
        if result['error']:
            flash(result['message'], 'danger')
            return render_template('auth/login.html', email=email)

        try:
            profile = db.session.get(UserProfile, result['user'].get('id'))
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error loading profile after sign-in')
            profile = None

        if profile is None:
            auth_service.sign_out(result['access_token'])
            flash(t['auth']['profileMissing'], 'danger')
            return render_template('auth/login.html', email=email)

        _start_session(profile, result['access_token'])

        next_page = request.args.get('next')
        if next_page and _is_local(next_page):
            return redirect(next_page)
        return redirect(home_for(profile))

    return render_template('auth/login.html')


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """Sponsor registration"""
    if current_user.is_authenticated:
        return redirect(url_for('sponsor.dashboard'))

    t = get_translations()

    if request.method == 'POST':
        full_name = request.form.get('full_name', '').strip()
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not full_name or not email or not password:
            flash(t['auth']['requiredFields'], 'danger')
            return render_template('auth/signup.html', full_name=full_name, email=email)

        if len(password) < MIN_PASSWORD_LENGTH:
            flash(t['auth']['passwordMinLength'], 'danger')
            return render_template('auth/signup.html', full_name=full_name, email=email)

        result = auth_service.sign_up(email, password, full_name)
        if result['error']:
            flash(result['message'], 'danger')
            return render_template('auth/signup.html', full_name=full_name, email=email)

        profile = UserProfile(
            id=result['user']['id'],
            role=ROLE_SPONSOR,
            full_name=full_name,
            email=email,
            preferred_language=get_language()
        )
        try:
            db.session.add(profile)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error creating profile for %s', email)
            flash('Failed to create account', 'danger')
            return render_template('auth/signup.html', full_name=full_name, email=email)

        if not result['access_token']:
            flash(t['auth']['confirmEmail'], 'info')
            return redirect(url_for('auth.login'))

        _start_session(profile, result['access_token'])
        return redirect(url_for('sponsor.dashboard'))

    return render_template('auth/signup.html')


@auth_bp.route('/logout')
@login_required
def logout():
    """Sign out remotely (best effort) and locally"""
    auth_service.sign_out(session.pop(TOKEN_SESSION_KEY, None))
    logout_user()
    flash(get_translations()['auth']['signedOut'], 'info')
    return redirect(url_for('main.index'))
