"""
Admin Routes

Child management, message moderation, progress updates and sponsorship
review. Every view is guarded by `admin_required`.
"""

import logging
from datetime import date
from flask import render_template, request, redirect, url_for, flash, current_app
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError
from sponsor_portal.admin import admin_bp
from sponsor_portal.admin.decorators import admin_required
from sponsor_portal.extensions import db
from sponsor_portal.models import Child, Message, Sponsorship
from sponsor_portal.models.child import GENDERS, PROGRAM_STATUSES
from sponsor_portal.models.message import STATUS_PENDING, SENDER_STAFF, SENDER_CHILD
from sponsor_portal.models.sponsorship import SPONSORSHIP_STATUSES
from sponsor_portal.services import (
    filter_children, admin_statistics, recent_progress_updates,
    moderate_message, post_staff_reply, MessageError,
    post_progress_update, set_sponsorship_status, has_open_sponsorship, SponsorshipError
)
from sponsor_portal.services.children import CHILD_FILTERS
from sponsor_portal.services.messages import MODERATION_ACTIONS

logger = logging.getLogger(__name__)

REQUIRED_CHILD_FIELDS = ('first_name', 'last_name', 'gender', 'birthdate')


@admin_bp.route('')
@admin_required
def admin_dashboard():
    """Admin dashboard with program statistics."""
    try:
        stats = admin_statistics()
        recent_updates = recent_progress_updates(limit=5)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading dashboard data')
        flash('Could not load dashboard data.', 'danger')
        stats = {}
        recent_updates = []

    return render_template('admin/dashboard.html',
                           stats=stats,
                           recent_updates=recent_updates)


@admin_bp.route('/children')
@admin_required
def manage_children():
    """List children with the all / sponsored / available filter."""
    current_filter = request.args.get('filter', 'all')
    if current_filter not in CHILD_FILTERS:
        current_filter = 'all'

    try:
        children = filter_children(current_filter)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading children')
        flash('Could not load children.', 'danger')
        children = []

    return render_template('admin/children.html',
                           children=children,
                           current_filter=current_filter,
                           filters=CHILD_FILTERS)


def _blank_child_form():
    return {
        'first_name': '',
        'last_name': '',
        'gender': 'Male',
        'birthdate': '',
        'photo_url': '',
        'location': current_app.config.get('DEFAULT_LOCATION', ''),
        'bio': '',
        'english_level': 'Beginner',
        'program_status': 'Enrolled',
        'is_sponsored': False,
    }


def _child_to_form(child):
    form = {key: getattr(child, key) for key in _blank_child_form()}
    form['birthdate'] = child.birthdate.isoformat() if child.birthdate else ''
    return form


def _read_child_form(form):
    """Parse the submitted child form.

    Returns:
        (values, error) where error is None when the form is valid
    """
    values = {
        'first_name': form.get('first_name', '').strip(),
        'last_name': form.get('last_name', '').strip(),
        'gender': form.get('gender', '').strip(),
        'birthdate': form.get('birthdate', '').strip(),
        'photo_url': form.get('photo_url', '').strip(),
        'location': form.get('location', '').strip(),
        'bio': form.get('bio', '').strip(),
        'english_level': form.get('english_level', '').strip(),
        'program_status': form.get('program_status', 'Enrolled').strip(),
        'is_sponsored': form.get('is_sponsored') in ('on', 'true', '1'),
    }

    if any(not values[field] for field in REQUIRED_CHILD_FIELDS):
        return values, 'First name, last name, gender and birthdate are required.'
    if values['gender'] not in GENDERS:
        return values, 'Please choose a valid gender.'
    if values['program_status'] not in PROGRAM_STATUSES:
        return values, 'Please choose a valid program status.'
    try:
        date.fromisoformat(values['birthdate'])
    except ValueError:
        return values, 'Birthdate must be a valid date.'
    return values, None


def _apply_child_form(child, values):
    for key, value in values.items():
        if key == 'birthdate':
            value = date.fromisoformat(value)
        setattr(child, key, value)


@admin_bp.route('/children/new', methods=['GET', 'POST'])
@admin_required
def new_child():
    """Add a child to the program."""
    if request.method == 'POST':
        values, error = _read_child_form(request.form)
        if error:
            flash(error, 'danger')
            return render_template('admin/child_form.html', form=values, child=None,
                                   genders=GENDERS, program_statuses=PROGRAM_STATUSES)

        child = Child()
        _apply_child_form(child, values)
        try:
            db.session.add(child)
            db.session.commit()
            flash(f'{child.full_name} added successfully.', 'success')
            return redirect(url_for('admin.manage_children'))
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Error saving child')
            flash(f'Failed to save child: {e}', 'danger')
            return render_template('admin/child_form.html', form=values, child=None,
                                   genders=GENDERS, program_statuses=PROGRAM_STATUSES)

    return render_template('admin/child_form.html', form=_blank_child_form(), child=None,
                           genders=GENDERS, program_statuses=PROGRAM_STATUSES)


@admin_bp.route('/children/<child_id>', methods=['GET', 'POST'])
@admin_required
def edit_child(child_id):
    """Edit an existing child profile."""
    child = db.session.get(Child, child_id)
    if child is None:
        flash('Child not found.', 'danger')
        return redirect(url_for('admin.manage_children'))

    if request.method == 'POST':
        values, error = _read_child_form(request.form)
        if error:
            flash(error, 'danger')
            return render_template('admin/child_form.html', form=values, child=child,
                                   genders=GENDERS, program_statuses=PROGRAM_STATUSES)

        try:
            still_sponsored = not values['is_sponsored'] and has_open_sponsorship(child_id)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error checking sponsorships for child %s', child_id)
            still_sponsored = True
        if still_sponsored:
            flash('This child still has an active or paused sponsorship. '
                  'Cancel it under Sponsorships first.', 'danger')
            values['is_sponsored'] = True
            return render_template('admin/child_form.html', form=values, child=child,
                                   genders=GENDERS, program_statuses=PROGRAM_STATUSES)

        _apply_child_form(child, values)
        try:
            db.session.commit()
            flash(f'{child.full_name} updated successfully.', 'success')
            return redirect(url_for('admin.manage_children'))
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Error updating child %s', child_id)
            flash(f'Failed to save child: {e}', 'danger')
            return render_template('admin/child_form.html', form=values, child=child,
                                   genders=GENDERS, program_statuses=PROGRAM_STATUSES)

    return render_template('admin/child_form.html', form=_child_to_form(child), child=child,
                           genders=GENDERS, program_statuses=PROGRAM_STATUSES)


@admin_bp.route('/messages')
@admin_required
def manage_messages():
    """Moderation queue (pending only, or every message)."""
    current_filter = request.args.get('filter', 'pending')
    if current_filter not in ('pending', 'all'):
        current_filter = 'pending'

    try:
        query = Message.query.order_by(Message.created_at.desc())
        if current_filter == 'pending':
            query = query.filter_by(status=STATUS_PENDING)
        messages = query.all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading messages')
        flash('Could not load messages.', 'danger')
        messages = []

    return render_template('admin/messages.html',
                           messages=messages,
                           current_filter=current_filter,
                           reply_senders=(SENDER_STAFF, SENDER_CHILD))


@admin_bp.route('/messages/<message_id>/<action>', methods=['POST'])
@admin_required
def review_message(message_id, action):
    """Approve or reject a pending message."""
    status = MODERATION_ACTIONS.get(action)
    if status is None:
        flash('Unknown moderation action.', 'danger')
    else:
        try:
            moderate_message(message_id, status)
            flash(f'Message {status.lower()}.', 'success')
        except MessageError as e:
            flash(str(e), 'danger')
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error moderating message %s', message_id)
            flash('Failed to update message', 'danger')

    return redirect(url_for('admin.manage_messages',
                            filter=request.form.get('filter', 'pending')))


@admin_bp.route('/messages/<message_id>/reply', methods=['POST'])
@admin_required
def reply_message(message_id):
    """Post a staff (or child) reply on a sponsor's thread."""
    sender_type = request.form.get('sender_type', SENDER_STAFF)
    try:
        post_staff_reply(message_id, request.form.get('content', ''), sender_type)
        flash('Reply posted.', 'success')
    except MessageError as e:
        flash(str(e), 'danger')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error replying to message %s', message_id)
        flash('Failed to send reply', 'danger')

    return redirect(url_for('admin.manage_messages',
                            filter=request.form.get('filter', 'pending')))


@admin_bp.route('/progress/<child_id>', methods=['GET', 'POST'])
@admin_required
def add_progress(child_id):
    """Post a progress update for a child."""
    child = db.session.get(Child, child_id)
    if child is None:
        flash('Child not found.', 'danger')
        return redirect(url_for('admin.manage_children'))

    form = {'title': '', 'description': '', 'english_level_after': child.english_level or ''}

    if request.method == 'POST':
        form = {
            'title': request.form.get('title', '').strip(),
            'description': request.form.get('description', '').strip(),
            'english_level_after': request.form.get('english_level_after', '').strip(),
        }
        if not form['title'] or not form['description']:
            flash('Title and description are required.', 'danger')
            return render_template('admin/progress.html', child=child, form=form)

        try:
            post_progress_update(child_id, current_user.id, **form)
            flash(f'Progress update added for {child.full_name}.', 'success')
            return redirect(url_for('admin.manage_children'))
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Error adding progress update for %s', child_id)
            flash(f'Failed to add progress update: {e}', 'danger')

    return render_template('admin/progress.html', child=child, form=form)


@admin_bp.route('/sponsorships')
@admin_required
def manage_sponsorships():
    """All sponsorships, newest first."""
    try:
        sponsorships = Sponsorship.query.order_by(Sponsorship.created_at.desc()).all()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading sponsorships')
        flash('Could not load sponsorships.', 'danger')
        sponsorships = []

    return render_template('admin/sponsorships.html',
                           sponsorships=sponsorships,
                           statuses=SPONSORSHIP_STATUSES)


@admin_bp.route('/sponsorships/<sponsorship_id>/status', methods=['POST'])
@admin_required
def update_sponsorship_status(sponsorship_id):
    """Pause, cancel or reactivate a sponsorship."""
    status = request.form.get('status', '')
    try:
        sponsorship = set_sponsorship_status(sponsorship_id, status)
        flash(f'Sponsorship for {sponsorship.child.full_name} is now {status}.', 'success')
    except SponsorshipError as e:
        flash(str(e), 'danger')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error updating sponsorship %s', sponsorship_id)
        flash('Failed to update sponsorship', 'danger')

    return redirect(url_for('admin.manage_sponsorships'))
