"""
Sponsor Routes

Dashboard, child profile and messaging pages for signed-in sponsors.
"""

import logging
from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from sqlalchemy.exc import SQLAlchemyError
from sponsor_portal.sponsor import sponsor_bp
from sponsor_portal.sponsor.services import get_sponsored_children, get_message_threads
from sponsor_portal.extensions import db
from sponsor_portal.models import Child, ProgressUpdate
from sponsor_portal.services import send_message, MessageError
from sponsor_portal.services.messages import sponsorship_for, thread

logger = logging.getLogger(__name__)


@sponsor_bp.route('/dashboard')
@login_required
def dashboard():
    """Children the current sponsor is actively sponsoring"""
    try:
        sponsored = get_sponsored_children(current_user.id)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading sponsored children')
        flash('Could not load your sponsorships.', 'danger')
        sponsored = []

    return render_template('sponsor/dashboard.html', sponsored=sponsored)


def _send(child_id, content):
    """Send a message from the current sponsor; blank content is ignored."""
    if not (content or '').strip():
        return
    try:
        send_message(child_id, current_user.id, content)
        flash('Message sent. Staff will review it before sharing it.', 'success')
    except MessageError as e:
        flash(str(e), 'danger')
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error sending message to child %s', child_id)
        flash('Failed to send message', 'danger')


@sponsor_bp.route('/child/<child_id>', methods=['GET', 'POST'])
@login_required
def child_detail(child_id):
    """Profile, progress timeline and message thread for a sponsored child"""
    if request.method == 'POST':
        _send(child_id, request.form.get('content', ''))
        return redirect(url_for('sponsor.child_detail', child_id=child_id))

    try:
        child = db.session.get(Child, child_id)
        sponsorship = sponsorship_for(child_id, current_user.id) if child else None
        if child is None or sponsorship is None:
            return render_template('sponsor/no_access.html')

        updates = ProgressUpdate.query.filter_by(child_id=child_id)\
            .order_by(ProgressUpdate.created_at.desc()).all()
        messages = thread(child_id, current_user.id, newest_first=True)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading child data for %s', child_id)
        flash('Could not load child data.', 'danger')
        return render_template('sponsor/no_access.html')

    return render_template('sponsor/child_detail.html',
                           child=child,
                           sponsorship=sponsorship,
                           updates=updates,
                           messages=messages)


@sponsor_bp.route('/messages', methods=['GET', 'POST'])
@login_required
def messages():
    """Message threads with every actively sponsored child"""
    selected_id = request.values.get('childId')

    if request.method == 'POST':
        if selected_id:
            _send(selected_id, request.form.get('content', ''))
        return redirect(url_for('sponsor.messages', childId=selected_id))

    try:
        threads = get_message_threads(current_user.id)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error loading messages')
        flash('Could not load messages.', 'danger')
        threads = []

    current = None
    if threads:
        current = next((t for t in threads if t['child'].id == selected_id), threads[0])

    return render_template('sponsor/messages.html', threads=threads, current=current)
