"""
Message Services

Sponsor messages start in moderation; only admins move them on.
"""

import logging
from sponsor_portal.extensions import db
from sponsor_portal.models import Message, Sponsorship
from sponsor_portal.models.message import (
    SENDER_SPONSOR, SENDER_STAFF, SENDER_CHILD,
    STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED
)
from sponsor_portal.models.sponsorship import STATUS_ACTIVE

logger = logging.getLogger(__name__)

MODERATION_ACTIONS = {
    'approve': STATUS_APPROVED,
    'reject': STATUS_REJECTED,
}


class MessageError(ValueError):
    """Raised when a message cannot be sent or moderated."""


def sponsorship_for(child_id, sponsor_id, active_only=False):
    query = Sponsorship.query.filter_by(child_id=child_id, sponsor_id=sponsor_id)
    if active_only:
        query = query.filter_by(status=STATUS_ACTIVE)
    return query.order_by(Sponsorship.created_at.desc()).first()


def send_message(child_id, sponsor_id, content):
    """Sponsor writes to one of their children; the message awaits review."""
    content = (content or '').strip()
    if not content:
        raise MessageError('Message cannot be empty.')
    if sponsorship_for(child_id, sponsor_id) is None:
        raise MessageError('You can only write to children you sponsor.')

    message = Message(
        child_id=child_id,
        sponsor_id=sponsor_id,
        sender_type=SENDER_SPONSOR,
        content=content,
        status=STATUS_PENDING
    )
    db.session.add(message)
    db.session.commit()
    return message


def moderate_message(message_id, status):
    """Move a pending message to Approved or Rejected."""
    if status not in (STATUS_APPROVED, STATUS_REJECTED):
        raise MessageError(f'Invalid moderation status: {status}')

    message = db.session.get(Message, message_id)
    if message is None:
        raise MessageError('Message not found.')
    if message.status != STATUS_PENDING:
        raise MessageError('This message has already been reviewed.')

    message.status = status
    db.session.commit()
    logger.info('Message %s marked %s', message_id, status)
    return message


def post_staff_reply(message_id, content, sender_type=SENDER_STAFF):
    """Staff-authored reply on the thread of an existing message.

    Written by an admin, so it is stored as already approved.
    """
    if sender_type not in (SENDER_STAFF, SENDER_CHILD):
        raise MessageError(f'Invalid sender: {sender_type}')
    content = (content or '').strip()
    if not content:
        raise MessageError('Reply cannot be empty.')

    original = db.session.get(Message, message_id)
    if original is None:
        raise MessageError('Message not found.')

    reply = Message(
        child_id=original.child_id,
        sponsor_id=original.sponsor_id,
        sender_type=sender_type,
        content=content,
        status=STATUS_APPROVED
    )
    db.session.add(reply)
    db.session.commit()
    return reply


def thread(child_id, sponsor_id, newest_first=False):
    """All messages between a sponsor and a child, every status included."""
    order = Message.created_at.desc() if newest_first else Message.created_at.asc()
    return Message.query.filter_by(child_id=child_id, sponsor_id=sponsor_id)\
        .order_by(order).all()
