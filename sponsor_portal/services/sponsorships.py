"""
Sponsorship Services

Claiming a child and changing the state of an existing sponsorship.
"""

import logging
from datetime import date
from flask import current_app
from sponsor_portal.extensions import db
from sponsor_portal.models import Child, Sponsorship
from sponsor_portal.models.sponsorship import STATUS_ACTIVE, STATUS_CANCELLED, SPONSORSHIP_STATUSES

logger = logging.getLogger(__name__)


class SponsorshipError(ValueError):
    """Raised when a sponsorship request cannot be honored."""


def sponsor_child(child_id, sponsor_id, monthly_amount=None):
    """Create an Active sponsorship and mark the child as sponsored.

    The availability flag is claimed with a conditional UPDATE and the
    sponsorship row is inserted in the same transaction, so a child that
    has already been claimed is refused and no half-written state is left.

    Returns:
        The new Sponsorship

    Raises:
        SponsorshipError: the child does not exist or is no longer available
    """
    if monthly_amount is None:
        monthly_amount = current_app.config.get('DEFAULT_MONTHLY_AMOUNT', 35)

    claimed = Child.query.filter_by(id=child_id, is_sponsored=False)\
        .update({'is_sponsored': True}, synchronize_session='fetch')
    if not claimed:
        db.session.rollback()
        if db.session.get(Child, child_id) is None:
            raise SponsorshipError('Child not found.')
        raise SponsorshipError('This child already has a sponsor.')

    sponsorship = Sponsorship(
        child_id=child_id,
        sponsor_id=sponsor_id,
        status=STATUS_ACTIVE,
        monthly_amount=monthly_amount,
        start_date=date.today()
    )
    db.session.add(sponsorship)
    db.session.commit()
    logger.info('Sponsor %s now sponsors child %s', sponsor_id, child_id)
    return sponsorship


def set_sponsorship_status(sponsorship_id, status):
    """Change a sponsorship's status and keep the child's flag in step.

    A child counts as sponsored while any of its sponsorships is not
    Cancelled. Only one non-cancelled sponsorship may exist per child.
    """
    if status not in SPONSORSHIP_STATUSES:
        raise SponsorshipError(f'Unknown sponsorship status: {status}')

    sponsorship = db.session.get(Sponsorship, sponsorship_id)
    if sponsorship is None:
        raise SponsorshipError('Sponsorship not found.')

    if sponsorship.status == STATUS_CANCELLED and status != STATUS_CANCELLED:
        other = Sponsorship.query.filter(
            Sponsorship.child_id == sponsorship.child_id,
            Sponsorship.id != sponsorship.id,
            Sponsorship.status != STATUS_CANCELLED
        ).first()
        if other:
            raise SponsorshipError('This child already has another sponsor.')

    sponsorship.status = status
    db.session.flush()

    still_sponsored = Sponsorship.query.filter(
        Sponsorship.child_id == sponsorship.child_id,
        Sponsorship.status != STATUS_CANCELLED
    ).count() > 0
    sponsorship.child.is_sponsored = still_sponsored

    db.session.commit()
    return sponsorship


def has_open_sponsorship(child_id):
    """True while the child has any sponsorship that is not Cancelled."""
    return Sponsorship.query.filter(
        Sponsorship.child_id == child_id,
        Sponsorship.status != STATUS_CANCELLED
    ).first() is not None
