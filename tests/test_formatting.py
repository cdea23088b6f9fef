from datetime import date, datetime

import pytest

from sponsor_portal.services import format_date, status_badge


def test_date_styles():
    moment = datetime(2024, 6, 15, 15, 5)
    assert format_date(date(2024, 6, 15)) == 'June 15, 2024'
    assert format_date(moment, 'short') == 'Jun 15, 2024'
    assert format_date(moment, 'datetime') == 'Jun 15, 2024, 3:05 PM'
    assert format_date(datetime(2024, 1, 2, 0, 30), 'short_datetime') == 'Jan 2, 12:30 AM'
    assert format_date(None) == ''
    with pytest.raises(ValueError):
        format_date(moment, 'weird')


def test_status_badges():
    assert status_badge('Pending Review') == 'warning'
    assert status_badge('Approved') == 'success'
    assert status_badge('Cancelled') == 'danger'
    assert status_badge('Unknown') == 'secondary'
