import pytest

from sponsor_portal.extensions import db
from sponsor_portal.models import Child, Sponsorship
from sponsor_portal.services import sponsor_child, set_sponsorship_status, SponsorshipError


def test_sponsoring_creates_one_sponsorship_and_flips_flag(client, app, sponsor, make_child):
    child_id = make_child(first_name='Ana')

    r = client.post(f'/children/{child_id}/sponsor')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/dashboard')

    with app.app_context():
        sponsorships = Sponsorship.query.filter_by(child_id=child_id).all()
        assert len(sponsorships) == 1
        assert sponsorships[0].sponsor_id == sponsor
        assert sponsorships[0].status == 'Active'
        assert int(sponsorships[0].monthly_amount) == 35
        assert db.session.get(Child, child_id).is_sponsored is True

    body = client.get('/dashboard').get_data(as_text=True)
    assert 'Ana Lopez' in body


def test_second_sponsor_is_blocked(client, app, make_profile, login_as, make_child):
    child_id = make_child(first_name='Ana')
    first = make_profile(full_name='First')
    second = make_profile(full_name='Second')

    login_as(first)
    client.post(f'/children/{child_id}/sponsor')

    login_as(second)
    body = client.get('/children').get_data(as_text=True)
    assert 'Ana Lopez' not in body

    r = client.post(f'/children/{child_id}/sponsor', follow_redirects=True)
    assert 'already has a sponsor' in r.get_data(as_text=True)

    with app.app_context():
        assert Sponsorship.query.filter_by(child_id=child_id).count() == 1


def test_anonymous_sponsor_goes_to_signup(client, app, make_child):
    child_id = make_child()
    r = client.post(f'/children/{child_id}/sponsor')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/signup')

    with app.app_context():
        assert Sponsorship.query.count() == 0


def test_sponsor_unknown_child(app, make_profile):
    sponsor_id = make_profile()
    with app.app_context():
        with pytest.raises(SponsorshipError):
            sponsor_child('missing', sponsor_id)


def test_cancelling_makes_child_available_again(app, make_profile, make_child, make_sponsorship):
    sponsor_id = make_profile()
    child_id = make_child()
    sponsorship_id = make_sponsorship(child_id, sponsor_id)

    with app.app_context():
        set_sponsorship_status(sponsorship_id, 'Paused')
        assert db.session.get(Child, child_id).is_sponsored is True

        set_sponsorship_status(sponsorship_id, 'Cancelled')
        assert db.session.get(Child, child_id).is_sponsored is False

        set_sponsorship_status(sponsorship_id, 'Active')
        assert db.session.get(Child, child_id).is_sponsored is True


def test_cannot_reactivate_when_child_has_new_sponsor(app, make_profile, make_child, make_sponsorship):
    child_id = make_child()
    old = make_sponsorship(child_id, make_profile(), status='Cancelled')
    make_sponsorship(child_id, make_profile())

    with app.app_context():
        with pytest.raises(SponsorshipError):
            set_sponsorship_status(old, 'Active')
        with pytest.raises(SponsorshipError):
            set_sponsorship_status(old, 'Finished')


def test_admin_sponsorship_page(client, admin, make_profile, make_child, make_sponsorship):
    sponsor_id = make_profile(full_name='Grace Giver')
    child_id = make_child(first_name='Ana')
    sponsorship_id = make_sponsorship(child_id, sponsor_id)

    body = client.get('/admin/sponsorships').get_data(as_text=True)
    assert 'Grace Giver' in body
    assert 'Ana Lopez' in body

    r = client.post(f'/admin/sponsorships/{sponsorship_id}/status', data={'status': 'Paused'},
                    follow_redirects=True)
    assert 'is now Paused' in r.get_data(as_text=True)
