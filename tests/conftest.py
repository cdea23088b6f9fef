import uuid
from datetime import date

import pytest

from sponsor_portal import create_app
from sponsor_portal.config import TestConfig
from sponsor_portal.extensions import db
from sponsor_portal.models import UserProfile, Child, Sponsorship, Message


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_profile(app):
    def _make(role='sponsor', full_name='Test Sponsor', email=None):
        with app.app_context():
            profile = UserProfile(
                id=str(uuid.uuid4()),
                role=role,
                full_name=full_name,
                email=email or f'{uuid.uuid4().hex[:8]}@example.com'
            )
            db.session.add(profile)
            db.session.commit()
            return profile.id
    return _make


@pytest.fixture()
def make_child(app):
    def _make(first_name='Ana', last_name='Lopez', birthdate=date(2015, 6, 15), **fields):
        with app.app_context():
            child = Child(first_name=first_name, last_name=last_name,
                          gender=fields.pop('gender', 'Female'),
                          birthdate=birthdate, **fields)
            db.session.add(child)
            db.session.commit()
            return child.id
    return _make


@pytest.fixture()
def make_sponsorship(app):
    def _make(child_id, sponsor_id, status='Active'):
        with app.app_context():
            sponsorship = Sponsorship(child_id=child_id, sponsor_id=sponsor_id,
                                      status=status, monthly_amount=35)
            db.session.add(sponsorship)
            child = db.session.get(Child, child_id)
            if status != 'Cancelled':
                child.is_sponsored = True
            db.session.commit()
            return sponsorship.id
    return _make


@pytest.fixture()
def make_message(app):
    def _make(child_id, sponsor_id, content='Hello!', status='Pending Review', sender_type='Sponsor'):
        with app.app_context():
            message = Message(child_id=child_id, sponsor_id=sponsor_id, content=content,
                              status=status, sender_type=sender_type)
            db.session.add(message)
            db.session.commit()
            return message.id
    return _make


@pytest.fixture()
def login_as(client):
    """Prime the Flask-Login session for an existing profile id."""
    def _login(user_id):
        with client.session_transaction() as sess:
            sess['_user_id'] = user_id
            sess['_fresh'] = True
    return _login


@pytest.fixture()
def sponsor(make_profile, login_as):
    user_id = make_profile(role='sponsor', full_name='Sam Sponsor')
    login_as(user_id)
    return user_id


@pytest.fixture()
def admin(make_profile, login_as):
    user_id = make_profile(role='admin', full_name='Alex Admin')
    login_as(user_id)
    return user_id
