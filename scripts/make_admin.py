"""Promote an existing profile to the admin role.

Usage: python scripts/make_admin.py someone@example.com
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sponsor_portal import create_app
from sponsor_portal.extensions import db
from sponsor_portal.models import UserProfile
from sponsor_portal.models.profile import ROLE_ADMIN

if len(sys.argv) != 2:
    print(__doc__)
    sys.exit(1)

email = sys.argv[1].strip()
app = create_app()

with app.app_context():
    profile = UserProfile.query.filter_by(email=email).first()

    if not profile:
        print(f"No profile found for {email}; sign up first")
        sys.exit(1)

    profile.role = ROLE_ADMIN
    db.session.commit()
    print(f"{profile.full_name} promoted to admin")
