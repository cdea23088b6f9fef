"""
Flask Extensions

The database session talks to the hosted backend's Postgres instance;
the login manager mirrors the hosted auth session into Flask.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for sponsors and admins
login_manager = LoginManager()
