"""
Configuration settings for the Promesas sponsorship portal
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Hosted backend (auth REST API + public key); both are required
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY')
    AUTH_TIMEOUT = float(os.environ.get('AUTH_TIMEOUT') or 10)

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'sponsor_portal.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Application settings
    DEFAULT_LANGUAGE = 'en'
    DEFAULT_MONTHLY_AMOUNT = 35
    DEFAULT_LOCATION = 'Quimistán, Honduras'
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    REQUIRED_SETTINGS = ('SUPABASE_URL', 'SUPABASE_ANON_KEY')


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SUPABASE_URL = 'https://backend.test'
    SUPABASE_ANON_KEY = 'test-anon-key'


def missing_settings(config):
    """Return the names of required settings that are empty in `config`."""
    return [name for name in Config.REQUIRED_SETTINGS if not config.get(name)]
