"""
Promesas Sponsorship Portal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, redirect, url_for
from sponsor_portal.extensions import db, login_manager
from sponsor_portal.config import Config, missing_settings

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance

    Raises:
        RuntimeError: if the hosted backend URL or public key is missing
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    missing = missing_settings(app.config)
    if missing:
        raise RuntimeError(f"Missing backend environment variables: {', '.join(missing)}")

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message = None

    # Register blueprints
    from sponsor_portal.auth import auth_bp
    from sponsor_portal.main import main_bp
    from sponsor_portal.sponsor import sponsor_bp
    from sponsor_portal.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(main_bp)
    app.register_blueprint(sponsor_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Translations and language toggle state for every template
    @app.context_processor
    def inject_language():
        from sponsor_portal.i18n import get_language, get_translations, toggle_language
        language = get_language()
        return dict(t=get_translations(language),
                    language=language,
                    other_language=toggle_language(language))

    # User loader for Flask-Login: re-reads the profile row on every request
    @login_manager.user_loader
    def load_user(user_id):
        from sqlalchemy.exc import SQLAlchemyError
        from sponsor_portal.models import UserProfile
        try:
            return db.session.get(UserProfile, user_id)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Error loading profile %s', user_id)
            return None

    register_template_filters(app)

    # Unknown paths go back to the home page
    @app.errorhandler(404)
    def redirect_unknown(error):
        return redirect(url_for('main.index'))

    # Create database tables missing from the backing database
    with app.app_context():
        database_dir = sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])
        if database_dir:
            os.makedirs(database_dir, exist_ok=True)
        db.create_all()

    return app


def sqlite_directory(uri):
    """Directory holding a file-backed sqlite database, else None."""
    prefix = 'sqlite:///'
    if not uri.startswith(prefix) or ':memory:' in uri:
        return None
    return os.path.dirname(uri[len(prefix):]) or None


def register_template_filters(app):
    """Age, date and status badge helpers for templates."""
    from sponsor_portal.services.children import calculate_age
    from sponsor_portal.services.formatting import format_date, status_badge

    app.add_template_filter(calculate_age, 'age')
    app.add_template_filter(format_date, 'format_date')
    app.add_template_filter(status_badge, 'status_badge')
