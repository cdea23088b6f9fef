"""
Language selection and static string tables (English / Spanish).

The selection lives in the Flask session only; nothing here touches the
database.
"""

from flask import current_app, session
from sponsor_portal.i18n.en import translations as en
from sponsor_portal.i18n.es import translations as es

TRANSLATIONS = {'en': en, 'es': es}
DEFAULT_LANGUAGE = 'en'
SESSION_KEY = 'language'


def default_language():
    """The configured fallback locale (`DEFAULT_LANGUAGE`)."""
    language = current_app.config.get('DEFAULT_LANGUAGE', DEFAULT_LANGUAGE)
    return language if language in TRANSLATIONS else DEFAULT_LANGUAGE


def get_language():
    language = session.get(SESSION_KEY)
    return language if language in TRANSLATIONS else default_language()


def set_language(language):
    if language not in TRANSLATIONS:
        raise ValueError(f'Unsupported language: {language}')
    session[SESSION_KEY] = language


def toggle_language(language):
    """The other supported locale."""
    return 'es' if language == 'en' else 'en'


def get_translations(language=None):
    if language is None:
        language = get_language()
    return TRANSLATIONS.get(language) or TRANSLATIONS[default_language()]


__all__ = [
    'TRANSLATIONS',
    'default_language',
    'get_language',
    'set_language',
    'toggle_language',
    'get_translations'
]
