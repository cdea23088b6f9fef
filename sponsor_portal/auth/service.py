"""
Hosted Auth Service

Password sign-in, sign-up and sign-out against the hosted backend's auth
REST API. Every call returns a dict with an 'error' flag instead of
raising, so views can show the backend's message inline.
"""

import logging
import requests
from flask import current_app

logger = logging.getLogger(__name__)


def _endpoint(path):
    return current_app.config['SUPABASE_URL'].rstrip('/') + '/auth/v1' + path


def _headers(access_token=None):
    key = current_app.config['SUPABASE_ANON_KEY']
    headers = {
        'apikey': key,
        'Content-Type': 'application/json',
        'Authorization': f'Bearer {access_token or key}'
    }
    return headers


def _error_message(resp, default):
    try:
        data = resp.json()
    except ValueError:
        return default
    if not isinstance(data, dict):
        return default
    for key in ('error_description', 'msg', 'message', 'error'):
        if data.get(key):
            return data[key]
    return default


def _post(path, payload=None, params=None, access_token=None):
    timeout = current_app.config.get('AUTH_TIMEOUT', 10)
    return requests.post(_endpoint(path), json=payload, params=params,
                         headers=_headers(access_token), timeout=timeout)


def sign_in(email, password):
    """Exchange email and password for a session.

    Returns:
        {'error': False, 'user': {...}, 'access_token': str} on success,
        {'error': True, 'message': str} otherwise
    """
    try:
        resp = _post('/token', {'email': email, 'password': password},
                     params={'grant_type': 'password'})
        if resp.status_code != 200:
            return {'error': True, 'message': _error_message(resp, 'Failed to sign in')}

        data = resp.json()
        return {
            'error': False,
            'user': data.get('user') or {},
            'access_token': data.get('access_token')
        }

    except requests.exceptions.Timeout:
        logger.error('Auth sign-in timed out')
        return {'error': True, 'message': 'Request timed out'}
    except requests.exceptions.RequestException as e:
        logger.exception('Auth sign-in failed')
        return {'error': True, 'message': str(e)}


def sign_up(email, password, full_name):
    """Create an auth user.

    `access_token` is None when the backend requires email confirmation
    before the first sign-in.
    """
    payload = {'email': email, 'password': password, 'data': {'full_name': full_name}}
    try:
        resp = _post('/signup', payload)
        if resp.status_code not in (200, 201):
            return {'error': True, 'message': _error_message(resp, 'Failed to create account')}

        data = resp.json()
        # With auto-confirm the backend returns a session, otherwise the bare user
        user = data.get('user') or data
        if not user.get('id'):
            return {'error': True, 'message': 'Failed to create account'}
        return {
            'error': False,
            'user': user,
            'access_token': data.get('access_token')
        }

    except requests.exceptions.Timeout:
        logger.error('Auth sign-up timed out')
        return {'error': True, 'message': 'Request timed out'}
    except requests.exceptions.RequestException as e:
        logger.exception('Auth sign-up failed')
        return {'error': True, 'message': str(e)}


def sign_out(access_token):
    """Revoke the session remotely; local sign-out happens regardless."""
    if not access_token:
        return {'error': False}
    try:
        resp = _post('/logout', access_token=access_token)
        if resp.status_code not in (200, 204):
            message = _error_message(resp, 'Failed to sign out')
            logger.warning('Auth sign-out returned %s: %s', resp.status_code, message)
            return {'error': True, 'message': message}
        return {'error': False}

    except requests.exceptions.RequestException as e:
        logger.exception('Auth sign-out failed')
        return {'error': True, 'message': str(e)}
