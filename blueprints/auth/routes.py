"""
Auth Routes - Authorization-code login against the identity provider
"""

import secrets
from urllib.parse import urlencode

import requests
from flask import session, redirect, request, current_app, abort, url_for
from flask_login import login_user, logout_user
from utils.auth import Principal, SESSION_CLAIMS_KEY, safe_return_path
from . import auth_bp

CLAIM_KEYS = ('sub', 'name', 'nickname', 'email', 'picture')


def _provider_url(path):
    return f"https://{current_app.config['AUTH0_DOMAIN']}{path}"


def _callback_url():
    return current_app.config['APP_BASE_URL'].rstrip('/') + url_for('auth.callback')


def _provider_configured():
    conf = current_app.config
    return bool(conf.get('AUTH0_DOMAIN') and conf.get('AUTH0_CLIENT_ID'))


@auth_bp.route('/login')
def login():
    """Send the browser to the identity provider, remembering where to return"""
    if not _provider_configured():
        current_app.logger.error("Identity provider is not configured (AUTH0_DOMAIN / AUTH0_CLIENT_ID)")
        abort(503)

    state = secrets.token_urlsafe(24)
    session['oauth_state'] = state
    session['return_to'] = safe_return_path(request.args.get('returnTo'))

    params = {
        'response_type': 'code',
        'client_id': current_app.config['AUTH0_CLIENT_ID'],
        'redirect_uri': _callback_url(),
        'scope': current_app.config['AUTH0_SCOPE'],
        'state': state,
    }
    return redirect(f"{_provider_url('/authorize')}?{urlencode(params)}")


@auth_bp.route('/callback')
def callback():
    """Exchange the authorization code and sign the principal in"""
    if not _provider_configured():
        abort(503)

    if request.args.get('error'):
        current_app.logger.warning(f"Identity provider returned error: {request.args.get('error')}")
        abort(400)

    expected_state = session.pop('oauth_state', None)
    if not expected_state or request.args.get('state') != expected_state:
        current_app.logger.warning("OAuth state mismatch on callback")
        abort(400)

    code = request.args.get('code')
    if not code:
        abort(400)

    timeout = current_app.config.get('AUTH0_TIMEOUT', 10)
    try:
        token_response = requests.post(
            _provider_url('/oauth/token'),
            json={
                'grant_type': 'authorization_code',
                'client_id': current_app.config['AUTH0_CLIENT_ID'],
                'client_secret': current_app.config['AUTH0_CLIENT_SECRET'],
                'code': code,
                'redirect_uri': _callback_url(),
            },
            timeout=timeout)
        token_response.raise_for_status()
        access_token = token_response.json().get('access_token')

        userinfo_response = requests.get(
            _provider_url('/userinfo'),
            headers={'Authorization': f'Bearer {access_token}'},
            timeout=timeout)
        userinfo_response.raise_for_status()
        userinfo = userinfo_response.json()
    except requests.RequestException as e:
        current_app.logger.error(f"Identity provider exchange failed: {str(e)}")
        abort(503)

    if not userinfo.get('sub'):
        current_app.logger.warning("Identity provider returned no subject claim")
        abort(400)

    claims = {key: userinfo[key] for key in CLAIM_KEYS if userinfo.get(key)}
    session[SESSION_CLAIMS_KEY] = claims
    session.permanent = True
    login_user(Principal(claims))

    current_app.logger.info(f"User {claims['sub']} signed in")
    return redirect(safe_return_path(session.pop('return_to', None)))


@auth_bp.route('/logout')
def logout():
    """Clear the local session, then end the provider session"""
    claims = session.get(SESSION_CLAIMS_KEY) or {}
    logout_user()
    session.clear()
    if claims.get('sub'):
        current_app.logger.info(f"User {claims['sub']} signed out")

    if not _provider_configured():
        return redirect(url_for('pages.index'))

    params = {
        'client_id': current_app.config['AUTH0_CLIENT_ID'],
        'returnTo': current_app.config['APP_BASE_URL'],
    }
    return redirect(f"{_provider_url('/v2/logout')}?{urlencode(params)}")
