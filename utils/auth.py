"""
Auth Module - Session principal resolution on top of Flask-Login

The identity provider vouches for the user; the application only keeps the
returned claims in the signed session cookie and exposes them as a
Flask-Login user.
"""

from urllib.parse import urlencode, urlsplit
from flask import session, current_app
from flask_login import UserMixin, current_user
from extensions import login_manager

SESSION_CLAIMS_KEY = 'user'


class Principal(UserMixin):
    """The signed-in user as described by the identity provider claims"""

    def __init__(self, claims):
        self.claims = dict(claims)
        self.id = self.claims['sub']

    @property
    def name(self):
        return self.claims.get('name') or self.claims.get('nickname') or self.claims.get('email') or self.id

    @property
    def email(self):
        return self.claims.get('email')

    @property
    def picture(self):
        return self.claims.get('picture')


@login_manager.user_loader
def load_principal(user_id):
    claims = session.get(SESSION_CLAIMS_KEY)
    if not claims or claims.get('sub') != user_id:
        return None
    return Principal(claims)


def resolve_principal():
    """Return the authenticated Principal for this request, or None"""
    if current_user and current_user.is_authenticated:
        return current_user._get_current_object()
    return None


def resolve_principal_id():
    principal = resolve_principal()
    return principal.id if principal else None


def safe_return_path(value, default='/'):
    """Only local absolute paths are accepted as redirect targets"""
    if not value or not value.startswith('/') or value.startswith('//') or '\\' in value:
        return default
    # Browsers and Werkzeug drop control characters, turning '/\t/host' into '//host'
    if any(ord(c) < 0x20 or c == '\x7f' for c in value):
        return default
    parts = urlsplit(value)
    if parts.scheme or parts.netloc:
        return default
    return value


def build_login_url(return_to):
    login_path = current_app.config.get('LOGIN_PATH', '/api/auth/login')
    return f"{login_path}?{urlencode({'returnTo': return_to})}"


__all__ = [
    'Principal',
    'SESSION_CLAIMS_KEY',
    'load_principal',
    'resolve_principal',
    'resolve_principal_id',
    'safe_return_path',
    'build_login_url'
]
