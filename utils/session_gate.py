"""
Session Gate - Redirects unauthenticated requests for protected paths to login
"""

from flask import request, redirect, current_app
from .auth import resolve_principal, build_login_url


def is_protected_path(path, patterns):
    """A pattern ending in '/*' covers its base path and everything below it;
    any other pattern must match exactly."""
    for pattern in patterns:
        if pattern.endswith('/*'):
            base = pattern[:-2]
            if path == base or path.startswith(base + '/'):
                return True
        elif path == pattern:
            return True
    return False


def session_gate():
    """before_request hook; returning None lets the request through untouched"""
    if not is_protected_path(request.path, current_app.config.get('PROTECTED_PATHS', [])):
        return None

    if resolve_principal() is not None:
        return None

    current_app.logger.warning(f"No session for {request.method} {request.path}, redirecting to login")
    return redirect(build_login_url(request.path))


__all__ = ['is_protected_path', 'session_gate']
