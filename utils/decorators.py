"""
Decorators Module - Authentication and error-mapping decorators
"""

from functools import wraps
from flask import request, redirect, jsonify, current_app
from extensions import db
from .auth import resolve_principal, build_login_url
from .errors import ApiError, InternalError


def login_required(f):
    """Decorator to require a signed-in principal on HTML routes"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if resolve_principal() is None:
            return redirect(build_login_url(request.path))
        return f(*args, **kwargs)
    return decorated_function


def json_endpoint(f):
    """Decorator mapping every failure of a JSON route onto {error: message}

    ApiError subclasses keep their status; anything else is an internal
    error carrying the underlying message.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ApiError as e:
            return jsonify(e.to_dict()), e.status_code
        except Exception as e:
            current_app.logger.error(f"{request.method} {request.path} failed: {str(e)}")
            db.session.rollback()
            error = InternalError(str(e) or 'Unknown error')
            return jsonify(error.to_dict()), error.status_code
    return decorated_function


__all__ = ['login_required', 'json_endpoint']
