"""
Auth Blueprint - Identity provider entry points
Handles: Login redirect, OAuth callback, Logout
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
