"""
Pages Blueprint - Public static pages
Handles: Landing page and legacy create/edit entry points
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
