"""
Portfolio Blueprint - Public portfolio views
Handles: Rendering a shared portfolio with its selected template
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
