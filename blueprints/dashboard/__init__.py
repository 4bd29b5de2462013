"""
Dashboard Blueprint - Portfolio editing for the signed-in owner
Handles: Creating, editing and deleting portfolios and their sections
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/dashboard')

from . import routes
