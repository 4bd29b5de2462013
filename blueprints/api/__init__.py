"""
API Blueprint - JSON portfolio endpoints
Handles: Owner-scoped list/create/update/delete and the public single read
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
