"""
Utils Package - Centralized utility modules initialization
"""

from .errors import ApiError, Unauthorized, BadRequest, NotFound, InternalError
from .validation import (
    validate_text_length,
    is_valid_url,
    is_valid_hex_color,
    validate_date_range,
    is_image_url_allowed,
    filter_valid_image_urls,
    parse_comma_separated
)
from .data import connect_db
from .auth import resolve_principal, resolve_principal_id
from .decorators import login_required, json_endpoint
from .session_gate import session_gate, is_protected_path
from .serialization import serialize_for_client, normalize_portfolio, select_template
from .portfolios import (
    list_portfolios,
    get_portfolio,
    create_portfolio,
    update_portfolio,
    delete_portfolio,
    get_public_portfolio
)

__all__ = [
    # Errors
    'ApiError',
    'Unauthorized',
    'BadRequest',
    'NotFound',
    'InternalError',

    # Validation
    'validate_text_length',
    'is_valid_url',
    'is_valid_hex_color',
    'validate_date_range',
    'is_image_url_allowed',
    'filter_valid_image_urls',
    'parse_comma_separated',

    # Data
    'connect_db',

    # Auth
    'resolve_principal',
    'resolve_principal_id',
    'login_required',
    'json_endpoint',
    'session_gate',
    'is_protected_path',

    # Serialization
    'serialize_for_client',
    'normalize_portfolio',
    'select_template',

    # Portfolios
    'list_portfolios',
    'get_portfolio',
    'create_portfolio',
    'update_portfolio',
    'delete_portfolio',
    'get_public_portfolio'
]
