"""
Portfolio Service - Owner-scoped CRUD on portfolio documents

Every owner-scoped operation takes the resolved principal id first and fails
with Unauthorized before touching the database when there is none. A
portfolio that exists but belongs to someone else is reported exactly like a
missing one.
"""

from flask import current_app
from pydantic import ValidationError
from models import DEFAULT_COLORS, DEFAULT_TEMPLATE
from .data import (
    find_portfolios_by_owner, find_portfolio, insert_portfolio,
    save_portfolio, remove_portfolio, portfolio_to_dict
)
from .errors import Unauthorized, BadRequest, NotFound
from .schemas import PortfolioCreate, PortfolioUpdate, describe_validation_error
from .serialization import normalize_portfolio

DOCUMENT_FIELDS = (
    'title', 'description', 'template', 'colors',
    'skills', 'projects', 'education', 'experience'
)


def _require_principal(owner_id):
    if not owner_id:
        raise Unauthorized()


def _parse(schema, payload):
    if not isinstance(payload, dict):
        raise BadRequest('Request body must be a JSON object')
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise BadRequest(describe_validation_error(e))


def _document_fields(body, present):
    """Convert the supplied schema fields into stored values, applying defaults"""
    fields = {}
    for name in DOCUMENT_FIELDS:
        if name not in present:
            continue
        value = getattr(body, name)
        if name in ('title', 'description'):
            if not value:
                raise BadRequest(f'{name.capitalize()} cannot be empty')
        elif name == 'template':
            value = value or DEFAULT_TEMPLATE
        elif name == 'colors':
            value = value.to_document() if value else dict(DEFAULT_COLORS)
        elif name == 'skills':
            value = list(value or [])
        else:
            # Arrays are replaced wholesale, never merged
            value = [entry.to_document() for entry in (value or [])]
        fields[name] = value
    return fields


def list_portfolios(owner_id):
    """The caller's portfolios, newest first"""
    _require_principal(owner_id)
    return [portfolio_to_dict(p) for p in find_portfolios_by_owner(owner_id)]


def get_portfolio(owner_id, portfolio_id):
    """One of the caller's portfolios, as stored"""
    _require_principal(owner_id)
    portfolio = find_portfolio(portfolio_id, owner_id=owner_id) if portfolio_id else None
    if not portfolio:
        raise NotFound()
    return portfolio_to_dict(portfolio)


def create_portfolio(owner_id, payload):
    _require_principal(owner_id)
    body = _parse(PortfolioCreate, payload)

    if not body.title or not body.description:
        raise BadRequest('Title and description are required')

    fields = _document_fields(body, DOCUMENT_FIELDS)
    portfolio = insert_portfolio(owner_id=owner_id, **fields)
    current_app.logger.info(f"Portfolio {portfolio.id} created for {owner_id}")
    return portfolio_to_dict(portfolio)


def update_portfolio(owner_id, payload):
    """Replace only the fields present in the payload"""
    _require_principal(owner_id)
    body = _parse(PortfolioUpdate, payload)

    if not body.id:
        raise BadRequest('Portfolio ID is required')

    portfolio = find_portfolio(body.id, owner_id=owner_id)
    if not portfolio:
        current_app.logger.warning(f"Update denied: portfolio {body.id} not found for {owner_id}")
        raise NotFound()

    changes = _document_fields(body, body.model_fields_set)
    for name, value in changes.items():
        setattr(portfolio, name, value)
    save_portfolio(portfolio)

    current_app.logger.info(f"Portfolio {portfolio.id} updated: {', '.join(sorted(changes)) or 'no fields'}")
    return portfolio_to_dict(portfolio)


def delete_portfolio(owner_id, portfolio_id):
    _require_principal(owner_id)

    if not portfolio_id:
        raise BadRequest('Portfolio ID is required')

    portfolio = remove_portfolio(portfolio_id, owner_id)
    if not portfolio:
        current_app.logger.warning(f"Delete denied: portfolio {portfolio_id} not found for {owner_id}")
        raise NotFound()

    current_app.logger.info(f"Portfolio {portfolio_id} deleted by {owner_id}")
    return {'message': 'Portfolio deleted successfully'}


def get_public_portfolio(portfolio_id):
    """Public read: no ownership filter, normalized for display"""
    portfolio = find_portfolio(portfolio_id) if portfolio_id else None
    if not portfolio:
        raise NotFound()
    return normalize_portfolio(portfolio_to_dict(portfolio))


__all__ = [
    'list_portfolios',
    'get_portfolio',
    'create_portfolio',
    'update_portfolio',
    'delete_portfolio',
    'get_public_portfolio'
]
