"""
Data Management Module - Persistence gateway for portfolio documents
Wraps the SQLAlchemy session so the rest of the application deals in
Portfolio rows and plain dictionaries only.
"""

from flask import current_app
from sqlalchemy import text
from extensions import db
from models import Portfolio

_READY_FLAG = 'folio_db_ready'


def connect_db(app=None):
    """
    Create tables and verify the connection once per application.

    Safe to call any number of times; later calls are no-ops. The engine and
    its connection pool are owned by Flask-SQLAlchemy and live for the
    lifetime of the process.
    """
    app = app or current_app._get_current_object()
    if app.extensions.get(_READY_FLAG):
        return
    with app.app_context():
        db.create_all()
        db.session.execute(text('SELECT 1'))
    app.extensions[_READY_FLAG] = True
    app.logger.info("✓ Database initialized successfully")


def find_portfolios_by_owner(owner_id):
    """All portfolios for an owner, newest first"""
    connect_db()
    return (Portfolio.query
            .filter_by(owner_id=owner_id)
            .order_by(Portfolio.created_at.desc())
            .all())


def find_portfolio(portfolio_id, owner_id=None):
    """Look up a portfolio by id, optionally restricted to an owner"""
    connect_db()
    query = Portfolio.query.filter_by(id=str(portfolio_id))
    if owner_id is not None:
        query = query.filter_by(owner_id=owner_id)
    return query.first()


def insert_portfolio(**fields):
    """Insert a new portfolio and return the stored row"""
    connect_db()
    portfolio = Portfolio(**fields)
    try:
        db.session.add(portfolio)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return portfolio


def save_portfolio(portfolio):
    """Persist changes made to an already-loaded portfolio"""
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return portfolio


def remove_portfolio(portfolio_id, owner_id):
    """Find-and-delete restricted to the owner. Returns the removed row or None"""
    portfolio = find_portfolio(portfolio_id, owner_id=owner_id)
    if not portfolio:
        return None
    try:
        db.session.delete(portfolio)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return portfolio


def portfolio_to_dict(portfolio):
    """Convert portfolio model to dictionary"""
    return {
        'id': portfolio.id,
        'ownerId': portfolio.owner_id,
        'title': portfolio.title,
        'description': portfolio.description,
        'template': portfolio.template,
        'colors': portfolio.colors,
        'skills': portfolio.skills if portfolio.skills is not None else [],
        'projects': portfolio.projects if portfolio.projects is not None else [],
        'education': portfolio.education if portfolio.education is not None else [],
        'experience': portfolio.experience if portfolio.experience is not None else [],
        'createdAt': portfolio.created_at.isoformat() if portfolio.created_at else None,
        'updatedAt': portfolio.updated_at.isoformat() if portfolio.updated_at else None
    }


__all__ = [
    'connect_db',
    'find_portfolios_by_owner',
    'find_portfolio',
    'insert_portfolio',
    'save_portfolio',
    'remove_portfolio',
    'portfolio_to_dict'
]
