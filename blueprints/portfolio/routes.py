"""
Portfolio Routes - Public portfolio views
"""

from flask import render_template, current_app, request
from extensions import db
from utils.errors import NotFound
from utils.portfolios import get_public_portfolio
from utils.serialization import select_template
from . import portfolio_bp


@portfolio_bp.route('/portfolio/<portfolio_id>')
def public_portfolio(portfolio_id):
    """Public view of a portfolio; no session required"""
    try:
        portfolio = get_public_portfolio(portfolio_id)
    except NotFound:
        return render_template('404.html'), 404
    except Exception as e:
        current_app.logger.error(f"Error fetching portfolio {portfolio_id}: {str(e)}")
        db.session.rollback()
        return render_template('404.html'), 404

    share_url = request.url_root.rstrip('/') + request.path
    return render_template(select_template(portfolio),
                           portfolio=portfolio,
                           colors=portfolio['colors'],
                           portfolio_id=portfolio_id,
                           share_url=share_url)
