"""
Pages Routes - Public static pages
"""

from flask import render_template, redirect, url_for
from utils.auth import resolve_principal
from . import pages_bp


@pages_bp.route('/')
def index():
    """Landing page"""
    return render_template('landing.html', principal=resolve_principal())


@pages_bp.route('/create-portfolio')
def create_portfolio():
    """Alias for the dashboard create form"""
    return redirect(url_for('dashboard.index', focus='create', _anchor='create'))


@pages_bp.route('/edit-portfolio/<portfolio_id>')
def edit_portfolio(portfolio_id):
    """Alias for the dashboard with a portfolio selected"""
    return redirect(url_for('dashboard.index', id=portfolio_id, _anchor='details'))
