"""
Dashboard Routes - Portfolio editing for the signed-in owner
Handles: Portfolio list, create, details, delete and element-wise edits of
skills, projects, education and experience
"""

from flask import render_template, redirect, url_for, request, flash, current_app, abort
from extensions import db
from models import DEFAULT_COLORS
from utils.auth import resolve_principal, resolve_principal_id
from utils.decorators import login_required
from utils.edit_buffer import (
    SECTIONS, SECTION_LABELS, ENTRY_BUILDERS, PortfolioEditBuffer,
    EditBufferError, build_details
)
from utils.errors import ApiError
from utils.portfolios import (
    list_portfolios, get_portfolio, create_portfolio,
    update_portfolio, delete_portfolio
)
from utils.validation import parse_comma_separated
from . import dashboard_bp


def _back(portfolio_id=None, anchor=None):
    if portfolio_id:
        return redirect(url_for('dashboard.index', id=portfolio_id, _anchor=anchor))
    return redirect(url_for('dashboard.index', _anchor=anchor))


@dashboard_bp.route('/')
@login_required
def index():
    """Main dashboard page"""
    owner_id = resolve_principal_id()
    try:
        portfolios = list_portfolios(owner_id)
    except Exception as e:
        current_app.logger.error(f"Error loading portfolios for {owner_id}: {str(e)}")
        db.session.rollback()
        flash('Failed to load portfolios', 'error')
        portfolios = []

    selected_id = request.args.get('id')
    if selected_id:
        selected = next((p for p in portfolios if p['id'] == selected_id), None)
    else:
        selected = portfolios[0] if portfolios else None

    return render_template('dashboard/index.html',
                           principal=resolve_principal(),
                           portfolios=portfolios,
                           selected=selected,
                           default_colors=DEFAULT_COLORS,
                           focus=request.args.get('focus'))


@dashboard_bp.route('/create', methods=['POST'])
@login_required
def create():
    """Create a new portfolio from the create form"""
    details, error = build_details(request.form)
    if error:
        flash(error, 'error')
        return _back(anchor='create')

    details['skills'] = parse_comma_separated(request.form.get('skills'))
    try:
        portfolio = create_portfolio(resolve_principal_id(), details)
    except ApiError as e:
        flash(e.message, 'error')
        return _back(anchor='create')
    except Exception as e:
        current_app.logger.error(f"Create portfolio error: {str(e)}")
        db.session.rollback()
        flash('Failed to create portfolio', 'error')
        return _back(anchor='create')

    flash('Portfolio created', 'success')
    return _back(portfolio['id'])


@dashboard_bp.route('/<portfolio_id>/details', methods=['POST'])
@login_required
def update_details(portfolio_id):
    """Update title, description, template and colors"""
    details, error = build_details(request.form)
    if error:
        flash(error, 'error')
        return _back(portfolio_id, 'details')

    details['id'] = portfolio_id
    return _submit(lambda owner_id: update_portfolio(owner_id, details),
                   portfolio_id, 'details', 'Details updated')


@dashboard_bp.route('/<portfolio_id>/delete', methods=['POST'])
@login_required
def delete(portfolio_id):
    """Delete portfolio"""
    owner_id = resolve_principal_id()
    try:
        delete_portfolio(owner_id, portfolio_id)
    except ApiError as e:
        flash(e.message, 'error')
        return _back(portfolio_id)
    except Exception as e:
        current_app.logger.error(f"Delete portfolio error: {str(e)}")
        db.session.rollback()
        flash('Failed to delete portfolio', 'error')
        return _back(portfolio_id)

    flash('Portfolio deleted', 'success')
    return _back()


@dashboard_bp.route('/<portfolio_id>/<section>/add', methods=['POST'])
@login_required
def add_item(portfolio_id, section):
    if section not in SECTIONS:
        abort(404)
    entry, error = ENTRY_BUILDERS[section](request.form)
    if error:
        flash(error, 'error')
        return _back(portfolio_id, section)

    return _submit_section(portfolio_id, section,
                           lambda buffer: buffer.added(section, entry),
                           f'{SECTION_LABELS[section]} added')


@dashboard_bp.route('/<portfolio_id>/<section>/<int:index>/edit', methods=['POST'])
@login_required
def edit_item(portfolio_id, section, index):
    if section not in SECTIONS:
        abort(404)
    entry, error = ENTRY_BUILDERS[section](request.form)
    if error:
        flash(error, 'error')
        return _back(portfolio_id, section)

    return _submit_section(portfolio_id, section,
                           lambda buffer: buffer.replaced(section, index, entry),
                           f'{SECTION_LABELS[section]} updated')


@dashboard_bp.route('/<portfolio_id>/<section>/<int:index>/delete', methods=['POST'])
@login_required
def delete_item(portfolio_id, section, index):
    if section not in SECTIONS:
        abort(404)
    return _submit_section(portfolio_id, section,
                           lambda buffer: buffer.removed(section, index),
                           f'{SECTION_LABELS[section]} removed')


def _submit_section(portfolio_id, section, next_items, success_message):
    """Rebuild one array from the current snapshot and submit it whole"""
    def apply(owner_id):
        buffer = PortfolioEditBuffer(get_portfolio(owner_id, portfolio_id))
        return update_portfolio(owner_id, buffer.payload(section, next_items(buffer)))

    return _submit(apply, portfolio_id, section, success_message)


def _submit(apply, portfolio_id, anchor, success_message):
    owner_id = resolve_principal_id()
    try:
        apply(owner_id)
    except (ApiError, EditBufferError) as e:
        flash(getattr(e, 'message', None) or str(e), 'error')
    except Exception as e:
        current_app.logger.error(f"Update portfolio {portfolio_id} error: {str(e)}")
        db.session.rollback()
        flash('Failed to update portfolio', 'error')
    else:
        flash(success_message, 'success')
    return _back(portfolio_id, anchor)
