"""
API Routes - JSON portfolio endpoints
"""

from flask import request, jsonify
from utils.auth import resolve_principal_id
from utils.decorators import json_endpoint
from utils.portfolios import (
    list_portfolios, create_portfolio, update_portfolio,
    delete_portfolio, get_public_portfolio
)
from . import api_bp


@api_bp.route('/portfolios', methods=['GET'])
@json_endpoint
def list_owned():
    """Caller's portfolios, newest first"""
    portfolios = list_portfolios(resolve_principal_id())
    return jsonify({'portfolios': portfolios})


@api_bp.route('/portfolios', methods=['POST'])
@json_endpoint
def create():
    owner_id = resolve_principal_id()
    portfolio = create_portfolio(owner_id, request.get_json(silent=True))
    return jsonify({'portfolio': portfolio}), 201


@api_bp.route('/portfolios', methods=['PUT'])
@json_endpoint
def update():
    owner_id = resolve_principal_id()
    portfolio = update_portfolio(owner_id, request.get_json(silent=True))
    return jsonify({'portfolio': portfolio})


@api_bp.route('/portfolios', methods=['DELETE'])
@json_endpoint
def delete():
    owner_id = resolve_principal_id()
    result = delete_portfolio(owner_id, request.args.get('id'))
    return jsonify(result)


@api_bp.route('/portfolios/<portfolio_id>', methods=['GET'])
@json_endpoint
def public_detail(portfolio_id):
    """Public read, no session required"""
    return jsonify({'portfolio': get_public_portfolio(portfolio_id)})
