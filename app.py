"""
Folio Builder - Main Application Entry Point
Application Factory Pattern for modular architecture

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, jsonify
from config import get_config
from extensions import db, login_manager
from utils.data import connect_db
from utils.auth import resolve_principal
from utils.session_gate import session_gate

# Import all blueprints
from blueprints.api import api_bp
from blueprints.auth import auth_bp
from blueprints.pages import pages_bp
from blueprints.dashboard import dashboard_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.json.ensure_ascii = False

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    from utils.helpers import JINJA_FILTERS
    app.jinja_env.filters.update(JINJA_FILTERS)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Folio Builder is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    # Create tables if they don't exist; the gateway retries lazily on first use
    try:
        connect_db(app)
    except Exception as e:
        app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(portfolio_bp)


def _wants_json():
    # Login, callback and logout are browser navigations
    return request.path.startswith('/api/') and not request.path.startswith('/api/auth/')


def register_error_handlers(app):
    """Register custom error handlers; API paths always answer in JSON"""

    @app.errorhandler(400)
    def bad_request(e):
        if _wants_json():
            return jsonify({'error': 'Bad request'}), 400
        return render_template('400.html'), 400

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if _wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('500.html'), 500

    @app.errorhandler(503)
    def service_unavailable(e):
        return render_template('503.html'), 503


def register_hooks(app):
    """Register request/response hooks and context processors"""

    # Protected paths redirect to login before any view runs
    app.before_request(session_gate)

    @app.context_processor
    def inject_global_vars():
        return {
            'current_principal': resolve_principal(),
            'current_year': datetime.now().year,
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src * data:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
