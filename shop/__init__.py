"""
Ecomerce Product Catalog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, request
from shop.extensions import db, login_manager
from shop.config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=Config, user_repository=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        user_repository: Store for registered users (default: a fresh
            InMemoryUserRepository)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message = 'Please log in to access the products.'

    from shop.auth.repository import InMemoryUserRepository, get_user_repository
    if user_repository is None:
        user_repository = InMemoryUserRepository()
    app.extensions['user_repository'] = user_repository

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        return get_user_repository().get(user_id)

    # Register blueprints
    from shop.auth import auth_bp
    from shop.products import products_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(products_bp)

    from shop.errors import register_error_handlers
    from shop.commands import register_commands
    register_error_handlers(app)
    register_commands(app)

    from shop.middleware import MethodOverrideMiddleware
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    @app.after_request
    def log_request(response):
        logger.info('%s %s %s', request.method, request.full_path.rstrip('?'), response.status_code)
        return response

    # Create the products collection
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            os.makedirs(os.path.dirname(os.path.abspath(uri[len('sqlite:///'):])), exist_ok=True)
        from shop import models  # noqa: F401
        db.create_all()

    return app


def _configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logging.getLogger('shop').setLevel(level)
