# app.py
"""
Flask application factory for the navtabs demo site

Wires together:
- Environment-based configuration
- Logging to stderr, plus a rotating log file when configured
- The navtabs Jinja integration
- JSON error handlers and a health endpoint
"""

import os
import logging
import logging.handlers
from datetime import datetime

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix

from . import __version__
from .config import CONFIGS
from .core.exceptions import InvalidConfigError
from .extension import NavTabs
from .routes.demo import demo_bp


def setup_logging(app: Flask) -> None:
    """
    Configure application logging

    Log records go to stderr; when LOG_FILE is set, a rotating file
    handler with a more detailed format is added as well.
    """
    # Remove default Flask handlers to avoid duplicate logs
    app.logger.handlers.clear()

    stream_formatter = logging.Formatter(
        fmt='%(name)s[%(process)d]: %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s %(name)-20s %(levelname)-8s %(funcName)-15s:%(lineno)-4d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    log_level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(log_level)

    # app.logger (navtabs.app) propagates to the package logger
    package_logger = logging.getLogger('navtabs')
    package_logger.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(stream_formatter)
    stream_handler.setLevel(log_level)
    package_logger.handlers.clear()
    package_logger.addHandler(stream_handler)

    log_file = app.config.get('LOG_FILE')
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        package_logger.addHandler(file_handler)

    # Suppress verbose request logs outside debug mode
    if not app.debug:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)


def register_blueprints(app: Flask) -> None:
    app.register_blueprint(demo_bp, url_prefix='/demo')
    app.logger.info("Application blueprints registered")


def configure_error_handlers(app: Flask) -> None:
    """
    Configure JSON error responses
    """
    @app.errorhandler(400)
    def bad_request(error):
        app.logger.warning(f"Bad request from {request.remote_addr}: {error}")
        return jsonify({
            'error': 'Bad Request',
            'message': 'Invalid request format or parameters',
            'status_code': 400
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': 'The requested resource was not found',
            'status_code': 404
        }), 404

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Internal server error: {error}", exc_info=True)
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred',
            'status_code': 500
        }), 500

    @app.errorhandler(InvalidConfigError)
    def invalid_widget_config(error):
        app.logger.error(f"Invalid widget configuration on {request.path}: {error}")
        return jsonify({
            'error': 'Invalid Widget Configuration',
            'message': str(error),
            'status_code': 500
        }), 500

    @app.errorhandler(Exception)
    def handle_exception(e):
        """Handle unexpected exceptions"""
        if isinstance(e, HTTPException):
            return e

        app.logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred',
            'status_code': 500
        }), 500


def configure_health_checks(app: Flask) -> None:
    @app.route('/health')
    def health_check():
        """Basic health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.utcnow().isoformat(),
            'version': app.config.get('VERSION', __version__)
        })


def create_app(config_name: str = None) -> Flask:
    """
    Flask application factory

    Args:
        config_name: Configuration environment ('development', 'testing', 'production')

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, template_folder='templates')

    config_name = config_name or os.environ.get('FLASK_ENV', 'production')
    app.config.from_object(CONFIGS.get(config_name, CONFIGS['production']))

    # Trust proxy headers when deployed behind nginx
    if app.config.get('PROXY_FIX'):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    setup_logging(app)
    app.logger.info(f"Starting navtabs application in {config_name} mode")

    NavTabs(app)
    register_blueprints(app)
    configure_error_handlers(app)
    configure_health_checks(app)

    app.logger.info("Flask application factory completed successfully")
    return app


if __name__ == '__main__':
    create_app('development').run(host='127.0.0.1', port=5000, debug=True)
