"""
Portfolio CV Site - Main Application Entry Point
Built with the Application Factory Pattern

This module creates the Flask application, loads configuration and wires up
blueprints, error handlers and response hooks. All route handling is
delegated to blueprints.
"""

import os
from datetime import datetime

import click
from flask import Flask, request
from werkzeug.exceptions import HTTPException

from config import get_config
from utils.translations import TRANSLATIONS, get_translation

# Import all blueprints
from blueprints.api import api_bp
from blueprints.cv import cv_bp
from blueprints.pages import pages_bp


STATIC_MIMETYPES = {
    '.css': 'text/css',
    '.js': 'application/javascript',
}


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
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    if not os.path.isdir(app.config['CONTENT_DIR']):
        app.logger.warning(f"Content directory {app.config['CONTENT_DIR']} does not exist, sections will be empty")

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio CV site is running'}, 200

    return app


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(cv_bp)
    app.register_blueprint(api_bp)
    app.logger.debug("✓ Registered blueprints: pages, cv, api")


def register_error_handlers(app):
    """Errors are answered with a plain-text body, fragments are swapped in as-is"""

    @app.errorhandler(HTTPException)
    def http_error(e):
        if e.code >= 500:
            app.logger.error(f"Server Error on {request.path}: {e.description}")
        return e.description, e.code, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.errorhandler(Exception)
    def unhandled_error(e):
        app.logger.exception(f"Unhandled error on {request.path}: {str(e)}")
        return 'Internal Server Error', 500, {'Content-Type': 'text/plain; charset=utf-8'}


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Translation helper and shared values for all templates"""
        from flask import g

        lang = getattr(g, 'lang', app.config['DEFAULT_LANGUAGE'])
        return {
            'translations': TRANSLATIONS,
            'lang': lang,
            't': lambda key: get_translation(key, lang),
            'languages': app.config['SUPPORTED_LANGUAGES'],
            'current_year': datetime.now().year,
        }

    @app.after_request
    def set_static_mimetype(response):
        """Pin the content type of scripts and stylesheets"""
        if request.path.startswith('/static/'):
            ext = os.path.splitext(request.path)[1].lower()
            if ext in STATIC_MIMETYPES:
                response.headers['Content-Type'] = STATIC_MIMETYPES[ext]
        return response

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' https://unpkg.com 'unsafe-inline'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "connect-src 'self'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


# Create app instance for gunicorn
app = create_app()


@click.command()
@click.option('-p', '--port', default=None, type=int, help='Port to run the server on')
def main(port):
    """Run the development server"""
    env = os.environ.get('FLASK_ENV', 'development')
    server = create_app(env)
    port = port or server.config['PORT']
    server.logger.info(f"Starting server on port {port}...")
    server.run(
        host='0.0.0.0',
        port=port,
        debug=(env == 'development')
    )


if __name__ == '__main__':
    main()
