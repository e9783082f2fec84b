"""
Lunchly - Restaurant Customer and Reservation Management
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, render_template, request
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import csrf

# Import database functions
from database import close_db, init_db, get_db, seed_database

from models.errors import NotFoundError
from utils.api_response import api_error
from utils.messages import MESSAGES


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    # Initialize extensions
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Register context processors
    register_context_processors(app)

    # Register teardown handlers
    register_teardown_handlers(app)

    # Configure logging
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    # Initialize CSRF Protection
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    # Import blueprints
    from blueprints.customers.routes import customers_bp
    from blueprints.reservations.routes import reservations_bp
    from blueprints.api.routes import api_bp

    # Register blueprints
    app.register_blueprint(customers_bp)
    app.register_blueprint(reservations_bp)
    app.register_blueprint(api_bp, url_prefix='/api')


def _wants_json():
    """True for requests under the JSON API prefix."""
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register error handlers."""

    @app.errorhandler(NotFoundError)
    def record_not_found(error):
        """Handle missing customers and reservations."""
        if _wants_json():
            return api_error(error.message, status=error.status_code)
        return render_template('errors/404.html', message=error.message), error.status_code

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        if _wants_json():
            return api_error(MESSAGES['not_found'], status=404)
        return render_template('errors/404.html', message=MESSAGES['not_found']), 404

    @app.errorhandler(Exception)
    def unhandled_error(error):
        """Report any other error with its status code, defaulting to 500."""
        if isinstance(error, HTTPException):
            status = error.code or 500
            message = error.description
        else:
            status = getattr(error, 'status_code', None) or 500
            message = str(error) or MESSAGES['server_error']

        if status >= 500:
            app.logger.error('Unhandled error on %s: %s', request.path, error, exc_info=True)
        if _wants_json():
            return api_error(message, status=status)
        return render_template('errors/500.html', status=status, message=message), status


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    @click.option('--seed', is_flag=True, help='Insert sample customers and reservations.')
    def init_db_command(seed):
        """Initialize database schema (drops existing data)."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db(seed=seed)
        click.echo('Database initialized successfully!')

    @app.cli.command('seed-db')
    def seed_db_command():
        """Insert sample data into an existing database."""
        with app.app_context():
            db = get_db()
            seed_database(db)
            db.commit()
        click.echo('Sample data inserted.')


def register_context_processors(app):
    """Register template context processors."""

    @app.context_processor
    def utility_processor():
        """Inject utility values into templates."""
        from datetime import datetime
        from blueprints.customers.forms import SearchForm

        return {
            'current_year': datetime.now().year,
            'app_name': app.config.get('APP_NAME', 'Lunchly'),
            'app_version': app.config.get('APP_VERSION', '1.0.0'),
            'search_form': SearchForm(formdata=None),
        }


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        log_dir = app.config.get('LOG_DIR', 'logs')
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(os.path.join(log_dir, 'lunchly.log'))
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Lunchly startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
