"""
CoffeeShop - Customers and Orders
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, render_template, redirect, url_for, g
from flask_wtf.csrf import CSRFError
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import extensions
from extensions import csrf

# Import database functions
from database import close_db, init_db, get_db


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

    config_class = config[config_name]
    if hasattr(config_class, 'validate'):
        config_class.validate()

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_class)

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
    from blueprints.api.routes import api_bp

    # Register blueprints
    app.register_blueprint(customers_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    # Set default route
    @app.route('/')
    def index():
        """Redirect to the customer list."""
        return redirect(url_for('customers.index'))


def register_error_handlers(app):
    """Register error handlers."""

    @app.errorhandler(CSRFError)
    def csrf_error(error):
        """Handle missing or expired CSRF tokens."""
        return render_template('errors/400.html', error=error), 400

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors."""
        return render_template('errors/404.html', error=error), 404

    @app.errorhandler(409)
    def conflict_error(error):
        """Handle 409 errors."""
        return render_template('errors/409.html', error=error), 409

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        # Rollback database on error
        db = g.get('db')
        if db:
            db.rollback()
        return render_template('errors/500.html', error=error), 500


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize database with an empty schema."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db()
        click.echo('Database initialized successfully!')

    @app.cli.command('seed-demo')
    def seed_demo_command():
        """Insert demo customers and orders."""
        from database.seed import seed_database

        with app.app_context():
            db = get_db()
            customer_ids = seed_database(db)
            db.commit()
        click.echo(f'Seeded {len(customer_ids)} customers')

    @app.cli.command('add-order')
    @click.argument('customer_id', type=int)
    @click.option('--item', 'items', multiple=True,
                  help='Order item as DESCRIPTION:PRICE[:QTY], repeatable')
    def add_order_command(customer_id, items):
        """Create an order for a customer."""
        from models.order import create_order, get_order_total
        from utils.helpers import parse_item_spec, format_currency
        from utils.messages import get_message

        with app.app_context():
            try:
                order_id = create_order(
                    customer_id,
                    items=[parse_item_spec(spec) for spec in items]
                )
            except ValueError as e:
                raise click.ClickException(str(e))

            total = get_order_total(order_id)

        click.echo(get_message('order_created', order_id=order_id))
        click.echo(f'Total: {format_currency(total, app.config["CURRENCY_SYMBOL"])}')


def register_context_processors(app):
    """Register template context processors."""

    @app.context_processor
    def utility_processor():
        """Inject application settings into templates."""
        from datetime import datetime
        from utils.messages import MESSAGES

        return {
            'messages': MESSAGES,
            'current_year': datetime.now().year,
            'app_name': app.config.get('APP_NAME', 'CoffeeShop'),
            'app_version': app.config.get('APP_VERSION', '1.0.0')
        }

    # Add custom template filters
    @app.template_filter('currency')
    def currency_filter(amount):
        """Format amount with the configured currency symbol."""
        from utils.helpers import format_currency
        return format_currency(amount, app.config.get('CURRENCY_SYMBOL', '$'))

    @app.template_filter('format_datetime')
    def format_datetime_filter(value, format='%m/%d/%Y %H:%M'):
        """Format a stored timestamp."""
        from utils.helpers import format_datetime
        return format_datetime(value, format)


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
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/coffeeshop.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('CoffeeShop startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
