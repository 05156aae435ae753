"""Flask application factory for Site Walk backend."""
from flask import Flask
from werkzeug.exceptions import HTTPException
import logging
from pathlib import Path
from .models import db
from .blueprints import projects, equipment, lookup, reports
from .cli import init_db_command, check_orphans_command
from .logging_config import setup_logging
from .utils import api_error

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    """Flask application factory for the Site Walk backend.

    Creates and configures a Flask application instance with:
    - SQLAlchemy database integration
    - Blueprint registration for API endpoints
    - CLI command registration
    - Logging configuration

    Args:
        test_config (dict, optional): Configuration overrides for testing

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__, instance_relative_config=True)

    if test_config is None:
        config_loaded = app.config.from_pyfile('config.py', silent=True)
    else:
        app.config.from_mapping(test_config)
        config_loaded = False

    setup_logging(app, log_dir=app.config.get('LOG_DIR'))
    logger.info("Starting Flask application initialization")
    if config_loaded:
        logger.info("Loaded configuration from instance/config.py")
    elif test_config is not None:
        logger.info("Loaded test configuration")
    else:
        logger.debug("No instance config file found, using defaults")

    try:
        Path(app.instance_path).mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.debug(f"Could not create instance directory: {app.instance_path}")

    # Only set default database URI if not already set (e.g., by tests)
    if 'SQLALCHEMY_DATABASE_URI' not in app.config:
        db_path = Path(app.instance_path) / 'sitewalk.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f'sqlite:///{db_path}'
    logger.info(f"Using database URI: {app.config['SQLALCHEMY_DATABASE_URI']}")
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    db.init_app(app)
    logger.info("SQLAlchemy database initialized")

    logger.info("Registering API blueprints")
    app.register_blueprint(projects.bp)
    for equipment_bp in equipment.blueprints:
        app.register_blueprint(equipment_bp)
        logger.debug(f"Registered {equipment_bp.name} blueprint")
    app.register_blueprint(lookup.bp)
    app.register_blueprint(reports.bp)
    logger.info("All API blueprints registered successfully")

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # Unknown routes and methods answer in the same JSON shape as the API
        return api_error(e.description, e.code, 'info')

    app.cli.add_command(init_db_command)
    app.cli.add_command(check_orphans_command)
    logger.info("CLI commands registered: init-db, check-orphans")

    logger.info("Flask application initialization completed successfully")
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)
