# python imports
import logging
import time

# package imports
from flask import Flask
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_cors import CORS
from flask_smorest import Api
from werkzeug.exceptions import HTTPException

# app imports
from main.config import settings
from main.logger import setup_logging
from main.errors import handle_error
from main.middleware import RequestLogMiddleware
from main.routes import register_blueprints, register_commands, create_root_routes
from market.libs.auth import (
    EXTENSION_KEY,
    LoginSessionValidator,
    load_user,
    load_user_from_request,
)

logger = logging.getLogger(__name__)


def configure_app(app, config=None, session_validator=None):
    """Configure Flask application"""
    app.config.from_object(settings)
    if config:
        app.config.update(config)

    # Setup extensions
    login_manager = LoginManager(app)
    login_manager.user_loader(load_user)
    login_manager.request_loader(load_user_from_request)

    from external.database import db, init_db, shutdown_session

    init_db(app)
    Migrate(app, db)
    app.teardown_appcontext(shutdown_session)
    CORS(app, supports_credentials=True, origins=app.config["CORS_ORIGINS"])

    app.extensions[EXTENSION_KEY] = session_validator or LoginSessionValidator()

    # Initialize Flask-Smorest API
    api = Api(app)

    # Registered after Api so these replace its HTTPException handler
    app.register_error_handler(HTTPException, handle_error)
    app.register_error_handler(Exception, handle_error)

    return api


def create_app(config=None, session_validator=None):
    """
    Application factory.

    ``config`` overrides settings loaded from the environment and
    ``session_validator`` replaces the header-based session check, which is
    how the tests sign requests in.
    """
    setup_logging(config)

    app = Flask(__name__)
    app.wsgi_app = RequestLogMiddleware(app.wsgi_app)

    # Track application start time for health checks
    app.start_time = time.time()

    api = configure_app(app, config=config, session_validator=session_validator)

    with app.app_context():
        register_blueprints(app, api)
        create_root_routes(app)
        register_commands(app)

    logger.info("Application initialized")
    return app
