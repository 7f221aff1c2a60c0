from flask_sqlalchemy import SQLAlchemy
import logging

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def init_db(app):
    """Bind the SQLAlchemy extension to the app and create missing tables."""
    db.init_app(app)

    with app.app_context():
        import market.users.models  # noqa - imports all models
        import market.products.models  # noqa
        import market.services.models  # noqa
        import market.demands.models  # noqa

        db.create_all()
    logger.info("Database initialized")


def shutdown_session(exception=None):
    db.session.remove()
