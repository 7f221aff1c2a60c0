from importlib import import_module
import logging
from flask import current_app

logger = logging.getLogger(__name__)

BLUEPRINT_MODULES = ["users", "products", "services", "demands", "search", "health"]


def register_blueprints(app, api):
    """Register every blueprint exported by the market packages"""
    for module in BLUEPRINT_MODULES:
        mod = import_module(f"market.{module}.routes")
        for name in ("bp", "public_bp"):
            bp = getattr(mod, name, None)
            if bp is not None:
                # Register with Flask-Smorest API instead of directly with app
                api.register_blueprint(bp)
        logger.info(f"Registered blueprint for {module}")


def register_commands(app):
    from market.listings.management.commands.seed_listings import seed_listings
    from market.listings.management.commands.clear_listings import clear_listings

    app.cli.add_command(seed_listings)
    app.cli.add_command(clear_listings)


def create_root_routes(app):
    @app.route("/status")
    def status():
        return {"status": "running", "environment": current_app.config["ENV"]}
