# package imports
from flask.views import MethodView
from flask import current_app
import logging
import time
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# project imports
from external.database import db
from market.libs.api import Blueprint

logger = logging.getLogger(__name__)

bp = Blueprint(
    "health", __name__, description="Health check endpoints", url_prefix="/health"
)


@bp.route("")
class HealthCheck(MethodView):
    def get(self):
        """Basic health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": current_app.config.get("API_VERSION", "v1"),
            "environment": current_app.config.get("ENV", "development"),
        }


@bp.route("/detailed")
class DetailedHealthCheck(MethodView):
    def get(self):
        """Health check including the database and listing counts"""
        health_status = {
            "status": "healthy",
            "timestamp": time.time(),
            "version": current_app.config.get("API_VERSION", "v1"),
            "environment": current_app.config.get("ENV", "development"),
            "components": {},
        }

        try:
            started = time.time()
            db.session.execute(text("SELECT 1"))
            health_status["components"]["database"] = {
                "status": "healthy",
                "response_time": round((time.time() - started) * 1000, 2),  # ms
            }
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {str(e)}")
            db.session.rollback()
            health_status["components"]["database"] = {
                "status": "unhealthy",
                "error": str(e),
            }
            health_status["status"] = "unhealthy"
            return health_status, 503

        health_status["components"]["application"] = {
            "uptime": time.time() - current_app.start_time
            if hasattr(current_app, "start_time")
            else None,
            "listings": self._listing_counts(),
        }
        return health_status

    def _listing_counts(self):
        from market.products.models import Product
        from market.services.models import Service
        from market.demands.models import Demand

        return {
            "products": db.session.query(Product).count(),
            "services": db.session.query(Service).count(),
            "demands": db.session.query(Demand).count(),
        }


@bp.route("/live")
class LivenessCheck(MethodView):
    def get(self):
        """Liveness check for container orchestration"""
        return {"alive": True, "timestamp": time.time()}
