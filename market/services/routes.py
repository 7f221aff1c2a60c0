import logging

# package imports
from flask.views import MethodView

# project imports
from market.libs.api import Blueprint
from market.libs.decorators import session_required
from market.libs.schemas import DeleteResultSchema
from market.products.services import ProductService
from market.search.services import SearchService

# app imports
from .services import ServiceListingService
from .schemas import (
    ServiceCreateSchema,
    ServiceUpdateSchema,
    ServiceDetailSchema,
    ServiceListSchema,
    ServiceResultSchema,
    ServiceSearchArgs,
    ServiceSearchResultSchema,
)

logger = logging.getLogger(__name__)

bp = Blueprint(
    "services", __name__, description="Service listing operations", url_prefix="/services"
)


@bp.route("")
class ServiceList(MethodView):
    @bp.response(200, ServiceListSchema)
    def get(self):
        """All services, newest first"""
        return {"services": ServiceListingService.get_all_services()}

    @session_required
    @bp.arguments(ServiceCreateSchema)
    @bp.response(201, ServiceResultSchema)
    def post(self, service_data, session):
        """Create a service owned by the caller"""
        service = ServiceListingService.create_service(service_data, session.email)
        return {"success": True, "service": service}


@bp.route("/search")
class ServiceSearch(MethodView):
    @bp.arguments(ServiceSearchArgs, location="query")
    @bp.response(200, ServiceSearchResultSchema)
    def get(self, args):
        """Keyword search over services with structured filters"""
        return SearchService.search_services(args)


@bp.route("/<service_id>")
class ServiceDetail(MethodView):
    @bp.response(200, ServiceDetailSchema)
    def get(self, service_id):
        """Service with same-category services and recent products"""
        service = ServiceListingService.get_service(service_id)
        return {
            "service": service,
            "similar_services": ServiceListingService.get_similar_services(
                service.category, exclude_id=service.id
            ),
            "related_products": ProductService.get_recent_products(),
        }

    @session_required
    @bp.arguments(ServiceUpdateSchema(partial=True))
    @bp.response(200, ServiceResultSchema)
    def put(self, service_data, service_id, session):
        """Update service (owner only)"""
        service = ServiceListingService.update_service(
            service_id, session.email, service_data
        )
        return {"success": True, "service": service}

    @session_required
    @bp.response(200, DeleteResultSchema)
    def delete(self, service_id, session):
        """Delete service (owner only)"""
        ServiceListingService.delete_service(service_id, session.email)
        return {"success": True, "message": "Service deleted successfully"}
