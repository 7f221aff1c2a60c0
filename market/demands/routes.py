import logging

# package imports
from flask.views import MethodView

# project imports
from market.libs.api import Blueprint
from market.libs.decorators import session_required
from market.libs.schemas import DeleteResultSchema
from market.search.services import SearchService

# app imports
from .services import DemandService
from .schemas import (
    DemandCreateSchema,
    DemandUpdateSchema,
    DemandListArgs,
    DemandListSchema,
    DemandResultSchema,
    DemandSearchArgs,
    DemandSearchResultSchema,
)

logger = logging.getLogger(__name__)

bp = Blueprint("demands", __name__, description="Demand operations", url_prefix="/demands")


@bp.route("")
class DemandList(MethodView):
    @bp.arguments(DemandListArgs, location="query")
    @bp.response(200, DemandListSchema)
    def get(self, args):
        """All demands, newest first"""
        # Demands carry no status, so the search corpus is the full list
        return {"demands": DemandService.get_all_demands()}

    @session_required
    @bp.arguments(DemandCreateSchema)
    @bp.response(201, DemandResultSchema)
    def post(self, demand_data, session):
        """Post a demand owned by the caller"""
        demand = DemandService.create_demand(demand_data, session.email)
        return {"success": True, "demand": demand}


@bp.route("/search")
class DemandSearch(MethodView):
    @bp.arguments(DemandSearchArgs, location="query")
    @bp.response(200, DemandSearchResultSchema)
    def get(self, args):
        """Keyword search over demands"""
        return SearchService.search_demands(args)


@bp.route("/<demand_id>")
class DemandDetail(MethodView):
    @bp.response(200, DemandResultSchema)
    def get(self, demand_id):
        return {"demand": DemandService.get_demand(demand_id)}

    @session_required
    @bp.arguments(DemandUpdateSchema(partial=True))
    @bp.response(200, DemandResultSchema)
    def put(self, demand_data, demand_id, session):
        """Update demand (owner only)"""
        demand = DemandService.update_demand(demand_id, session.email, demand_data)
        return {"success": True, "demand": demand}

    @session_required
    @bp.response(200, DeleteResultSchema)
    def delete(self, demand_id, session):
        """Delete demand (owner only)"""
        DemandService.delete_demand(demand_id, session.email)
        return {"success": True, "message": "Demand deleted successfully"}
