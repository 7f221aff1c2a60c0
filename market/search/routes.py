import logging

# package imports
from flask.views import MethodView

# project imports
from market.libs.api import Blueprint

# app imports
from .services import SearchService
from .schemas import GlobalSearchArgs, GlobalSearchResultSchema

logger = logging.getLogger(__name__)

bp = Blueprint("search", __name__, description="Cross-listing search", url_prefix="/search")


@bp.route("")
class GlobalSearch(MethodView):
    @bp.arguments(GlobalSearchArgs, location="query")
    @bp.response(200, GlobalSearchResultSchema)
    def get(self, args):
        """Search products, services and demands at once"""
        return SearchService.global_search(args)
