import logging

# package imports
from flask.views import MethodView

# project imports
from market.libs.api import Blueprint
from market.libs.decorators import session_required
from market.libs.schemas import DeleteResultSchema
from market.search.services import SearchService
from market.services.services import ServiceListingService

# app imports
from .services import ProductService
from .constants import SIMILAR_PRODUCTS_LIMIT
from .schemas import (
    ProductCreateSchema,
    ProductUpdateSchema,
    ProductDetailSchema,
    ProductListArgs,
    ProductListSchema,
    ProductResultSchema,
    ProductSearchArgs,
    ProductSearchResultSchema,
)

logger = logging.getLogger(__name__)

bp = Blueprint(
    "products", __name__, description="Product operations", url_prefix="/products"
)


@bp.route("")
class ProductList(MethodView):
    @bp.arguments(ProductListArgs, location="query")
    @bp.response(200, ProductListSchema)
    def get(self, args):
        """List listed products, a category neighbourhood, or everything for search"""
        if args["for_search"]:
            return {"products": ProductService.get_all_products_for_search()}

        if args.get("category") and args.get("exclude"):
            return {
                "products": ProductService.get_similar_products(
                    args["category"],
                    exclude_id=args["exclude"],
                    limit=args.get("limit", SIMILAR_PRODUCTS_LIMIT),
                )
            }

        page = ProductService.list_products(args)
        return {"products": page.pop("items"), **page}

    @session_required
    @bp.arguments(ProductCreateSchema)
    @bp.response(201, ProductResultSchema)
    def post(self, product_data, session):
        """Create a product owned by the caller"""
        product = ProductService.create_product(product_data, session.email)
        return {"success": True, "product": product}


@bp.route("/search")
class ProductSearch(MethodView):
    @bp.arguments(ProductSearchArgs, location="query")
    @bp.response(200, ProductSearchResultSchema)
    def get(self, args):
        """Keyword search over products with structured filters"""
        return SearchService.search_products(args)


@bp.route("/<product_id>")
class ProductDetail(MethodView):
    @bp.response(200, ProductDetailSchema)
    def get(self, product_id):
        """Product with same-category products and recent services"""
        product = ProductService.get_product(product_id)
        return {
            "product": product,
            "similar_products": ProductService.get_similar_products(
                product.category, exclude_id=product.id
            ),
            "related_services": ServiceListingService.get_recent_services(),
        }

    @session_required
    @bp.arguments(ProductUpdateSchema(partial=True))
    @bp.response(200, ProductResultSchema)
    def put(self, product_data, product_id, session):
        """Update product (owner only)"""
        product = ProductService.update_product(product_id, session.email, product_data)
        return {"success": True, "product": product}

    @session_required
    @bp.response(200, DeleteResultSchema)
    def delete(self, product_id, session):
        """Delete product (owner only)"""
        ProductService.delete_product(product_id, session.email)
        return {"success": True, "message": "Product deleted successfully"}
