# python imports
import logging

# package imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

# project imports
from external.database import db
from market.libs.session import session_scope
from market.libs.pagination import Paginator
from market.libs.errors import APIError, ForbiddenError, NotFoundError
from market.users.services import UserService

# app imports
from .models import Product, ProductStatus
from .constants import EDITABLE_PRODUCT_FIELDS, SIMILAR_PRODUCTS_LIMIT


logger = logging.getLogger(__name__)


class ProductService:
    @staticmethod
    def _base_query():
        return db.session.query(Product).options(joinedload(Product.owner))

    @staticmethod
    def _newest_first(query):
        return query.order_by(Product.created_at.desc(), Product.id.desc())

    @staticmethod
    def get_all_products_for_search():
        """Every product regardless of status, newest first"""
        try:
            return ProductService._newest_first(ProductService._base_query()).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching products for search: {str(e)}")
            raise APIError("Failed to fetch products", 500)

    @staticmethod
    def list_products(args):
        """Listed products with sorting and offset or cursor pagination"""
        try:
            query = ProductService._base_query().filter(
                Product.status == ProductStatus.LISTED
            )
            paginator = Paginator(
                query,
                Product,
                limit=args.get("limit", 20),
                offset=args.get("offset", 0),
            )
            return paginator.paginate(sort=args.get("sort"), cursor=args.get("cursor"))
        except SQLAlchemyError as e:
            logger.error(f"Database error listing products: {str(e)}")
            raise APIError("Failed to fetch products", 500)

    @staticmethod
    def get_similar_products(category, exclude_id=None, limit=SIMILAR_PRODUCTS_LIMIT):
        """Listed products sharing ``category``, without ``exclude_id``"""
        try:
            query = ProductService._base_query().filter(
                Product.status == ProductStatus.LISTED,
                Product.category == category,
            )
            if exclude_id:
                query = query.filter(Product.id != exclude_id)
            return ProductService._newest_first(query).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching similar products: {str(e)}")
            raise APIError("Failed to fetch products", 500)

    @staticmethod
    def get_recent_products(limit=SIMILAR_PRODUCTS_LIMIT):
        try:
            return ProductService._newest_first(
                ProductService._base_query().filter(
                    Product.status == ProductStatus.LISTED
                )
            ).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching recent products: {str(e)}")
            raise APIError("Failed to fetch products", 500)

    @staticmethod
    def get_product(product_id):
        try:
            product = ProductService._base_query().filter(Product.id == product_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Database error fetching product {product_id}: {str(e)}")
            raise APIError("Failed to fetch product", 500)
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def create_product(product_data, email):
        try:
            with session_scope() as session:
                owner = UserService.get_or_create_user(email)
                # Unset columns fall back to the model defaults
                product = Product(
                    owner=owner,
                    **{
                        k: v
                        for k, v in product_data.items()
                        if k in EDITABLE_PRODUCT_FIELDS
                    },
                )
                session.add(product)
                session.flush()  # Get product ID

                logger.info(f"Created product {product.id} for {email}")
                return product
        except SQLAlchemyError as e:
            logger.error(f"Database error creating product: {str(e)}")
            raise APIError("Failed to create product", 500)

    @staticmethod
    def update_product(product_id, email, update_data):
        """Update product details (owner only)"""
        try:
            with session_scope():
                product = ProductService.get_product(product_id)
                if not product.is_owned_by(email):
                    raise ForbiddenError("Unauthorized to edit this product")

                for field in EDITABLE_PRODUCT_FIELDS:
                    if field in update_data:
                        setattr(product, field, update_data[field])
                return product

        except SQLAlchemyError as e:
            logger.error(f"Database error updating product {product_id}: {str(e)}")
            raise APIError("Failed to update product", 500)

    @staticmethod
    def delete_product(product_id, email):
        """Delete product (owner only)"""
        try:
            with session_scope() as session:
                product = ProductService.get_product(product_id)
                if not product.is_owned_by(email):
                    raise ForbiddenError("Unauthorized to delete this product")

                session.delete(product)
                logger.info(f"Deleted product {product_id}")
                return True

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting product {product_id}: {str(e)}")
            raise APIError("Failed to delete product", 500)
