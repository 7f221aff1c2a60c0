from marshmallow import fields, validate

from market.libs.constants import Hall, ProductCategory, MIN_CONDITION, MAX_CONDITION
from market.libs.schemas import (
    BaseSchema,
    EnumField,
    ListingSchema,
    SearchQueryArgs,
    SearchResultSchema,
)
from .models import ProductType, ProductStatus, Seasonality
from .constants import PRODUCT_SORT_KEYS


class ProductCreateSchema(BaseSchema):
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(allow_none=True)
    price = fields.Float(allow_none=True, validate=validate.Range(min=0))
    original_price = fields.Float(
        allow_none=True, validate=validate.Range(min=0), data_key="originalPrice"
    )
    product_type = EnumField(ProductType, data_key="productType")
    status = EnumField(ProductStatus)
    condition = fields.Int(validate=validate.Range(min=MIN_CONDITION, max=MAX_CONDITION))
    age_in_months = fields.Float(
        allow_none=True, validate=validate.Range(min=0), data_key="ageInMonths"
    )
    category = EnumField(ProductCategory)
    address_hall = EnumField(Hall, allow_none=True, data_key="addressHall")
    mobile_number = fields.Str(allow_none=True, data_key="mobileNumber")
    ecommerce_link = fields.Str(allow_none=True, data_key="ecommerceLink")
    invoice_image_url = fields.Str(allow_none=True, data_key="invoiceImageUrl")
    seasonality = EnumField(Seasonality)
    images = fields.List(fields.Str())


class ProductUpdateSchema(ProductCreateSchema):
    """Fields accepted on update; loaded with ``partial=True``"""


class ProductSchema(ListingSchema, ProductCreateSchema):
    pass


class ProductListArgs(BaseSchema):
    limit = fields.Int(validate=validate.Range(min=1, max=100))
    offset = fields.Int(load_default=0, validate=validate.Range(min=0))
    cursor = fields.Str()
    sort = fields.Str(load_default="newest", validate=validate.OneOf(PRODUCT_SORT_KEYS))
    category = EnumField(ProductCategory)
    exclude = fields.Str()
    for_search = fields.Bool(load_default=False, data_key="forSearch")


class ProductListSchema(BaseSchema):
    products = fields.List(fields.Nested(ProductSchema))
    total = fields.Int()
    has_more = fields.Bool(data_key="hasMore")
    next_cursor = fields.Str(allow_none=True, data_key="nextCursor")
    next_offset = fields.Int(allow_none=True, data_key="nextOffset")


class ProductResultSchema(BaseSchema):
    success = fields.Bool()
    product = fields.Nested(ProductSchema)


class ProductDetailSchema(BaseSchema):
    product = fields.Nested(ProductSchema)
    similar_products = fields.List(fields.Nested(ProductSchema), data_key="similarProducts")
    related_services = fields.List(
        fields.Nested("market.services.schemas.ServiceSchema"), data_key="relatedServices"
    )


class ProductSearchArgs(SearchQueryArgs):
    product_type = fields.Str(data_key="productType")
    status = fields.Str()
    condition = fields.Str()


class ProductSearchResultSchema(SearchResultSchema):
    data = fields.List(fields.Nested(ProductSchema))
