from marshmallow import fields, validate

from market.libs.constants import Hall, ServiceCategory
from market.libs.schemas import (
    BaseSchema,
    EnumField,
    ListingSchema,
    SearchQueryArgs,
    SearchResultSchema,
)


class ServiceCreateSchema(BaseSchema):
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(allow_none=True)
    min_price = fields.Float(
        allow_none=True, validate=validate.Range(min=0), data_key="minPrice"
    )
    max_price = fields.Float(
        allow_none=True, validate=validate.Range(min=0), data_key="maxPrice"
    )
    category = EnumField(ServiceCategory)
    experience = fields.Str(allow_none=True, validate=validate.Length(max=100))
    address_hall = EnumField(Hall, allow_none=True, data_key="addressHall")
    portfolio_url = fields.Str(allow_none=True, data_key="portfolioUrl")
    mobile_number = fields.Str(allow_none=True, data_key="mobileNumber")
    images = fields.List(fields.Str())


class ServiceUpdateSchema(ServiceCreateSchema):
    """Fields accepted on update; loaded with ``partial=True``"""


class ServiceSchema(ListingSchema, ServiceCreateSchema):
    pass


class ServiceListSchema(BaseSchema):
    services = fields.List(fields.Nested(ServiceSchema))


class ServiceResultSchema(BaseSchema):
    success = fields.Bool()
    service = fields.Nested(ServiceSchema)


class ServiceDetailSchema(BaseSchema):
    service = fields.Nested(ServiceSchema)
    similar_services = fields.List(fields.Nested(ServiceSchema), data_key="similarServices")
    related_products = fields.List(
        fields.Nested("market.products.schemas.ProductSchema"), data_key="relatedProducts"
    )


class ServiceSearchArgs(SearchQueryArgs):
    experience = fields.Str()


class ServiceSearchResultSchema(SearchResultSchema):
    data = fields.List(fields.Nested(ServiceSchema))
