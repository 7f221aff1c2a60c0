from marshmallow import fields, validate

from market.libs.constants import ProductCategory, ServiceCategory
from market.libs.schemas import (
    BaseSchema,
    EnumField,
    ListingSchema,
    SearchQueryArgs,
    SearchResultSchema,
)


class DemandCreateSchema(BaseSchema):
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(allow_none=True)
    mobile_number = fields.Str(allow_none=True, data_key="mobileNumber")
    product_category = EnumField(
        ProductCategory, allow_none=True, data_key="productCategory"
    )
    service_category = EnumField(
        ServiceCategory, allow_none=True, data_key="serviceCategory"
    )


class DemandUpdateSchema(DemandCreateSchema):
    """Fields accepted on update; loaded with ``partial=True``"""


class DemandSchema(ListingSchema, DemandCreateSchema):
    pass


class DemandListArgs(BaseSchema):
    for_search = fields.Bool(load_default=False, data_key="forSearch")


class DemandListSchema(BaseSchema):
    demands = fields.List(fields.Nested(DemandSchema))


class DemandResultSchema(BaseSchema):
    success = fields.Bool()
    demand = fields.Nested(DemandSchema)


class DemandSearchArgs(SearchQueryArgs):
    pass


class DemandSearchResultSchema(SearchResultSchema):
    data = fields.List(fields.Nested(DemandSchema))
