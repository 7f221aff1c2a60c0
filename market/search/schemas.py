from marshmallow import fields, validate

from market.libs.schemas import BaseSchema
from market.products.schemas import ProductSchema
from market.services.schemas import ServiceSchema
from market.demands.schemas import DemandSchema
from .engine import ENTITY_TYPES, MAX_RESULTS


class GlobalSearchArgs(BaseSchema):
    q = fields.Str(load_default="")
    limit = fields.Int(validate=validate.Range(min=1, max=MAX_RESULTS))
    type = fields.Str(validate=validate.OneOf(ENTITY_TYPES))
    category = fields.Str()
    hall = fields.Str()
    min_price = fields.Str(data_key="minPrice")
    max_price = fields.Str(data_key="maxPrice")


class GlobalSearchResultSchema(BaseSchema):
    products = fields.List(fields.Nested(ProductSchema))
    services = fields.List(fields.Nested(ServiceSchema))
    demands = fields.List(fields.Nested(DemandSchema))
    total = fields.Int()
    query = fields.Str()
    suggestions = fields.List(fields.Str())
