from marshmallow import Schema, fields, validate, EXCLUDE


class BaseSchema(Schema):
    class Meta:
        # Unknown keys are dropped, never passed through untyped
        unknown = EXCLUDE


class EnumField(fields.Enum):
    """Enum by value, accepting any letter case on input"""

    def __init__(self, enum, **kwargs):
        kwargs.setdefault("by_value", True)
        super().__init__(enum, **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            value = value.strip().upper()
        return super()._deserialize(value, attr, data, **kwargs)


class OwnerSchema(BaseSchema):
    id = fields.Str(dump_only=True)
    name = fields.Str(dump_only=True)
    email = fields.Email(dump_only=True)
    image = fields.Str(dump_only=True)


class ListingSchema(BaseSchema):
    """Fields every listing shares on the wire"""

    id = fields.Str(dump_only=True)
    created_at = fields.DateTime(dump_only=True, data_key="createdAt")
    updated_at = fields.DateTime(dump_only=True, data_key="updatedAt")
    owner = fields.Nested(OwnerSchema, dump_only=True)


class SearchQueryArgs(BaseSchema):
    """
    Query string of the per-entity search endpoints.

    Filter values stay strings here: blank or malformed values are dropped
    later by the filter parsing instead of failing the request.
    """

    q = fields.Str(load_default="")
    limit = fields.Int(validate=validate.Range(min=1))
    category = fields.Str()
    hall = fields.Str()
    min_price = fields.Str(data_key="minPrice")
    max_price = fields.Str(data_key="maxPrice")


class SearchResultSchema(BaseSchema):
    success = fields.Bool()
    query = fields.Str()
    message = fields.Str()
    applied_filters = fields.Dict(data_key="appliedFilters")


class DeleteResultSchema(BaseSchema):
    success = fields.Bool()
    message = fields.Str()
