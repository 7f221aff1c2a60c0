from marshmallow import fields, validate

from market.libs.schemas import BaseSchema
from market.products.schemas import ProductSchema
from market.services.schemas import ServiceSchema
from market.demands.schemas import DemandSchema


class UserSchema(BaseSchema):
    id = fields.Str(dump_only=True)
    email = fields.Email(dump_only=True)
    name = fields.Str(dump_only=True)
    image = fields.Str(dump_only=True)
    mobile_number = fields.Str(dump_only=True, data_key="mobileNumber")
    created_at = fields.DateTime(dump_only=True, data_key="createdAt")
    updated_at = fields.DateTime(dump_only=True, data_key="updatedAt")


class UserCreateSchema(BaseSchema):
    email = fields.Email()
    name = fields.Str(allow_none=True, validate=validate.Length(max=100))
    image = fields.Str(allow_none=True)
    mobile_number = fields.Str(
        allow_none=True, validate=validate.Length(max=20), data_key="mobileNumber"
    )


class UserProfileUpdateSchema(BaseSchema):
    name = fields.Str(allow_none=True, validate=validate.Length(max=100))
    mobile_number = fields.Str(
        allow_none=True, validate=validate.Length(max=20), data_key="mobileNumber"
    )


class UserResultSchema(BaseSchema):
    success = fields.Bool()
    message = fields.Str()
    user = fields.Nested(UserSchema)


class UserListingsSchema(BaseSchema):
    products = fields.List(fields.Nested(ProductSchema))
    services = fields.List(fields.Nested(ServiceSchema))
    demands = fields.List(fields.Nested(DemandSchema))


class PublicProfileSchema(UserSchema, UserListingsSchema):
    counts = fields.Dict(keys=fields.Str(), values=fields.Int())


class PublicProfileResultSchema(BaseSchema):
    user = fields.Nested(PublicProfileSchema)
