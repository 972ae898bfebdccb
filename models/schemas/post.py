from marshmallow import Schema, fields

from models.schemas.common import InputSchema, max_len


class PostCreateSchema(InputSchema):
    title = fields.String(required=True, validate=max_len(255))
    sub_heading = fields.String(required=True, data_key="subHeading", validate=max_len(255))
    description = fields.String(required=True, validate=max_len(100_000))
    username = fields.String(required=True, validate=max_len(128))
    categories = fields.List(fields.String(), load_default=list)
    picture = fields.String(allow_none=True, load_default=None)


class PostUpdateSchema(InputSchema):
    # All optional, but validate if present
    title = fields.String(validate=max_len(255))
    sub_heading = fields.String(data_key="subHeading", validate=max_len(255))
    description = fields.String(validate=max_len(100_000))
    username = fields.String(validate=max_len(128))
    categories = fields.List(fields.String())
    picture = fields.String(allow_none=True)


class PostOutSchema(Schema):
    id = fields.String()
    title = fields.String()
    sub_heading = fields.String(data_key="subHeading")
    description = fields.String()
    picture = fields.String(allow_none=True)
    username = fields.String()
    categories = fields.List(fields.String())
    created_date = fields.DateTime(data_key="createdDate")
