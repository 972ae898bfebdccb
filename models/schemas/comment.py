from marshmallow import Schema, fields

from models.schemas.common import InputSchema, not_blank


class CommentCreateSchema(InputSchema):
    content = fields.String(required=True, validate=not_blank)
    username = fields.String(required=True, validate=not_blank)
    post_id = fields.String(required=True, data_key="postId", validate=not_blank)


class CommentOutSchema(Schema):
    id = fields.String()
    content = fields.String()
    username = fields.String()
    post_id = fields.String(data_key="postId")
    date = fields.DateTime()
