from marshmallow import fields, pre_load

from models.schemas.common import InputSchema, not_blank, max_len


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class SignupSchema(InputSchema):
    username = fields.String(required=True, validate=max_len(128))
    name = fields.String(required=True, validate=max_len(255))
    password = fields.String(required=True, load_only=True, validate=not_blank)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "username" in data:
            data = dict(data, username=_strip(data["username"]))
        return data


class LoginSchema(InputSchema):
    username = fields.String(required=True, validate=not_blank)
    password = fields.String(required=True, load_only=True, validate=not_blank)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "username" in data:
            data = dict(data, username=_strip(data["username"]))
        return data
