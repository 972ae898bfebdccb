from marshmallow import Schema, ValidationError, EXCLUDE


def not_blank(value) -> None:
    if value is None or not str(value).strip():
        raise ValidationError("Field may not be blank.")


def max_len(limit: int):
    def _validate(value) -> None:
        not_blank(value)
        if len(value) > limit:
            raise ValidationError(f"Longer than maximum length {limit}.")
    return _validate


class InputSchema(Schema):
    """Request bodies: unknown keys are dropped rather than rejected."""

    class Meta:
        unknown = EXCLUDE
