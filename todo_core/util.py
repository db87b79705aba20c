from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from todo_core.errors import ValidationError


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching ``timestamp`` columns without time zone."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def validate(schema, **values):
    try:
        return schema(**values)
    except PydanticValidationError as err:
        raise ValidationError(str(err), errors=err.errors()) from err
