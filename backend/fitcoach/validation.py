"""
Validation layer: raw input -> validated schema, or a domain ValidationError.
"""
from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def describe_errors(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into ``field: reason; field: reason``."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts)


def validate(model_cls: Type[M], data: Any) -> M:
    """Validate ``data`` against ``model_cls``.

    Raises:
        ValidationError: If any field is missing, out of range or not in its enumeration.
    """
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(describe_errors(e)) from e
