"""Shared wire-format policy for the assistant response models.

Every schema derives from ``WireModel``, which fixes the mapping between
snake_case attributes and camelCase wire keys in one place, makes instances
immutable, and provides the ``to_wire``/``from_wire`` pair.  Absent optional
fields are ``None`` in memory and are omitted from the wire output entirely.

Parse failures are reported as ``WireFormatError`` carrying one
``FieldError`` per offending field, so upstream callers can log the field
path together with the expected/actual type.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Self

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

# Events go to the stdlib tree as message + extra; silent until the host configures logging.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    processors=[structlog.stdlib.render_to_log_kwargs],
    wrapper_class=structlog.stdlib.BoundLogger,
)

MISSING = "missing"
TYPE_MISMATCH = "type_mismatch"
MALFORMED = "malformed"

# pydantic error types raised when the payload itself is not a JSON object
_MALFORMED_ERROR_TYPES = frozenset(
    {"json_invalid", "json_type", "model_type", "model_attributes_type", "dict_type"}
)


@dataclass(frozen=True)
class FieldError:
    """A single problem found while parsing a wire payload."""

    path: str
    kind: str
    message: str
    input_type: str | None = None


class WireFormatError(ValueError):
    """Raised when a wire payload cannot be parsed into a model."""

    def __init__(self, model: str, errors: tuple[FieldError, ...]) -> None:
        self.model = model
        self.errors = errors
        details = "; ".join(f"{e.path or '<root>'} ({e.kind}): {e.message}" for e in errors)
        super().__init__(f"invalid {model} payload: {details}")

    @classmethod
    def from_validation_error(cls, model: str, exc: ValidationError) -> WireFormatError:
        """Translate a pydantic ``ValidationError`` into field-level errors."""
        errors = tuple(_to_field_error(err) for err in exc.errors(include_url=False))
        return cls(model, errors)

    @property
    def paths(self) -> list[str]:
        return [e.path for e in self.errors]


def _to_field_error(err: Any) -> FieldError:
    path = ".".join(str(part) for part in err["loc"])
    if err["type"] == "missing":
        return FieldError(path=path, kind=MISSING, message=err["msg"])

    kind = MALFORMED if not path and err["type"] in _MALFORMED_ERROR_TYPES else TYPE_MISMATCH
    input_type = type(err["input"]).__name__ if "input" in err else None
    return FieldError(path=path, kind=kind, message=err["msg"], input_type=input_type)


class WireModel(BaseModel):
    """Base for immutable value objects exchanged with the assistant API.

    Attributes are snake_case in Python and camelCase on the wire.  Python
    construction accepts either spelling, but ``from_wire``/``from_json``
    only accept the camelCase wire keys.

    Non-finite floats have no JSON form and are written as ``null``, both by
    ``to_json`` and ``to_wire``; reading that back yields an absent field.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        ser_json_inf_nan="null",
        frozen=True,
        extra="ignore",
    )

    def _with(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced; the receiver is untouched."""
        return self.model_copy(update=changes)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting absent optional fields."""
        return json.loads(self.to_json())

    def to_json(self) -> str:
        """Serialize to a compact JSON document, omitting absent optional fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Any) -> Self:
        """Parse a decoded wire payload (normally a ``dict``).

        Raises:
            WireFormatError: If a required field is missing, a field has the
                wrong type, or the payload is not an object.
        """
        try:
            return cls.model_validate(data, by_alias=True, by_name=False)
        except ValidationError as exc:
            raise _parse_failed(cls.__name__, exc) from exc

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """Parse a raw JSON document.

        Raises:
            WireFormatError: On invalid JSON or any of the ``from_wire`` failures.
        """
        try:
            return cls.model_validate_json(raw, by_alias=True, by_name=False)
        except ValidationError as exc:
            raise _parse_failed(cls.__name__, exc) from exc


def _parse_failed(model: str, exc: ValidationError) -> WireFormatError:
    error = WireFormatError.from_validation_error(model, exc)
    logger.debug(
        "wire_parse_failed",
        model=model,
        fields=error.paths,
        kinds=[e.kind for e in error.errors],
    )
    return error
