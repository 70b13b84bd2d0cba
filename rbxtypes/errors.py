"""Exceptions raised by the rbxtypes package."""

from __future__ import annotations

from typing import Any


class RbxTypesError(Exception):
    """Base class for every error raised by this package."""


class AttributeFormatError(RbxTypesError):
    """Raised when an attribute blob cannot be read or written."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.type_id: int | None = details.get("type_id")
        self.variant_type: Any = details.get("variant_type")
        self.value: int | None = details.get("value")
        self.what: str | None = details.get("what")

    @classmethod
    def invalid_length(cls) -> AttributeFormatError:
        return cls("missing attribute list length")

    @classmethod
    def no_key(cls) -> AttributeFormatError:
        return cls("missing attribute key name")

    @classmethod
    def key_bad_unicode(cls, cause: BaseException) -> AttributeFormatError:
        error = cls("attribute key contained invalid UTF-8")
        error.__cause__ = cause
        return error

    @classmethod
    def no_value_type(cls) -> AttributeFormatError:
        return cls("missing attribute value type")

    @classmethod
    def invalid_value_type(cls, type_id: int) -> AttributeFormatError:
        return cls(f"invalid value type: {type_id}", type_id=type_id)

    @classmethod
    def unsupported_variant_type(cls, variant_type: Any) -> AttributeFormatError:
        name = getattr(variant_type, "name", variant_type)
        return cls(
            f"{name} values are not supported in attributes",
            variant_type=variant_type,
        )

    @classmethod
    def invalid_brick_color(cls, value: int) -> AttributeFormatError:
        return cls(f"invalid BrickColor value: {value}", value=value)

    @classmethod
    def read_type(cls, what: str) -> AttributeFormatError:
        return cls(f"couldn't read bytes to deserialize {what}", what=what)