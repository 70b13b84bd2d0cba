"""A tagged union over every value type this package understands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .axes import Axes
from .basic_types import (
    CFrame,
    Color3,
    Color3uint8,
    ColorSequence,
    EnumValue,
    NumberRange,
    NumberSequence,
    Ray,
    Rect,
    Region3,
    Region3int16,
    UDim,
    UDim2,
    Vector2,
    Vector2int16,
    Vector3,
    Vector3int16,
)
from .binary_string import BinaryString
from .brick_color import BrickColor
from .content import Content
from .faces import Faces
from .physical_properties import PhysicalProperties
from .referent import Ref
from .shared_string import SharedString
from .tags import Tags


class VariantType(Enum):
    """Every kind of value a Variant can hold.

    The numeric values are stable; new kinds are only ever added at the end.
    """

    Axes = 0
    BinaryString = 1
    Bool = 2
    BrickColor = 3
    CFrame = 4
    Color3 = 5
    Color3uint8 = 6
    ColorSequence = 7
    Content = 8
    Enum = 9
    Faces = 10
    Float32 = 11
    Float64 = 12
    Int32 = 13
    Int64 = 14
    NumberRange = 15
    NumberSequence = 16
    PhysicalProperties = 17
    Ray = 18
    Rect = 19
    Ref = 20
    Region3 = 21
    Region3int16 = 22
    SharedString = 23
    String = 24
    UDim = 25
    UDim2 = 26
    Vector2 = 27
    Vector2int16 = 28
    Vector3 = 29
    Vector3int16 = 30
    OptionalCFrame = 31
    Tags = 32
    Attributes = 33


_CLASS_TYPES: dict[VariantType, type] = {
    VariantType.Axes: Axes,
    VariantType.BinaryString: BinaryString,
    VariantType.BrickColor: BrickColor,
    VariantType.CFrame: CFrame,
    VariantType.Color3: Color3,
    VariantType.Color3uint8: Color3uint8,
    VariantType.ColorSequence: ColorSequence,
    VariantType.Content: Content,
    VariantType.Enum: EnumValue,
    VariantType.Faces: Faces,
    VariantType.NumberRange: NumberRange,
    VariantType.NumberSequence: NumberSequence,
    VariantType.PhysicalProperties: PhysicalProperties,
    VariantType.Ray: Ray,
    VariantType.Rect: Rect,
    VariantType.Ref: Ref,
    VariantType.Region3: Region3,
    VariantType.Region3int16: Region3int16,
    VariantType.UDim: UDim,
    VariantType.UDim2: UDim2,
    VariantType.Vector2: Vector2,
    VariantType.Vector2int16: Vector2int16,
    VariantType.Vector3: Vector3,
    VariantType.Vector3int16: Vector3int16,
    VariantType.Tags: Tags,
}

_SHARED_STRING_MESSAGE = "SharedString cannot be {} as part of a Variant"


def _attributes_class() -> type:
    from .attributes import Attributes

    return Attributes


def _check_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a bool, got {value!r}")
    return value


def _check_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


def _int_checker(bits: int) -> Callable[[Any], int]:
    low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1

    def check(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {value!r}")
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
        return value

    return check


def _check_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _check_optional_cframe(value: Any) -> CFrame | None:
    if value is not None and not isinstance(value, CFrame):
        raise TypeError(f"expected a CFrame or None, got {value!r}")
    return value


def _check_shared_string(value: Any) -> SharedString:
    if not isinstance(value, SharedString):
        raise TypeError(f"expected a SharedString, got {value!r}")
    return value


def _check_attributes(value: Any) -> Any:
    attributes_class = _attributes_class()
    if not isinstance(value, attributes_class):
        raise TypeError(f"expected Attributes, got {value!r}")
    return value


_PRIMITIVE_CHECKS: dict[VariantType, Callable[[Any], Any]] = {
    VariantType.Bool: _check_bool,
    VariantType.Float32: _check_float,
    VariantType.Float64: _check_float,
    VariantType.Int32: _int_checker(32),
    VariantType.Int64: _int_checker(64),
    VariantType.String: _check_str,
    VariantType.OptionalCFrame: _check_optional_cframe,
    VariantType.SharedString: _check_shared_string,
    VariantType.Attributes: _check_attributes,
}


def _validate(variant_type: VariantType, value: Any) -> Any:
    kind = _CLASS_TYPES.get(variant_type)
    if kind is not None:
        if not isinstance(value, kind):
            raise TypeError(
                f"{variant_type.name} variant expects a {kind.__name__}, got {value!r}"
            )
        return value
    return _PRIMITIVE_CHECKS[variant_type](value)


@dataclass(frozen=True)
class Variant:
    """Any value, tagged with its VariantType."""

    type: VariantType
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.type, VariantType):
            raise TypeError(f"expected a VariantType, got {self.type!r}")
        object.__setattr__(self, "value", _validate(self.type, self.value))

    @classmethod
    def of(cls, value: Any) -> Variant:
        """Wrap a value, choosing the variant type from its Python type.

        Python ints become Int64, floats Float64 and None an empty
        OptionalCFrame.
        """
        if isinstance(value, Variant):
            return value
        if isinstance(value, bool):
            return cls(VariantType.Bool, value)
        if isinstance(value, Content):
            return cls(VariantType.Content, value)
        if isinstance(value, str):
            return cls(VariantType.String, value)
        if isinstance(value, int):
            return cls(VariantType.Int64, value)
        if isinstance(value, float):
            return cls(VariantType.Float64, value)
        if value is None:
            return cls(VariantType.OptionalCFrame, None)
        if isinstance(value, SharedString):
            return cls(VariantType.SharedString, value)
        for variant_type, kind in _CLASS_TYPES.items():
            if isinstance(value, kind):
                return cls(variant_type, value)
        if isinstance(value, _attributes_class()):
            return cls(VariantType.Attributes, value)
        raise TypeError(f"cannot convert {value!r} into a Variant")

    def to_json(self) -> dict[str, Any]:
        """Encode as a one-key object naming the variant type."""
        if self.type is VariantType.SharedString:
            raise ValueError(_SHARED_STRING_MESSAGE.format("serialized"))
        if self.type is VariantType.OptionalCFrame:
            inner = None if self.value is None else self.value.to_json()
        elif self.type in _CLASS_TYPES or self.type is VariantType.Attributes:
            inner = self.value.to_json()
        else:
            inner = self.value
        return {self.type.name: inner}

    @classmethod
    def from_json(cls, data: Any) -> Variant:
        if not isinstance(data, dict) or len(data) != 1:
            raise TypeError("expected an object with exactly one variant key")
        ((name, inner),) = data.items()
        try:
            variant_type = VariantType[name]
        except KeyError:
            raise ValueError(f"unknown variant '{name}'") from None

        if variant_type is VariantType.SharedString:
            raise ValueError(_SHARED_STRING_MESSAGE.format("deserialized"))
        kind = _CLASS_TYPES.get(variant_type)
        if kind is not None:
            return cls(variant_type, kind.from_json(inner))  # type: ignore[attr-defined]
        if variant_type is VariantType.OptionalCFrame:
            return cls(variant_type, None if inner is None else CFrame.from_json(inner))
        if variant_type is VariantType.Attributes:
            return cls(variant_type, _attributes_class().from_json(inner))  # type: ignore[attr-defined]
        return cls(variant_type, inner)