"""Basic value types: vectors, colors, regions, UI units and sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable

_F32_EPSILON = 1.1920929e-07


def _f32(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {value!r}")
    return float(value)


def _int_in_range(value: Any, name: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return value


def _i16(value: Any, name: str) -> int:
    return _int_in_range(value, name, -(2**15), 2**15 - 1)


def _i32(value: Any, name: str) -> int:
    return _int_in_range(value, name, -(2**31), 2**31 - 1)


def _u32(value: Any, name: str) -> int:
    return _int_in_range(value, name, 0, 2**32 - 1)


def _u8(value: Any, name: str) -> int:
    return _int_in_range(value, name, 0, 255)


def _instance_of(kind: type) -> Callable[[Any, str], Any]:
    def check(value: Any, name: str) -> Any:
        if not isinstance(value, kind):
            raise TypeError(f"{name} must be a {kind.__name__}, got {value!r}")
        return value

    return check


def _coerce(obj: Any, **converters: Callable[[Any, str], Any]) -> None:
    for name, convert in converters.items():
        object.__setattr__(obj, name, convert(getattr(obj, name), name))


def _sequence(data: Any, length: int, type_name: str) -> list[Any]:
    if not isinstance(data, (list, tuple)):
        raise TypeError(f"expected a list of {length} elements for {type_name}")
    if len(data) != length:
        raise ValueError(
            f"expected {length} elements for {type_name}, got {len(data)}"
        )
    return list(data)


def _mapping(data: Any, keys: tuple[str, ...], type_name: str) -> list[Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected an object for {type_name}")
    missing = [key for key in keys if key not in data]
    if missing:
        raise ValueError(f"missing field '{missing[0]}' for {type_name}")
    return [data[key] for key in keys]


@dataclass(frozen=True)
class EnumValue:
    """Any enum value; its meaning depends on where it is assigned."""

    value: int

    def __post_init__(self) -> None:
        _coerce(self, value=_u32)

    def to_json(self) -> int:
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> EnumValue:
        return cls(data)


@dataclass(frozen=True)
class Vector2:
    """A 2D vector of floats."""

    x: float
    y: float

    def __post_init__(self) -> None:
        _coerce(self, x=_f32, y=_f32)

    def to_json(self) -> list[float]:
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> Vector2:
        return cls(*_sequence(data, 2, "Vector2"))


@dataclass(frozen=True)
class Vector2int16:
    """A 2D vector of signed 16-bit integers."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _coerce(self, x=_i16, y=_i16)

    def to_json(self) -> list[int]:
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> Vector2int16:
        return cls(*_sequence(data, 2, "Vector2int16"))


def _approx_unit_or_zero(value: float) -> int | None:
    if abs(value) <= _F32_EPSILON:
        return 0
    if abs(value) - 1.0 <= _F32_EPSILON:
        return int(math.copysign(1.0, value))
    return None


def _normal_id(position: int, value: int | None) -> int | None:
    if value == 1:
        return position
    if value == -1:
        return position + 3
    return None


@dataclass(frozen=True)
class Vector3:
    """A 3D vector of floats."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        _coerce(self, x=_f32, y=_f32, z=_f32)

    def to_normal_id(self) -> int | None:
        """Return the id of a positive or negative basis vector, or None.

        +X, +Y, +Z map to 0, 1, 2 and -X, -Y, -Z map to 3, 4, 5.
        """
        x = _approx_unit_or_zero(self.x)
        y = _approx_unit_or_zero(self.y)
        z = _approx_unit_or_zero(self.z)
        if None in (x, y, z):
            return None
        if y == 0 and z == 0:
            return _normal_id(0, x)
        if x == 0 and z == 0:
            return _normal_id(1, y)
        if x == 0 and y == 0:
            return _normal_id(2, z)
        return None

    def to_json(self) -> list[float]:
        return [self.x, self.y, self.z]

    @classmethod
    def from_json(cls, data: Any) -> Vector3:
        return cls(*_sequence(data, 3, "Vector3"))


@dataclass(frozen=True)
class Vector3int16:
    """A 3D vector of signed 16-bit integers, often used with terrain."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        _coerce(self, x=_i16, y=_i16, z=_i16)

    def to_json(self) -> list[int]:
        return [self.x, self.y, self.z]

    @classmethod
    def from_json(cls, data: Any) -> Vector3int16:
        return cls(*_sequence(data, 3, "Vector3int16"))


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 rotation matrix stored as three row vectors."""

    x: Vector3
    y: Vector3
    z: Vector3

    def __post_init__(self) -> None:
        check = _instance_of(Vector3)
        _coerce(self, x=check, y=check, z=check)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls(
            Vector3(1.0, 0.0, 0.0),
            Vector3(0.0, 1.0, 0.0),
            Vector3(0.0, 0.0, 1.0),
        )

    def transpose(self) -> Matrix3:
        return Matrix3(
            Vector3(self.x.x, self.y.x, self.z.x),
            Vector3(self.x.y, self.y.y, self.z.y),
            Vector3(self.x.z, self.y.z, self.z.z),
        )

    def to_json(self) -> list[list[float]]:
        return [self.x.to_json(), self.y.to_json(), self.z.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Matrix3:
        return cls(*(Vector3.from_json(row) for row in _sequence(data, 3, "Matrix3")))


@dataclass(frozen=True)
class CFrame:
    """A position and orientation in 3D space."""

    position: Vector3
    orientation: Matrix3

    def __post_init__(self) -> None:
        _coerce(
            self,
            position=_instance_of(Vector3),
            orientation=_instance_of(Matrix3),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "position": self.position.to_json(),
            "orientation": self.orientation.to_json(),
        }

    @classmethod
    def from_json(cls, data: Any) -> CFrame:
        position, orientation = _mapping(data, ("position", "orientation"), "CFrame")
        return cls(Vector3.from_json(position), Matrix3.from_json(orientation))


@dataclass(frozen=True)
class Color3:
    """Any color, including HDR colors whose channels exceed 1."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        _coerce(self, r=_f32, g=_f32, b=_f32)

    @classmethod
    def from_color3uint8(cls, value: Color3uint8) -> Color3:
        return cls(value.r / 255.0, value.g / 255.0, value.b / 255.0)

    def to_json(self) -> list[float]:
        return [self.r, self.g, self.b]

    @classmethod
    def from_json(cls, data: Any) -> Color3:
        return cls(*_sequence(data, 3, "Color3"))


def _channel_to_u8(value: float) -> int:
    clamped = 0.0 if math.isnan(value) else min(max(value, 0.0), 1.0)
    return math.floor(clamped * 255.0 + 0.5)


@dataclass(frozen=True)
class Color3uint8:
    """A non-HDR color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _coerce(self, r=_u8, g=_u8, b=_u8)

    @classmethod
    def from_color3(cls, value: Color3) -> Color3uint8:
        """Convert a Color3, clamping each channel to [0, 1] first."""
        return cls(
            _channel_to_u8(value.r),
            _channel_to_u8(value.g),
            _channel_to_u8(value.b),
        )

    def to_json(self) -> list[int]:
        return [self.r, self.g, self.b]

    @classmethod
    def from_json(cls, data: Any) -> Color3uint8:
        return cls(*_sequence(data, 3, "Color3uint8"))


@dataclass(frozen=True)
class Ray:
    """A ray in 3D space; the direction need not be a unit vector."""

    origin: Vector3
    direction: Vector3

    def __post_init__(self) -> None:
        check = _instance_of(Vector3)
        _coerce(self, origin=check, direction=check)

    def to_json(self) -> dict[str, Any]:
        return {"origin": self.origin.to_json(), "direction": self.direction.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> Ray:
        origin, direction = _mapping(data, ("origin", "direction"), "Ray")
        return cls(Vector3.from_json(origin), Vector3.from_json(direction))


@dataclass(frozen=True)
class Region3:
    """A bounding box in 3D space."""

    min: Vector3
    max: Vector3

    def __post_init__(self) -> None:
        check = _instance_of(Vector3)
        _coerce(self, min=check, max=check)

    def to_json(self) -> list[list[float]]:
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Region3:
        low, high = _sequence(data, 2, "Region3")
        return cls(Vector3.from_json(low), Vector3.from_json(high))


@dataclass(frozen=True)
class Region3int16:
    """A bounding box in 3D space with signed 16-bit integer corners."""

    min: Vector3int16
    max: Vector3int16

    def __post_init__(self) -> None:
        check = _instance_of(Vector3int16)
        _coerce(self, min=check, max=check)

    def to_json(self) -> list[list[int]]:
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Region3int16:
        low, high = _sequence(data, 2, "Region3int16")
        return cls(Vector3int16.from_json(low), Vector3int16.from_json(high))


@dataclass(frozen=True)
class Rect:
    """A bounding rectangle in 2D space."""

    min: Vector2
    max: Vector2

    def __post_init__(self) -> None:
        check = _instance_of(Vector2)
        _coerce(self, min=check, max=check)

    def to_json(self) -> list[list[float]]:
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Rect:
        low, high = _sequence(data, 2, "Rect")
        return cls(Vector2.from_json(low), Vector2.from_json(high))


@dataclass(frozen=True)
class UDim:
    """A UI length: a fraction of the container plus a pixel offset."""

    scale: float
    offset: int

    def __post_init__(self) -> None:
        _coerce(self, scale=_f32, offset=_i32)

    def to_json(self) -> list[Any]:
        return [self.scale, self.offset]

    @classmethod
    def from_json(cls, data: Any) -> UDim:
        return cls(*_sequence(data, 2, "UDim"))


@dataclass(frozen=True)
class UDim2:
    """A 2D UI size or position made of two UDims."""

    x: UDim
    y: UDim

    def __post_init__(self) -> None:
        check = _instance_of(UDim)
        _coerce(self, x=check, y=check)

    def to_json(self) -> list[list[Any]]:
        return [self.x.to_json(), self.y.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> UDim2:
        x, y = _sequence(data, 2, "UDim2")
        return cls(UDim.from_json(x), UDim.from_json(y))


@dataclass(frozen=True)
class NumberRange:
    """A range between two numbers."""

    min: float
    max: float

    def __post_init__(self) -> None:
        _coerce(self, min=_f32, max=_f32)

    def to_json(self) -> list[float]:
        return [self.min, self.max]

    @classmethod
    def from_json(cls, data: Any) -> NumberRange:
        return cls(*_sequence(data, 2, "NumberRange"))


@dataclass(frozen=True)
class ColorSequenceKeypoint:
    """A single color at a point in time of a ColorSequence."""

    time: float
    color: Color3

    def __post_init__(self) -> None:
        _coerce(self, time=_f32, color=_instance_of(Color3))

    def to_json(self) -> dict[str, Any]:
        return {"time": self.time, "color": self.color.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> ColorSequenceKeypoint:
        time, color = _mapping(data, ("time", "color"), "ColorSequenceKeypoint")
        return cls(time, Color3.from_json(color))


@dataclass
class ColorSequence:
    """A series of colors that can be tweened through."""

    keypoints: list[ColorSequenceKeypoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.keypoints = [
            _instance_of(ColorSequenceKeypoint)(keypoint, "keypoint")
            for keypoint in self.keypoints
        ]

    def to_json(self) -> dict[str, Any]:
        return {"keypoints": [keypoint.to_json() for keypoint in self.keypoints]}

    @classmethod
    def from_json(cls, data: Any) -> ColorSequence:
        (keypoints,) = _mapping(data, ("keypoints",), "ColorSequence")
        if not isinstance(keypoints, (list, tuple)):
            raise TypeError("keypoints must be a list")
        return cls([ColorSequenceKeypoint.from_json(item) for item in keypoints])


@dataclass(frozen=True)
class NumberSequenceKeypoint:
    """A single value, envelope and point in time of a NumberSequence."""

    time: float
    value: float
    envelope: float

    def __post_init__(self) -> None:
        _coerce(self, time=_f32, value=_f32, envelope=_f32)

    def to_json(self) -> dict[str, float]:
        return {"time": self.time, "value": self.value, "envelope": self.envelope}

    @classmethod
    def from_json(cls, data: Any) -> NumberSequenceKeypoint:
        return cls(*_mapping(data, ("time", "value", "envelope"), "NumberSequenceKeypoint"))


@dataclass
class NumberSequence:
    """A sequence of numbers on a timeline."""

    keypoints: list[NumberSequenceKeypoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.keypoints = [
            _instance_of(NumberSequenceKeypoint)(keypoint, "keypoint")
            for keypoint in self.keypoints
        ]

    def to_json(self) -> dict[str, Any]:
        return {"keypoints": [keypoint.to_json() for keypoint in self.keypoints]}

    @classmethod
    def from_json(cls, data: Any) -> NumberSequence:
        (keypoints,) = _mapping(data, ("keypoints",), "NumberSequence")
        if not isinstance(keypoints, (list, tuple)):
            raise TypeError("keypoints must be a list")
        return cls([NumberSequenceKeypoint.from_json(item) for item in keypoints])