"""Binary encoding of attribute maps (the AttributesSerialize property)."""

from __future__ import annotations

import struct
from contextlib import contextmanager
from typing import Any, BinaryIO, Callable, Iterator, Mapping

from .basic_types import (
    Color3,
    ColorSequence,
    ColorSequenceKeypoint,
    NumberRange,
    NumberSequence,
    NumberSequenceKeypoint,
    Rect,
    UDim,
    UDim2,
    Vector2,
    Vector3,
)
from .binary_string import BinaryString
from .brick_color import BrickColor
from .errors import AttributeFormatError
from .variant import Variant, VariantType

_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")

_TYPE_IDS: dict[VariantType, int] = {
    VariantType.BinaryString: 0x02,
    VariantType.Bool: 0x03,
    VariantType.Float32: 0x05,
    VariantType.Float64: 0x06,
    VariantType.UDim: 0x09,
    VariantType.UDim2: 0x0A,
    VariantType.BrickColor: 0x0E,
    VariantType.Color3: 0x0F,
    VariantType.Vector2: 0x10,
    VariantType.Vector3: 0x11,
    VariantType.NumberSequence: 0x17,
    VariantType.ColorSequence: 0x19,
    VariantType.NumberRange: 0x1B,
    VariantType.Rect: 0x1C,
}
_VARIANT_TYPES: dict[int, VariantType] = {
    type_id: variant_type for variant_type, type_id in _TYPE_IDS.items()
}


def from_variant_type(variant_type: VariantType) -> int | None:
    """Return the attribute type id used to write a variant type, if any."""
    if variant_type is VariantType.String:
        return 0x02
    return _TYPE_IDS.get(variant_type)


def to_variant_type(type_id: int) -> VariantType | None:
    """Return the variant type an attribute type id is read as, if any."""
    return _VARIANT_TYPES.get(type_id)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(size - len(chunks))
        if not chunk:
            raise EOFError("failed to fill whole buffer")
        chunks += chunk
    return bytes(chunks)


def read_exact_or_none(stream: BinaryIO, size: int) -> bytes | None:
    """Read exactly ``size`` bytes, or return None if the stream is at its end.

    Raises EOFError if the stream ends part way through.
    """
    chunks = bytearray()
    while len(chunks) < size:
        chunk = stream.read(size - len(chunks))
        if not chunk:
            break
        chunks += chunk
    if not chunks and size:
        return None
    if len(chunks) < size:
        raise EOFError("failed to fill whole buffer")
    return bytes(chunks)


class _Reader:
    __slots__ = ("_stream",)

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def exact(self, size: int) -> bytes:
        return _read_exact(self._stream, size)

    def u8(self) -> int:
        return self.exact(1)[0]

    def u32(self) -> int:
        return _U32.unpack(self.exact(4))[0]

    def i32(self) -> int:
        return _I32.unpack(self.exact(4))[0]

    def f32(self) -> float:
        return _F32.unpack(self.exact(4))[0]

    def f64(self) -> float:
        return _F64.unpack(self.exact(8))[0]

    def string(self) -> bytes:
        return self.exact(self.u32())

    def color3(self) -> Color3:
        r = self.f32()
        g = self.f32()
        b = self.f32()
        return Color3(r, g, b)

    def udim(self) -> UDim:
        scale = self.f32()
        offset = self.i32()
        return UDim(scale, offset)

    def vector2(self) -> Vector2:
        x = self.f32()
        y = self.f32()
        return Vector2(x, y)


@contextmanager
def _reading(what: str) -> Iterator[None]:
    try:
        yield
    except (EOFError, OSError) as exc:
        raise AttributeFormatError.read_type(what) from exc


def _read_brick_color(reader: _Reader) -> BrickColor:
    with _reading("BrickColor"):
        number = reader.u32()
    color = BrickColor.from_number(number & 0xFFFF)
    if color is None:
        raise AttributeFormatError.invalid_brick_color(number)
    return color


def _read_bool(reader: _Reader) -> bool:
    with _reading("bool"):
        return reader.u8() != 0


def _read_color3(reader: _Reader) -> Color3:
    with _reading("Color3"):
        return reader.color3()


def _read_color_sequence(reader: _Reader) -> ColorSequence:
    with _reading("ColorSequence length"):
        size = reader.u32()
    keypoints = []
    for _ in range(size):
        # The envelope is always zero and carries no information.
        with _reading("ColorSequenceKeypoint envelope"):
            reader.f32()
        with _reading("ColorSequenceKeypoint time"):
            time = reader.f32()
        with _reading("ColorSequenceKeypoint color"):
            color = reader.color3()
        keypoints.append(ColorSequenceKeypoint(time, color))
    return ColorSequence(keypoints)


def _read_float32(reader: _Reader) -> float:
    with _reading("float32"):
        return reader.f32()


def _read_float64(reader: _Reader) -> float:
    with _reading("float64"):
        return reader.f64()


def _read_number_range(reader: _Reader) -> NumberRange:
    with _reading("NumberRange min"):
        low = reader.f32()
    with _reading("NumberRange max"):
        high = reader.f32()
    return NumberRange(low, high)


def _read_number_sequence(reader: _Reader) -> NumberSequence:
    with _reading("NumberSequence length"):
        size = reader.u32()
    keypoints = []
    for _ in range(size):
        with _reading("NumberSequence envelope"):
            envelope = reader.f32()
        with _reading("NumberSequence time"):
            time = reader.f32()
        with _reading("NumberSequence value"):
            value = reader.f32()
        keypoints.append(NumberSequenceKeypoint(time, value, envelope))
    return NumberSequence(keypoints)


def _read_rect(reader: _Reader) -> Rect:
    with _reading("Rect min"):
        low = reader.vector2()
    with _reading("Rect max"):
        high = reader.vector2()
    return Rect(low, high)


def _read_binary_string(reader: _Reader) -> BinaryString:
    with _reading("string"):
        return BinaryString(reader.string())


def _read_udim(reader: _Reader) -> UDim:
    with _reading("UDim"):
        return reader.udim()


def _read_udim2(reader: _Reader) -> UDim2:
    with _reading("UDim2 X"):
        x = reader.udim()
    with _reading("UDim2 Y"):
        y = reader.udim()
    return UDim2(x, y)


def _read_vector2(reader: _Reader) -> Vector2:
    with _reading("Vector2 X"):
        x = reader.f32()
    with _reading("Vector2 Y"):
        y = reader.f32()
    return Vector2(x, y)


def _read_vector3(reader: _Reader) -> Vector3:
    with _reading("Vector3 X"):
        x = reader.f32()
    with _reading("Vector3 Y"):
        y = reader.f32()
    with _reading("Vector3 Z"):
        z = reader.f32()
    return Vector3(x, y, z)


_VALUE_READERS: dict[VariantType, Callable[[_Reader], Any]] = {
    VariantType.BrickColor: _read_brick_color,
    VariantType.Bool: _read_bool,
    VariantType.Color3: _read_color3,
    VariantType.ColorSequence: _read_color_sequence,
    VariantType.Float32: _read_float32,
    VariantType.Float64: _read_float64,
    VariantType.NumberRange: _read_number_range,
    VariantType.NumberSequence: _read_number_sequence,
    VariantType.Rect: _read_rect,
    VariantType.BinaryString: _read_binary_string,
    VariantType.UDim: _read_udim,
    VariantType.UDim2: _read_udim2,
    VariantType.Vector2: _read_vector2,
    VariantType.Vector3: _read_vector3,
}


def read_attributes(stream: BinaryIO) -> dict[str, Variant]:
    """Read an attribute blob into a dict of names to values, sorted by name.

    An empty stream holds no attributes.
    """
    reader = _Reader(stream)
    attributes: dict[str, Variant] = {}

    try:
        header = read_exact_or_none(stream, 4)
    except (EOFError, OSError) as exc:
        raise AttributeFormatError.invalid_length() from exc
    if header is None:
        return attributes
    (count,) = _U32.unpack(header)

    for _ in range(count):
        try:
            key_bytes = reader.string()
        except (EOFError, OSError) as exc:
            raise AttributeFormatError.no_key() from exc
        try:
            key = key_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise AttributeFormatError.key_bad_unicode(exc) from exc

        try:
            type_id = reader.u8()
        except (EOFError, OSError) as exc:
            raise AttributeFormatError.no_value_type() from exc
        variant_type = to_variant_type(type_id)
        if variant_type is None:
            raise AttributeFormatError.invalid_value_type(type_id)

        read_value = _VALUE_READERS.get(variant_type)
        if read_value is None:
            raise AttributeFormatError.unsupported_variant_type(variant_type)
        attributes[key] = Variant(variant_type, read_value(reader))

    return dict(sorted(attributes.items()))


def _write_u32(stream: BinaryIO, value: int) -> None:
    stream.write(_U32.pack(value))


def _write_f32(stream: BinaryIO, value: float) -> None:
    stream.write(_F32.pack(value))


def _write_string(stream: BinaryIO, data: bytes) -> None:
    _write_u32(stream, len(data))
    stream.write(data)


def _write_color3(stream: BinaryIO, color: Color3) -> None:
    _write_f32(stream, color.r)
    _write_f32(stream, color.g)
    _write_f32(stream, color.b)


def _write_udim(stream: BinaryIO, udim: UDim) -> None:
    _write_f32(stream, udim.scale)
    stream.write(_I32.pack(udim.offset))


def _write_vector2(stream: BinaryIO, vector: Vector2) -> None:
    _write_f32(stream, vector.x)
    _write_f32(stream, vector.y)


def _write_color_sequence(stream: BinaryIO, sequence: ColorSequence) -> None:
    _write_u32(stream, len(sequence.keypoints))
    for keypoint in sequence.keypoints:
        _write_f32(stream, 0.0)
        _write_f32(stream, keypoint.time)
        _write_color3(stream, keypoint.color)


def _write_number_sequence(stream: BinaryIO, sequence: NumberSequence) -> None:
    _write_u32(stream, len(sequence.keypoints))
    for keypoint in sequence.keypoints:
        _write_f32(stream, keypoint.envelope)
        _write_f32(stream, keypoint.time)
        _write_f32(stream, keypoint.value)


def _write_number_range(stream: BinaryIO, value: NumberRange) -> None:
    _write_f32(stream, value.min)
    _write_f32(stream, value.max)


def _write_rect(stream: BinaryIO, rect: Rect) -> None:
    _write_vector2(stream, rect.min)
    _write_vector2(stream, rect.max)


def _write_udim2(stream: BinaryIO, udim2: UDim2) -> None:
    _write_udim(stream, udim2.x)
    _write_udim(stream, udim2.y)


def _write_vector3(stream: BinaryIO, vector: Vector3) -> None:
    _write_f32(stream, vector.x)
    _write_f32(stream, vector.y)
    _write_f32(stream, vector.z)


_VALUE_WRITERS: dict[VariantType, Callable[[BinaryIO, Any], None]] = {
    VariantType.Bool: lambda stream, value: stream.write(bytes([int(value)])),
    VariantType.BrickColor: lambda stream, value: _write_u32(stream, value.value),
    VariantType.Color3: _write_color3,
    VariantType.ColorSequence: _write_color_sequence,
    VariantType.Float32: _write_f32,
    VariantType.Float64: lambda stream, value: stream.write(_F64.pack(value)),
    VariantType.NumberRange: _write_number_range,
    VariantType.NumberSequence: _write_number_sequence,
    VariantType.Rect: _write_rect,
    VariantType.BinaryString: lambda stream, value: _write_string(stream, bytes(value)),
    VariantType.String: lambda stream, value: _write_string(stream, value.encode("utf-8")),
    VariantType.UDim: _write_udim,
    VariantType.UDim2: _write_udim2,
    VariantType.Vector2: _write_vector2,
    VariantType.Vector3: _write_vector3,
}


def write_attributes(attributes: Mapping[str, Variant], stream: BinaryIO) -> None:
    """Write a mapping of names to values as an attribute blob.

    Entries are written in name order; an empty mapping writes nothing.
    """
    if not attributes:
        return

    _write_u32(stream, len(attributes))
    for name in sorted(attributes):
        variant = attributes[name]
        type_id = from_variant_type(variant.type)
        if type_id is None:
            raise AttributeFormatError.unsupported_variant_type(variant.type)
        _write_string(stream, name.encode("utf-8"))
        stream.write(bytes([type_id]))
        _VALUE_WRITERS[variant.type](stream, variant.value)