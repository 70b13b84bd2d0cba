import io

import pytest

from rbxtypes.attribute_codec import (
    from_variant_type,
    read_attributes,
    read_exact_or_none,
    to_variant_type,
    write_attributes,
)
from rbxtypes.basic_types import (
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
from rbxtypes.binary_string import BinaryString
from rbxtypes.brick_color import BrickColor
from rbxtypes.errors import AttributeFormatError
from rbxtypes.variant import Variant, VariantType


def _encode(attributes):
    buffer = io.BytesIO()
    write_attributes(attributes, buffer)
    return buffer.getvalue()


def _decode(data):
    return read_attributes(io.BytesIO(data))


def test_type_id_mapping():
    assert from_variant_type(VariantType.Bool) == 0x03
    assert from_variant_type(VariantType.String) == 0x02
    assert from_variant_type(VariantType.BinaryString) == 0x02
    assert from_variant_type(VariantType.Rect) == 0x1C
    assert from_variant_type(VariantType.Int32) is None
    assert to_variant_type(0x02) is VariantType.BinaryString
    assert to_variant_type(0x19) is VariantType.ColorSequence
    assert to_variant_type(0x01) is None


def test_exact_or_none_empty():
    assert read_exact_or_none(io.BytesIO(b""), 4) is None


@pytest.mark.parametrize("data", [b"\x00", b"\x00\x01", b"\x00\x01\x02"])
def test_exact_or_none_partial(data):
    with pytest.raises(EOFError):
        read_exact_or_none(io.BytesIO(data), 4)


def test_exact_or_none_full():
    assert read_exact_or_none(io.BytesIO(b"\x00\x01\x02\x03"), 4) == b"\x00\x01\x02\x03"


def test_exact_or_none_extra():
    stream = io.BytesIO(b"\x00\x01\x02\x03\x04")
    assert read_exact_or_none(stream, 4) == b"\x00\x01\x02\x03"
    assert stream.read() == b"\x04"


def test_empty_map_writes_nothing():
    assert _encode({}) == b""
    assert _decode(b"") == {}


def test_pinned_bool_encoding():
    data = _encode({"a": Variant(VariantType.Bool, True)})
    assert data == b"\x01\x00\x00\x00\x01\x00\x00\x00a\x03\x01"


def test_round_trip_every_type():
    attributes = {
        "bool": Variant(VariantType.Bool, False),
        "brick": Variant(VariantType.BrickColor, BrickColor.CAMO),
        "color": Variant(VariantType.Color3, Color3(0.5, 0.25, 1.0)),
        "colorseq": Variant(
            VariantType.ColorSequence,
            ColorSequence(
                [
                    ColorSequenceKeypoint(0.0, Color3(1.0, 0.0, 0.0)),
                    ColorSequenceKeypoint(1.0, Color3(0.0, 0.0, 1.0)),
                ]
            ),
        ),
        "f32": Variant(VariantType.Float32, 0.75),
        "f64": Variant(VariantType.Float64, 12345.125),
        "range": Variant(VariantType.NumberRange, NumberRange(5.0, 10.0)),
        "numseq": Variant(
            VariantType.NumberSequence,
            NumberSequence(
                [
                    NumberSequenceKeypoint(0.0, 1.0, 0.5),
                    NumberSequenceKeypoint(1.0, 0.0, 0.0),
                ]
            ),
        ),
        "rect": Variant(VariantType.Rect, Rect(Vector2(1.0, 2.0), Vector2(3.0, 4.0))),
        "binary": Variant(VariantType.BinaryString, BinaryString(b"\x00\xffdata")),
        "udim": Variant(VariantType.UDim, UDim(0.5, -100)),
        "udim2": Variant(VariantType.UDim2, UDim2(UDim(0.5, 10), UDim(0.25, 30))),
        "vec2": Variant(VariantType.Vector2, Vector2(10.0, 50.0)),
        "vec3": Variant(VariantType.Vector3, Vector3(1.0, 2.0, 3.0)),
    }
    decoded = _decode(_encode(attributes))
    assert decoded == attributes
    assert list(decoded) == sorted(attributes)


def test_string_reads_back_as_binary_string():
    decoded = _decode(_encode({"s": Variant(VariantType.String, "hi")}))
    assert decoded == {"s": Variant(VariantType.BinaryString, BinaryString(b"hi"))}


def test_color_sequence_envelope_written_as_zero():
    value = ColorSequence([ColorSequenceKeypoint(0.0, Color3(0.0, 0.0, 0.0))])
    data = _encode({"c": Variant(VariantType.ColorSequence, value)})
    # count, key length, key, type id, keypoint count, then envelope
    assert data[10:14] == b"\x01\x00\x00\x00"
    assert data[14:18] == b"\x00\x00\x00\x00"


def test_unsupported_type_on_write():
    with pytest.raises(AttributeFormatError) as info:
        _encode({"x": Variant(VariantType.Int32, 5)})
    assert info.value.variant_type is VariantType.Int32
    assert "Int32 values are not supported in attributes" in str(info.value)


def test_invalid_length():
    with pytest.raises(AttributeFormatError, match="missing attribute list length"):
        _decode(b"\x01\x00")


def test_missing_key():
    with pytest.raises(AttributeFormatError, match="missing attribute key name"):
        _decode(b"\x01\x00\x00\x00")


def test_key_bad_unicode():
    with pytest.raises(AttributeFormatError, match="invalid UTF-8") as info:
        _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00\xff\x03\x01")
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_missing_value_type():
    with pytest.raises(AttributeFormatError, match="missing attribute value type"):
        _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00a")


def test_invalid_value_type():
    with pytest.raises(AttributeFormatError) as info:
        _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x01")
    assert info.value.type_id == 1
    assert str(info.value) == "invalid value type: 1"


def test_invalid_brick_color():
    with pytest.raises(AttributeFormatError) as info:
        _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x0e\x04\x00\x00\x00")
    assert info.value.value == 4


def test_brick_color_number_truncated_to_16_bits():
    decoded = _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x0e\x01\x00\x01\x00")
    assert decoded == {"a": Variant(VariantType.BrickColor, BrickColor.WHITE)}


def test_truncated_value():
    with pytest.raises(AttributeFormatError) as info:
        _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x03")
    assert info.value.what == "bool"
    assert str(info.value) == "couldn't read bytes to deserialize bool"


def test_truncated_vector3():
    with pytest.raises(AttributeFormatError) as info:
        _decode(b"\x01\x00\x00\x00\x01\x00\x00\x00a\x11\x00\x00\x80\x3f\x00\x00")
    assert info.value.what == "Vector3 Y"