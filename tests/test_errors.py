import enum

import pytest

from rbxtypes.errors import AttributeFormatError, RbxTypesError


class _Kind(enum.Enum):
    Ref = 20


def test_invalid_length_message():
    err = AttributeFormatError.invalid_length()
    assert str(err) == "missing attribute list length"
    assert isinstance(err, RbxTypesError)


def test_no_key_message():
    assert str(AttributeFormatError.no_key()) == "missing attribute key name"


def test_no_value_type_message():
    assert str(AttributeFormatError.no_value_type()) == "missing attribute value type"


def test_key_bad_unicode_keeps_cause():
    try:
        b"\xff".decode("utf-8")
    except UnicodeDecodeError as exc:
        cause = exc
    err = AttributeFormatError.key_bad_unicode(cause)
    assert str(err) == "attribute key contained invalid UTF-8"
    assert err.__cause__ is cause


def test_invalid_value_type_carries_id():
    err = AttributeFormatError.invalid_value_type(200)
    assert err.type_id == 200
    assert str(err).endswith("200")


def test_unsupported_variant_type_uses_name():
    err = AttributeFormatError.unsupported_variant_type(_Kind.Ref)
    assert err.variant_type is _Kind.Ref
    assert str(err).startswith("Ref ")


def test_invalid_brick_color_carries_value():
    err = AttributeFormatError.invalid_brick_color(9999)
    assert err.value == 9999
    assert "9999" in str(err)


def test_read_type_carries_what():
    err = AttributeFormatError.read_type("Vector3 X")
    assert err.what == "Vector3 X"
    assert str(err).endswith("Vector3 X")


def test_can_be_raised_and_caught_as_base():
    err = AttributeFormatError.read_type("Color3")
    with pytest.raises(RbxTypesError) as excinfo:
        raise err
    assert excinfo.value is err
    assert excinfo.value.what == "Color3"
    assert str(excinfo.value).endswith("Color3")