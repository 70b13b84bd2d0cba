import json

import pytest

from rbxtypes.binary_string import BinaryString


def test_human():
    data = BinaryString(b"hello")
    ser = json.dumps(data.to_json())
    assert ser == '"aGVsbG8="'
    assert BinaryString.from_json(json.loads(ser)) == data


def test_non_human():
    data = BinaryString(b"world")
    raw = bytes(data)
    assert BinaryString(raw) == data


def test_default_is_empty():
    assert BinaryString() == b""
    assert len(BinaryString()) == 0


def test_from_json_invalid_base64():
    with pytest.raises(ValueError):
        BinaryString.from_json("not base64!")


def test_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        BinaryString.from_json(5)


def test_from_json_returns_binary_string():
    value = BinaryString.from_json(BinaryString(b"\x00\xff").to_json())
    assert isinstance(value, BinaryString)
    assert value == b"\x00\xff"