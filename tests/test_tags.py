import json

import pytest

from rbxtypes.tags import Tags


def test_serialization():
    serialized = '["foo","grandma\'s","coat?","bar"]'
    expected = Tags(["foo", "grandma's", "coat?", "bar"])
    assert json.dumps(expected.to_json(), separators=(",", ":")) == serialized
    assert Tags.from_json(json.loads(serialized)) == expected


def test_decode_encode():
    value = b"ez\0pz"
    tags = Tags.decode(value)
    assert list(tags) == ["ez", "pz"]
    assert tags.encode() == value


def test_decode_empty():
    assert list(Tags.decode(b"")) == []


def test_decode_skips_empty_names():
    assert list(Tags.decode(b"\0a\0\0b\0")) == ["a", "b"]


def test_decode_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        Tags.decode(b"ok\0\xff\xfe")


def test_push_and_len():
    tags = Tags()
    tags.push("one")
    tags.push("one")
    assert len(tags) == 2
    assert list(tags) == ["one", "one"]


def test_constructor_copies_input():
    source = ["a"]
    tags = Tags(source)
    source.append("b")
    assert list(tags) == ["a"]


def test_from_json_rejects_non_strings():
    with pytest.raises(TypeError):
        Tags.from_json(["a", 1])