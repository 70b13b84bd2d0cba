import json

import pytest

from rbxtypes.content import Content


def test_default_is_empty():
    assert Content() == ""


def test_round_trip():
    value = Content("rbxassetid://1234")
    assert Content.from_json(json.loads(json.dumps(value.to_json()))) == value


def test_to_json_is_plain_string():
    value = Content("rbxasset://textures/face.png")
    assert value.to_json() == "rbxasset://textures/face.png"
    assert type(value.to_json()) is str


def test_from_json_gives_content():
    value = Content.from_json("rbxassetid://5")
    assert isinstance(value, Content)
    assert value == "rbxassetid://5"


def test_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        Content.from_json(42)


def test_hash_matches_string():
    assert {Content("a"): 1}["a"] == 1