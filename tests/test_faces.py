import json

import pytest

from rbxtypes.faces import Faces


def _dumps(value):
    return json.dumps(value, separators=(",", ":"))


def test_human_de():
    assert Faces.from_json(json.loads("[]")) == Faces.empty()
    assert Faces.from_json(json.loads('["Right"]')) == Faces.RIGHT
    all_faces = Faces.from_json(
        json.loads('["Right", "Top", "Back", "Left", "Bottom", "Front"]')
    )
    assert all_faces == Faces.all()


def test_human_ser():
    assert _dumps(Faces.empty().to_json()) == "[]"
    assert _dumps(Faces.LEFT.to_json()) == '["Left"]'
    assert _dumps(Faces.all().to_json()) == '["Right","Top","Back","Left","Bottom","Front"]'


def test_human_duplicate():
    value = Faces.from_json(json.loads('["Right", "Right", "Right", "Right"]'))
    assert value == Faces.RIGHT


def test_human_invalid():
    with pytest.raises(ValueError):
        Faces.from_json(json.loads('["calzone"]'))


@pytest.mark.parametrize("value", [Faces.empty(), Faces.RIGHT, Faces.all()])
def test_non_human(value):
    assert Faces.from_bits(value.bits()) == value


def test_from_bits_rejects_unknown_bits():
    assert Faces.from_bits(64) is None


def test_contains():
    value = Faces.TOP | Faces.FRONT
    assert value.contains(Faces.TOP)
    assert value.contains(Faces.FRONT)
    assert not value.contains(Faces.BACK)
    assert Faces.all().contains(value)


def test_bits_of_constants():
    assert Faces.RIGHT.bits() == 1
    assert Faces.FRONT.bits() == 32
    assert Faces.all().bits() == 63


def test_from_json_rejects_non_list():
    with pytest.raises(TypeError):
        Faces.from_json({"Right": True})