import json

import pytest

from rbxtypes.axes import Axes


def _dumps(value):
    return json.dumps(value, separators=(",", ":"))


def test_human_de():
    assert Axes.from_json(json.loads("[]")) == Axes.empty()
    assert Axes.from_json(json.loads('["X"]')) == Axes.X
    assert Axes.from_json(json.loads('["X", "Y", "Z"]')) == Axes.all()


def test_human_ser():
    assert _dumps(Axes.empty().to_json()) == "[]"
    assert _dumps(Axes.X.to_json()) == '["X"]'
    assert _dumps(Axes.all().to_json()) == '["X","Y","Z"]'


def test_human_duplicate():
    assert Axes.from_json(json.loads('["X", "X", "X", "X"]')) == Axes.X


def test_human_invalid():
    with pytest.raises(ValueError):
        Axes.from_json(json.loads('["pizza"]'))


@pytest.mark.parametrize("value", [Axes.empty(), Axes.X, Axes.all()])
def test_non_human(value):
    assert Axes.from_bits(value.bits()) == value


def test_from_bits_rejects_unknown_bits():
    assert Axes.from_bits(8) is None
    assert Axes.from_bits(255) is None


def test_contains():
    xy = Axes.X | Axes.Y
    assert xy.contains(Axes.X)
    assert xy.contains(Axes.Y)
    assert not xy.contains(Axes.Z)
    assert Axes.all().contains(xy)
    assert xy.contains(Axes.empty())


def test_bits_of_constants():
    assert Axes.X.bits() == 1
    assert Axes.Y.bits() == 2
    assert Axes.Z.bits() == 4
    assert Axes.all().bits() == 7


def test_from_json_rejects_non_list():
    with pytest.raises(TypeError):
        Axes.from_json("X")


def test_hash_matches_equality():
    assert {Axes.X, Axes.from_bits(1)} == {Axes.X}