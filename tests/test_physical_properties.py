import json

import pytest

from rbxtypes.physical_properties import CustomPhysicalProperties, PhysicalProperties


def dumps(value):
    return json.dumps(value, separators=(",", ":"))


def sample_custom():
    return CustomPhysicalProperties(
        density=1.0,
        friction=0.5,
        elasticity=0.0,
        elasticity_weight=5.0,
        friction_weight=6.0,
    )


def test_json_default():
    default = PhysicalProperties.default()
    assert dumps(default.to_json()) == '"Default"'
    assert PhysicalProperties.from_json(json.loads('"Default"')) == default
    assert default.is_default() is True


def test_json_custom():
    custom = PhysicalProperties.from_custom(sample_custom())
    ser = dumps(custom.to_json())
    assert ser == (
        '{"density":1.0,"friction":0.5,"elasticity":0.0,'
        '"frictionWeight":6.0,"elasticityWeight":5.0}'
    )
    assert PhysicalProperties.from_json(json.loads(ser)) == custom
    assert custom.is_default() is False


def test_custom_round_trip_through_struct():
    value = sample_custom()
    assert CustomPhysicalProperties.from_json(value.to_json()) == value


def test_invalid_string_rejected():
    with pytest.raises(ValueError):
        PhysicalProperties.from_json("Custom")


def test_missing_field_rejected():
    with pytest.raises(ValueError):
        PhysicalProperties.from_json({"density": 1.0})


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        PhysicalProperties.from_json(5)


def test_default_differs_from_custom():
    assert PhysicalProperties.default() != PhysicalProperties.from_custom(sample_custom())