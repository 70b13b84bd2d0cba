"""Physical properties that parts can have."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

_JSON_KEYS = {
    "density": "density",
    "friction": "friction",
    "elasticity": "elasticity",
    "friction_weight": "frictionWeight",
    "elasticity_weight": "elasticityWeight",
}


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class CustomPhysicalProperties:
    """Custom physics properties for a part."""

    density: float
    friction: float
    elasticity: float
    friction_weight: float
    elasticity_weight: float

    def __post_init__(self) -> None:
        for item in fields(self):
            object.__setattr__(
                self, item.name, _as_float(getattr(self, item.name), item.name)
            )

    def to_json(self) -> dict[str, float]:
        return {key: getattr(self, attr) for attr, key in _JSON_KEYS.items()}

    @classmethod
    def from_json(cls, data: Any) -> CustomPhysicalProperties:
        if not isinstance(data, dict):
            raise TypeError("expected an object for CustomPhysicalProperties")
        values = {}
        for attr, key in _JSON_KEYS.items():
            if key not in data:
                raise ValueError(f"missing field '{key}'")
            values[attr] = data[key]
        return cls(**values)


@dataclass(frozen=True)
class PhysicalProperties:
    """Either the default physical properties or a custom set."""

    custom: CustomPhysicalProperties | None = None

    def __post_init__(self) -> None:
        if self.custom is not None and not isinstance(
            self.custom, CustomPhysicalProperties
        ):
            raise TypeError("custom must be CustomPhysicalProperties or None")

    @classmethod
    def default(cls) -> PhysicalProperties:
        return cls(None)

    @classmethod
    def from_custom(cls, custom: CustomPhysicalProperties) -> PhysicalProperties:
        return cls(custom)

    def is_default(self) -> bool:
        return self.custom is None

    def to_json(self) -> str | dict[str, float]:
        if self.custom is None:
            return "Default"
        return self.custom.to_json()

    @classmethod
    def from_json(cls, data: Any) -> PhysicalProperties:
        if isinstance(data, str):
            if data == "Default":
                return cls.default()
            raise ValueError(
                f'invalid value "{data}", expected the string "Default" '
                "or a CustomPhysicalProperties struct"
            )
        if isinstance(data, dict):
            return cls.from_custom(CustomPhysicalProperties.from_json(data))
        raise TypeError(
            'expected the string "Default" or a CustomPhysicalProperties struct'
        )