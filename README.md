# rbxtypes

Plain Python value types for the data held in Roblox instances: vectors,
colors, CFrames, UDims, sequences, BrickColors, referents, tags, shared
strings, physical properties and instance attributes.

Most types convert to and from a JSON-friendly structure with `to_json()` and
`from_json()`, and attribute maps can be read from and written to Roblox's
binary attribute format.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install .[test]
pytest
```

## Quick look

```python
import io

from rbxtypes.attributes import Attributes
from rbxtypes.basic_types import Vector3
from rbxtypes.brick_color import BrickColor
from rbxtypes.referent import Ref
from rbxtypes.tags import Tags
from rbxtypes.variant import Variant

# Basic value types
up = Vector3(0.0, 1.0, 0.0)
print(up.to_normal_id())          # 1
print(up.to_json())               # [0.0, 1.0, 0.0]

# BrickColors by name or by number
print(BrickColor.from_name("Pastel brown"))   # Pastel brown
print(BrickColor.from_number(1030).to_json())  # 1030

# Referents print as 32 hex digits
print(Ref.none())                 # 00000000000000000000000000000000
ref = Ref.from_str("0000000000000000000000000000001e")

# Tags are stored NUL-delimited
tags = Tags.decode(b"ez\0pz")
print(list(tags), tags.encode())  # ['ez', 'pz'] b'ez\x00pz'

# Attributes round-trip through the binary format
attrs = Attributes().with_attribute("hello", 5.0)
buffer = io.BytesIO()
attrs.to_writer(buffer)
buffer.seek(0)
assert Attributes.from_reader(buffer) == attrs
print(attrs.to_json())            # {'hello': {'Float64': 5.0}}
```

## Modules

- `rbxtypes.basic_types`: `EnumValue`, `Vector2`, `Vector2int16`, `Vector3`,
  `Vector3int16`, `CFrame`, `Matrix3`, `Color3`, `Color3uint8`, `Ray`,
  `Region3`, `Region3int16`, `Rect`, `UDim`, `UDim2`, `NumberRange`,
  `ColorSequence`, `ColorSequenceKeypoint`, `NumberSequence` and
  `NumberSequenceKeypoint`. Constructors check field types and integer
  ranges and raise `TypeError` or `ValueError`.
- `rbxtypes.axes`, `rbxtypes.faces`: `Axes` and `Faces`, bit sets of axes and
  cube faces, with `from_bits()`, `contains()` and `|`.
- `rbxtypes.brick_color`: the `BrickColor` palette enum, looked up with
  `from_name()` or `from_number()`.
- `rbxtypes.referent`: `Ref`, an optional 128-bit instance reference.
- `rbxtypes.shared_string`: `SharedString`, binary data deduplicated by its
  BLAKE2b hash for as long as any holder is alive, and `SharedStringHash`.
- `rbxtypes.physical_properties`: `PhysicalProperties` (default or custom) and
  `CustomPhysicalProperties`.
- `rbxtypes.binary_string`, `rbxtypes.content`, `rbxtypes.tags`:
  `BinaryString` (a `bytes` subclass, base64 in JSON), `Content` (a `str`
  subclass) and `Tags`.
- `rbxtypes.variant`: `Variant` and `VariantType`, a tagged union of all
  types. `Variant.of()` picks the type from a Python value; JSON takes the
  form `{"TypeName": value}`.
- `rbxtypes.attributes`: `Attributes`, a name-ordered map of `Variant`s.
- `rbxtypes.attribute_codec`: `read_attributes()`, `write_attributes()` and
  the type-id helpers `from_variant_type()` / `to_variant_type()`.
- `rbxtypes.errors`: `RbxTypesError` and `AttributeFormatError`.

## Limits

- Only these value types can be stored in the binary attribute format:
  strings and `BinaryString`, `Bool`, `Float32`, `Float64`, `UDim`, `UDim2`,
  `BrickColor`, `Color3`, `Vector2`, `Vector3`, `NumberSequence`,
  `ColorSequence`, `NumberRange` and `Rect`. Others raise
  `AttributeFormatError`, as does malformed attribute data.
- A `Variant` holding a `SharedString` cannot be converted to or from JSON;
  this raises `ValueError`.
- The package works with individual values only. It does not read or write
  whole model or place files, has no instance tree, and provides no
  command-line tool.