# unitygen

Building blocks for generating C# code for Unity3D from swagger definitions.
The package models swagger definitions (objects, string and number enums,
references) and their properties, and renders each as C# source that uses
Newtonsoft.Json and JsonSubTypes attributes.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Usage

```python
from unitygen.objects import Object
from unitygen.properties import IntegerProperty, StringProperty

obj = Object("testObj", [IntegerProperty("num", ""), StringProperty("date", "date-time")])
print(obj.to_csharp())
```

which prints

```
[System.Serializable]
public class TestObj {

	[JsonProperty("date")]
	public string date;

	public System.DateTime Date { get => System.DateTime.Parse(date); }

	[JsonProperty("num")]
	public int Num { get; private set; }

}
```

Properties are sorted by name. `Object.all_of(name, base, extra)` renders the
properties of `base` followed by its own; `Object.with_discriminator(name,
properties, discriminator)` makes a parent class whose children, registered
with `add_child`, are listed as `JsonSubtypes.KnownSubType` attributes. A
child names its parent through `set_what_to_inherit`.

Enums:

```python
from unitygen.model import NumberEnum, StringEnum

print(StringEnum("visibility", ["V_PUBLIC", "V_PRIVATE"]).to_csharp())
print(NumberEnum("binSize", [0.125, 1, 2]).to_csharp())
```

A string enum also emits a matching `JsonConverter` class, whose name is
returned by `json_converter()`. Number enum members are named by
`float_to_enum_member`, for example `0.125` becomes `NUMBER_0_DOT_125` and
`-1` becomes `NUMBER_NEG_1`.

## Modules

- `unitygen.convention`: `camel_case`, `class_name` and `title_case` for
  turning swagger names into C# identifiers.
- `unitygen.model`: `Definition` and `Property` base classes,
  `DefinitionReference` (a `$ref` string; it has no C# of its own and
  `to_csharp` raises `TypeError`), `DefinitionWrapper` (a late-bound
  definition for recursive references; it raises `LookupError` while empty),
  `StringEnum`, `NumberEnum` and `float_to_enum_member`.
- `unitygen.objects`: `Object`. Rendering a discriminator parent that was
  given a `None` child raises `ValueError`.
- `unitygen.properties`: `ArrayProperty`, `BooleanProperty`,
  `DefinitionReferenceProperty`, `IntegerProperty`, `NumberProperty`,
  `ObjectProperty` and `StringProperty`.
- `unitygen.errors`: `InvalidSpecError`, an exception carrying a `path` and a
  `reason`, rendered as `Invalid spec at some.path: reason`.

## What it does not do

The package holds the model and its C# rendering only. It does not read or
parse swagger JSON files, does not model API paths, services or security
definitions, does not write output files, and has no command-line tool.
Definitions are built by constructing the classes above directly.