"""Properties: single variables inside a generated C# class."""

from __future__ import annotations

from dataclasses import dataclass

from unitygen.convention import camel_case, title_case
from unitygen.model import Definition, Property
from unitygen.objects import Object


def _auto_property(json_name: str, var_type: str) -> str:
    return (
        f'\t[JsonProperty("{json_name}")]\n'
        f"\tpublic {var_type} {title_case(json_name)} {{ get; private set; }}\n"
    )


@dataclass(frozen=True)
class ArrayProperty(Property):
    """An array whose elements are described by another property."""

    name: str
    element: Property

    def to_variable_type(self) -> str:
        return f"{self.element.to_variable_type()}[]"

    def empty_value(self) -> str:
        return "null"

    def class_variables(self) -> str:
        return _auto_property(self.name, self.to_variable_type())


@dataclass(frozen=True)
class BooleanProperty(Property):
    """A C# bool."""

    name: str

    def to_variable_type(self) -> str:
        return "bool"

    def empty_value(self) -> str:
        return "false"

    def class_variables(self) -> str:
        return _auto_property(self.name, self.to_variable_type())


@dataclass(frozen=True)
class DefinitionReferenceProperty(Property):
    """A variable whose type is another definition."""

    name: str
    definition: Definition

    def to_variable_type(self) -> str:
        return self.definition.to_variable_type()

    def empty_value(self) -> str:
        return "null"

    def class_variables(self) -> str:
        out = [f'\t[JsonProperty("{self.name}")]\n']
        converter = self.definition.json_converter()
        if converter:
            out.append(f"\t[JsonConverter(typeof({converter}))]\n")
        out.append(
            f"\tpublic {self.to_variable_type()} {title_case(self.name)} "
            "{ get; private set; }\n"
        )
        return "".join(out)


@dataclass(frozen=True)
class IntegerProperty(Property):
    """A C# int; the format is recorded but every format maps to int."""

    name: str
    format: str = ""

    def to_variable_type(self) -> str:
        return "int"

    def empty_value(self) -> str:
        return "0"

    def class_variables(self) -> str:
        return _auto_property(self.name, self.to_variable_type())


@dataclass(frozen=True)
class NumberProperty(Property):
    """A number: float by default, int for int32, else the format itself."""

    name: str
    format: str = ""

    def to_variable_type(self) -> str:
        if self.format == "":
            return "float"
        if self.format == "int32":
            return "int"
        return self.format

    def empty_value(self) -> str:
        return "0" if self.format == "int32" else "0f"

    def class_variables(self) -> str:
        return _auto_property(self.name, self.to_variable_type())


@dataclass(frozen=True)
class ObjectProperty(Property):
    """A variable whose type is an anonymous nested class."""

    name: str
    obj: Object

    def to_variable_type(self) -> str:
        return self.obj.to_variable_type()

    def empty_value(self) -> str:
        return "null"

    def class_variables(self) -> str:
        return f"\t{self.obj.to_csharp()}\n" + _auto_property(
            self.name, self.to_variable_type()
        )


@dataclass(frozen=True)
class StringProperty(Property):
    """A C# string, or a parsed System.DateTime for the date-time format."""

    name: str
    format: str = ""

    def to_variable_type(self) -> str:
        if self.format == "date-time":
            return "System.DateTime"
        return "string"

    def empty_value(self) -> str:
        return "null"

    def class_variables(self) -> str:
        header = f'\t[JsonProperty("{self.name}")]\n'
        if self.format == "date-time":
            field = camel_case(self.name)
            return (
                header
                + f"\tpublic string {field};\n\n"
                + f"\tpublic System.DateTime {title_case(self.name)} "
                f"{{ get => System.DateTime.Parse({field}); }}\n"
            )
        return header + f"\tpublic string {title_case(self.name)} {{ get; private set; }}\n"