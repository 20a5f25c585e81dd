"""Definitions and properties that make up a swagger data model."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from unitygen.convention import class_name, title_case


class Definition(ABC):
    """A model of data found inside a swagger file."""

    name: str

    @abstractmethod
    def to_csharp(self) -> str:
        """Render the definition as C# source."""

    @abstractmethod
    def to_variable_type(self) -> str:
        """The C# type name of the definition."""

    @abstractmethod
    def json_converter(self) -> str:
        """Class name of the JSON converter the definition needs, or ''."""


class Property(ABC):
    """A single variable within a C# class definition."""

    name: str

    @abstractmethod
    def to_variable_type(self) -> str:
        """The C# type of the variable, such as float, int or string."""

    @abstractmethod
    def empty_value(self) -> str:
        """The C# value that means the property has yet to be set."""

    @abstractmethod
    def class_variables(self) -> str:
        """What gets written into the C# class definition."""


def _base_name(ref: str) -> str:
    """Last element of a slash separated path, with path.Base semantics."""
    if ref == "":
        return "."
    stripped = ref.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class DefinitionReference(Definition):
    """Points to another definition by its '$ref' string."""

    ref: str

    @property
    def name(self) -> str:
        return self.ref

    def to_csharp(self) -> str:
        raise TypeError("a definition reference has no C# representation of its own")

    def to_variable_type(self) -> str:
        return title_case(_base_name(self.ref))

    def json_converter(self) -> str:
        return ""


class DefinitionWrapper(Definition):
    """A late-bound definition, so recursive structures can refer to each other."""

    def __init__(self, definition: Definition | None = None) -> None:
        self.definition = definition

    def update_definition(self, definition: Definition | None) -> None:
        self.definition = definition

    def _target(self) -> Definition:
        if self.definition is None:
            raise LookupError("definition wrapper has not been given a definition")
        return self.definition

    @property
    def name(self) -> str:
        return self._target().name

    def to_csharp(self) -> str:
        return self._target().to_csharp()

    def to_variable_type(self) -> str:
        return self._target().to_variable_type()

    def json_converter(self) -> str:
        return self._target().json_converter()

    def __repr__(self) -> str:
        inner = "empty" if self.definition is None else repr(self.definition.name)
        return f"DefinitionWrapper({inner})"


def float_to_enum_member(value: float) -> str:
    """Name of the C# enum member that stands for a number."""
    parts = ["NUMBER_"]
    if value < 0:
        value = abs(value)
        parts.append("NEG_")

    whole = float(math.floor(value))
    parts.append(str(int(whole)))
    remaining = value - whole
    if remaining <= 0:
        return "".join(parts)

    parts.append("_DOT_")
    while remaining > 0.000001:
        remaining *= 10
        digit = float(math.floor(remaining))
        parts.append(str(int(digit)))
        remaining -= digit
    return "".join(parts)


@dataclass(frozen=True)
class NumberEnum(Definition):
    """A C# enum whose members stand for numbers in web requests."""

    name: str
    values: tuple[float, ...]

    def __init__(self, name: str, values: Iterable[float]) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "values", tuple(values))

    def to_variable_type(self) -> str:
        return title_case(self.name)

    def to_csharp(self) -> str:
        members = ",\n".join(f"\t{float_to_enum_member(v)}" for v in self.values)
        return f"public enum {self.to_variable_type()} {{\n{members}\n}}"

    def json_converter(self) -> str:
        return ""


@dataclass(frozen=True)
class StringEnum(Definition):
    """A C# enum with a JSON converter that maps members to strings."""

    name: str
    values: tuple[str, ...]

    def __init__(self, name: str, values: Iterable[str]) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "values", tuple(values))

    def to_variable_type(self) -> str:
        return title_case(self.name)

    def to_csharp(self) -> str:
        var_type = self.to_variable_type()
        members = [(class_name(v), v) for v in self.values]

        enum_body = ",\n".join(f"\t{member} = {i}" for i, (member, _) in enumerate(members))
        out = [f"public enum {var_type} {{\n{enum_body}\n}}\n"]

        out.append(f"public class {var_type}JsonConverter : JsonConverter {{\n")

        out.append("\tpublic override void WriteJson(JsonWriter w, object val, JsonSerializer s) {\n")
        out.append(f"\t\t{var_type} castedVal = ({var_type})val;\n")
        out.append("\t\tswitch (castedVal) {\n")
        for member, raw in members:
            out.append(f"\t\t\tcase {var_type}.{member}:\n")
            out.append(f'\t\t\t\tw.WriteValue("{raw}");\n')
            out.append("\t\t\t\tbreak;\n")
        out.append("\t\t\tdefault:\n")
        out.append(
            '\t\t\t\tthrow new System.Exception("Unknown value. '
            'Living on the dangerous side editing generated code?");\n'
        )
        out.append("\t\t}\n\t}\n\n")

        out.append(
            "\tpublic override object ReadJson(JsonReader r, System.Type t, "
            "object existingValue, JsonSerializer s) {\n"
        )
        out.append("\t\tvar enumString = (string)r.Value;\n")
        out.append("\t\tswitch (enumString) {\n")
        for member, raw in members:
            out.append(f'\t\t\tcase "{raw}":\n')
            out.append(f"\t\t\t\treturn {var_type}.{member};\n")
        out.append("\t\t\tdefault:\n")
        out.append(
            '\t\t\t\tthrow new System.Exception("Unknown value. '
            'Perhaps you need to regenerate this code?");\n'
        )
        out.append("\t\t}\n\t}\n\n")

        out.append(
            "\tpublic override bool CanConvert(System.Type objectType) {\n"
            "\t\treturn objectType == typeof(string);\n\t}"
        )
        out.append("\n}")
        return "".join(out)

    def json_converter(self) -> str:
        return self.to_variable_type() + "JsonConverter"