"""Object definitions: named collections of properties rendered as C# classes."""

from __future__ import annotations

from collections.abc import Iterable

from unitygen.convention import title_case
from unitygen.model import Definition, Property


def _sorted_by_name(properties: Iterable[Property] | None) -> list[Property]:
    return sorted(properties or (), key=lambda prop: prop.name)


class Object(Definition):
    """A collection of properties that becomes a serializable C# class.

    Properties are kept sorted by name. An object may take on the properties
    of another object ("allOf" composition), may carry a discriminator that
    makes it a polymorphic parent, and may inherit from such a parent.
    """

    def __init__(self, name: str, properties: Iterable[Property] | None = None) -> None:
        self.name = name
        self.properties: list[Property] = _sorted_by_name(properties)
        self.discriminator = ""
        self.base: Object | None = None
        self.parent: Object | None = None
        self.children: list[Object | None] = []

    @classmethod
    def all_of(
        cls, name: str, base: Object, extra_properties: Iterable[Property] | None
    ) -> Object:
        """An object holding every property of ``base`` plus its own.

        This is composition, not inheritance; see ``with_discriminator``.
        """
        obj = cls(name, extra_properties)
        obj.base = base
        return obj

    @classmethod
    def with_discriminator(
        cls, name: str, properties: Iterable[Property] | None, discriminator: str
    ) -> Object:
        """An object that acts as a parent, told apart by ``discriminator``."""
        obj = cls(name, properties)
        obj.discriminator = discriminator
        return obj

    def has_discriminator(self) -> bool:
        return self.discriminator != ""

    def set_what_to_inherit(self, parent: Object | None) -> None:
        self.parent = parent

    def add_child(self, child: Object | None) -> None:
        self.children.append(child)

    def set_all_of_object(self, base: Object | None) -> None:
        """Take on the properties of ``base``, as swagger's "allOf" asks."""
        self.base = base

    def all_properties(self) -> list[Property]:
        """Properties of the composed base object followed by this object's own."""
        if self.base is not None:
            return self.base.all_properties() + list(self.properties)
        return list(self.properties)

    def to_csharp(self) -> str:
        out = ["[System.Serializable]\n"]

        if self.has_discriminator():
            out.append(f'[JsonConverter(typeof(JsonSubtypes), "{self.discriminator}")]\n')
            for child in self.children:
                if child is None:
                    raise ValueError(
                        f"{self.to_variable_type()} was elected as parent class "
                        "and provided a nil child"
                    )
                child_type = child.to_variable_type()
                out.append(
                    f'[JsonSubtypes.KnownSubType(typeof({child_type}), "{child_type}")]\n'
                )

        out.append(f"public class {self.to_variable_type()}")
        if self.parent is not None:
            out.append(f" : {self.parent.to_variable_type()}")
        out.append(" {\n\n")

        inherited = self.base.all_properties() if self.base is not None else []
        for prop in [*inherited, *self.properties]:
            out.append(prop.class_variables())
            out.append("\n")
        out.append("}")
        return "".join(out)

    def to_variable_type(self) -> str:
        return title_case(self.name)

    def json_converter(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"Object({self.name!r}, {self.properties!r})"