"""
Type model consumed by the generators.

The set of type variants is closed: every type is a primitive, an enum,
a struct or a list, and carries a ``kind`` tag so that generators can
dispatch exhaustively.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .names import Name


class TypeKind(Enum):
    """Variants of the type model."""

    PRIMITIVE = "primitive"
    ENUM = "enum"
    STRUCT = "struct"
    LIST = "list"


class PrimitiveKind(Enum):
    """Builtin primitive types."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"


@total_ordering
class _NamedType:
    """Common behaviour of named types: identity equality, ordering by name."""

    name: Name

    def __lt__(self, other):
        if not isinstance(other, _NamedType):
            return NotImplemented
        return self.name < other.name

    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class PrimitiveType(_NamedType):
    kind = TypeKind.PRIMITIVE

    def __init__(self, primitive: PrimitiveKind):
        self.primitive = primitive
        self.name = Name.of(primitive.value)


class EnumType(_NamedType):
    kind = TypeKind.ENUM

    def __init__(self, name: Name, values: Tuple[Name, ...] = ()):
        self.name = name
        self.values = tuple(values)


@total_ordering
@dataclass(eq=False, repr=False)
class StructMember:
    """Attribute or link of a struct type."""

    name: Name
    type: "Type"
    is_link: bool = False

    def __lt__(self, other: "StructMember") -> bool:
        if not isinstance(other, StructMember):
            return NotImplemented
        return self.name < other.name

    def __repr__(self) -> str:
        return f"StructMember({self.name}, {self.type!r})"


class StructType(_NamedType):
    kind = TypeKind.STRUCT

    def __init__(self, name: Name):
        self.name = name
        self._attributes: Dict[Name, StructMember] = {}
        self._links: Dict[Name, StructMember] = {}

    def add_attribute(self, name: Name, type_: "Type") -> StructMember:
        return self._add(self._attributes, StructMember(name, type_, is_link=False))

    def add_link(self, name: Name, type_: "Type") -> StructMember:
        return self._add(self._links, StructMember(name, type_, is_link=True))

    def _add(self, target: Dict[Name, StructMember], member: StructMember) -> StructMember:
        if member.name in self._attributes or member.name in self._links:
            raise ValueError(f"Duplicate member '{member.name}' in struct '{self.name}'")
        target[member.name] = member
        return member

    def attributes(self) -> Iterator[StructMember]:
        return iter(sorted(self._attributes.values()))

    def links(self) -> Iterator[StructMember]:
        return iter(sorted(self._links.values()))

    def members(self) -> List[StructMember]:
        """All attributes and links, sorted by name."""
        return sorted(list(self._attributes.values()) + list(self._links.values()))


class ListType:
    kind = TypeKind.LIST

    def __init__(self, element_type: "Type"):
        self.element_type = element_type

    def __repr__(self) -> str:
        return f"ListType({self.element_type!r})"


Type = Union[PrimitiveType, EnumType, StructType, ListType]


@total_ordering
@dataclass(frozen=True)
class Service:
    """A service of the model. Only its name matters for generation."""

    name: Name

    def __lt__(self, other: "Service") -> bool:
        return self.name < other.name


class Model:
    """Root of the type model."""

    def __init__(self):
        self._types: Dict[Name, Type] = {}
        self._services: Dict[Name, Service] = {}
        self.string_type = PrimitiveType(PrimitiveKind.STRING)
        self.boolean_type = PrimitiveType(PrimitiveKind.BOOLEAN)
        self.integer_type = PrimitiveType(PrimitiveKind.INTEGER)
        self.decimal_type = PrimitiveType(PrimitiveKind.DECIMAL)
        self.date_type = PrimitiveType(PrimitiveKind.DATE)
        for primitive in (
            self.string_type,
            self.boolean_type,
            self.integer_type,
            self.decimal_type,
            self.date_type,
        ):
            self._types[primitive.name] = primitive

    def add_type(self, type_: Union[EnumType, StructType]) -> None:
        if type_.name in self._types:
            raise ValueError(f"Type '{type_.name}' is already defined")
        self._types[type_.name] = type_

    def add_service(self, service: Service) -> None:
        self._services[service.name] = service

    def get_type(self, name: Name) -> Optional[Type]:
        return self._types.get(name)

    def types(self) -> Iterator[Type]:
        """Return a fresh iterator over all named types, sorted by name."""
        return iter(sorted(self._types.values()))

    def services(self) -> Iterator[Service]:
        return iter(sorted(self._services.values()))
