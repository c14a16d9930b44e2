"""
Read-only predicates over the type model.

Generators dispatch on ``kind_of`` so that every variant of the model is
handled explicitly; anything else is reported as a generation error.
"""

from typing import Any, List, Tuple

from ...model import Model, SchemaNames, Service, StructMember, StructType, TypeKind
from .generator import GeneratorError


def kind_of(type_: Any) -> TypeKind:
    """Return the variant of a type, failing for unmodeled objects."""
    kind = getattr(type_, "kind", None)
    if not isinstance(kind, TypeKind):
        raise GeneratorError(f"Unsupported type in model: {type_!r}")
    return kind


def is_primitive(type_: Any) -> bool:
    return getattr(type_, "kind", None) == TypeKind.PRIMITIVE


def is_enum(type_: Any) -> bool:
    return getattr(type_, "kind", None) == TypeKind.ENUM


def is_struct(type_: Any) -> bool:
    return getattr(type_, "kind", None) == TypeKind.STRUCT


def is_list(type_: Any) -> bool:
    return getattr(type_, "kind", None) == TypeKind.LIST


def is_service(obj: Any) -> bool:
    return isinstance(obj, Service)


def struct_types(model: Model) -> List[StructType]:
    """Struct types of the model, in their natural (name) order."""
    return sorted(t for t in model.types() if is_struct(t))


def partition_members(
    struct: StructType, schema_names: SchemaNames
) -> Tuple[List[StructMember], List[StructMember]]:
    """
    Split the members of a struct by how they are represented in XML.

    Attributes and links are merged and sorted by name before splitting,
    so each returned list keeps name order.

    Returns:
        Tuple of (attribute represented members, element represented members)
    """
    attribute_members = []
    element_members = []
    for member in struct.members():
        if schema_names.is_represented_as_attribute(member.name):
            attribute_members.append(member)
        else:
            element_members.append(member)
    return attribute_members, element_members
