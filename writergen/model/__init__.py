"""
Type model used as input of the code generators.

Provides names, types, the word service and the schema naming rules.
"""

from .names import Name
from .words import Words, get_words
from .types import (
    EnumType,
    ListType,
    Model,
    PrimitiveKind,
    PrimitiveType,
    Service,
    StructMember,
    StructType,
    Type,
    TypeKind,
)
from .schema_names import SchemaNames, DEFAULT_ATTRIBUTE_NAMES
from .loader import (
    DescriptionLoadError,
    ModelError,
    build_model,
    fetch_description,
    load_model,
    read_description,
    resolve_type,
)

__all__ = [
    "Name",
    "Words",
    "get_words",
    "EnumType",
    "ListType",
    "Model",
    "PrimitiveKind",
    "PrimitiveType",
    "Service",
    "StructMember",
    "StructType",
    "Type",
    "TypeKind",
    "SchemaNames",
    "DEFAULT_ATTRIBUTE_NAMES",
    "DescriptionLoadError",
    "ModelError",
    "build_model",
    "fetch_description",
    "load_model",
    "read_description",
    "resolve_type",
]
