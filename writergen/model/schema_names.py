"""
Naming rules of the XML schema.

Decides which members are written as XML attributes instead of inner
elements, and computes the tag names used on the wire. Tag names are
independent from the names used in generated source code.
"""

from typing import Iterable, Optional

from .names import Name


DEFAULT_ATTRIBUTE_NAMES = ("href", "id")


class SchemaNames:
    """Schema tag naming oracle."""

    def __init__(self, attribute_names: Optional[Iterable[str]] = None):
        names = DEFAULT_ATTRIBUTE_NAMES if attribute_names is None else attribute_names
        self.attribute_names = frozenset(names)

    def schema_tag_name(self, name: Name) -> str:
        return "_".join(word.lower() for word in name)

    def is_represented_as_attribute(self, name: Name) -> bool:
        return self.schema_tag_name(name) in self.attribute_names
