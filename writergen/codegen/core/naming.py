"""
Naming utilities for safe code generation.

Turns case-neutral model names into class, member, constant and file
names, and computes the qualified name (class, module, file) of every
generated artifact. Derivation is a pure function of its inputs and the
module configuration, so the same name always maps to the same artifact.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from ...model import Name, Service, Type, Words, get_words
from .config import ModuleConfig


class NamingError(ValueError):
    """Exception raised when a name cannot be derived."""

    pass


class NamingCase(Enum):
    """Naming styles applied to names."""

    PASCAL_CASE = "pascal"  # VirtualMachine
    SNAKE_CASE = "snake"  # virtual_machine
    SCREAMING_SNAKE = "screaming_snake"  # VIRTUAL_MACHINE


# Names of the base classes
READER_NAME = Name.parse("Reader")
SERVICE_NAME = Name.parse("Service")
TYPE_NAME = Name.parse("Type")
WRITER_NAME = Name.parse("Writer")

# Names of the directories
READERS_DIR = Name.parse("Readers")
SERVICES_DIR = Name.parse("Services")
TYPES_DIR = Name.parse("Types")
WRITERS_DIR = Name.parse("Writers")


@dataclass(frozen=True)
class QualifiedName:
    """Class, module and file names of a generated artifact."""

    class_name: str
    module_name: str
    file_name: str

    def __str__(self) -> str:
        return f"{self.module_name}::{self.class_name}"


class NameDeriver:
    """Computes the names of generated source code concepts."""

    def __init__(
        self,
        module: ModuleConfig,
        reserved_words: Optional[Iterable[str]] = None,
        words: Optional[Words] = None,
    ):
        """
        Initialize name deriver.

        Args:
            module: Module name and path the generated files belong to
            reserved_words: Words that can't be used as member names
            words: Word service used for capitalization

        Raises:
            NamingError: If a reserved word is also reserved with the
                trailing underscore used to rename members
        """
        self.module = module
        self.reserved_words = frozenset(reserved_words or ())
        clashes = sorted(w for w in self.reserved_words if w + "_" in self.reserved_words)
        if clashes:
            raise NamingError(
                "Reserved words can't also be reserved with a trailing underscore: "
                + ", ".join(clashes)
            )
        self.words = words or get_words()

    @property
    def module_name(self) -> str:
        return self.module.module_name

    @property
    def module_path(self) -> str:
        return self.module.module_path

    def build_name(
        self,
        base: Name,
        suffix: Optional[Name] = None,
        directory: Optional[Name] = None,
    ) -> QualifiedName:
        """
        Build a qualified name from a base name, a suffix and a directory.

        The suffix is appended to the words of the base name. The directory,
        if given, is inserted between the module path and the file name, so
        a ``Writers`` directory gives ``ovirt/sdk/v4/writers/vm_writer``.

        Args:
            base: The base name
            suffix: Optional name appended to the base
            directory: Optional directory of the file

        Returns:
            The qualified name

        Raises:
            NamingError: If the base name has no words
        """
        if not base:
            raise NamingError("Can't derive a name from an empty base name")

        name = base + suffix

        parts = [self.module_path]
        if directory:
            parts.append(self.file_style_name(directory))
        parts.append(self.file_style_name(name))

        return QualifiedName(
            class_name=self.class_style_name(name),
            module_name=self.module_name,
            file_name="/".join(parts),
        )

    def class_style_name(self, name: Name) -> str:
        return "".join(self.words.capitalize(word) for word in name)

    def member_style_name(self, name: Name) -> str:
        """Lowercase words joined by underscores, avoiding reserved words."""
        result = "_".join(word.lower() for word in name)
        if result in self.reserved_words:
            result += "_"
        return result

    def constant_style_name(self, name: Name) -> str:
        return "_".join(word.upper() for word in name)

    def file_style_name(self, name: Name) -> str:
        return "_".join(word.lower() for word in name)

    def style(self, name: Name, case: NamingCase) -> str:
        """Render a name in the given case."""
        if case == NamingCase.PASCAL_CASE:
            return self.class_style_name(name)
        elif case == NamingCase.SCREAMING_SNAKE:
            return self.constant_style_name(name)
        return self.file_style_name(name)

    def is_renamed(self, name: Name) -> bool:
        """Check if the member style of a name had to avoid a reserved word."""
        return self.member_style_name(name) != self.file_style_name(name)

    # Names of generated artifacts

    def base_type_name(self) -> QualifiedName:
        return self.build_name(TYPE_NAME, None, TYPES_DIR)

    def type_name(self, type_: Type) -> QualifiedName:
        return self.build_name(type_.name, None, TYPES_DIR)

    def base_service_name(self) -> QualifiedName:
        return self.build_name(SERVICE_NAME, None, SERVICES_DIR)

    def service_name(self, service: Service) -> QualifiedName:
        return self.build_name(service.name, SERVICE_NAME, SERVICES_DIR)

    def base_reader_name(self) -> QualifiedName:
        return self.build_name(READER_NAME, None, READERS_DIR)

    def reader_name(self, type_: Type) -> QualifiedName:
        return self.build_name(type_.name, READER_NAME, READERS_DIR)

    def base_writer_name(self) -> QualifiedName:
        return self.build_name(WRITER_NAME, None, WRITERS_DIR)

    def writer_name(self, type_: Type) -> QualifiedName:
        return self.build_name(type_.name, WRITER_NAME, WRITERS_DIR)
