"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .naming import NameDeriver, NamingCase, NamingError, QualifiedName
from .config import GeneratorConfig, ModuleConfig, ConfigManager, ConfigError, load_config
from .buffer import CodeBuffer, Document
from .classifier import kind_of, partition_members, struct_types
from .templates import TemplateEngine, TemplateError, get_default_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Naming
    "NameDeriver",
    "NamingCase",
    "NamingError",
    "QualifiedName",
    # Configuration system
    "GeneratorConfig",
    "ModuleConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Output buffers
    "CodeBuffer",
    "Document",
    # Type classification
    "kind_of",
    "partition_members",
    "struct_types",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "get_default_template_engine",
]
