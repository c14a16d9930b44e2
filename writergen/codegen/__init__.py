"""
writergen code generation module.

Generates XML writer classes from a type model.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..model import Model
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .core.naming import NameDeriver, QualifiedName
from .languages.ruby import RubyWritersGenerator


def generate_writers(
    model: Model,
    out_dir: Optional[Union[str, Path]] = None,
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate the Ruby writers of a model.

    Args:
        model: Model to generate writers for
        out_dir: Directory to write the files to, or None to only generate
        config: Generator configuration or dict of overrides

    Returns:
        GenerationResult with the generated documents
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(custom_config=config)
    generator = RubyWritersGenerator(config)
    return generate_code(generator, model, out_dir)


__all__ = [
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "NameDeriver",
    "QualifiedName",
    "RubyWritersGenerator",
    "generate_writers",
]
