"""
writergen - generates XML writer classes from a type model.
"""

from .codegen import GenerationResult, GeneratorConfig, generate_writers
from .model import Model, Name, build_model, load_model

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "Model",
    "Name",
    "build_model",
    "generate_writers",
    "load_model",
]
