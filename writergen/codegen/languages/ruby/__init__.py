"""
Ruby code generator module.

Generates the Ruby classes that write model objects as XML documents.
"""

from .naming import RUBY_RESERVED_WORDS, create_ruby_deriver
from .writers import ForwardDeclarationEmitter, RubyWritersGenerator, WriterEmitter

__all__ = [
    "RUBY_RESERVED_WORDS",
    "create_ruby_deriver",
    "ForwardDeclarationEmitter",
    "RubyWritersGenerator",
    "WriterEmitter",
]
