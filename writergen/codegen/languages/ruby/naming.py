"""
Ruby-specific naming utilities.

Handles Ruby reserved words and builds the name deriver used by the
Ruby generators.
"""

from typing import Optional

from ...core.config import GeneratorConfig, load_config
from ...core.naming import NameDeriver


# Ruby reserved keywords
RUBY_RESERVED_WORDS = {
    "__ENCODING__",
    "__FILE__",
    "__LINE__",
    "BEGIN",
    "END",
    "alias",
    "and",
    "begin",
    "break",
    "case",
    "class",
    "def",
    "defined?",
    "do",
    "else",
    "elsif",
    "end",
    "ensure",
    "false",
    "for",
    "if",
    "in",
    "module",
    "next",
    "nil",
    "not",
    "or",
    "redo",
    "rescue",
    "retry",
    "return",
    "self",
    "super",
    "then",
    "true",
    "undef",
    "unless",
    "until",
    "when",
    "while",
    "yield",
}


def create_ruby_deriver(config: Optional[GeneratorConfig] = None) -> NameDeriver:
    """Create a name deriver configured for Ruby."""
    config = config or load_config()
    reserved = RUBY_RESERVED_WORDS | set(config.extra_reserved_words)
    return NameDeriver(config.module_config(), reserved)
