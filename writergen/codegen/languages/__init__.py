"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .ruby import RubyWritersGenerator

__all__ = ["RubyWritersGenerator"]
