"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .typescript import TypeScriptGenerator

__all__ = ["TypeScriptGenerator"]
