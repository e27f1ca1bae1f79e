"""
Configuration settings for jsir.

This module contains the rendering constants used by every node when it
serializes itself.
"""

from dataclasses import dataclass


@dataclass
class Settings:
    """Rendering settings and configuration.

    Attributes:
        indent_width: Spaces added per nesting level of a block body
        strict_directive: Directive line a strict-mode Module starts with
    """
    indent_width: int = 4
    strict_directive: str = '"use strict"'

    @property
    def declarator_separator(self) -> str:
        """Get the text placed between declarators of a var statement."""
        return ",\n" + " " * self.indent_width

    @property
    def strict_prefix(self) -> str:
        """Get the directive line followed by a blank line."""
        return self.strict_directive + "\n\n"


# Global default settings instance
DEFAULT_SETTINGS = Settings()
