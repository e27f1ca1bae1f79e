"""
Unit tests for the indentation helper.

This module tests indent() defined in jsir.utils.text.
"""

import pytest
from jsir.utils import indent


class TestIndent:
    """Tests for indent()."""

    def test_single_line(self):
        """Test indenting one line."""
        assert indent(";", 4) == "    ;"

    def test_every_line_prefixed(self):
        """Test that every line, the first included, is prefixed."""
        assert indent("{\n    ;\n}", 4) == "    {\n        ;\n    }"

    def test_empty_string(self):
        """Test that an empty string still gets the prefix."""
        assert indent("", 4) == "    "

    def test_trailing_newline(self):
        """Test that the empty line after a trailing newline is prefixed."""
        assert indent("a\n", 2) == "  a\n  "

    def test_zero_width(self):
        """Test that zero width leaves the text unchanged."""
        assert indent("a\nb", 0) == "a\nb"

    def test_negative_width(self):
        """Test that a negative width is rejected."""
        with pytest.raises(ValueError):
            indent("a", -1)
