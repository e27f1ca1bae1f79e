"""
Pytest configuration and fixtures for jsir tests.
"""

import pytest
from pathlib import Path


@pytest.fixture
def module():
    """Provide an empty Module without the strict directive."""
    from jsir import Module
    return Module(use_strict=False)


@pytest.fixture
def strict_module():
    """Provide an empty strict-mode Module."""
    from jsir import Module
    return Module(use_strict=True)


@pytest.fixture
def fixtures_dir():
    """Provide the golden fixtures directory."""
    return Path(__file__).parent / "fixtures"
