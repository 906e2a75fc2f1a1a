"""Pytest configuration and shared fixtures for eml_compiler tests."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from eml_compiler import CompilerConfig, EMLCompiler
from eml_compiler.dom import Element


@pytest.fixture
def compiler() -> EMLCompiler:
    """Compiler with the default ``view`` whitelist."""
    return EMLCompiler()


@pytest.fixture
def card_compiler() -> EMLCompiler:
    """Compiler configured for the ``card`` vocabulary."""
    return EMLCompiler(CompilerConfig(valid_tags=frozenset({"card"})))


@pytest.fixture
def make_element():
    """Factory for a detached ``view`` element with the given attributes."""
    def _make(**attributes):
        return Element("view", dict(attributes), None)
    return _make
