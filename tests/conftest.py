"""Pytest configuration and shared fixtures for the atlwiki test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from atlwiki.ast import DocumentBuilder
from atlwiki.renderers.atlassian import AtlassianWikiRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "fuzzing: Property-based tests generated with Hypothesis")


@pytest.fixture
def builder() -> DocumentBuilder:
    """Provide a fresh document builder."""
    return DocumentBuilder()


@pytest.fixture
def renderer() -> AtlassianWikiRenderer:
    """Provide a renderer with default options."""
    return AtlassianWikiRenderer()
