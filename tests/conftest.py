"""Pytest configuration and shared fixtures for the shortcode-parser test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from shortcode_parser import clear_shortcode_caches

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=300, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=100)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture(autouse=True)
def _isolate_shortcode_caches() -> Generator[None, None, None]:
    """Start and finish every test with empty process-wide caches."""
    clear_shortcode_caches()
    yield
    clear_shortcode_caches()


@pytest.fixture
def wordpress_content() -> str:
    """Provide post content as returned by a WordPress REST API.

    Returns
    -------
    str
        HTML with entity-encoded shortcode attributes.

    """
    return """
      <p>Here's a box:</p>
      [su_box title=&quot;Important Note&quot; style=&quot;glass&quot; box_color=&quot;#333333&quot; radius=&quot;5&quot;]
        This is the content inside the box.
      [/su_box]
      <p>And here's a button:</p>
      [su_button url=&apos;/contact&apos; target=&quot;self&quot; style=&quot;flat&quot;]Contact Us[/su_button]
    """


@pytest.fixture
def tabs_content() -> str:
    """Provide a Shortcodes Ultimate tab group with two tabs.

    Returns
    -------
    str
        Tab markup with newlines between the tags.

    """
    return """[su_tabs]
[su_tab title="Preamble" anchor="preamble"]
Content for preamble tab
[/su_tab]
[su_tab title="Morse Generator" anchor="morsegenerator"]
Content for morse generator tab
[/su_tab]
[/su_tabs]"""
