"""
Pytest configuration and shared fixtures for the axis-intervals test suite.
"""

import pytest
from hypothesis import settings

settings.register_profile("ci", max_examples=300, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.load_profile("dev")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        test_path = str(item.path)
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/property_based/" in test_path:
            item.add_marker(pytest.mark.property)


@pytest.fixture
def bar_values():
    """Mixed positive data for a zero-anchored bar chart."""
    return [7, 2, 9]


@pytest.fixture
def line_values_with_gaps():
    """Line-chart data with absent points."""
    return [None, 300, 900, None, 450]


@pytest.fixture
def axis_descriptor():
    from axis_intervals import AxisDescriptor

    return AxisDescriptor(zero_line=100, scale_multiplier=10)
