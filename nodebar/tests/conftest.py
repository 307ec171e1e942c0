"""
Shared pytest fixtures for NodeBar tests

Supports both development mode (python -m pytest) and installed mode (pip install -e .)
"""
import pytest
import numpy as np
import matplotlib

matplotlib.use("Agg")

from nodebar.config import BarStyle
from nodebar.layout import LayoutEngine
from nodebar.types import DistributionMode, Node


@pytest.fixture
def three_nodes():
    """Three plain nodes without offsets or icons"""
    return [Node("A"), Node("B"), Node("C")]


@pytest.fixture
def invalidations():
    """List recording every redraw request"""
    return []


@pytest.fixture
def make_engine(invalidations):
    """
    Factory for engines with a given size, padding and mode

    Redraw requests are appended to the invalidations fixture.
    """
    def _make(width=300, height=100, mode=DistributionMode.SPACE_AROUND,
              padding_left=0, padding_right=0, style=None):
        style = style or BarStyle(mode=mode)
        engine = LayoutEngine(style, on_invalidate=lambda: invalidations.append(1))
        engine.set_size(width, height, padding_left, padding_right)
        return engine
    return _make


@pytest.fixture
def icon_images():
    """Two small RGBA icons of different sizes keyed by name"""
    return {
        'on': np.ones((8, 12, 4), dtype=np.float32),
        'off': np.zeros((6, 6, 4), dtype=np.float32),
    }


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests rendering figures or running the CLI"
    )
