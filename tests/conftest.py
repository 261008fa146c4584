"""
Pytest configuration and fixtures for gfxmath tests.
"""

import math

import pytest
import torch

from gfxmath.utils.config import Config, get_default_config, set_default_config


@pytest.fixture(autouse=True)
def restore_default_config():
    """Undo any set_default_config() done by a test."""
    previous = get_default_config()
    yield
    set_default_config(previous)


@pytest.fixture
def float32_config():
    """Make float32 the default dtype for the duration of a test."""
    set_default_config(Config(dtype="float32"))
    return get_default_config()


@pytest.fixture
def quarter_turn():
    """Angle of a quarter turn in radians."""
    return math.pi / 2


@pytest.fixture
def invertible_rows_3():
    """A 3x3 matrix with determinant 1."""
    return [[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [5.0, 6.0, 0.0]]


@pytest.fixture
def invertible_rows_4():
    """A 4x4 matrix with a non-zero determinant."""
    return [
        [2.0, 0.0, 1.0, 3.0],
        [1.0, 1.0, 0.0, 2.0],
        [0.0, 3.0, 1.0, 1.0],
        [4.0, 0.0, 2.0, 1.0],
    ]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "gpu: marks tests that require GPU"
    )


def pytest_collection_modifyitems(config, items):
    """Skip GPU tests if no GPU available."""
    if not torch.cuda.is_available():
        skip_gpu = pytest.mark.skip(reason="No GPU available")
        for item in items:
            if "gpu" in item.keywords:
                item.add_marker(skip_gpu)
