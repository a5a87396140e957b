"""
Pytest configuration and shared fixtures for lorenzorbit tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Allow running the tests from a source checkout without installing
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Widgets are created in tests without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from lorenzorbit.config import SimulationConfig
from lorenzorbit.model.state import SimulationContext
from lorenzorbit.model.trajectory import TrajectoryBuffer


@pytest.fixture
def trajectory():
    """A freshly seeded trail."""
    return TrajectoryBuffer()


@pytest.fixture
def small_config():
    """Config with a tiny trail cap so resets happen within a few frames."""
    return SimulationConfig(max_points=50, steps_per_frame=30)


@pytest.fixture
def context(small_config):
    return SimulationContext(config=small_config)


@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication for QObject, QTimer and widget tests."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app
