"""
Unit tests for the Qt frame driver.
"""
import pytest

pytest.importorskip("PySide6")

from lorenzorbit.controller.frame_driver import FrameDriver
from lorenzorbit.model.state import FrameSnapshot


class TestFrameDriver:

    def test_interval_from_config(self, qapp, context):
        driver = FrameDriver(context)

        assert driver.timer.interval() == 16
        assert driver.is_running is False

    def test_tick_emits_snapshot(self, qapp, context):
        driver = FrameDriver(context)
        received = []
        driver.frame_ready.connect(received.append)

        snapshot = driver.tick()

        assert isinstance(snapshot, FrameSnapshot)
        assert len(received) == 1
        assert received[0] is snapshot
        assert driver.frame_count == 1
        assert len(context.trajectory) == 31

    def test_start_and_stop(self, qapp, context):
        driver = FrameDriver(context)

        driver.start()
        assert driver.is_running is True

        driver.stop()
        assert driver.is_running is False

    def test_stop_when_idle_is_harmless(self, qapp, context):
        driver = FrameDriver(context)

        driver.stop()

        assert driver.is_running is False


if __name__ == "__main__":
    pytest.main([__file__])
