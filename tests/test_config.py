"""
Unit tests for configuration validation and the command line.
"""
import logging

import pytest

from lorenzorbit import __version__
from lorenzorbit.config import SimulationConfig
from lorenzorbit.logging_config import setup_logging
from lorenzorbit.main import parse_config


class TestSimulationConfig:

    def test_defaults_are_valid(self):
        config = SimulationConfig()

        config.validate()

        assert config.max_points == 200_000
        assert config.steps_per_frame == 30
        assert config.distance == 30.0

    def test_frame_interval(self):
        assert SimulationConfig(fps=60).frame_interval_ms == 16
        assert SimulationConfig(fps=5).frame_interval_ms == 200
        assert SimulationConfig(fps=5000).frame_interval_ms == 1

    @pytest.mark.parametrize("kwargs", [
        {"max_points": 0},
        {"steps_per_frame": -1},
        {"distance": 0.0},
        {"fps": 0},
        {"pitch_min": -90.0},
        {"pitch_max": 95.0},
        {"pitch_step": 0.0},
        {"pitch_step": 150.0},
        {"pitch_initial": 80.0},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            SimulationConfig(**kwargs).validate()


class TestParseConfig:

    def test_defaults(self):
        config, args = parse_config([])

        assert config == SimulationConfig()
        assert args.log_level == "INFO"
        assert args.log_file is None

    def test_overrides(self):
        config, args = parse_config([
            "--fps", "30", "--max-points", "1000", "--steps-per-frame", "5",
            "--distance", "45", "--log-level", "DEBUG",
        ])

        assert config.fps == 30
        assert config.max_points == 1000
        assert config.steps_per_frame == 5
        assert config.distance == 45.0
        assert args.log_level == "DEBUG"

    def test_invalid_value_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_config(["--max-points", "0"])

        assert exc_info.value.code == 2


class TestSetupLogging:

    def test_configures_package_logger(self, tmp_path):
        log_file = tmp_path / "run.log"

        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        logger = logging.getLogger("lorenzorbit")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert logging.getLogger("pyvista").level == logging.WARNING
        assert logging.getLogger("vtkmodules").level == logging.WARNING

        # Second call replaces handlers instead of stacking them
        setup_logging(level=logging.INFO)
        assert len(logger.handlers) == 1

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        assert f"Logging initialized (lorenzorbit {__version__})." in log_file.read_text(encoding="utf-8")


if __name__ == "__main__":
    pytest.main([__file__])
