"""
Application Initialization
==========================
This module parses the command line, builds the simulation and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Builds the SimulationConfig from the command line.
2. Instantiates the Simulation Context (Model).
3. Instantiates the Frame Driver (Controller) and Main Window (View).
4. Wires them together and starts the render loop.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from lorenzorbit import __version__
from lorenzorbit.config import SimulationConfig, WINDOW_TITLE
from lorenzorbit.logging_config import setup_logging
from lorenzorbit.model.state import SimulationContext

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(
        prog="lorenzorbit",
        description="Real-time Lorenz attractor trail viewed through an orbiting camera.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--fps", type=int, default=defaults.fps,
                        help="Target frame rate (default: %(default)s).")
    parser.add_argument("--max-points", type=int, default=defaults.max_points,
                        help="Trail length that triggers a restart from the seed (default: %(default)s).")
    parser.add_argument("--steps-per-frame", type=int, default=defaults.steps_per_frame,
                        help="Integration steps appended each frame (default: %(default)s).")
    parser.add_argument("--distance", type=float, default=defaults.distance,
                        help="Camera orbit radius (default: %(default)s).")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO",
                        help="Logging verbosity (default: %(default)s).")
    parser.add_argument("--log-file", default=None,
                        help="Also write the log to this file.")
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> tuple[SimulationConfig, argparse.Namespace]:
    """
    Parse the command line into a validated SimulationConfig.

    Invalid values exit through parser.error() (status 2).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = SimulationConfig(
        fps=args.fps,
        max_points=args.max_points,
        steps_per_frame=args.steps_per_frame,
        distance=args.distance,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))
    return config, args


def main(argv: Optional[Sequence[str]] = None) -> None:
    config, args = parse_config(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    # Qt and PyVista are imported late so --help works without a display
    from PySide6.QtWidgets import QApplication
    from lorenzorbit.controller.frame_driver import FrameDriver
    from lorenzorbit.view.main_window import MainWindow

    # 2. Create the Qt Application
    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(WINDOW_TITLE)

    # 3. Initialize the Simulation Context
    context = SimulationContext(config=config)

    # 4. Initialize the Frame Driver and Main Window
    driver = FrameDriver(context)
    window = MainWindow(driver)
    window.show()

    # 5. Start Render Loop + Event Loop
    driver.start()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
