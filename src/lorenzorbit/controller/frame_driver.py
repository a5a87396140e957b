"""
Frame Driver (Render Loop)
==========================
This module contains the QObject that advances the simulation on a fixed
timer and hands every frame to the view.

Why is this file needed?
------------------------
1. Timing: The simulation is a single-threaded, fixed-timestep loop. A QTimer
   on the GUI thread replaces a blocking while-loop, so the Qt event loop
   stays responsive and no locking is needed.
2. Signals: The view subscribes to `frame_ready` and never touches the
   simulation state directly.

Classes:
    FrameDriver: Ticks the SimulationContext and emits FrameSnapshots.
"""
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from lorenzorbit.model.state import SimulationContext, FrameSnapshot

logger = logging.getLogger(__name__)


class FrameDriver(QObject):
    # Emitted once per simulated frame with a FrameSnapshot
    frame_ready = Signal(object)

    def __init__(self, context: SimulationContext, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.context = context
        self.frame_count: int = 0

        self.timer = QTimer(self)
        self.timer.setInterval(context.config.frame_interval_ms)
        self.timer.timeout.connect(self.tick)

    @property
    def is_running(self) -> bool:
        return self.timer.isActive()

    def start(self) -> None:
        logger.info(f"Starting render loop at {self.context.config.fps} FPS "
                    f"({self.timer.interval()} ms per frame).")
        self.timer.start()

    def stop(self) -> None:
        if self.timer.isActive():
            self.timer.stop()
            logger.info(f"Render loop stopped after {self.frame_count} frames.")

    def tick(self) -> FrameSnapshot:
        """Advance the simulation by one frame and publish it."""
        snapshot = self.context.advance_frame()
        self.frame_count += 1
        self.frame_ready.emit(snapshot)
        return snapshot
