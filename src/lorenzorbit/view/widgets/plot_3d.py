"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

from typing import Optional

import logging

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from lorenzorbit.config import BACKGROUND_COLOR, TRAIL_COLOR, TRAIL_LINE_WIDTH, CAMERA_FOV_DEG
from lorenzorbit.model.state import FrameSnapshot
from lorenzorbit.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)

HUD_ACTOR_NAME = "hud"


class AttractorWidget(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()

        # --- Actors state ---
        # The trail mesh is updated in place; the actor is created once
        self._trail_mesh: pv.PolyData = pv.PolyData()
        self._trail_actor: Optional[pv.Actor] = None

        self._show_hud: bool = True

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def on_frame(self, snapshot: FrameSnapshot) -> None:
        """Slot for FrameDriver.frame_ready: redraw the trail and move the camera."""
        if snapshot.was_reset:
            logger.debug(f"Frame {snapshot.frame_index}: trail restarted, redrawing from seed.")
        self._update_trail_layer(snapshot)
        self._apply_camera(snapshot)
        if self._show_hud:
            self._update_hud(snapshot)
        self.plotter.render()

    def set_hud_visible(self, visible: bool) -> None:
        self._show_hud = visible
        if not visible:
            self.plotter.remove_actor(HUD_ACTOR_NAME)

    # ------------------------------------------------------------------------------
    # Internal: Layers
    # ------------------------------------------------------------------------------

    def _update_trail_layer(self, snapshot: FrameSnapshot) -> None:
        polyline = VtkUtils.polyline_from_points(snapshot.points)
        self._trail_mesh.copy_from(polyline, deep=False)

        # PyVista refuses to add a mesh without cells
        if self._trail_actor is None and self._trail_mesh.n_cells > 0:
            self._trail_actor = self.plotter.add_mesh(
                self._trail_mesh,
                color=TRAIL_COLOR,
                line_width=TRAIL_LINE_WIDTH,
                lighting=False,
                pickable=False,
                reset_camera=False,
            )

    def _apply_camera(self, snapshot: FrameSnapshot) -> None:
        cam = self.plotter.camera
        cam.position = snapshot.position.to_tuple()
        cam.focal_point = snapshot.target.to_tuple()
        cam.up = snapshot.up.to_tuple()
        self.plotter.renderer.reset_camera_clipping_range()

    def _update_hud(self, snapshot: FrameSnapshot) -> None:
        self.plotter.add_text(
            f"points: {snapshot.point_count}",
            position="upper_left",
            font_size=9,
            color="white",
            name=HUD_ACTOR_NAME,
        )

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(BACKGROUND_COLOR)
        self.plotter.camera.view_angle = CAMERA_FOV_DEG

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
