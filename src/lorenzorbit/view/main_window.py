"""
Main Application Window
=======================
The top-level GUI container holding the 3D view.

Why is this file needed?
------------------------
1. Layout: It hosts the AttractorWidget and the menu bar.
2. Routing: It connects the FrameDriver's frames to the view and stops the
   render loop when the window closes.
"""
from PySide6.QtWidgets import QMainWindow
from PySide6.QtGui import QAction, QCloseEvent, QKeySequence

import logging

from lorenzorbit.config import WINDOW_TITLE
from lorenzorbit.controller.frame_driver import FrameDriver
from lorenzorbit.view.widgets.plot_3d import AttractorWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, driver: FrameDriver) -> None:
        super().__init__()
        self.driver: FrameDriver = driver

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(1024, 768)

        # --- CENTRAL: 3D Visualization ---
        self.visualizer = AttractorWidget()
        self.setCentralWidget(self.visualizer)

        # --- SIGNAL CONNECTIONS ---
        self.driver.frame_ready.connect(self.visualizer.on_frame)

        # --- ACTIONS & MENUS ---
        self._create_menus()

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = self.menuBar().addMenu("&View")

        hud_action = QAction("Show point &count", self)
        hud_action.setCheckable(True)
        hud_action.setChecked(True)
        hud_action.toggled.connect(self.visualizer.set_hud_visible)
        view_menu.addAction(hud_action)

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Main window closing.")
        self.driver.stop()
        self.visualizer.plotter.close()
        event.accept()
