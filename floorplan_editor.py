#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import sys, logging
from typing import Optional
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QMessageBox,
    QDockWidget, QStyle, QWidget, QVBoxLayout, QScrollArea
)
from floorplan import EditorModel, LayoutClient, LayoutSyncError, Settings
from floorplan.canvas import PlanCanvas
from floorplan.palette import PalettePanel
from floorplan.properties import InfoPanel

logger = logging.getLogger(__name__)

SAVE_FAILED = "Failed to save layout. Make sure the server is running."
LOAD_FAILED = "Failed to load layout. Make sure the server is running and a layout has been saved."


class MainWindow(QMainWindow):
    def __init__(self, client: Optional[LayoutClient] = None, settings: Optional[Settings] = None):
        super().__init__()
        self.settings = settings or Settings.from_env()
        self.setWindowTitle("Interactive Floor Plan Designer")
        self.resize(1180, 760)

        # 1) Model / canvas
        self.model = EditorModel()
        self.canvas = PlanCanvas(self.model)
        self.client = client or LayoutClient(self.settings.api_url, timeout=self.settings.request_timeout)

        # 2) Central area: info panel above the canvas
        self.info_panel = InfoPanel(self.model, self)
        central = QWidget(self)
        lay = QVBoxLayout(central)
        lay.setContentsMargins(12, 12, 12, 12)
        lay.setSpacing(10)
        lay.addWidget(self.info_panel)
        scroll = QScrollArea(central)
        scroll.setWidget(self.canvas)
        scroll.setAlignment(Qt.AlignCenter)
        lay.addWidget(scroll, 1)
        self.setCentralWidget(central)

        # 3) Palette
        self.palette = PalettePanel()
        self.palette_dock = QDockWidget("Palette", self)
        self.palette_dock.setWidget(self.palette)
        self.palette_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.palette_dock.setFeatures(QDockWidget.NoDockWidgetFeatures)
        self.palette_dock.setMinimumWidth(200)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.palette_dock)

        # 4) Toolbar / status
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))

        # 5) Subscriptions
        self.canvas.selectionChanged.connect(self._on_selection)
        self.canvas.layoutChanged.connect(self.info_panel.refresh)

        self._on_selection()
        self._update_status()

    def _build_toolbar(self):
        tb = QToolBar("Controls", self)
        tb.setMovable(False)
        tb.setIconSize(QSize(18, 18))
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)
        style = self.style()

        self.act_rotate = QAction(style.standardIcon(QStyle.SP_BrowserReload), "Rotate", self)
        self.act_rotate.setShortcut(QKeySequence("R"))
        self.act_rotate.triggered.connect(self.handle_rotate)

        self.act_save = QAction(style.standardIcon(QStyle.SP_DialogSaveButton), "Save layout", self)
        self.act_save.setShortcut(QKeySequence("Ctrl+S"))
        self.act_save.triggered.connect(self.handle_save)

        self.act_load = QAction(style.standardIcon(QStyle.SP_DialogOpenButton), "Load layout", self)
        self.act_load.setShortcut(QKeySequence("Ctrl+O"))
        self.act_load.triggered.connect(self.handle_load)

        tb.addAction(self.act_rotate)
        tb.addSeparator()
        tb.addAction(self.act_save)
        tb.addAction(self.act_load)

    def _on_selection(self):
        self.act_rotate.setEnabled(self.model.can_rotate)
        self.info_panel.refresh()

    # ----- actions -----
    def handle_rotate(self):
        self.model.rotate_selected()

    def handle_save(self):
        try:
            message = self.client.save(self.model.elements)
        except LayoutSyncError as e:
            logger.error("Failed to save layout: %s", e)
            QMessageBox.critical(self, "Save failed", SAVE_FAILED)
            return
        self._status(message or "Layout saved.")

    def handle_load(self):
        try:
            elements = self.client.load()
        except LayoutSyncError as e:
            logger.error("Failed to load layout: %s", e)
            QMessageBox.critical(self, "Load failed", LOAD_FAILED)
            return
        self.model.replace_elements(elements)
        self._status(f"Layout loaded: {len(elements)} elements.")

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self):
        self.statusBar().showMessage(f"Server: {self.settings.api_url}")


def main():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    win = MainWindow(settings=settings)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
