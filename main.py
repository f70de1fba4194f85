import logging
import sys
from pathlib import Path

from PyQt5.QtWidgets import (
    QApplication,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from bst.bst_ctrl import BSTController
from widgets.graphics_view import TreeCanvas

LOG_FORMAT = "[%(asctime)s] %(levelname)-4s :: %(name)-8s >> %(message)s"


class MainWindow(QMainWindow):
    """Main application window: tree canvas on top, operation panel below."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Binary Search Tree Visualizer")
        self.resize(900, 720)

        self.controller = BSTController()
        self._build_ui()
        self.controller.on_activate(self.canvas)

        # Apply stylesheet if available
        style_path = Path(__file__).parent / "resources" / "styles.qss"
        if style_path.exists():
            with open(style_path, "r", encoding="utf-8") as handle:
                self.setStyleSheet(handle.read())

    def _build_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(8)

        title = QLabel("Binary Search Tree")
        title.setObjectName("structureTitleLabel")
        root_layout.addWidget(title)

        self.canvas = TreeCanvas()
        root_layout.addWidget(self.canvas, 1)
        root_layout.addWidget(self.controller.build_panel(), 0)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
