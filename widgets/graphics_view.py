from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPainter, QWheelEvent
from PyQt5.QtWidgets import QGraphicsView


class TreeCanvas(QGraphicsView):
    """
    Canvas hosting the tree scene:
    - normal wheel: vertical panning only
    - Ctrl + wheel: zoom with factor 1.1
    """

    zoom_factor = 1.1

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setRenderHints(QPainter.Antialiasing | QPainter.TextAntialiasing)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)

    def wheelEvent(self, event: QWheelEvent):
        angle = event.angleDelta().y()
        if event.modifiers() & Qt.ControlModifier:
            factor = self.zoom_factor if angle > 0 else (1 / self.zoom_factor)
            self.scale(factor, factor)
        else:
            self.translate(0, -angle * 0.2)
        event.accept()
