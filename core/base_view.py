import math

from PyQt5.QtCore import QObject, QPointF, QRectF
from PyQt5.QtWidgets import QGraphicsScene


class BaseStructureView(QObject):
    """
    Base class for structure-specific views, providing:
    - shared QGraphicsScene
    - binding to a QGraphicsView canvas
    - fitting the canvas to whatever has been drawn
    """

    scene_rect = QRectF(0, 0, 400, 400)
    max_view_scale = 2.0  # 防止节点过少时放得太大

    def __init__(self):
        super().__init__()
        self.scene = QGraphicsScene()
        self.scene.setSceneRect(self.scene_rect)
        self._canvas = None  # bound QGraphicsView (optional)
        self._base_scene_rect = QRectF(self.scene.sceneRect())

    def bind_canvas(self, view):
        self._canvas = view
        if view:
            view.setScene(self.scene)
            view.resetTransform()

    def auto_fit_view(self, padding=40):
        if not self._canvas:
            return

        items_rect = self.scene.itemsBoundingRect()
        if items_rect.isNull():
            target_rect = QRectF(self._base_scene_rect)
        else:
            padded = QRectF(items_rect)
            padded.adjust(-padding, -padding, padding, padding)
            target_rect = (
                QRectF(self._base_scene_rect)
                if self._base_scene_rect.contains(padded)
                else padded
            )

        self.scene.setSceneRect(target_rect)
        self._fit_rect(target_rect)

    def _fit_rect(self, target_rect):
        viewport = self._canvas.viewport().rect()
        if viewport.isNull() or target_rect.isNull():
            return

        width = max(target_rect.width(), 1.0)
        height = max(target_rect.height(), 1.0)
        scale = min(viewport.width() / width, viewport.height() / height)
        if not math.isfinite(scale):
            scale = 1.0
        scale = min(max(0.05, scale), self.max_view_scale)
        self._apply_view_state(scale, target_rect.center())

    def _apply_view_state(self, scale, center_point: QPointF):
        if not self._canvas:
            return
        self._canvas.resetTransform()
        self._canvas.scale(scale, scale)
        self._canvas.centerOn(center_point)

    def ensure_visible(self, rect, xpad=20, ypad=20):
        if self._canvas:
            self._canvas.ensureVisible(rect, xpad, ypad)
