import logging
from typing import Dict, List, Optional, Tuple

from PyQt5.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QPainterPath, QPen
from PyQt5.QtWidgets import (
    QGraphicsItem,
    QGraphicsObject,
    QGraphicsPathItem,
    QMenu,
)

from core.base_view import BaseStructureView
from core.surface import DrawingSurface


class BSTView(BaseStructureView, DrawingSurface):
    """
    QGraphicsScene 上的绘制面：模型插入节点时调用 draw_node / draw_edge。
    画上去的图元不会因删除而消失，只有 clear() 会清空。
    """

    # label, centre x, centre y of the circle the menu was opened on
    deleteRequested = pyqtSignal(str, float, float)
    findRequested = pyqtSignal(str, float, float)

    highlight_color = QColor("#ffd166")

    _LOGGER = logging.getLogger("BSTView")

    def __init__(self):
        super().__init__()
        self.node_items: List[BSTNodeItem] = []
        self.edge_items: List[BSTEdgeItem] = []
        self._by_position: Dict[Tuple[float, float], List[BSTNodeItem]] = {}
        self._highlighted: Optional[BSTNodeItem] = None

    # ---------- DrawingSurface ----------

    def draw_node(self, position, radius, label):
        item = BSTNodeItem(radius, label)
        item.setPos(QPointF(position[0] - radius, position[1] - radius))
        item.contextDelete.connect(self.deleteRequested)
        item.contextFind.connect(self.findRequested)
        self.scene.addItem(item)

        self.node_items.append(item)
        self._by_position.setdefault((position[0], position[1]), []).append(item)
        self._LOGGER.debug("Drew node %s at %s", label, tuple(position))
        return item

    def draw_edge(self, from_position, from_radius, to_position, to_radius):
        start, end = self.edge_endpoints(
            from_position, from_radius, to_position, to_radius
        )
        item = BSTEdgeItem(QPointF(*start), QPointF(*end))
        self.scene.addItem(item)
        self.edge_items.append(item)
        return item

    def clear(self):
        self.scene.clear()
        self.node_items.clear()
        self.edge_items.clear()
        self._by_position.clear()
        self._highlighted = None
        self.scene.setSceneRect(self._base_scene_rect)

    # ---------- Public API ----------

    def items_at(self, position) -> List["BSTNodeItem"]:
        """All node items centred at position, oldest first."""
        return list(self._by_position.get((position[0], position[1]), []))

    def item_at(self, position, label=None) -> Optional["BSTNodeItem"]:
        """
        同一位置可能叠着多个圆（深度 2 起左右子树会重合，删除后旧圆也会残留），
        取最近绘制的一个；给出 label 时只取文字相同的。
        """
        for item in reversed(self._by_position.get((position[0], position[1]), [])):
            if label is None or item.label == str(label):
                return item
        return None

    def highlight(self, position, label) -> bool:
        """Highlight the circle showing label at position; False if none is drawn."""
        self.clear_highlight()
        item = self.item_at(position, label)
        if item is None:
            return False
        item.setFillColor(self.highlight_color)
        self._highlighted = item
        self.ensure_visible(item.sceneBoundingRect())
        return True

    def clear_highlight(self):
        if self._highlighted is not None:
            self._highlighted.setFillColor(BSTNodeItem.fill_color)
            self._highlighted = None


class BSTNodeItem(QGraphicsObject):
    contextDelete = pyqtSignal(str, float, float)
    contextFind = pyqtSignal(str, float, float)

    fill_color = QColor("#e9e9ef")
    stroke_color = QColor("#4a4a52")
    text_color = QColor("#1f1f24")

    def __init__(self, radius, label):
        super().__init__()
        self.radius = radius
        self.label = str(label)
        self.fillColor = QColor(self.fill_color)
        self.setZValue(2)
        self.setFlag(QGraphicsItem.ItemIsSelectable, True)

    def center(self) -> QPointF:
        pos = self.scenePos()
        return QPointF(pos.x() + self.radius, pos.y() + self.radius)

    def boundingRect(self):
        return QRectF(0, 0, 2 * self.radius, 2 * self.radius)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setPen(QPen(self.stroke_color, 1))
        painter.setBrush(QBrush(self.fillColor))
        painter.drawEllipse(self.boundingRect())

        painter.setPen(self.text_color)
        painter.drawText(self.boundingRect(), Qt.AlignCenter, self.label)

    def setFillColor(self, color: QColor):
        self.fillColor = QColor(color)
        self.update()

    def contextMenuEvent(self, event):
        menu = QMenu()
        delete_action = menu.addAction("Delete Node")
        find_action = menu.addAction("Find Node")
        chosen = menu.exec_(event.screenPos())
        center = self.center()
        if chosen == delete_action:
            self.contextDelete.emit(self.label, center.x(), center.y())
        elif chosen == find_action:
            self.contextFind.emit(self.label, center.x(), center.y())


class BSTEdgeItem(QGraphicsPathItem):
    def __init__(self, start: QPointF, end: QPointF):
        super().__init__()
        self.start = QPointF(start)
        self.end = QPointF(end)

        pen = QPen(QColor("#4a4a52"), 1)
        pen.setCapStyle(Qt.RoundCap)
        self.setPen(pen)
        self.setZValue(1)

        path = QPainterPath(self.start)
        path.lineTo(self.end)
        self.setPath(path)
