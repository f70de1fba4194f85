import logging
import re
from typing import Optional

from PyQt5.QtWidgets import (
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QInputDialog,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from bst.bst_model import BinarySearchTree
from bst.bst_view import BSTView

# ASCII digits with an optional sign only (no "1_000", no non-ASCII digits)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class BSTController(QWidget):
    """
    构建 BST 操作面板，负责解析输入并把合法的整数 key 交给模型；
    模型持有视图作为绘制面。
    """

    _LOGGER = logging.getLogger("BSTController")

    def __init__(self):
        super().__init__()
        self.view = BSTView()
        self.model = BinarySearchTree(surface=self.view)

        self._build_inputs()
        self.panel = self._create_panel()

        self.view.deleteRequested.connect(self._handle_delete_from_view)
        self.view.findRequested.connect(self._handle_find_from_view)

        self._refresh_inputs()

    # ---------- UI 构建 ----------
    def _build_inputs(self):
        self.value_edit = QLineEdit()
        self.value_edit.setPlaceholderText("Value")
        self.value_edit.returnPressed.connect(self._on_insert)

    def _create_panel(self):
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)
        layout.setColumnStretch(0, 1)
        layout.setColumnStretch(1, 1)

        # Value
        value_group = QGroupBox("Tree")
        value_layout = QFormLayout()
        value_layout.setContentsMargins(12, 8, 12, 12)
        value_layout.setSpacing(6)
        value_layout.addRow("Value:", self.value_edit)
        insert_btn = QPushButton("Add")
        insert_btn.clicked.connect(self._on_insert)
        delete_btn = QPushButton("Remove")
        delete_btn.clicked.connect(self._on_delete)
        find_btn = QPushButton("Find")
        find_btn.clicked.connect(self._on_find)
        value_layout.addRow(insert_btn)
        value_layout.addRow(delete_btn)
        value_layout.addRow(find_btn)
        value_group.setLayout(value_layout)
        layout.addWidget(value_group, 0, 0, 2, 1)

        # Create
        create_btn = QPushButton("Create From List")
        create_btn.clicked.connect(self._on_create)
        layout.addWidget(self._single_button_group("Create", create_btn), 0, 1)

        # Canvas
        canvas_group = QGroupBox("Canvas")
        canvas_layout = QVBoxLayout(canvas_group)
        canvas_layout.setContentsMargins(12, 10, 12, 12)
        canvas_layout.setSpacing(6)
        redraw_btn = QPushButton("Redraw")
        redraw_btn.clicked.connect(self._on_redraw)
        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self._on_clear)
        canvas_layout.addWidget(redraw_btn)
        canvas_layout.addWidget(clear_btn)
        layout.addWidget(canvas_group, 1, 1)

        layout.setRowStretch(2, 1)

        self.create_btn = create_btn
        self.insert_btn = insert_btn
        self.delete_btn = delete_btn
        self.find_btn = find_btn
        self.redraw_btn = redraw_btn
        self.clear_btn = clear_btn

        return container

    @staticmethod
    def _single_button_group(title, button):
        group = QGroupBox(title)
        vlayout = QVBoxLayout(group)
        vlayout.setContentsMargins(12, 10, 12, 12)
        vlayout.setSpacing(6)
        vlayout.addWidget(button)
        return group

    def build_panel(self):
        return self.panel

    # ---------- 生命周期 ----------

    def on_activate(self, graphics_view):
        self.view.bind_canvas(graphics_view)

    # ---------- 操作回调 ----------
    def _require_key(self) -> Optional[int]:
        raw = self.value_edit.text().strip()
        if not raw:
            QMessageBox.warning(self, "Missing Value", "Please enter a value first.")
            return None
        try:
            return self._coerce_value(raw)
        except ValueError:
            self._LOGGER.info("Rejected input %r", raw)
            QMessageBox.warning(self, "Wrong input", "The value must be an integer.")
            return None

    def _on_insert(self):
        key = self._require_key()
        if key is None:
            return
        self.view.clear_highlight()
        self.model.insert(key)
        self.view.auto_fit_view()
        self.value_edit.clear()
        self._refresh_inputs()

    def _on_delete(self):
        if len(self.model) == 0:
            return
        key = self._require_key()
        if key is None:
            return
        # 画布不随删除刷新，需要时使用 Redraw
        removed = self.model.remove(key)
        if not removed:
            self._LOGGER.info("Remove of %s: not in tree", key)
        self.value_edit.clear()
        self._refresh_inputs()

    def _on_find(self):
        if len(self.model) == 0:
            return
        key = self._require_key()
        if key is None:
            return
        node = self.model.find(key)
        if node is None:
            self.view.clear_highlight()
            QMessageBox.information(self, "Find", f"{key} is not in the tree.")
        elif not self.view.highlight(node.position, str(node.key)):
            # 双子节点删除后，该位置上的圆仍显示旧值
            self.view.clear_highlight()
            self._LOGGER.info("Found %s at %s but the canvas is stale", key, node.position)
            QMessageBox.information(
                self, "Find", f"{key} is in the tree but not drawn; press Redraw."
            )

    def _on_create(self):
        text, ok = QInputDialog.getText(
            self,
            "Create BST",
            "Enter values (comma-separated):",
        )
        if not ok:
            return
        try:
            keys = self._parse_sequence(text)
        except ValueError:
            QMessageBox.warning(self, "Wrong input", "Every value in the list must be an integer.")
            return

        self.view.clear()
        self.model.create_from_iterable(keys)
        self.view.auto_fit_view()
        self._refresh_inputs()

    def _on_redraw(self):
        self.view.clear()
        self.model.render()
        self.view.auto_fit_view()

    def _on_clear(self):
        self.model.clear()
        self.view.clear()
        self._refresh_inputs()

    def _handle_delete_from_view(self, label, x, y):
        if not self._matches_tree(label, x, y):
            return
        self.value_edit.setText(label)
        self._on_delete()

    def _handle_find_from_view(self, label, x, y):
        if not self._matches_tree(label, x, y):
            return
        self.value_edit.setText(label)
        self._on_find()

    def _matches_tree(self, label, x, y) -> bool:
        """
        右键菜单只对仍然代表树中节点的圆生效：
        按 label 查找到的节点必须就在这个圆的位置上。
        """
        node = self.model.find(self._coerce_value(label))
        if node is not None and node.position == (x, y):
            return True
        self._LOGGER.warning("Ignored menu action on stale circle %s at (%s, %s)", label, x, y)
        QMessageBox.information(
            self, "Stale node", f"The circle {label} is out of date; press Redraw."
        )
        return False

    # ---------- 状态管理 ----------

    def _refresh_inputs(self):
        has_nodes = len(self.model) > 0
        for widget in (self.delete_btn, self.find_btn, self.redraw_btn):
            widget.setDisabled(not has_nodes)

    # ---------- Helpers ----------

    @staticmethod
    def _parse_sequence(text: str):
        if not text:
            return []
        normalized = text.replace("，", ",")
        tokens = [
            part.strip()
            for part in re.split(r"[,\s]+", normalized)
            if part.strip()
        ]
        return [BSTController._coerce_value(tok) for tok in tokens]

    @staticmethod
    def _coerce_value(value):
        text = str(value).strip()
        if not _INTEGER_RE.fullmatch(text):
            raise ValueError(f"value is not an integer: {value!r}")
        return int(text)
