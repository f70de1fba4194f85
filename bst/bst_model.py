import logging
from typing import Iterable, Iterator, List, Optional

from bst.geometry import NODE_RADIUS, ROOT_POSITION, Point, child_position


class TreeNode:
    """
    树节点：位置与半径在创建时确定，之后不可修改；
    key 只会在"双子节点删除"时被后继值覆盖。
    """

    __slots__ = ("key", "left", "right", "_position", "_radius")

    def __init__(self, key, position: Point, radius: float = NODE_RADIUS):
        self.key = key
        self.left: Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None
        self._position = Point(*position)
        self._radius = radius

    @property
    def position(self) -> Point:
        return self._position

    @property
    def radius(self) -> float:
        return self._radius

    def child_position(self, direction: str) -> Point:
        return child_position(self._position, self._radius, direction)

    def child(self, direction: str) -> Optional["TreeNode"]:
        return self.left if direction == "left" else self.right

    def set_child(self, direction: str, node: Optional["TreeNode"]):
        if direction == "left":
            self.left = node
        else:
            self.right = node

    def __repr__(self):
        return f"TreeNode(key={self.key!r}, position={tuple(self._position)})"


class BinarySearchTree:
    """
    二叉搜索树模型（相等的值走左子树，不做平衡）。
    插入时按固定几何规则给新节点定位，并通过注入的 DrawingSurface 增量绘制；
    删除只修改结构，不通知画布。
    """

    _LOGGER = logging.getLogger("BinarySearchTree")

    def __init__(self, surface=None):
        self.surface = surface
        self._root: Optional[TreeNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def get_root(self) -> Optional[TreeNode]:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[TreeNode]:
        stack: List[TreeNode] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def clear(self):
        self._root = None
        self._size = 0

    def create_from_iterable(self, keys: Iterable):
        self.clear()
        for key in keys:
            self.insert(key)

    # ---------- Operations ----------

    def insert(self, key) -> TreeNode:
        """
        插入 key 并返回新建节点。
        空树时在固定根位置建根，只画节点；否则沿 key <= node.key 向左、
        其余向右下行，在第一个空链接处建节点，先画节点再画父子连线。
        """
        if self._root is None:
            self._root = self._add_and_display(key, ROOT_POSITION)
            self._size += 1
            self._LOGGER.debug("Inserted root %r at %s", key, self._root.position)
            return self._root

        parent = self._root
        while True:
            direction = "left" if key <= parent.key else "right"
            child = parent.child(direction)
            if child is None:
                break
            parent = child

        node = self._add_and_display(key, parent.child_position(direction))
        parent.set_child(direction, node)
        self._size += 1
        if self.surface is not None:
            self.surface.draw_edge(
                parent.position, parent.radius, node.position, node.radius
            )
        self._LOGGER.debug(
            "Inserted %r as %s child of %r at %s",
            key, direction, parent.key, node.position,
        )
        return node

    def remove(self, key) -> bool:
        """
        删除第一个（自顶向下）等于 key 的节点；找不到时什么也不做并返回 False。
        双子节点：用右子树最小值覆盖当前 key（位置不变），
        再在右子树中继续删除该最小值。
        """
        parent: Optional[TreeNode] = None
        direction: Optional[str] = None
        current = self._root

        while current is not None:
            if key == current.key:
                if current.left is not None and current.right is not None:
                    successor = self.find_min(current.right)
                    self._LOGGER.debug(
                        "Replacing %r with successor %r at %s",
                        current.key, successor.key, current.position,
                    )
                    current.key = successor.key
                    key = successor.key
                    parent, direction, current = current, "right", current.right
                    continue

                # 0 or 1 child
                replacement = current.left if current.left is not None else current.right
                self._replace_child(parent, direction, replacement)
                self._size -= 1
                self._LOGGER.debug("Removed node %r at %s", key, current.position)
                return True

            parent = current
            if key < current.key:
                direction = "left"
                current = current.left
            else:
                direction = "right"
                current = current.right

        self._LOGGER.debug("Remove of %r ignored: key not present", key)
        return False

    def find(self, key) -> Optional[TreeNode]:
        current = self._root
        while current is not None:
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    @staticmethod
    def find_min(node: Optional[TreeNode]) -> TreeNode:
        if node is None:
            raise ValueError("find_min() requires a non-empty subtree")
        while node.left is not None:
            node = node.left
        return node

    def in_order(self) -> List:
        return [node.key for node in self]

    def render(self, surface=None):
        """
        按先序重新绘制整棵树（每个节点之后绘制其与父节点的连线）。
        删除不会刷新画布，调用方需要时可显式调用本方法。
        """
        surface = surface if surface is not None else self.surface
        if surface is None or self._root is None:
            return

        pending = [(self._root, None)]
        while pending:
            node, parent = pending.pop()
            surface.draw_node(node.position, node.radius, str(node.key))
            if parent is not None:
                surface.draw_edge(
                    parent.position, parent.radius, node.position, node.radius
                )
            if node.right is not None:
                pending.append((node.right, node))
            if node.left is not None:
                pending.append((node.left, node))

    # ---------- Internal helpers ----------

    def _add_and_display(self, key, position: Point) -> TreeNode:
        node = TreeNode(key, position)
        if self.surface is not None:
            self.surface.draw_node(node.position, node.radius, str(key))
        return node

    def _replace_child(self, parent, direction, new_child):
        if parent is None:
            self._root = new_child
        else:
            parent.set_child(direction, new_child)
