from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


ROOT_POSITION = Point(200, 20)
NODE_RADIUS = 15

# 子节点相对父节点的偏移倍数（以半径为单位）
SPREAD = 3


def child_position(parent: Point, radius: float, direction: str) -> Point:
    """
    根据父节点中心与分支方向计算子节点中心：
    左子 (x - 3r, y + 3r)，右子 (x + 3r, y + 3r)。
    """
    offset = SPREAD * radius
    if direction == "left":
        return Point(parent.x - offset, parent.y + offset)
    if direction == "right":
        return Point(parent.x + offset, parent.y + offset)
    raise ValueError(f"unknown branch direction: {direction!r}")
