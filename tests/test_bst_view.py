import pytest

pytest.importorskip("PyQt5")

from bst.bst_model import BinarySearchTree  # noqa: E402
from bst.bst_view import BSTEdgeItem, BSTNodeItem, BSTView  # noqa: E402


@pytest.fixture
def view(qapp):
    return BSTView()


def test_draw_node_is_centred_on_position(view):
    item = view.draw_node((200, 20), 15, "50")

    assert item.scene() is view.scene
    assert item.center().x() == 200
    assert item.center().y() == 20
    assert item.boundingRect().width() == 30
    assert item.label == "50"


def test_draw_edge_offsets_by_radius(view):
    item = view.draw_edge((200, 20), 15, (155, 65), 15)

    assert isinstance(item, BSTEdgeItem)
    assert (item.start.x(), item.start.y()) == (200, 35)
    assert (item.end.x(), item.end.y()) == (155, 50)


def test_tree_draws_incrementally(view):
    tree = BinarySearchTree(surface=view)
    for key in [50, 30, 70]:
        tree.insert(key)

    assert [item.label for item in view.node_items] == ["50", "30", "70"]
    assert len(view.edge_items) == 2


def test_remove_leaves_picture_stale(view):
    tree = BinarySearchTree(surface=view)
    for key in [50, 30, 70]:
        tree.insert(key)

    tree.remove(30)

    assert len(view.node_items) == 3
    assert len(view.edge_items) == 2


def test_clear_then_render_resynchronises(view):
    tree = BinarySearchTree(surface=view)
    for key in [50, 30, 70, 20, 40]:
        tree.insert(key)
    tree.remove(30)

    view.clear()
    tree.render()

    assert [item.label for item in view.node_items] == ["50", "40", "20", "70"]
    assert len(view.edge_items) == 3
    assert len(view.scene.items()) == 7


def test_highlight_by_position(view):
    tree = BinarySearchTree(surface=view)
    tree.insert(50)
    node = tree.insert(30)

    assert view.highlight(node.position, "30")
    item = view.item_at(node.position)
    assert item.fillColor == BSTView.highlight_color

    view.clear_highlight()
    assert item.fillColor == BSTNodeItem.fill_color


def test_highlight_missing_position(view):
    assert view.highlight((0, 0), "1") is False


def test_clear_empties_scene(view):
    view.draw_node((200, 20), 15, "1")
    view.draw_edge((200, 20), 15, (155, 65), 15)

    view.clear()

    assert view.scene.items() == []
    assert view.node_items == []
    assert view.item_at((200, 20)) is None


def test_highlight_picks_matching_circle_on_shared_position(view):
    tree = BinarySearchTree(surface=view)
    for key in [50, 30, 70, 40, 60]:
        tree.insert(key)
    node = tree.find(40)

    # root.left.right and root.right.left both sit at (200, 110)
    assert node.position == tree.find(60).position
    assert [item.label for item in view.items_at(node.position)] == ["40", "60"]

    assert view.highlight(node.position, str(node.key))

    highlighted = [
        item.label for item in view.node_items if item.fillColor == BSTView.highlight_color
    ]
    assert highlighted == ["40"]


def test_highlight_refuses_circle_with_overwritten_key(view):
    tree = BinarySearchTree(surface=view)
    for key in [50, 30, 70, 20, 40]:
        tree.insert(key)
    tree.remove(30)
    node = tree.find(40)

    # the surviving node still shows its old key on the canvas
    assert view.item_at(node.position).label == "30"
    assert view.highlight(node.position, str(node.key)) is False
    assert all(item.fillColor == BSTNodeItem.fill_color for item in view.node_items)
