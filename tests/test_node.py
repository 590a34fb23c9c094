import pytest

from bintree.node import Node


@pytest.fixture
def small_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def test_node_records_parent_without_attaching():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None
    assert root.right is None


def test_new_node_has_no_children():
    node = Node(7)
    assert node.left is None and node.right is None
    assert node.value == 7


def test_insert_left_on_empty_slot(small_tree):
    new = small_tree.right.insert_left(128)
    assert small_tree.right.left is new
    assert new.parent is small_tree.right
    assert new.value == 128
    assert new.left is None


def test_insert_left_pushes_existing_child_down(small_tree):
    old_left = small_tree.left
    new = small_tree.insert_left(54)
    assert small_tree.left is new
    assert new.parent is small_tree
    assert new.left is old_left
    assert old_left.parent is new
    assert new.right is None


def test_insert_right_on_empty_slot(small_tree):
    new = small_tree.left.insert_right(54)
    assert small_tree.left.right is new
    assert new.parent is small_tree.left
    assert new.value == 54


def test_insert_right_pushes_existing_child_down(small_tree):
    old_right = small_tree.right
    new = small_tree.insert_right(128)
    assert small_tree.right is new
    assert new.right is old_right
    assert old_right.parent is new
    assert new.left is None


def test_is_leaf(small_tree):
    small_tree.left.insert_right(54)
    small_tree.insert_right(128)
    assert small_tree.is_leaf() is False
    assert small_tree.right.is_leaf() is False
    assert small_tree.right.right.is_leaf() is True


def test_is_root(small_tree):
    small_tree.left.insert_right(54)
    small_tree.insert_right(128)
    assert small_tree.is_root() is True
    assert small_tree.right.is_root() is False
    assert small_tree.right.right.is_root() is False


def test_nodes_with_equal_values_stay_distinct():
    root = Node(1)
    child = root.insert_left(1)
    assert (child == root) is False
    assert (root == root) is True
    assert [child, root].index(root) == 1
    assert child.parent is root