import pytest

from bintrees_lab.bst import BstNode, tree_delete, tree_insert

KEYS = [15, 6, 18, 17, 20, 3, 7, 2, 4, 13, 9]


def _build():
    root = BstNode(15)
    for key in KEYS[1:]:
        root.add_node(key)
    return root


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.key] + _inorder(node.right)


def _all_nodes(node):
    if node is None:
        return []
    return [node] + _all_nodes(node.left) + _all_nodes(node.right)


def test_add_node_builds_search_tree():
    root = _build()
    assert _inorder(root) == sorted(KEYS)
    assert root.left.key == 6
    assert root.right.key == 18
    assert root.left.right.right.left.key == 9


def test_add_node_sets_parent_links():
    root = _build()
    for node in _all_nodes(root):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
    assert root.parent is None


def test_add_node_ignores_duplicate():
    root = _build()
    assert root.add_node(7) is True
    assert _inorder(root) == sorted(KEYS)


def test_add_child_replaces_and_links():
    root = BstNode(10)
    child = root.add_left_child(5)
    assert root.left is child
    assert child.parent is root
    replacement = root.add_right_child(12)
    assert root.right is replacement
    assert replacement.parent is root


def test_copy_shares_links():
    root = _build()
    clone = root.left.copy()
    assert clone is not root.left
    assert clone.key == 6
    assert clone.parent is root
    assert clone.left is root.left.left
    assert clone.right is root.left.right


@pytest.mark.parametrize("key", [15, 9, 2, 20, 13])
def test_tree_search_found(key):
    root = _build()
    found = root.tree_search(key)
    assert found.key == key


def test_tree_search_missing():
    root = _build()
    assert root.tree_search(22) is None
    assert root.tree_search(1) is None


def test_tree_search_returns_copy():
    root = _build()
    found = root.tree_search(6)
    assert found is not root.left
    assert found.left is root.left.left


def test_minimum_and_maximum():
    root = _build()
    assert root.minimum().key == min(KEYS)
    assert root.maximum().key == max(KEYS)
    assert root.left.minimum().key == 2
    assert root.right.maximum().key == 20


def test_minimum_of_leaf_is_itself():
    leaf = BstNode(4)
    assert leaf.minimum().key == 4
    assert leaf.maximum().key == 4


def test_root_from_deep_node():
    root = _build()
    deepest = root.left.right.right.left
    assert deepest.root() is root
    assert root.maximum().root() is root


def test_successor_chain_matches_sorted_order():
    root = _build()
    ordered = sorted(KEYS)
    for node in _all_nodes(root):
        nxt = node.successor()
        index = ordered.index(node.key)
        if index == len(ordered) - 1:
            assert nxt is None
        else:
            assert nxt.key == ordered[index + 1]


def test_predecessor_chain_matches_sorted_order():
    root = _build()
    ordered = sorted(KEYS)
    for node in _all_nodes(root):
        prev = node.predecessor()
        index = ordered.index(node.key)
        if index == 0:
            assert prev is None
        else:
            assert prev.key == ordered[index - 1]


def test_successor_and_predecessor_of_six():
    root = _build()
    target = root.tree_search(6)
    assert target.successor().key == 7
    assert target.predecessor().key == 4


def test_successor_simpler_of_minimum_is_parent():
    root = _build()
    node = root.tree_search(2)
    assert node.successor_simpler().key == 3


def test_successor_simpler_of_root_raises():
    root = BstNode(15)
    with pytest.raises(ValueError):
        root.successor_simpler()


def test_median_returns_children_and_key(capsys):
    root = _build()
    assert root.median() == [6, 15, 18]
    out = capsys.readouterr().out
    assert out.endswith("Total node is : 3\n")


def test_median_requires_both_children():
    root = BstNode(15)
    root.add_node(6)
    with pytest.raises(ValueError):
        root.median()


def test_inorder_walk_prints_every_key(capsys):
    root = _build()
    assert root.inorder_walk() == 15
    out = capsys.readouterr().out
    printed = [int(part) for part in out.split(", ") if part]
    assert printed[0] == 15
    assert sorted(printed) == sorted(KEYS)


def test_tree_insert_into_empty():
    node = tree_insert(None, 15)
    assert node.key == 15
    assert node.left is None and node.right is None


def test_tree_insert_returns_root_and_keeps_order():
    root = tree_insert(None, 15)
    for key in KEYS[1:]:
        root = tree_insert(root, key)
    assert root.key == 15
    assert _inorder(root) == sorted(KEYS)


def test_tree_insert_duplicate_goes_left():
    root = tree_insert(None, 15)
    root = tree_insert(root, 15)
    assert root.left.key == 15
    assert root.left.parent is root


def test_tree_delete_root():
    root = _build()
    new_root = tree_delete(root)
    assert new_root.key == 17
    assert new_root.left.key == 6
    assert new_root.right.key == 18
    assert new_root.right.left is None
    expected = sorted(k for k in KEYS if k != 15)
    assert _inorder(new_root) == expected


def test_tree_delete_node_with_only_right_child():
    root = _build()
    six = root.left
    seven = six.right
    replacement = tree_delete(seven)
    assert replacement.key == 13
    assert six.right is replacement
    assert replacement.parent is six
    assert _inorder(root) == sorted(k for k in KEYS if k != 7)


def test_tree_delete_node_with_only_left_child():
    root = tree_insert(None, 10)
    root = tree_insert(root, 5)
    root = tree_insert(root, 3)
    replacement = tree_delete(root.left)
    assert replacement.key == 3
    assert root.left is replacement
    assert _inorder(root) == [3, 10]


def test_tree_delete_leaf_raises():
    root = _build()
    with pytest.raises(ValueError):
        tree_delete(root.left.left.left)