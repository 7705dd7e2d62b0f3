from hypothesis import given, strategies as st
import pytest

from ordered_map import Tree, is_bst_preorder, preorder_keys


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([], True),
        ([1], True),
        ([10, 5, 1, 7, 40, 60], True),
        ([10, 50, 1, 7, 40, 60], False),
        ([2, 1, 3], True),
        ([2, 3, 1], False),
        ([3, 1, 1], False),
    ],
)
def test_is_bst_preorder(keys, expected):
    assert is_bst_preorder(keys) == expected
    assert Tree.is_bst_preorder(keys) == expected


def test_is_bst_preorder_accepts_tuples():
    assert is_bst_preorder((10, 5, 1, 7, 40, 60))


def test_is_bst_preorder_depends_on_order():
    # Both orders build the same tree; only its own pre-order passes.
    assert is_bst_preorder([4, 2, 1, 3, 6])
    assert not is_bst_preorder([4, 2, 6, 1, 3])
    assert is_bst_preorder([1, 2, 3, 4, 6])


def test_preorder_keys():
    tree = Tree((k, k) for k in [7, 3, 8, 1, 6, 2, 4, 5])
    assert tree.preorder_keys() == [7, 3, 1, 2, 6, 4, 5, 8]
    assert preorder_keys(tree.root) == [7, 3, 1, 2, 6, 4, 5, 8]
    assert preorder_keys(None) == []


@given(st.lists(st.integers(), unique=True))
def test_preorder_of_any_tree_is_valid(keys):
    tree = Tree((k, k) for k in keys)
    assert is_bst_preorder(tree.preorder_keys())
