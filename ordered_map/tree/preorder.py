from __future__ import annotations

from typing import Iterable, List, Optional

from . import base


def preorder_keys(root: Optional[base.TreeNode]) -> List:
    keys: List = []
    if root is not None:
        _preorder_recursive(root, keys)
    return keys


def _preorder_recursive(node: base.TreeNode, keys: list):
    keys.append(node.key)
    if node._left is not None:
        _preorder_recursive(node._left, keys)
    if node._right is not None:
        _preorder_recursive(node._right, keys)


def is_bst_preorder(keys: Iterable) -> bool:
    """Check whether ``keys`` reproduces itself as a BST pre-order walk.

    The keys are inserted into a fresh tree in the given order, and the
    result is compared against that tree's pre-order traversal. Sequences
    with repeated keys build a smaller tree and never match.
    """
    keys = list(keys)
    tree = base.Tree((k, k) for k in keys)
    return preorder_keys(tree.root) == keys
