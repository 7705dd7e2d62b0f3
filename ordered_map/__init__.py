from . import tree

from .tree import Tree, TreeNode, is_bst_preorder, preorder_keys

__all__ = [
    "Tree",
    "TreeNode",
    "is_bst_preorder",
    "preorder_keys",
]
