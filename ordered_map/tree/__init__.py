from .base import Tree, TreeNode
from .preorder import is_bst_preorder, preorder_keys
