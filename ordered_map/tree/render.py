from __future__ import annotations

from typing import List, Optional

from . import base


def keys_in_order(root: Optional[base.TreeNode]) -> str:
    """Serialize a tree as a fully parenthesized in-order key listing.

    Every node renders as ``(<left>)key(<right>)`` with absent children left
    empty, and the whole tree is wrapped in one more pair of parentheses:
    a lone key ``A`` gives ``"(()A())"`` and an empty tree gives ``"()"``.
    """
    out: List[str] = ["("]
    if root is not None:
        _in_order_recursive(root, out)
    out.append(")")
    return "".join(out)


def _in_order_recursive(node: base.TreeNode, out: List[str]):
    out.append("(")
    if node._left is not None:
        _in_order_recursive(node._left, out)
    out.append(")")
    out.append(str(node.key))
    out.append("(")
    if node._right is not None:
        _in_order_recursive(node._right, out)
    out.append(")")


def pretty_keys(root: Optional[base.TreeNode]) -> str:
    """Render a tree one node per line, children indented below their parent.

    Left subtrees hang off a ``|`` so the branch continues down to the right
    sibling; absent children print as ``-null``.
    """
    out: List[str] = []
    _pretty_recursive(root, "", out)
    return "".join(out)


def _pretty_recursive(node: Optional[base.TreeNode], prefix: str, out: List[str]):
    if node is None:
        out.append(prefix + "-null\n")
        return

    out.append(prefix + "-" + str(node.key) + "\n")
    _pretty_recursive(node._left, prefix + " |", out)
    _pretty_recursive(node._right, prefix + "  ", out)
