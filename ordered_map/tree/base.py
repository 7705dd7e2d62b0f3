from __future__ import annotations

import logging
from typing import Generic, TypeVar, Optional, Iterable, Tuple, List

from . import preorder, render

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class TreeNode(Generic[K, V]):
    def __init__(self, key: K, value: V):
        self._key: K = key
        self.value: V = value

        self_cls = self.__class__

        self._left: Optional[self_cls[K, V]] = None
        self._right: Optional[self_cls[K, V]] = None
        self._size: int = 1

    @property
    def key(self) -> K:
        """The key associated with this node.

        Only a two-child deletion relabels a node with a new key.
        """
        return self._key

    @property
    def left(self) -> Optional[TreeNode[K, V]]:
        return self._left

    @property
    def right(self) -> Optional[TreeNode[K, V]]:
        return self._right

    @property
    def size(self) -> int:
        """Number of nodes in the subtree rooted here, including this one."""
        return self._size

    def _update_size(self):
        self._size = 1 + _size(self._left) + _size(self._right)

    def _copy_data(self, other: TreeNode[K, V]):
        self._key = other._key
        self.value = other.value

    def _find_node(self, key: K) -> TreeNode[K, V]:
        if key < self.key:
            if self._left is not None:
                return self._left._find_node(key)
        elif self.key < key:
            if self._right is not None:
                return self._right._find_node(key)
        else:
            return self

        raise KeyError(key)

    def _put(self, key: K, value: V) -> TreeNode[K, V]:
        if key < self.key:
            if self._left is None:
                self._left = self.__class__(key, value)
            else:
                self._left = self._left._put(key, value)
        elif self.key < key:
            if self._right is None:
                self._right = self.__class__(key, value)
            else:
                self._right = self._right._put(key, value)
        else:
            self.value = value

        self._update_size()
        return self

    def _max_node(self) -> TreeNode[K, V]:
        node = self
        while node._right is not None:
            node = node._right
        return node

    def _min_node(self) -> TreeNode[K, V]:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def _delete_node(self, key: K) -> Optional[TreeNode[K, V]]:
        """Remove ``key`` from this subtree and return the subtree's new root.

        The key must be present. A node with two children takes over the key
        and value of its predecessor, after the predecessor has been removed
        from the left subtree.
        """
        if key < self.key:
            self._left = self._left._delete_node(key)
        elif self.key < key:
            self._right = self._right._delete_node(key)
        else:
            if self._left is None:
                return self._right
            if self._right is None:
                return self._left

            pred = self._left._max_node()
            logger.debug("relabeling node %r with predecessor %r", self.key, pred.key)
            self._left = self._left._delete_node(pred.key)
            self._copy_data(pred)

        self._update_size()
        return self

    def _select(self, rank: int) -> TreeNode[K, V]:
        left_count = _size(self._left)
        if rank < left_count:
            return self._left._select(rank)
        elif rank > left_count:
            return self._right._select(rank - left_count - 1)
        return self

    def _height(self) -> int:
        # Counts levels, not edges.
        left_height = self._left._height() if self._left is not None else 0
        right_height = self._right._height() if self._right is not None else 0
        return 1 + max(left_height, right_height)


def _size(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    return node._size


class Tree(Generic[K, V]):
    """An ordered map backed by an unbalanced binary search tree.

    Every node caches the size of its subtree, so rank queries such as
    :meth:`median` run in time proportional to the tree height.
    Storing ``None`` as a value removes the key instead.
    """

    def __init__(self, items: Optional[Iterable[Tuple[K, V]]] = None):
        self._root: Optional[TreeNode[K, V]] = None

        if items is not None:
            for k, v in items:
                self.put(k, v)

    @property
    def root(self) -> Optional[TreeNode[K, V]]:
        return self._root

    def size(self) -> int:
        return _size(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def get_node(self, key: K) -> TreeNode[K, V]:
        """Directly retrieve a node within this tree.

        Raises KeyError if the tree does not contain the given key.
        """
        if self._root is None:
            raise KeyError(key)
        return self._root._find_node(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        try:
            return self.get_node(key).value
        except KeyError:
            return default

    def contains(self, key: K) -> bool:
        try:
            self.get_node(key)
            return True
        except KeyError:
            return False

    def put(self, key: K, value: Optional[V]):
        """Insert ``key`` or replace its value.

        A ``None`` value deletes the key.
        """
        if value is None:
            self.delete(key)
            return

        if self._root is None:
            self._root = TreeNode(key, value)
        else:
            self._root = self._root._put(key, value)

    def delete(self, key: K):
        """Remove ``key`` if present. Missing keys are ignored."""
        if not self.contains(key):
            logger.debug("delete of missing key %r ignored", key)
            return

        self._root = self._root._delete_node(key)

    def height(self) -> int:
        """Number of edges from the root to the deepest leaf.

        An empty tree has height -1 and a single node has height 0.
        """
        if self._root is None:
            return -1
        return self._root._height() - 1

    def select(self, rank: int) -> K:
        """Return the key with the given 0-based rank in sorted order."""
        if rank < 0 or rank >= self.size():
            raise IndexError("rank {} out of range for tree of size {}".format(rank, self.size()))
        return self._root._select(rank).key

    def median(self) -> Optional[K]:
        """Return the key at position (N + 1) // 2 of the sorted keys.

        Positions are 1-based, so an even-sized tree yields the lower of its
        two middle keys. Returns None for an empty tree.
        """
        n = self.size()
        if n == 0:
            return None
        return self.select((n + 1) // 2 - 1)

    def min(self) -> K:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._min_node().key

    def max(self) -> K:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._max_node().key

    def print_keys_in_order(self) -> str:
        return render.keys_in_order(self._root)

    def pretty_print_keys(self) -> str:
        return render.pretty_keys(self._root)

    def preorder_keys(self) -> List[K]:
        return preorder.preorder_keys(self._root)

    @staticmethod
    def is_bst_preorder(keys: Iterable[K]) -> bool:
        return preorder.is_bst_preorder(keys)

    def __getitem__(self, key: K) -> V:
        return self.get_node(key).value

    def __setitem__(self, key: K, val: Optional[V]):
        self.put(key, val)

    def __delitem__(self, key: K):
        if not self.contains(key):
            raise KeyError(key)
        self.delete(key)

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return "{}({})".format(self.__class__.__name__, self.print_keys_in_order())
