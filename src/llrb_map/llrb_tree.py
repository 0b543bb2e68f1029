# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""Left-leaning red-black tree implementation of an ordered map"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass

from llrb_map.base import (
    AbstractOrderedMap,
    EmptyMapError,
    RED,
    BLACK,
    default_compare,
)
from llrb_map.profiling import track_performance

# Configure logging
logger = logging.getLogger(__name__)
# Clear all handlers to ensure we don't add duplicates
if logger.hasHandlers():
    logger.handlers.clear()
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)
logger.propagate = False

# When set, every public mutation re-validates the whole tree.
DEBUG = False


class InvariantError(Exception):
    """Raised when an LLRB tree invariant is violated."""
    pass


class LLRBNode:
    """
    A node of the LLRB tree.

    Attributes:
        key: The node's key.
        value: The value stored under key.
        color (bool): Color of the link from the parent (RED or BLACK).
        left (Optional[LLRBNode]): Subtree with smaller keys.
        right (Optional[LLRBNode]): Subtree with greater keys.
        size (int): Number of nodes in the subtree rooted here.
    """
    __slots__ = ("key", "value", "color", "left", "right", "size")

    def __init__(self, key: Any, value: Any, color: bool = RED, size: int = 1) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.left: Optional[LLRBNode] = None
        self.right: Optional[LLRBNode] = None
        self.size = size

    def __repr__(self) -> str:
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.key!r}:{self.value!r} size={self.size}>"


# ------------------------------------------------------------------
#   Node helpers and rebalancing primitives
# ------------------------------------------------------------------
def _is_red(node: Optional[LLRBNode]) -> bool:
    return node is not None and node.color == RED


def _size(node: Optional[LLRBNode]) -> int:
    return node.size if node is not None else 0


def _rotate_left(node: LLRBNode) -> LLRBNode:
    """Turn a right-leaning red link into a left-leaning one."""
    x = node.right
    node.right = x.left
    x.left = node
    x.color = node.color
    node.color = RED
    x.size = node.size
    node.size = 1 + _size(node.left) + _size(node.right)
    return x


def _rotate_right(node: LLRBNode) -> LLRBNode:
    """Turn a left-leaning red link into a right-leaning one."""
    x = node.left
    node.left = x.right
    x.right = node
    x.color = node.color
    node.color = RED
    x.size = node.size
    node.size = 1 + _size(node.left) + _size(node.right)
    return x


def _flip_colors(node: LLRBNode) -> None:
    # Both children must exist.
    node.color = not node.color
    node.left.color = not node.left.color
    node.right.color = not node.right.color


def _fix_up(node: LLRBNode) -> LLRBNode:
    """Post-insertion repair of the subtree rooted at node."""
    if _is_red(node.right) and not _is_red(node.left):
        node = _rotate_left(node)
    if _is_red(node.left) and _is_red(node.left.left):
        node = _rotate_right(node)
    if _is_red(node.left) and _is_red(node.right):
        _flip_colors(node)
    node.size = 1 + _size(node.left) + _size(node.right)
    return node


def _balance(node: LLRBNode) -> LLRBNode:
    """Post-deletion repair of the subtree rooted at node."""
    if _is_red(node.right):
        node = _rotate_left(node)
    if _is_red(node.left) and _is_red(node.left.left):
        node = _rotate_right(node)
    if _is_red(node.left) and _is_red(node.right):
        _flip_colors(node)
    node.size = 1 + _size(node.left) + _size(node.right)
    return node


def _move_red_left(node: LLRBNode) -> LLRBNode:
    """
    Make node.left or one of its children red, borrowing from the right
    sibling when it is a 3-node.
    """
    _flip_colors(node)
    if _is_red(node.right.left):
        node.right = _rotate_right(node.right)
        node = _rotate_left(node)
        _flip_colors(node)
    return node


def _move_red_right(node: LLRBNode) -> LLRBNode:
    """
    Make node.right or one of its children red, borrowing from the left
    sibling when it is a 3-node.
    """
    _flip_colors(node)
    if _is_red(node.left.left):
        node = _rotate_right(node)
        _flip_colors(node)
    return node


def _min_node(node: LLRBNode) -> LLRBNode:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: LLRBNode) -> LLRBNode:
    while node.right is not None:
        node = node.right
    return node


def _delete_min(node: LLRBNode) -> Optional[LLRBNode]:
    if node.left is None:
        return None
    if not _is_red(node.left) and not _is_red(node.left.left):
        node = _move_red_left(node)
    node.left = _delete_min(node.left)
    return _balance(node)


def _delete_max(node: LLRBNode) -> Optional[LLRBNode]:
    if _is_red(node.left):
        node = _rotate_right(node)
    if node.right is None:
        return None
    if not _is_red(node.right) and not _is_red(node.right.left):
        node = _move_red_right(node)
    node.right = _delete_max(node.right)
    return _balance(node)


def _height(node: Optional[LLRBNode]) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


class OrderedMap(AbstractOrderedMap):
    """
    An ordered map backed by a left-leaning red-black tree.

    Keys are ordered by the class attribute COMPARE, a three-way comparator.
    Subclasses with a custom comparator are built by
    llrb_map.factory.make_ordered_map_class.

    Attributes:
        root (Optional[LLRBNode]): The root node, or None if the map is empty.
    """
    __slots__ = ("root",)

    COMPARE: Callable[[Any, Any], int] = staticmethod(default_compare)

    def __init__(self, items: Optional[Iterable[Tuple[Any, Any]]] = None) -> None:
        """
        Create an empty map, optionally filled from items.

        Parameters:
            items: A mapping or an iterable of (key, value) pairs.
        """
        self.root: Optional[LLRBNode] = None
        if items is not None:
            if hasattr(items, "items"):
                items = items.items()
            for key, value in items:
                self.put(key, value)

    # ------------------------------------------------------------------
    #   Size and emptiness
    # ------------------------------------------------------------------
    def size(self) -> int:
        return _size(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return _size(self.root)

    def __bool__(self) -> bool:
        return self.root is not None

    def clear(self) -> None:
        self.root = None

    # ------------------------------------------------------------------
    #   Lookup
    # ------------------------------------------------------------------
    def _find(self, key: Any) -> Optional[LLRBNode]:
        compare = self.COMPARE
        node = self.root
        while node is not None:
            cmp = compare(key, node.key)
            if cmp < 0:
                node = node.left
            elif cmp > 0:
                node = node.right
            else:
                return node
        return None

    @track_performance
    def get(self, key: Any, default: Any = None) -> Any:
        """
        Return the value stored under key (O(log n)).

        Args:
            key: The key to search for.
            default: Returned when the key is absent.
        """
        node = self._find(key)
        return default if node is None else node.value

    def contains(self, key: Any) -> bool:
        return self._find(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def min(self) -> Any:
        """Return the smallest key, or None if the map is empty."""
        if self.root is None:
            return None
        return _min_node(self.root).key

    def max(self) -> Any:
        """Return the largest key, or None if the map is empty."""
        if self.root is None:
            return None
        return _max_node(self.root).key

    def height(self) -> int:
        """Length of the longest root-to-leaf path in links, -1 when empty."""
        return _height(self.root)

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    @track_performance
    def put(self, key: Any, value: Any) -> None:
        """
        Public method (O(log n)): Insert key with value, or overwrite the
        value if the key is already present.
        """
        self.root = self._put(self.root, key, value)
        self.root.color = BLACK
        if DEBUG:
            check_invariants(self)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def _put(self, node: Optional[LLRBNode], key: Any, value: Any) -> LLRBNode:
        if node is None:
            return LLRBNode(key, value, RED)

        cmp = self.COMPARE(key, node.key)
        if cmp < 0:
            node.left = self._put(node.left, key, value)
        elif cmp > 0:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value
        return _fix_up(node)

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def _prepare_delete(self, operation: str) -> None:
        if self.root is None:
            logger.debug(f"{operation}() called on an empty map")
            raise EmptyMapError(f"{operation}(): map is empty")
        # Let the root lend a red link to the descent.
        if not _is_red(self.root.left) and not _is_red(self.root.right):
            self.root.color = RED

    def _finish_delete(self) -> None:
        if self.root is not None:
            self.root.color = BLACK
        if DEBUG:
            check_invariants(self)

    @track_performance
    def delete(self, key: Any) -> bool:
        """
        Public method (O(log n)): Remove key and its value from the map.

        Returns:
            bool: True if the key was removed, False if it was not present.
                An absent key leaves the tree untouched.

        Raises:
            EmptyMapError: If the map is empty.
        """
        if self.root is None:
            raise EmptyMapError("delete(): map is empty")
        if self._find(key) is None:
            logger.debug(f"delete(): key {key!r} not present")
            return False
        self._prepare_delete("delete")
        self.root = self._delete(self.root, key)
        self._finish_delete()
        return True

    def __delitem__(self, key: Any) -> None:
        if self._find(key) is None:
            raise KeyError(key)
        self.delete(key)

    @track_performance
    def delete_min(self) -> Tuple[Any, Any]:
        """
        Remove the entry with the smallest key.

        Returns:
            Tuple: The removed (key, value) pair.

        Raises:
            EmptyMapError: If the map is empty.
        """
        self._prepare_delete("delete_min")
        node = _min_node(self.root)
        removed = (node.key, node.value)
        self.root = _delete_min(self.root)
        self._finish_delete()
        return removed

    @track_performance
    def delete_max(self) -> Tuple[Any, Any]:
        """
        Remove the entry with the largest key.

        Returns:
            Tuple: The removed (key, value) pair.

        Raises:
            EmptyMapError: If the map is empty.
        """
        self._prepare_delete("delete_max")
        node = _max_node(self.root)
        removed = (node.key, node.value)
        self.root = _delete_max(self.root)
        self._finish_delete()
        return removed

    def _delete(self, node: LLRBNode, key: Any) -> Optional[LLRBNode]:
        # key is known to be present below node.
        compare = self.COMPARE
        if compare(key, node.key) < 0:
            if not _is_red(node.left) and not _is_red(node.left.left):
                node = _move_red_left(node)
            node.left = self._delete(node.left, key)
        else:
            if _is_red(node.left):
                node = _rotate_right(node)
            if compare(key, node.key) == 0 and node.right is None:
                return None
            if not _is_red(node.right) and not _is_red(node.right.left):
                node = _move_red_right(node)
            if compare(key, node.key) == 0:
                # Take over the successor's entry, then unlink the successor.
                successor = _min_node(node.right)
                node.key = successor.key
                node.value = successor.value
                node.right = _delete_min(node.right)
            else:
                node.right = self._delete(node.right, key)
        return _balance(node)

    # ------------------------------------------------------------------
    #   Ordered traversal
    # ------------------------------------------------------------------
    def _iter_nodes(self, node: Optional[LLRBNode], lo: Any, hi: Any) -> Iterator[LLRBNode]:
        if node is None:
            return
        cmp_lo = -1 if lo is None else self.COMPARE(lo, node.key)
        cmp_hi = 1 if hi is None else self.COMPARE(hi, node.key)
        if cmp_lo < 0:
            yield from self._iter_nodes(node.left, lo, hi)
        if cmp_lo <= 0 and cmp_hi >= 0:
            yield node
        if cmp_hi > 0:
            yield from self._iter_nodes(node.right, lo, hi)

    def _range_nodes(self, lo: Any, hi: Any) -> Iterator[LLRBNode]:
        if self.root is None:
            return iter(())
        if lo is not None and hi is not None and self.COMPARE(lo, hi) > 0:
            return iter(())
        return self._iter_nodes(self.root, lo, hi)

    def iter_keys(self, lo: Any = None, hi: Any = None) -> Iterator[Any]:
        """
        Lazily yield the keys in [lo, hi] in ascending order, visiting only
        subtrees that can hold keys in range (O(log n + k)).

        A bound of None leaves that side of the range open.
        """
        return (node.key for node in self._range_nodes(lo, hi))

    def __iter__(self) -> Iterator[Any]:
        return self.iter_keys()

    def keys(self, lo: Any = None, hi: Any = None) -> List[Any]:
        """Return the keys in [lo, hi] in ascending order as a list."""
        return [node.key for node in self._range_nodes(lo, hi)]

    def values(self) -> List[Any]:
        return [node.value for node in self._range_nodes(None, None)]

    def items(self, lo: Any = None, hi: Any = None) -> List[Tuple[Any, Any]]:
        """Return the (key, value) pairs with keys in [lo, hi] in key order."""
        return [(node.key, node.value) for node in self._range_nodes(lo, hi)]

    # ------------------------------------------------------------------
    #   Debugging output
    # ------------------------------------------------------------------
    def print_structure(self, indent: int = 0) -> str:
        prefix = ' ' * indent
        if self.root is None:
            return f"{prefix}Empty {self.__class__.__name__}"

        result = [f"{prefix}{self.__class__.__name__}(size={self.size()}, height={self.height()})"]

        def walk(node: Optional[LLRBNode], depth: int, label: str) -> None:
            pad = prefix + ' ' * (4 * depth)
            if node is None:
                return
            col = "R" if node.color == RED else "B"
            result.append(f"{pad}{label}: {col} {node.key!r} (size={node.size})")
            walk(node.left, depth + 1, "L")
            walk(node.right, depth + 1, "R")

        walk(self.root, 1, "Root")
        return "\n".join(result)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{self.__class__.__name__}({{{body}}})"


# ------------------------------------------------------------------
#   Statistics and invariant checks
# ------------------------------------------------------------------
TREE_FLAGS = (
    "is_search_tree",
    "is_left_leaning",
    "no_double_red",
    "no_consecutive_red",
    "is_black_balanced",
    "root_is_black",
    "sizes_consistent",
)


@dataclass
class Stats:
    size: int
    height: int
    black_height: int
    red_count: int
    least_key: Optional[Any]
    greatest_key: Optional[Any]
    is_search_tree: bool
    is_left_leaning: bool
    no_double_red: bool
    no_consecutive_red: bool
    is_black_balanced: bool
    root_is_black: bool
    sizes_consistent: bool


def _empty_stats() -> Stats:
    return Stats(size               = 0,
                 height             = -1,
                 black_height       = 0,
                 red_count          = 0,
                 least_key          = None,
                 greatest_key       = None,
                 is_search_tree     = True,
                 is_left_leaning    = True,
                 no_double_red      = True,
                 no_consecutive_red = True,
                 is_black_balanced  = True,
                 root_is_black      = True,
                 sizes_consistent   = True)


def _subtree_stats(node: Optional[LLRBNode], compare: Callable[[Any, Any], int]) -> Stats:
    if node is None:
        return _empty_stats()

    left = _subtree_stats(node.left, compare)
    right = _subtree_stats(node.right, compare)

    stats = _empty_stats()
    stats.size = 1 + left.size + right.size
    stats.height = 1 + max(left.height, right.height)
    stats.red_count = left.red_count + right.red_count + (1 if node.color == RED else 0)
    stats.least_key = left.least_key if left.size else node.key
    stats.greatest_key = right.greatest_key if right.size else node.key

    stats.is_search_tree = (
        left.is_search_tree
        and right.is_search_tree
        and (left.size == 0 or compare(left.greatest_key, node.key) < 0)
        and (right.size == 0 or compare(right.least_key, node.key) > 0)
    )
    stats.is_left_leaning = (
        left.is_left_leaning and right.is_left_leaning and not _is_red(node.right)
    )
    stats.no_double_red = (
        left.no_double_red
        and right.no_double_red
        and not (_is_red(node.left) and _is_red(node.right))
    )
    stats.no_consecutive_red = (
        left.no_consecutive_red
        and right.no_consecutive_red
        and not (node.color == RED and (_is_red(node.left) or _is_red(node.right)))
    )
    stats.is_black_balanced = (
        left.is_black_balanced
        and right.is_black_balanced
        and left.black_height == right.black_height
    )
    stats.black_height = left.black_height + (1 if node.color == BLACK else 0)
    stats.sizes_consistent = (
        left.sizes_consistent and right.sizes_consistent and node.size == stats.size
    )
    return stats


def tree_stats_(t: OrderedMap) -> Stats:
    """
    Returns aggregated statistics and invariant flags for an LLRB map in
    **O(n)** time.
    """
    stats = _subtree_stats(t.root, t.COMPARE)
    stats.root_is_black = t.root is None or t.root.color == BLACK
    return stats


def check_invariants(t: OrderedMap) -> Stats:
    """Compute the tree's stats, raising InvariantError on the first failed flag."""
    stats = tree_stats_(t)
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logger.error(f"Invariant failed: {flag} is False")
            raise InvariantError(f"Invariant failed: {flag} is False\n{t.print_structure()}")
    return stats


def collect_keys(t: OrderedMap) -> List[Any]:
    """In-order list of every key, walked with an explicit stack."""
    out = []
    stack: List[LLRBNode] = []
    node = t.root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.key)
        node = node.right
    return out
