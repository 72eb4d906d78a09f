#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_tree.py
-----------------

An ordered set of unique keys kept in a **Red‑Black** binary search tree.
Insertion, lookup and deletion all run in guaranteed O(log n) time.

Each node also carries a single write‑once *payload* slot.  A batch call to
``set_payload(winner, candidates)`` tags every candidate key (other than the
winner itself) with ``winner`` – but only the first time that key is
claimed.  Later batches never overwrite an existing tag.

Features
~~~~~~~~
* `tree.add(key)`        – insert (returns False for a duplicate key)
* `tree.remove(key)`     – delete (returns False if the key is missing)
* `tree.contains(key)` / `key in tree` – membership test
* `tree.clear()`         – drop every node
* `len(tree)`, `bool(tree)`
* iteration (`for key in tree:`) and `tree.in_order_keys()` – ascending keys
* `tree.min_key()`, `tree.max_key()`
* `tree.set_payload(winner, candidates)`, `tree.get_payload(key)`
* `tree.height()`, `tree.black_height()`
* `tree.validate()` – sanity‑check that the red‑black invariants hold

Absent children are plain ``None``.  When a black leaf is deleted the
vacated slot itself (``None`` plus the side it sits on under its parent)
stands for the "double black" position during the delete fix‑up, so no
placeholder node ever has to be linked into the tree.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_tree import RedBlackTree
>>> rbt = RedBlackTree(range(1, 8))
>>> rbt.add(3)
False
>>> rbt.set_payload(5, [1, 2, 3, 4])
>>> rbt.set_payload(7, [4, 5, 6])
>>> [rbt.get_payload(k) for k in rbt]
[5, 5, 5, 5, 7, 7, None]
>>> rbt.remove(5)
True
>>> rbt.in_order_keys()
[1, 2, 3, 4, 6, 7]
"""

from __future__ import annotations

import logging
from typing import (
    Generator,
    Generic,
    Iterable,
    List,
    Optional,
    TypeVar,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Type variable (keys must be totally ordered)
# ----------------------------------------------------------------------
K = TypeVar("K")

# ----------------------------------------------------------------------
#  Node colour constants – using simple booleans is fastest
# ----------------------------------------------------------------------
RED = True
BLACK = False


class _Node(Generic[K]):
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("key", "color", "left", "right", "parent", "payload")

    def __init__(
        self,
        key: K,
        color: bool = RED,
        parent: Optional["_Node[K]"] = None,
    ) -> None:
        self.key = key
        self.color = color
        self.left: Optional[_Node[K]] = None
        self.right: Optional[_Node[K]] = None
        # Back-reference only; the parent owns this node, not the reverse.
        self.parent = parent
        self.payload: Optional[K] = None

    def __repr__(self) -> str:
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.key!r}>"


def _is_red(node: Optional[_Node[K]]) -> bool:
    """Absent children count as black."""
    return node is not None and node.color == RED


class RedBlackTree(Generic[K]):
    """
    An ordered set implemented with a red‑black binary search tree.

    Duplicate keys are rejected rather than replaced, and missing keys are
    reported through boolean / ``None`` results instead of exceptions.  The
    structure is not thread‑safe; callers sharing a tree must serialise
    access themselves.
    """

    __slots__ = ("_root", "_size")

    # ------------------------------------------------------------------
    #   Construction / basic container protocol
    # ------------------------------------------------------------------
    def __init__(self, keys: Optional[Iterable[K]] = None) -> None:
        """
        Create an empty tree or optionally initialise it from an iterable of
        keys.

        Parameters
        ----------
        keys : iterable of K   optional
            If supplied, each key is inserted using ``add`` (duplicates are
            silently skipped, the whole operation is O(n log n)).
        """
        self._root: Optional[_Node[K]] = None
        self._size: int = 0

        if keys is not None:
            for key in keys:
                self.add(key)

    def clear(self) -> None:
        """Discard every node; the tree becomes empty."""
        self._root = None
        self._size = 0

    # ------------------------------------------------------------------
    #   Lookup
    # ------------------------------------------------------------------
    def _find_node(self, key: K) -> Optional[_Node[K]]:
        """Return the node that holds *key*, or ``None`` if not found."""
        cur = self._root
        while cur is not None:
            if key == cur.key:
                return cur
            elif key < cur.key:
                cur = cur.left
            else:
                cur = cur.right
        return None

    def contains(self, key: K) -> bool:
        return self._find_node(key) is not None

    def __contains__(self, key: object) -> bool:  # type: ignore[override]
        return self._find_node(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Generator[K, None, None]:
        """Yield keys in ascending order (in‑order traversal)."""
        stack: List[_Node[K]] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.key
            cur = cur.right

    def in_order_keys(self) -> List[K]:
        """Return a list of all keys in sorted order."""
        return list(self)

    # ------------------------------------------------------------------
    #   Minimum / maximum helpers
    # ------------------------------------------------------------------
    def _minimum_node(self, start: Optional[_Node[K]] = None) -> _Node[K]:
        """Return the node with the smallest key in the subtree rooted at *start*."""
        node = start if start is not None else self._root
        if node is None:
            raise ValueError("Tree is empty")
        while node.left is not None:
            node = node.left
        return node

    def _maximum_node(self, start: Optional[_Node[K]] = None) -> _Node[K]:
        """Return the node with the largest key in the subtree rooted at *start*."""
        node = start if start is not None else self._root
        if node is None:
            raise ValueError("Tree is empty")
        while node.right is not None:
            node = node.right
        return node

    def min_key(self) -> K:
        """Return the smallest key stored in the tree."""
        return self._minimum_node().key

    def max_key(self) -> K:
        """Return the largest key stored in the tree."""
        return self._maximum_node().key

    # ------------------------------------------------------------------
    #   Structural helpers
    # ------------------------------------------------------------------
    def _replace_child(
        self,
        parent: Optional[_Node[K]],
        old: _Node[K],
        new: Optional[_Node[K]],
    ) -> None:
        """Put `new` in the slot of `parent` currently occupied by `old`."""
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        elif parent.right is old:
            parent.right = new
        else:
            raise RuntimeError(f"{old!r} is not a child of its parent {parent!r}")
        if new is not None:
            new.parent = parent

    @staticmethod
    def _sibling(node: _Node[K], parent: _Node[K]) -> Optional[_Node[K]]:
        """Return the other child of `parent`; used for uncles as well."""
        if parent.left is node:
            return parent.right
        elif parent.right is node:
            return parent.left
        raise RuntimeError(f"{node!r} is not a child of its parent {parent!r}")

    # ------------------------------------------------------------------
    #   Left / right rotations – helper primitives
    # ------------------------------------------------------------------
    def _rotate_left(self, node: _Node[K]) -> None:
        """Left‑rotate the subtree rooted at `node`."""
        pivot = node.right
        if pivot is None:
            raise RuntimeError("rotate_left called on a node without a right child")
        parent = node.parent
        inner = pivot.left

        # Hook `pivot` into the parent slot first, while `node` still occupies it.
        self._replace_child(parent, node, pivot)
        node.right = inner
        if inner is not None:
            inner.parent = node
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node[K]) -> None:
        """Right‑rotate the subtree rooted at `node`."""
        pivot = node.left
        if pivot is None:
            raise RuntimeError("rotate_right called on a node without a left child")
        parent = node.parent
        inner = pivot.right

        self._replace_child(parent, node, pivot)
        node.left = inner
        if inner is not None:
            inner.parent = node
        pivot.right = node
        node.parent = pivot

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def add(self, key: K) -> bool:
        """
        Insert *key*.  Returns ``False`` (leaving the tree untouched) if the
        key is already present, ``True`` otherwise.
        """
        parent: Optional[_Node[K]] = None
        cur = self._root

        while cur is not None:
            parent = cur
            if key == cur.key:
                logger.debug("Key %r already present, insertion rejected", key)
                return False
            elif key < cur.key:
                cur = cur.left
            else:
                cur = cur.right

        new_node = _Node(key, color=RED, parent=parent)
        if parent is None:
            new_node.color = BLACK
            self._root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_after_insert(new_node)
        return True

    def _fix_after_insert(self, node: _Node[K]) -> None:
        """Restore red‑black properties after inserting the RED `node`."""
        while True:
            parent = node.parent
            if parent is None:
                # Reached the root
                node.color = BLACK
                return
            if parent.color == BLACK:
                return

            grandparent = parent.parent
            if grandparent is None:
                # Red parent is the root
                parent.color = BLACK
                return

            uncle = self._sibling(parent, grandparent)
            if _is_red(uncle):
                # Red uncle – recolour and continue from the grandparent
                parent.color = BLACK
                uncle.color = BLACK  # type: ignore[union-attr]
                grandparent.color = RED
                node = grandparent
                continue

            if parent is grandparent.left:
                if node is parent.right:
                    # Inner grandchild – straighten the zig‑zag first
                    self._rotate_left(parent)
                    parent = node
                # Outer grandchild
                self._rotate_right(grandparent)
            else:
                if node is parent.left:
                    self._rotate_right(parent)
                    parent = node
                self._rotate_left(grandparent)

            parent.color = BLACK
            grandparent.color = RED
            return

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def remove(self, key: K) -> bool:
        """
        Delete *key*.  Returns ``False`` if the key is not present.

        A node with two children takes over the key (and payload) of its
        in‑order successor, and the successor node – which has at most one
        child – is unlinked instead.
        """
        node = self._find_node(key)
        if node is None:
            logger.debug("Key %r not found, nothing removed", key)
            return False

        if node.left is not None and node.right is not None:
            successor = self._minimum_node(node.right)
            logger.debug("Removing %r via in-order successor %r", key, successor.key)
            node.key = successor.key
            node.payload = successor.payload
            node = successor

        child = node.left if node.left is not None else node.right
        parent = node.parent
        is_left = parent is not None and parent.left is node
        self._replace_child(parent, node, child)
        node.left = node.right = node.parent = None
        self._size -= 1

        if node.color == BLACK:
            # `child` may be None: the empty slot on `is_left` side of
            # `parent` is then the double-black position.
            self._fix_after_delete(child, parent, is_left)
        return True

    def _fix_after_delete(
        self,
        node: Optional[_Node[K]],
        parent: Optional[_Node[K]],
        is_left: bool,
    ) -> None:
        """
        Restore red‑black properties after a black node was removed.

        `node` is one black level short compared with its sibling subtree.
        It sits on the left (`is_left`) or right side of `parent` and may be
        ``None`` when a black leaf was removed.
        """
        while True:
            if _is_red(node):
                # A red node absorbs the missing black directly
                node.color = BLACK  # type: ignore[union-attr]
                return
            if parent is None:
                # Deficiency absorbed at the root
                return

            sibling = parent.right if is_left else parent.left
            if sibling is None:
                raise RuntimeError(f"Double-black position under {parent!r} has no sibling")

            if sibling.color == RED:
                # Red sibling – rotate it above the parent, then re-evaluate
                sibling.color = BLACK
                parent.color = RED
                if is_left:
                    self._rotate_left(parent)
                    sibling = parent.right
                else:
                    self._rotate_right(parent)
                    sibling = parent.left
                if sibling is None:
                    raise RuntimeError(f"Double-black position under {parent!r} has no sibling")

            if not _is_red(sibling.left) and not _is_red(sibling.right):
                # Black sibling with two black children
                sibling.color = RED
                if parent.color == RED:
                    parent.color = BLACK
                    return
                node = parent
                parent = node.parent
                if parent is not None:
                    is_left = node is parent.left
                continue

            # Black sibling with at least one red child
            outer = sibling.right if is_left else sibling.left
            if not _is_red(outer):
                # Inner nephew is red – turn it into the outer one
                inner = sibling.left if is_left else sibling.right
                inner.color = BLACK  # type: ignore[union-attr]
                sibling.color = RED
                if is_left:
                    self._rotate_right(sibling)
                    sibling = parent.right
                else:
                    self._rotate_left(sibling)
                    sibling = parent.left
                outer = sibling.right if is_left else sibling.left  # type: ignore[union-attr]

            # Outer nephew is red
            sibling.color = parent.color  # type: ignore[union-attr]
            parent.color = BLACK
            outer.color = BLACK  # type: ignore[union-attr]
            if is_left:
                self._rotate_left(parent)
            else:
                self._rotate_right(parent)
            return

    # ------------------------------------------------------------------
    #   Payload tagging
    # ------------------------------------------------------------------
    def set_payload(self, winner: K, candidates: Iterable[K]) -> None:
        """
        Tag every key in *candidates* except *winner* with *winner*.

        Keys that are missing from the tree are ignored, and a key that
        already carries a payload keeps it.
        """
        tagged = 0
        for key in candidates:
            if key == winner:
                continue
            node = self._find_node(key)
            if node is not None and node.payload is None:
                node.payload = winner
                tagged += 1
        logger.debug("Winner %r tagged %d key(s)", winner, tagged)

    def get_payload(self, key: K) -> Optional[K]:
        """Return the payload of *key*, or ``None`` if missing or untagged."""
        node = self._find_node(key)
        return node.payload if node is not None else None

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def height(self) -> int:
        """Return the number of nodes on the longest root‑to‑leaf path."""

        def depth(node: Optional[_Node[K]]) -> int:
            if node is None:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self._root)

    def black_height(self) -> int:
        """
        Return the number of black nodes below the root on any path to an
        absent child (the root itself is not counted).  The whole tree is
        validated on the way, so an inconsistent tree raises
        ``AssertionError``.
        """
        if self._root is None:
            return 0
        return self._check_subtree(self._root) - 1

    def validate(self) -> None:
        """
        Verify that the tree satisfies all red‑black invariants.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        if self._root is None:
            assert self._size == 0, "Empty tree reports a non-zero size"
            return
        assert self._root.parent is None, "Root has a parent"
        # Property 2: root is black
        assert self._root.color == BLACK, "Root is not black"
        self._check_subtree(self._root)

        keys = self.in_order_keys()
        assert all(a < b for a, b in zip(keys, keys[1:])), "In-order keys not strictly increasing"
        assert len(keys) == self._size, "Size counter out of sync"

    def _check_subtree(self, node: Optional[_Node[K]]) -> int:
        """Return the black count from `node` (inclusive) down to an absent child."""
        if node is None:
            return 0

        # Property 3: red nodes have black children
        if node.color == RED:
            assert not _is_red(node.left), "Red node has red left child"
            assert not _is_red(node.right), "Red node has red right child"

        # BST ordering and back-reference checks
        if node.left is not None:
            assert node.left.key < node.key, "BST property violated (left child larger)"
            assert node.left.parent is node, "Left child has a stale parent link"
        if node.right is not None:
            assert node.right.key > node.key, "BST property violated (right child smaller)"
            assert node.right.parent is node, "Right child has a stale parent link"

        left_black = self._check_subtree(node.left)
        right_black = self._check_subtree(node.right)

        # Property 4: all paths have the same black height
        assert left_black == right_black, "Black-height mismatch"
        return left_black + (1 if node.color == BLACK else 0)

    # ------------------------------------------------------------------
    #   Convenience string representation (for debugging)
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"RedBlackTree({self.in_order_keys()!r})"

