# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Nested-set tree node."""

from __future__ import annotations

from .record import Record


class NestedSetNode:
    """A node in a NestedSetTree arena.

    Each node has:
    - value: The Record it wraps
    - handle: Its position in the owning tree's arena
    - parent: Handle of the parent node, or None for the root
    - children: Handles of the child nodes, in left-bound order

    Parent and children are arena handles, not node references, so the
    tree holds no reference cycles.

    Example:
        >>> node = NestedSetNode(Record(1, 'Food', 1, 18), 0)
        >>> node.is_root
        True
    """

    __slots__ = ('value', 'handle', 'parent', 'children')

    def __init__(
        self,
        value: Record,
        handle: int,
        parent: int | None = None,
    ) -> None:
        self.value = value
        self.handle = handle
        self.parent = parent
        self.children: list[int] = []

    def __repr__(self) -> str:
        return (
            f"NestedSetNode({self.value.name!r}, handle={self.handle}, "
            f"parent={self.parent}, children={self.children})"
        )

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children
