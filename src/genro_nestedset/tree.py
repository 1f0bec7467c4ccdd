# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NestedSetTree - A read-only tree rebuilt from nested-set records.

This module provides the NestedSetTree class, the in-memory snapshot of a
hierarchy stored in a flat table with left/right bounds. The tree is built
once from a list of rows and never changes afterwards; rebuilding from a
fresh list is the only way to pick up changes in storage.

Key Features:
    - **Arena storage**: All nodes live in one list; parent and children
      are integer handles into it
    - **O(1) lookup**: Record id to handle index for parent/children queries
    - **Iterative traversal**: Breadth-first, depth-first and walk never
      recurse, so deep trees are safe

Example:
    Basic usage::

        tree = NestedSetTree([
            (1, 'A', 1, 10),
            (2, 'B', 2, 5),
            (3, 'C', 6, 9),
            (4, 'D', 3, 4),
        ])
        tree.root                       # Record(id=1, name='A', ...)
        tree.children(tree.root)        # [B, C]
        [r.name for r in tree]          # ['A', 'B', 'C', 'D']
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator

from .builder import TreeBuilder
from .exceptions import NodeNotFoundError
from .node import NestedSetNode
from .record import Record


class NestedSetTree:
    """A read-only hierarchy rebuilt from nested-set records.

    NestedSetTree provides:
    - root: The root record
    - parent(value) / children(value): O(1) navigation
    - breadth_first_iterator() / depth_first_iterator(): Traversals
    - walk(): (path, record) pairs or callback on each record

    Queries accept a Record or its integer id and always return Records,
    never internal nodes.

    Example:
        >>> tree = NestedSetTree([(1, 'A', 1, 4), (2, 'B', 2, 3)])
        >>> tree.parent(2).name
        'A'
    """

    __slots__ = ('_nodes', '_root', '_index')

    def __init__(self, source: Iterable[Any]) -> None:
        """Build a NestedSetTree from flat rows.

        Args:
            source: Iterable of Record, dict or (id, name, left, right) rows,
                in any order.

        Raises:
            EmptyInputError: If source has no rows.
            MalformedRecordError: If a row is unreadable or has left >= right.
            DuplicateRecordError: If two rows share an id.
            MultipleRootsError: If more than one row has no containing ancestor.
        """
        self._nodes, self._root, self._index = TreeBuilder(source).build()

    @classmethod
    def build(cls, source: Iterable[Any]) -> NestedSetTree:
        """Build a tree from flat rows (same as calling the class)."""
        return cls(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"NestedSetTree(root={self.root.name!r}, size={len(self)})"

    def __len__(self) -> int:
        """Return the number of records in the tree."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[Record]:
        """Iterate over records breadth-first."""
        return self.breadth_first_iterator()

    def __contains__(self, value: Any) -> bool:
        """Check if a Record (or record id) is part of this tree."""
        try:
            self._resolve(value)
            return True
        except NodeNotFoundError:
            return False

    # ==================== Lookup ====================

    def _resolve(self, value: Record | int) -> NestedSetNode:
        """Find the node for a Record or record id.

        A Record must match the stored one field by field, not only by id.

        Raises:
            NodeNotFoundError: If the value is not part of the tree.
        """
        if isinstance(value, Record):
            handle = self._index.get(value.id)
            if handle is not None and self._nodes[handle].value == value:
                return self._nodes[handle]
        elif isinstance(value, int) and not isinstance(value, bool):
            handle = self._index.get(value)
            if handle is not None:
                return self._nodes[handle]
        raise NodeNotFoundError(f"{value!r} is not part of this tree", record=value)

    # ==================== Navigation ====================

    @property
    def root(self) -> Record:
        """The root record (smallest left bound)."""
        return self._nodes[self._root].value

    def parent(self, value: Record | int) -> Record | None:
        """Get the parent record, or None for the root.

        Raises:
            NodeNotFoundError: If the value is not part of the tree.
        """
        node = self._resolve(value)
        if node.parent is None:
            return None
        return self._nodes[node.parent].value

    def children(self, value: Record | int) -> list[Record]:
        """Get the child records in left-bound order (empty for leaves).

        Raises:
            NodeNotFoundError: If the value is not part of the tree.
        """
        node = self._resolve(value)
        return [self._nodes[h].value for h in node.children]

    def ancestors(self, value: Record | int) -> list[Record]:
        """Get the ancestors from the parent up to the root."""
        node = self._resolve(value)
        result: list[Record] = []
        while node.parent is not None:
            node = self._nodes[node.parent]
            result.append(node.value)
        return result

    def depth(self, value: Record | int) -> int:
        """Get the depth of a record in the tree (root=0)."""
        return len(self.ancestors(value))

    def is_leaf(self, value: Record | int) -> bool:
        """True if the record has no children."""
        return self._resolve(value).is_leaf

    # ==================== Traversal ====================

    def breadth_first_iterator(self) -> Iterator[Record]:
        """Iterate over records level by level, starting from the root.

        Each call returns a new, independent generator.

        Example:
            >>> [r.name for r in tree.breadth_first_iterator()]
            ['A', 'B', 'C', 'D']
        """
        queue = deque([self._root])
        while queue:
            node = self._nodes[queue.popleft()]
            queue.extend(node.children)
            yield node.value

    def depth_first_iterator(self) -> Iterator[Record]:
        """Iterate over records in pre-order, children in left-bound order."""
        stack = [self._root]
        while stack:
            node = self._nodes[stack.pop()]
            stack.extend(reversed(node.children))
            yield node.value

    def walk(
        self,
        callback: Callable[[Record], Any] | None = None,
    ) -> Iterator[tuple[str, Record]] | None:
        """Walk the tree depth-first, optionally calling a callback on each record.

        Args:
            callback: Optional function to call on each record.
                      If provided, walk returns None.

        Yields:
            Tuples of (path, record) if no callback provided, where path is
            the dotted chain of names from the root.

        Example:
            >>> for path, record in tree.walk():
            ...     print(path, record.id)

            >>> tree.walk(lambda r: print(r.name))
        """
        if callback is not None:
            for record in self.depth_first_iterator():
                callback(record)
            return None

        def _walk_gen() -> Iterator[tuple[str, Record]]:
            stack = [(self._root, '')]
            while stack:
                handle, prefix = stack.pop()
                node = self._nodes[handle]
                path = f"{prefix}.{node.value.name}" if prefix else node.value.name
                yield path, node.value
                stack.extend((h, path) for h in reversed(node.children))

        return _walk_gen()

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to a nested dict rooted at the root record.

        Each record becomes {'id', 'name', 'left', 'right', 'children'}.

        Returns:
            Nested dictionary representation of the tree.
        """
        converted: list[dict[str, Any]] = []
        # the arena is in left-bound order, so parents come before children
        for node in self._nodes:
            record = node.value
            item = {
                'id': record.id,
                'name': record.name,
                'left': record.left,
                'right': record.right,
                'children': [],
            }
            converted.append(item)
            if node.parent is not None:
                converted[node.parent]['children'].append(item)
        return converted[self._root]
