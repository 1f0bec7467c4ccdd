# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeBuilder - rebuilds a tree from flat nested-set records.

Records are sorted by left bound, so every possible ancestor of a record
is seen before the record itself. A stack of open ancestor candidates is
kept while scanning: a candidate that does not contain the current record
cannot contain any later one either, so it is popped for good. Each
record is pushed once and popped at most once, and the whole build is
O(n log n), dominated by the sort.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, TYPE_CHECKING

from .exceptions import (
    DuplicateRecordError,
    EmptyInputError,
    MalformedRecordError,
    MultipleRootsError,
)
from .loading import load_records
from .node import NestedSetNode

if TYPE_CHECKING:
    from .tree import NestedSetTree

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Single-pass builder for the NestedSetTree arena.

    Example:
        >>> nodes, root, index = TreeBuilder([(1, 'A', 1, 4), (2, 'B', 2, 3)]).build()
        >>> nodes[root].children
        [1]
    """

    __slots__ = ('records',)

    def __init__(self, source: Iterable[Any]) -> None:
        """Initialize a TreeBuilder.

        Args:
            source: Rows accepted by load_records().
        """
        self.records = load_records(source)

    def validate(self) -> None:
        """Check the input before any node is created.

        Raises:
            EmptyInputError: If there are no records.
            MalformedRecordError: If a record has left >= right.
            DuplicateRecordError: If two records share an id.
        """
        if not self.records:
            raise EmptyInputError("Cannot build a tree from an empty record list")

        seen: set[int] = set()
        for record in self.records:
            if not record.is_valid:
                raise MalformedRecordError(
                    f"Record {record.id} has left={record.left} >= right={record.right}",
                    record=record,
                )
            if record.id in seen:
                raise DuplicateRecordError(
                    f"Record id {record.id} appears more than once", record=record
                )
            seen.add(record.id)

    def build(self) -> tuple[list[NestedSetNode], int, dict[int, int]]:
        """Run the candidacy-stack algorithm.

        Returns:
            Tuple of (nodes, root_handle, index) where nodes is the arena
            in left-bound order and index maps record id to handle.

        Raises:
            MultipleRootsError: If a second record has no containing ancestor.
        """
        self.validate()

        ordered = sorted(self.records, key=lambda r: r.left)
        nodes: list[NestedSetNode] = []
        index: dict[int, int] = {}
        stack: list[int] = []
        root: int | None = None

        for handle, record in enumerate(ordered):
            while stack and not nodes[stack[-1]].value.contains(record):
                candidate = nodes[stack.pop()].value
                if not candidate.is_disjoint(record):
                    logger.warning(
                        "Record %r partly overlaps %r, bounds are corrupted",
                        record, candidate,
                    )

            node = NestedSetNode(record, handle)
            if stack:
                parent = nodes[stack[-1]]
                node.parent = parent.handle
                parent.children.append(handle)
            elif root is None:
                root = handle
            else:
                logger.warning(
                    "Record %r is not contained by any earlier record, root is %r",
                    record, nodes[root].value,
                )
                raise MultipleRootsError(
                    f"Record {record.id} ({record.name!r}) has no ancestor "
                    f"but {nodes[root].value.name!r} is already the root",
                    record=record,
                )

            nodes.append(node)
            stack.append(handle)
            index[record.id] = handle

        logger.debug(
            "Built nested-set tree: %d records, root %r", len(nodes), nodes[root].value
        )
        return nodes, root, index


def build(source: Iterable[Any]) -> NestedSetTree:
    """Build a NestedSetTree from flat nested-set rows.

    Args:
        source: Rows accepted by load_records().

    Returns:
        The built, read-only tree.

    Example:
        >>> tree = build([(1, 'A', 1, 10), (2, 'B', 2, 5), (3, 'C', 6, 9), (4, 'D', 3, 4)])
        >>> tree.root.name
        'A'
    """
    from .tree import NestedSetTree
    return NestedSetTree(source)
