# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Record - one row of a nested-set table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """A nested-set row: an id, a name and the left/right bounds.

    A record's bounds strictly contain the bounds of all its descendants.

    Example:
        >>> food = Record(1, 'Food', 1, 18)
        >>> fruit = Record(3, 'Fruit', 2, 11)
        >>> food.contains(fruit)
        True
    """

    id: int
    name: str
    left: int
    right: int

    @property
    def is_valid(self) -> bool:
        """True if left < right."""
        return self.left < self.right

    @property
    def span(self) -> int:
        """Number of descendants implied by the bounds."""
        return (self.right - self.left - 1) // 2

    def contains(self, other: Record) -> bool:
        """True if this record is an ancestor of other."""
        return self.left < other.left and self.right > other.right

    def is_disjoint(self, other: Record) -> bool:
        """True if the two intervals do not overlap at all."""
        return self.right < other.left or other.right < self.left
