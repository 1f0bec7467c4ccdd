# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Nested-set tree exceptions."""

from __future__ import annotations

from typing import Any


class NestedSetError(Exception):
    """Base exception for nested-set tree errors."""

    def __init__(self, message: str, record: Any = None) -> None:
        super().__init__(message)
        self.record = record


class EmptyInputError(NestedSetError):
    """Raised when a tree is built from an empty record list."""

    pass


class MalformedRecordError(NestedSetError, ValueError):
    """Raised when a record has invalid bounds or cannot be read."""

    pass


class DuplicateRecordError(MalformedRecordError):
    """Raised when two records share the same id."""

    pass


class MultipleRootsError(NestedSetError):
    """Raised when more than one record has no containing ancestor."""

    pass


class NodeNotFoundError(NestedSetError, KeyError):
    """Raised when a queried value is not part of the tree."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ''
