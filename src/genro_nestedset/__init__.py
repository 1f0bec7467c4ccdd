# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-NestedSet - Read-only trees rebuilt from nested-set records.

A lightweight, zero-dependency library that turns the flat rows of a
nested-set (MPTT) table into a navigable tree for the Genro ecosystem.
"""

__version__ = "0.1.0"

import logging

from .builder import TreeBuilder, build
from .exceptions import (
    DuplicateRecordError,
    EmptyInputError,
    MalformedRecordError,
    MultipleRootsError,
    NestedSetError,
    NodeNotFoundError,
)
from .loading import load_records
from .record import Record
from .tree import NestedSetTree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "NestedSetTree",
    "Record",
    # Building
    "TreeBuilder",
    "build",
    "load_records",
    # Exceptions
    "NestedSetError",
    "EmptyInputError",
    "MalformedRecordError",
    "DuplicateRecordError",
    "MultipleRootsError",
    "NodeNotFoundError",
]
