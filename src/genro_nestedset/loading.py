# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for turning raw rows into Records.

Rows usually come straight from a query result. Supported row shapes:
- Record: passed through unchanged once its fields are checked
- dict: keys 'id', 'name', 'left', 'right' ('lft', 'rht', 'rgt' accepted)
- tuple/list: (id, name, left, right)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .exceptions import MalformedRecordError
from .record import Record

LEFT_KEYS = ('left', 'lft')
RIGHT_KEYS = ('right', 'rht', 'rgt')


def _pick(row: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in row:
            return row[key]
    raise MalformedRecordError(
        f"Row is missing field {keys[0]!r}: {row!r}", record=row
    )


def _as_int(row: Any, field: str, value: Any) -> int:
    # bool is an int subclass but never a valid id or bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecordError(
            f"Field {field!r} must be an integer, got {value!r}", record=row
        )
    return value


def load_from_dict(row: dict[str, Any]) -> Record:
    """Build a Record from a dict row.

    Args:
        row: Mapping with 'id', 'name' and the bounds.

    Returns:
        The Record.

    Raises:
        MalformedRecordError: If a field is missing or not an integer.

    Example:
        >>> load_from_dict({'id': 1, 'name': 'Food', 'lft': 1, 'rht': 18})
        Record(id=1, name='Food', left=1, right=18)
    """
    if 'id' not in row or 'name' not in row:
        raise MalformedRecordError(
            f"Row must have 'id' and 'name': {row!r}", record=row
        )
    return Record(
        id=_as_int(row, 'id', row['id']),
        name=str(row['name']),
        left=_as_int(row, 'left', _pick(row, LEFT_KEYS)),
        right=_as_int(row, 'right', _pick(row, RIGHT_KEYS)),
    )


def load_from_tuple(row: tuple | list) -> Record:
    """Build a Record from an (id, name, left, right) row."""
    if len(row) != 4:
        raise MalformedRecordError(
            f"Row must be (id, name, left, right), got {row!r}", record=row
        )
    row_id, name, left, right = row
    return Record(
        id=_as_int(row, 'id', row_id),
        name=str(name),
        left=_as_int(row, 'left', left),
        right=_as_int(row, 'right', right),
    )


def load_from_record(row: Record) -> Record:
    """Check the fields of a Record row and return it unchanged."""
    _as_int(row, 'id', row.id)
    _as_int(row, 'left', row.left)
    _as_int(row, 'right', row.right)
    return row


def load_records(source: Iterable[Any]) -> list[Record]:
    """Normalize a sequence of rows into a list of Records.

    Args:
        source: Iterable of Record, dict or tuple rows.

    Returns:
        List of Records in the source order.

    Raises:
        TypeError: If source is a string, a dict or not iterable.
        MalformedRecordError: If a row has an unsupported shape.

    Example:
        >>> load_records([(1, 'A', 1, 4), {'id': 2, 'name': 'B', 'left': 2, 'right': 3}])
        [Record(id=1, name='A', left=1, right=4), Record(id=2, name='B', left=2, right=3)]
    """
    if isinstance(source, (str, bytes, dict)) or not isinstance(source, Iterable):
        raise TypeError(
            f"source must be an iterable of rows, not {type(source).__name__}"
        )

    records: list[Record] = []
    for row in source:
        if isinstance(row, Record):
            records.append(load_from_record(row))
        elif isinstance(row, dict):
            records.append(load_from_dict(row))
        elif isinstance(row, (tuple, list)):
            records.append(load_from_tuple(row))
        else:
            raise MalformedRecordError(
                f"Unsupported row type {type(row).__name__}: {row!r}", record=row
            )
    return records
