# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: small nested-set tables."""

import pytest

from genro_nestedset import Record


# Food
# ├── Fruit
# │   ├── Red
# │   │   └── Cherry
# │   └── Yellow
# │       └── Banana
# └── Meat
#     ├── Beef
#     └── Pork
FOOD_ROWS = [
    (1, 'Food', 1, 18),
    (2, 'Meat', 12, 17),
    (3, 'Fruit', 2, 11),
    (4, 'Yellow', 7, 10),
    (5, 'Red', 3, 6),
    (6, 'Cherry', 4, 5),
    (7, 'Banana', 8, 9),
    (8, 'Pork', 15, 16),
    (9, 'Beef', 13, 14),
]

ABCD_ROWS = [
    (1, 'A', 1, 10),
    (2, 'B', 2, 5),
    (3, 'C', 6, 9),
    (4, 'D', 3, 4),
]


@pytest.fixture
def food_records():
    return [Record(*row) for row in FOOD_ROWS]


@pytest.fixture
def abcd_records():
    return [Record(*row) for row in ABCD_ROWS]
