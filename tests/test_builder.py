# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for TreeBuilder and tree construction errors."""

import logging

import pytest

from genro_nestedset import (
    DuplicateRecordError,
    EmptyInputError,
    MalformedRecordError,
    MultipleRootsError,
    NestedSetError,
    NestedSetTree,
    Record,
    TreeBuilder,
    build,
)


class TestTreeBuilder:
    """Tests for the candidacy-stack builder."""

    def test_build_returns_arena_in_left_order(self, abcd_records):
        """Test the arena is sorted by left bound."""
        nodes, root, index = TreeBuilder(abcd_records).build()
        assert [n.value.left for n in nodes] == [1, 2, 3, 6]
        assert root == 0
        assert nodes[root].value.name == 'A'

    def test_build_links_handles(self, abcd_records):
        """Test parent and children are stored as arena handles."""
        nodes, root, index = TreeBuilder(abcd_records).build()
        a, b, d, c = nodes
        assert a.parent is None
        assert a.children == [b.handle, c.handle]
        assert b.children == [d.handle]
        assert d.parent == b.handle
        assert c.children == []

    def test_index_is_keyed_by_id(self, abcd_records):
        """Test the index maps record id to handle."""
        nodes, root, index = TreeBuilder(abcd_records).build()
        assert set(index) == {1, 2, 3, 4}
        for record_id, handle in index.items():
            assert nodes[handle].value.id == record_id

    def test_unsorted_input(self, food_records):
        """Test input order does not matter."""
        tree = NestedSetTree(reversed(food_records))
        assert tree.root.name == 'Food'
        assert [r.name for r in tree.children(tree.root)] == ['Fruit', 'Meat']

    def test_single_record(self):
        """Test a tree with only a root."""
        tree = build([(1, 'Only', 1, 2)])
        assert tree.root.name == 'Only'
        assert tree.children(tree.root) == []
        assert tree.parent(tree.root) is None
        assert len(tree) == 1

    def test_root_does_not_need_left_one(self):
        """Test the root is the smallest left, whatever its value."""
        tree = build([(7, 'Sub', 11, 12), (5, 'Top', 10, 13)])
        assert tree.root.name == 'Top'

    def test_build_function_and_classmethod(self, abcd_records):
        """Test build() and NestedSetTree.build() are equivalent."""
        assert isinstance(build(abcd_records), NestedSetTree)
        assert isinstance(NestedSetTree.build(abcd_records), NestedSetTree)

    def test_build_logs_debug(self, abcd_records, caplog):
        """Test a debug line is logged for each build."""
        with caplog.at_level(logging.DEBUG, logger='genro_nestedset'):
            build(abcd_records)
        assert 'Built nested-set tree: 4 records' in caplog.text


class TestBuildErrors:
    """Tests for build failures."""

    def test_empty_input(self):
        """Test an empty list raises EmptyInputError."""
        with pytest.raises(EmptyInputError, match="empty"):
            build([])

    def test_left_equals_right(self):
        """Test left == right raises MalformedRecordError."""
        with pytest.raises(MalformedRecordError, match="left=5 >= right=5") as exc:
            build([(1, 'A', 5, 5)])
        assert exc.value.record == Record(1, 'A', 5, 5)

    def test_left_greater_than_right(self):
        """Test left > right raises MalformedRecordError."""
        with pytest.raises(MalformedRecordError):
            build([(1, 'A', 1, 10), (2, 'B', 4, 3)])

    def test_malformed_is_value_error(self):
        """Test MalformedRecordError is also a ValueError."""
        with pytest.raises(ValueError):
            build([(1, 'A', 2, 1)])

    def test_multiple_roots(self):
        """Test two disjoint top-level records raise MultipleRootsError."""
        with pytest.raises(MultipleRootsError, match="no ancestor") as exc:
            build([(1, 'A', 1, 10), (2, 'B', 11, 20)])
        assert exc.value.record.name == 'B'

    def test_multiple_roots_after_subtree(self):
        """Test a second root is detected after a complete subtree."""
        rows = [(1, 'A', 1, 4), (2, 'B', 2, 3), (3, 'C', 5, 8), (4, 'D', 6, 7)]
        with pytest.raises(MultipleRootsError):
            build(rows)

    def test_multiple_roots_logs_warning(self, caplog):
        """Test a warning is logged before MultipleRootsError is raised."""
        with caplog.at_level(logging.WARNING, logger='genro_nestedset'):
            with pytest.raises(MultipleRootsError):
                build([(1, 'A', 1, 10), (2, 'B', 11, 20)])
        assert 'not contained by any earlier record' in caplog.text

    def test_partial_overlap_logs_warning(self, caplog):
        """Test a record overlapping a closed sibling is built but logged."""
        rows = [(1, 'A', 1, 10), (2, 'B', 2, 6), (3, 'C', 4, 8)]
        with caplog.at_level(logging.WARNING, logger='genro_nestedset'):
            tree = build(rows)
        assert tree.parent(3).name == 'A'
        assert 'partly overlaps' in caplog.text
        assert "name='B'" in caplog.text

    def test_well_formed_input_logs_no_warning(self, food_records, caplog):
        """Test nested and disjoint records produce no warning."""
        with caplog.at_level(logging.WARNING, logger='genro_nestedset'):
            build(food_records)
        assert caplog.text == ''

    def test_duplicate_ids(self):
        """Test repeated ids raise DuplicateRecordError."""
        with pytest.raises(DuplicateRecordError, match="more than once"):
            build([(1, 'A', 1, 4), (1, 'B', 2, 3)])

    def test_duplicate_is_malformed(self):
        """Test DuplicateRecordError is a MalformedRecordError."""
        with pytest.raises(MalformedRecordError):
            build([(1, 'A', 1, 4), (1, 'A', 1, 4)])

    def test_all_errors_share_base(self):
        """Test every build error derives from NestedSetError."""
        for rows in ([], [(1, 'A', 5, 5)], [(1, 'A', 1, 2), (2, 'B', 3, 4)]):
            with pytest.raises(NestedSetError):
                build(rows)
