"""
Tests for row and column queries.

Covers content evaluation, predicates, branching and the two
stateful queries (Counter, RunningDifference).
"""

import pytest
from treereport.errors import ConstructionError
from treereport.model import Endpoint
from treereport.queries import (
    Counter,
    EveryRowQuery,
    Getter,
    Literal,
    MatchingRowQuery,
    Nested,
    OneTimeRowQuery,
    Rows,
    RunningDifference,
)
from treereport.source import TreeNode, WrappedNode


class TestColumnQueries:
    """Test literal and nested column content."""

    def test_literal_ignores_source(self):
        content = Literal("Date").content(TreeNode("anything"))
        assert content == Endpoint("Date")

    def test_getter_reads_bound_source(self):
        content = Getter(lambda node: node.value * 2).content(TreeNode(21))
        assert content == Endpoint(42)

    def test_rows_yields_nested(self):
        inner = EveryRowQuery(Literal("x"))
        content = Rows(inner).content(TreeNode())
        assert isinstance(content, Nested)
        assert content.row_queries == (inner,)


class TestCounter:
    """Test the counter query."""

    def test_starts_at_origin(self):
        counter = Counter(origin=5)
        values = [counter.content(TreeNode()).value for _ in range(3)]
        assert values == ["5", "6", "7"]

    def test_default_origin_is_one(self):
        assert Counter().content(TreeNode()).value == "1"

    def test_state_carries_across_reuse(self):
        """The count continues where it stopped."""
        counter = Counter()
        counter.content(TreeNode())
        counter.content(TreeNode())
        assert counter.content(TreeNode()).value == "3"

    def test_reset(self):
        counter = Counter(origin=10)
        counter.content(TreeNode())
        counter.reset()
        assert counter.content(TreeNode()).value == "10"


class TestRunningDifference:
    """Test the running-difference query."""

    def test_first_reading_is_zero_baseline(self):
        diff = RunningDifference(lambda node: node.value)
        assert diff.content(TreeNode(100)).value == 0

    def test_subsequent_readings_are_deltas(self):
        diff = RunningDifference(lambda node: node.value)
        values = [diff.content(TreeNode(v)).value for v in (100, 130, 125)]
        assert values == [0, 30, -5]

    def test_float_baseline_keeps_type(self):
        diff = RunningDifference(lambda node: node.value)
        assert diff.content(TreeNode(1.5)).value == 0.0

    def test_reset_clears_register(self):
        diff = RunningDifference(lambda node: node.value)
        diff.content(TreeNode(10))
        diff.reset()
        assert diff.content(TreeNode(50)).value == 0

    def test_failed_reading_keeps_previous(self):
        """A reading that cannot be subtracted does not replace the register."""
        diff = RunningDifference(lambda node: node.value)
        assert diff.content(TreeNode(10)).value == 0
        with pytest.raises(TypeError):
            diff.content(TreeNode("n/a"))
        assert diff.content(TreeNode(12)).value == 2


class TestRowQueries:
    """Test row query construction, predicates and branching."""

    def test_row_query_needs_columns(self):
        with pytest.raises(ConstructionError):
            OneTimeRowQuery()
        with pytest.raises(ConstructionError):
            EveryRowQuery()

    def test_row_query_rejects_non_column_queries(self):
        with pytest.raises(ConstructionError):
            OneTimeRowQuery("Date")

    def test_modes(self):
        assert OneTimeRowQuery(Literal("a")).iterates is False
        assert EveryRowQuery(Literal("a")).iterates is True

    def test_default_predicate_accepts_everything(self):
        assert EveryRowQuery(Literal("a")).accepts(TreeNode(None))

    def test_where_predicate(self):
        query = EveryRowQuery(Literal("a"), where=lambda node: node.value > 0)
        assert query.accepts(TreeNode(1))
        assert not query.accepts(TreeNode(-1))

    def test_matching_row_query(self):
        query = MatchingRowQuery(lambda node: node.value, "FAIL", Literal("x"))
        assert query.accepts(TreeNode("FAIL"))
        assert not query.accepts(TreeNode("PASS"))

    def test_default_children(self):
        a, b = TreeNode("a"), TreeNode("b")
        query = EveryRowQuery(Literal("x"))
        assert list(query.children_of(TreeNode(nodes=[a, b]))) == [a, b]

    def test_branching_children(self):
        """children= switches to another collection of the same source."""
        source = WrappedNode({"main": [1, 2], "spare": [9]}, lambda v: v["main"] if isinstance(v, dict) else [])
        query = EveryRowQuery(Literal("x"), children=lambda node: node.branch(lambda v: v["spare"]).children())
        assert [child.value for child in query.children_of(source)] == [9]
