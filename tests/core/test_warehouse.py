"""
Unit Tests for Warehouse Model

Tests the stack primitives, the top-of-stacks query and the
precondition failures raised instead of reading past a stack.
"""

import pytest

from crane_toolkit.core.errors import ExecutionError
from crane_toolkit.core.models.warehouse import Warehouse


@pytest.fixture
def warehouse() -> Warehouse:
    """Warehouse with stacks [Z,N], [M,C,D], [P] (bottom-to-top)."""
    return Warehouse.from_stacks([["Z", "N"], ["M", "C", "D"], ["P"]])


class TestWarehouseConstruction:
    """Tests for building warehouses."""

    def test_init_when_zero_stacks_then_raises_error(self):
        """A warehouse needs at least one stack."""
        with pytest.raises(ValueError, match="at least one stack"):
            Warehouse(0)

    def test_init_when_count_given_then_stacks_empty(self):
        """New stacks start empty."""
        wh = Warehouse(3)
        assert wh.stack_count == 3
        assert wh.heights() == (0, 0, 0)

    def test_from_stacks_when_multi_char_item_then_raises_error(self):
        """Crates are single characters."""
        with pytest.raises(ValueError, match="single character"):
            Warehouse.from_stacks([["AB"]])

    def test_copy_when_mutated_then_original_unchanged(self, warehouse):
        """copy() is independent of the original."""
        clone = warehouse.copy()
        clone.pop_from(0)
        assert warehouse.stack(0) == ("Z", "N")
        assert clone != warehouse

    def test_dict_when_round_tripped_then_equal(self, warehouse):
        """to_dict/from_dict preserve every stack bottom-to-top."""
        data = warehouse.to_dict()
        assert data == {"stacks": [["Z", "N"], ["M", "C", "D"], ["P"]]}
        assert Warehouse.from_dict(data) == warehouse


class TestWarehouseQueries:
    """Tests for read-only queries."""

    def test_top_of_every_stack_when_full_then_reads_tops(self, warehouse):
        """Tops are read in stack order."""
        assert warehouse.top_of_every_stack() == "NDP"

    def test_top_of_every_stack_when_stack_empty_then_uses_blank(self):
        """Empty stacks report the blank marker."""
        wh = Warehouse.from_stacks([["A"], [], ["B"]])
        assert wh.top_of_every_stack() == "A B"
        assert wh.top_of_every_stack(blank="_") == "A_B"

    def test_stack_when_returned_then_is_snapshot(self, warehouse):
        """stack() returns a tuple that cannot alter the warehouse."""
        snapshot = warehouse.stack(1)
        warehouse.push_to(1, "X")
        assert snapshot == ("M", "C", "D")

    def test_height_when_called_then_counts_one_stack(self, warehouse):
        """height() agrees with heights() for every stack."""
        assert [warehouse.height(i) for i in range(3)] == list(warehouse.heights())
        assert warehouse.height(1) == 3

    def test_height_when_index_out_of_range_then_raises_execution_error(self, warehouse):
        """height() checks the index like every other accessor."""
        with pytest.raises(ExecutionError, match="No stack 4"):
            warehouse.height(3)

    def test_render_when_called_then_one_line_per_stack(self, warehouse):
        """render() lists each stack bottom first."""
        assert warehouse.render() == "1: ZN\n2: MCD\n3: P"


class TestWarehouseMutation:
    """Tests for pop/push/block primitives."""

    # ─────────────────────────────────────────────────────────────────────────
    # pop / push
    # ─────────────────────────────────────────────────────────────────────────

    def test_pop_from_when_called_then_returns_top(self, warehouse):
        """pop_from removes the top crate."""
        assert warehouse.pop_from(1) == "D"
        assert warehouse.stack(1) == ("M", "C")

    def test_pop_from_when_empty_then_raises_execution_error(self):
        """Popping an empty stack is a precondition failure."""
        wh = Warehouse.from_stacks([["A"], []])
        with pytest.raises(ExecutionError, match="empty stack 2"):
            wh.pop_from(1)

    def test_pop_from_when_index_negative_then_raises_execution_error(self, warehouse):
        """Negative indices must not wrap to the last stack."""
        with pytest.raises(ExecutionError, match="No stack"):
            warehouse.pop_from(-1)
        assert warehouse.stack(2) == ("P",)

    def test_push_to_when_index_out_of_range_then_raises_execution_error(self, warehouse):
        """Pushing to a missing stack is rejected."""
        with pytest.raises(ExecutionError, match="No stack 4"):
            warehouse.push_to(3, "X")

    def test_push_to_when_called_then_item_on_top(self, warehouse):
        """push_to appends at the top."""
        warehouse.push_to(2, "Q")
        assert warehouse.top_of_every_stack() == "NDQ"

    # ─────────────────────────────────────────────────────────────────────────
    # Block operations
    # ─────────────────────────────────────────────────────────────────────────

    def test_take_block_when_called_then_keeps_stack_order(self, warehouse):
        """take_block returns the top crates bottom-to-top."""
        assert warehouse.take_block(1, 2) == ["C", "D"]
        assert warehouse.stack(1) == ("M",)

    def test_take_block_when_zero_then_returns_empty(self, warehouse):
        """A zero-size block changes nothing."""
        assert warehouse.take_block(0, 0) == []
        assert warehouse.stack(0) == ("Z", "N")

    def test_take_block_when_too_short_then_raises_and_leaves_stack(self, warehouse):
        """A short stack fails before any crate is removed."""
        with pytest.raises(ExecutionError, match="holds 2 crates, cannot take 3"):
            warehouse.take_block(0, 3)
        assert warehouse.stack(0) == ("Z", "N")

    def test_insert_preserving_order_when_called_then_block_on_top(self, warehouse):
        """insert_preserving_order appends the block unchanged."""
        warehouse.insert_preserving_order(2, ["C", "D"])
        assert warehouse.stack(2) == ("P", "C", "D")
