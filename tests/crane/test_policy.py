"""
Tests for CranePolicy name resolution.
"""

import pytest

from crane_toolkit.crane.policy import CranePolicy


class TestCranePolicy:
    """Tests for CranePolicy enum."""

    @pytest.mark.parametrize("name", ["stage1", "single", "SINGLE_ITEM", "9000", " Stage1 "])
    def test_single_item_aliases(self, name):
        """Every single-item alias resolves, case-insensitively."""
        assert CranePolicy.from_name(name) is CranePolicy.SINGLE_ITEM

    @pytest.mark.parametrize("name", ["stage2", "block", "block-preserving", "9001"])
    def test_block_preserving_aliases(self, name):
        """Every block-preserving alias resolves."""
        assert CranePolicy.from_name(name) is CranePolicy.BLOCK_PRESERVING

    def test_unknown_name_raises(self):
        """Unknown names list the accepted ones."""
        with pytest.raises(ValueError, match="Unknown crane policy 'stage3'.*stage1"):
            CranePolicy.from_name("stage3")

    def test_str_is_value(self):
        """str() gives the serialized value."""
        assert str(CranePolicy.BLOCK_PRESERVING) == "block_preserving"

    def test_names_sorted(self):
        """names() is sorted and covers both policies."""
        names = CranePolicy.names()
        assert names == sorted(names)
        assert {"stage1", "stage2"} <= set(names)
