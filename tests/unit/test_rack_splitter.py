"""Tests for split_racks: balanced node partitioning."""

from __future__ import annotations

import pytest

from cassdc.core.rack_splitter import split_racks


class TestSplitRacks:
    def test_balances_racks_when_no_extra_nodes(self):
        assert split_racks(10, 5) == [2, 2, 2, 2, 2]

    def test_surplus_goes_to_first_racks(self):
        assert split_racks(13, 5) == [3, 3, 3, 2, 2]

    def test_zero_nodes(self):
        assert split_racks(0, 3) == [0, 0, 0]

    def test_fewer_nodes_than_racks(self):
        assert split_racks(2, 3) == [1, 1, 0]

    def test_single_rack(self):
        assert split_racks(7, 1) == [7]

    @pytest.mark.parametrize("node_count", range(0, 25))
    @pytest.mark.parametrize("rack_count", range(1, 8))
    def test_partition_properties(self, node_count, rack_count):
        counts = split_racks(node_count, rack_count)
        assert len(counts) == rack_count
        assert sum(counts) == node_count
        assert max(counts) - min(counts) <= 1
        assert counts == sorted(counts, reverse=True)

    def test_zero_racks_rejected(self):
        with pytest.raises(ValueError):
            split_racks(3, 0)

    def test_negative_nodes_rejected(self):
        with pytest.raises(ValueError):
            split_racks(-1, 3)
