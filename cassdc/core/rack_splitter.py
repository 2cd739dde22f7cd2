"""Balanced partitioning of a node count across racks."""

from __future__ import annotations


def split_racks(node_count: int, rack_count: int) -> list[int]:
    """Split ``node_count`` nodes over ``rack_count`` racks.

    Counts differ by at most one; the surplus goes to the first racks, so
    ``split_racks(13, 5) == [3, 3, 3, 2, 2]``.  Downstream assignment of
    nodes to racks is by index, so the order is part of the contract.
    """
    if rack_count < 1:
        raise ValueError(f"rack_count must be at least 1, got {rack_count}")
    if node_count < 0:
        raise ValueError(f"node_count must not be negative, got {node_count}")

    nodes_per_rack, extra_nodes = divmod(node_count, rack_count)
    return [
        nodes_per_rack + 1 if rack_idx < extra_nodes else nodes_per_rack
        for rack_idx in range(rack_count)
    ]
