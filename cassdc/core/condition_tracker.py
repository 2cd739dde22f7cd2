"""Upsert and read named conditions on a datacenter status block.

Conditions are unique by type.  Setting an existing type replaces the
record in place; a new type is appended.  No transition rules are enforced
here; which transitions are legal is up to the reconciler.  Updates are not
locked, so concurrent writers must synchronize on the status themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cassdc.models.conditions import (
    ConditionStatus,
    DatacenterCondition,
    DatacenterConditionType,
)

if TYPE_CHECKING:
    from cassdc.models.datacenter import CassandraDatacenterStatus


def get_condition_status(
    status: CassandraDatacenterStatus,
    condition_type: DatacenterConditionType | str,
) -> ConditionStatus:
    """Return the stored status, or FALSE if the type was never set."""
    for condition in status.conditions:
        if condition.type == condition_type:
            return condition.status
    return ConditionStatus.FALSE


def set_condition(
    status: CassandraDatacenterStatus, condition: DatacenterCondition
) -> None:
    for idx, existing in enumerate(status.conditions):
        if existing.type == condition.type:
            status.conditions[idx] = condition
            return
    status.conditions.append(condition)
