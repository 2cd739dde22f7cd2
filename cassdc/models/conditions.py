"""Status condition models for a CassandraDatacenter."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DatacenterConditionType(str, Enum):
    """Well-known condition types.

    Condition types are open: callers may set any other string as well.
    """

    READY = "Ready"
    INITIALIZED = "Initialized"
    REPLACING_NODES = "ReplacingNodes"
    SCALING_UP = "ScalingUp"
    UPDATING = "Updating"
    STOPPED = "Stopped"
    RESUMING = "Resuming"
    ROLLING_RESTART = "RollingRestart"


class ConditionStatus(str, Enum):
    """Tri-state value of a condition, matching Kubernetes' ConditionStatus."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class ProgressState(str, Enum):
    """Coarse progress of the operator on this datacenter."""

    UPDATING = "Updating"
    READY = "Ready"


class DatacenterCondition(BaseModel):
    """A single condition record, unique by ``type`` within a status block."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    type: str = Field(min_length=1)
    status: ConditionStatus
    last_transition_time: datetime | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _plain_type(cls, value: Any) -> Any:
        if isinstance(value, DatacenterConditionType):
            return value.value
        return value


def new_datacenter_condition(
    condition_type: DatacenterConditionType | str, status: ConditionStatus
) -> DatacenterCondition:
    """Build a condition stamped with the current UTC time."""
    return DatacenterCondition(
        type=condition_type,
        status=status,
        last_transition_time=datetime.now(timezone.utc),
    )
