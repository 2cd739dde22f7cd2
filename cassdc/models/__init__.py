"""cassdc data models: all Pydantic v2.

Leaf models are imported before the datacenter aggregate, which depends on
the derivations in ``cassdc.core``.
"""

from cassdc.models.conditions import (
    ConditionStatus,
    DatacenterCondition,
    DatacenterConditionType,
    ProgressState,
    new_datacenter_condition,
)
from cassdc.models.ports import ContainerPort
from cassdc.models.profile import DeploymentProfile
from cassdc.models.datacenter import (
    CassandraDatacenter,
    CassandraDatacenterList,
    CassandraDatacenterSpec,
    CassandraDatacenterStatus,
    CassandraNodeStatus,
    CassandraUser,
    DseWorkloads,
    ManagementApiAuthConfig,
    NamespacedName,
    ObjectMeta,
    Rack,
    ReaperConfig,
    StorageConfig,
)

__all__ = [
    # conditions
    "ConditionStatus",
    "DatacenterCondition",
    "DatacenterConditionType",
    "ProgressState",
    "new_datacenter_condition",
    # ports
    "ContainerPort",
    # profile
    "DeploymentProfile",
    # datacenter
    "CassandraDatacenter",
    "CassandraDatacenterList",
    "CassandraDatacenterSpec",
    "CassandraDatacenterStatus",
    "CassandraNodeStatus",
    "CassandraUser",
    "DseWorkloads",
    "ManagementApiAuthConfig",
    "NamespacedName",
    "ObjectMeta",
    "Rack",
    "ReaperConfig",
    "StorageConfig",
]
