"""The CassandraDatacenter resource: declarative spec plus observed status.

The resource is created, stored and watched by an external declarative-state
store.  This module only reads its fields and computes facts from them; the
derived images, configuration document and ports are never stored back on
the resource.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from cassdc.core import condition_tracker
from cassdc.core.canonical import canonical_json
from cassdc.core.config_merger import build_config_document
from cassdc.core.image_resolver import (
    resolve_config_builder_image,
    resolve_server_image,
)
from cassdc.core.model_values import ModelValuesGenerator, get_model_values
from cassdc.core.port_deriver import derive_container_ports
from cassdc.core.rack_splitter import split_racks
from cassdc.models.conditions import (
    ConditionStatus,
    DatacenterCondition,
    DatacenterConditionType,
    ProgressState,
)
from cassdc.models.ports import ContainerPort
from cassdc.models.profile import DeploymentProfile

API_VERSION = "cassandra.datastax.com/v1beta1"
KIND = "CassandraDatacenter"

# Labels the operator puts on the workloads it creates.
CLUSTER_LABEL = "cassandra.datastax.com/cluster"
DATACENTER_LABEL = "cassandra.datastax.com/datacenter"
SEED_NODE_LABEL = "cassandra.datastax.com/seed-node"
RACK_LABEL = "cassandra.datastax.com/rack"
CASS_OPERATOR_PROGRESS_LABEL = "cassandra.datastax.com/operator-progress"
CASS_NODE_STATE_LABEL = "cassandra.datastax.com/node-state"

DEFAULT_RACK_NAME = "default"

ServerType = Literal["cassandra", "dse"]
ServerVersion = Literal["6.8.0", "6.8.1", "3.11.6", "4.0.0"]


class _ResourceModel(BaseModel):
    """Base for resource sub-objects: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class ObjectMeta(_ResourceModel):
    model_config = ConfigDict(extra="allow")

    name: str
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class NamespacedName(_ResourceModel):
    namespace: str
    name: str


class Rack(_ResourceModel):
    """A named failure domain, optionally pinned to a zone."""

    name: str = Field(min_length=2)
    zone: str = ""


class DseWorkloads(_ResourceModel):
    analytics_enabled: bool = False
    graph_enabled: bool = False
    search_enabled: bool = False


class ReaperConfig(_ResourceModel):
    enabled: bool = False
    image: str = ""
    image_pull_policy: str = ""


class CassandraUser(_ResourceModel):
    secret_name: str
    superuser: bool = False


class StorageConfig(_ResourceModel):
    cassandra_data_volume_claim_spec: dict[str, Any] | None = None


class ManagementApiAuthManualConfig(_ResourceModel):
    client_secret_name: str
    server_secret_name: str
    skip_secret_validation: bool = False


class ManagementApiAuthConfig(_ResourceModel):
    insecure: dict[str, Any] | None = None
    manual: ManagementApiAuthManualConfig | None = None


class CassandraDatacenterSpec(_ResourceModel):
    """Desired state, authored by the user."""

    size: int = Field(ge=1)
    server_type: ServerType
    server_version: ServerVersion
    server_image: str = ""
    config_builder_image: str = ""
    # Raw JSON text of user overrides; parsed only when building the config.
    config: str | None = None
    cluster_name: str = Field(min_length=2)
    racks: list[Rack] = Field(default_factory=list)

    # Passed through to the reconciler untouched.
    storage_config: StorageConfig = Field(default_factory=StorageConfig)
    resources: dict[str, Any] = Field(default_factory=dict)
    node_selector: dict[str, str] = Field(default_factory=dict)
    pod_template_spec: dict[str, Any] | None = None
    service_account: str = ""
    users: list[CassandraUser] = Field(default_factory=list)
    additional_seeds: list[str] = Field(default_factory=list)
    dse_workloads: DseWorkloads | None = None
    reaper: ReaperConfig | None = None
    management_api_auth: ManagementApiAuthConfig = Field(
        default_factory=ManagementApiAuthConfig
    )

    # Operational toggles.
    stopped: bool = False
    canary_upgrade: bool = False
    allow_multiple_nodes_per_worker: bool = False
    rolling_restart_requested: bool = False
    force_upgrade_racks: list[str] = Field(default_factory=list)
    replace_nodes: list[str] = Field(default_factory=list)
    superuser_secret_name: str = ""

    @field_validator("config", mode="before")
    @classmethod
    def _config_as_text(cls, value: Any) -> Any:
        # Manifests embed the config as a JSON object; keep its text form.
        if value is None or isinstance(value, (str, bytes)):
            return value
        return canonical_json(value)


class CassandraNodeStatus(_ResourceModel):
    host_id: str = Field(default="", alias="hostID")


class CassandraDatacenterStatus(BaseModel):
    """Observed state, written by the reconciler through the condition tracker."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    conditions: list[DatacenterCondition] = Field(default_factory=list)
    super_user_upserted: datetime | None = None
    users_upserted: datetime | None = None
    last_server_node_started: datetime | None = None
    # Empty until the operator first reports progress.
    cassandra_operator_progress: ProgressState | Literal[""] = ""
    last_rolling_restart: datetime | None = None
    node_statuses: dict[str, CassandraNodeStatus] = Field(default_factory=dict)
    node_replacements: list[str] = Field(default_factory=list)

    @field_validator("conditions", "node_statuses", "node_replacements", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        # Unset maps and lists are written as null.
        if value is None:
            return {} if info.field_name == "node_statuses" else []
        return value

    @field_validator("cassandra_operator_progress", mode="before")
    @classmethod
    def _null_progress(cls, value: Any) -> Any:
        return "" if value is None else value

    def get_condition_status(
        self, condition_type: DatacenterConditionType | str
    ) -> ConditionStatus:
        return condition_tracker.get_condition_status(self, condition_type)

    def set_condition(self, condition: DatacenterCondition) -> None:
        condition_tracker.set_condition(self, condition)


class CassandraDatacenter(BaseModel):
    """Schema for the cassandradatacenters API (short names: cassdc, cassdcs)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    api_version: str = API_VERSION
    kind: str = KIND
    metadata: ObjectMeta
    spec: CassandraDatacenterSpec
    status: CassandraDatacenterStatus = Field(
        default_factory=CassandraDatacenterStatus
    )

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def get_racks(self) -> list[Rack]:
        """Return the declared racks, or a single ``default`` rack if none."""
        if self.spec.racks:
            return list(self.spec.racks)
        return [Rack(name=DEFAULT_RACK_NAME)]

    def get_rack_node_counts(self) -> list[tuple[Rack, int]]:
        """Pair each effective rack with the number of nodes it should run."""
        racks = self.get_racks()
        return list(zip(racks, split_racks(self.spec.size, len(racks))))

    # ------------------------------------------------------------------
    # Derived deployment facts
    # ------------------------------------------------------------------

    def get_server_image(self, profile: DeploymentProfile | None = None) -> str:
        """Fully qualified server image, explicit or resolved from the version.

        Raises UnsupportedServerVersionError if no image is known.
        """
        return resolve_server_image(
            self.spec.server_type,
            self.spec.server_version,
            self.spec.server_image,
            profile,
        )

    def get_config_builder_image(
        self, profile: DeploymentProfile | None = None
    ) -> str:
        return resolve_config_builder_image(self.spec.config_builder_image, profile)

    def get_config_as_json(
        self, model_values: ModelValuesGenerator = get_model_values
    ) -> str:
        """JSON document suitable for passing to the config builder."""
        return build_config_document(self, model_values)

    def get_container_ports(
        self, model_values: ModelValuesGenerator = get_model_values
    ) -> list[ContainerPort]:
        return derive_container_ports(self, model_values)

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    def get_condition_status(
        self, condition_type: DatacenterConditionType | str
    ) -> ConditionStatus:
        return self.status.get_condition_status(condition_type)

    def set_condition(self, condition: DatacenterCondition) -> None:
        self.status.set_condition(condition)

    # ------------------------------------------------------------------
    # Labels and names
    # ------------------------------------------------------------------

    def get_cluster_labels(self) -> dict[str, str]:
        return {CLUSTER_LABEL: self.spec.cluster_name}

    def get_datacenter_labels(self) -> dict[str, str]:
        labels = {DATACENTER_LABEL: self.name}
        labels.update(self.get_cluster_labels())
        return labels

    def get_rack_labels(self, rack_name: str) -> dict[str, str]:
        labels = {RACK_LABEL: rack_name}
        labels.update(self.get_datacenter_labels())
        return labels

    def get_seed_service_name(self) -> str:
        return f"{self.spec.cluster_name}-seed-service"

    def get_all_pods_service_name(self) -> str:
        return f"{self.spec.cluster_name}-{self.name}-all-pods-service"

    def get_datacenter_service_name(self) -> str:
        return f"{self.spec.cluster_name}-{self.name}-service"

    def should_generate_superuser_secret(self) -> bool:
        return not self.spec.superuser_secret_name

    def get_superuser_secret_ref(self) -> NamespacedName:
        """Where the superuser credentials live, user-named or defaulted."""
        name = self.spec.superuser_secret_name or f"{self.spec.cluster_name}-superuser"
        return NamespacedName(namespace=self.namespace, name=name)


class CassandraDatacenterList(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    api_version: str = API_VERSION
    kind: str = f"{KIND}List"
    items: list[CassandraDatacenter] = Field(default_factory=list)
