"""Baseline model values for the node-configuration generator.

The config builder expects cluster and datacenter facts under the
``cluster-info`` and ``datacenter-info`` sections, with workload switches
as ``0``/``1`` integers rather than booleans.
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class ModelValuesGenerator(Protocol):
    """Callable producing the baseline configuration document."""

    def __call__(
        self,
        seeds: list[str],
        cluster_name: str,
        datacenter_name: str,
        graph_enabled: int,
        solr_enabled: int,
        spark_enabled: int,
    ) -> dict[str, Any]: ...


class ClusterInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    seeds: str


class DatacenterInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    graph_enabled: int = Field(default=0, alias="graph-enabled")
    solr_enabled: int = Field(default=0, alias="solr-enabled")
    spark_enabled: int = Field(default=0, alias="spark-enabled")


class NodeConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cluster_info: ClusterInfo = Field(alias="cluster-info")
    datacenter_info: DatacenterInfo = Field(alias="datacenter-info")


def get_model_values(
    seeds: list[str],
    cluster_name: str,
    datacenter_name: str,
    graph_enabled: int,
    solr_enabled: int,
    spark_enabled: int,
) -> dict[str, Any]:
    """Default generator: seeds are joined into one comma-separated string."""
    model = NodeConfigModel(
        cluster_info=ClusterInfo(name=cluster_name, seeds=",".join(seeds)),
        datacenter_info=DatacenterInfo(
            name=datacenter_name,
            graph_enabled=graph_enabled,
            solr_enabled=solr_enabled,
            spark_enabled=spark_enabled,
        ),
    )
    return model.model_dump(by_alias=True)
