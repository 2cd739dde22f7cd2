"""Container ports for the Cassandra server container."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from cassdc.core.config_merger import build_config_document
from cassdc.core.model_values import ModelValuesGenerator, get_model_values
from cassdc.models.ports import ContainerPort

if TYPE_CHECKING:
    from cassdc.models.datacenter import CassandraDatacenter

logger = logging.getLogger(__name__)

PROMETHEUS_CONF_KEY = "10-write-prom-conf"

# jmx (7199) is intentionally not exposed.
BASELINE_PORTS: tuple[ContainerPort, ...] = (
    ContainerPort(name="native", container_port=9042),
    ContainerPort(name="inter-node-msg", container_port=8609),
    ContainerPort(name="intra-node", container_port=7000),
    ContainerPort(name="tls-intra-node", container_port=7001),
    ContainerPort(name="mgmt-api-http", container_port=8080),
)

PROMETHEUS_PORT = ContainerPort(name="prometheus", container_port=9103)


class PrometheusWriterConf(BaseModel):
    """Typed view of the ``10-write-prom-conf`` section."""

    model_config = ConfigDict(frozen=True, extra="allow")

    enabled: Any = None

    @property
    def exposes_port(self) -> bool:
        # Presence of the key is what counts, not its value.
        return "enabled" in self.model_fields_set


def search_map(document: dict[str, Any], key: str) -> dict[str, Any]:
    """Find the object stored under ``key`` anywhere in ``document``.

    The current level is checked first, then nested objects depth-first in
    key order.  Arrays are not searched.  Returns ``{}`` when the key is
    absent or does not hold an object.
    """
    if key in document:
        found = document[key]
        return found if isinstance(found, dict) else {}

    for child_key in sorted(document):
        child = document[child_key]
        if isinstance(child, dict):
            found = search_map(child, key)
            if found:
                return found
    return {}


def prometheus_conf(document: dict[str, Any]) -> PrometheusWriterConf:
    # Matches the section name at any depth, including user overrides that
    # happen to nest an identically named key elsewhere.
    return PrometheusWriterConf.model_validate(
        search_map(document, PROMETHEUS_CONF_KEY)
    )


def derive_container_ports(
    dc: CassandraDatacenter,
    model_values: ModelValuesGenerator = get_model_values,
) -> list[ContainerPort]:
    """Return the server container ports for a datacenter.

    The five baseline ports are always present.  The prometheus port is
    appended when the merged config carries a ``10-write-prom-conf``
    section with an ``enabled`` key.  Config build errors propagate.
    """
    ports = list(BASELINE_PORTS)

    document = json.loads(build_config_document(dc, model_values))
    if prometheus_conf(document).exposes_port:
        logger.debug("Exposing prometheus port for %s", dc.name)
        ports.append(PROMETHEUS_PORT)

    return ports
