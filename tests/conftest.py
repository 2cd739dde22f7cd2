"""Shared test fixtures for cassdc."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from cassdc.models.datacenter import (
    CassandraDatacenter,
    CassandraDatacenterSpec,
    ObjectMeta,
)


@pytest.fixture(autouse=True)
def clean_base_image_os(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from selecting UBI images in tests."""
    monkeypatch.delenv("BASE_IMAGE_OS", raising=False)
    monkeypatch.delenv("CASSDC_BASE_IMAGE_OS", raising=False)
    monkeypatch.delenv("CASSDC_LOG_LEVEL", raising=False)


@pytest.fixture
def make_datacenter() -> Callable[..., CassandraDatacenter]:
    """Factory fixture: build a CassandraDatacenter with sensible defaults."""

    def _factory(
        name: str = "exampleDC",
        namespace: str = "",
        **spec_overrides: Any,
    ) -> CassandraDatacenter:
        spec: dict[str, Any] = {
            "size": 3,
            "server_type": "cassandra",
            "server_version": "3.11.6",
            "cluster_name": "exampleCluster",
        }
        spec.update(spec_overrides)
        return CassandraDatacenter(
            metadata=ObjectMeta(name=name, namespace=namespace),
            spec=CassandraDatacenterSpec(**spec),
        )

    return _factory


@pytest.fixture
def datacenter(make_datacenter: Callable[..., CassandraDatacenter]) -> CassandraDatacenter:
    """Convenience: a ready-made CassandraDatacenter with test defaults."""
    return make_datacenter()


@pytest.fixture
def manifest_dict() -> dict[str, Any]:
    """A CassandraDatacenter manifest as the API server would serve it."""
    return {
        "apiVersion": "cassandra.datastax.com/v1beta1",
        "kind": "CassandraDatacenter",
        "metadata": {"name": "dc1", "namespace": "cass-operator", "uid": "1234"},
        "spec": {
            "clusterName": "cluster1",
            "serverType": "dse",
            "serverVersion": "6.8.0",
            "size": 5,
            "racks": [
                {"name": "r1", "zone": "us-east-1a"},
                {"name": "r2", "zone": "us-east-1b"},
            ],
            "config": {
                "cassandra-yaml": {"num_tokens": 8},
                "jvm-options": {"initial_heap_size": "800M"},
            },
            "dseWorkloads": {"searchEnabled": True},
            "storageConfig": {
                "cassandraDataVolumeClaimSpec": {
                    "storageClassName": "server-storage",
                    "accessModes": ["ReadWriteOnce"],
                },
            },
        },
        "status": {
            "conditions": [
                {"type": "Ready", "status": "True"},
            ],
            "nodeStatuses": {"dc1-r1-sts-0": {"hostID": "abc-123"}},
        },
    }


@pytest.fixture
def manifest_path(tmp_path: Path, manifest_dict: dict[str, Any]) -> Path:
    """Write the sample manifest to a temp file."""
    path = tmp_path / "dc1.json"
    path.write_text(json.dumps(manifest_dict), encoding="utf-8")
    return path
