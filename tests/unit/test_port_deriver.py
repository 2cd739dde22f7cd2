"""Tests for container port derivation."""

from __future__ import annotations

import pytest

from cassdc.core.errors import InvalidUserConfigError
from cassdc.core.port_deriver import (
    BASELINE_PORTS,
    PrometheusWriterConf,
    derive_container_ports,
    search_map,
)
from cassdc.models.ports import ContainerPort

BASELINE = [
    ("native", 9042),
    ("inter-node-msg", 8609),
    ("intra-node", 7000),
    ("tls-intra-node", 7001),
    ("mgmt-api-http", 8080),
]


def _pairs(ports: list[ContainerPort]) -> list[tuple[str, int]]:
    return [(p.name, p.container_port) for p in ports]


class TestDeriveContainerPorts:
    def test_baseline_without_config(self, datacenter):
        assert _pairs(derive_container_ports(datacenter)) == BASELINE

    def test_baseline_with_unrelated_config(self, make_datacenter):
        dc = make_datacenter(
            config='{"cassandra-yaml":{"authenticator":"AllowAllAuthenticator",'
            '"batch_size_fail_threshold_in_kb":1280}}'
        )
        assert _pairs(derive_container_ports(dc)) == BASELINE

    def test_exposes_prometheus(self, make_datacenter):
        dc = make_datacenter(
            config='{"cassandra-yaml":{"10-write-prom-conf":{"enabled":true,'
            '"port":9103,"staleness-delta":300},'
            '"authenticator":"AllowAllAuthenticator"}}'
        )
        assert _pairs(derive_container_ports(dc)) == BASELINE + [("prometheus", 9103)]

    def test_enabled_false_still_exposes(self, make_datacenter):
        dc = make_datacenter(config='{"10-write-prom-conf": {"enabled": false}}')
        ports = derive_container_ports(dc)
        assert len(ports) == 6
        assert ports[-1].name == "prometheus"

    def test_section_without_enabled(self, make_datacenter):
        dc = make_datacenter(config='{"10-write-prom-conf": {"port": 9103}}')
        assert len(derive_container_ports(dc)) == 5

    def test_deeply_nested_key_matches(self, make_datacenter):
        dc = make_datacenter(
            config='{"jvm-options": {"extra": {"10-write-prom-conf": {"enabled": 1}}}}'
        )
        assert len(derive_container_ports(dc)) == 6

    def test_returns_fresh_list(self, datacenter):
        ports = derive_container_ports(datacenter)
        ports.append(ContainerPort(name="extra", container_port=1234))
        assert len(BASELINE_PORTS) == 5
        assert len(derive_container_ports(datacenter)) == 5

    def test_config_errors_propagate(self, make_datacenter):
        dc = make_datacenter(config="{not json")
        with pytest.raises(InvalidUserConfigError):
            derive_container_ports(dc)

    def test_port_names_fit_limit(self, make_datacenter):
        dc = make_datacenter(config='{"10-write-prom-conf": {"enabled": true}}')
        assert all(len(p.name) <= 15 for p in derive_container_ports(dc))


class TestSearchMap:
    def test_top_level(self):
        assert search_map({"k": {"a": 1}}, "k") == {"a": 1}

    def test_nested(self):
        assert search_map({"x": {"y": {"k": {"a": 1}}}}, "k") == {"a": 1}

    def test_current_level_before_nested(self):
        doc = {"a": {"k": {"nested": True}}, "k": {"top": True}}
        assert search_map(doc, "k") == {"top": True}

    def test_missing(self):
        assert search_map({"x": {"y": 1}}, "k") == {}

    def test_non_object_value(self):
        assert search_map({"k": 5}, "k") == {}

    def test_arrays_not_searched(self):
        assert search_map({"x": [{"k": {"a": 1}}]}, "k") == {}


class TestPrometheusWriterConf:
    def test_enabled_present(self):
        assert PrometheusWriterConf.model_validate({"enabled": None}).exposes_port

    def test_enabled_absent(self):
        assert not PrometheusWriterConf.model_validate({"port": 9103}).exposes_port
