"""Tests for loading datacenters from JSON manifests."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from cassdc.manifest import load_datacenter, load_datacenter_list


class TestLoadDatacenter:
    def test_load(self, manifest_path):
        dc = load_datacenter(manifest_path)
        assert dc.name == "dc1"
        assert [r.name for r in dc.get_racks()] == ["r1", "r2"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_datacenter(path)

    def test_missing_required_field(self, tmp_path, manifest_dict):
        del manifest_dict["spec"]["clusterName"]
        path = tmp_path / "dc.json"
        path.write_text(json.dumps(manifest_dict), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_datacenter(path)


class TestLoadDatacenterList:
    def test_single_resource(self, manifest_path):
        assert [dc.name for dc in load_datacenter_list(manifest_path)] == ["dc1"]

    def test_list_resource(self, tmp_path, manifest_dict):
        second = json.loads(json.dumps(manifest_dict))
        second["metadata"]["name"] = "dc2"
        path = tmp_path / "list.json"
        path.write_text(
            json.dumps({
                "apiVersion": "cassandra.datastax.com/v1beta1",
                "kind": "CassandraDatacenterList",
                "items": [manifest_dict, second],
            }),
            encoding="utf-8",
        )
        assert [dc.name for dc in load_datacenter_list(path)] == ["dc1", "dc2"]
