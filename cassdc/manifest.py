"""Load CassandraDatacenter resources from JSON manifests."""

from __future__ import annotations

import json
from pathlib import Path

from cassdc.models.datacenter import (
    KIND,
    CassandraDatacenter,
    CassandraDatacenterList,
)


def load_datacenter(path: Path) -> CassandraDatacenter:
    """Parse a single CassandraDatacenter manifest.

    Raises pydantic.ValidationError for malformed resources.
    """
    return CassandraDatacenter.model_validate_json(path.read_text(encoding="utf-8"))


def load_datacenter_list(path: Path) -> list[CassandraDatacenter]:
    """Parse a manifest holding one datacenter or a CassandraDatacenterList."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict) and raw.get("kind") == f"{KIND}List":
        return CassandraDatacenterList.model_validate(raw).items
    return [CassandraDatacenter.model_validate(raw)]
