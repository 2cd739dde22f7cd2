"""Builds the configuration document handed to the config builder.

The document is the generator's baseline model (seeds, cluster and
datacenter names, DSE workload switches) with the user's ``spec.config``
deep-merged on top.  Output is canonical JSON so unchanged specs always
produce byte-identical documents.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import TYPE_CHECKING, Any

from cassdc.core.canonical import canonical_json, strict_loads
from cassdc.core.errors import InvalidUserConfigError, ModelMergeError
from cassdc.core.model_values import ModelValuesGenerator, get_model_values

if TYPE_CHECKING:
    from cassdc.models.datacenter import CassandraDatacenter

logger = logging.getLogger(__name__)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``override`` merged onto ``base`` without mutating either.

    Objects present on both sides merge recursively.  Anything else
    (scalars, arrays, an object meeting a non-object) is replaced by the
    override value; arrays are never concatenated.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def seed_list(dc: CassandraDatacenter) -> list[str]:
    # The seed service resolves to the current seed nodes, so the document
    # does not change when seeds move.
    return [dc.get_seed_service_name(), *dc.spec.additional_seeds]


def workload_flags(dc: CassandraDatacenter) -> tuple[int, int, int]:
    """Return ``(graph, solr, spark)`` as 0/1 switches for the generator."""
    workloads = dc.spec.dse_workloads
    if dc.spec.server_type != "dse" or workloads is None:
        return 0, 0, 0
    return (
        int(workloads.graph_enabled),
        int(workloads.search_enabled),
        int(workloads.analytics_enabled),
    )


def _baseline_document(
    dc: CassandraDatacenter, model_values: ModelValuesGenerator
) -> dict[str, Any]:
    graph_enabled, solr_enabled, spark_enabled = workload_flags(dc)
    values = model_values(
        seed_list(dc),
        dc.spec.cluster_name,
        dc.name,
        graph_enabled,
        solr_enabled,
        spark_enabled,
    )
    # Round-trip through JSON so the merge only ever sees plain JSON types.
    try:
        baseline = json.loads(canonical_json(values))
    except (TypeError, ValueError) as exc:
        raise ModelMergeError(
            "Model information for CassandraDatacenter resource "
            f"'{dc.name}' was not properly configured: {exc}"
        ) from exc
    if not isinstance(baseline, dict):
        raise ModelMergeError(
            "Model information for CassandraDatacenter resource "
            f"'{dc.name}' is not a JSON object"
        )
    return baseline


def _user_overrides(dc: CassandraDatacenter) -> Any:
    try:
        return strict_loads(dc.spec.config)
    except ValueError as exc:
        raise InvalidUserConfigError(
            "Error parsing spec.config for CassandraDatacenter resource "
            f"'{dc.name}': {exc}"
        ) from exc


def build_config_document(
    dc: CassandraDatacenter,
    model_values: ModelValuesGenerator = get_model_values,
) -> str:
    """Return the merged configuration document as canonical JSON.

    Raises InvalidUserConfigError if ``spec.config`` is not valid JSON and
    ModelMergeError if the baseline or the merge is structurally broken.
    """
    document = _baseline_document(dc, model_values)

    if dc.spec.config is not None:
        overrides = _user_overrides(dc)
        if overrides is not None:
            if not isinstance(overrides, dict):
                raise ModelMergeError(
                    "Error merging spec.config for CassandraDatacenter resource "
                    f"'{dc.name}': expected a JSON object, got "
                    f"{type(overrides).__name__}"
                )
            document = deep_merge(document, overrides)
            logger.debug(
                "Merged spec.config sections %s into model for %s",
                sorted(overrides), dc.name,
            )

    return canonical_json(document)
