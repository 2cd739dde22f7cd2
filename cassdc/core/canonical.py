"""Canonical JSON serialization for generated configuration documents.

The node-configuration generator and any caching layer in front of it
compare documents byte for byte, so every document leaves this package
through :func:`canonical_json`.
"""

from __future__ import annotations

import json
from typing import Any


def canonical_json(obj: Any) -> str:
    """Produce canonical JSON text: sorted keys, compact, ASCII-only.

    Raises ValueError for NaN and infinities, which JSON cannot represent.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
        allow_nan=False,
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def strict_loads(text: str | bytes) -> Any:
    """Parse JSON, rejecting the NaN/Infinity extensions ``json`` allows."""
    return json.loads(text, parse_constant=_reject_constant)
