"""
Canonical JSON rendering for settings documents.

Two-phase approach:
1. Normalize: Convert enums, paths and other container types to JSON-safe primitives
2. Serialize: Produce deterministic JSON per RFC 8785/JCS (rfc8785 package)

Key order in the output is sorted. The IDE must not depend on key order,
and a sorted document diffs cleanly between imports.

NaN and Infinity are rejected, not silently converted: JSON has no
representation for them and the IDE would fail on the whole document.
Integers beyond +/-(2**53 - 1) are rejected for the same reason: RFC 8785
numbers are doubles, so such a value would not survive the round trip.

JSON has a single number type, so an integral float renders without a
fraction (1.0 becomes 1). Readers compare numbers by value.
"""

from __future__ import annotations

import hashlib
import math
from enum import Enum
from pathlib import PurePath
from typing import Any

import rfc8785

# RFC 8785 numbers are IEEE 754 doubles; larger integers lose precision
_MAX_SAFE_INT = 2**53 - 1


def forward_slashes(path: PurePath | str) -> str:
    """Render a path with '/' separators regardless of host OS."""
    return str(path).replace("\\", "/")


def _normalize_value(obj: Any) -> Any:
    """Convert a single value to a JSON-safe primitive.

    Raises:
        ValueError: If value is NaN, Infinity, or an integer outside the
            IEEE 754 safe range that RFC 8785 numbers can represent exactly
    """
    if isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            raise ValueError(f"Cannot render non-finite float: {obj}. Use None for missing values, not NaN.")
        return obj

    # Enum check comes before str: StrEnum members are str instances
    if isinstance(obj, Enum):
        return _normalize_value(obj.value)

    if isinstance(obj, int) and not isinstance(obj, bool) and abs(obj) > _MAX_SAFE_INT:
        raise ValueError(f"Cannot render integer {obj}: outside the safe range +/-{_MAX_SAFE_INT}. Render it as a string.")

    if obj is None or isinstance(obj, str | int | bool):
        return obj

    if isinstance(obj, PurePath):
        return forward_slashes(obj)

    return obj


def _normalize_for_canonical(data: Any) -> Any:
    """Recursively normalize a data structure for canonical JSON.

    Sets are emitted as sorted lists so that rendering stays deterministic.
    """
    if isinstance(data, dict):
        return {str(_normalize_value(k)): _normalize_for_canonical(v) for k, v in data.items()}
    if isinstance(data, list | tuple):
        return [_normalize_for_canonical(v) for v in data]
    if isinstance(data, set | frozenset):
        return [_normalize_for_canonical(v) for v in sorted(data, key=str)]
    return _normalize_value(data)


def to_json(obj: Any) -> str:
    """Render a settings mapping as canonical JSON text.

    Args:
        obj: Mapping produced by a settings object's to_map()

    Returns:
        Canonical JSON string (no whitespace, sorted keys)

    Raises:
        ValueError: If data contains NaN, Infinity, or an integer outside
            +/-(2**53 - 1)
        TypeError: If data contains types that cannot be serialized
    """
    normalized = _normalize_for_canonical(obj)
    result: bytes = rfc8785.dumps(normalized)
    return result.decode("utf-8")


def stable_hash(obj: Any) -> str:
    """Compute stable hash of a settings mapping.

    Useful for detecting whether a re-import would change anything.

    Returns:
        SHA-256 hex digest of canonical JSON
    """
    canonical = to_json(obj)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
