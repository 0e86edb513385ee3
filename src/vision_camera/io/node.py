"""
Typed access to node trees.

A node tree is the plain mapping produced by a YAML or JSON loader (or
rebuilt from an HDF5 group): string keys mapping to scalars, lists or
nested mappings. The helpers here extract typed values from such a
mapping and report failure instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

import numpy as np

_UINT32_LIMIT = 1 << 32
_UINT64_LIMIT = 1 << 64


class ValueKind(Enum):
    """Value types that can be read from a node."""
    STRING = "string"
    UNSIGNED = "unsigned"
    UINT64 = "uint64"
    VECTOR = "vector"


def is_map(node: Any) -> bool:
    return isinstance(node, Mapping)


def has_key(node: Any, key: str) -> bool:
    """Check if a map node has a (non-null) child."""
    return is_map(node) and node.get(key) is not None


def _is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _to_unsigned(value: Any, limit: int) -> tuple[bool, int]:
    if isinstance(value, (bool, np.bool_)):
        return False, 0
    if isinstance(value, (int, np.integer)):
        number = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
    else:
        return False, 0
    if not 0 <= number < limit:
        return False, 0
    return True, number


def _to_vector(value: Any) -> tuple[bool, np.ndarray]:
    if isinstance(value, np.ndarray):
        items = value.ravel().tolist()
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        return False, np.empty(0)
    if not all(_is_number(item) for item in items):
        return False, np.empty(0)
    return True, np.array(items, dtype=np.float64)


def safe_get(node: Any, key: str, kind: ValueKind) -> tuple[bool, Any]:
    """Read a typed value from a map node.

    Args:
        node: Map node.
        key: Child key.
        kind: Expected value type.

    Returns:
        (success, value). On failure the value is None.
    """
    if not has_key(node, key):
        return False, None
    value = node[key]

    if kind is ValueKind.STRING:
        if isinstance(value, str):
            return True, value
        return False, None
    if kind is ValueKind.UNSIGNED:
        ok, number = _to_unsigned(value, _UINT32_LIMIT)
    elif kind is ValueKind.UINT64:
        ok, number = _to_unsigned(value, _UINT64_LIMIT)
    elif kind is ValueKind.VECTOR:
        ok, vector = _to_vector(value)
        return (True, vector) if ok else (False, None)
    else:
        raise ValueError(f"Unknown value kind: {kind}")
    return (True, number) if ok else (False, None)


def as_text(value: Any) -> str:
    """Read a scalar node as text.

    Raises:
        TypeError: If the value is a sequence, a map or null.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if _is_number(value):
        return str(value)
    raise TypeError(f"Expected a scalar node, got {type(value).__name__}")
