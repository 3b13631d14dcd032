"""Helpers for the loosely typed JSON values found in plan documents.

Plan attribute values are whatever ``json.loads`` produced: ``None``, ``bool``,
``int``/``float``, ``str``, ``list`` or ``dict`` nested arbitrarily.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Union

JSONValue = Union[None, bool, int, float, str, list, dict]


def values_equal(left: Any, right: Any) -> bool:
    """Return ``True`` when two JSON values are structurally equal.

    Booleans never compare equal to numbers, even though Python treats
    ``True == 1``.
    """

    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))

    if type(left) is not type(right):
        return False
    return left == right


def render_value(value: Any) -> str:
    """Render a value as canonical compact JSON, ``"null"`` for missing values.

    Object keys are sorted and integral floats render as integers, so ``1.0``
    and ``1`` produce the same text.
    """

    if value is None:
        return "null"

    try:
        return json.dumps(
            _canonical_numbers(value),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            sort_keys=True,
        )
    except (TypeError, ValueError):
        return str(value)


def _canonical_numbers(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, Mapping):
        return {key: _canonical_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical_numbers(item) for item in value]
    return value


__all__ = ["JSONValue", "render_value", "values_equal"]
