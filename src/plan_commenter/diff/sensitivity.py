"""Resolution of ``before_sensitive``/``after_sensitive`` plan metadata."""

from __future__ import annotations

from typing import Any, Mapping

from ..models import ResourceChange


def contains_sensitive(value: Any) -> bool:
    """Return ``True`` when any boolean leaf of ``value`` is ``True``."""

    if isinstance(value, bool):
        return value
    if isinstance(value, Mapping):
        return any(contains_sensitive(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return any(contains_sensitive(item) for item in value)
    return False


class SensitivityResolver:
    """Decide whether a top-level attribute must be redacted."""

    def __init__(self, before_sensitive: Any = None, after_sensitive: Any = None) -> None:
        self._before = before_sensitive
        self._after = after_sensitive

    @classmethod
    def for_change(cls, change: ResourceChange) -> "SensitivityResolver":
        return cls(change.before_sensitive, change.after_sensitive)

    def is_sensitive(self, field_name: str) -> bool:
        # The after map wins when both describe the field.
        for markers in (self._after, self._before):
            if isinstance(markers, Mapping) and field_name in markers:
                return contains_sensitive(markers[field_name])
        return False
