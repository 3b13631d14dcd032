"""Flat, top-level attribute diffing for a single resource change."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from ..constants import REDACTED_VALUE
from ..models import DiffEntry, DiffKind
from ..values import values_equal
from .sensitivity import SensitivityResolver


class FieldDiffGenerator:
    """Compare the ``before`` and ``after`` attribute maps of a resource.

    Only first-level keys are diffed. A nested change is reported as the
    whole old value replaced by the whole new value.
    """

    def __init__(self, redacted_value: str = REDACTED_VALUE) -> None:
        self.redacted_value = redacted_value

    def generate(
        self,
        before: Any,
        after: Any,
        resolver: Optional[SensitivityResolver] = None,
    ) -> Tuple[DiffEntry, ...]:
        """Return diff entries ordered by attribute name."""

        before_map = before if isinstance(before, Mapping) else {}
        after_map = after if isinstance(after, Mapping) else {}

        diffs: List[DiffEntry] = []
        for key in self._collect_keys(before_map, after_map):
            before_exists = key in before_map
            after_exists = key in after_map
            before_value = before_map.get(key)
            after_value = after_map.get(key)

            if resolver is not None and resolver.is_sensitive(key):
                before_value = self.redacted_value
                after_value = self.redacted_value

            if after_exists and not before_exists:
                diffs.append(DiffEntry(key=key, kind=DiffKind.ADDED, after=after_value))
            elif before_exists and not after_exists:
                diffs.append(DiffEntry(key=key, kind=DiffKind.REMOVED, before=before_value))
            elif not values_equal(before_value, after_value):
                diffs.append(
                    DiffEntry(
                        key=key,
                        kind=DiffKind.CHANGED,
                        before=before_value,
                        after=after_value,
                    )
                )

        return tuple(diffs)

    # ------------------------------------------------------------------
    @staticmethod
    def _collect_keys(before: Mapping[str, Any], after: Mapping[str, Any]) -> List[str]:
        return sorted(set(before) | set(after))
