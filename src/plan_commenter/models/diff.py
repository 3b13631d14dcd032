"""Field level diff entries produced for a single resource."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..values import render_value


class DiffKind(str, Enum):
    """How a top-level attribute differs between before and after."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One attribute difference. ``before``/``after`` are ``None`` when absent."""

    key: str
    kind: DiffKind
    before: Any = None
    after: Any = None

    def render_before(self) -> str:
        return render_value(self.before)

    def render_after(self) -> str:
        return render_value(self.after)

    def formatted_lines(self) -> list[str]:
        """Return the ``-``/``+`` lines used in diff blocks."""

        if self.kind is DiffKind.ADDED:
            return [f"+{self.key}: {self.render_after()}"]
        if self.kind is DiffKind.REMOVED:
            return [f"-{self.key}: {self.render_before()}"]
        return [
            f"-{self.key}: {self.render_before()}",
            f"+{self.key}: {self.render_after()}",
        ]
