"""Report models shared by the processor and the formatting layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

from .diff import DiffEntry
from .resource import ChangeType


@dataclass(frozen=True, slots=True)
class ResourceReport:
    """Classified resource with its sorted attribute diffs."""

    address: str
    change_type: ChangeType
    diffs: Tuple[DiffEntry, ...] = ()

    def formatted_diffs(self) -> list[str]:
        lines: list[str] = []
        for diff in self.diffs:
            lines.extend(diff.formatted_lines())
        return lines


@dataclass(frozen=True, slots=True)
class PlanReport:
    """Per-plan buckets of resource reports, each sorted by address."""

    created: Tuple[ResourceReport, ...] = ()
    updated: Tuple[ResourceReport, ...] = ()
    recreated: Tuple[ResourceReport, ...] = ()
    deleted: Tuple[ResourceReport, ...] = ()

    @property
    def has_changes(self) -> bool:
        return bool(self.created or self.updated or self.recreated or self.deleted)

    @property
    def resource_count(self) -> int:
        return len(self.created) + len(self.updated) + len(self.recreated) + len(self.deleted)

    def buckets(self) -> Iterator[tuple[ChangeType, Tuple[ResourceReport, ...]]]:
        """Yield ``(change_type, reports)`` in display order."""

        yield ChangeType.CREATE, self.created
        yield ChangeType.UPDATE, self.updated
        yield ChangeType.RECREATE, self.recreated
        yield ChangeType.DELETE, self.deleted


@dataclass(frozen=True, slots=True)
class PlanIdentity:
    """Identifies a plan among several processed in one run."""

    name: str
    source_path: str
    index: int


class PlannedReport(NamedTuple):
    identity: PlanIdentity
    report: PlanReport


@dataclass(frozen=True, slots=True)
class MultiPlanReport:
    """Reports for every processed plan, in input order."""

    plans: Tuple[PlannedReport, ...] = ()

    @property
    def has_changes(self) -> bool:
        return any(planned.report.has_changes for planned in self.plans)


def extract_plan_name(path: str) -> str:
    """Derive a display name from a plan path: the file name minus ``.json``."""

    if not path:
        return "unknown"

    file_name = path.split("/")[-1]
    if file_name.endswith(".json"):
        return file_name[: -len(".json")]
    return file_name
