"""Orchestration layer that turns plan documents into categorized reports."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from .adapters import PlanLoader
from .diff import FieldDiffGenerator, SensitivityResolver, classify_actions
from .errors import CommenterError, EmptyPlanError, NoInputFilesError, PlanLoadError, PlanProcessError
from .models import (
    ChangeType,
    MultiPlanReport,
    PlanIdentity,
    PlannedReport,
    PlanReport,
    ResourceChange,
    ResourceReport,
    TerraformPlan,
    extract_plan_name,
)
from .normalization import ResourceNormalizer

logger = logging.getLogger(__name__)

PlanSource = str | os.PathLike[str]
PlanLoaderFactory = Callable[[], PlanLoader]


class PlanProcessor:
    """Classify, sort and diff the resource changes of one or more plans."""

    def __init__(
        self,
        *,
        plan_loader_factory: PlanLoaderFactory | None = None,
        normalizer: ResourceNormalizer | None = None,
        diff_generator: FieldDiffGenerator | None = None,
    ) -> None:
        self._plan_loader_factory = plan_loader_factory or PlanLoader
        self._normalizer = normalizer or ResourceNormalizer()
        self._diff_generator = diff_generator or FieldDiffGenerator()

    # ------------------------------------------------------------------
    def process_plan(
        self, resource_changes: Optional[Sequence[ResourceChange]], *, source: str = "unknown"
    ) -> PlanReport:
        """Build the report for a single plan's resource changes.

        ``None`` means the plan had no change collection at all and raises
        :class:`EmptyPlanError`. An empty sequence is a valid plan without
        changes.
        """

        if resource_changes is None:
            raise EmptyPlanError(source)

        buckets: Dict[ChangeType, List[ResourceChange]] = {change_type: [] for change_type in ChangeType}
        for change in resource_changes:
            if not change.has_actions:
                continue
            buckets[classify_actions(change.actions)].append(change)

        return PlanReport(
            created=self._build_reports(buckets[ChangeType.CREATE], ChangeType.CREATE),
            updated=self._build_reports(buckets[ChangeType.UPDATE], ChangeType.UPDATE),
            recreated=self._build_reports(buckets[ChangeType.RECREATE], ChangeType.RECREATE),
            deleted=self._build_reports(buckets[ChangeType.DELETE], ChangeType.DELETE),
        )

    def process_plans(self, sources: Sequence[PlanSource]) -> MultiPlanReport:
        """Load and process every plan file in order, failing on the first error."""

        if not sources:
            raise NoInputFilesError()

        loader = self._plan_loader_factory()
        planned: List[PlannedReport] = []
        for index, source in enumerate(sources):
            source_path = os.fspath(source)
            try:
                document = loader.load(source_path)
            except PlanLoadError as exc:
                raise PlanLoadError(source_path, exc) from exc

            planned.append(self._process_document(document, source_path, index))

        return self._assemble(planned)

    def process_documents(
        self, documents: Iterable[Tuple[TerraformPlan | Mapping[str, Any], str]]
    ) -> MultiPlanReport:
        """Process already decoded ``(document, source)`` pairs."""

        pairs = list(documents)
        if not pairs:
            raise NoInputFilesError()

        planned = [
            self._process_document(document, source, index)
            for index, (document, source) in enumerate(pairs)
        ]
        return self._assemble(planned)

    # ------------------------------------------------------------------
    def _process_document(
        self, document: TerraformPlan | Mapping[str, Any], source_path: str, index: int
    ) -> PlannedReport:
        identity = PlanIdentity(
            name=extract_plan_name(source_path),
            source_path=source_path,
            index=index,
        )

        try:
            resource_changes = self._normalizer.normalize(document)
            report = self.process_plan(resource_changes, source=source_path)
        except (CommenterError, ValidationError) as exc:
            raise PlanProcessError(source_path, exc) from exc

        logger.info(
            "Processed plan %s: %d resource(s) with changes", identity.name, report.resource_count
        )
        return PlannedReport(identity=identity, report=report)

    def _assemble(self, planned: Sequence[PlannedReport]) -> MultiPlanReport:
        result = MultiPlanReport(plans=tuple(planned))
        if not result.has_changes:
            logger.info("No changes detected across %d plan(s)", len(planned))
        return result

    def _build_reports(
        self, changes: List[ResourceChange], change_type: ChangeType
    ) -> Tuple[ResourceReport, ...]:
        ordered = sorted(changes, key=lambda change: change.address)
        return tuple(
            ResourceReport(
                address=change.address,
                change_type=change_type,
                diffs=self._diff_generator.generate(
                    change.before,
                    change.after,
                    SensitivityResolver.for_change(change),
                ),
            )
            for change in ordered
        )


__all__ = ["PlanProcessor", "PlanSource"]
