"""Conversion helpers that turn Terraform plan documents into service models."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from ..models import PlanResourceChange, ResourceChange, TerraformPlan

PlanDocument = Union[TerraformPlan, Mapping[str, Any]]


class ResourceNormalizer:
    """Normalize Terraform plan documents into :class:`ResourceChange` instances."""

    def normalize(self, plan: PlanDocument) -> Optional[List[ResourceChange]]:
        """Return resource changes for the plan, or ``None`` when it has none.

        A plan without a ``resource_changes`` key (or with ``null``) is
        incomplete, which is not the same as a plan with an empty list.
        Raw mappings are validated entry by entry and may raise
        :class:`pydantic.ValidationError`.
        """

        resource_changes = self._resource_changes(plan)
        if resource_changes is None:
            return None
        return [self._normalize_change(change) for change in resource_changes]

    # ------------------------------------------------------------------
    def _resource_changes(self, plan: PlanDocument) -> Optional[Sequence[PlanResourceChange]]:
        if isinstance(plan, TerraformPlan):
            return plan.resource_changes

        raw_changes = plan.get("resource_changes")
        if raw_changes is None:
            return None
        return [PlanResourceChange.model_validate(change) for change in raw_changes]

    def _normalize_change(self, change: PlanResourceChange) -> ResourceChange:
        details = change.change

        return ResourceChange(
            address=change.address,
            actions=list(details.actions or []),
            before=details.before,
            after=details.after,
            before_sensitive=details.before_sensitive,
            after_sensitive=details.after_sensitive,
            type=change.type,
            name=change.name,
            module_address=change.module_address,
            provider_name=change.provider_name,
        )
