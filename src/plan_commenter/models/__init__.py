"""Data models for Terraform resource changes and plan reports."""

from .diff import DiffEntry, DiffKind
from .plan import PlanChange, PlanResourceChange, TerraformPlan
from .report import (
    MultiPlanReport,
    PlanIdentity,
    PlannedReport,
    PlanReport,
    ResourceReport,
    extract_plan_name,
)
from .resource import ChangeType, ResourceChange

__all__ = [
    "ChangeType",
    "DiffEntry",
    "DiffKind",
    "MultiPlanReport",
    "PlanChange",
    "PlanIdentity",
    "PlanReport",
    "PlanResourceChange",
    "PlannedReport",
    "ResourceChange",
    "ResourceReport",
    "TerraformPlan",
    "extract_plan_name",
]
