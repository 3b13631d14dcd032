"""Post categorized Terraform plan diffs as GitLab merge request notes."""

from .errors import (
    CommenterError,
    EmptyPlanError,
    NoInputFilesError,
    PlanLoadError,
    PlanProcessError,
)
from .models import ChangeType, DiffKind, MultiPlanReport, PlanReport
from .service import PlanProcessor

__version__ = "0.1.0"

__all__ = [
    "ChangeType",
    "CommenterError",
    "DiffKind",
    "EmptyPlanError",
    "MultiPlanReport",
    "NoInputFilesError",
    "PlanLoadError",
    "PlanProcessError",
    "PlanProcessor",
    "PlanReport",
    "__version__",
]
