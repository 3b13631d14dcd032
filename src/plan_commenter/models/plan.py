"""Pydantic models for the ``terraform show -json`` plan document."""

from __future__ import annotations

import re
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Plan format versions accepted by the loader: ">= 0.1, < 2.0".
MIN_FORMAT_VERSION = (0, 1)
MAX_FORMAT_VERSION = (2, 0)

_VERSION_PATTERN = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?$")


def parse_format_version(value: str) -> Tuple[int, int, int]:
    """Parse a ``major[.minor[.patch]]`` version string."""

    match = _VERSION_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"invalid plan format version: {value}")
    major, minor, patch = (int(part) if part else 0 for part in match.groups())
    return major, minor, patch


class PlanChange(BaseModel):
    """The ``change`` object of a resource change."""

    model_config = ConfigDict(extra="allow")

    actions: Optional[List[str]] = None
    before: Any = None
    after: Any = None
    after_unknown: Any = None
    before_sensitive: Any = None
    after_sensitive: Any = None


class PlanResourceChange(BaseModel):
    """One entry of ``resource_changes``."""

    model_config = ConfigDict(extra="allow")

    address: str
    change: PlanChange
    module_address: Optional[str] = None
    mode: Optional[str] = None
    type: str = ""
    name: str = ""
    provider_name: Optional[str] = None


class TerraformPlan(BaseModel):
    """A Terraform plan document.

    ``resource_changes`` stays ``None`` when the key is absent or ``null``,
    which is how an incomplete plan differs from one without changes.
    """

    model_config = ConfigDict(extra="allow")

    format_version: str
    terraform_version: Optional[str] = None
    resource_changes: Optional[List[PlanResourceChange]] = Field(default=None)

    @field_validator("format_version")
    @classmethod
    def _check_format_version(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("unexpected plan input, format version is missing")
        version = parse_format_version(value)[:2]
        if not MIN_FORMAT_VERSION <= version < MAX_FORMAT_VERSION:
            raise ValueError(f"unsupported plan format version: {value}")
        return value


__all__ = [
    "MAX_FORMAT_VERSION",
    "MIN_FORMAT_VERSION",
    "PlanChange",
    "PlanResourceChange",
    "TerraformPlan",
    "parse_format_version",
]
