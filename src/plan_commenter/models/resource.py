"""Resource models used by the plan diff engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ChangeType(str, Enum):
    """Semantic change derived from the primitive actions of a resource."""

    CREATE = "create"
    UPDATE = "update"
    RECREATE = "recreate"
    DELETE = "delete"


@dataclass(slots=True)
class ResourceChange:
    """A single ``resource_changes`` entry of a Terraform plan document."""

    address: str
    actions: List[str] = field(default_factory=list)
    before: Any = None
    after: Any = None
    before_sensitive: Any = None
    after_sensitive: Any = None
    type: str = ""
    name: str = ""
    module_address: Optional[str] = None
    provider_name: Optional[str] = None

    @property
    def has_actions(self) -> bool:
        return bool(self.actions)
