from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import ValidationError

from ..errors import ErrorKind, PlanLoadError
from ..models import TerraformPlan


class PlanLoader:
    """Load Terraform plan documents exported with ``terraform show -json``."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load(self, path: str | os.PathLike[str]) -> TerraformPlan:
        """Read, decode and validate the plan stored at ``path``."""

        source = str(path)
        try:
            raw = Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise PlanLoadError(source, exc, kind=ErrorKind.PLAN_FILE) from exc

        return self.parse(raw, source=source)

    def parse(self, raw: str | bytes, *, source: str = "unknown") -> TerraformPlan:
        """Decode and validate an in-memory plan document."""

        try:
            document = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise PlanLoadError(source, exc, kind=ErrorKind.PLAN_PARSE) from exc

        try:
            return TerraformPlan.model_validate(document)
        except ValidationError as exc:
            raise PlanLoadError(source, exc, kind=ErrorKind.PLAN_INVALID) from exc


__all__ = ["PlanLoader"]
