"""Markdown rendering of plan reports for merge request notes."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..constants import NO_CHANGES_MESSAGE, PLAN_SUMMARY_HEADER
from ..models import ChangeType, MultiPlanReport

TEMPLATE_NAME = "plan.md.j2"

CHANGE_LABELS = {
    ChangeType.CREATE: "Create",
    ChangeType.UPDATE: "Update",
    ChangeType.RECREATE: "Recreate",
    ChangeType.DELETE: "Delete",
}


def sub(a: int, b: int) -> int:
    return a - b


class MarkdownFormatter:
    """Render a :class:`MultiPlanReport` through the bundled Jinja2 template."""

    def __init__(self, template_dir: Optional[Path] = None) -> None:
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["sub"] = sub
        self.env.globals["sub"] = sub

    def format(self, report: MultiPlanReport) -> str:
        template = self.env.get_template(TEMPLATE_NAME)
        changed_count = sum(1 for planned in report.plans if planned.report.has_changes)
        return template.render(
            header=PLAN_SUMMARY_HEADER,
            no_changes=NO_CHANGES_MESSAGE,
            labels=CHANGE_LABELS,
            plans=report.plans,
            changed_count=changed_count,
        )


def render_comment(report: MultiPlanReport, formatter: Optional[MarkdownFormatter] = None) -> str:
    """Return the note body for ``report``.

    Reports without changes collapse to the header plus a single line so the
    note can still be found and kept up to date.
    """

    if not report.has_changes:
        return f"{PLAN_SUMMARY_HEADER}\n\n{NO_CHANGES_MESSAGE}\n"

    return (formatter or MarkdownFormatter()).format(report)
