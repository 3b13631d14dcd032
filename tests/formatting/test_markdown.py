"""Tests for Markdown rendering of plan reports."""

from __future__ import annotations

from pathlib import Path

from plan_commenter.constants import NO_CHANGES_MESSAGE, PLAN_SUMMARY_HEADER
from plan_commenter.formatting import MarkdownFormatter, render_comment
from plan_commenter.formatting.markdown import TEMPLATE_NAME
from plan_commenter.models import MultiPlanReport, ResourceChange
from plan_commenter.service import PlanProcessor

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def _report(*names: str) -> MultiPlanReport:
    return PlanProcessor().process_plans([FIXTURES / name for name in names])


def test_single_plan_report() -> None:
    body = render_comment(_report("web-and-db.json"))

    assert body.startswith(PLAN_SUMMARY_HEADER + "\n")
    assert "| Create | 1 |" in body
    assert "| Update | 0 |" in body
    assert "| Delete | 1 |" in body
    assert "#### Create (1)" in body
    assert "#### Update" not in body
    assert "<details><summary><code>aws_instance.web</code></summary>" in body
    assert '```diff\n+ami: "ami-123"\n```' in body
    assert '```diff\n-ami: "ami-000"\n```' in body
    assert "### web-and-db" not in body
    assert "---\n" not in body.replace("| --- | ---: |", "")


def test_sections_follow_bucket_order() -> None:
    body = render_comment(_report("mixed.json"))

    positions = [body.index(f"#### {label}") for label in ("Create", "Update", "Recreate", "Delete")]
    assert positions == sorted(positions)
    assert body.index("aws_s3_bucket.assets") < body.index("aws_s3_bucket.logs")
    assert '-instance_class: "db.t3.micro"\n+instance_class: "db.t3.small"' in body
    assert "hunter" not in body


def test_multiple_plans_are_titled_and_separated() -> None:
    body = render_comment(_report("web-and-db.json", "empty-changes.json", "mixed.json"))

    assert body.startswith(PLAN_SUMMARY_HEADER)
    assert "**2 of 3 plans have changes.**" in body
    assert "### web-and-db" in body
    assert "### empty-changes" in body
    assert f"Plan file: `{FIXTURES / 'mixed.json'}`" in body
    empty_section = body.split("### empty-changes", 1)[1].split("### mixed", 1)[0]
    assert NO_CHANGES_MESSAGE in empty_section
    assert body.count("\n---\n") == 2


def test_report_without_changes_keeps_header() -> None:
    report = PlanProcessor().process_documents([({"resource_changes": []}, "x.json")])

    assert render_comment(report) == f"{PLAN_SUMMARY_HEADER}\n\n{NO_CHANGES_MESSAGE}\n"


def test_resource_without_attribute_changes() -> None:
    plan = PlanProcessor().process_plan(
        [ResourceChange(address="null_resource.trigger", actions=["update"], before={}, after={})]
    )
    planned = _report("web-and-db.json").plans[0]._replace(report=plan)
    body = render_comment(MultiPlanReport(plans=(planned,)))

    assert "null_resource.trigger" in body
    assert "_No attribute changes._" in body


def test_rendering_is_deterministic() -> None:
    first = render_comment(_report("mixed.json", "web-and-db.json"))
    second = render_comment(_report("mixed.json", "web-and-db.json"))

    assert first == second
    assert " ".join(first.split()) == " ".join(second.split())


def test_templates_can_use_subtraction(tmp_path: Path) -> None:
    (tmp_path / TEMPLATE_NAME).write_text(
        "{{ header }} {{ plans|length|sub(1) }} {{ sub(10, 3) }}", encoding="utf-8"
    )

    body = MarkdownFormatter(template_dir=tmp_path).format(_report("web-and-db.json", "mixed.json"))

    assert body == f"{PLAN_SUMMARY_HEADER} 1 7"
