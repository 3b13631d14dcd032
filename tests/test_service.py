from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from plan_commenter.errors import (
    EmptyPlanError,
    NoInputFilesError,
    PlanLoadError,
    PlanProcessError,
)
from plan_commenter.models import ChangeType, DiffEntry, DiffKind, ResourceChange
from plan_commenter.service import PlanProcessor

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class DummyPlanLoader:
    documents: dict[str, dict[str, Any]] = {}

    def load(self, path: str) -> dict[str, Any]:
        return self.documents[path]


def _web_and_db_changes() -> list[ResourceChange]:
    return [
        ResourceChange(
            address="aws_instance.web",
            actions=["create"],
            before=None,
            after={"ami": "ami-123"},
        ),
        ResourceChange(
            address="aws_instance.db",
            actions=["delete"],
            before={"ami": "ami-000"},
            after=None,
        ),
    ]


def test_process_plan_builds_buckets() -> None:
    report = PlanProcessor().process_plan(_web_and_db_changes())

    assert report.has_changes is True
    assert report.updated == ()
    assert report.recreated == ()

    (created,) = report.created
    assert created.address == "aws_instance.web"
    assert created.change_type is ChangeType.CREATE
    assert created.diffs == (DiffEntry(key="ami", kind=DiffKind.ADDED, after="ami-123"),)
    assert created.diffs[0].render_after() == '"ami-123"'

    (deleted,) = report.deleted
    assert deleted.address == "aws_instance.db"
    assert deleted.diffs == (DiffEntry(key="ami", kind=DiffKind.REMOVED, before="ami-000"),)
    assert deleted.diffs[0].render_before() == '"ami-000"'


def test_empty_change_list_is_a_valid_plan() -> None:
    report = PlanProcessor().process_plan([])

    assert report.has_changes is False
    assert report.resource_count == 0
    assert (report.created, report.updated, report.recreated, report.deleted) == ((), (), (), ())


def test_missing_change_list_raises() -> None:
    with pytest.raises(EmptyPlanError) as excinfo:
        PlanProcessor().process_plan(None, source="plans/prod.json")

    assert "plans/prod.json" in str(excinfo.value)


def test_resources_without_actions_are_dropped() -> None:
    changes = [
        ResourceChange(address="aws_vpc.main", actions=[]),
        ResourceChange(address="aws_subnet.a", actions=["update"], before={"x": 1}, after={"x": 2}),
    ]

    report = PlanProcessor().process_plan(changes)

    assert [resource.address for resource in report.updated] == ["aws_subnet.a"]
    assert report.resource_count == 1


def test_buckets_are_sorted_and_duplicates_pass_through() -> None:
    changes = [
        ResourceChange(address="b.two", actions=["create"]),
        ResourceChange(address="a.one", actions=["delete", "create"]),
        ResourceChange(address="a.one", actions=["create"]),
        ResourceChange(address="b.two", actions=["create"]),
        ResourceChange(address="a.zero", actions=["create", "delete"]),
        ResourceChange(address="c.three", actions=["no-op"]),
    ]

    report = PlanProcessor().process_plan(changes)

    assert [r.address for r in report.created] == ["a.one", "b.two", "b.two"]
    assert [r.address for r in report.recreated] == ["a.one", "a.zero"]
    assert [r.address for r in report.updated] == ["c.three"]


def test_sensitive_attributes_are_redacted_in_reports() -> None:
    change = ResourceChange(
        address="aws_db_instance.main",
        actions=["create"],
        after={"password": "hunter2", "engine": "postgres"},
        after_sensitive={"password": True},
    )

    (resource,) = PlanProcessor().process_plan([change]).created

    assert resource.formatted_diffs() == ['+engine: "postgres"', '+password: "[SENSITIVE]"']


def test_process_plans_from_fixtures() -> None:
    sources = [FIXTURES / "web-and-db.json", FIXTURES / "empty-changes.json", FIXTURES / "mixed.json"]

    result = PlanProcessor().process_plans(sources)

    assert result.has_changes is True
    identities = [planned.identity for planned in result.plans]
    assert [identity.name for identity in identities] == ["web-and-db", "empty-changes", "mixed"]
    assert [identity.index for identity in identities] == [0, 1, 2]
    assert identities[0].source_path == str(FIXTURES / "web-and-db.json")

    empty = result.plans[1].report
    assert empty.has_changes is False

    mixed = result.plans[2].report
    assert [r.address for r in mixed.created] == ["aws_s3_bucket.assets", "aws_s3_bucket.logs"]
    assert [r.address for r in mixed.updated] == ["aws_vpc.main", "module.app.aws_db_instance.main"]
    assert [r.address for r in mixed.recreated] == ["aws_security_group.web"]
    assert [r.address for r in mixed.deleted] == ["aws_iam_role.legacy"]

    vpc, database = mixed.updated
    assert vpc.diffs == ()
    assert [entry.key for entry in database.diffs] == ["instance_class"]

    (security_group,) = mixed.recreated
    assert [entry.key for entry in security_group.diffs] == ["ingress", "name"]
    assert security_group.diffs[0].render_after() == '[{"port":80},{"port":443}]'


def test_has_changes_is_false_when_every_plan_is_empty() -> None:
    sources = [FIXTURES / "empty-changes.json", FIXTURES / "empty-changes.json"]

    result = PlanProcessor().process_plans(sources)

    assert result.has_changes is False
    assert len(result.plans) == 2


def test_no_input_files() -> None:
    processor = PlanProcessor()

    with pytest.raises(NoInputFilesError):
        processor.process_plans([])

    with pytest.raises(NoInputFilesError):
        processor.process_documents([])


def test_load_failure_aborts_the_run(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")

    with pytest.raises(PlanLoadError) as excinfo:
        PlanProcessor().process_plans([FIXTURES / "web-and-db.json", broken])

    assert excinfo.value.source == str(broken)
    assert isinstance(excinfo.value.cause, PlanLoadError)
    assert str(excinfo.value).startswith(f"error loading plan file {broken}")


def test_incomplete_plan_is_a_processing_error() -> None:
    source = FIXTURES / "incomplete.json"

    with pytest.raises(PlanProcessError) as excinfo:
        PlanProcessor().process_plans([FIXTURES / "web-and-db.json", source])

    assert excinfo.value.source == str(source)
    assert isinstance(excinfo.value.cause, EmptyPlanError)


def test_uses_injected_loader() -> None:
    DummyPlanLoader.documents = {
        "first": json.loads((FIXTURES / "web-and-db.json").read_text(encoding="utf-8")),
        "second": {"format_version": "1.0", "resource_changes": []},
    }

    result = PlanProcessor(plan_loader_factory=DummyPlanLoader).process_plans(["first", "second"])

    assert [planned.identity.name for planned in result.plans] == ["first", "second"]
    assert result.plans[0].report.has_changes is True
    assert result.plans[1].report.has_changes is False


def test_process_documents_wraps_malformed_documents() -> None:
    with pytest.raises(PlanProcessError) as excinfo:
        PlanProcessor().process_documents([({"resource_changes": ["oops"]}, "bad.json")])

    assert excinfo.value.source == "bad.json"


def test_repeated_runs_are_identical() -> None:
    sources = [FIXTURES / "mixed.json", FIXTURES / "web-and-db.json"]
    processor = PlanProcessor()

    assert processor.process_plans(sources) == processor.process_plans(sources)


def test_no_op_only_plan_is_reported_as_update() -> None:
    document = {
        "format_version": "1.2",
        "resource_changes": [
            {
                "address": "aws_vpc.main",
                "change": {"actions": ["no-op"], "before": {"cidr": "10.0.0.0/16"}, "after": {"cidr": "10.0.0.0/16"}},
            }
        ],
    }

    result = PlanProcessor().process_documents([(document, "noop.json")])

    report = result.plans[0].report
    assert result.has_changes is True
    assert [r.address for r in report.updated] == ["aws_vpc.main"]
    assert report.updated[0].diffs == ()


class ExplodingNormalizer:
    def normalize(self, plan: Any) -> None:
        raise TypeError("bug in normalizer")


def test_programming_errors_are_not_wrapped() -> None:
    processor = PlanProcessor(normalizer=ExplodingNormalizer())

    with pytest.raises(TypeError):
        processor.process_documents([({"resource_changes": []}, "plan.json")])
