from __future__ import annotations

import pytest

from plan_commenter.diff import classify_actions
from plan_commenter.models import ChangeType


@pytest.mark.parametrize(
    ("actions", "expected"),
    [
        (["create"], ChangeType.CREATE),
        (["delete"], ChangeType.DELETE),
        (["update"], ChangeType.UPDATE),
        (["create", "delete"], ChangeType.RECREATE),
        (["delete", "create"], ChangeType.RECREATE),
        (["create", "create"], ChangeType.CREATE),
        (["delete", "delete", "create"], ChangeType.RECREATE),
    ],
)
def test_classifies_known_combinations(actions: list[str], expected: ChangeType) -> None:
    assert classify_actions(actions) is expected


@pytest.mark.parametrize(
    "actions",
    [
        [],
        ["no-op"],
        ["read"],
        ["create", "update"],
        ["delete", "update"],
        ["create", "delete", "update"],
    ],
)
def test_unexpected_combinations_fall_back_to_update(actions: list[str]) -> None:
    assert classify_actions(actions) is ChangeType.UPDATE


def test_accepts_any_iterable() -> None:
    assert classify_actions(iter(("delete", "create"))) is ChangeType.RECREATE
