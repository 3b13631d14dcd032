"""Map Terraform primitive actions onto a single :class:`ChangeType`."""

from __future__ import annotations

from typing import Iterable

from ..models import ChangeType


def classify_actions(actions: Iterable[str]) -> ChangeType:
    """Return the change type for the given action list.

    ``["delete", "create"]`` and ``["create", "delete"]`` are both a
    recreate. Combinations that match nothing else (including ``no-op``,
    ``read`` or an empty list) fall back to :attr:`ChangeType.UPDATE`.
    """

    present = set(actions)
    create = "create" in present
    delete = "delete" in present
    update = "update" in present

    if create and not delete and not update:
        return ChangeType.CREATE
    if delete and not create and not update:
        return ChangeType.DELETE
    if create and delete and not update:
        return ChangeType.RECREATE
    return ChangeType.UPDATE
