"""Adapter layer package for plan ingestion and GitLab publishing."""

from .gitlab import GitLabClient, MergeRequestNote, NoteAction, should_update_note
from .plan_loader import PlanLoader

__all__ = [
    "GitLabClient",
    "MergeRequestNote",
    "NoteAction",
    "PlanLoader",
    "should_update_note",
]
