"""GitLab REST API client used to publish the plan summary note."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional
from urllib.parse import quote

import requests

from ..constants import PLAN_SUMMARY_HEADER
from ..errors import ErrorKind, GitLabError

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..config import Settings

logger = logging.getLogger(__name__)

NOTES_PER_PAGE = 100


@dataclass(slots=True)
class MergeRequestNote:
    """An existing note on the merge request."""

    id: int
    body: str
    internal: bool = False


class NoteAction(str, Enum):
    """Outcome of :meth:`GitLabClient.upsert_plan_note`."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


def normalize_body(body: str) -> str:
    """Collapse whitespace runs so formatting noise does not count as a change."""

    return " ".join(body.split())


def should_update_note(existing_body: str, new_body: str) -> bool:
    """Return ``True`` when the normalized bodies differ."""

    return normalize_body(existing_body).casefold() != normalize_body(new_body).casefold()


class GitLabClient:
    """Minimal GitLab API v4 client scoped to one merge request."""

    def __init__(self, settings: "Settings", *, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.api_url = f"{settings.gitlab_url.rstrip('/')}/api/v4"
        self.session = session or requests.Session()
        self.session.headers.update({"PRIVATE-TOKEN": settings.gitlab_token})

        project = quote(str(settings.project_id), safe="")
        self._project_path = f"projects/{project}"
        self._mr_path = f"{self._project_path}/merge_requests/{settings.merge_request_iid}"

    # ------------------------------------------------------------------
    def validate_access(self) -> None:
        """Confirm the token can see the user, project and merge request."""

        user = self._request("GET", "user", ErrorKind.GITLAB_AUTH).json()
        project = self._request(
            "GET", self._project_path, ErrorKind.GITLAB_PROJECT, project=self.settings.project_id
        ).json()
        merge_request = self._request(
            "GET", self._mr_path, ErrorKind.GITLAB_MR, mr=self.settings.merge_request_iid
        ).json()

        logger.info("Authenticated as user: %s", user.get("username", "unknown"))
        logger.info("Project: %s", project.get("name_with_namespace", self.settings.project_id))
        logger.info("Merge Request: %s", merge_request.get("title", ""))

    def iter_notes(self) -> Iterator[MergeRequestNote]:
        """Yield every note on the merge request, following pagination."""

        page: Optional[str] = "1"
        while page:
            response = self._request(
                "GET",
                f"{self._mr_path}/notes",
                ErrorKind.GITLAB_LIST_NOTES,
                params={"per_page": NOTES_PER_PAGE, "page": page},
            )
            for payload in response.json() or []:
                yield MergeRequestNote(
                    id=int(payload["id"]),
                    body=str(payload.get("body") or ""),
                    internal=bool(payload.get("internal", False)),
                )
            page = response.headers.get("X-Next-Page") or None

    def find_existing_plan_note(self) -> Optional[MergeRequestNote]:
        """Return the first internal note that starts with the plan summary header."""

        for note in self.iter_notes():
            if note.internal and note.body.startswith(PLAN_SUMMARY_HEADER):
                return note
        return None

    def create_note(self, body: str) -> MergeRequestNote:
        payload = self._request(
            "POST",
            f"{self._mr_path}/notes",
            ErrorKind.GITLAB_CREATE_NOTE,
            json={"body": body, "internal": True},
        ).json()
        return MergeRequestNote(id=int(payload.get("id", 0)), body=body, internal=True)

    def update_note(self, note_id: int, body: str) -> None:
        self._request(
            "PUT",
            f"{self._mr_path}/notes/{note_id}",
            ErrorKind.GITLAB_UPDATE_NOTE,
            note=note_id,
            json={"body": body},
        )

    def upsert_plan_note(self, body: str) -> NoteAction:
        """Create the plan note, or update it only when its content changed."""

        logger.info("Comment body length: %d characters", len(body))
        existing = self.find_existing_plan_note()

        if existing is None:
            logger.info("No existing internal note found, creating new one")
            self.create_note(body)
            logger.info("Created new internal note with full content")
            return NoteAction.CREATED

        logger.info("Found existing internal note %s", existing.id)
        if not should_update_note(existing.body, body):
            logger.info("Internal note already exists and content is up to date. No action needed.")
            return NoteAction.UNCHANGED

        self.update_note(existing.id, body)
        logger.info("Updated existing internal note %s", existing.id)
        return NoteAction.UPDATED

    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        endpoint: str,
        kind: ErrorKind,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        **context: Any,
    ) -> requests.Response:
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                timeout=self.settings.request_timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise GitLabError(kind, cause=exc, **context) from exc
        return response


__all__ = [
    "GitLabClient",
    "MergeRequestNote",
    "NoteAction",
    "normalize_body",
    "should_update_note",
]
