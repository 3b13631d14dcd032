"""Error hierarchy and the message table shared by every layer."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Known failure kinds, each bound to a single message template."""

    PLAN_EMPTY = "plan_empty"
    NO_INPUT_FILES = "no_input_files"
    PLAN_FILE = "plan_file"
    PLAN_PARSE = "plan_parse"
    PLAN_INVALID = "plan_invalid"
    PLAN_LOAD = "plan_load"
    PLAN_PROCESS = "plan_process"
    CONFIG_LOAD = "config_load"
    GITLAB_AUTH = "gitlab_auth"
    GITLAB_PROJECT = "gitlab_project"
    GITLAB_MR = "gitlab_mr"
    GITLAB_LIST_NOTES = "gitlab_list_notes"
    GITLAB_CREATE_NOTE = "gitlab_create_note"
    GITLAB_UPDATE_NOTE = "gitlab_update_note"
    OUTPUT_EMPTY = "output_empty"
    OUTPUT_CREATE = "output_create"
    OUTPUT_WRITE = "output_write"

    @property
    def template(self) -> str:
        return _MESSAGES[self]

    def format(self, **values: Any) -> str:
        return self.template.format(**values)


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.PLAN_EMPTY: "terraform plan {source} appears to be incomplete or in wrong format",
    ErrorKind.NO_INPUT_FILES: "no plan files provided",
    ErrorKind.PLAN_FILE: "failed to open terraform plan file {source}: {cause}",
    ErrorKind.PLAN_PARSE: "failed to parse terraform plan JSON from {source}: {cause}",
    ErrorKind.PLAN_INVALID: "invalid terraform plan format in {source}: {cause}",
    ErrorKind.PLAN_LOAD: "error loading plan file {source}: {cause}",
    ErrorKind.PLAN_PROCESS: "error processing plan file {source}: {cause}",
    ErrorKind.CONFIG_LOAD: "failed to load configuration: {cause}",
    ErrorKind.GITLAB_AUTH: "failed to authenticate with GitLab: {cause}",
    ErrorKind.GITLAB_PROJECT: "failed to access project {project}: {cause}",
    ErrorKind.GITLAB_MR: "failed to access merge request {mr}: {cause}",
    ErrorKind.GITLAB_LIST_NOTES: "failed to list MR notes: {cause}",
    ErrorKind.GITLAB_CREATE_NOTE: "failed to create MR note: {cause}",
    ErrorKind.GITLAB_UPDATE_NOTE: "failed to update MR note {note}: {cause}",
    ErrorKind.OUTPUT_EMPTY: "content cannot be empty",
    ErrorKind.OUTPUT_CREATE: "failed to create output file {path}: {cause}",
    ErrorKind.OUTPUT_WRITE: "failed to write to output file {path}: {cause}",
}


class CommenterError(RuntimeError):
    """Base class for every error surfaced to the command line."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, **values: Any) -> None:
        self.kind = kind
        self.values = values
        super().__init__(kind.format(**values))


class EmptyPlanError(CommenterError):
    """Raised when a plan document carries no resource change collection."""

    def __init__(self, source: str = "unknown") -> None:
        super().__init__(ErrorKind.PLAN_EMPTY, source=source)
        self.source = source


class NoInputFilesError(CommenterError):
    """Raised when plan processing is invoked without any plan."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.NO_INPUT_FILES)


class PlanLoadError(CommenterError):
    """Raised when a plan document cannot be read, parsed or validated."""

    def __init__(
        self,
        source: str,
        cause: object,
        *,
        kind: ErrorKind = ErrorKind.PLAN_LOAD,
    ) -> None:
        super().__init__(kind, source=source, cause=cause)
        self.source = source
        self.cause = cause


class PlanProcessError(CommenterError):
    """Raised when a loaded plan cannot be turned into a report."""

    def __init__(self, source: str, cause: object) -> None:
        super().__init__(ErrorKind.PLAN_PROCESS, source=source, cause=cause)
        self.source = source
        self.cause = cause


class ConfigError(CommenterError):
    """Raised when settings are missing or malformed."""

    def __init__(self, cause: object) -> None:
        super().__init__(ErrorKind.CONFIG_LOAD, cause=cause)


class GitLabError(CommenterError):
    """Raised when a GitLab API call fails."""


class OutputError(CommenterError):
    """Raised when the rendered report cannot be written."""


__all__ = [
    "CommenterError",
    "ConfigError",
    "EmptyPlanError",
    "ErrorKind",
    "GitLabError",
    "NoInputFilesError",
    "OutputError",
    "PlanLoadError",
    "PlanProcessError",
]
