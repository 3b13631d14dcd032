"""Settings for publishing plan summaries to GitLab.

Values come from an optional YAML file and are overridden by environment
variables::

    GITLAB_TOKEN            personal/project access token (required)
    GITLAB_URL              GitLab instance URL (default: https://gitlab.com)
    GITLAB_PROJECT_ID       numeric id or ``group/project`` path (required)
    GITLAB_MR_ID            merge request IID (required)
    GITLAB_REQUEST_TIMEOUT  per-request timeout in seconds (default: 10)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, ValidationError, field_validator

from .constants import (
    DEFAULT_GITLAB_URL,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_GITLAB_MR_ID,
    ENV_GITLAB_PROJECT_ID,
    ENV_GITLAB_REQUEST_TIMEOUT,
    ENV_GITLAB_TOKEN,
    ENV_GITLAB_URL,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)

_ENV_FIELDS = {
    ENV_GITLAB_TOKEN: "gitlab_token",
    ENV_GITLAB_URL: "gitlab_url",
    ENV_GITLAB_PROJECT_ID: "project_id",
    ENV_GITLAB_MR_ID: "merge_request_iid",
    ENV_GITLAB_REQUEST_TIMEOUT: "request_timeout",
}
_FIELD_ENV = {field_name: variable for variable, field_name in _ENV_FIELDS.items()}


class Settings(BaseModel):
    """Connection settings for a single merge request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    gitlab_token: str = Field(min_length=1)
    project_id: str = Field(min_length=1)
    merge_request_iid: int
    gitlab_url: str = Field(default=DEFAULT_GITLAB_URL, min_length=1)
    request_timeout: PositiveFloat = DEFAULT_REQUEST_TIMEOUT

    @field_validator("project_id", mode="before")
    @classmethod
    def _project_id_as_text(cls, value: Any) -> Any:
        # YAML reads numeric project ids as integers.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("merge_request_iid", mode="before")
    @classmethod
    def _reject_boolean_iid(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a valid integer")
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        config_file: Optional[Path] = None,
    ) -> "Settings":
        """Build settings from ``config_file`` (if any) overlaid with ``env``."""

        environment = os.environ if env is None else env

        values: MutableMapping[str, Any] = {}
        if config_file is not None:
            values.update(_load_config_file(config_file))

        for variable, field_name in _ENV_FIELDS.items():
            raw = environment.get(variable)
            if raw:
                values[field_name] = raw

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(_describe_validation_error(exc)) from exc


def _describe_validation_error(exc: ValidationError) -> str:
    missing: List[str] = []
    invalid: List[str] = []
    for error in exc.errors():
        field_name = str(error["loc"][0]) if error["loc"] else ""
        variable = _FIELD_ENV.get(field_name, field_name)
        if error["type"] == "missing":
            missing.append(variable)
        else:
            invalid.append(f"invalid {variable} {error.get('input')!r}: {error['msg']}")

    if missing:
        return f"required key(s) {', '.join(missing)} missing value"
    return "; ".join(invalid)


def _load_config_file(path: Path) -> Dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read config file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file {path}") from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"config file must be a mapping: {path}")

    known = set(_ENV_FIELDS.values())
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))

    return {key: value for key, value in data.items() if key in known and value is not None}


__all__ = ["Settings"]
