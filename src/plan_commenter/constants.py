"""Shared read-only constants: report markers, messages and env names."""

from __future__ import annotations

PLAN_SUMMARY_HEADER = "## Terraform Plan Summary"

NO_CHANGES_MESSAGE = "No changes detected."
NO_CHANGES_ACROSS_ALL_PLANS_MESSAGE = "No changes detected across all plans."

REDACTED_VALUE = "[SENSITIVE]"

STDOUT_INDICATOR = "-"
SUCCESS_MESSAGE = "Markdown output written to {destination}"

DEFAULT_GITLAB_URL = "https://gitlab.com"
DEFAULT_REQUEST_TIMEOUT = 10.0

ENV_GITLAB_TOKEN = "GITLAB_TOKEN"
ENV_GITLAB_URL = "GITLAB_URL"
ENV_GITLAB_PROJECT_ID = "GITLAB_PROJECT_ID"
ENV_GITLAB_MR_ID = "GITLAB_MR_ID"
ENV_GITLAB_REQUEST_TIMEOUT = "GITLAB_REQUEST_TIMEOUT"
