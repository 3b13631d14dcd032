"""Command-line interface for posting Terraform plan summaries."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Mapping, Sequence

from ..adapters import GitLabClient
from ..config import Settings
from ..constants import SUCCESS_MESSAGE
from ..errors import CommenterError
from ..formatting import render_comment
from ..output import describe_destination, write_output
from ..service import PlanProcessor

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

ENVIRONMENT_HELP = """\
environment variables:
  GITLAB_TOKEN            GitLab personal access token (required)
  GITLAB_URL              GitLab instance URL (default: https://gitlab.com)
  GITLAB_PROJECT_ID       GitLab project ID (required)
  GITLAB_MR_ID            GitLab merge request ID (required)
  GITLAB_REQUEST_TIMEOUT  Request timeout in seconds (default: 10)
"""


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="terraform-mr-commenter",
        description="Summarize Terraform plan JSON files as a GitLab merge request note.",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "plans",
        nargs="+",
        type=Path,
        metavar="PLAN",
        help="Terraform plan exported with `terraform show -json`.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write output to a file instead of commenting (use '-' for stdout).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML file with GitLab settings; environment variables take precedence.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress information to stderr.",
    )
    return parser


def create_processor() -> PlanProcessor:
    return PlanProcessor()


def create_client(settings: Settings) -> GitLabClient:
    return GitLabClient(settings)


def load_and_render(plans: Sequence[Path], processor: PlanProcessor | None = None) -> str:
    """Process the plan files and render the note body."""

    processor = processor or create_processor()
    report = processor.process_plans(list(plans))
    return render_comment(report)


def publish_comment(
    body: str,
    *,
    config_file: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    settings = Settings.from_env(env, config_file=config_file)
    client = create_client(settings)
    client.validate_access()
    action = client.upsert_plan_note(body)
    logger.info("Plan note %s", action.value)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _handle_run(args: argparse.Namespace) -> int:
    body = load_and_render(args.plans)

    if args.output:
        write_output(body, args.output)
        print(SUCCESS_MESSAGE.format(destination=describe_destination(args.output)), file=sys.stderr)
        return 0

    publish_comment(body, config_file=args.config)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _handle_run(args)
    except CommenterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
