"""
Command Line Interface

Runs the approval gate as a CI step.

Exit codes:
  0 = all applicable requirements met (or no reviews yet)
  1 = required approvals not met
  2 = operational error (configuration, workflow context, GitHub API)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .api import ApprovalGate, ApprovalsNotMetError
from .config import AppConfig, configure_logging
from .github.client import GitHubAPIError, GitHubClient
from .github.context import GitHubContextError, load_pull_request_ref
from .models.pull_request import PullRequestRef
from .models.requirement import parse_requirements


logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_NOT_MET = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="approval-gate",
        description="Fail a pull request check when files matching configured patterns lack enough approvals.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--requirements", help="Requirements as a YAML/JSON list")
    source.add_argument("--requirements-file", help="Path to a YAML/JSON file with the requirements list")
    parser.add_argument("--config", help="YAML config file (github, logging, requirements sections)")
    parser.add_argument("--token", help="GitHub token (default: INPUT_TOKEN or GITHUB_TOKEN)")
    parser.add_argument("--repo", help="Repository as owner/repo (default: GITHUB_REPOSITORY)")
    parser.add_argument("--pr", type=int, help="Pull request number (default: from the event payload)")
    parser.add_argument("--log-level", help="Log level (default: INFO)")
    return parser


def _annotate_error(message: str) -> None:
    """Emit a workflow command so the failure shows up in the Actions UI."""
    print(f"::error::{message}", flush=True)


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.from_yaml(args.config) if args.config else AppConfig.from_env()

    if args.token:
        config.github.token = args.token
    if args.log_level:
        config.logging.level = args.log_level
    if args.requirements is not None:
        config.requirements = parse_requirements(args.requirements)
    elif args.requirements_file:
        config.requirements = parse_requirements(
            Path(args.requirements_file).read_text(encoding="utf-8")
        )

    config.validate()
    return config


def _resolve_pull_request(args: argparse.Namespace) -> PullRequestRef:
    if args.repo or args.pr is not None:
        if not (args.repo and args.pr is not None):
            raise GitHubContextError("--repo and --pr must be given together")
        try:
            return PullRequestRef.from_full_name(args.repo, args.pr)
        except ValueError as e:
            raise GitHubContextError(str(e)) from e
    return load_pull_request_ref()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args)
    except (ValueError, OSError) as e:
        _annotate_error(str(e))
        return EXIT_ERROR

    configure_logging(config.logging)

    if not config.requirements:
        logger.warning("No requirements configured; nothing to check")

    try:
        pull_request = _resolve_pull_request(args)
        client = GitHubClient(
            config.github.token,
            base_url=config.github.api_base_url,
            timeout=config.github.timeout_seconds,
        )
        ApprovalGate(client).check(pull_request, config.requirements)
    except ApprovalsNotMetError as e:
        _annotate_error(str(e))
        return EXIT_NOT_MET
    except (GitHubContextError, GitHubAPIError) as e:
        logger.error(f"Approval check could not run: {e}")
        _annotate_error(str(e))
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
