"""
GitHub Actions Context

Resolves the pull request under test from the workflow environment.
"""

import json
import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from ..models.pull_request import PullRequestRef


logger = logging.getLogger(__name__)


class GitHubContextError(Exception):
    """The workflow environment does not describe a pull request"""


def load_pull_request_ref(env: Optional[Mapping[str, str]] = None) -> PullRequestRef:
    """
    Build a PullRequestRef from GITHUB_REPOSITORY and the event payload.

    The payload at GITHUB_EVENT_PATH carries `pull_request.number` for the
    pull_request, pull_request_target and pull_request_review events.

    Args:
        env: Environment mapping (default: os.environ)

    Returns:
        The pull request that triggered the workflow

    Raises:
        GitHubContextError: If the repository or pull request cannot be determined
    """
    env = os.environ if env is None else env

    repository = env.get('GITHUB_REPOSITORY', '')
    if not repository:
        raise GitHubContextError("GITHUB_REPOSITORY is not set")

    event_path = env.get('GITHUB_EVENT_PATH', '')
    if not event_path:
        raise GitHubContextError("GITHUB_EVENT_PATH is not set")

    try:
        payload = json.loads(Path(event_path).read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        raise GitHubContextError(f"Cannot read event payload {event_path}: {e}") from e

    pull_request = payload.get('pull_request') if isinstance(payload, dict) else None
    if not isinstance(pull_request, dict) or 'number' not in pull_request:
        event_name = env.get('GITHUB_EVENT_NAME', 'unknown')
        raise GitHubContextError(f"Event '{event_name}' is not associated with a pull request")

    try:
        ref = PullRequestRef.from_full_name(repository, int(pull_request['number']))
    except (TypeError, ValueError) as e:
        raise GitHubContextError(f"Invalid pull request context: {e}") from e

    logger.debug(f"Resolved pull request {ref} from {env.get('GITHUB_EVENT_NAME', 'unknown')} event")
    return ref
