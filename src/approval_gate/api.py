"""
Approval Gate API

Orchestrates a single check: fetch changed files and reviews for a pull
request, count approvals, evaluate requirements and signal the outcome.
"""

import logging
from typing import Iterable, Optional, Sequence

from .config import AppConfig
from .gate.evaluator import RequirementEvaluator
from .gate.source import PullRequestSource
from .github.client import GitHubClient
from .github.context import load_pull_request_ref
from .models.pull_request import PullRequestRef, Review
from .models.requirement import Requirement
from .models.result import EvaluationResult


logger = logging.getLogger(__name__)


FAILURE_MESSAGE = "Required approvals not met for one or more patterns"


class ApprovalsNotMetError(Exception):
    """At least one requirement that applies to the pull request lacks approvals."""

    def __init__(self, result: EvaluationResult):
        super().__init__(FAILURE_MESSAGE)
        self.result = result


def count_approved_reviews(reviews: Iterable[Review]) -> int:
    return sum(1 for review in reviews if review.is_approved)


class ApprovalGate:
    """
    Approval gate for one pull request.

    Fetches data through a PullRequestSource so the gate can run against
    GitHub or an in-memory fake.
    """

    def __init__(self, source: PullRequestSource, evaluator: Optional[RequirementEvaluator] = None):
        """
        Initialize approval gate.

        Args:
            source: Provider of changed files and reviews
            evaluator: Optional RequirementEvaluator
        """
        self.source = source
        self.evaluator = evaluator or RequirementEvaluator()

    def check(self, pull_request: PullRequestRef, requirements: Sequence[Requirement]) -> EvaluationResult:
        """
        Run the gate.

        Args:
            pull_request: Pull request to check
            requirements: Requirements to enforce

        Returns:
            EvaluationResult of a passing check

        Raises:
            ApprovalsNotMetError: If any applicable requirement lacks approvals
        """
        logger.debug(f"Checking {len(requirements)} requirement(s) for {pull_request}")

        changed_files = [f.filename for f in self.source.list_changed_files(pull_request)]
        approved = count_approved_reviews(self.source.list_reviews(pull_request))
        logger.info(f"Found {approved} reviews.")

        result = self.evaluator.evaluate(changed_files, approved, requirements)
        if not result.passed:
            raise ApprovalsNotMetError(result)
        return result


def check_required_approvals(
    requirements: Sequence[Requirement],
    token: str,
    pull_request: Optional[PullRequestRef] = None,
    config: Optional[AppConfig] = None
) -> EvaluationResult:
    """
    Check a pull request on GitHub.

    Args:
        requirements: Requirements to enforce
        token: GitHub token
        pull_request: Pull request to check (default: from the Actions environment)
        config: Optional configuration for API URL and timeout

    Returns:
        EvaluationResult of a passing check

    Raises:
        ApprovalsNotMetError: If any applicable requirement lacks approvals
    """
    config = config or AppConfig()
    client = GitHubClient(
        token,
        base_url=config.github.api_base_url,
        timeout=config.github.timeout_seconds,
    )
    pull_request = pull_request or load_pull_request_ref()
    return ApprovalGate(client).check(pull_request, requirements)
