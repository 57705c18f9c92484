"""
Requirement Evaluator

Decides whether every requirement that applies to the changed files
is satisfied by the number of approved reviews.
"""

import logging
from typing import List, Sequence

from ..models.requirement import Requirement
from ..models.result import EvaluationResult, RequirementOutcome
from .matcher import PatternMatcher


logger = logging.getLogger(__name__)


NO_REVIEWS_MESSAGE = "No reviews yet, skipping check so the PR gets a green tick."
SUCCESS_MESSAGE = "All checks passed!"


class RequirementEvaluator:
    """
    Evaluates requirements against changed files and an approval count.

    Requirements whose patterns match no changed file are vacuously met.
    A pull request with no approvals at all is not blocked; other
    required-review rules are expected to cover that case.
    """

    def evaluate(
        self,
        changed_files: Sequence[str],
        approved_review_count: int,
        requirements: Sequence[Requirement]
    ) -> EvaluationResult:
        """
        Evaluate requirements in order.

        Args:
            changed_files: Paths changed by the pull request
            approved_review_count: Number of approved reviews
            requirements: Requirements to check

        Returns:
            EvaluationResult with one outcome per requirement
        """
        if approved_review_count == 0:
            logger.info(NO_REVIEWS_MESSAGE)
            return EvaluationResult(approved_review_count=0, skipped=True)

        outcomes: List[RequirementOutcome] = []
        for requirement in requirements:
            matched = PatternMatcher(requirement.patterns).matching_files(changed_files)
            outcome = RequirementOutcome(
                requirement=requirement,
                matched_files=matched,
                approved_review_count=approved_review_count,
            )
            outcomes.append(outcome)

            if not outcome.met:
                self._report_failure(outcome)

        result = EvaluationResult(approved_review_count=approved_review_count, outcomes=outcomes)
        if result.passed:
            logger.info(SUCCESS_MESSAGE)
        return result

    def _report_failure(self, outcome: RequirementOutcome) -> None:
        logger.info(
            f"Expected {outcome.required_approvals} approvals, "
            f"but the PR only has {outcome.approved_review_count}."
        )
        logger.info(
            f"PR requires {outcome.required_approvals} due to the following files "
            f"matching patterns: {outcome.requirement.pattern_list}"
        )
        logger.info(f"Matched files: {', '.join(outcome.matched_files)}")


def evaluate(
    changed_files: Sequence[str],
    approved_review_count: int,
    requirements: Sequence[Requirement]
) -> EvaluationResult:
    """Evaluate with a default RequirementEvaluator."""
    return RequirementEvaluator().evaluate(changed_files, approved_review_count, requirements)
