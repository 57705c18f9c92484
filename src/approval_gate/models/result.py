"""
Evaluation Result Models

Per-requirement outcomes and the overall gate result
"""

from dataclasses import dataclass, field
from typing import List

from .requirement import Requirement


@dataclass
class RequirementOutcome:
    """How one requirement fared against the changed files and approvals"""
    requirement: Requirement
    matched_files: List[str]
    approved_review_count: int

    @property
    def required_approvals(self) -> int:
        return self.requirement.required_approvals

    @property
    def applies(self) -> bool:
        """True when at least one changed file matched the requirement."""
        return bool(self.matched_files)

    @property
    def met(self) -> bool:
        return not self.applies or self.approved_review_count >= self.required_approvals


@dataclass
class EvaluationResult:
    """Overall gate result"""
    approved_review_count: int
    outcomes: List[RequirementOutcome] = field(default_factory=list)
    skipped: bool = False

    @property
    def failed_outcomes(self) -> List[RequirementOutcome]:
        return [o for o in self.outcomes if not o.met]

    @property
    def passed(self) -> bool:
        return self.skipped or not self.failed_outcomes
