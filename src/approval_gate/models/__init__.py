"""
Data Models

Requirement, pull request and evaluation result models
"""

from .requirement import Requirement, RequirementRequest, RequirementParseError, parse_requirements
from .pull_request import PullRequestRef, ChangedFile, Review
from .result import RequirementOutcome, EvaluationResult

__all__ = [
    "Requirement",
    "RequirementRequest",
    "RequirementParseError",
    "parse_requirements",
    "PullRequestRef",
    "ChangedFile",
    "Review",
    "RequirementOutcome",
    "EvaluationResult",
]
