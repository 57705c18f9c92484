"""
Approval Gate Layer

Matches changed files against requirement patterns and evaluates
approval thresholds.
"""

from .matcher import PatternMatcher
from .evaluator import RequirementEvaluator, evaluate
from .source import PullRequestSource

__all__ = ['PatternMatcher', 'RequirementEvaluator', 'evaluate', 'PullRequestSource']
