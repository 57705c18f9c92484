"""
GitHub Integration Layer

This module provides GitHub API access for pull request files and reviews,
and resolves the pull request under test from the GitHub Actions environment.
"""

from .client import GitHubClient, GitHubAPIError, RateLimitExceeded
from .context import GitHubContextError, load_pull_request_ref

__all__ = [
    'GitHubClient',
    'GitHubAPIError',
    'RateLimitExceeded',
    'GitHubContextError',
    'load_pull_request_ref',
]
