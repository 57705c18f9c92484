"""
Pull Request Data Source

The two fetch operations the gate needs from a code host.
"""

from typing import List, Protocol

from ..models.pull_request import ChangedFile, PullRequestRef, Review


class PullRequestSource(Protocol):
    """Anything that can list a pull request's changed files and reviews."""

    def list_changed_files(self, pull_request: PullRequestRef) -> List[ChangedFile]:
        ...

    def list_reviews(self, pull_request: PullRequestRef) -> List[Review]:
        ...
