"""
Pull Request Data Models

Pull request identity, changed files and reviews
"""

from dataclasses import dataclass
from typing import Dict, Optional


APPROVED = "APPROVED"


@dataclass(frozen=True)
class PullRequestRef:
    """Identifies a pull request: owner, repository and number"""
    owner: str
    repo: str
    number: int

    def __post_init__(self):
        """데이터 검증"""
        if not self.owner or not self.repo:
            raise ValueError("Owner and repo are required")
        if self.number <= 0:
            raise ValueError("PR number must be positive")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_full_name(cls, full_name: str, number: int) -> "PullRequestRef":
        """Build from an 'owner/repo' string."""
        owner, sep, repo = full_name.strip().partition('/')
        if not sep or not owner or not repo or '/' in repo:
            raise ValueError("Repository must be in format 'owner/repo'")
        return cls(owner=owner, repo=repo, number=number)

    def __str__(self) -> str:
        return f"{self.full_name}#{self.number}"


@dataclass(frozen=True)
class ChangedFile:
    """A file path modified by the pull request"""
    filename: str

    @classmethod
    def from_api(cls, data: Dict) -> "ChangedFile":
        return cls(filename=data['filename'])


@dataclass(frozen=True)
class Review:
    """A pull request review; only its state matters for the gate"""
    state: str
    user: Optional[str] = None

    @property
    def is_approved(self) -> bool:
        return self.state == APPROVED

    @classmethod
    def from_api(cls, data: Dict) -> "Review":
        user = data.get('user') or {}
        return cls(state=data.get('state') or '', user=user.get('login'))
