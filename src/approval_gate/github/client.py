"""
GitHub API Client

Handles GitHub API authentication, rate limit bookkeeping and communication.
Provides the changed-file and review listings the approval gate needs.
"""

import time
import logging
from typing import Dict, List, Optional
from datetime import datetime
import requests

from ..models.pull_request import ChangedFile, PullRequestRef, Review


logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api.github.com"
PER_PAGE = 100


class GitHubAPIError(Exception):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class RateLimitExceeded(GitHubAPIError):
    """GitHub API rate limit exceeded"""
    def __init__(self, reset_time: datetime, status_code: Optional[int] = None):
        super().__init__(f"Rate limit exceeded. Resets at {reset_time}", status_code=status_code)
        self.reset_time = reset_time


class GitHubClient:
    """
    GitHub API client with authentication and error handling.

    Provides methods for:
    - Listing files changed by a pull request
    - Listing reviews submitted on a pull request
    - Tracking API rate limit status

    Requests are issued once; failures are raised to the caller.
    """

    def __init__(self, token: str, base_url: str = DEFAULT_BASE_URL, timeout: float = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token (GITHUB_TOKEN or a personal access token)
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Request timeout in seconds
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()
        self.rate_limit_remaining: Optional[int] = None
        self.rate_limit_reset: Optional[datetime] = None

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.session.headers)

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication headers."""
        session = requests.Session()
        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'PR-Approval-Gate/1.0'
        })
        return session

    def _update_rate_limit(self, response: requests.Response) -> None:
        """Update rate limit information from response headers."""
        if 'X-RateLimit-Remaining' in response.headers:
            self.rate_limit_remaining = int(response.headers['X-RateLimit-Remaining'])

        if 'X-RateLimit-Reset' in response.headers:
            reset_timestamp = int(response.headers['X-RateLimit-Reset'])
            self.rate_limit_reset = datetime.fromtimestamp(reset_timestamp)

    def _is_rate_limited(self, response: requests.Response) -> bool:
        if response.status_code == 429:
            return True
        return response.status_code == 403 and response.headers.get('X-RateLimit-Remaining') == '0'

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API and transport errors
            RateLimitExceeded: When rate limit is exceeded
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}") from e

        self._update_rate_limit(response)

        if self._is_rate_limited(response):
            reset_time = datetime.fromtimestamp(int(response.headers.get('X-RateLimit-Reset', time.time() + 3600)))
            raise RateLimitExceeded(reset_time, status_code=response.status_code)

        if not response.ok:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {}
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def _get_list(self, endpoint: str) -> List[Dict]:
        response = self._make_request('GET', endpoint, params={'per_page': PER_PAGE})
        data = response.json()
        if not isinstance(data, list):
            raise GitHubAPIError(
                f"Expected a list from {endpoint}, got {type(data).__name__}",
                status_code=response.status_code,
            )
        return data

    def get_pull_request_files(self, owner: str, repo: str, pr_number: int) -> List[Dict]:
        """
        Get files changed in a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            List of file change data
        """
        logger.info(f"Fetching PR files for {owner}/{repo}#{pr_number}")
        files = self._get_list(f'/repos/{owner}/{repo}/pulls/{pr_number}/files')
        logger.info(f"Found {len(files)} changed files")
        return files

    def get_pull_request_reviews(self, owner: str, repo: str, pr_number: int) -> List[Dict]:
        """
        Get reviews submitted on a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            List of review data
        """
        logger.debug(f"Fetching PR reviews for {owner}/{repo}#{pr_number}")
        return self._get_list(f'/repos/{owner}/{repo}/pulls/{pr_number}/reviews')

    def list_changed_files(self, pull_request: PullRequestRef) -> List[ChangedFile]:
        files = self.get_pull_request_files(pull_request.owner, pull_request.repo, pull_request.number)
        return [ChangedFile.from_api(item) for item in files]

    def list_reviews(self, pull_request: PullRequestRef) -> List[Review]:
        reviews = self.get_pull_request_reviews(pull_request.owner, pull_request.repo, pull_request.number)
        return [Review.from_api(item) for item in reviews]

