"""
Unit tests for GitHub Integration Layer.

Covers client construction, error mapping and workflow context resolution.
"""

import json

import pytest
from unittest.mock import Mock, patch
import requests
import time

from approval_gate.github.client import GitHubClient, GitHubAPIError, RateLimitExceeded
from approval_gate.github.context import GitHubContextError, load_pull_request_ref
from approval_gate.models.pull_request import PullRequestRef


def make_response(status_code=200, json_data=None, headers=None):
    response = Mock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.json.return_value = json_data
    response.content = b'{}' if json_data is not None else b''
    response.headers = headers or {
        'X-RateLimit-Remaining': '4999',
        'X-RateLimit-Reset': str(int(time.time()) + 3600)
    }
    return response


class TestGitHubClient:
    """Unit tests for GitHubClient class."""

    def test_client_initialization(self):
        token = "ghp_test_token_123456789"
        client = GitHubClient(token)

        assert client.token == token
        assert client.base_url == "https://api.github.com"
        assert client.headers["Authorization"] == f"token {token}"
        assert client.headers["Accept"] == "application/vnd.github.v3+json"

    def test_client_initialization_validation(self):
        with pytest.raises(ValueError):
            GitHubClient("")

        with pytest.raises(ValueError):
            GitHubClient(None)

    def test_base_url_trailing_slash(self):
        client = GitHubClient("test_token", base_url="https://github.example.com/api/v3/")

        assert client.base_url == "https://github.example.com/api/v3"

    @patch('requests.Session.request')
    def test_make_request_success(self, mock_request):
        mock_request.return_value = make_response(json_data={"message": "success"})

        client = GitHubClient("test_token", timeout=5)
        response = client._make_request("GET", "/test/endpoint")

        assert response.json() == {"message": "success"}
        mock_request.assert_called_once_with(
            "GET", "https://api.github.com/test/endpoint", timeout=5
        )
        assert client.rate_limit_remaining == 4999

    @patch('requests.Session.request')
    def test_make_request_rate_limit_403(self, mock_request):
        mock_request.return_value = make_response(
            status_code=403,
            json_data={"message": "API rate limit exceeded"},
            headers={
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": str(int(time.time()) + 3600)
            }
        )

        client = GitHubClient("test_token")

        with pytest.raises(RateLimitExceeded) as exc_info:
            client._make_request("GET", "/test/endpoint")

        assert exc_info.value.status_code == 403

    @patch('requests.Session.request')
    def test_make_request_forbidden_is_api_error(self, mock_request):
        mock_request.return_value = make_response(
            status_code=403,
            json_data={"message": "Resource not accessible by integration"},
            headers={"X-RateLimit-Remaining": "4000"}
        )

        client = GitHubClient("test_token")

        with pytest.raises(GitHubAPIError) as exc_info:
            client._make_request("GET", "/test/endpoint")

        assert not isinstance(exc_info.value, RateLimitExceeded)
        assert exc_info.value.status_code == 403
        assert 'Resource not accessible' in str(exc_info.value)

    @patch('requests.Session.request')
    def test_make_request_transport_error(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("connection refused")

        client = GitHubClient("test_token")

        with pytest.raises(GitHubAPIError) as exc_info:
            client._make_request("GET", "/test/endpoint")

        assert exc_info.value.status_code is None

    @patch('requests.Session.request')
    def test_list_endpoint_rejects_non_list(self, mock_request):
        mock_request.return_value = make_response(json_data={"message": "not a list"})

        client = GitHubClient("test_token")

        with pytest.raises(GitHubAPIError):
            client.get_pull_request_reviews("owner", "repo", 1)


class TestPullRequestContext:
    """Unit tests for load_pull_request_ref."""

    def write_event(self, tmp_path, payload):
        event_path = tmp_path / "event.json"
        event_path.write_text(json.dumps(payload), encoding="utf-8")
        return str(event_path)

    def test_pull_request_event(self, tmp_path):
        env = {
            'GITHUB_REPOSITORY': 'mocked-owner-value/mocked-repo-value',
            'GITHUB_EVENT_NAME': 'pull_request',
            'GITHUB_EVENT_PATH': self.write_event(tmp_path, {'pull_request': {'number': 99}}),
        }

        assert load_pull_request_ref(env) == PullRequestRef('mocked-owner-value', 'mocked-repo-value', 99)

    def test_pull_request_review_event(self, tmp_path):
        env = {
            'GITHUB_REPOSITORY': 'owner/repo',
            'GITHUB_EVENT_NAME': 'pull_request_review',
            'GITHUB_EVENT_PATH': self.write_event(
                tmp_path, {'review': {'state': 'approved'}, 'pull_request': {'number': 7}}
            ),
        }

        assert load_pull_request_ref(env).number == 7

    def test_push_event_is_rejected(self, tmp_path):
        env = {
            'GITHUB_REPOSITORY': 'owner/repo',
            'GITHUB_EVENT_NAME': 'push',
            'GITHUB_EVENT_PATH': self.write_event(tmp_path, {'ref': 'refs/heads/main'}),
        }

        with pytest.raises(GitHubContextError) as exc_info:
            load_pull_request_ref(env)

        assert "'push'" in str(exc_info.value)

    def test_missing_environment(self, tmp_path):
        with pytest.raises(GitHubContextError):
            load_pull_request_ref({})

        with pytest.raises(GitHubContextError):
            load_pull_request_ref({'GITHUB_REPOSITORY': 'owner/repo'})

        with pytest.raises(GitHubContextError):
            load_pull_request_ref({
                'GITHUB_REPOSITORY': 'owner/repo',
                'GITHUB_EVENT_PATH': str(tmp_path / 'missing.json'),
            })

    def test_invalid_repository(self, tmp_path):
        env = {
            'GITHUB_REPOSITORY': 'not-a-full-name',
            'GITHUB_EVENT_PATH': self.write_event(tmp_path, {'pull_request': {'number': 1}}),
        }

        with pytest.raises(GitHubContextError):
            load_pull_request_ref(env)
