#!/usr/bin/env python3
"""
Approval Check Demo

Runs the approval gate against a real pull request and prints the outcome
of every requirement.

Usage:
    python examples/approval_check_demo.py <owner> <repo> <pr_number>

Example:
    GITHUB_TOKEN=... python examples/approval_check_demo.py octo-org octo-repo 42
"""

import sys
import os
import logging

from approval_gate.api import ApprovalGate, ApprovalsNotMetError
from approval_gate.github.client import GitHubClient, GitHubAPIError
from approval_gate.models.pull_request import PullRequestRef
from approval_gate.models.requirement import parse_requirements


REQUIREMENTS = """
- patterns: ['src/**/*', 'lib/**/*']
  requiredApprovals: 1
- patterns: ['.github/**/*']
  requiredApprovals: 2
"""


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def print_result(result):
    if result.skipped:
        print("⏭️  No approvals yet, requirements were not evaluated")
        return
    for outcome in result.outcomes:
        status = "✅" if outcome.met else "❌"
        print(f"{status} {outcome.requirement.pattern_list} "
              f"(needs {outcome.required_approvals}, has {outcome.approved_review_count})")
        for path in outcome.matched_files:
            print(f"     - {path}")


def main():
    """Main demo function."""
    setup_logging()

    if len(sys.argv) != 4:
        print("Usage: python approval_check_demo.py <owner> <repo> <pr_number>")
        sys.exit(1)

    try:
        pull_request = PullRequestRef(sys.argv[1], sys.argv[2], int(sys.argv[3]))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    token = os.getenv('GITHUB_TOKEN')
    if not token:
        print("Error: GitHub token not found. Set GITHUB_TOKEN environment variable.")
        sys.exit(1)

    gate = ApprovalGate(GitHubClient(token))
    try:
        result = gate.check(pull_request, parse_requirements(REQUIREMENTS))
    except ApprovalsNotMetError as e:
        print(f"🚫 {e}")
        print_result(e.result)
        sys.exit(1)
    except GitHubAPIError as e:
        print(f"GitHub API error: {e}")
        sys.exit(2)

    print("🎉 Approval gate passed")
    print_result(result)


if __name__ == "__main__":
    main()
