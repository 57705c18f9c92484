"""
PR Approval Gate

CI check that requires a minimum number of approving reviews when a pull
request changes files matching configured glob patterns.
"""

__version__ = "1.0.0"

from .api import ApprovalGate, ApprovalsNotMetError, check_required_approvals
from .models.requirement import Requirement, parse_requirements

__all__ = [
    "ApprovalGate",
    "ApprovalsNotMetError",
    "Requirement",
    "check_required_approvals",
    "parse_requirements",
]
