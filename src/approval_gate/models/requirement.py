"""
Requirement Data Models

Glob pattern sets paired with a minimum number of approvals
"""

from dataclasses import dataclass
from typing import Any, List, Tuple, Union

import yaml
from pydantic import BaseModel, ValidationError, validator


class RequirementParseError(ValueError):
    """Raised when the requirements input cannot be turned into Requirement objects"""


@dataclass(frozen=True)
class Requirement:
    """A set of glob patterns and the approvals needed when any of them match"""
    patterns: Tuple[str, ...]
    required_approvals: int

    def __post_init__(self):
        """데이터 검증"""
        if isinstance(self.patterns, str):
            raise ValueError("patterns must be a sequence of strings, not a single string")
        object.__setattr__(self, 'patterns', tuple(self.patterns))
        if not self.patterns:
            raise ValueError("At least one pattern is required")
        if any(not isinstance(p, str) or not p.strip() for p in self.patterns):
            raise ValueError("Patterns must be non-empty strings")
        if isinstance(self.required_approvals, bool) or not isinstance(self.required_approvals, int):
            raise ValueError("required_approvals must be an integer")
        if self.required_approvals < 0:
            raise ValueError("required_approvals must be non-negative")

    @property
    def pattern_list(self) -> str:
        """Patterns joined for diagnostic output"""
        return ', '.join(self.patterns)


# Pydantic model for configuration validation
class RequirementRequest(BaseModel):
    """설정 입력용 Requirement 모델"""
    patterns: List[str]
    required_approvals: int

    @validator('patterns')
    def validate_patterns(cls, v):
        if not v:
            raise ValueError('At least one pattern is required')
        if any(not p.strip() for p in v):
            raise ValueError('Patterns must be non-empty strings')
        return v

    @validator('required_approvals')
    def validate_required_approvals(cls, v):
        if v < 0:
            raise ValueError('required_approvals must be non-negative')
        return v

    def to_requirement(self) -> Requirement:
        return Requirement(patterns=tuple(self.patterns), required_approvals=self.required_approvals)


def _normalize_entry(entry: Any) -> Any:
    """Accept the action input spelling (requiredApprovals) and a bare pattern string."""
    if not isinstance(entry, dict):
        return entry
    data = dict(entry)
    if 'requiredApprovals' in data and 'required_approvals' not in data:
        data['required_approvals'] = data.pop('requiredApprovals')
    if isinstance(data.get('patterns'), str):
        data['patterns'] = [data['patterns']]
    return data


def parse_requirements(raw: Union[str, List[Any], None]) -> List[Requirement]:
    """
    Parse requirements from a YAML/JSON document or an already-loaded list.

    Args:
        raw: YAML (or JSON) text, a list of mappings, or None

    Returns:
        Requirements in input order

    Raises:
        RequirementParseError: If the input is malformed
    """
    if raw is None:
        return []

    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            raw = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise RequirementParseError(f"Requirements are not valid YAML: {e}") from e
        if raw is None:
            return []

    if not isinstance(raw, list):
        raise RequirementParseError(
            f"Requirements must be a list, got {type(raw).__name__}"
        )

    requirements = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise RequirementParseError(f"Requirement #{index} must be a mapping")
        try:
            request = RequirementRequest(**_normalize_entry(entry))
        except ValidationError as e:
            raise RequirementParseError(f"Requirement #{index} is invalid: {e}") from e
        requirements.append(request.to_requirement())

    return requirements
