"""
Pattern Matcher

Matches changed file paths against a set of glob patterns.
"""

import logging
from typing import Iterable, List

from wcmatch import glob


logger = logging.getLogger(__name__)


# '**' crosses directories, '*' stays within one path segment and matches dot-files
GLOB_FLAGS = glob.GLOBSTAR | glob.DOTGLOB | glob.FORCEUNIX


def normalize_path(path: str) -> str:
    """Use forward slashes and drop a leading './'."""
    value = path.strip().replace('\\', '/')
    while value.startswith('./'):
        value = value[2:]
    return value


class PatternMatcher:
    """
    Glob pattern set with globstar semantics.

    A path matches the set when it matches at least one pattern. Patterns
    are anchored at the repository root.
    """

    def __init__(self, patterns: Iterable[str]):
        """
        Initialize pattern matcher.

        Args:
            patterns: Glob patterns such as 'src/**/*' or '*.yml'
        """
        self.patterns = tuple(patterns)

    def matches(self, path: str) -> bool:
        return any(glob.globmatch(normalize_path(path), pattern, flags=GLOB_FLAGS) for pattern in self.patterns)

    def matching_files(self, paths: Iterable[str]) -> List[str]:
        """
        Filter paths down to the ones matching any pattern.

        Args:
            paths: Changed file paths

        Returns:
            Matching paths, in input order
        """
        matched = [path for path in paths if self.matches(path)]
        logger.debug(f"{len(matched)} file(s) matched patterns: {', '.join(self.patterns)}")
        return matched
