"""
Base scanner class for performance issues.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .constants import DEFAULT_CONFIG, ScanConfig
from .issue import Category, Issue, Severity
from .utils import relative_posix

logger = logging.getLogger(__name__)


class BaseScanner:
    """Base class for all scanners."""

    category: Category

    def __init__(self, config: ScanConfig = DEFAULT_CONFIG):
        self.config = config
        self.issues: List[Issue] = []
        self.project_root: Optional[Path] = None

    def scan(self, project_root: Union[str, Path]) -> List[Issue]:
        """Run all checks against the project and return the issues in emission order."""
        self.project_root = Path(project_root)
        self.issues = []
        self._run_checks()
        logger.debug("%s produced %d issue(s)", type(self).__name__, len(self.issues))
        return list(self.issues)

    def _run_checks(self):
        """Override in subclasses to implement specific checks."""
        pass

    def _add_issue(
        self,
        severity: Severity,
        title: str,
        message: str,
        file: Optional[str] = None,
        line: Optional[int] = None,
        suggestion: Optional[str] = None,
        impact: Optional[str] = None,
    ):
        """Add an issue to the list."""
        self.issues.append(
            Issue(
                severity=severity,
                category=self.category,
                title=title,
                file=file,
                line=line,
                message=message,
                suggestion=suggestion,
                impact=impact,
            )
        )

    def _relative(self, path: Path) -> str:
        return relative_posix(path, self.project_root)

    def _skip(self, path: Path, exc: Exception):
        logger.debug("Skipping unreadable file %s: %s", path, exc)
