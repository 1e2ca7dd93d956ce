"""
Main scanner class that coordinates all scanners.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from .aggregator import aggregate
from .constants import DEFAULT_CONFIG, ScanConfig
from .issue import Issue, ScanResult
from .scanner_base import BaseScanner
from .scanners import AssetScanner, CodeScanner, DependencyScanner

logger = logging.getLogger(__name__)

StepCallback = Callable[[str], None]


class PerformanceScanner:
    """Runs the dependency, asset and code scanners and scores the result."""

    def __init__(self, config: ScanConfig = DEFAULT_CONFIG):
        self.config = config
        # Order is part of the result contract: dependency, asset, code.
        self.scanners: List[Tuple[str, BaseScanner]] = [
            ("Analyzing dependencies...", DependencyScanner(config)),
            ("Scanning assets...", AssetScanner(config)),
            ("Analyzing code patterns...", CodeScanner(config)),
        ]

    def collect_issues(
        self,
        project_root: Union[str, Path],
        on_step: Optional[StepCallback] = None,
    ) -> List[Issue]:
        """Run every scanner and concatenate their issues.

        Args:
            project_root: Project directory to scan
            on_step: Called with a short description before each scanner runs

        Returns:
            Issues in scanner order
        """
        issues: List[Issue] = []
        for step, scanner in self.scanners:
            logger.debug(step)
            if on_step:
                on_step(step)
            issues.extend(scanner.scan(project_root))
        return issues

    def run(
        self,
        project_root: Union[str, Path],
        on_step: Optional[StepCallback] = None,
    ) -> ScanResult:
        """Scan a project and return its scored result."""
        result = aggregate(self.collect_issues(project_root, on_step), self.config)
        logger.debug(
            "Scan complete: score=%d critical=%d warning=%d info=%d",
            result.score,
            result.summary.critical,
            result.summary.warning,
            result.summary.info,
        )
        return result
