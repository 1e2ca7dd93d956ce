"""
Issue aggregation and scoring.
"""

from typing import Iterable

from .constants import DEFAULT_CONFIG, SCORE_MAX, ScanConfig
from .issue import Issue, ScanResult, ScanSummary, Severity


def calculate_score(critical: int, warning: int, info: int, config: ScanConfig = DEFAULT_CONFIG) -> int:
    """100 minus weighted penalties, clamped to [0, 100] after all penalties are applied."""
    score = SCORE_MAX
    score -= critical * config.score_critical_penalty
    score -= warning * config.score_warning_penalty
    score -= info * config.score_info_penalty
    return max(0, min(SCORE_MAX, score))


def aggregate(issues: Iterable[Issue], config: ScanConfig = DEFAULT_CONFIG) -> ScanResult:
    """Build the ScanResult for a run. Pure; never raises for any issue list."""
    issues = tuple(issues)
    critical = sum(1 for i in issues if i.severity == Severity.CRITICAL)
    warning = sum(1 for i in issues if i.severity == Severity.WARNING)
    info = sum(1 for i in issues if i.severity == Severity.INFO)

    # Always resolves to the base count: every issue has exactly one severity.
    passed = config.score_base_checks + len(issues) - critical - warning - info

    return ScanResult(
        score=calculate_score(critical, warning, info, config),
        issues=issues,
        summary=ScanSummary(critical=critical, warning=warning, info=info, passed=passed),
    )
