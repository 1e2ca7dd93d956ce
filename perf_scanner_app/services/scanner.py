"""Scanner service: validates options, wraps PerformanceScanner and maps to API models."""

from pathlib import Path
from typing import Optional

from perf_scanner import ConfigurationError, Issue, PerformanceScanner, ScanOptions, ScanResult
from perf_scanner.constants import MANIFEST_NAME

from ..config import get_openai_api_key
from ..schemas import IssueOut, ScanResponse, SummaryOut
from .ai import validate_api_key


class ProjectNotFoundError(ConfigurationError):
    """The project path does not exist."""


def build_options(
    path: str,
    ai: bool = False,
    api_key: Optional[str] = None,
    verbose: bool = False,
    json: bool = False,
) -> ScanOptions:
    """Validate run configuration before any scanning starts.

    Raises:
        ProjectNotFoundError: path does not exist
        ConfigurationError: no package.json, or AI mode without a usable key
    """
    resolved = Path(path).expanduser().resolve()
    if not resolved.exists():
        raise ProjectNotFoundError(f"Path does not exist: {resolved}")
    if not (resolved / MANIFEST_NAME).is_file():
        raise ConfigurationError("No package.json found. Is this a JavaScript project?")

    key = api_key or get_openai_api_key() or None
    if ai:
        if not key:
            raise ConfigurationError(
                "AI mode requires an API key. Use --api-key or set OPENAI_API_KEY"
            )
        if not validate_api_key(key):
            raise ConfigurationError("Invalid API key format")

    return ScanOptions(path=resolved, ai=ai, api_key=key, verbose=verbose, json=json)


def _issue_to_out(i: Issue) -> IssueOut:
    return IssueOut(
        severity=i.severity.value,
        category=i.category.value,
        title=i.title,
        file=i.file,
        line=i.line,
        message=i.message,
        suggestion=i.suggestion,
        impact=i.impact,
    )


def to_response(result: ScanResult, ai_suggestions: Optional[str] = None) -> ScanResponse:
    s = result.summary
    return ScanResponse(
        score=result.score,
        issues=[_issue_to_out(i) for i in result.issues],
        summary=SummaryOut(critical=s.critical, warning=s.warning, info=s.info, passed=s.passed),
        ai_suggestions=ai_suggestions,
    )


class ScannerService:
    """Wraps PerformanceScanner for use by the API and the CLI."""

    def __init__(self, scanner: Optional[PerformanceScanner] = None):
        self.scanner = scanner or PerformanceScanner()

    def scan(self, options: ScanOptions, on_step=None) -> ScanResult:
        """Run all scanners against a validated project."""
        return self.scanner.run(options.path, on_step=on_step)
