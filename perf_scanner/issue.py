"""
Issue and result data models for the performance scanner.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


class Severity(Enum):
    """Issue severity levels, most to least severe."""
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class Category(Enum):
    """Which scanner produced an issue."""
    DEPENDENCY = "dependency"
    ASSET = "asset"
    CODE = "code"


@dataclass(frozen=True)
class Issue:
    """Represents one detected performance finding."""
    severity: Severity
    category: Category
    title: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None
    message: Optional[str] = None
    suggestion: Optional[str] = None
    impact: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form; absent optional fields are omitted."""
        data: Dict[str, Any] = {
            "severity": self.severity.value,
            "category": self.category.value,
        }
        for key in ("title", "file", "line", "message", "suggestion", "impact"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class ScanSummary:
    """Issue counts per severity plus the passed-checks counter."""
    critical: int = 0
    warning: int = 0
    info: int = 0
    passed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "critical": self.critical,
            "warning": self.warning,
            "info": self.info,
            "passed": self.passed,
        }


@dataclass(frozen=True)
class ScanResult:
    """Aggregate of one full scan. Built once by the aggregator."""
    score: int
    issues: Tuple[Issue, ...] = field(default_factory=tuple)
    summary: ScanSummary = field(default_factory=ScanSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": [i.to_dict() for i in self.issues],
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class ScanOptions:
    """Per-run options, validated once before scanning starts."""
    path: Path
    ai: bool = False
    api_key: Optional[str] = None
    verbose: bool = False
    json: bool = False


@dataclass(frozen=True)
class HeavyDependency:
    """A third-party package known to be large for what it provides."""
    name: str
    size: str
    alternative: str
