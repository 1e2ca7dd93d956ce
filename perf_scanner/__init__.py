"""
Static performance scanner for React and React Native projects.

Inspects package.json, image/font assets and js/jsx/ts/tsx sources, flags
likely performance problems and scores the project from 0 to 100.
"""

__version__ = "1.0.0"

from .aggregator import aggregate, calculate_score
from .constants import DEFAULT_CONFIG, ScanConfig
from .errors import ConfigurationError, ManifestError, ScanError
from .issue import Category, Issue, ScanOptions, ScanResult, ScanSummary, Severity
from .main_scanner import PerformanceScanner
from .reporter import ReportGenerator
from .scanners import AssetScanner, CodeScanner, DependencyScanner

__all__ = [
    "aggregate",
    "calculate_score",
    "DEFAULT_CONFIG",
    "ScanConfig",
    "ConfigurationError",
    "ManifestError",
    "ScanError",
    "Category",
    "Issue",
    "ScanOptions",
    "ScanResult",
    "ScanSummary",
    "Severity",
    "PerformanceScanner",
    "ReportGenerator",
    "AssetScanner",
    "CodeScanner",
    "DependencyScanner",
]
