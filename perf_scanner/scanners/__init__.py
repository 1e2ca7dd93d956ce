"""
Scanners package for performance issues.
"""

from .dependency_scanner import DependencyScanner
from .asset_scanner import AssetScanner
from .code_scanner import CodeScanner

__all__ = [
    'DependencyScanner',
    'AssetScanner',
    'CodeScanner',
]
