"""
Exceptions raised by the performance scanner.
"""


class ScanError(Exception):
    """Base class for errors that abort a scan."""


class ConfigurationError(ScanError):
    """Invalid run configuration (missing project, manifest or credential)."""


class ManifestError(ScanError):
    """package.json exists but cannot be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path}: {reason}")
