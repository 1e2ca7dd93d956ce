"""Services for scanner and AI integration."""

from .scanner import ScannerService
from .ai import AIService

__all__ = ["ScannerService", "AIService"]
