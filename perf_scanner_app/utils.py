"""Utility functions for the API."""

from typing import Optional, Tuple

from fastapi import HTTPException

from perf_scanner import ConfigurationError, ManifestError, ScanOptions, ScanResult

from .schemas import ScanRequest
from .services import AIService, ScannerService
from .services.scanner import ProjectNotFoundError, build_options

scanner_svc = ScannerService()
ai_svc = AIService()


def run_scan(req: ScanRequest) -> Tuple[ScanResult, ScanOptions, Optional[str]]:
    """Validate, scan and optionally summarize. Returns (result, options, ai_suggestions)."""
    try:
        options = build_options(req.project_path, ai=req.ai, api_key=req.api_key, verbose=req.verbose)
    except ProjectNotFoundError as e:
        raise HTTPException(404, str(e))
    except ConfigurationError as e:
        raise HTTPException(400, str(e))

    try:
        result = scanner_svc.scan(options)
    except ManifestError as e:
        raise HTTPException(422, str(e))

    ai_suggestions = None
    if options.ai and options.api_key:
        ai_suggestions = ai_svc.summarize(result, options.api_key)
    return result, options, ai_suggestions
