"""Report route (formatted for display)."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from perf_scanner import ReportGenerator

from ..schemas import ScanRequest
from ..utils import run_scan

router = APIRouter()


@router.post("/report", response_class=PlainTextResponse)
def report(req: ScanRequest) -> str:
    """Scan a project and return the text report grouped by severity."""
    result, options, ai_suggestions = run_scan(req)
    return ReportGenerator.generate_text_report(result, verbose=options.verbose, ai_suggestions=ai_suggestions)
