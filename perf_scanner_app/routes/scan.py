"""Scan route (structured results)."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..schemas import ScanRequest, ScanResponse
from ..services.scanner import to_response
from ..utils import run_scan

router = APIRouter()

_SCAN_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Scan - ai-perf-scan API</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; }
    h1 { font-size: 1.25rem; font-weight: 600; }
  </style>
</head>
<body>
  <h1>POST /scan</h1>
  <p>Send JSON: <code>{"project_path": "/path/to/project", "ai": false}</code>.
  Set <code>"ai": true</code> and <code>"api_key"</code> (or OPENAI_API_KEY on the server) for AI advice.</p>
  <p><a href="/">Home</a> - <a href="/docs">Swagger UI</a> - <a href="/health">Health</a></p>
</body>
</html>
"""


@router.get("/scan", response_class=HTMLResponse)
def scan_get() -> str:
    """GET /scan: usage page. Use POST with JSON body to scan."""
    return _SCAN_HTML


@router.post("/scan", response_model=ScanResponse)
def scan(req: ScanRequest) -> ScanResponse:
    """Scan a project; AI advice only when requested."""
    result, _, ai_suggestions = run_scan(req)
    return to_response(result, ai_suggestions)
