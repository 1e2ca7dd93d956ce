"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_ROOT_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>ai-perf-scan API</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; }
    h1 { font-size: 1.25rem; font-weight: 600; }
    ul { list-style: none; padding: 0; }
    li { margin: 0.5rem 0; }
    a { color: #2563eb; text-decoration: none; }
    a:hover { text-decoration: underline; }
  </style>
</head>
<body>
  <h1>ai-perf-scan: Performance scanner for React &amp; React Native</h1>
  <p>Endpoints:</p>
  <ul>
    <li><a href="/docs">/docs</a> - Swagger UI</li>
    <li><a href="/health">/health</a> - Liveness</li>
    <li><a href="/scan">/scan</a> - Usage (POST for JSON results)</li>
    <li>/report - POST for a plain-text report</li>
  </ul>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with clickable links."""
    return _ROOT_HTML
