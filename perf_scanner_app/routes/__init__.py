"""Route handlers."""

from .health import router as health_router
from .report import router as report_router
from .root import router as root_router
from .scan import router as scan_router

__all__ = ["root_router", "health_router", "scan_router", "report_router"]
