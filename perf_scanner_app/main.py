"""FastAPI app: /health, /scan, /report."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from perf_scanner import __version__

from .config import get_host, get_log_level, get_port
from .logging_utils import setup_logging
from .routes import health_router, report_router, root_router, scan_router
from .startup import validate_config


@asynccontextmanager
async def lifespan(_app: FastAPI):
    validate_config()
    yield


app = FastAPI(
    title="ai-perf-scan API",
    description="Static performance checks for React and React Native projects, with optional AI advice.",
    version=__version__,
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(scan_router)
app.include_router(report_router)


def serve() -> None:
    """Run the API with uvicorn on HOST/PORT."""
    setup_logging(level=get_log_level())
    uvicorn.run(app, host=get_host(), port=get_port())
