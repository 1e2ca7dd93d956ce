"""Pydantic request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class ScanRequest(BaseModel):
    """Request body for a project scan."""

    project_path: str = Field(..., description="Path to a project directory containing package.json")
    ai: bool = Field(default=False, description="Request AI remediation advice")
    api_key: Optional[str] = Field(default=None, description="OpenAI key; falls back to OPENAI_API_KEY")
    verbose: bool = Field(default=False, description="Include info items and impact text in text reports")


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single performance issue."""

    severity: str = Field(..., description="critical, warning, or info")
    category: str = Field(..., description="dependency, asset, or code")
    title: Optional[str] = None
    file: Optional[str] = Field(default=None, description="Path relative to the project root")
    line: Optional[int] = None
    message: Optional[str] = None
    suggestion: Optional[str] = None
    impact: Optional[str] = None


class SummaryOut(BaseModel):
    """Counts per severity."""

    critical: int = 0
    warning: int = 0
    info: int = 0
    passed: int = 0


# --- Responses ---


class ScanResponse(BaseModel):
    """Response for POST /scan."""

    score: int = Field(..., ge=0, le=100)
    issues: List[IssueOut] = Field(default_factory=list)
    summary: SummaryOut = Field(default_factory=SummaryOut)
    ai_suggestions: Optional[str] = Field(default=None, description="AI-generated remediation advice")
