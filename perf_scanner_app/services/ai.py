"""AI service: OpenAI chat completions for remediation advice."""

import logging
from typing import Any, Optional

import openai
from openai import OpenAI

from perf_scanner import ScanResult

from ..config import get_openai_base_url, get_openai_model

logger = logging.getLogger(__name__)

SYSTEM_MESSAGE = "You are a helpful performance optimization assistant. Be concise and practical."

PROMPT_TEMPLATE = """You are a performance optimization expert for React and React Native applications.

Analyze these performance scan results and provide actionable recommendations:

Performance Score: {score}/100
Critical Issues: {critical}
Warnings: {warning}
Info: {info}

Issues found:
{issues}

Provide a brief analysis (max 200 words) with:
1. The top 3 priority fixes that will have the biggest impact
2. A quick win that can be done in under 5 minutes
3. One long-term improvement suggestion

Keep the response concise and actionable. Use bullet points."""

MAX_TOKENS = 500
TEMPERATURE = 0.7
MAX_PROMPT_ISSUES = 20

EMPTY_RESPONSE = "Unable to generate AI suggestions."


def validate_api_key(api_key: Optional[str]) -> bool:
    """Basic shape check for an OpenAI secret key."""
    return bool(api_key) and api_key.startswith("sk-") and len(api_key) > 20


def _client(api_key: str) -> Any:
    """Return an OpenAI client for the given key."""
    return OpenAI(api_key=api_key, base_url=get_openai_base_url())


def build_prompt(result: ScanResult) -> str:
    lines = []
    for issue in result.issues[:MAX_PROMPT_ISSUES]:
        where = f" in {issue.file}" if issue.file else ""
        lines.append(f"- [{issue.severity.value.upper()}] {issue.title}{where}: {issue.message}")
    return PROMPT_TEMPLATE.format(
        score=result.score,
        critical=result.summary.critical,
        warning=result.summary.warning,
        info=result.summary.info,
        issues="\n".join(lines),
    )


def describe_error(error: Exception) -> str:
    """Short, categorized message for a failed completion request."""
    message = str(error)
    if isinstance(error, openai.AuthenticationError) or "API key" in message:
        return "Invalid API key. Please check your OpenAI API key."
    if "quota" in message:
        return "API quota exceeded. Please check your OpenAI account."
    return f"AI analysis failed: {message}"


class AIService:
    """OpenAI-backed remediation summaries for a finished scan."""

    def summarize(self, result: ScanResult, api_key: str) -> str:
        """Return at most ~200 words of guidance. Failures come back as text, never raised."""
        prompt = build_prompt(result)
        try:
            client = _client(api_key)
            r = client.chat.completions.create(
                model=get_openai_model(),
                messages=[
                    {"role": "system", "content": SYSTEM_MESSAGE},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
            )
        except Exception as e:
            logger.warning("AI analysis request failed: %s", e)
            return describe_error(e)

        if r.choices and r.choices[0].message.content:
            return r.choices[0].message.content.strip()
        return EMPTY_RESPONSE
