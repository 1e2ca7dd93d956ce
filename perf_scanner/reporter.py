"""
Report generation for the performance scanner.
"""

import json
from typing import Dict, Iterable, List, Optional

from .issue import Issue, ScanResult, Severity

SEVERITY_ICONS = {
    Severity.CRITICAL: 'X',
    Severity.WARNING: '!',
    Severity.INFO: 'i',
}

CATEGORY_ICONS = {
    'dependency': '[pkg]',
    'asset': '[img]',
    'code': '[src]',
}

SECTION_TITLES = {
    Severity.CRITICAL: 'Critical Issues',
    Severity.WARNING: 'Warnings',
    Severity.INFO: 'Info',
}

GRADES = ((90, 'A+'), (80, 'A'), (70, 'B'), (60, 'C'), (50, 'D'))


class ReportGenerator:
    """Generate reports from a scan result."""

    @staticmethod
    def get_grade(score: int) -> str:
        """Letter grade for a 0-100 score."""
        for floor, grade in GRADES:
            if score >= floor:
                return grade
        return 'F'

    @staticmethod
    def generate_header() -> str:
        return "\n".join([
            "",
            "  ai-perf-scan",
            "  Performance scanner for React & React Native",
            "",
        ])

    @staticmethod
    def generate_text_report(
        result: ScanResult,
        verbose: bool = False,
        ai_suggestions: Optional[str] = None,
    ) -> str:
        """Generate the human-readable report: score, summary, grouped issues, AI analysis."""
        grade = ReportGenerator.get_grade(result.score)
        s = result.summary

        report = ["  Performance Score", ""]
        report.append(f"  {result.score}/100 (Grade: {grade})")
        report.append("")
        report.append(
            f"  {s.critical} critical  {s.warning} warnings  {s.info} info  {s.passed} passed"
        )
        report.append("")

        report.extend(ReportGenerator._issue_sections(result.issues, verbose))

        if ai_suggestions:
            report.append("  AI Analysis")
            report.append("  -----------")
            report.append("")
            for line in ai_suggestions.split("\n"):
                report.append(f"  {line}")
            report.append("")

        report.append(f"  {'-' * 37}")
        report.append("  Run with --ai to get AI-powered suggestions")
        report.append("  Run with --verbose to see all details")
        report.append("")
        return "\n".join(report)

    @staticmethod
    def _issue_sections(issues: Iterable[Issue], verbose: bool) -> List[str]:
        issues = list(issues)
        if not issues:
            return ["  No issues found!", ""]

        report: List[str] = []
        for severity in (Severity.CRITICAL, Severity.WARNING, Severity.INFO):
            group = [i for i in issues if i.severity == severity]
            if not group:
                continue
            if severity == Severity.INFO and not verbose:
                report.append(f"  + {len(group)} info items (use --verbose to see)")
                report.append("")
                continue
            title = SECTION_TITLES[severity]
            report.append(f"  {title}")
            report.append(f"  {'-' * len(title)}")
            for issue in group:
                report.extend(ReportGenerator._issue_block(issue, verbose))
            report.append("")
        return report

    @staticmethod
    def _issue_block(issue: Issue, verbose: bool) -> List[str]:
        icon = SEVERITY_ICONS[issue.severity]
        cat_icon = CATEGORY_ICONS.get(issue.category.value, '')
        block = ["", f"  [{icon}] {cat_icon} {issue.title or ''}"]
        if issue.file:
            location = f"{issue.file}:{issue.line}" if issue.line else issue.file
            block.append(f"      {location}")
        block.append(f"      {issue.message or ''}")
        if issue.suggestion:
            block.append(f"      -> {issue.suggestion}")
        if verbose and issue.impact:
            block.append(f"      Impact: {issue.impact}")
        return block

    @staticmethod
    def generate_json_report(result: ScanResult, ai_suggestions: Optional[str] = None) -> str:
        """Structured output: the result as-is, plus aiSuggestions when present."""
        data = result.to_dict()
        if ai_suggestions is not None:
            data["aiSuggestions"] = ai_suggestions
        return json.dumps(data, indent=2)

    @staticmethod
    def generate_summary(issues: Iterable[Issue]) -> Dict[str, int]:
        """Generate a summary count by category."""
        summary: Dict[str, int] = {}
        for issue in issues:
            key = issue.category.value
            summary[key] = summary.get(key, 0) + 1
        return summary
