"""Command-line entry point: ai-perf-scan [path] [--ai] [--api-key KEY] [-v] [--json]."""

import argparse
import logging
import sys
from typing import List, Optional

from perf_scanner import ConfigurationError, ReportGenerator, ScanOptions, __version__

from .logging_utils import setup_logging
from .progress import Spinner
from .services import AIService, ScannerService
from .services.scanner import build_options

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ai-perf-scan",
        description="AI-powered performance scanner for React & React Native apps",
    )
    parser.add_argument("path", nargs="?", default=".", help="Path to project directory (default: .)")
    parser.add_argument("--ai", action="store_true", help="Enable AI-powered suggestions (requires API key)")
    parser.add_argument("--api-key", dest="api_key", help="OpenAI API key (or set OPENAI_API_KEY env var)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed output including all info items")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _get_ai_analysis(options: ScanOptions, result, ai_svc: AIService) -> Optional[str]:
    if not options.ai or not options.api_key:
        return None
    spinner = Spinner("Getting AI suggestions...", enabled=not options.json)
    spinner.start()
    try:
        return ai_svc.summarize(result, options.api_key)
    finally:
        spinner.stop()


def run(
    options: ScanOptions,
    scanner_svc: Optional[ScannerService] = None,
    ai_svc: Optional[AIService] = None,
) -> int:
    """Scan, print the report and return the exit code (1 when any critical issue exists)."""
    scanner_svc = scanner_svc or ScannerService()
    ai_svc = ai_svc or AIService()

    if not options.json:
        print(ReportGenerator.generate_header())

    spinner = Spinner(enabled=not options.json)
    spinner.start()
    try:
        result = scanner_svc.scan(options, on_step=spinner.update)
    finally:
        spinner.stop()

    ai_suggestions = _get_ai_analysis(options, result, ai_svc)

    if options.json:
        print(ReportGenerator.generate_json_report(result, ai_suggestions))
    else:
        print(ReportGenerator.generate_text_report(result, options.verbose, ai_suggestions))

    return 1 if result.summary.critical > 0 else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    args = create_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        options = build_options(
            args.path,
            ai=args.ai,
            api_key=args.api_key,
            verbose=args.verbose,
            json=args.json,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return run(options)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Scan aborted", exc_info=True)
        print(f"Error during scan: {e}", file=sys.stderr)
        return 1
