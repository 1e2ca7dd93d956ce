"""
Main entry point for the scanner CLI.

Usage:
    python -m perf_scanner_app [PATH] [--ai] [--api-key KEY] [--verbose] [--json]
"""

import sys


def main() -> int:
    """Main entry point."""
    from .cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
