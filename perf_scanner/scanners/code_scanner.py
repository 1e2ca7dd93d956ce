"""
Source code pattern checks for React / React Native projects.

Detection is textual (substring and regex matching), not syntax-tree based.
"""

from pathlib import Path
from typing import List

from ..constants import (
    CODE_EXTENSIONS,
    CODE_IGNORE_DIRS,
    CODE_IGNORE_NAME_MARKERS,
    COMPONENT_EXTENSIONS,
    CONSOLE_LINES_SHOWN,
    EXPORTED_COMPONENT_MARKERS,
    MEMO_MARKERS,
    REACT_NATIVE_MARKERS,
    SYNC_FS_ALLOWED_MARKERS,
    SYNC_FS_CALLS,
    URL_IGNORE_MARKERS,
    VIEW_ELEMENT_PATTERN,
    VIRTUALIZED_LIST_MARKER,
)
from ..issue import Category, Issue, Severity
from ..scanner_base import BaseScanner
from ..utils import iter_files, read_source


class CodeScanner(BaseScanner):
    """Per-file heuristics over js/jsx/ts/tsx sources."""

    category = Category.CODE

    def _run_checks(self):
        """Run code checks on every source file."""
        for path in iter_files(
            self.project_root, CODE_EXTENSIONS, CODE_IGNORE_DIRS, CODE_IGNORE_NAME_MARKERS
        ):
            try:
                content = read_source(path)
            except OSError as e:
                self._skip(path, e)
                continue
            self.check_source(self._relative(path), content)

    def check_source(self, file: str, content: str) -> List[Issue]:
        """Apply all checks to one file's content, in order.

        Issues accumulate on ``self.issues`` across calls (``scan()`` resets
        it); the return value holds only the issues found in this file.
        """
        start = len(self.issues)
        lines = content.split('\n')

        self._check_file_size(file, len(lines))
        self._check_console_statements(file, content, lines)

        if Path(file).suffix in COMPONENT_EXTENSIONS:
            self._check_inline_functions(file, content)
            self._check_inline_styles(file, content)
            self._check_use_effect_deps(file, content)
            self._check_memoization(file, content, len(lines))

        self._check_sync_file_ops(file, content)
        self._check_hardcoded_urls(file, content)
        self._check_large_objects(file, content)
        self._check_react_native_patterns(file, content)
        return self.issues[start:]

    def _check_file_size(self, file: str, line_count: int):
        if line_count > self.config.large_file_lines:
            self._add_issue(
                Severity.WARNING,
                "Large file",
                f"File has {line_count} lines",
                file=file,
                suggestion="Consider splitting into smaller modules",
                impact="Large files are harder to maintain and may impact bundle splitting",
            )

    def _check_console_statements(self, file: str, content: str, lines: List[str]):
        """Severity follows the number of matching lines; the message reports every call."""
        pattern = self.config.console_pattern
        total = len(pattern.findall(content))
        if not total:
            return

        console_lines = [i for i, line in enumerate(lines, 1) if pattern.search(line)]
        if len(console_lines) > self.config.console_warning_threshold:
            shown = ', '.join(str(n) for n in console_lines[:CONSOLE_LINES_SHOWN])
            more = '...' if len(console_lines) > CONSOLE_LINES_SHOWN else ''
            self._add_issue(
                Severity.WARNING,
                "Multiple console statements",
                f"{total} console statements found (lines: {shown}{more})",
                file=file,
                line=console_lines[0],
                suggestion="Remove console statements in production or use a logger",
                impact="Console statements impact performance and expose debug info",
            )
        elif console_lines:
            self._add_issue(
                Severity.INFO,
                "Console statement found",
                f"{total} console statement(s) found",
                file=file,
                line=console_lines[0],
                suggestion="Consider removing before production",
            )

    def _check_inline_functions(self, file: str, content: str):
        count = len(self.config.inline_function_pattern.findall(content))
        if count > self.config.inline_function_threshold:
            self._add_issue(
                Severity.WARNING,
                "Inline functions in render",
                f"{count} inline arrow functions in event handlers",
                file=file,
                suggestion="Use useCallback to memoize handlers",
                impact="Inline functions cause unnecessary re-renders",
            )

    def _check_inline_styles(self, file: str, content: str):
        count = len(self.config.inline_style_pattern.findall(content))
        if count > self.config.inline_style_threshold:
            self._add_issue(
                Severity.INFO,
                "Multiple inline styles",
                f"{count} inline style objects",
                file=file,
                suggestion="Use StyleSheet.create() or move styles outside component",
                impact="Inline styles create new objects on each render",
            )

    def _check_use_effect_deps(self, file: str, content: str):
        if self.config.use_effect_no_deps_pattern.search(content):
            self._add_issue(
                Severity.WARNING,
                "useEffect without dependencies",
                "useEffect called without dependency array",
                file=file,
                suggestion="Add dependency array [] for mount-only effects, or [deps] for reactive effects",
                impact="Missing dependencies can cause infinite re-renders",
            )

    def _check_memoization(self, file: str, content: str, line_count: int):
        if not any(marker in content for marker in EXPORTED_COMPONENT_MARKERS):
            return

        has_memo = any(marker in content for marker in MEMO_MARKERS)
        map_calls = len(self.config.map_call_pattern.findall(content))
        has_heavy_render = (
            map_calls > self.config.heavy_render_map_threshold
            or VIRTUALIZED_LIST_MARKER in content
        )

        if not has_memo and has_heavy_render and line_count > self.config.memo_line_threshold:
            self._add_issue(
                Severity.INFO,
                "Consider memoization",
                "Component with heavy rendering not memoized",
                file=file,
                suggestion="Wrap with React.memo() to prevent unnecessary re-renders",
            )

    def _check_sync_file_ops(self, file: str, content: str):
        # CLIs, scripts and config files may block
        if any(marker in file for marker in SYNC_FS_ALLOWED_MARKERS):
            return
        if any(call in content for call in SYNC_FS_CALLS):
            self._add_issue(
                Severity.WARNING,
                "Synchronous file operation",
                "Sync file operations block the event loop",
                file=file,
                suggestion="Use async versions: fs.promises.readFile, etc.",
            )

    def _check_hardcoded_urls(self, file: str, content: str):
        urls = [
            m.group(0)
            for m in self.config.hardcoded_url_pattern.finditer(content)
            if not any(marker in m.group(0) for marker in URL_IGNORE_MARKERS)
        ]
        if urls:
            self._add_issue(
                Severity.INFO,
                "Hardcoded URLs",
                f"{len(urls)} hardcoded URL(s) found",
                file=file,
                suggestion="Move URLs to environment variables or config",
            )

    def _check_large_objects(self, file: str, content: str):
        if self.config.large_object_pattern.search(content):
            self._add_issue(
                Severity.INFO,
                "Large inline object",
                "Large object literal defined inline",
                file=file,
                suggestion="Move to separate file or lazy load",
            )

    def _check_react_native_patterns(self, file: str, content: str):
        if not any(marker in content for marker in REACT_NATIVE_MARKERS):
            return

        if '<Image' in content and 'resizeMode' not in content and 'source={' in content:
            self._add_issue(
                Severity.INFO,
                "Image without resizeMode",
                "Image component without explicit resizeMode",
                file=file,
                suggestion="Add resizeMode prop for better performance",
            )

        view_count = len(VIEW_ELEMENT_PATTERN.findall(content))
        if (
            '<ScrollView' in content
            and view_count > self.config.scrollview_child_threshold
            and VIRTUALIZED_LIST_MARKER not in content
        ):
            self._add_issue(
                Severity.WARNING,
                "ScrollView with many items",
                "ScrollView used for list rendering",
                file=file,
                suggestion="Use FlatList or SectionList for better performance",
                impact="ScrollView renders all children at once",
            )
