"""
package.json dependency checks.
"""

import json
import logging
from typing import Any, Dict, Set

from ..constants import (
    CODE_EXTENSIONS,
    DUPLICATE_LIBRARIES,
    LODASH_FULL_IMPORTS,
    MANIFEST_NAME,
    SOURCE_DIR_NAME,
)
from ..errors import ManifestError
from ..issue import Category, Severity
from ..scanner_base import BaseScanner
from ..utils import iter_files, read_source

logger = logging.getLogger(__name__)


def load_manifest(path) -> Dict[str, Any]:
    """Parse package.json. Any read or parse failure is fatal for the run."""
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(path, str(e)) from e
    if not isinstance(data, dict):
        raise ManifestError(path, "top-level value is not an object")
    return data


def _names(section: Any) -> Set[str]:
    return set(section) if isinstance(section, dict) else set()


class DependencyScanner(BaseScanner):
    """Cross-references declared packages against the heavy-dependency table."""

    category = Category.DEPENDENCY

    def _run_checks(self):
        """Run dependency checks."""
        manifest_path = self.project_root / MANIFEST_NAME
        if not manifest_path.is_file():
            logger.debug("No %s in %s; skipping dependency checks", MANIFEST_NAME, self.project_root)
            return

        manifest = load_manifest(manifest_path)
        prod_names = _names(manifest.get('dependencies'))
        dep_names = prod_names | _names(manifest.get('devDependencies'))

        self._check_heavy_dependencies(dep_names)
        self._check_lodash_imports(dep_names)
        self._check_duplicate_libraries(dep_names)
        self._check_dependency_count(len(prod_names))

    def _check_heavy_dependencies(self, dep_names: Set[str]):
        for heavy in self.config.heavy_deps:
            if heavy.name not in dep_names:
                continue
            severity = Severity.CRITICAL if heavy.name in self.config.critical_deps else Severity.WARNING
            self._add_issue(
                severity,
                f"Heavy dependency: {heavy.name}",
                f"{heavy.name} ({heavy.size}) adds significant bundle size",
                suggestion=f"Consider using {heavy.alternative}",
                impact=f"Removing could save ~{heavy.size}",
            )

    def _check_lodash_imports(self, dep_names: Set[str]):
        """Sample source files for `import ... from "lodash"`; only when lodash-es isn't declared."""
        if 'lodash' not in dep_names or 'lodash-es' in dep_names:
            return
        src_path = self.project_root / SOURCE_DIR_NAME
        if not src_path.is_dir():
            return
        if self._has_full_lodash_import(src_path):
            self._add_issue(
                Severity.WARNING,
                "Full lodash import detected",
                "Importing entire lodash instead of specific functions",
                suggestion='Use: import debounce from "lodash/debounce" instead of import { debounce } from "lodash"',
                impact="Could save up to 70KB",
            )

    def _has_full_lodash_import(self, src_path) -> bool:
        sampled = 0
        for path in iter_files(src_path, CODE_EXTENSIONS):
            if sampled >= self.config.lodash_sample_size:
                break
            sampled += 1
            try:
                content = read_source(path)
            except OSError as e:
                self._skip(path, e)
                continue
            if any(marker in content for marker in LODASH_FULL_IMPORTS):
                return True
        return False

    def _check_duplicate_libraries(self, dep_names: Set[str]):
        for first, second, kind, suggestion in DUPLICATE_LIBRARIES:
            if first in dep_names and second in dep_names:
                self._add_issue(
                    Severity.WARNING,
                    f"Duplicate {kind} libraries",
                    f"Both {first} and {second} are installed",
                    suggestion=suggestion,
                )

    def _check_dependency_count(self, prod_count: int):
        if prod_count > self.config.high_dependency_count:
            self._add_issue(
                Severity.WARNING,
                "High dependency count",
                f"{prod_count} production dependencies installed",
                suggestion="Review if all dependencies are necessary",
            )
