"""PerformanceScanner: scanner order and step reporting across a whole project."""

import json
import tempfile
import unittest
from pathlib import Path

from perf_scanner import Category, PerformanceScanner

KB = 1024


def _project(root: Path) -> None:
    """A project that trips every scanner: heavy dependency, large PNG, console call."""
    manifest = {"name": "app", "dependencies": {"moment": "^2.29.0", "react": "^18.0.0"}}
    (root / "package.json").write_text(json.dumps(manifest), encoding="utf-8")

    (root / "img").mkdir()
    with open(root / "img" / "hero.png", "wb") as f:
        f.truncate(150 * KB)

    (root / "src").mkdir()
    (root / "src" / "index.js").write_text("console.log('boot');\n", encoding="utf-8")


class TestScannerOrder(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        _project(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_dependency_then_asset_then_code(self) -> None:
        result = PerformanceScanner().run(self.root)
        categories = [i.category for i in result.issues]

        self.assertEqual(
            [c for n, c in enumerate(categories) if n == 0 or c != categories[n - 1]],
            [Category.DEPENDENCY, Category.ASSET, Category.CODE],
        )
        self.assertEqual(categories.count(Category.DEPENDENCY), 1)
        self.assertEqual(categories.count(Category.CODE), 1)
        self.assertEqual(result.issues[0].title, "Heavy dependency: moment")
        self.assertEqual(result.issues[-1].file, "src/index.js")

    def test_steps_reported_in_order(self) -> None:
        steps = []
        PerformanceScanner().run(self.root, on_step=steps.append)
        self.assertEqual(
            steps,
            ["Analyzing dependencies...", "Scanning assets...", "Analyzing code patterns..."],
        )

    def test_result_is_scored(self) -> None:
        result = PerformanceScanner().run(self.root)
        s = result.summary
        self.assertEqual(s.critical + s.warning + s.info, len(result.issues))
        self.assertEqual(result.score, 100 - 15 * s.critical - 5 * s.warning - s.info)

    def test_repeated_runs_are_identical(self) -> None:
        scanner = PerformanceScanner()
        self.assertEqual(scanner.run(self.root), scanner.run(self.root))


if __name__ == "__main__":
    unittest.main()
