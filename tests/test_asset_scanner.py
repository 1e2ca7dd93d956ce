"""Unit tests for perf_scanner.scanners.asset_scanner and size formatting."""

import tempfile
import unittest
from pathlib import Path

from perf_scanner import AssetScanner, Severity
from perf_scanner.constants import RESOLUTION_MARKERS
from perf_scanner.utils import format_size

KB = 1024
MB = 1024 * 1024


def _asset(root: Path, rel: str, size: int) -> Path:
    """Create a (sparse) file of exactly `size` bytes."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


class AssetScannerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def scan(self) -> list:
        return AssetScanner().scan(self.root)

    def titled(self, title: str) -> list:
        return [i for i in self.scan() if i.title == title]


class TestImageSize(AssetScannerTestCase):
    """Strict greater-than thresholds at 100KB and 500KB."""

    def test_exactly_100kb_has_no_size_issue(self) -> None:
        _asset(self.root, "img/logo.gif", 100 * KB)
        self.assertEqual(self.titled("Large image"), [])
        self.assertEqual(self.titled("Very large image"), [])

    def test_one_byte_over_100kb_warns(self) -> None:
        _asset(self.root, "img/logo.gif", 100 * KB + 1)
        issues = self.titled("Large image")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].severity, Severity.WARNING)
        self.assertEqual(issues[0].file, "img/logo.gif")
        self.assertIn("100.0KB", issues[0].message)

    def test_exactly_500kb_is_a_warning(self) -> None:
        _asset(self.root, "hero.gif", 500 * KB)
        self.assertEqual(len(self.titled("Large image")), 1)
        self.assertEqual(self.titled("Very large image"), [])

    def test_one_byte_over_500kb_is_critical(self) -> None:
        _asset(self.root, "hero.gif", 500 * KB + 1)
        issues = self.titled("Very large image")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].severity, Severity.CRITICAL)
        self.assertEqual(self.titled("Large image"), [])


class TestWebPAlternative(AssetScannerTestCase):
    def test_png_without_webp_sibling(self) -> None:
        _asset(self.root, "img/photo.png", 60 * KB)
        issues = self.titled("Consider WebP format")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].severity, Severity.INFO)
        self.assertIn(".PNG", issues[0].message)

    def test_png_with_webp_sibling(self) -> None:
        _asset(self.root, "img/photo.png", 60 * KB)
        _asset(self.root, "img/photo.webp", 10 * KB)
        self.assertEqual(self.titled("Consider WebP format"), [])

    def test_small_png_not_flagged(self) -> None:
        _asset(self.root, "img/icon.png", 50 * KB)
        self.assertEqual(self.titled("Consider WebP format"), [])

    def test_gif_not_convertible(self) -> None:
        _asset(self.root, "img/anim.gif", 60 * KB)
        self.assertEqual(self.titled("Consider WebP format"), [])


class TestResolutionVariants(AssetScannerTestCase):
    def test_missing_variants(self) -> None:
        _asset(self.root, "img/banner.jpg", 21 * KB)
        issues = self.titled("Missing resolution variants")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].file, "img/banner.jpg")

    def test_2x_sibling_suppresses(self) -> None:
        _asset(self.root, "img/banner.jpg", 21 * KB)
        _asset(self.root, "img/banner@2x.jpg", 10 * KB)
        self.assertEqual(self.titled("Missing resolution variants"), [])

    def test_3x_sibling_suppresses(self) -> None:
        _asset(self.root, "img/banner.jpg", 21 * KB)
        _asset(self.root, "img/banner@3x.jpg", 10 * KB)
        self.assertEqual(self.titled("Missing resolution variants"), [])

    def test_every_configured_marker_suppresses(self) -> None:
        for marker in RESOLUTION_MARKERS:
            with self.subTest(marker=marker):
                _asset(self.root, "img/banner.jpg", 21 * KB)
                variant = _asset(self.root, f"img/banner{marker}.jpg", 10 * KB)
                self.assertEqual(self.titled("Missing resolution variants"), [])
                variant.unlink()

    def test_variant_files_are_not_checked(self) -> None:
        _asset(self.root, "img/banner@2x.jpg", 40 * KB)
        self.assertEqual(self.titled("Missing resolution variants"), [])

    def test_small_image_not_flagged(self) -> None:
        _asset(self.root, "img/dot.svg", 20 * KB)
        self.assertEqual(self.titled("Missing resolution variants"), [])

    def test_one_image_can_emit_three_issues(self) -> None:
        _asset(self.root, "photo.png", 200 * KB)
        titles = [i.title for i in self.scan()]
        self.assertEqual(
            titles,
            ["Large image", "Consider WebP format", "Missing resolution variants"],
        )


class TestFonts(AssetScannerTestCase):
    def test_ttf_flagged_for_format(self) -> None:
        _asset(self.root, "fonts/Inter.ttf", 10 * KB)
        issues = self.scan()
        self.assertEqual([i.title for i in issues], ["Unoptimized font format"])
        self.assertEqual(issues[0].severity, Severity.INFO)
        self.assertIn(".TTF", issues[0].message)

    def test_woff2_not_flagged_for_format(self) -> None:
        _asset(self.root, "fonts/Inter.woff2", 10 * KB)
        self.assertEqual(self.scan(), [])

    def test_large_font_warns(self) -> None:
        _asset(self.root, "fonts/Inter.woff", 200 * KB + 1)
        issues = self.titled("Large font file")
        self.assertEqual(len(issues), 1)
        self.assertEqual(issues[0].severity, Severity.WARNING)


class TestTotalSize(AssetScannerTestCase):
    def test_total_over_10mb_is_project_level(self) -> None:
        _asset(self.root, "fonts/a.woff2", 6 * MB)
        _asset(self.root, "fonts/b.woff2", 6 * MB)
        issues = self.titled("High total assets size")
        self.assertEqual(len(issues), 1)
        self.assertIsNone(issues[0].file)
        self.assertIn("12.0MB", issues[0].message)

    def test_bmp_not_counted_in_total(self) -> None:
        _asset(self.root, "raw/scan.bmp", 11 * MB)
        self.assertEqual(self.titled("High total assets size"), [])
        self.assertEqual(len(self.titled("Very large image")), 1)


class TestWalk(AssetScannerTestCase):
    def test_ignored_directories_skipped(self) -> None:
        for d in ("node_modules/pkg", "dist", "build", ".git", ".cache"):
            _asset(self.root, f"{d}/big.png", 600 * KB)
        self.assertEqual(self.scan(), [])


class TestFormatSize(unittest.TestCase):
    def test_units(self) -> None:
        self.assertEqual(format_size(0), "0B")
        self.assertEqual(format_size(1023), "1023B")
        self.assertEqual(format_size(1024), "1.0KB")
        self.assertEqual(format_size(1536), "1.5KB")
        self.assertEqual(format_size(MB - 1), "1024.0KB")
        self.assertEqual(format_size(MB), "1.0MB")
        self.assertEqual(format_size(int(2.5 * MB)), "2.5MB")


if __name__ == "__main__":
    unittest.main()
