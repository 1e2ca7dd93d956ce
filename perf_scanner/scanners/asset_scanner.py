"""
Image and font asset checks.
"""

from pathlib import Path

from ..constants import (
    FONT_EXTENSIONS,
    IGNORE_DIRS,
    IMAGE_EXTENSIONS,
    RESOLUTION_MARKERS,
    TOTAL_SIZE_EXTENSIONS,
    UNOPTIMIZED_FONT_EXTENSIONS,
    WEBP_CONVERTIBLE_EXTENSIONS,
)
from ..issue import Category, Severity
from ..scanner_base import BaseScanner
from ..utils import format_size, iter_files


class AssetScanner(BaseScanner):
    """Size and format heuristics for images and fonts."""

    category = Category.ASSET

    def _run_checks(self):
        """Run asset checks."""
        self._scan_images()
        self._scan_fonts()
        self._check_total_assets_size()

    def _scan_images(self):
        for ext in IMAGE_EXTENSIONS:
            for path in iter_files(self.project_root, (ext,), IGNORE_DIRS):
                try:
                    size = path.stat().st_size
                    file = self._relative(path)
                    self._check_image_size(file, size)
                    self._check_webp_alternative(file, path, size)
                    self._check_resolution_variants(file, path, size)
                except OSError as e:
                    self._skip(path, e)

    def _check_image_size(self, file: str, size: int):
        if size > self.config.image_size_critical:
            self._add_issue(
                Severity.CRITICAL,
                "Very large image",
                f"Image is {format_size(size)} - this will significantly impact load time",
                file=file,
                suggestion="Compress to under 200KB, consider WebP format",
                impact=f"Could save ~{format_size(size - self.config.image_size_warning)}",
            )
        elif size > self.config.image_size_warning:
            self._add_issue(
                Severity.WARNING,
                "Large image",
                f"Image is {format_size(size)}",
                file=file,
                suggestion="Consider compressing or using WebP format",
            )

    def _check_webp_alternative(self, file: str, path: Path, size: int):
        ext = path.suffix.lower()
        if ext not in WEBP_CONVERTIBLE_EXTENSIONS:
            return
        if size <= self.config.webp_suggestion_threshold:
            return
        if path.with_suffix('.webp').exists():
            return
        self._add_issue(
            Severity.INFO,
            "Consider WebP format",
            f"{ext.upper()} format used - WebP could be 25-35% smaller",
            file=file,
            suggestion="Convert to WebP for better compression",
        )

    def _check_resolution_variants(self, file: str, path: Path, size: int):
        stem = path.stem
        if any(marker in stem for marker in RESOLUTION_MARKERS):
            return
        if size <= self.config.resolution_variant_threshold:
            return
        for marker in RESOLUTION_MARKERS:
            if path.with_name(f"{stem}{marker}{path.suffix}").exists():
                return
        self._add_issue(
            Severity.INFO,
            "Missing resolution variants",
            "No @2x or @3x variants found",
            file=file,
            suggestion="Add resolution-specific variants for better quality on high-DPI screens",
        )

    def _scan_fonts(self):
        for ext in FONT_EXTENSIONS:
            for path in iter_files(self.project_root, (ext,), IGNORE_DIRS):
                try:
                    size = path.stat().st_size
                except OSError as e:
                    self._skip(path, e)
                    continue
                file = self._relative(path)
                self._check_font_size(file, size)
                self._check_font_format(file, path)

    def _check_font_size(self, file: str, size: int):
        if size > self.config.font_size_warning:
            self._add_issue(
                Severity.WARNING,
                "Large font file",
                f"Font is {format_size(size)}",
                file=file,
                suggestion="Consider subsetting font to include only needed characters",
            )

    def _check_font_format(self, file: str, path: Path):
        ext = path.suffix.lower()
        if ext in UNOPTIMIZED_FONT_EXTENSIONS:
            self._add_issue(
                Severity.INFO,
                "Unoptimized font format",
                f"{ext.upper()} format used",
                file=file,
                suggestion="WOFF2 format is ~30% smaller and widely supported",
            )

    def _check_total_assets_size(self):
        """Project-wide check; the issue carries no file."""
        total_size = 0
        for path in iter_files(self.project_root, TOTAL_SIZE_EXTENSIONS, IGNORE_DIRS):
            try:
                total_size += path.stat().st_size
            except OSError as e:
                self._skip(path, e)

        if total_size > self.config.total_assets_warning:
            self._add_issue(
                Severity.WARNING,
                "High total assets size",
                f"Total assets size is {format_size(total_size)}",
                suggestion="Consider lazy loading images or using a CDN",
                impact="Large assets increase initial load time",
            )
