"""
Thresholds, patterns and reference data used by the scanners.

Every value is a named module constant. ``ScanConfig`` bundles them into one
immutable value that each scanner receives at construction; override a field
with ``dataclasses.replace(DEFAULT_CONFIG, ...)``.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Pattern, Tuple

from .issue import HeavyDependency

KB = 1024
MB = 1024 * 1024

# Size thresholds (bytes)
IMAGE_SIZE_WARNING = 100 * KB
IMAGE_SIZE_CRITICAL = 500 * KB
FONT_SIZE_WARNING = 200 * KB
TOTAL_ASSETS_WARNING = 10 * MB
WEBP_SUGGESTION_THRESHOLD = 50 * KB
RESOLUTION_VARIANT_THRESHOLD = 20 * KB

# Code thresholds
LARGE_FILE_LINES = 300
CONSOLE_WARNING_THRESHOLD = 3
CONSOLE_LINES_SHOWN = 5
INLINE_FUNCTION_THRESHOLD = 2
INLINE_STYLE_THRESHOLD = 3
HEAVY_RENDER_MAP_THRESHOLD = 2
MEMO_LINE_THRESHOLD = 50
HIGH_DEPENDENCY_COUNT = 50
LODASH_SAMPLE_SIZE = 50
SCROLLVIEW_CHILD_THRESHOLD = 10

# Scoring
SCORE_MAX = 100
SCORE_CRITICAL_PENALTY = 15
SCORE_WARNING_PENALTY = 5
SCORE_INFO_PENALTY = 1
SCORE_BASE_CHECKS = 10

# File extensions (matched case-sensitively, like the shell globs they replace)
IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.gif', '.bmp', '.webp', '.svg')
FONT_EXTENSIONS = ('.ttf', '.otf', '.woff', '.woff2')
CODE_EXTENSIONS = ('.js', '.jsx', '.ts', '.tsx')
COMPONENT_EXTENSIONS = ('.jsx', '.tsx')
WEBP_CONVERTIBLE_EXTENSIONS = ('.png', '.jpg', '.jpeg')
UNOPTIMIZED_FONT_EXTENSIONS = ('.ttf', '.otf')
# bmp is not counted towards the total
TOTAL_SIZE_EXTENSIONS = (
    '.png', '.jpg', '.jpeg', '.gif', '.webp', '.svg',
    '.ttf', '.otf', '.woff', '.woff2',
)

# Walk exclusions
IGNORE_DIRS = frozenset({'node_modules', 'dist', 'build', '.git'})
CODE_IGNORE_DIRS = IGNORE_DIRS | {'coverage', '__tests__'}
CODE_IGNORE_NAME_MARKERS = ('.test.', '.spec.')
SYNC_FS_ALLOWED_MARKERS = ('cli', 'script', 'config')
URL_IGNORE_MARKERS = ('example.com', 'placeholder')

MANIFEST_NAME = 'package.json'
SOURCE_DIR_NAME = 'src'

# Regex patterns
CONSOLE_LOG_PATTERN = re.compile(r'console\.(log|warn|error|info|debug)\s*\(')
INLINE_FUNCTION_PATTERN = re.compile(
    r'(?:on[A-Z]\w*|render\w*)\s*=\s*\{?\s*\(\s*\)\s*=>'
)
INLINE_STYLE_PATTERN = re.compile(r'style\s*=\s*\{\s*\{')
USE_EFFECT_NO_DEPS = re.compile(r'useEffect\s*\(\s*\(\s*\)\s*=>\s*\{[^}]*\}\s*\)')
HARDCODED_URL_PATTERN = re.compile(r'[\'"`](https?://(?!localhost)[^\'"`\s]+)[\'"`]')
LARGE_OBJECT_PATTERN = re.compile(r'\{[^{}]{500,}\}')
MAP_CALL_PATTERN = re.compile(r'map\s*\(')
VIEW_ELEMENT_PATTERN = re.compile(r'<View')
RESOLUTION_MARKERS = ('@2x', '@3x')

LODASH_FULL_IMPORTS = (
    'from "lodash"',
    "from 'lodash'",
    'require("lodash")',
    "require('lodash')",
)
SYNC_FS_CALLS = ('fs.readFileSync', 'fs.writeFileSync', 'fs.existsSync')
EXPORTED_COMPONENT_MARKERS = ('export default function', 'export const')
MEMO_MARKERS = ('React.memo', 'memo(')
VIRTUALIZED_LIST_MARKER = 'FlatList'
REACT_NATIVE_MARKERS = ('react-native', 'React Native')

HEAVY_DEPS: Tuple[HeavyDependency, ...] = (
    HeavyDependency('moment', '328KB', 'date-fns (tree-shakeable) or dayjs (2KB)'),
    HeavyDependency('lodash', '72KB', 'lodash-es or individual imports (lodash/debounce)'),
    HeavyDependency('axios', '14KB', 'native fetch (RN 0.72+) or ky'),
    HeavyDependency('underscore', '16KB', 'lodash-es or native methods'),
    HeavyDependency('jquery', '87KB', 'native DOM APIs'),
    HeavyDependency('bluebird', '80KB', 'native Promise'),
    HeavyDependency('request', '48KB', 'native fetch or node-fetch'),
    HeavyDependency('uuid', '12KB', 'crypto.randomUUID() (native)'),
    HeavyDependency('node-fetch', '8KB', 'native fetch (Node 18+)'),
    HeavyDependency('core-js', '200KB+', 'Check if you really need all polyfills'),
    HeavyDependency('ramda', '46KB', 'lodash-es or native methods'),
    HeavyDependency('rxjs', '50KB', 'Consider if you need full RxJS'),
    HeavyDependency('immutable', '64KB', 'Immer (16KB) or native spread'),
)

CRITICAL_DEPS = frozenset({'moment', 'lodash'})

# (first, second, kind, suggestion)
DUPLICATE_LIBRARIES: Tuple[Tuple[str, str, str, str], ...] = (
    ('axios', 'node-fetch', 'HTTP', 'Use one HTTP library consistently'),
    ('moment', 'date-fns', 'date', 'Migrate fully to date-fns and remove moment'),
)


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scanner configuration with the documented defaults."""

    image_size_warning: int = IMAGE_SIZE_WARNING
    image_size_critical: int = IMAGE_SIZE_CRITICAL
    font_size_warning: int = FONT_SIZE_WARNING
    total_assets_warning: int = TOTAL_ASSETS_WARNING
    webp_suggestion_threshold: int = WEBP_SUGGESTION_THRESHOLD
    resolution_variant_threshold: int = RESOLUTION_VARIANT_THRESHOLD

    large_file_lines: int = LARGE_FILE_LINES
    console_warning_threshold: int = CONSOLE_WARNING_THRESHOLD
    inline_function_threshold: int = INLINE_FUNCTION_THRESHOLD
    inline_style_threshold: int = INLINE_STYLE_THRESHOLD
    heavy_render_map_threshold: int = HEAVY_RENDER_MAP_THRESHOLD
    memo_line_threshold: int = MEMO_LINE_THRESHOLD
    high_dependency_count: int = HIGH_DEPENDENCY_COUNT
    lodash_sample_size: int = LODASH_SAMPLE_SIZE
    scrollview_child_threshold: int = SCROLLVIEW_CHILD_THRESHOLD

    score_critical_penalty: int = SCORE_CRITICAL_PENALTY
    score_warning_penalty: int = SCORE_WARNING_PENALTY
    score_info_penalty: int = SCORE_INFO_PENALTY
    score_base_checks: int = SCORE_BASE_CHECKS

    heavy_deps: Tuple[HeavyDependency, ...] = HEAVY_DEPS
    critical_deps: FrozenSet[str] = CRITICAL_DEPS

    console_pattern: Pattern = CONSOLE_LOG_PATTERN
    inline_function_pattern: Pattern = INLINE_FUNCTION_PATTERN
    inline_style_pattern: Pattern = INLINE_STYLE_PATTERN
    use_effect_no_deps_pattern: Pattern = USE_EFFECT_NO_DEPS
    hardcoded_url_pattern: Pattern = HARDCODED_URL_PATTERN
    large_object_pattern: Pattern = LARGE_OBJECT_PATTERN
    map_call_pattern: Pattern = MAP_CALL_PATTERN


DEFAULT_CONFIG = ScanConfig()
