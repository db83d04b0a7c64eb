"""Content optimizer.

SEO and readability analysis for markdown-like editor content. Both
analyzers are pure functions of the input text.
"""

from .seo import SEOAnalyzer, SEOReport, CheckResult, analyze_seo
from .readability import ReadabilityAnalyzer, ReadabilityReport, analyze_readability, count_syllables
from .report import build_report
from .paste import html_to_markdown
from .config import DEFAULT_CONFIG, load_config
