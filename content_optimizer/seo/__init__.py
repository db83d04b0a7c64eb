"""SEO analysis package.

Provides `SEOAnalyzer`, which runs eight focused checks implemented in
sibling modules in a fixed order and aggregates them into an `SEOReport`.
"""

from .analyzer import SEOAnalyzer, analyze_seo, CHECK_ORDER
from .results import CheckResult, SEOReport
