from ..base_module import AnalysisModule
from ..text_utils import round_half_up
from .results import CheckResult, SEOReport
from .keywords import check_keyword_density
from .title_meta import check_title_length, check_meta_description
from .headings_links_images import check_headings, check_links, check_image_alt
from .structure import check_content_length, check_paragraph_length

# Suggestion order in the report follows this tuple
CHECK_ORDER = (
    "keyword_density",
    "title_length",
    "meta_description",
    "headings",
    "links",
    "image_alt_text",
    "content_length",
    "paragraph_length",
)


class SEOAnalyzer(AnalysisModule):
    """Scores structural and content properties of markdown-like text."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.keyword_min_length = self.setting("keyword_min_length", 4)
        self.top_n_keywords = self.setting("top_n_keywords_count", 5)
        self.title_min_len = self.setting("title_min_length", 30)
        self.title_max_len = self.setting("title_max_length", 60)
        self.desc_min_len = self.setting("desc_min_length", 120)
        self.desc_max_len = self.setting("desc_max_length", 160)
        self.subheading_penalty = self.setting("subheading_penalty", 0.7)
        self.content_min_words = self.setting("content_min_words", 300)
        self.content_target_words = self.setting("content_target_words", 600)
        self.paragraph_max_words = self.setting("paragraph_max_words", 150)

    def _checks(self):
        return {
            "keyword_density": lambda t: check_keyword_density(t, self.keyword_min_length, self.top_n_keywords),
            "title_length": lambda t: check_title_length(t, self.title_min_len, self.title_max_len),
            "meta_description": lambda t: check_meta_description(t, self.desc_min_len, self.desc_max_len),
            "headings": lambda t: check_headings(t, self.subheading_penalty),
            "links": check_links,
            "image_alt_text": check_image_alt,
            "content_length": lambda t: check_content_length(t, self.content_min_words, self.content_target_words),
            "paragraph_length": lambda t: check_paragraph_length(t, self.paragraph_max_words),
        }

    def run_checks(self, text: str) -> dict:
        """Runs every check in CHECK_ORDER and returns name -> CheckResult."""
        text = self.ensure_text(text)
        checks = self._checks()
        results = {}
        for name in CHECK_ORDER:
            results[name] = checks[name](text)
            self.log(f"{name}: score={results[name].score}")
        return results

    def analyze(self, text: str) -> SEOReport:
        results = self.run_checks(text)
        scores = [result.score for result in results.values()]
        overall_score = round_half_up(sum(scores) / len(scores) * 100)
        suggestions = [s for result in results.values() for s in result.suggestions]
        return SEOReport(overall_score=overall_score, suggestions=suggestions, checks=results)


def analyze_seo(text: str, config=None) -> SEOReport:
    """Scores text with the default (or given) SEOAnalyzer settings."""
    return SEOAnalyzer(config=config).analyze(text)
