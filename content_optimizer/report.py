from datetime import datetime

from .config import DEFAULT_CONFIG, module_config
from .seo import SEOAnalyzer
from .readability import ReadabilityAnalyzer


def score_band(score: int) -> str:
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"


def grade_band(grade: int) -> str:
    if grade <= 6:
        return "good"
    if grade <= 9:
        return "fair"
    return "poor"


def readability_verdict(ease_score: int) -> str:
    if ease_score >= 80:
        return "Good."
    if ease_score >= 60:
        return "Fair."
    return "Needs improvement."


def sentence_count_message(count: int, difficulty: str) -> str | None:
    """'1 sentence is hard to read.' / '3 sentences are very hard to read.'; None for zero."""
    if count <= 0:
        return None
    if count == 1:
        return f"1 sentence is {difficulty} to read."
    return f"{count} sentences are {difficulty} to read."


def summarize(seo_report, readability_report) -> dict:
    messages = [
        sentence_count_message(len(readability_report.very_hard_sentences), "very hard"),
        sentence_count_message(len(readability_report.hard_sentences), "hard"),
    ]
    return {
        "seoScore": seo_report.overall_score,
        "seoScoreBand": score_band(seo_report.overall_score),
        "readabilityScore": readability_report.ease_score,
        "readabilityVerdict": readability_verdict(readability_report.ease_score),
        "grade": readability_report.grade,
        "gradeBand": grade_band(readability_report.grade),
        "sentenceMessages": [m for m in messages if m],
        "suggestionsCount": len(seo_report.suggestions),
    }


def build_report(text: str, config: dict = None) -> dict:
    """
    Runs both analyzers over the same text and combines their output.

    Args:
        text (str): Editor content (markdown-like).
        config (dict): Full application config; defaults when omitted.

    Returns:
        dict: JSON-ready report with one section per analyzer plus a summary.
    """
    config = config if config else DEFAULT_CONFIG
    seo_module = SEOAnalyzer(config=module_config(config, "SEOAnalyzer"))
    readability_module = ReadabilityAnalyzer(config=module_config(config, "ReadabilityAnalyzer"))

    seo_report = seo_module.analyze(text)
    readability_report = readability_module.analyze(text)
    return {
        "analysisTimestamp": datetime.now().isoformat(),
        seo_module.get_module_name(): seo_report.to_dict(),
        readability_module.get_module_name(): readability_report.to_dict(),
        "summary": summarize(seo_report, readability_report),
    }
