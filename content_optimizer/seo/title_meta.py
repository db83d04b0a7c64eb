import re
from ..text_utils import split_paragraphs
from .results import CheckResult

# H1 means exactly "# ": other whitespace after the hash does not make a title
H1_LINE_RE = re.compile(r'^# [ \t]*(\S.*)$', re.MULTILINE)
LEADING_HEADING_RE = re.compile(r'^#.*(?:\n|$)')


def check_title_length(text: str, title_min_len: int = 30, title_max_len: int = 60) -> CheckResult:
    title_match = H1_LINE_RE.search(text)
    if not title_match:
        return CheckResult(0.0, ("No main title (H1) found. Add a clear title at the beginning.",), {"title": None, "titleLength": 0})

    title_text = title_match.group(1).rstrip()
    title_length = len(title_text)
    details = {"title": title_text, "titleLength": title_length}
    if title_length < title_min_len:
        return CheckResult(0.5, ("Title is too short. Aim for 50-60 characters for better SEO.",), details)
    if title_length > title_max_len:
        return CheckResult(0.7, (f"Title is too long. Keep it under {title_max_len} characters for better visibility in search results.",), details)
    return CheckResult(1.0, (), details)


def extract_intro(text: str) -> str:
    """First paragraph with any leading heading line removed."""
    first_paragraph = split_paragraphs(text)[0]
    return LEADING_HEADING_RE.sub('', first_paragraph, count=1).strip()


def check_meta_description(text: str, desc_min_len: int = 120, desc_max_len: int = 160) -> CheckResult:
    intro = extract_intro(text)
    intro_length = len(intro)
    details = {"introLength": intro_length}
    if not intro:
        return CheckResult(0.0, ("Add a clear introductory paragraph that summarizes your content.",), details)
    if intro_length < desc_min_len:
        return CheckResult(0.5, ("Introduction is too short. Aim for 150-160 characters for better search visibility.",), details)
    if intro_length > desc_max_len:
        return CheckResult(0.7, (f"Introduction is too long. Keep it under {desc_max_len} characters for optimal display in search results.",), details)
    return CheckResult(1.0, (), details)
