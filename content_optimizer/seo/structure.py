from ..text_utils import split_paragraphs, split_words
from .results import CheckResult


def check_content_length(text: str, content_min_words: int = 300, content_target_words: int = 600) -> CheckResult:
    word_count = len(split_words(text))
    details = {"wordsCount": word_count}
    if word_count < content_min_words:
        return CheckResult(0.3, (f"Content is too short. Aim for at least {content_min_words} words for better SEO.",), details)
    if word_count < content_target_words:
        return CheckResult(0.7, ("Consider adding more content. Long-form content (1000+ words) typically ranks better.",), details)
    return CheckResult(1.0, (), details)


def check_paragraph_length(text: str, paragraph_max_words: int = 150) -> CheckResult:
    para_lengths = [len(split_words(p)) for p in split_paragraphs(text)]
    long_paragraphs = sum(1 for length in para_lengths if length > paragraph_max_words)
    details = {
        "paragraphCount": sum(1 for length in para_lengths if length),
        "longParagraphCount": long_paragraphs,
    }
    if long_paragraphs:
        return CheckResult(0.7, ("Some paragraphs are too long. Break them into smaller chunks for better readability.",), details)
    return CheckResult(1.0, (), details)
