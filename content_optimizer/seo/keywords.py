from collections import Counter
from ..text_utils import split_words
from .results import CheckResult


def check_keyword_density(text: str, min_word_length: int = 4, top_n_keywords: int = 5) -> CheckResult:
    words = split_words(text.lower())
    word_counts = Counter(word for word in words if len(word) >= min_word_length)
    # most_common keeps first-encounter order among equal counts
    keywords = [(kw, count) for kw, count in word_counts.most_common() if count > 1][:top_n_keywords]

    details = {"keywords": [{"keyword": kw, "count": count} for kw, count in keywords]}
    if not keywords:
        return CheckResult(0.3, ("No clear keywords found. Consider using relevant keywords multiple times.",), details)
    if len(keywords) < 3:
        return CheckResult(0.6, ("Limited keyword usage. Try incorporating more relevant keywords.",), details)
    return CheckResult(1.0, (), details)
