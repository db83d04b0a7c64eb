"""Readability analysis package.

Provides `ReadabilityAnalyzer` (Flesch reading ease, Flesch-Kincaid grade
and hard / very-hard sentence detection) and the spelling-based
`count_syllables` estimator it relies on.
"""

from .analyzer import ReadabilityAnalyzer, ReadabilityReport, SentenceRange, analyze_readability
from .syllables import count_syllables
