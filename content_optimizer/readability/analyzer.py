from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..base_module import AnalysisModule
from ..text_utils import split_sentences, split_words, round_half_up, clamp
from .syllables import count_syllables

HARD = "hard"
VERY_HARD = "very_hard"


@dataclass(frozen=True)
class SentenceRange:
    """Character span of a flagged sentence within the analyzed text."""
    start: int
    end: int
    kind: str

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end, "type": self.kind}


@dataclass(frozen=True)
class ReadabilityReport:
    ease_score: int
    grade: int
    hard_sentences: List[str] = field(default_factory=list)
    very_hard_sentences: List[str] = field(default_factory=list)
    sentence_ranges: List[SentenceRange] = field(default_factory=list)
    sentence_count: int = 0
    word_count: int = 0
    syllable_count: int = 0
    avg_sentence_length: float = 0.0
    avg_syllables_per_word: float = 0.0

    def to_dict(self) -> dict:
        return {
            "easeScore": self.ease_score,
            "grade": self.grade,
            "hardSentences": list(self.hard_sentences),
            "veryHardSentences": list(self.very_hard_sentences),
            "sentenceRanges": [r.to_dict() for r in self.sentence_ranges],
            "sentenceCount": self.sentence_count,
            "wordCount": self.word_count,
            "syllableCount": self.syllable_count,
            "avgSentenceLength": self.avg_sentence_length,
            "avgSyllablesPerWord": self.avg_syllables_per_word,
        }


def flesch_reading_ease(asl: float, asw: float) -> int:
    score = 206.835 - 1.015 * asl - 84.6 * asw
    return round_half_up(clamp(score, 0, 100))


def flesch_kincaid_grade(asl: float, asw: float, min_grade: int = 1, max_grade: int = 12) -> int:
    grade = round_half_up(0.39 * asl + 11.8 * asw - 15.59)
    return clamp(grade, min_grade, max_grade)


def locate_sentences(text: str, sentences: list) -> list:
    """Returns (start, end) offsets for each sentence, searching forward in order."""
    spans = []
    cursor = 0
    for sentence in sentences:
        start = text.find(sentence, cursor)
        if start == -1:
            start = cursor
        end = start + len(sentence)
        spans.append((start, end))
        cursor = end
    return spans


class ReadabilityAnalyzer(AnalysisModule):
    """Computes ease score, grade level and per-sentence difficulty."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.very_hard_words = self.setting("very_hard_sentence_words", 30)
        self.very_hard_syllables = self.setting("very_hard_syllables_per_word", 2.5)
        self.hard_words = self.setting("hard_sentence_words", 20)
        self.hard_syllables = self.setting("hard_syllables_per_word", 2.0)
        self.min_grade = self.setting("min_grade", 1)
        self.max_grade = self.setting("max_grade", 12)

    def classify_sentence(self, sentence: str) -> str | None:
        """Returns VERY_HARD, HARD or None for a normal sentence."""
        words = split_words(sentence)
        if not words:
            return None
        word_count = len(words)
        avg_syllables = sum(count_syllables(w) for w in words) / word_count
        if word_count > self.very_hard_words or avg_syllables > self.very_hard_syllables:
            return VERY_HARD
        if word_count > self.hard_words or avg_syllables > self.hard_syllables:
            return HARD
        return None

    def analyze(self, text: str) -> ReadabilityReport:
        text = self.ensure_text(text)
        sentences = split_sentences(text)
        words = split_words(text)
        if not sentences or not words:
            self.log("no sentences or words found, treating text as maximally easy")
            return ReadabilityReport(ease_score=100, grade=self.min_grade, sentence_count=len(sentences), word_count=len(words))

        hard_sentences = []
        very_hard_sentences = []
        ranges = []
        for sentence, (start, end) in zip(sentences, locate_sentences(text, sentences)):
            kind = self.classify_sentence(sentence)
            if kind == VERY_HARD:
                very_hard_sentences.append(sentence)
            elif kind == HARD:
                hard_sentences.append(sentence)
            else:
                continue
            ranges.append(SentenceRange(start, end, kind))

        num_syllables = sum(count_syllables(w) for w in words)
        asl = len(words) / len(sentences)
        asw = num_syllables / len(words)
        self.log(f"sentences={len(sentences)} words={len(words)} syllables={num_syllables}")

        return ReadabilityReport(
            ease_score=flesch_reading_ease(asl, asw),
            grade=flesch_kincaid_grade(asl, asw, self.min_grade, self.max_grade),
            hard_sentences=hard_sentences,
            very_hard_sentences=very_hard_sentences,
            sentence_ranges=ranges,
            sentence_count=len(sentences),
            word_count=len(words),
            syllable_count=num_syllables,
            avg_sentence_length=round(asl, 2),
            avg_syllables_per_word=round(asw, 2),
        )


def analyze_readability(text: str, config=None) -> ReadabilityReport:
    """Scores text with the default (or given) ReadabilityAnalyzer settings."""
    return ReadabilityAnalyzer(config=config).analyze(text)
