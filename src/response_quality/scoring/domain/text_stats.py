"""Tokenisation and the descriptive statistics shared by every sub-score.

Word matching is ASCII-only (``\\b\\w+\\b`` with ``re.ASCII``): accented or
non-Latin letters act as word separators.
"""

import re
from dataclasses import dataclass

from response_quality.scoring.domain.lexicon import Lexicon
from response_quality.scoring.domain.weighting import clamp

_SENTENCE_SPLIT = re.compile(r"([.!?]+)")
_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
_WORD = re.compile(r"\b\w+\b", re.ASCII)

# Normalisers for complexity_score.
_WORD_LENGTH_NORM = 8.0
_SENTENCE_LENGTH_NORM = 25.0


def tokenize(text: str) -> list[str]:
    """Return the lowercased word tokens of text."""
    return _WORD.findall(text.lower())


def split_paragraphs(text: str) -> list[str]:
    """Split on blank-line boundaries, dropping whitespace-only fragments."""
    return [p for p in _PARAGRAPH_SPLIT.split(text) if p.strip()]


def split_sentences_with_terminators(text: str) -> list[tuple[str, str]]:
    """Split on runs of ``.!?`` and pair every sentence with the run that ended it.

    The final sentence's terminator is "" when the text does not end in
    punctuation. Whitespace-only fragments are dropped.
    """
    parts = _SENTENCE_SPLIT.split(text)
    pairs: list[tuple[str, str]] = []
    for i in range(0, len(parts), 2):
        sentence = parts[i]
        terminator = parts[i + 1] if i + 1 < len(parts) else ""
        if sentence.strip():
            pairs.append((sentence, terminator))
    return pairs


def split_sentences(text: str) -> list[str]:
    """Split on runs of ``.!?``, dropping whitespace-only fragments."""
    return [sentence for sentence, _ in split_sentences_with_terminators(text)]


@dataclass(frozen=True)
class TextStatistics:
    """Everything derived from a single pass over the response text."""

    text: str
    sentences: tuple[str, ...]
    terminators: tuple[str, ...]
    paragraphs: tuple[str, ...]
    words: tuple[str, ...]
    sentence_lengths: tuple[int, ...]

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def paragraph_count(self) -> int:
        return len(self.paragraphs)

    @property
    def avg_sentence_length(self) -> float:
        if not self.sentences:
            return 0.0
        return self.word_count / self.sentence_count

    @property
    def lexical_diversity(self) -> float:
        if not self.words:
            return 0.0
        return len(set(self.words)) / self.word_count

    @property
    def mean_word_length(self) -> float:
        if not self.words:
            return 0.0
        return sum(len(w) for w in self.words) / self.word_count


def compute_text_statistics(text: str) -> TextStatistics:
    pairs = split_sentences_with_terminators(text)
    sentences = tuple(sentence for sentence, _ in pairs)
    return TextStatistics(
        text=text,
        sentences=sentences,
        terminators=tuple(terminator for _, terminator in pairs),
        paragraphs=tuple(split_paragraphs(text)),
        words=tuple(tokenize(text)),
        sentence_lengths=tuple(len(tokenize(s)) for s in sentences),
    )


def sentiment_polarity(words: tuple[str, ...], lexicon: Lexicon) -> float:
    """Return (positive - negative) / (positive + negative) in [-1, 1], or 0.0."""
    positive = sum(1 for w in words if w in lexicon.positive_words)
    negative = sum(1 for w in words if w in lexicon.negative_words)
    if positive + negative == 0:
        return 0.0
    return clamp((positive - negative) / (positive + negative), -1.0, 1.0)


def complexity_score(stats: TextStatistics) -> float:
    """Mean of normalised mean word length and normalised mean sentence length."""
    word_part = min(stats.mean_word_length / _WORD_LENGTH_NORM, 1.0)
    sentence_part = min(stats.avg_sentence_length / _SENTENCE_LENGTH_NORM, 1.0)
    return clamp((word_part + sentence_part) / 2)
