"""Lexicon — the fixed English word and phrase tables the heuristics match against.

The defaults are module-level constants built once at import. A Lexicon
instance bundles them so callers can swap individual tables (for example from
YAML config) without touching the heuristics.
"""

from pydantic import BaseModel, ConfigDict

TRANSITION_MARKERS: tuple[str, ...] = (
    "however",
    "therefore",
    "furthermore",
    "moreover",
    "additionally",
    "consequently",
    "nevertheless",
    "meanwhile",
    "similarly",
    "conversely",
    "first",
    "second",
    "finally",
    "in conclusion",
    "for example",
    "such as",
)

POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "good",
        "great",
        "excellent",
        "wonderful",
        "amazing",
        "fantastic",
        "beautiful",
        "happy",
        "love",
        "best",
        "brilliant",
        "positive",
        "helpful",
        "effective",
        "success",
    }
)

NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "bad",
        "terrible",
        "awful",
        "poor",
        "horrible",
        "worst",
        "sad",
        "hate",
        "wrong",
        "negative",
        "difficult",
        "problem",
        "fail",
        "ugly",
        "disappointing",
    }
)

STOPWORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "is", "are", "was", "were", "be", "been", "being",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "can", "this", "that", "these", "those",
    }
)

VAGUE_WORDS: frozenset[str] = frozenset(
    {
        "some", "many", "few", "several", "various", "different", "numerous",
        "thing", "stuff", "something", "anything", "everything",
        "good", "bad", "nice", "great", "big", "small", "large",
        "very", "quite", "rather", "somewhat", "pretty", "fairly",
    }
)

EXAMPLE_PHRASES: tuple[str, ...] = (
    "for example",
    "such as",
    "including",
    "namely",
    "e.g.",
)


class Lexicon(BaseModel):
    """Immutable bundle of the word and phrase tables used by the heuristics."""

    model_config = ConfigDict(frozen=True)

    transition_markers: tuple[str, ...] = TRANSITION_MARKERS
    positive_words: frozenset[str] = POSITIVE_WORDS
    negative_words: frozenset[str] = NEGATIVE_WORDS
    stopwords: frozenset[str] = STOPWORDS
    vague_words: frozenset[str] = VAGUE_WORDS
    example_phrases: tuple[str, ...] = EXAMPLE_PHRASES


DEFAULT_LEXICON = Lexicon()
