"""The six sub-score heuristics.

Each function maps precomputed TextStatistics (and, where relevant, the
originating prompt) to a score in [0, 1]. Every division is guarded so that
texts with no sentences, words, or paragraphs fall back to fixed values.
"""

import math
import re

from response_quality.scoring.domain.lexicon import Lexicon
from response_quality.scoring.domain.text_stats import TextStatistics, tokenize
from response_quality.scoring.domain.weighting import clamp, weighted_average

NEUTRAL = 0.5

_COMPLEX_SUFFIX = re.compile(r"tion|sion|ment|ness|able|ible")
_PROMPT_LONG_WORD = re.compile(r"\b\w{8,}\b", re.ASCII)

_FIGURATIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bis like\b"),
    re.compile(r"\bas \w+ as\b", re.ASCII),
    re.compile(r"\bmetaphor"),
    re.compile(r"\bsimilar to\b"),
)

_NARRATIVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bonce upon a time\b"),
    re.compile(r"\bsuddenly\b"),
    re.compile(r"\bmeanwhile\b"),
    re.compile(r"\bin the end\b"),
)

# (opening word, closing word) pairs counted as one narrative sequence each.
_SEQUENCE_PAIRS: tuple[tuple[str, str], ...] = (
    ("first", "then"),
    ("then", "finally"),
)

_NUMBER = re.compile(r"\b\d+(?:[.,]\d+)*\b")
_DATE = re.compile(
    r"\b\d{1,4}[/-]\d{1,2}[/-]\d{1,4}\b"
    r"|\b(?:january|february|march|april|may|june|july|august|september"
    r"|october|november|december)\s+\d{1,2}(?:st|nd|rd|th)?\b"
)
_PERCENTAGE = re.compile(r"\b\d+(?:\.\d+)?\s?(?:%|percent\b)")

_SUBORDINATORS = frozenset(
    {"because", "although", "though", "while", "since", "unless", "whereas", "if", "when"}
)
_COORDINATORS = frozenset({"and", "but", "or", "so", "yet", "nor"})
_COMPOUND_JOIN = re.compile(r"[,;]\s*(?:and|but|or|so|yet|nor)\b|;")
_LONG_SENTENCE_WORDS = 20

# ---------------------------------------------------------------------------
# Coherence
# ---------------------------------------------------------------------------


def _transition_density(stats: TextStatistics, lexicon: Lexicon) -> float:
    with_marker = 0
    for sentence in stats.sentences:
        lowered = sentence.lower()
        if any(marker in lowered for marker in lexicon.transition_markers):
            with_marker += 1
    return min(with_marker / stats.sentence_count, 1.0)


def _pronoun_consistency(stats: TextStatistics) -> float:
    # Placeholder: no coreference tracking is attempted.
    return NEUTRAL


def jaccard(a: set[str], b: set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def _topic_consistency(stats: TextStatistics) -> float:
    similarities: list[float] = []
    for left, right in zip(stats.sentences, stats.sentences[1:]):
        left_words = set(tokenize(left))
        right_words = set(tokenize(right))
        if left_words | right_words:
            similarities.append(jaccard(left_words, right_words))
    if not similarities:
        return NEUTRAL
    return sum(similarities) / len(similarities)


def _population_variance(values: tuple[int, ...]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def _structure_variety(stats: TextStatistics) -> float:
    return min(math.sqrt(_population_variance(stats.sentence_lengths)) / 10, 1.0)


def coherence_score(stats: TextStatistics, lexicon: Lexicon) -> float:
    """Logical flow between sentences; 0.5 for fewer than two sentences."""
    if stats.sentence_count < 2:
        return NEUTRAL
    return clamp(
        weighted_average(
            [
                (_transition_density(stats, lexicon), 0.3),
                (_pronoun_consistency(stats), 0.2),
                (_topic_consistency(stats), 0.3),
                (_structure_variety(stats), 0.2),
            ]
        )
    )


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------


def _completeness_from_content(stats: TextStatistics) -> float:
    if stats.word_count < 20:
        return 0.3
    if stats.word_count > 100 and stats.sentence_count > 5:
        return 0.8
    return 0.6


def key_term_coverage(prompt_words: list[str], response_words: tuple[str, ...]) -> float:
    """Fraction of distinct prompt words that also occur in the response."""
    prompt_set = set(prompt_words)
    if not prompt_set:
        return NEUTRAL
    return len(prompt_set & set(response_words)) / len(prompt_set)


def _response_depth(response_word_count: int, prompt_word_count: int) -> float:
    ratio = response_word_count / max(prompt_word_count, 1)
    if 2 <= ratio <= 10:
        return 1.0
    if 1 <= ratio <= 15:
        return 0.7
    return 0.4


def _structural_completeness(stats: TextStatistics) -> float:
    if stats.paragraph_count >= 3:
        return 0.9
    if stats.paragraph_count == 2:
        return 0.7
    return 0.5


def completeness_score(stats: TextStatistics, prompt: str | None) -> float:
    """How thoroughly the response addresses its prompt, or itself without one."""
    if prompt is None:
        return _completeness_from_content(stats)

    prompt_words = tokenize(prompt)
    return clamp(
        weighted_average(
            [
                (key_term_coverage(prompt_words, stats.words), 0.4),
                (_response_depth(stats.word_count, len(prompt_words)), 0.3),
                (_structural_completeness(stats), 0.3),
            ]
        )
    )


# ---------------------------------------------------------------------------
# Readability
# ---------------------------------------------------------------------------


def _sentence_length_band(avg_length: float) -> float:
    if 15 <= avg_length <= 20:
        return 1.0
    if 10 <= avg_length <= 25:
        return 0.8
    if 5 <= avg_length <= 30:
        return 0.6
    return 0.4


def _paragraph_band(stats: TextStatistics) -> float:
    if stats.paragraph_count == 0:
        return 0.1
    words_per_paragraph = stats.word_count / stats.paragraph_count
    if 50 <= words_per_paragraph <= 150:
        return 1.0
    if 30 <= words_per_paragraph <= 200:
        return 0.8
    return 0.6


def _word_complexity_band(stats: TextStatistics) -> float:
    if not stats.words:
        ratio = 0.0
    else:
        complex_words = sum(
            1 for w in stats.words if len(w) > 6 or _COMPLEX_SUFFIX.search(w)
        )
        ratio = complex_words / stats.word_count
    if 0.1 <= ratio <= 0.3:
        return 1.0
    if 0.05 <= ratio <= 0.4:
        return 0.8
    return 0.6


def readability_score(stats: TextStatistics) -> float:
    """Ease of reading from sentence length, vocabulary, and paragraphing."""
    return clamp(
        weighted_average(
            [
                (_sentence_length_band(stats.avg_sentence_length), 0.3),
                (min(stats.lexical_diversity * 2, 1.0), 0.2),
                (_paragraph_band(stats), 0.2),
                (_word_complexity_band(stats), 0.3),
            ]
        )
    )


# ---------------------------------------------------------------------------
# Length appropriateness
# ---------------------------------------------------------------------------


def prompt_complexity(prompt: str) -> float:
    """Rough prompt complexity in [0.3, 1.0] from length, questions, and long words."""
    complexity = 0.0
    if len(prompt.split()) > 20:
        complexity += 0.3
    if prompt.count("?") > 1:
        complexity += 0.3
    if len(_PROMPT_LONG_WORD.findall(prompt)) > 3:
        complexity += 0.4
    return clamp(complexity, 0.3, 1.0)


def expected_length(complexity: float) -> int:
    return math.floor(100 + complexity * 150)


def length_appropriateness_score(stats: TextStatistics, prompt: str | None) -> float:
    """Whether the response length suits the prompt, or general guidelines without one."""
    if prompt is None:
        if stats.word_count < 20:
            return 0.3
        if stats.word_count > 500:
            return 0.6
        return 0.8

    ratio = stats.word_count / expected_length(prompt_complexity(prompt))
    if 0.7 <= ratio <= 1.3:
        return 1.0
    if 0.5 <= ratio <= 1.8:
        return 0.7
    return 0.4


# ---------------------------------------------------------------------------
# Creativity
# ---------------------------------------------------------------------------


def _count_hits(patterns: tuple[re.Pattern[str], ...], text: str) -> int:
    return sum(len(p.findall(text)) for p in patterns)


def metaphor_density(stats: TextStatistics) -> float:
    if stats.sentence_count == 0:
        return 0.0
    hits = _count_hits(_FIGURATIVE_PATTERNS, stats.text.lower())
    return min(hits / stats.sentence_count, 1.0)


def classify_sentence(sentence: str, terminator: str) -> str:
    """Classify a sentence as question, exclamation, complex, compound, or simple."""
    if "?" in terminator:
        return "question"
    if "!" in terminator:
        return "exclamation"
    words = tokenize(sentence)
    if any(w in _SUBORDINATORS for w in words):
        return "complex"
    if _COMPOUND_JOIN.search(sentence.lower()):
        return "compound"
    if len(words) > _LONG_SENTENCE_WORDS and any(w in _COORDINATORS for w in words):
        return "compound"
    return "simple"


def sentence_variety(stats: TextStatistics) -> float:
    if stats.sentence_count == 0:
        return 0.0
    length_variety = min(_population_variance(stats.sentence_lengths) / 25, 1.0)
    types = {
        classify_sentence(sentence, terminator)
        for sentence, terminator in zip(stats.sentences, stats.terminators)
    }
    type_variety = len(types) / stats.sentence_count
    return (length_variety + type_variety) / 2


def uncommon_word_ratio(stats: TextStatistics, lexicon: Lexicon) -> float:
    if not stats.words:
        return 0.0
    uncommon = sum(
        1 for w in stats.words if len(w) > 5 and w not in lexicon.stopwords
    )
    return min(uncommon / stats.word_count * 2, 1.0)


def _sequence_hits(words: tuple[str, ...], opening: str, closing: str) -> int:
    """Count non-overlapping opening...closing pairs in one pass over the tokens."""
    hits = 0
    open_pair = False
    for word in words:
        if word == opening:
            open_pair = True
        elif word == closing and open_pair:
            hits += 1
            open_pair = False
    return hits


def narrative_density(stats: TextStatistics) -> float:
    """Storytelling markers and first/then/finally sequences, saturating at three hits."""
    hits = _count_hits(_NARRATIVE_PATTERNS, stats.text.lower())
    hits += sum(
        _sequence_hits(stats.words, opening, closing)
        for opening, closing in _SEQUENCE_PAIRS
    )
    return min(hits / 3, 1.0)


def creativity_score(stats: TextStatistics, lexicon: Lexicon) -> float:
    """Figurative language, sentence variety, vocabulary, and narrative devices."""
    return clamp(
        weighted_average(
            [
                (metaphor_density(stats), 0.3),
                (sentence_variety(stats), 0.25),
                (uncommon_word_ratio(stats, lexicon), 0.25),
                (narrative_density(stats), 0.2),
            ]
        )
    )


# ---------------------------------------------------------------------------
# Specificity
# ---------------------------------------------------------------------------


def numeric_specificity(stats: TextStatistics) -> float:
    if stats.sentence_count == 0:
        return 0.0
    lowered = stats.text.lower()
    hits = (
        len(_NUMBER.findall(lowered))
        + len(_DATE.findall(lowered))
        + len(_PERCENTAGE.findall(lowered))
    )
    return min(hits / stats.sentence_count, 1.0)


def term_specificity(stats: TextStatistics, lexicon: Lexicon) -> float:
    if not stats.words:
        return 0.0
    specific = sum(
        1 for w in stats.words if len(w) > 6 and w not in lexicon.vague_words
    )
    return min(specific / stats.word_count * 2, 1.0)


def example_density(stats: TextStatistics, lexicon: Lexicon) -> float:
    if stats.sentence_count == 0:
        return 0.0
    lowered = stats.text.lower()
    hits = sum(
        len(re.findall(r"\b" + re.escape(phrase), lowered))
        for phrase in lexicon.example_phrases
    )
    return min(hits / stats.sentence_count, 1.0)


def specificity_score(stats: TextStatistics, lexicon: Lexicon) -> float:
    """Concreteness: numbers and dates, precise terms, and worked examples."""
    return clamp(
        weighted_average(
            [
                (numeric_specificity(stats), 0.3),
                (term_specificity(stats, lexicon), 0.4),
                (example_density(stats, lexicon), 0.3),
            ]
        )
    )
