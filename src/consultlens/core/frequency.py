"""Word-frequency ranking with display-size scaling."""

import logging
import math
from collections import Counter
from typing import Iterable, List, Optional

from .constants import FrequencyConstants
from .keywords import KeywordConfig, DEFAULT_CONFIG
from .models import WordFrequency
from .tokenizer import tokenize_corpus

logger = logging.getLogger(__name__)


def count_tokens(tokens: Iterable[str]) -> Counter:
    """Count tokens; iteration order is first occurrence."""
    return Counter(tokens)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scale_size(frequency: int, min_freq: int, max_freq: int) -> int:
    """Map a frequency linearly onto the display size range [12, 36]."""
    lo, hi = FrequencyConstants.MIN_DISPLAY_SIZE, FrequencyConstants.MAX_DISPLAY_SIZE
    if max_freq == min_freq:
        normalized = 0.0
    else:
        normalized = (frequency - min_freq) / (max_freq - min_freq)
    return _round_half_up(lo + normalized * (hi - lo))


def rank_words(tokens: Iterable[str], limit: int = FrequencyConstants.MAX_WORDS) -> List[WordFrequency]:
    """Rank tokens by descending count, ties in first-occurrence order.

    Min and max frequency are taken over the kept top `limit` entries, so
    sizes describe the displayed words only.
    """
    counts = count_tokens(tokens)
    if not counts:
        return []

    # sorted() is stable, so equal counts keep first-occurrence order
    top = sorted(counts.items(), key=lambda item: -item[1])[:max(0, limit)]
    if not top:
        return []

    max_freq = top[0][1]
    min_freq = top[-1][1]
    logger.debug(f"Ranked {len(counts)} distinct words, kept {len(top)} (max={max_freq}, min={min_freq})")
    return [WordFrequency(word=word, frequency=freq, size=scale_size(freq, min_freq, max_freq)) for word, freq in top]


def word_frequencies(
    comments: Iterable[str],
    config: Optional[KeywordConfig] = None,
    limit: int = FrequencyConstants.MAX_WORDS,
) -> List[WordFrequency]:
    """Tokenize a comment corpus and rank its words."""
    config = config or DEFAULT_CONFIG
    return rank_words(tokenize_corpus(comments, config.stopwords), limit)


def intensity_band(frequency: int, max_freq: int) -> str:
    """Bucket a word by its frequency relative to the most frequent word."""
    if max_freq <= 0:
        return "minimal"
    intensity = frequency / max_freq
    if intensity > FrequencyConstants.HIGH_INTENSITY:
        return "high"
    if intensity > FrequencyConstants.MEDIUM_INTENSITY:
        return "medium"
    if intensity > FrequencyConstants.LOW_INTENSITY:
        return "low"
    return "minimal"
