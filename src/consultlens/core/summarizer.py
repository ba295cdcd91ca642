"""Corpus-level executive summary: sentiment tally, themes, concerns and suggestions."""

import logging
from typing import Iterable, List, Optional, Sequence

from .keywords import KeywordConfig, DetectorRule, DEFAULT_CONFIG
from .models import CorpusSummary, OverallSentiment, SentimentCounts

logger = logging.getLogger(__name__)

__all__ = [
    "DetectorRule",
    "detect_signal",
    "comment_sentiment",
    "apply_rules",
    "overall_sentiment",
    "summarize",
]


def detect_signal(text: str, keywords: Iterable[str]) -> bool:
    """True if any keyword occurs in `text` (case-insensitive substring)."""
    lowered = text.lower()
    return any(word in lowered for word in keywords)


def comment_sentiment(comment: str, config: Optional[KeywordConfig] = None) -> str:
    """Three-way sentiment of one comment: positive, negative or neutral.

    A comment is positive only when it has positive signals and no negative
    ones (and vice versa). Mixed, neutral-only and signal-free comments all
    count as neutral.
    """
    config = config or DEFAULT_CONFIG
    has_positive = detect_signal(comment, config.summary_positive_keywords)
    has_negative = detect_signal(comment, config.summary_negative_keywords)

    if has_positive and not has_negative:
        return "positive"
    if has_negative and not has_positive:
        return "negative"
    return "neutral"


def apply_rules(text: str, rules: Iterable[DetectorRule]) -> List[str]:
    """Tags of every rule matching `text`, in rule order."""
    return [rule.tag for rule in rules if rule.matches(text)]


def overall_sentiment(counts: SentimentCounts) -> OverallSentiment:
    """Dominant sentiment; anything short of a strict majority bucket is mixed."""
    if counts.positive > counts.negative and counts.positive > counts.neutral:
        return OverallSentiment.POSITIVE
    if counts.negative > counts.positive and counts.negative > counts.neutral:
        return OverallSentiment.NEGATIVE
    return OverallSentiment.MIXED


def _collect(tags: List[str], seen: dict) -> None:
    for tag in tags:
        seen.setdefault(tag, None)


def summarize(comments: Sequence[str], config: Optional[KeywordConfig] = None) -> Optional[CorpusSummary]:
    """Summarize a comment corpus. Returns None when there are no comments."""
    if not comments:
        return None
    config = config or DEFAULT_CONFIG

    tally = {"positive": 0, "negative": 0, "neutral": 0}
    # dicts as ordered sets
    themes, concerns, suggestions = {}, {}, {}

    for comment in comments:
        tally[comment_sentiment(comment, config)] += 1
        _collect(apply_rules(comment, config.theme_rules), themes)
        _collect(apply_rules(comment, config.concern_rules), concerns)
        _collect(apply_rules(comment, config.suggestion_rules), suggestions)

    counts = SentimentCounts(**tally)
    summary = CorpusSummary(
        total_comments=len(comments),
        sentiment_counts=counts,
        overall_sentiment=overall_sentiment(counts),
        themes=tuple(themes),
        concerns=tuple(concerns),
        suggestions=tuple(suggestions),
    )
    logger.debug(
        f"Summarized {summary.total_comments} comments: {tally}, "
        f"{len(summary.themes)} themes, {len(summary.concerns)} concerns, {len(summary.suggestions)} suggestions"
    )
    return summary
