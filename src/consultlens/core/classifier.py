"""Keyword-based stance classification of stakeholder comments."""

import logging
import random
from typing import Iterable, List, Optional

from .constants import ClassifierConstants
from .keywords import KeywordConfig, DEFAULT_CONFIG
from .models import ClassificationResult, StanceLabel

logger = logging.getLogger(__name__)


def count_matches(text: str, keywords: Iterable[str]) -> int:
    """Number of distinct keywords occurring in `text` (case-insensitive substring)."""
    lowered = text.lower()
    return sum(1 for word in keywords if word in lowered)


def winner_confidence(matches: int) -> float:
    """Confidence for a clear winner with `matches` keyword hits."""
    confidence = ClassifierConstants.BASE_CONFIDENCE + matches * ClassifierConstants.CONFIDENCE_STEP
    return min(ClassifierConstants.MAX_CONFIDENCE, confidence)


class StanceClassifier:
    """Classifies comments as agreement, modification or removal.

    Ties (including comments with no keyword hits) are labelled modification
    with a confidence drawn uniformly from [0.7, 0.9). Pass `tie_confidence`
    to report a fixed value instead, or `rng` to make the draw reproducible.
    """

    def __init__(
        self,
        config: Optional[KeywordConfig] = None,
        rng: Optional[random.Random] = None,
        tie_confidence: Optional[float] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or random.Random()
        self.tie_confidence = tie_confidence

    def _tie_confidence(self) -> float:
        if self.tie_confidence is not None:
            return self.tie_confidence
        low, high = ClassifierConstants.TIE_CONFIDENCE_LOW, ClassifierConstants.TIE_CONFIDENCE_HIGH
        return low + self.rng.random() * (high - low)

    def classify(self, comment: str) -> ClassificationResult:
        """Classify a single comment."""
        agree = count_matches(comment, self.config.positive_keywords)
        remove = count_matches(comment, self.config.negative_keywords)

        if agree > remove:
            stance = StanceLabel.AGREEMENT
            confidence = winner_confidence(agree)
        elif remove > agree:
            stance = StanceLabel.REMOVAL
            confidence = winner_confidence(remove)
        else:
            stance = StanceLabel.MODIFICATION
            confidence = self._tie_confidence()

        logger.debug(f"Classified comment ({agree} agree / {remove} remove) as {stance.value}")
        return ClassificationResult(comment=comment, stance=stance, confidence=confidence)

    def classify_all(self, comments: Iterable[str]) -> List[ClassificationResult]:
        """Classify every comment, preserving input order."""
        return [self.classify(comment) for comment in comments]


def classify_comment(comment: str, config: Optional[KeywordConfig] = None, tie_confidence: Optional[float] = None) -> ClassificationResult:
    """Classify one comment with a throwaway classifier."""
    return StanceClassifier(config, tie_confidence=tie_confidence).classify(comment)
