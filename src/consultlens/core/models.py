"""Data models for ConsultLens."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Tuple


class StanceLabel(Enum):
    """Stance of a single stakeholder comment."""
    AGREEMENT = "agreement"
    MODIFICATION = "modification"
    REMOVAL = "removal"

    @property
    def sentiment(self) -> str:
        """Same label in positive/neutral/negative terms."""
        return _STANCE_SENTIMENT[self]


_STANCE_SENTIMENT = {
    StanceLabel.AGREEMENT: "positive",
    StanceLabel.MODIFICATION: "neutral",
    StanceLabel.REMOVAL: "negative",
}


class OverallSentiment(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MIXED = "mixed"


@dataclass(frozen=True)
class ClassificationResult:
    """Stance assigned to one comment."""
    comment: str
    stance: StanceLabel
    confidence: float


@dataclass(frozen=True)
class WordFrequency:
    """Ranked word with its count and display size."""
    word: str
    frequency: int
    size: int


@dataclass(frozen=True)
class SentimentCounts:
    """Three-way sentiment tally across a corpus."""
    positive: int = 0
    negative: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral

    def percentages(self) -> Dict[str, float]:
        """Share of each bucket in percent (all zero for an empty tally)."""
        total = self.total
        if total == 0:
            return {"positive": 0.0, "negative": 0.0, "neutral": 0.0}
        return {
            "positive": self.positive / total * 100,
            "negative": self.negative / total * 100,
            "neutral": self.neutral / total * 100,
        }


@dataclass(frozen=True)
class StanceDistribution:
    """Per-stance counts over a list of classifications."""
    agreement: int = 0
    modification: int = 0
    removal: int = 0

    @property
    def total(self) -> int:
        return self.agreement + self.modification + self.removal

    def count(self, stance: StanceLabel) -> int:
        return getattr(self, stance.value)

    def percentage(self, stance: StanceLabel) -> float:
        if self.total == 0:
            return 0.0
        return self.count(stance) / self.total * 100


@dataclass(frozen=True)
class CorpusSummary:
    """Executive summary of a comment corpus."""
    total_comments: int
    sentiment_counts: SentimentCounts
    overall_sentiment: OverallSentiment
    themes: Tuple[str, ...] = ()
    concerns: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AnalysisResult:
    """All views derived from one comment sequence."""
    comments: Tuple[str, ...]
    classifications: List[ClassificationResult] = field(default_factory=list)
    word_frequencies: List[WordFrequency] = field(default_factory=list)
    summary: Optional[CorpusSummary] = None
    stance_distribution: StanceDistribution = field(default_factory=StanceDistribution)

    @property
    def is_empty(self) -> bool:
        return not self.comments
