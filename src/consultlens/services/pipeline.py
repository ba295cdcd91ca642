"""Single entry point deriving every analysis view from a comment sequence."""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..core.classifier import StanceClassifier
from ..core.config import Settings, settings as default_settings
from ..core.frequency import word_frequencies
from ..core.keywords import KeywordConfig, load_keyword_config
from ..core.models import AnalysisResult, ClassificationResult, StanceDistribution, StanceLabel
from ..core.summarizer import summarize

logger = logging.getLogger(__name__)


def stance_distribution(classifications: List[ClassificationResult]) -> StanceDistribution:
    """Count classifications per stance."""
    counts = {label.value: 0 for label in StanceLabel}
    for result in classifications:
        counts[result.stance.value] += 1
    return StanceDistribution(**counts)


class CommentAnalyzer:
    """Runs classification, word ranking and summarization over one comment snapshot.

    Each call to `analyze` recomputes everything from its input; nothing is
    carried over between calls.
    """

    def __init__(
        self,
        config: Optional[KeywordConfig] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or default_settings
        self.config = config or load_keyword_config(self.settings.keywords_file)
        tie_confidence = self.settings.tie_confidence if self.settings.deterministic else None
        self.classifier = StanceClassifier(self.config, rng=rng, tie_confidence=tie_confidence)

    def analyze(self, comments: Sequence[str], parallel: Optional[bool] = None) -> AnalysisResult:
        """Derive all views from `comments`.

        Args:
            comments: Ordered, trimmed, non-empty comment strings.
            parallel: Run the three views on a thread pool. Defaults to
                `settings.parallel`.

        Returns:
            AnalysisResult echoing the input. An empty input gives empty
            lists and a None summary.
        """
        snapshot = tuple(comments)
        if not snapshot:
            logger.info("No comments to analyze")
            return AnalysisResult(comments=snapshot)

        if parallel is None:
            parallel = self.settings.parallel

        if parallel:
            with ThreadPoolExecutor(max_workers=3) as executor:
                classify_future = executor.submit(self.classifier.classify_all, snapshot)
                words_future = executor.submit(word_frequencies, snapshot, self.config, self.settings.word_limit)
                summary_future = executor.submit(summarize, snapshot, self.config)
                classifications = classify_future.result()
                words = words_future.result()
                summary = summary_future.result()
        else:
            classifications = self.classifier.classify_all(snapshot)
            words = word_frequencies(snapshot, self.config, self.settings.word_limit)
            summary = summarize(snapshot, self.config)

        logger.info(
            f"Analyzed {len(snapshot)} comments: {len(words)} ranked words, "
            f"overall sentiment {summary.overall_sentiment.value}"
        )
        return AnalysisResult(
            comments=snapshot,
            classifications=classifications,
            word_frequencies=words,
            summary=summary,
            stance_distribution=stance_distribution(classifications),
        )


def analyze_comments(comments: Sequence[str], **kwargs) -> AnalysisResult:
    """Analyze `comments` with a fresh CommentAnalyzer built from `kwargs`."""
    parallel = kwargs.pop("parallel", None)
    return CommentAnalyzer(**kwargs).analyze(comments, parallel=parallel)
