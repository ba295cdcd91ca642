"""Core modules for ConsultLens."""

from .models import *
from .config import settings
from .errors import *
from .keywords import KeywordConfig, DetectorRule
from .tokenizer import tokenize, tokenize_corpus, is_meaningful_word
from .classifier import StanceClassifier, classify_comment
from .frequency import rank_words, word_frequencies
from .summarizer import summarize

__all__ = [
    "settings",
    "StanceLabel",
    "OverallSentiment",
    "ClassificationResult",
    "WordFrequency",
    "SentimentCounts",
    "StanceDistribution",
    "CorpusSummary",
    "AnalysisResult",
    "ConsultLensError",
    "NoCommentsError",
    "UnsupportedFileError",
    "ConfigError",
    "KeywordConfig",
    "DetectorRule",
    "tokenize",
    "tokenize_corpus",
    "is_meaningful_word",
    "StanceClassifier",
    "classify_comment",
    "rank_words",
    "word_frequencies",
    "summarize",
]
