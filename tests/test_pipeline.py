"""Tests for the analysis pipeline."""

import random

import pytest
from consultlens.core.config import Settings
from consultlens.core.keywords import KeywordConfig
from consultlens.core.models import StanceLabel, OverallSentiment, StanceDistribution
from consultlens.services.loader import load_sample_comments
from consultlens.services.pipeline import CommentAnalyzer, analyze_comments, stance_distribution


SCENARIO = [
    "I strongly support this excellent amendment.",
    "This is a poor and harmful proposal that will drive away businesses.",
    "Please consider a phased rollout and clarify the timeline.",
]


@pytest.fixture
def deterministic_settings():
    return Settings(deterministic=True, tie_confidence=0.8, keywords_file="", parallel=False)


def test_empty_input(deterministic_settings):
    """No comments: empty views, no summary, no exception."""
    result = CommentAnalyzer(settings=deterministic_settings).analyze([])
    assert result.is_empty
    assert result.classifications == []
    assert result.word_frequencies == []
    assert result.summary is None
    assert result.stance_distribution == StanceDistribution()


def test_scenario(deterministic_settings):
    result = CommentAnalyzer(settings=deterministic_settings).analyze(SCENARIO)
    assert result.comments == tuple(SCENARIO)
    assert [r.stance for r in result.classifications] == [
        StanceLabel.AGREEMENT,
        StanceLabel.REMOVAL,
        StanceLabel.MODIFICATION,
    ]
    assert result.classifications[0].confidence == pytest.approx(0.8)
    assert result.classifications[2].confidence == 0.8
    assert "Implement changes in phases" in result.summary.suggestions
    assert "Provide clearer implementation guidelines" in result.summary.suggestions


def test_sample_dataset(deterministic_settings):
    result = CommentAnalyzer(settings=deterministic_settings).analyze(load_sample_comments())
    distribution = result.stance_distribution
    assert distribution.agreement == 5
    assert distribution.modification == 2
    assert distribution.removal == 3
    assert distribution.percentage(StanceLabel.AGREEMENT) == 50.0
    assert result.summary.overall_sentiment == OverallSentiment.POSITIVE
    assert 0 < len(result.word_frequencies) <= 50


def test_parallel_matches_serial(deterministic_settings):
    analyzer = CommentAnalyzer(settings=deterministic_settings)
    comments = load_sample_comments()
    assert analyzer.analyze(comments, parallel=True) == analyzer.analyze(comments, parallel=False)


def test_recompute_has_no_memory(deterministic_settings):
    """A new input fully replaces the previous analysis."""
    analyzer = CommentAnalyzer(settings=deterministic_settings)
    analyzer.analyze(load_sample_comments())
    result = analyzer.analyze(SCENARIO[:1])
    assert len(result.classifications) == 1
    assert result.summary.total_comments == 1
    assert {w.word for w in result.word_frequencies} == {"strongly", "support", "excellent"}


def test_random_ties_with_seeded_rng():
    settings = Settings(deterministic=False, keywords_file="")
    first = CommentAnalyzer(settings=settings, rng=random.Random(1)).analyze(SCENARIO)
    second = CommentAnalyzer(settings=settings, rng=random.Random(1)).analyze(SCENARIO)
    assert first.classifications[2].confidence == second.classifications[2].confidence
    assert 0.7 <= first.classifications[2].confidence < 0.9


def test_word_limit_setting():
    settings = Settings(deterministic=True, word_limit=2, keywords_file="")
    result = CommentAnalyzer(settings=settings).analyze(load_sample_comments())
    assert len(result.word_frequencies) == 2


def test_custom_config(deterministic_settings):
    config = KeywordConfig(positive_keywords=("phased",))
    result = CommentAnalyzer(config=config, settings=deterministic_settings).analyze(SCENARIO[2:])
    assert result.classifications[0].stance == StanceLabel.AGREEMENT


def test_analyze_comments_shortcut(deterministic_settings):
    result = analyze_comments(SCENARIO, settings=deterministic_settings, parallel=True)
    assert len(result.classifications) == 3


def test_stance_distribution():
    result = CommentAnalyzer(settings=Settings(deterministic=True, keywords_file="")).analyze(SCENARIO)
    assert stance_distribution(result.classifications) == StanceDistribution(agreement=1, modification=1, removal=1)
