"""Tests for stance classification."""

import random

import pytest
from consultlens.core.classifier import StanceClassifier, classify_comment, count_matches, winner_confidence
from consultlens.core.keywords import KeywordConfig
from consultlens.core.models import StanceLabel


SUPPORTIVE = "I strongly support this excellent amendment."
OPPOSED = "This is a poor and harmful proposal that will drive away businesses."
SUGGESTIVE = "Please consider a phased rollout and clarify the timeline."


class TestStanceClassifier:
    """Keyword-count stance classification."""

    def test_agreement(self):
        result = classify_comment(SUPPORTIVE)
        assert result.stance == StanceLabel.AGREEMENT
        assert result.confidence == pytest.approx(0.8)
        assert result.comment == SUPPORTIVE

    def test_removal(self):
        """poor, harm and drive away each count once."""
        result = classify_comment(OPPOSED)
        assert result.stance == StanceLabel.REMOVAL
        assert result.confidence == pytest.approx(0.9)

    def test_no_matches_is_modification(self):
        result = classify_comment(SUGGESTIVE)
        assert result.stance == StanceLabel.MODIFICATION
        assert 0.7 <= result.confidence < 0.9

    def test_empty_comment(self):
        result = classify_comment("")
        assert result.stance == StanceLabel.MODIFICATION

    def test_tie_is_modification(self):
        result = classify_comment("I support the goal but have a concern about cost.")
        assert result.stance == StanceLabel.MODIFICATION

    def test_confidence_capped(self):
        text = "Excellent, comprehensive work; I support and appreciate it and it will improve and strengthen things."
        result = classify_comment(text)
        assert result.stance == StanceLabel.AGREEMENT
        assert result.confidence == 0.95

    def test_tie_confidence_range(self):
        classifier = StanceClassifier(rng=random.Random(7))
        for _ in range(200):
            confidence = classifier.classify("no keywords here").confidence
            assert 0.7 <= confidence < 0.9

    def test_fixed_tie_confidence(self):
        classifier = StanceClassifier(tie_confidence=0.8)
        assert classifier.classify("nothing to see").confidence == 0.8

    def test_seeded_rng_is_reproducible(self):
        first = StanceClassifier(rng=random.Random(42)).classify_all(["a", "b", "c"])
        second = StanceClassifier(rng=random.Random(42)).classify_all(["a", "b", "c"])
        assert [r.confidence for r in first] == [r.confidence for r in second]

    def test_classify_all_preserves_order(self):
        results = StanceClassifier(tie_confidence=0.8).classify_all([SUPPORTIVE, OPPOSED, SUGGESTIVE])
        assert [r.stance for r in results] == [
            StanceLabel.AGREEMENT,
            StanceLabel.REMOVAL,
            StanceLabel.MODIFICATION,
        ]

    def test_custom_keywords(self):
        config = KeywordConfig(positive_keywords=("welcome",), negative_keywords=("reject",))
        result = StanceClassifier(config).classify("We welcome this change")
        assert result.stance == StanceLabel.AGREEMENT
        # default keywords no longer apply
        assert StanceClassifier(config, tie_confidence=0.8).classify(SUPPORTIVE).stance == StanceLabel.MODIFICATION


def test_count_matches_counts_distinct_keywords():
    """Repeated keywords count once; matching is case-insensitive substring."""
    assert count_matches("support support SUPPORT", ["support"]) == 1
    assert count_matches("Harmful burdens", ["harm", "burden", "poor"]) == 2
    assert count_matches("", ["harm"]) == 0


def test_winner_confidence():
    assert winner_confidence(1) == pytest.approx(0.7)
    assert winner_confidence(3) == pytest.approx(0.9)
    assert winner_confidence(10) == 0.95


def test_sentiment_alias():
    assert StanceLabel.AGREEMENT.sentiment == "positive"
    assert StanceLabel.MODIFICATION.sentiment == "neutral"
    assert StanceLabel.REMOVAL.sentiment == "negative"


def test_configured_keywords_match_case_insensitively():
    config = KeywordConfig(positive_keywords=("Welcome",), negative_keywords=("OPPOSE",))
    assert config.positive_keywords == ("welcome",)
    classifier = StanceClassifier(config)
    assert classifier.classify("We welcome this").stance == StanceLabel.AGREEMENT
    assert classifier.classify("We oppose this").stance == StanceLabel.REMOVAL
