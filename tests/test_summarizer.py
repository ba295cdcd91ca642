"""Tests for corpus summarization."""

import pytest
from consultlens.core.keywords import KeywordConfig, DetectorRule
from consultlens.core.models import OverallSentiment, SentimentCounts
from consultlens.core.summarizer import (
    summarize,
    comment_sentiment,
    apply_rules,
    overall_sentiment,
    detect_signal,
)
from consultlens.services.loader import load_sample_comments


SCENARIO = [
    "I strongly support this excellent amendment.",
    "This is a poor and harmful proposal that will drive away businesses.",
    "Please consider a phased rollout and clarify the timeline.",
]


def test_empty_corpus_has_no_summary():
    assert summarize([]) is None


def test_scenario_summary():
    summary = summarize(SCENARIO)
    assert summary.total_comments == 3
    assert summary.sentiment_counts == SentimentCounts(positive=1, negative=1, neutral=1)
    assert summary.overall_sentiment == OverallSentiment.MIXED
    assert summary.suggestions == (
        "Implement changes in phases",
        "Provide clearer implementation guidelines",
    )
    assert summary.concerns == ()
    # "timeline" is an implementation trigger
    assert summary.themes == ("Implementation Concerns",)


def test_sample_dataset_summary():
    summary = summarize(load_sample_comments())
    assert summary.total_comments == 10
    assert summary.sentiment_counts == SentimentCounts(positive=5, negative=3, neutral=2)
    assert summary.overall_sentiment == OverallSentiment.POSITIVE
    assert set(summary.themes) == {
        "Corporate Transparency & Accountability",
        "Impact on Small Businesses",
        "Implementation Concerns",
        "Regulatory Compliance",
        "Data Privacy & Security",
        "Corporate Governance",
    }
    assert set(summary.concerns) == {
        "Disproportionate impact on small businesses",
        "Increased compliance burden and costs",
        "Privacy and confidentiality implications",
    }
    assert set(summary.suggestions) == {
        "Provide clearer implementation guidelines",
        "Conduct additional stakeholder consultations",
    }


def test_tags_are_deduplicated():
    """A tag matched by many comments appears once."""
    summary = summarize(["Data privacy matters."] * 50)
    assert summary.themes.count("Data Privacy & Security") == 1
    assert summary.concerns.count("Privacy and confidentiality implications") == 1


def test_one_comment_can_add_many_tags():
    summary = summarize(["Small startups face a compliance burden; please clarify data rules gradually."])
    assert "Impact on Small Businesses" in summary.themes
    assert "Regulatory Compliance" in summary.themes
    assert "Data Privacy & Security" in summary.themes
    assert "Increased compliance burden and costs" in summary.concerns
    assert "Disproportionate impact on small businesses" in summary.concerns
    assert "Implement changes in phases" in summary.suggestions
    assert "Provide clearer implementation guidelines" in summary.suggestions


class TestCommentSentiment:
    """Three-way sentiment of single comments."""

    def test_positive(self):
        assert comment_sentiment("Excellent initiative") == "positive"

    def test_negative(self):
        assert comment_sentiment("We oppose this problematic rule") == "negative"

    def test_both_signals_is_neutral(self):
        assert comment_sentiment("Excellent idea but a real burden") == "neutral"

    def test_neutral_signal_only(self):
        assert comment_sentiment("We recommend a longer timeline") == "neutral"

    def test_no_signal(self):
        assert comment_sentiment("") == "neutral"


@pytest.mark.parametrize(
    "counts, expected",
    [
        (SentimentCounts(positive=3, negative=1, neutral=1), OverallSentiment.POSITIVE),
        (SentimentCounts(positive=1, negative=3, neutral=2), OverallSentiment.NEGATIVE),
        (SentimentCounts(positive=2, negative=2, neutral=1), OverallSentiment.MIXED),
        (SentimentCounts(positive=2, negative=0, neutral=2), OverallSentiment.MIXED),
        (SentimentCounts(positive=0, negative=0, neutral=4), OverallSentiment.MIXED),
    ],
)
def test_overall_sentiment(counts, expected):
    assert overall_sentiment(counts) == expected


def test_rule_matching():
    rule = DetectorRule(("phased", "gradual"), "Implement changes in phases")
    assert rule.matches("A GRADUAL approach")
    assert not rule.matches("all at once")
    assert apply_rules("gradual and clearer", [rule, DetectorRule(("clearer",), "Clarity")]) == [
        "Implement changes in phases",
        "Clarity",
    ]
    assert apply_rules("nothing", [rule]) == []


def test_detect_signal():
    assert detect_signal("Drive Away investors", ["drive away"])
    assert not detect_signal("drive investors away", ["drive away"])


def test_custom_rules():
    config = KeywordConfig(theme_rules=(DetectorRule(("pilot",), "Pilot programmes"),))
    summary = summarize(["Start with a pilot"], config)
    assert summary.themes == ("Pilot programmes",)


def test_percentages():
    counts = SentimentCounts(positive=1, negative=1, neutral=2)
    assert counts.percentages() == {"positive": 25.0, "negative": 25.0, "neutral": 50.0}
    assert SentimentCounts().percentages()["positive"] == 0.0


def test_neutral_keywords_do_not_change_counts():
    """Comments without a clear signal are neutral whatever the neutral list holds."""
    comments = SCENARIO + ["We recommend a review"]
    with_neutral = summarize(comments)
    without_neutral = summarize(comments, KeywordConfig(neutral_keywords=()))
    assert with_neutral.sentiment_counts == without_neutral.sentiment_counts
