"""Basic usage examples for ConsultLens."""

import random

from consultlens import CommentAnalyzer, KeywordConfig, load_sample_comments
from consultlens.core.keywords import DetectorRule
from consultlens.core.models import StanceLabel

def example_full_analysis():
    """Example: classify, rank words and summarize the sample comments."""
    print("🔍 Analyzing sample consultation comments")

    comments = load_sample_comments()
    result = CommentAnalyzer(rng=random.Random(0)).analyze(comments)
    print(f"📊 Loaded {len(result.comments)} comments")

    for label in StanceLabel:
        print(f"  {label.value}: {result.stance_distribution.count(label)}")

    print(f"🏷️ Overall sentiment: {result.summary.overall_sentiment.value}")
    print(f"📋 Themes: {', '.join(result.summary.themes)}")
    print("🔤 Top words:")
    for item in result.word_frequencies[:5]:
        print(f"  {item.word}: {item.frequency} (size {item.size})")

def example_custom_rules():
    """Example: add a suggestion rule for pilot programmes."""
    print("\n🔍 Custom suggestion rules")

    base = KeywordConfig()
    config = KeywordConfig(
        suggestion_rules=base.suggestion_rules + (DetectorRule(("pilot",), "Run a pilot before full rollout"),),
    )
    comments = ["Start with a pilot in two states.", "A gradual rollout would help."]
    result = CommentAnalyzer(config=config).analyze(comments)
    for suggestion in result.summary.suggestions:
        print(f"  💡 {suggestion}")

if __name__ == "__main__":
    example_full_analysis()
    example_custom_rules()
