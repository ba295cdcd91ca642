"""Data preparation for export."""

import json
from typing import Dict, Any, List

import pandas as pd

from ..core.constants import FileConstants
from ..core.frequency import intensity_band
from ..core.models import AnalysisResult, ClassificationResult, CorpusSummary, StanceLabel, WordFrequency


def summary_to_dict(summary: CorpusSummary) -> Dict[str, Any]:
    """Serializable form of a corpus summary."""
    counts = summary.sentiment_counts
    return {
        "total_comments": summary.total_comments,
        "sentiment_distribution": {
            "positive": counts.positive,
            "negative": counts.negative,
            "neutral": counts.neutral,
        },
        "overall_sentiment": summary.overall_sentiment.value,
        "key_themes": list(summary.themes),
        "main_concerns": list(summary.concerns),
        "suggestions": list(summary.suggestions),
    }


def prepare_export(result: AnalysisResult) -> Dict[str, Any]:
    """Prepare analysis results for JSON export."""

    classifications = [
        {
            "comment": item.comment,
            "stance": item.stance.value,
            "sentiment": item.stance.sentiment,
            "confidence": round(item.confidence, 4),
        }
        for item in result.classifications
    ]

    max_freq = result.word_frequencies[0].frequency if result.word_frequencies else 0
    words = [
        {
            "word": item.word,
            "frequency": item.frequency,
            "size": item.size,
            "intensity": intensity_band(item.frequency, max_freq),
        }
        for item in result.word_frequencies
    ]

    distribution = result.stance_distribution
    export_data = {
        "comments": list(result.comments),
        "stance_distribution": {
            label.value: {
                "count": distribution.count(label),
                "percentage": round(distribution.percentage(label), 1),
            }
            for label in StanceLabel
        },
        "classifications": classifications,
        "word_frequencies": words,
        "summary": summary_to_dict(result.summary) if result.summary else None,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION,
        },
    }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def classifications_to_frame(classifications: List[ClassificationResult]) -> pd.DataFrame:
    """One row per comment with its stance and confidence."""
    return pd.DataFrame(
        [
            {
                "comment": item.comment,
                "stance": item.stance.value,
                "sentiment": item.stance.sentiment,
                "confidence": item.confidence,
            }
            for item in classifications
        ],
        columns=["comment", "stance", "sentiment", "confidence"],
    )


def frequencies_to_frame(frequencies: List[WordFrequency]) -> pd.DataFrame:
    """Ranked words as a table, rank starting at 1."""
    df = pd.DataFrame(
        [{"word": w.word, "frequency": w.frequency, "size": w.size} for w in frequencies],
        columns=["word", "frequency", "size"],
    )
    df.insert(0, "rank", range(1, len(df) + 1))
    return df


def export_to_csv(df: pd.DataFrame, filename: str) -> None:
    """Write a result table to CSV."""
    df.to_csv(filename, index=False, encoding='utf-8')
