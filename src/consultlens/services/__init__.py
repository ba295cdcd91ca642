"""Services for ConsultLens."""

from .loader import load_comments_from_file, load_comments_from_text, load_sample_comments
from .pipeline import CommentAnalyzer, analyze_comments

__all__ = [
    "load_comments_from_file",
    "load_comments_from_text",
    "load_sample_comments",
    "CommentAnalyzer",
    "analyze_comments",
]
