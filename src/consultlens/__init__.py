"""ConsultLens - keyword-driven analysis of stakeholder consultation comments."""

__version__ = "1.0.0"
__author__ = "ConsultLens Team"

from .core.models import *
from .core.config import settings
from .core.keywords import KeywordConfig
from .services.pipeline import CommentAnalyzer, analyze_comments
from .services.loader import load_comments_from_file, load_comments_from_text, load_sample_comments

__all__ = [
    "settings",
    "KeywordConfig",
    "CommentAnalyzer",
    "analyze_comments",
    "load_comments_from_file",
    "load_comments_from_text",
    "load_sample_comments",
]
