"""Comment ingestion from uploaded text/CSV files or bundled sample data."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..core.config import settings
from ..core.constants import IngestConstants
from ..core.errors import NoCommentsError, UnsupportedFileError

logger = logging.getLogger(__name__)


SAMPLE_COMMENTS = (
    "I strongly support this amendment as it will improve corporate transparency and accountability.",
    "This proposed legislation seems poorly thought out and may harm small businesses unnecessarily.",
    "The draft is comprehensive but needs clearer guidelines for implementation timelines.",
    "Excellent initiative! This will significantly reduce compliance burden on companies.",
    "I have serious concerns about the privacy implications of these new reporting requirements.",
    "The amendment is well-structured and addresses key issues in corporate governance.",
    "This legislation is too restrictive and will drive businesses away from India.",
    "I appreciate the consultation process and believe this will strengthen our regulatory framework.",
    "The proposed changes are reasonable but may require additional clarification on specific clauses.",
    "This is a positive step towards better corporate oversight and investor protection.",
)


def load_sample_comments() -> List[str]:
    """Bundled sample dataset of consultation comments."""
    return list(SAMPLE_COMMENTS)


def split_comments(text: str, limit: Optional[int] = None) -> List[str]:
    """One comment per line: trim lines, drop blanks, keep at most `limit`."""
    limit = settings.max_comments if limit is None else limit
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    comments = [line.strip() for line in text.split("\n")]
    comments = [line for line in comments if line]
    if len(comments) > limit:
        logger.warning(f"Keeping first {limit} of {len(comments)} comments")
        comments = comments[:limit]
    return comments


def load_comments_from_text(text: str, limit: Optional[int] = None) -> List[str]:
    """Extract comments from raw text, raising NoCommentsError if none remain."""
    comments = split_comments(text, limit)
    if not comments:
        raise NoCommentsError("No valid comments found in the input")
    return comments


def load_comments_from_file(path: Union[str, Path], limit: Optional[int] = None) -> List[str]:
    """Read a .txt or .csv file with one comment per line."""
    path = Path(path)
    if path.suffix.lower() not in IngestConstants.SUPPORTED_EXTENSIONS:
        raise UnsupportedFileError(
            f"Unsupported file type '{path.suffix}'. Please upload a CSV or TXT file containing comments"
        )

    try:
        text = path.read_text(encoding=IngestConstants.FILE_ENCODING)
    except UnicodeDecodeError as e:
        raise UnsupportedFileError(f"{path.name} is not valid UTF-8 text: {e}") from e
    try:
        comments = load_comments_from_text(text, limit)
    except NoCommentsError:
        raise NoCommentsError(f"No valid comments found in {path.name}")

    logger.info(f"Processed {len(comments)} comments from {path.name}")
    return comments
