"""Tokenization and stopword filtering for word-frequency analysis."""

import logging
import re
from typing import Callable, Iterable, List, Optional, Set, Tuple

from .constants import FrequencyConstants
from .keywords import STOPWORDS

logger = logging.getLogger(__name__)

# Anything that is not a letter or whitespace becomes a space
_NON_LETTER = re.compile(r"[^\w\s]|[\d_]")
_WHITESPACE = re.compile(r"\s+")

_DIGITS = re.compile(r"^\d+$")
_YEAR = re.compile(r"^(19|20)\d{2}$")
_DATE = re.compile(r"^\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}$")

# Morphemes left over from a bad split
SUFFIX_FRAGMENTS = frozenset(["ing", "ion", "tion", "ness", "ment", "able", "ible", "ful", "less"])

TokenFilter = Callable[[str], bool]


def _too_short(token: str) -> bool:
    return len(token) < FrequencyConstants.MIN_TOKEN_LENGTH


def _mostly_digits(token: str) -> bool:
    digits = sum(1 for ch in token if ch.isdigit())
    return len(token) > 2 and digits >= len(token) - 1


def _not_alphabetic(token: str) -> bool:
    return not token.isalpha()


def _suffix_fragment(token: str) -> bool:
    return token in SUFFIX_FRAGMENTS


# Ordered rejection rules; a token survives only if every predicate returns False.
# Stopwords are checked separately because the set is configurable.
TOKEN_FILTERS: List[Tuple[str, TokenFilter]] = [
    ("too_short", _too_short),
    ("digits", lambda token: bool(_DIGITS.match(token))),
    ("year", lambda token: bool(_YEAR.match(token))),
    ("date", lambda token: bool(_DATE.match(token))),
    ("mostly_digits", _mostly_digits),
    ("not_alphabetic", _not_alphabetic),
    ("suffix_fragment", _suffix_fragment),
]


def rejection_reason(token: str, stopwords: Optional[Set[str]] = None) -> Optional[str]:
    """Name of the first filter rejecting `token`, or None if it is kept."""
    words = STOPWORDS if stopwords is None else stopwords
    for name, predicate in TOKEN_FILTERS:
        if predicate(token):
            return name
    if token in words:
        return "stopword"
    return None


def is_meaningful_word(token: str, stopwords: Optional[Set[str]] = None) -> bool:
    """True if `token` should be counted in the frequency profile."""
    return rejection_reason(token, stopwords) is None


def normalize(text: str) -> str:
    """Lowercase and blank out every non-letter character."""
    return _NON_LETTER.sub(" ", text.lower())


def tokenize(text: str, stopwords: Optional[Set[str]] = None) -> List[str]:
    """Split `text` into meaningful lowercase tokens, preserving order."""
    candidates = _WHITESPACE.split(normalize(text))
    tokens = [token for token in candidates if token and is_meaningful_word(token, stopwords)]
    logger.debug(f"Tokenized {len(candidates)} candidates into {len(tokens)} tokens")
    return tokens


def tokenize_corpus(comments: Iterable[str], stopwords: Optional[Set[str]] = None) -> List[str]:
    """Tokenize all comments joined into one text."""
    return tokenize(" ".join(comments), stopwords)
