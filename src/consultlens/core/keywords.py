"""Keyword lists, stopwords and detector rule tables for consultation comments."""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Tuple, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectorRule:
    """Adds `tag` to a summary when any trigger substring occurs in a comment."""
    triggers: Tuple[str, ...]
    tag: str

    def __post_init__(self):
        object.__setattr__(self, "triggers", tuple(trigger.lower() for trigger in self.triggers))

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(trigger in lowered for trigger in self.triggers)


# Stance classifier keywords
AGREEMENT_KEYWORDS = (
    "support", "excellent", "good", "positive", "appreciate", "well",
    "strengthen", "improve", "comprehensive",
)

REMOVAL_KEYWORDS = (
    "concern", "poor", "harm", "restrict", "serious", "drive away", "burden", "against",
)

# Summary sentiment keywords (broader than the classifier's lists)
SUMMARY_POSITIVE_KEYWORDS = AGREEMENT_KEYWORDS + ("initiative",)

SUMMARY_NEGATIVE_KEYWORDS = REMOVAL_KEYWORDS + ("oppose", "problematic")

NEUTRAL_KEYWORDS = (
    "suggest", "recommend", "consider", "clarify", "modify", "reasonable", "adequate",
)

GENERAL_STOPWORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does",
    "did", "will", "would", "could", "should", "may", "might", "must", "can", "this",
    "that", "these", "those", "i", "you", "he", "she", "it", "we", "they", "me", "him",
    "her", "us", "them", "my", "your", "his", "its", "our", "their", "as", "if", "than",
    "so", "very", "just", "now", "then", "here", "there", "when", "where", "why", "how",
    "all", "any", "both", "each", "few", "more", "most", "other", "some", "such", "no",
    "nor", "not", "only", "own", "same", "too", "s", "t", "don", "ve", "ll", "d", "m",
    "re", "also", "like", "get", "go", "one", "two", "first", "last", "new", "old",
    "good", "bad", "big", "small", "long", "short", "high", "low", "right", "left",
    "next", "previous", "said", "say", "come", "came", "give", "take", "make", "know",
    "think", "see", "look", "want", "use", "find", "tell", "ask", "seem", "feel", "try",
    "leave", "call", "back", "way", "even", "well", "still", "however", "therefore",
    "thus", "hence", "accordingly", "consequently",
])

# Consultation and legal boilerplate that says nothing about the topic
CONSULTATION_STOPWORDS = frozenset([
    "provision", "section", "clause", "draft", "amendment", "legislation", "act", "rule",
    "regulation", "ministry", "department", "government", "india", "indian", "public",
    "consultation", "comment", "suggestion", "proposal", "recommendation", "request",
    "regarding", "concerning", "respect", "matter", "issue", "subject", "mentioned",
    "stated", "provided", "specified", "considered", "proposed", "suggested", "requested",
])

STOPWORDS = GENERAL_STOPWORDS | CONSULTATION_STOPWORDS

THEME_RULES = (
    DetectorRule(("transparency", "accountability"), "Corporate Transparency & Accountability"),
    DetectorRule(("compliance", "regulation"), "Regulatory Compliance"),
    DetectorRule(("small business", "startup"), "Impact on Small Businesses"),
    DetectorRule(("implementation", "timeline"), "Implementation Concerns"),
    DetectorRule(("privacy", "data"), "Data Privacy & Security"),
    DetectorRule(("governance", "oversight"), "Corporate Governance"),
)

CONCERN_RULES = (
    DetectorRule(("burden", "cost"), "Increased compliance burden and costs"),
    DetectorRule(("privacy", "confidential"), "Privacy and confidentiality implications"),
    DetectorRule(("small", "startup"), "Disproportionate impact on small businesses"),
    DetectorRule(("unclear", "confusing"), "Lack of clarity in implementation guidelines"),
)

SUGGESTION_RULES = (
    DetectorRule(("phased", "gradual"), "Implement changes in phases"),
    DetectorRule(("clarify", "clearer"), "Provide clearer implementation guidelines"),
    DetectorRule(("exemption", "exception"), "Consider exemptions for specific business categories"),
    DetectorRule(("consultation", "stakeholder"), "Conduct additional stakeholder consultations"),
)


_TERM_FIELDS = (
    "positive_keywords",
    "negative_keywords",
    "neutral_keywords",
    "summary_positive_keywords",
    "summary_negative_keywords",
)


@dataclass(frozen=True)
class KeywordConfig:
    """Keyword tables used by the classifier, tokenizer and summarizer.

    Terms are stored lowercase so matching stays case-insensitive however the
    config was built. `neutral_keywords` lists suggestion-style signals for
    reference only: the summary tally already counts every comment without a
    clear positive or negative signal as neutral, so it does not change counts.
    """
    positive_keywords: Tuple[str, ...] = AGREEMENT_KEYWORDS
    negative_keywords: Tuple[str, ...] = REMOVAL_KEYWORDS
    neutral_keywords: Tuple[str, ...] = NEUTRAL_KEYWORDS
    summary_positive_keywords: Tuple[str, ...] = SUMMARY_POSITIVE_KEYWORDS
    summary_negative_keywords: Tuple[str, ...] = SUMMARY_NEGATIVE_KEYWORDS
    stopwords: FrozenSet[str] = field(default=STOPWORDS)
    theme_rules: Tuple[DetectorRule, ...] = THEME_RULES
    concern_rules: Tuple[DetectorRule, ...] = CONCERN_RULES
    suggestion_rules: Tuple[DetectorRule, ...] = SUGGESTION_RULES

    def __post_init__(self):
        for name in _TERM_FIELDS:
            object.__setattr__(self, name, tuple(term.lower() for term in getattr(self, name)))
        object.__setattr__(self, "stopwords", frozenset(word.lower() for word in self.stopwords))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeywordConfig":
        """Build a config from defaults overridden by the keys present in `data`."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Keyword config must be a mapping, got {type(data).__name__}")

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown keyword config keys: {', '.join(unknown)}")

        overrides = {}
        for key, value in data.items():
            if key.endswith("_rules"):
                overrides[key] = _parse_rules(key, value)
            elif key == "stopwords":
                overrides[key] = frozenset(_parse_terms(key, value))
            else:
                overrides[key] = _parse_terms(key, value)
        return replace(cls(), **overrides)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "KeywordConfig":
        """Load overrides from a YAML file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        logger.info(f"Loaded keyword overrides from {path}")
        return cls.from_dict(data or {})


def _parse_terms(key: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigError(f"'{key}' must be a list of strings")
    terms = []
    for term in value:
        if not isinstance(term, str) or not term.strip():
            raise ConfigError(f"'{key}' contains an empty or non-string entry: {term!r}")
        terms.append(term.strip().lower())
    return tuple(terms)


def _parse_rules(key: str, value: Any) -> Tuple[DetectorRule, ...]:
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list of {{triggers, tag}} entries")
    rules = []
    for entry in value:
        if not isinstance(entry, dict) or "triggers" not in entry or "tag" not in entry:
            raise ConfigError(f"'{key}' entries need 'triggers' and 'tag': {entry!r}")
        tag = entry["tag"]
        if not isinstance(tag, str) or not tag.strip():
            raise ConfigError(f"'{key}' has an empty tag")
        rules.append(DetectorRule(_parse_terms(f"{key}.triggers", entry["triggers"]), tag.strip()))
    return tuple(rules)


DEFAULT_CONFIG = KeywordConfig()


def load_keyword_config(path: str = "", required: bool = False) -> KeywordConfig:
    """Return the keyword config for `path`, or the defaults when no path is set.

    A missing file falls back to the defaults unless `required` is set, in
    which case it raises ConfigError.
    """
    if not path:
        return DEFAULT_CONFIG
    if not Path(path).exists():
        if required:
            raise ConfigError(f"Keyword file {path} not found")
        logger.warning(f"Keyword file {path} not found. Using defaults.")
        return DEFAULT_CONFIG
    return KeywordConfig.from_yaml(path)
