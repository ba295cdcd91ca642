"""Constants and configuration values for ConsultLens."""

# Comment Ingestion Constants
class IngestConstants:
    """Constants related to loading consultation comments."""

    MAX_COMMENTS = 100  # cap on comments kept from one upload
    SUPPORTED_EXTENSIONS = (".txt", ".csv")  # one comment per line
    FILE_ENCODING = "utf-8"

# Stance Classification Constants
class ClassifierConstants:
    """Constants for keyword-based stance classification."""

    BASE_CONFIDENCE = 0.6  # confidence floor for a clear winner
    CONFIDENCE_STEP = 0.1  # added per matching keyword
    MAX_CONFIDENCE = 0.95  # cap for a clear winner
    TIE_CONFIDENCE_LOW = 0.7  # tie draws are uniform in [low, high)
    TIE_CONFIDENCE_HIGH = 0.9
    DEFAULT_TIE_CONFIDENCE = 0.8  # midpoint used in deterministic mode

# Word Frequency Constants
class FrequencyConstants:
    """Constants for word-frequency ranking."""

    MAX_WORDS = 50  # top words kept
    MIN_DISPLAY_SIZE = 12  # display size of the least frequent kept word
    MAX_DISPLAY_SIZE = 36  # display size of the most frequent word
    MIN_TOKEN_LENGTH = 3

    # Relative intensity thresholds (frequency / max frequency)
    HIGH_INTENSITY = 0.7
    MEDIUM_INTENSITY = 0.4
    LOW_INTENSITY = 0.2

    # CLI display limits
    CLOUD_WORDS_DISPLAY = 30
    TOP_KEYWORDS_DISPLAY = 12

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    EXPORT_VERSION = "1.0.0"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
