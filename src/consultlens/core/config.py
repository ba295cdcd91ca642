"""Configuration management for ConsultLens."""

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import IngestConstants, ClassifierConstants, FrequencyConstants


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Ingestion
    max_comments: int = Field(IngestConstants.MAX_COMMENTS, description="Maximum comments kept from one upload")

    # Analysis settings
    word_limit: int = Field(FrequencyConstants.MAX_WORDS, description="Number of ranked words to keep")
    deterministic: bool = Field(False, description="Use a fixed confidence for tied classifications")
    tie_confidence: float = Field(
        ClassifierConstants.DEFAULT_TIE_CONFIDENCE,
        description="Confidence reported for ties in deterministic mode",
    )
    keywords_file: str = Field("", description="Optional YAML file overriding keyword tables")
    parallel: bool = Field(False, description="Run the analysis views on a thread pool")

    class Config:
        env_prefix = "CONSULTLENS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
