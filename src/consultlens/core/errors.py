"""Exceptions raised at the edges of ConsultLens (loading and configuration)."""


class ConsultLensError(Exception):
    """Base class for ConsultLens errors."""


class NoCommentsError(ConsultLensError):
    """No usable comments were extracted from the input."""


class UnsupportedFileError(ConsultLensError):
    """Comment file has an extension the loader does not read."""


class ConfigError(ConsultLensError):
    """Keyword override file is malformed."""
