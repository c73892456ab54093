class NewsDigestError(Exception):
    """Base exception for fatal pipeline failures."""


class ConfigError(NewsDigestError):
    """Raised when required configuration is missing or malformed."""


class TransportError(NewsDigestError):
    """Raised when an HTTP request cannot be sent or its response cannot be read."""


class StorageError(NewsDigestError):
    """Raised when the output directory or document file cannot be written."""
