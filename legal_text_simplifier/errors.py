from __future__ import annotations

from typing import Optional


class SimplifierError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(SimplifierError, ValueError):
    pass


class ConfigurationError(SimplifierError):
    """A remote provider was requested but its credential is not configured."""

    def __init__(self, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider


class RemoteProviderError(SimplifierError):
    """The remote AI backend failed (network, auth, quota or a malformed reply)."""

    def __init__(self, message: str, provider: str) -> None:
        super().__init__(message)
        self.provider = provider


class SimplificationFailed(SimplifierError):
    def __init__(self, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider


class DocumentExtractionError(SimplifierError):
    pass
