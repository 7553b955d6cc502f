"""Exception hierarchy for font conversion."""

from __future__ import annotations


class FontConverterError(Exception):
    """Base error for the package.

    Parameters
    ----------
    message : str
        Human-readable error message.
    exit_code : int, default=1
        Process exit code used by the CLI.
    """

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ConfigurationError(FontConverterError):
    """Service settings are missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=3)


class RegistryError(FontConverterError, ValueError):
    """Font table violates registry invariants."""


class TransportError(FontConverterError):
    """Remote call could not be completed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=4)


class ConversionError(FontConverterError):
    """Conversion request was rejected before any run was processed."""
