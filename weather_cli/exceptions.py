"""Errors that abort a weather lookup."""
from __future__ import annotations


class WeatherError(RuntimeError):
    """Base error for everything that ends a lookup without a report."""


class ConfigurationError(WeatherError):
    """Raised when required configuration is missing."""


class ProviderError(WeatherError):
    """Raised when the provider cannot be reached or answers with an error."""


class ParseError(ProviderError):
    """Raised when the provider response does not have the expected shape."""


class InvalidTimestamp(WeatherError, ValueError):
    """Raised when a UNIX timestamp cannot be represented as a local time."""


__all__ = ["WeatherError", "ConfigurationError", "ProviderError", "ParseError", "InvalidTimestamp"]
