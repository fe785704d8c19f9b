"""Shared exception classes for dpp_http.

The pure core (normalization, naming, plan building) never raises these;
they belong to the configuration and CLI layers.
"""


class DppHttpError(Exception):
    """Base exception for dpp_http errors."""


class ConfigNotFoundError(DppHttpError):
    """Raised when dpp-http.toml is not found."""


class ConfigParseError(DppHttpError):
    """Raised when dpp-http.toml cannot be parsed."""


class ConfigValidationError(DppHttpError):
    """Raised when dpp-http.toml contains invalid configuration."""
