"""Domain exception hierarchy for adaptorkit."""

from __future__ import annotations


class AdaptorKitError(RuntimeError):
    """Base class for all adaptorkit errors."""


class RelayDefinitionError(AdaptorKitError, ValueError):
    """Raised when relay options are missing a required field."""


class MissingConnectorError(AdaptorKitError, AttributeError):
    """Raised when an adaptor connector or driver connection is not set."""


class ConfigValidationError(AdaptorKitError):
    """Raised when settings cannot be validated safely."""
