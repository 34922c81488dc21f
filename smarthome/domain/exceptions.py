"""Centralized exception hierarchy for the smart-home model.

All catalogue and service exceptions inherit from :class:`SmartHomeError` so
that callers can catch a single base class when they need a broad safety net,
yet still match on specific subclasses where narrower handling is appropriate.

Malformed constructor arguments are reported with the builtin
:class:`ValueError`; this hierarchy covers lookups and configuration.

Hierarchy
---------
::

    SmartHomeError
    ├── NotFoundError        (functionality or entity is not declared)
    └── ConfigurationError   (missing / invalid catalogue config)
"""

from __future__ import annotations


class SmartHomeError(Exception):
    """Base exception for all smart-home errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class NotFoundError(SmartHomeError):
    """Requested entity or functionality does not exist."""


class ConfigurationError(SmartHomeError):
    """Required configuration is missing or invalid."""
