#!/usr/bin/env python3
"""
Custom Exception Classes for InstantSearch Core
Provides structured error handling with specific exception types.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class InstantSearchError(Exception):
    """Base exception for all instantsearch core errors."""

    def __init__(self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(InstantSearchError):
    """Raised when a connector description or search configuration is invalid."""


class ErrorCodes(StrEnum):
    """Standardized error codes."""

    # Connector description errors
    MISSING_DISPLAY_NAME = "MISSING_DISPLAY_NAME"

    # Configuration errors
    CONFIG_INVALID = "CONFIG_INVALID"
