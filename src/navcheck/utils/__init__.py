"""Utilities module for navcheck."""

from .config import AppConfig, ConfigLoader
from .exceptions import (
    ConfigurationError,
    ElementNotFound,
    ExpectationMismatch,
    NavCheckError,
    NavigationError,
    PermanentError,
    ResolutionFailure,
    TransientError,
)
from .session import SessionLogger

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "ConfigurationError",
    "ElementNotFound",
    "ExpectationMismatch",
    "NavCheckError",
    "NavigationError",
    "PermanentError",
    "ResolutionFailure",
    "SessionLogger",
    "TransientError",
]
