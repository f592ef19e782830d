"""
Errors raised by the generator pipeline.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator errors."""


class ConfigurationError(GeneratorError):
    """Raised when the configuration or the loaded documents cannot produce a service."""


class DocumentError(GeneratorError):
    """Raised when a service description cannot be read or parsed."""


class OutputError(GeneratorError):
    """Raised when generated code fails validation before being written."""
