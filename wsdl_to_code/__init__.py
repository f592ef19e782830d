"""WSDL to Code Generator

A Python package for generating client code from WSDL service descriptions.
Classifies schema types, links inheritance, binds operations to their
request/response types and renders a Python client module.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    ConfigurationError,
    DocumentError,
    Generator,
    GeneratorConfig,
    GeneratorError,
    OutputConfig,
    OutputError,
    OutputMode,
)

__all__ = [
    "Generator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "GeneratorError",
    "ConfigurationError",
    "DocumentError",
    "OutputError",
    "AtomicWriter",
]
