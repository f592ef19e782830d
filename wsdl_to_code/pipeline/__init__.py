"""
Pipeline - WSDL to Python client generator.

This module provides a multi-phase architecture for generating client
code from WSDL service descriptions:

1. Phase 1 (Reader): Parse the WSDL document into raw type, operation and service nodes
2. Phase 2 (Registry Builder): Classify type nodes, deduplicate, link inheritance
3. Phase 3 (Assembler): Build the service and its ordered operations
4. Phase 4 (Binder): Resolve request/response pairings into methods
5. Phase 5 (Filter/Backend): Filter operations and render source with Jinja2 templates
6. Phase 6 (Output): Validate and write the module atomically
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import ConfigurationError, DocumentError, GeneratorError, OutputError
from .generator import Generator

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
