"""
Document module.

Contains the raw node definitions and the WSDL reader.
"""

from __future__ import annotations

from .nodes import OperationNode, ServiceNode, TypeNode
from .reader import WsdlDocument

__all__ = [
    "TypeNode",
    "OperationNode",
    "ServiceNode",
    "WsdlDocument",
]
