"""
Method binder.

Phase 4 of the pipeline: resolve recorded request/response pairings
against the finished type registry. A pairing whose request or
response type is not registered yields no method; later pairings are
still bound and the declaration order is kept.
"""

from __future__ import annotations

import logging

from .assembler import Pairing
from .model.registry import TypeRegistry
from .model.service import Method
from .model.types import members_of

logger = logging.getLogger(__name__)


class MethodBinder:
    """Binds operation pairings to registered types."""

    def __init__(self, registry: TypeRegistry):
        self.registry = registry

    def bind(self, pairings: dict[str, Pairing]) -> list[Method]:
        """
        Build the methods of every resolvable pairing.

        Args:
            pairings: Operation name -> pairing, in declaration order

        Returns:
            Methods in declaration order, unresolved pairings omitted
        """
        methods: list[Method] = []
        for name, pairing in pairings.items():
            request_type = self.registry.get(pairing.request)
            response_type = self.registry.get(pairing.response)
            if request_type is None or response_type is None:
                logger.debug("Operation %s: %s -> %s does not resolve, no method", name, pairing.request, pairing.response)
                continue
            methods.append(
                Method(
                    name=name,
                    request_type=pairing.request,
                    response_type=pairing.response,
                    params_in=members_of(request_type),
                    params_out=members_of(response_type),
                )
            )
        return methods
