"""
Service assembler.

Phase 3 of the pipeline: build the Service and its ordered operations,
and record for every operation the request/response type names the
method binder has to resolve.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import GeneratorConfig
from .document.nodes import OperationNode, ServiceNode
from .model.registry import TypeRegistry
from .model.service import Operation, Service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pairing:
    """Request and response type names of an operation."""

    request: str | None
    response: str


class ServiceAssembler:
    """Assembles the service of one or more documents."""

    def __init__(self, config: GeneratorConfig, registry: TypeRegistry):
        self.config = config
        self.registry = registry
        self.service: Service | None = None
        # operation name -> pairing, in declaration order
        self.pairings: dict[str, Pairing] = {}

    def assemble(self, service_node: ServiceNode | None, operation_nodes: list[OperationNode]) -> Service | None:
        """
        Add a document's service and operations.

        The first service node names the service; operations of later
        documents are appended to it. An operation name declared again
        replaces the earlier operation and pairing, keeping its position.

        Args:
            service_node: The document's service declaration, if any
            operation_nodes: The document's operations in document order

        Returns:
            The running service, or None while no service node has been seen
        """
        if self.service is None:
            if service_node is None:
                logger.warning("Document declares no service, skipping %d operations", len(operation_nodes))
                return None
            self.service = Service(self.config, service_node.name, self.registry, service_node.documentation)

        logger.info("Starting to load service %s", self.service.name)
        for node in operation_nodes:
            logger.debug("Loading function %s", node.name)
            if node.name in self.pairings:
                logger.debug("Function %s declared again, replacing it in place", node.name)
            operation = Operation(
                name=node.name,
                params=dict(node.params),
                returns=node.returns,
                documentation=node.documentation,
            )
            self.pairings[operation.name] = Pairing(request=operation.request_type_name, response=operation.returns)
            self.service.add_operation(operation)
        logger.info("Done loading service %s", self.service.name)

        return self.service
