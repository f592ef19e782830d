"""
Generator orchestrating the pipeline.

Loads every configured service description into one type registry and
one service, binds the methods, then renders and writes the module.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .assembler import ServiceAssembler
from .binder import MethodBinder
from .config import SOAP_SINGLE_ELEMENT_ARRAYS, GeneratorConfig
from .document.reader import WsdlDocument, is_url
from .errors import ConfigurationError
from .filter import create_filter
from .model.builder import TypeRegistryBuilder
from .model.registry import TypeRegistry
from .model.service import Location, Method, Service
from .model.types import SchemaType
from .output import OutputManager

logger = logging.getLogger(__name__)


class Generator:
    """Generates a Python client module from WSDL service descriptions."""

    def __init__(self, document_loader: Callable[[str], WsdlDocument] = WsdlDocument):
        """
        Initialize the generator.

        Args:
            document_loader: Callable turning a source path/URL into a parsed document
        """
        self._document_loader = document_loader
        self.config = GeneratorConfig()
        self._reset()

    def _reset(self) -> None:
        self.registry = TypeRegistry()
        self.assembler = ServiceAssembler(self.config, self.registry)
        self.documents: list[Any] = []
        self.service: Service | None = None
        self.methods: list[Method] = []
        self.locations: list[Location] = []

    def generate(self, config: GeneratorConfig, parse_only: bool = False) -> Path | None:
        """
        Run the pipeline.

        Args:
            config: The configuration to generate with
            parse_only: Load and bind only, collecting locations instead of writing files

        Returns:
            Path of the generated module, or None in parse-only mode

        Raises:
            ConfigurationError: If no input is configured or no service could be loaded
            DocumentError: If an input cannot be read
        """
        self.config = config
        self._reset()

        logger.info("Starting generation")

        if config.features & SOAP_SINGLE_ELEMENT_ARRAYS != SOAP_SINGLE_ELEMENT_ARRAYS:
            logger.warning(
                "SoapClient option feature SOAP_SINGLE_ELEMENT_ARRAYS is not set. "
                "This is not recommended as array types of generated members will not be "
                "valid if the array only contains a single value."
            )

        inputs = config.input_files
        if not inputs:
            raise ConfigurationError("No input file configured")

        for source in inputs:
            self.load(source)
        self.load_methods()

        if self.service is None:
            raise ConfigurationError("No service loaded")

        if parse_only:
            self.set_locations(inputs)
            return None

        path = self.save_source()
        if config.copy_schema:
            self.save_schema()
        logger.info("Generation complete")
        return path

    def load(self, source: str) -> None:
        """Load one service description into the running registry and service."""
        logger.info("Loading the WSDL %s", source)
        document = self._document_loader(source)
        self.documents.append(document)

        TypeRegistryBuilder(self.config, self.registry).build(document.get_types())
        self.service = self.assembler.assemble(document.get_service(), document.get_operations())

    def load_methods(self) -> None:
        """Bind every recorded pairing against the finished registry."""
        self.methods = MethodBinder(self.registry).bind(self.assembler.pairings)
        logger.info("Bound %d of %d operations", len(self.methods), len(self.assembler.pairings))

    def set_locations(self, sources: list[str]) -> None:
        """Collect the service endpoints of the loaded documents.

        Port addresses come first; a URL source (query string removed)
        is added when no port declares it.
        """
        urls = [location.url for location in self.locations]
        for document, source in zip(self.documents, sources):
            candidates = list(document.get_addresses())
            if is_url(source):
                candidates.append(source.split("?", 1)[0])
            for url in candidates:
                if url not in urls:
                    urls.append(url)
                    self.locations.append(Location(url))

    def save_source(self) -> Path:
        """Filter the service and write the generated module."""
        filtered = create_filter(self.config).filter(self.service)
        service_class = filtered.get_class()
        return OutputManager(self.config).save(service_class, filtered.types)

    def save_schema(self) -> list[Path]:
        """Copy each loaded document into the output directory.

        A source loaded twice is copied once; different sources sharing a
        file name get a numbered suffix (``weather_2.wsdl``).
        """
        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        copies: dict[str, Path] = {}
        for document in self.documents:
            if document.source in copies:
                continue
            name = Path(document.file_name)
            target = output_dir / name
            index = 2
            while target in copies.values():
                target = output_dir / f"{name.stem}_{index}{name.suffix}"
                index += 1
            document.save(target)
            copies[document.source] = target
            logger.debug("Copied %s to %s", document.source, target)
        return list(copies.values())

    @property
    def types(self) -> list[SchemaType]:
        return self.registry.types

    def get_methods(self) -> list[Method]:
        return self.methods

    def get_service(self) -> Service | None:
        return self.service

    def get_locations(self) -> list[Location]:
        return self.locations

    def get_definition(self) -> dict[str, Any]:
        """The definition bundle consumed by renderers."""
        if self.service is None:
            raise ConfigurationError("No service loaded")
        return {
            "methods": self.get_methods(),
            "locations": self.get_locations(),
            "service_identifier": self.service.identifier,
        }
