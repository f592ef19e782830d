"""
Output manager writing the rendered module.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils import pascal_to_snake_case
from .atomic_writer import AtomicWriter
from .backends.python_backend import PythonBackend
from .config import GeneratorConfig, OutputMode
from .model.service import ServiceClass
from .model.types import SchemaType

logger = logging.getLogger(__name__)


class OutputManager:
    """Renders the service and its types and writes the module."""

    def __init__(self, config: GeneratorConfig):
        self.config = config
        self.backend = PythonBackend(config)
        self.writer = AtomicWriter()

    def output_path(self, service_class: ServiceClass) -> Path:
        file_name = self.config.output_file or f"{pascal_to_snake_case(service_class.name)}.py"
        return Path(self.config.output_dir) / file_name

    def save(self, service_class: ServiceClass, types: list[SchemaType]) -> Path:
        """
        Render and write the module.

        Args:
            service_class: Render model of the service
            types: The types to render

        Returns:
            Path of the written module

        Raises:
            FileExistsError: If the module exists and the output mode is "error"
            OutputError: If the rendered module is not valid Python
        """
        code = self.backend.generate(service_class, types)
        path = self.output_path(service_class)
        validate = self.config.output.validate_before_write

        error_if_exists = self.config.output.mode == OutputMode.ERROR_IF_EXISTS

        if not self.config.output.atomic_write:
            if error_if_exists and path.exists():
                raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
            if validate:
                self.writer.validate(code)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(code, encoding="utf-8")
        elif error_if_exists:
            self.writer.write_if_not_exists(path, code, validate)
        else:
            self.writer.write(path, code, validate)

        logger.info("Generated %s (%d types, %d operations)", path, len(types), len(service_class.operations))
        return path
