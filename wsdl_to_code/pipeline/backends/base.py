"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..config import GeneratorConfig
from ..model.service import ServiceClass
from ..model.types import SchemaType


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from XSD builtin types to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["docstring"] = self._escape_docstring
        self.jinja_env.filters["pyrepr"] = repr

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.service_template = self.jinja_env.get_template(f"service.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, service_class: ServiceClass, types: list[SchemaType]) -> str:
        """
        Generate code for a service and its types.

        Args:
            service_class: Render model of the service
            types: The types to render, in registration order

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, type_name: str) -> str:
        """
        Translate a schema type name to a language-specific type string.

        Args:
            type_name: Schema type name, ``[]``-suffixed for repeated elements

        Returns:
            Language-specific type string
        """

    @staticmethod
    def _escape_docstring(text: str) -> str:
        text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
        if text.endswith('"'):
            text = text[:-1] + '\\"'
        return text
