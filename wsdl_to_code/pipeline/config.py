"""
Configuration for the generator pipeline.

Keys may be given either in snake_case or in the camelCase spelling used by
the wsdl2php-style configuration files (``inputFile``, ``sharedTypes``...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# SoapClient feature flag: always decode single-element sequences as arrays
SOAP_SINGLE_ELEMENT_ARRAYS = 1


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> OutputConfig:
        """Create an output config from a dictionary."""
        config = OutputConfig()
        for k, v in d.items():
            if k == "mode":
                v = OutputMode(v)
            if hasattr(config, k):
                setattr(config, k, v)
        return config


# camelCase keys accepted in configuration files
_KEY_ALIASES: dict[str, str] = {
    "inputFile": "input_file",
    "outputDir": "output_dir",
    "outputFile": "output_file",
    "sharedTypes": "shared_types",
    "soapClientOptions": "soap_client_options",
    "operationNames": "operation_names",
    "classPrefix": "class_prefix",
    "classSuffix": "class_suffix",
    "copySchema": "copy_schema",
}


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Service description(s) to load, merged in order
    input_file: str | list[str] = field(default_factory=list)

    # Directory receiving the generated module and the schema copies
    output_dir: str = "."

    # Name of the generated module (empty = snake_case service name)
    output_file: str = ""

    # Collapse structurally identical types into the first declaration
    shared_types: bool = False

    # SoapClient options; only "features" is consulted
    soap_client_options: dict = field(default_factory=dict)

    # Operations to generate (empty = all operations)
    operation_names: list[str] = field(default_factory=list)

    # Prefix and suffix added to every generated class name
    class_prefix: str = ""
    class_suffix: str = ""

    # Copy each loaded service description next to the generated module
    copy_schema: bool = True

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Command line recorded in the generation comment
    generation_comment: str = ""

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def input_files(self) -> list[str]:
        """The configured inputs as an ordered list."""
        if isinstance(self.input_file, str):
            return [self.input_file] if self.input_file else []
        return list(self.input_file)

    @property
    def features(self) -> int:
        """The SoapClient features bitmask (0 when unset)."""
        return int(self.soap_client_options.get("features") or 0)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            k = _KEY_ALIASES.get(k, k)
            if k == "output" and isinstance(v, dict):
                v = OutputConfig.from_dict(v)
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "input_file": self.input_file,
            "output_dir": self.output_dir,
            "output_file": self.output_file,
            "shared_types": self.shared_types,
            "soap_client_options": self.soap_client_options,
            "operation_names": self.operation_names,
            "class_prefix": self.class_prefix,
            "class_suffix": self.class_suffix,
            "copy_schema": self.copy_schema,
            "add_generation_comment": self.add_generation_comment,
            "generation_comment": self.generation_comment,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
