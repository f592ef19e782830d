#!/usr/bin/env python3

import click
import pytest

from wsdl_to_code.cli_utils import reconstruct_command_line
from wsdl_to_code.wsdl_to_code import wsdl_to_code


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        assert reconstruct_command_line(wsdl_to_code) == "wsdl_to_code"

    def test_reconstruct_command_line_with_context(self, tmp_path):
        """Arguments come first, then non-default options; existing paths are shown by name"""
        wsdl = tmp_path / "weather.wsdl"
        wsdl.write_text("<definitions/>")

        ctx = click.Context(wsdl_to_code)
        ctx.params = {
            "inputs": (str(wsdl), "http://example.com/stations?wsdl"),
            "output_dir": None,
            "shared_types": True,
            "operations": ("GetWeather", "Ping"),
            "force": False,
        }
        with ctx:
            result = reconstruct_command_line(wsdl_to_code)

        assert result == (
            "wsdl_to_code weather.wsdl http://example.com/stations?wsdl "
            "--shared-types --operation GetWeather --operation Ping"
        )

    def test_reconstruct_command_line_empty_params(self):
        """A context without parameters falls back to the command name"""
        with click.Context(wsdl_to_code):
            assert reconstruct_command_line(wsdl_to_code) == "wsdl_to_code"


if __name__ == "__main__":
    pytest.main([__file__])
