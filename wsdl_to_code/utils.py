"""
Utility functions for the WSDL to code generator.
"""

import keyword
import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Acronym/word boundaries for snake_case conversion
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize the first letter of each word and join them together."""
    return "".join(word[0].upper() + word[1:] for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Unlike ``str.capitalize`` the remainder of each word is kept, so schema
    names that are already PascalCase survive unchanged.

    Examples:
        "first_name" -> "FirstName"
        "getWeather" -> "GetWeather"
        "ArrayOfString" -> "ArrayOfString"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def pascal_to_snake_case(text: str) -> str:
    """Convert PascalCase or camelCase text to snake_case.

    Examples:
        "GetWeather" -> "get_weather"
        "GetHTTPHeaders" -> "get_http_headers"
        "WeatherSoap" -> "weather_soap"
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", text)
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    name = re.sub(r"[^0-9a-zA-Z]+", "_", name)
    return name.strip("_").lower()


def class_identifier(name: str, prefix: str = "", suffix: str = "") -> str:
    """Build the class identifier of a schema name."""
    return f"{prefix}{snake_to_pascal_case(name)}{suffix}"


def to_python_identifier(name: str) -> str:
    """Make a schema member name usable as a Python attribute name."""
    identifier = re.sub(r"\W", "_", name)
    if not identifier or identifier[0].isdigit():
        identifier = f"_{identifier}"
    if keyword.iskeyword(identifier):
        identifier += "_"
    return identifier
