"""Document parsers.

The JSON parser only needs the standard library. The YAML parser is imported
lazily through :func:`okp_validator.capabilities.detect_capabilities` so that a
missing PyYAML degrades YAML support instead of breaking the package import.
"""

from .json_parser import JsonDocumentParser

__all__ = ["JsonDocumentParser"]
