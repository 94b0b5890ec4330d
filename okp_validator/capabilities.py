# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Optional parsing and schema-matching capabilities.

The loader and the validator hold a reference to a capability that may be
``None``. When it is, they fall back to their reduced behaviour instead of
failing: YAML sources are rejected with an install hint, and schema matching
degrades to a presence check of the top-level keys.
"""

from __future__ import annotations

import importlib
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from .models import Violation
from .utils.source_location import SourceMap

logger = logging.getLogger(__name__)


class DocumentParser(ABC):
    """Turns raw text into a document tree."""

    FORMAT: str
    LIBRARY: str = ""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse ``text``; raise ``ParseError`` on malformed input."""

    def parse_with_source(self, text: str) -> Tuple[Any, SourceMap]:
        """Parse ``text`` and return ``(data, source_map)``."""
        return self.parse(text), {}


class CompiledSchema(ABC):
    """A schema prepared for repeated matching."""

    @abstractmethod
    def iter_violations(self, document: Any) -> Iterator[Violation]:
        """Yield violations in the order the matcher discovers them."""


class SchemaMatcher(ABC):
    """Compiles a schema dict into a :class:`CompiledSchema`."""

    LIBRARY: str = ""

    @abstractmethod
    def check_schema(self, schema: dict) -> None:
        """Raise ``SchemaLoadError`` if ``schema`` is itself malformed."""

    @abstractmethod
    def compile(self, schema: dict) -> CompiledSchema:
        """Return a compiled form of ``schema``."""


@dataclass(frozen=True)
class Capabilities:
    """The parsing/matching facilities available to a run."""

    yaml_parser: Optional[DocumentParser] = None
    matcher: Optional[SchemaMatcher] = None


def _load_capability(module_name: str, attr: str, distribution: str):
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        # Only a missing third-party library means "capability absent";
        # anything else is a packaging bug and must surface.
        if exc.name is None or exc.name.startswith(__package__):
            raise
        logger.warning(f"{distribution} is not installed; {attr} is unavailable")
        return None
    logger.debug(f"Capability available: {attr} ({distribution})")
    return getattr(module, attr)()


def detect_capabilities(basic: bool = False) -> Capabilities:
    """Build the default capabilities from the installed libraries.

    Args:
        basic: Skip schema matching even when jsonschema is installed.
    """
    yaml_parser = _load_capability(f"{__package__}.parsers.yaml_parser", "YamlDocumentParser", "PyYAML")
    if basic:
        logger.info("Schema matching disabled; using the basic presence check")
        matcher = None
    else:
        matcher = _load_capability(f"{__package__}.matching", "JsonSchemaMatcher", "jsonschema")
    return Capabilities(yaml_parser=yaml_parser, matcher=matcher)
