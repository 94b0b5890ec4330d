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

"""Document loader: source name -> parsed document tree."""

import logging
from pathlib import Path
from typing import Optional, Union

from .capabilities import DocumentParser
from .exceptions import EmptyDocumentError, MissingCapabilityError, NotFoundError, ParseError, ReadError
from .models import FORMAT_JSON, FORMAT_YAML, LoadedDocument
from .parsers.json_parser import JsonDocumentParser

logger = logging.getLogger(__name__)


YAML_SUFFIXES = (".yaml", ".yml")


def _is_empty(data) -> bool:
    # An empty mapping or list is still a document; the schema decides about it
    if isinstance(data, (dict, list)):
        return False
    return not data


def detect_format(source: Union[str, Path]) -> str:
    """Infer the document format from the source name alone."""
    return FORMAT_YAML if str(source).endswith(YAML_SUFFIXES) else FORMAT_JSON


class DocumentLoader:
    """Reads and parses OKP documents."""

    def __init__(self, yaml_parser: Optional[DocumentParser] = None):
        """Initialize the loader.

        Args:
            yaml_parser: YAML capability, or None when PyYAML is unavailable.
        """
        self.json_parser = JsonDocumentParser()
        self.yaml_parser = yaml_parser

    def _parser_for(self, source: str) -> DocumentParser:
        if detect_format(source) == FORMAT_JSON:
            return self.json_parser
        if self.yaml_parser is None:
            raise MissingCapabilityError(
                "PyYAML not installed. Run: pip install PyYAML",
                source=source,
                capability="yaml",
            )
        return self.yaml_parser

    def load(self, source: Union[str, Path]) -> LoadedDocument:
        """Load a document.

        Args:
            source: Path of the document to load

        Returns:
            The parsed document

        Raises:
            LoadError: One of its subclasses, carrying the verdict message
        """
        name = str(source)
        path = Path(source)

        try:
            exists = path.exists()
            is_file = exists and path.is_file()
        except OSError as exc:
            # e.g. a file name longer than the file system allows
            raise ReadError(f"Cannot read file: {exc}", source=name) from exc

        if not exists:
            raise NotFoundError(f"File not found: {name}", source=name)

        if not is_file:
            raise ReadError(f"Cannot read file: {name} is not a regular file", source=name)

        try:
            logger.debug(f"Reading document: {path}")
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Cannot read file: {exc}", source=name) from exc

        return self.load_text(content, name)

    def load_text(self, content: str, source: str) -> LoadedDocument:
        """Parse already-read ``content`` as if it came from ``source``."""
        parser = self._parser_for(source)
        try:
            data, source_map = parser.parse_with_source(content)
        except ParseError as exc:
            exc.source = source
            raise

        if _is_empty(data):
            raise EmptyDocumentError("Empty document", source=source)

        return LoadedDocument(source=source, data=data, format=parser.FORMAT, source_map=source_map)
