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

"""YAML document parser with source locations."""

import logging
from typing import Any, Tuple

import yaml

from ..capabilities import DocumentParser
from ..exceptions import ParseError
from ..models import FORMAT_YAML
from ..utils.source_location import SourceMap, json_pointer_escape

logger = logging.getLogger(__name__)


class YamlDocumentParser(DocumentParser):
    """Parser for YAML documents backed by PyYAML's safe loader."""

    FORMAT = FORMAT_YAML
    LIBRARY = "PyYAML"

    def parse(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ParseError(f"Parse error: {exc}") from exc

    def parse_with_source(self, text: str) -> Tuple[Any, SourceMap]:
        data = self.parse(text)
        return data, self.build_source_map(text)

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by safe_load.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # safe_load already accepted the text; a location map is best effort
            logger.debug("Could not compose YAML node tree; no source locations")
            return source_map

        if root is None:
            return source_map

        def _walk(node, path: str) -> None:
            mark = node.start_mark
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map
