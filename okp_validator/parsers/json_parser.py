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

"""JSON document parser."""

import json
from typing import Any

from ..capabilities import DocumentParser
from ..exceptions import ParseError
from ..models import FORMAT_JSON


class JsonDocumentParser(DocumentParser):
    """Parser for JSON documents. Always available."""

    FORMAT = FORMAT_JSON
    LIBRARY = "json"

    def parse(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Parse error: {exc}") from exc
