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

"""Value types flowing through the validation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from .utils.source_location import SourceMap, json_pointer


PathToken = Union[str, int]

MODE_FULL = "full"
MODE_BASIC = "basic"
MODE_LOAD = "load"

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"


@dataclass(frozen=True)
class Violation:
    """A single mismatch between a document node and the schema."""

    path: Tuple[PathToken, ...]
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def pointer(self) -> str:
        return json_pointer(self.path)

    @property
    def display_path(self) -> str:
        return self.pointer or "(root)"

    def describe(self) -> str:
        return f"{self.display_path} {self.message}"


@dataclass(frozen=True)
class Verdict:
    """Per-document outcome: validity flag plus a human-readable message."""

    valid: bool
    message: str
    mode: str = MODE_FULL
    violations: Tuple[Violation, ...] = ()

    @classmethod
    def ok(cls, message: str = "Valid", mode: str = MODE_FULL) -> "Verdict":
        return cls(valid=True, message=message, mode=mode)

    @classmethod
    def failed(cls, message: str, mode: str = MODE_FULL, violations=()) -> "Verdict":
        return cls(valid=False, message=message, mode=mode, violations=tuple(violations))


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed document together with where it came from."""

    source: str
    data: Any
    format: str = FORMAT_JSON
    source_map: SourceMap = field(default_factory=dict)
