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

"""Schema-driven validation of OKP documents.

Only the first violation ends up in the verdict message. Violations keep
the order in which the matcher finds them: a walk from the root to the
leaves following the schema's declared keyword and property order, then
array indices. "required" is declared before "properties", so a missing
top-level key is always the first violation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .capabilities import CompiledSchema, SchemaMatcher
from .models import MODE_BASIC, MODE_FULL, LoadedDocument, Verdict, Violation
from .utils.source_location import lookup_source

logger = logging.getLogger(__name__)


# Top-level keys checked when no schema matcher is available
BASIC_REQUIRED_FIELDS = ("okp", "agents")

VALID_MESSAGE = "Valid"
BASIC_VALID_MESSAGE = "Valid (basic check - install jsonschema for full validation)"


class SchemaValidator:
    """Validates parsed documents against the OKP schema."""

    def __init__(
        self,
        schema: Optional[Dict[str, Any]],
        matcher: Optional[SchemaMatcher] = None,
        all_violations: bool = False,
    ):
        """Initialize the validator.

        Args:
            schema: The loaded OKP schema
            matcher: Schema-matching capability; None selects the basic check
            all_violations: Attach every violation to failing verdicts
        """
        self.schema = schema
        self.matcher = matcher
        self.all_violations = all_violations
        self._compiled: Optional[CompiledSchema] = None
        if matcher is not None:
            self._compiled = matcher.compile(schema)

    @property
    def mode(self) -> str:
        return MODE_FULL if self._compiled is not None else MODE_BASIC

    def collect_violations(self, document: Any) -> List[Violation]:
        """Return every violation of ``document`` in report order."""
        if self._compiled is None:
            return self._basic_violations(document)
        return list(self._compiled.iter_violations(document))

    def validate(self, document: Any) -> Verdict:
        """Validate a document tree (or a :class:`LoadedDocument`)."""
        if self._compiled is None:
            return self.validate_basic(document)

        data, source_map = _unwrap(document)
        violations = self.collect_violations(data)
        if not violations:
            return Verdict.ok(VALID_MESSAGE, mode=MODE_FULL)

        if source_map:
            violations = [_locate(v, source_map) for v in violations]
        first = violations[0]
        logger.debug(f"{len(violations)} violation(s); reporting {first.display_path}")
        return Verdict.failed(
            f"Validation error: {first.describe()}",
            mode=MODE_FULL,
            violations=violations if self.all_violations else violations[:1],
        )

    def validate_basic(self, document: Any) -> Verdict:
        """Reduced check: only the presence of the required top-level keys."""
        data, source_map = _unwrap(document)
        violations = self._basic_violations(data)
        if not violations:
            return Verdict.ok(BASIC_VALID_MESSAGE, mode=MODE_BASIC)

        if source_map:
            violations = [_locate(v, source_map) for v in violations]
        first = violations[0]
        return Verdict.failed(
            first.message,
            mode=MODE_BASIC,
            violations=violations if self.all_violations else violations[:1],
        )

    @staticmethod
    def _basic_violations(data: Any) -> List[Violation]:
        if not isinstance(data, dict):
            return [Violation(path=(), message="Root must be a mapping/object")]
        return [
            Violation(path=(key,), message=f"Missing required field: '{key}'")
            for key in BASIC_REQUIRED_FIELDS
            # only absent or null is missing; "", 0 and false are present
            if data.get(key) is None
        ]


def _unwrap(document: Any):
    if isinstance(document, LoadedDocument):
        return document.data, document.source_map
    return document, None


def _locate(violation: Violation, source_map) -> Violation:
    loc = lookup_source(source_map, violation.pointer)
    return Violation(
        path=violation.path,
        message=violation.message,
        line=loc.line,
        column=loc.column,
    )
