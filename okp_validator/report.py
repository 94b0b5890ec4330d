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

"""Status lines and run aggregation."""

import json
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .models import Verdict, Violation
from .utils.source_location import SourceLocation, format_location


PASS_MARK = "✅"
FAIL_MARK = "❌"


@dataclass(frozen=True)
class ReportEntry:
    source: str
    verdict: Verdict


class RunResult:
    """Container for the verdicts of one run, in input order."""

    def __init__(self):
        self.entries: List[ReportEntry] = []

    def add(self, source: str, verdict: Verdict) -> None:
        """Append the verdict for ``source``.

        Args:
            source: Source identifier as given by the caller
            verdict: Verdict for that source
        """
        self.entries.append(ReportEntry(source=str(source), verdict=verdict))

    @property
    def valid(self) -> bool:
        return all(entry.verdict.valid for entry in self.entries)

    @property
    def failures(self) -> List[ReportEntry]:
        return [entry for entry in self.entries if not entry.verdict.valid]

    def __len__(self) -> int:
        return len(self.entries)


def aggregate(entries: Iterable[Tuple[str, Verdict]]) -> RunResult:
    """Fold ``(source, verdict)`` pairs into a :class:`RunResult`."""
    result = RunResult()
    for source, verdict in entries:
        result.add(source, verdict)
    return result


def format_status_line(source: str, verdict: Verdict) -> str:
    status = PASS_MARK if verdict.valid else FAIL_MARK
    return f"{status} {source}: {verdict.message}"


def _format_detail(violation: Violation) -> str:
    location = format_location(
        SourceLocation(pointer=violation.pointer, line=violation.line, column=violation.column)
    )
    where = f" ({location})" if location else ""
    return f"  - {violation.display_path}{where}: {violation.message}"


def render_human(result: RunResult, details: bool = False) -> List[str]:
    """One status line per source; with ``details``, every violation below it."""
    lines = []
    for entry in result.entries:
        lines.append(format_status_line(entry.source, entry.verdict))
        if details and len(entry.verdict.violations) > 1:
            lines.extend(_format_detail(v) for v in entry.verdict.violations)
    return lines


def _violation_to_dict(violation: Violation) -> dict:
    data = {"path": violation.pointer, "message": violation.message}
    if violation.line is not None:
        data["line"] = violation.line
    if violation.column is not None:
        data["column"] = violation.column
    return data


def render_json(result: RunResult) -> str:
    output = {
        "files": len(result),
        "valid": result.valid,
        "failures": len(result.failures),
        "results": [
            {
                "file": entry.source,
                "valid": entry.verdict.valid,
                "mode": entry.verdict.mode,
                "message": entry.verdict.message,
                "violations": [_violation_to_dict(v) for v in entry.verdict.violations],
            }
            for entry in result.entries
        ],
    }
    return json.dumps(output, indent=2, ensure_ascii=False)


def render_github_actions(result: RunResult) -> List[str]:
    lines = []
    for entry in result.failures:
        violations = entry.verdict.violations
        if not violations:
            lines.append(f"::error file={entry.source},line=1::{entry.verdict.message}")
            continue
        for violation in violations:
            line = violation.line if violation.line is not None else 1
            lines.append(f"::error file={entry.source},line={line}::{violation.describe()}")
    return lines
