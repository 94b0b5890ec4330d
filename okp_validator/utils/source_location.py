from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union


SourceMap = Dict[str, Dict[str, int]]


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def json_pointer(path: Iterable[Union[str, int]]) -> str:
    """Render a key/index path as a JSON pointer; the root is ``""``."""
    return "".join(f"/{json_pointer_escape(str(token))}" for token in path)


@dataclass(frozen=True)
class SourceLocation:
    pointer: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(source_map: Optional[SourceMap], pointer: Optional[str]) -> SourceLocation:
    """Find the location of ``pointer``, walking up to the nearest mapped ancestor.

    A missing key has no node of its own, so its parent mapping is the closest
    place an editor can jump to.
    """
    if not source_map or pointer is None:
        return SourceLocation(pointer=pointer)

    candidate = pointer
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                pointer=pointer,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not candidate:
            return SourceLocation(pointer=pointer)
        candidate = candidate.rsplit("/", 1)[0]


def format_location(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.line is None:
        return ""
    if loc.column is not None:
        return f"line {loc.line}, column {loc.column}"
    return f"line {loc.line}"
