"""Capture user-section bodies from a previously generated file.

The scan is a two-state machine over the lines of the file:

    Outside      -- begin(N) -->  Inside(N)
    Inside(N)    -- end(N)   -->  Outside   (body captured)

Every other marker seen in Inside(N), an end marker seen Outside, or
reaching end of text while Inside(N) is an error. The capturer never
guesses a boundary, and it never returns a partial result.

A body that itself contains a line that looks like a marker ends (or
breaks) the section at that line: the first marker wins, and the scanner
does not recurse into other sections' regions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from codegen_sections.sections.errors import (
    DuplicateSection,
    MismatchedSection,
    StrayEndMarker,
    UnterminatedSection,
)
from codegen_sections.sections.markers import parse_marker
from codegen_sections.sections.registry import SectionRegistry
from codegen_sections.utils import iter_lines


@dataclass(frozen=True)
class CapturedSection:
    """A section body found between a begin/end marker pair.

    ``span`` holds the (start, end) character offsets of the body in the
    captured text; ``line`` is the 1-based line of the begin marker.
    """

    name: str
    raw_content: str
    span: tuple[int, int]
    line: int


@dataclass
class CaptureResult:
    """All sections captured from one file, in file order."""

    sections: dict[str, CapturedSection] = field(default_factory=dict)
    known: dict[str, bool] = field(default_factory=dict)

    @property
    def orphaned(self) -> list[str]:
        """Captured names that were not registered at capture time."""
        return [name for name in self.sections if not self.known.get(name, False)]

    def get(self, name: str) -> CapturedSection | None:
        return self.sections.get(name)

    def bodies(self) -> dict[str, str]:
        return {name: s.raw_content for name, s in self.sections.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.sections

    def __len__(self) -> int:
        return len(self.sections)


@dataclass
class _Open:
    """Scanner state while inside a section."""

    name: str
    line: int
    offset: int
    body_start: int


def capture(text: str | None, registry: SectionRegistry | None = None) -> CaptureResult:
    """Extract every well-formed user section from ``text``.

    Args:
        text: Full text of the previous output, or None when there is no
            previous file.
        registry: Registry of the current pass. Used only to flag captured
            names as known or orphaned; capture itself does not depend on it.

    Returns:
        CaptureResult with verbatim bodies keyed by section name.

    Raises:
        UnterminatedSection: a begin marker with no matching end marker.
        MismatchedSection: an end marker for another section inside an open one.
        DuplicateSection: the same section opened twice.
        StrayEndMarker: an end marker with no open section.
    """
    result = CaptureResult()
    if text is None:
        return result

    current: _Open | None = None

    for lineno, start, line in iter_lines(text):
        marker = parse_marker(line)
        if marker is None:
            continue

        if current is None:
            if not marker.is_begin:
                raise StrayEndMarker(marker.name, lineno, start)
            if marker.name in result.sections:
                raise DuplicateSection(marker.name, lineno, start)
            current = _Open(
                name=marker.name,
                line=lineno,
                offset=start,
                body_start=min(start + len(line) + 1, len(text)),
            )
            continue

        if marker.is_begin:
            if marker.name == current.name:
                raise DuplicateSection(marker.name, lineno, start)
            raise UnterminatedSection(
                current.name, current.line, current.offset,
                reason=f"begin marker for '{marker.name}' at line {lineno}",
            )

        if marker.name != current.name:
            raise MismatchedSection(
                current.name, current.line, current.offset,
                found=marker.name, found_line=lineno,
            )

        result.sections[current.name] = CapturedSection(
            name=current.name,
            raw_content=text[current.body_start:start],
            span=(current.body_start, start),
            line=current.line,
        )
        current = None

    if current is not None:
        raise UnterminatedSection(
            current.name, current.line, current.offset,
            reason="reached end of file",
        )

    for name in result.sections:
        result.known[name] = registry is not None and registry.is_defined(name)
    return result
