"""codegen-sections - keep hand-written code alive across code regeneration.

Generated C/C++ files carry user sections delimited by marker comments.
Each generation pass captures the bodies of the previous output and
writes them back between the same markers, so regenerating with no
changes is a no-op on disk.
"""

from codegen_sections.sections.capture import CapturedSection, CaptureResult, capture
from codegen_sections.sections.errors import (
    DuplicateSection,
    InvalidSectionName,
    MismatchedSection,
    OrphanedSectionWarning,
    SectionError,
    StrayEndMarker,
    UnknownSection,
    UnterminatedSection,
)
from codegen_sections.sections.markers import begin_marker, end_marker, parse_marker
from codegen_sections.sections.registry import SectionDefinition, SectionRegistry
from codegen_sections.sections.store import Origin, ResolvedSection, SectionStore
from codegen_sections.writer import CodeWriter

__version__ = "0.1.0"

__all__ = [
    "CaptureResult",
    "CapturedSection",
    "CodeWriter",
    "DuplicateSection",
    "InvalidSectionName",
    "MismatchedSection",
    "Origin",
    "OrphanedSectionWarning",
    "ResolvedSection",
    "SectionDefinition",
    "SectionError",
    "SectionRegistry",
    "SectionStore",
    "StrayEndMarker",
    "UnknownSection",
    "UnterminatedSection",
    "begin_marker",
    "capture",
    "end_marker",
    "parse_marker",
]
