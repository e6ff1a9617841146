"""Merge engine: captured bodies + registered defaults -> emitted content.

Precedence for a registered name is Captured > Default > Empty. Captures
are kept for every name found in the previous file, registered or not,
so orphaned sections can be reported or adopted instead of vanishing.
"""

from __future__ import annotations

import enum
import warnings
from dataclasses import dataclass
from pathlib import Path

from codegen_sections import config
from codegen_sections.sections.capture import CaptureResult, capture
from codegen_sections.sections.emitter import emit
from codegen_sections.sections.errors import OrphanedSectionWarning, UnknownSection
from codegen_sections.sections.registry import SectionRegistry
from codegen_sections.writer import CodeWriter


class Origin(enum.Enum):
    """Where a resolved section's content came from."""

    CAPTURED = "captured"
    DEFAULT = "default"
    EMPTY = "empty"


@dataclass(frozen=True)
class ResolvedSection:
    name: str
    content: str
    origin: Origin


class SectionStore:
    """Resolves section content for one generation pass.

    Usage:
        registry = SectionRegistry()
        registry.define_with_default("Includes", "Additional includes", "")
        store = SectionStore(registry)
        store.capture_from_file("out/example.h")
        with open("out/example.h", "w") as f:
            store.emit(CodeWriter(f), "Includes")
    """

    def __init__(self, registry: SectionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else SectionRegistry()
        self._captured: CaptureResult = CaptureResult()

    # ── Capture ──────────────────────────────────────────────────────

    def capture_from(self, text: str | None) -> CaptureResult:
        """Capture sections from the previous output, replacing earlier captures.

        On error the previous captures are left in place and the error
        propagates unchanged.
        """
        result = capture(text, self.registry)
        self._captured = result
        for name in result.orphaned:
            section = result.sections[name]
            warnings.warn(
                f"User section '{name}' (line {section.line}) is not registered "
                "in this pass; its content will be dropped unless it is re-registered",
                OrphanedSectionWarning,
                stacklevel=2,
            )
        return result

    def capture_from_file(self, path: Path | str, encoding: str | None = None) -> CaptureResult:
        """Capture sections from a file. A missing file means no captures.

        The file is read with universal newlines disabled so captured
        bodies keep their original line endings.
        """
        file_path = Path(path)
        if not file_path.exists():
            return self.capture_from(None)
        with open(file_path, encoding=encoding or config.file_encoding(), newline="") as f:
            text = f.read()
        return self.capture_from(text)

    @property
    def captured(self) -> CaptureResult:
        return self._captured

    @property
    def orphaned(self) -> list[str]:
        """Captured names not registered in the current registry."""
        return [name for name in self._captured.sections if not self.registry.is_defined(name)]

    def captured_names(self) -> list[str]:
        return list(self._captured.sections)

    def clear_captured(self) -> None:
        self._captured = CaptureResult()

    def adopt_orphans(self) -> list[str]:
        """Register every orphaned section so its captured body is kept.

        Returns:
            The names that were registered.
        """
        adopted = []
        for name in self.orphaned:
            self.registry.define(name)
            self._captured.known[name] = True
            adopted.append(name)
        return adopted

    # ── Resolution ───────────────────────────────────────────────────

    def resolve_section(self, name: str) -> ResolvedSection:
        definition = self.registry.get(name)
        if definition is None:
            raise UnknownSection(name)

        captured = self._captured.get(name)
        if captured is not None:
            return ResolvedSection(name, captured.raw_content, Origin.CAPTURED)
        if definition.default_content is not None:
            return ResolvedSection(name, definition.default_content, Origin.DEFAULT)
        return ResolvedSection(name, "", Origin.EMPTY)

    def resolve(self, name: str) -> str:
        """Return the content to emit for a registered section."""
        return self.resolve_section(name).content

    # ── Emission ─────────────────────────────────────────────────────

    def emit(self, writer: CodeWriter, name: str, describe: bool = False) -> None:
        emit(writer, self, name, describe=describe)
