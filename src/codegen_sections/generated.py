"""Embed tool-owned generated blocks into user-owned files.

The inverse of user sections: here the file belongs to the user and only
the regions between GENERATED CODE markers belong to a tool.

    /* GENERATED CODE BEGIN <tool> <purpose> */
    ...
    /* GENERATED CODE END <tool> <purpose> */

Each registered block replaces the body between its markers. A block with
no markers in the file is appended; a missing file is created with every
block. Everything outside the markers is preserved untouched.
"""

from __future__ import annotations

import re
from pathlib import Path

from codegen_sections import config
from codegen_sections.sections.errors import StrayEndMarker, UnterminatedSection
from codegen_sections.utils import ensure_ends_with_newline, iter_lines

GENERATED_PREFIX = "GENERATED CODE"

# Tool and purpose are single tokens inside the marker
_TOKEN_RE = re.compile(r"[A-Za-z0-9_.\-]+")


def generated_markers(tool: str, purpose: str) -> tuple[str, str]:
    """Return the (begin, end) marker text for a generated block."""
    for token in (tool, purpose):
        if not _TOKEN_RE.fullmatch(token):
            raise ValueError(
                f"Invalid generated block token {token!r}: "
                "use letters, digits, '_', '.', or '-'"
            )
    return (
        f"/* {GENERATED_PREFIX} BEGIN {tool} {purpose} */",
        f"/* {GENERATED_PREFIX} END {tool} {purpose} */",
    )


def _body(code: str) -> str:
    return ensure_ends_with_newline(code) if code else ""


def _render_block(tool: str, purpose: str, code: str) -> str:
    begin, end = generated_markers(tool, purpose)
    return f"{begin}\n{_body(code)}{end}\n"


def _append_block(content: str, block: str) -> str:
    """Append a block after the existing text, leaving that text as it is.

    An unterminated last line is terminated and a non-empty file gets one
    blank separator line unless it already ends with one.
    """
    if not content:
        return block
    if not content.endswith("\n"):
        content += "\n"
    if not content.endswith("\n\n"):
        content += "\n"
    return content + block


def _replace_block(content: str, label: str, begin: str, end: str, code: str) -> str | None:
    """Replace the body of an existing block. Returns None when the block is absent.

    Marker lines are compared word by word, so indentation and re-spaced
    markers are still recognized.
    """
    body_start: int | None = None
    begin_line = begin_offset = 0

    begin_words, end_words = begin.split(), end.split()

    for lineno, start, line in iter_lines(content):
        words = line.split()
        if body_start is None:
            if words == begin_words:
                begin_line, begin_offset = lineno, start
                body_start = start + len(line) + 1
            elif words == end_words:
                raise StrayEndMarker(label, lineno, start)
        elif words == end_words:
            return content[:body_start] + _body(code) + content[start:]

    if body_start is not None:
        raise UnterminatedSection(label, begin_line, begin_offset)
    return None


class GeneratedCodeManager:
    """Collects generated blocks and embeds them into a file."""

    def __init__(self) -> None:
        self.sections: dict[tuple[str, str], str] = {}

    def set_section(self, tool: str, purpose: str, content: str) -> None:
        generated_markers(tool, purpose)
        self.sections[(tool, purpose)] = content

    def render(self, existing: str | None) -> str:
        """Return the file text with every block embedded.

        Args:
            existing: Current file text, or None when the file does not exist.
        """
        if existing is None:
            return "\n".join(
                _render_block(tool, purpose, code)
                for (tool, purpose), code in self.sections.items()
            )

        content = existing
        for (tool, purpose), code in self.sections.items():
            begin, end = generated_markers(tool, purpose)
            replaced = _replace_block(content, f"{tool} {purpose}", begin, end, code)
            if replaced is None:
                content = _append_block(content, _render_block(tool, purpose, code))
            else:
                content = replaced
        return content

    def embed(self, path: Path | str, dry_run: bool = False) -> str:
        """Embed all blocks into ``path``.

        Returns:
            "created", "updated", or "unchanged".
        """
        file_path = Path(path)
        encoding = config.file_encoding()

        if not file_path.exists():
            if not dry_run:
                with open(file_path, "w", encoding=encoding, newline="") as f:
                    f.write(self.render(None))
            return "created"

        with open(file_path, encoding=encoding, newline="") as f:
            content = f.read()

        new_content = self.render(content)
        if new_content == content:
            return "unchanged"
        if not dry_run:
            with open(file_path, "w", encoding=encoding, newline="") as f:
                f.write(new_content)
        return "updated"
