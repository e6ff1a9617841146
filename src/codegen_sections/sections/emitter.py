"""Write a resolved section, wrapped in its markers, through a CodeWriter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codegen_sections.sections.markers import begin_marker, end_marker

if TYPE_CHECKING:
    from codegen_sections.sections.store import SectionStore
    from codegen_sections.writer import CodeWriter


def emit(writer: CodeWriter, store: SectionStore, name: str, describe: bool = False) -> None:
    """Emit one section: begin marker, resolved body, end marker.

    The markers follow the writer's indentation; the body is written
    verbatim. A non-empty body without a trailing newline is terminated so
    the end marker stays on its own line. Nothing is written when ``name``
    is unknown.

    Args:
        writer: Destination writer.
        store: Store the body is resolved from.
        name: Registered section name.
        describe: Write the section's registered description as a comment
            line before the begin marker.

    Raises:
        UnknownSection: ``name`` is not registered in the store's registry.
    """
    resolved = store.resolve_section(name)
    definition = store.registry.get(name)

    if describe and definition is not None and definition.description:
        writer.write_separator(definition.description)

    writer.writeln(begin_marker(name))
    if resolved.content:
        writer.write_raw(resolved.content)
        if not resolved.content.endswith("\n"):
            writer.newline()
    writer.writeln(end_marker(name))
