"""Registry of the user sections a generation pass knows about."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from codegen_sections.sections.errors import DuplicateSection
from codegen_sections.sections.markers import check_name


@dataclass(frozen=True)
class SectionDefinition:
    """A registered section: name plus optional description and default body."""

    name: str
    description: str | None = None
    default_content: str | None = None


class SectionRegistry:
    """Holds the section names registered for one generation pass.

    A name that was never registered can never resolve to a default and
    cannot be emitted. Registration order is kept for reporting.
    """

    def __init__(self) -> None:
        self._sections: dict[str, SectionDefinition] = {}

    def _add(self, definition: SectionDefinition) -> SectionDefinition:
        if definition.name in self._sections:
            raise DuplicateSection(definition.name)
        self._sections[definition.name] = definition
        return definition

    def define(self, name: str) -> SectionDefinition:
        """Register a section with no description and no default."""
        return self._add(SectionDefinition(check_name(name)))

    def define_with_description(self, name: str, description: str) -> SectionDefinition:
        return self._add(SectionDefinition(check_name(name), description=description))

    def define_with_default(
        self,
        name: str,
        description: str | None,
        default_content: str,
    ) -> SectionDefinition:
        """Register a section whose body falls back to ``default_content``."""
        return self._add(
            SectionDefinition(
                check_name(name),
                description=description,
                default_content=default_content,
            )
        )

    def is_defined(self, name: str) -> bool:
        return name in self._sections

    def get(self, name: str) -> SectionDefinition | None:
        return self._sections.get(name)

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[SectionDefinition]:
        return iter(list(self._sections.values()))
