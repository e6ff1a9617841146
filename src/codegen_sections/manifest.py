"""Read section manifests (sections.yaml) into a SectionRegistry.

A manifest lists the user sections a generator emits:

    sections:
      - name: Includes
        description: Additional includes
        default: |
          #include <stdio.h>
      - Functions            # bare name: no description, no default
"""

from __future__ import annotations

from pathlib import Path

import yaml

from codegen_sections.sections.registry import SectionRegistry


class ManifestError(ValueError):
    """A manifest file is not shaped like a section manifest."""


def read_manifest(path: Path | str) -> dict:
    """Read and parse a manifest file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ManifestError: If the document is not a mapping.
    """
    manifest_path = Path(path)
    with open(manifest_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest at {manifest_path} is not a YAML mapping")
    return data


def registry_from_manifest(data: dict, registry: SectionRegistry | None = None) -> SectionRegistry:
    """Register every section listed in a parsed manifest.

    Raises:
        ManifestError: For entries without a name or with non-string fields.
        DuplicateSection: For a name listed twice.
        InvalidSectionName: For a name that cannot be written into a marker.
    """
    reg = registry if registry is not None else SectionRegistry()
    entries = data.get("sections", []) or []
    if not isinstance(entries, list):
        raise ManifestError("'sections' must be a list")

    for i, entry in enumerate(entries):
        if isinstance(entry, str):
            reg.define(entry)
            continue
        if not isinstance(entry, dict) or "name" not in entry:
            raise ManifestError(f"sections[{i}]: expected a name or a mapping with 'name'")

        name = entry["name"]
        description = entry.get("description")
        default = entry.get("default")
        for key, value in (("name", name), ("description", description), ("default", default)):
            if value is not None and not isinstance(value, str):
                raise ManifestError(f"sections[{i}].{key}: expected a string")

        if default is not None:
            reg.define_with_default(name, description, default)
        elif description is not None:
            reg.define_with_description(name, description)
        else:
            reg.define(name)

    return reg


def load_manifest(path: Path | str) -> SectionRegistry:
    """Read a manifest file and return a populated registry."""
    return registry_from_manifest(read_manifest(path))
