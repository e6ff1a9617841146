"""Section inspection CLI commands."""

import argparse
from pathlib import Path

import yaml

from codegen_sections import config
from codegen_sections.sections.capture import capture
from codegen_sections.sections.errors import SectionError


def _read(path: str) -> str:
    with open(Path(path), encoding=config.file_encoding(), newline="") as f:
        return f.read()


def cmd_sections_scan(args: argparse.Namespace) -> int:
    from codegen_sections.manifest import ManifestError, load_manifest

    registry = None
    try:
        if args.manifest:
            registry = load_manifest(args.manifest)
        result = capture(_read(args.file), registry)
    except (SectionError, ManifestError, yaml.YAMLError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"User sections in {args.file}")
    print("─" * 40)
    if not result.sections:
        print("  (none)")
    for name, section in result.sections.items():
        lines = section.raw_content.count("\n")
        status = ""
        if registry is not None:
            status = "registered" if result.known[name] else "ORPHANED"
        print(f"  {name:<24} line {section.line:<5} {lines:>4} lines  {status}".rstrip())

    if registry is not None:
        missing = [n for n in registry.names() if n not in result]
        for name in missing:
            definition = registry.get(name)
            fallback = "default" if definition.default_content is not None else "empty"
            print(f"  {name:<24} not in file (will use {fallback})")
        if result.orphaned:
            print(f"\n{len(result.orphaned)} orphaned section(s) will be dropped on regeneration")
    return 0


def cmd_sections_check(args: argparse.Namespace) -> int:
    try:
        result = capture(_read(args.file))
    except SectionError as e:
        print(f"  FAIL {args.file}: {e}")
        return 1
    print(f"  PASS {args.file}: {len(result)} user section(s)")
    return 0
