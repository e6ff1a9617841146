"""Example generator CLI commands."""

import argparse

from codegen_sections.sections.errors import SectionError


def _capture_path(args: argparse.Namespace) -> str | None:
    if args.fresh:
        return None
    return args.capture or args.output


def _report(result: dict) -> None:
    print(f"Wrote {result['path']}")
    for name, origin in result["sections"].items():
        print(f"  {name:<24} {origin}")
    for name in result["orphaned"]:
        print(f"  {name:<24} dropped (not registered)")


def cmd_generate_header(args: argparse.Namespace) -> int:
    from codegen_sections.examples import generate_example_header

    try:
        result = generate_example_header(args.output, _capture_path(args))
    except SectionError as e:
        print(f"ERROR: {e}")
        return 1
    _report(result)
    return 0


def cmd_generate_source(args: argparse.Namespace) -> int:
    from codegen_sections.examples import generate_example_source

    try:
        result = generate_example_source(args.output, args.header_name, _capture_path(args))
    except SectionError as e:
        print(f"ERROR: {e}")
        return 1
    _report(result)
    return 0
