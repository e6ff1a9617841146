"""Command-line interface for codegen-sections.

Usage:
    codegen-sections sections scan <file> [--manifest <sections.yaml>]
    codegen-sections sections check <file>
    codegen-sections generate header <output> [--capture <file>] [--fresh]
    codegen-sections generate source <output> [--header-name <name>] [--capture <file>] [--fresh]
    codegen-sections generated embed <file> --tool T --purpose P --content-file F [--dry-run]
"""

import argparse
import sys

from codegen_sections import __version__
from codegen_sections.cli.generate import cmd_generate_header, cmd_generate_source
from codegen_sections.cli.generated import cmd_generated_embed
from codegen_sections.cli.sections import cmd_sections_check, cmd_sections_scan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codegen-sections",
        description="Regenerate C/C++ files while preserving user sections",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    # sections
    sec = sub.add_parser("sections", help="Inspect user sections in a file")
    sec_sub = sec.add_subparsers(dest="subcommand")

    scan = sec_sub.add_parser("scan", help="List user sections captured from a file")
    scan.add_argument("file")
    scan.add_argument(
        "--manifest", default=None,
        help="Section manifest (YAML) to compare against",
    )

    check = sec_sub.add_parser("check", help="Validate user section markers")
    check.add_argument("file")

    # generate
    gen = sub.add_parser("generate", help="Run the example generators")
    gen_sub = gen.add_subparsers(dest="subcommand")

    hdr = gen_sub.add_parser("header", help="Generate the example C header")
    hdr.add_argument("output")
    hdr.add_argument(
        "--capture", default=None,
        help="Previous output to capture from (default: the output file)",
    )
    hdr.add_argument(
        "--fresh", action="store_true",
        help="Ignore any previous output and write defaults only",
    )

    src = gen_sub.add_parser("source", help="Generate the example C source")
    src.add_argument("output")
    src.add_argument(
        "--header-name", default="example.h",
        help="Header to #include (default: example.h)",
    )
    src.add_argument(
        "--capture", default=None,
        help="Previous output to capture from (default: the output file)",
    )
    src.add_argument(
        "--fresh", action="store_true",
        help="Ignore any previous output and write defaults only",
    )

    # generated
    gcode = sub.add_parser("generated", help="Generated blocks in user-owned files")
    gcode_sub = gcode.add_subparsers(dest="subcommand")

    emb = gcode_sub.add_parser("embed", help="Embed a generated block into a file")
    emb.add_argument("file")
    emb.add_argument("--tool", required=True, help="Generating tool name")
    emb.add_argument("--purpose", required=True, help="Block purpose")
    emb.add_argument(
        "--content-file", required=True,
        help="File holding the block body ('-' for stdin)",
    )
    emb.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("sections", "scan"): cmd_sections_scan,
        ("sections", "check"): cmd_sections_check,
        ("generate", "header"): cmd_generate_header,
        ("generate", "source"): cmd_generate_source,
        ("generated", "embed"): cmd_generated_embed,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
