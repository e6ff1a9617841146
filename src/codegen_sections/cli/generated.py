"""Generated-block CLI commands."""

import argparse
import sys

from codegen_sections.sections.errors import SectionError


def cmd_generated_embed(args: argparse.Namespace) -> int:
    from codegen_sections.generated import GeneratedCodeManager

    if args.content_file == "-":
        content = sys.stdin.read()
    else:
        with open(args.content_file) as f:
            content = f.read()

    manager = GeneratedCodeManager()
    try:
        manager.set_section(args.tool, args.purpose, content)
        action = manager.embed(args.file, dry_run=args.dry_run)
    except (SectionError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"  {action}: {args.file}")
    if args.dry_run:
        print("\n[DRY RUN] No files were modified.")
    return 0
