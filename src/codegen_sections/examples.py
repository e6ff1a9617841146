"""Example generators for a C header/source pair with user sections.

Both generators follow the same pass: register sections, capture the
previous output (if any), render the skeleton with the sections
interleaved into memory, then write the file in one go. A capture error
leaves the previous file untouched.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from codegen_sections import config
from codegen_sections.sections.registry import SectionRegistry
from codegen_sections.sections.store import SectionStore
from codegen_sections.utils import include_guard
from codegen_sections.writer import CodeWriter


def header_registry() -> SectionRegistry:
    reg = SectionRegistry()
    reg.define_with_description("Header", "File header comment")
    reg.define_with_default(
        "Includes", "Additional includes",
        "#include <stdio.h>\n#include <stdlib.h>\n",
    )
    reg.define_with_default(
        "Typedefs", "User-defined types",
        "typedef unsigned int uint32_t;\ntypedef unsigned char uint8_t;\n",
    )
    reg.define_with_default(
        "Constants", "User-defined constants",
        '#define MAX_BUFFER_SIZE 1024\n#define VERSION "1.0.0"\n',
    )
    reg.define("Functions")
    return reg


def source_registry() -> SectionRegistry:
    reg = SectionRegistry()
    reg.define_with_description("Header", "File header comment")
    reg.define_with_default("Includes", "Additional includes", "")
    reg.define_with_default(
        "Globals", "Global variables",
        "static ExampleStruct g_examples[MAX_BUFFER_SIZE];\nstatic int g_count = 0;\n",
    )
    reg.define_with_default(
        "InitFunction", "Initialization function implementation",
        "    // Initialize the example system\n"
        "    g_count = 0;\n"
        "    memset(g_examples, 0, sizeof(g_examples));\n",
    )
    reg.define_with_default(
        "ProcessFunction", "Processing function implementation",
        "    // Process the data\n"
        "    if (data == NULL || size == 0) {\n"
        "        return -1;\n"
        "    }\n"
        "\n"
        "    // Copy data to global storage\n"
        "    if (g_count < MAX_BUFFER_SIZE) {\n"
        "        g_examples[g_count++] = *data;\n"
        "        return 0;\n"
        "    }\n"
        "\n"
        "    return -1;\n",
    )
    reg.define_with_default(
        "CleanupFunction", "Cleanup function implementation",
        "    // Clean up resources\n    g_count = 0;\n",
    )
    return reg


def _prepare(registry: SectionRegistry, capture_path: Path | str | None) -> SectionStore:
    store = SectionStore(registry)
    if capture_path is not None:
        store.capture_from_file(capture_path)
    return store


def _write_output(output_path: Path, buf: io.StringIO, store: SectionStore) -> dict[str, Any]:
    with open(output_path, "w", encoding=config.file_encoding(), newline="") as f:
        f.write(buf.getvalue())
    return {
        "path": str(output_path),
        "sections": {
            name: store.resolve_section(name).origin.value for name in store.registry.names()
        },
        "orphaned": store.orphaned,
    }


def generate_example_header(
    output_path: Path | str,
    capture_path: Path | str | None = None,
) -> dict[str, Any]:
    """Generate a C header with user-modifiable sections.

    Args:
        output_path: File to write.
        capture_path: Previous output to capture user sections from.
            Usually the same as ``output_path``.

    Returns:
        Dict with the written path, the origin of each section, and the
        orphaned section names.
    """
    out = Path(output_path)
    store = _prepare(header_registry(), capture_path)

    buf = io.StringIO()
    writer = CodeWriter(buf)

    store.emit(writer, "Header", describe=True)

    guard = include_guard(out.name)
    writer.write_ifndef(guard)
    writer.write_define(guard)
    writer.newline()

    for name in ("Includes", "Typedefs", "Constants"):
        store.emit(writer, name, describe=True)
        writer.newline()

    writer.write_separator("Struct definitions")
    writer.write_typedef_struct("ExampleStruct")
    writer.begin_struct("ExampleStruct")
    writer.indent()
    writer.write_variable("int", "id", "Unique identifier")
    writer.write_variable("char*", "name", "Name string")
    writer.write_variable("uint32_t", "flags", "Bit flags")
    writer.dedent()
    writer.end_struct()
    writer.newline()

    writer.write_separator("Function declarations")
    writer.write_function_declaration("void", "example_init")
    writer.write_function_declaration(
        "int", "example_process", [("ExampleStruct*", "data"), ("uint32_t", "size")],
    )
    writer.write_function_declaration("void", "example_cleanup")
    writer.newline()

    store.emit(writer, "Functions", describe=True)
    writer.newline()

    writer.write_endif(guard)

    return _write_output(out, buf, store)


def generate_example_source(
    output_path: Path | str,
    header_name: str,
    capture_path: Path | str | None = None,
) -> dict[str, Any]:
    """Generate the C source file matching generate_example_header()."""
    out = Path(output_path)
    store = _prepare(source_registry(), capture_path)

    buf = io.StringIO()
    writer = CodeWriter(buf)

    store.emit(writer, "Header", describe=True)

    writer.write_include(header_name)
    writer.write_include("string.h", is_system=True)

    store.emit(writer, "Includes", describe=True)
    writer.newline()

    store.emit(writer, "Globals", describe=True)
    writer.newline()

    writer.write_separator("Function implementations")

    writer.begin_function("void", "example_init")
    store.emit(writer, "InitFunction")
    writer.end_function()
    writer.newline()

    writer.begin_function(
        "int", "example_process", [("ExampleStruct*", "data"), ("uint32_t", "size")],
    )
    store.emit(writer, "ProcessFunction")
    writer.end_function()
    writer.newline()

    writer.begin_function("void", "example_cleanup")
    store.emit(writer, "CleanupFunction")
    writer.end_function()

    return _write_output(out, buf, store)
