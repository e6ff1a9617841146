"""Indentation-aware writer for C/C++ source text.

CodeWriter is a thin formatting layer over any text stream (an open file,
io.StringIO, ...). It keeps no state besides the indentation level; write
errors from the stream propagate unchanged.
"""

from __future__ import annotations

from typing import TextIO

from codegen_sections import config


def _format_args(args: list[tuple[str, str]] | None) -> str:
    if not args:
        return "(void)"
    return "(" + ", ".join(f"{type_name} {arg_name}" for type_name, arg_name in args) + ")"


class CodeWriter:
    """Write generated code with consistent indentation.

    Args:
        stream: Text stream to write to.
        indent_size: Spaces per indentation level. Defaults to the
            CODEGEN_SECTIONS_INDENT setting.
        newline: Line terminator written after each line.
        with_newline: Whether write() terminates unterminated text.
    """

    def __init__(
        self,
        stream: TextIO,
        indent_size: int | None = None,
        newline: str = "\n",
        with_newline: bool = True,
    ) -> None:
        self.stream = stream
        self.indent_size = config.indent_size() if indent_size is None else indent_size
        self.newline_str = newline
        self.with_newline = with_newline
        self.indent_level = 0

    # ── Indentation ──────────────────────────────────────────────────

    def indent(self) -> None:
        self.indent_level += 1

    def dedent(self) -> None:
        if self.indent_level > 0:
            self.indent_level -= 1

    @property
    def current_indent(self) -> str:
        return " " * (self.indent_level * self.indent_size)

    # ── Raw output ───────────────────────────────────────────────────

    def write(self, content: str) -> None:
        """Write text, indenting every non-blank line.

        Empty content writes a bare line terminator when ``with_newline``
        is set.
        """
        if not content:
            if self.with_newline:
                self.stream.write(self.newline_str)
            return

        indent = self.current_indent
        lines = content.split("\n")
        for i, line in enumerate(lines):
            if i > 0:
                self.stream.write(self.newline_str)
            if line:
                self.stream.write(indent + line)

        if self.with_newline and not content.endswith("\n"):
            self.stream.write(self.newline_str)

    def writeln(self, content: str = "") -> None:
        """Write text followed by a line terminator."""
        prev = self.with_newline
        self.with_newline = True
        try:
            self.write(content)
        finally:
            self.with_newline = prev

    def newline(self) -> None:
        self.stream.write(self.newline_str)

    def write_raw(self, content: str) -> None:
        """Write text exactly as given: no indentation, no terminator."""
        self.stream.write(content)

    def flush(self) -> None:
        self.stream.flush()

    # ── Comments ─────────────────────────────────────────────────────

    def write_comment(self, comment: str) -> None:
        """Write a ``//`` comment, or a block comment for multi-line text."""
        if "\n" in comment:
            self.writeln("/*")
            for line in comment.splitlines():
                self.writeln(f" * {line}")
            self.writeln(" */")
        else:
            self.writeln(f"// {comment}")

    def write_separator(self, title: str) -> None:
        self.writeln(f"/* {title} */")

    # ── Preprocessor ─────────────────────────────────────────────────

    def write_include(self, header: str, is_system: bool = False) -> None:
        if is_system:
            self.writeln(f"#include <{header}>")
        else:
            self.writeln(f'#include "{header}"')

    def write_define(self, name: str, value: str | None = None) -> None:
        if value is None:
            self.writeln(f"#define {name}")
        else:
            self.writeln(f"#define {name} {value}")

    def write_ifdef(self, name: str) -> None:
        self.writeln(f"#ifdef {name}")

    def write_ifndef(self, name: str) -> None:
        self.writeln(f"#ifndef {name}")

    def write_endif(self, comment: str | None = None) -> None:
        if comment:
            self.writeln(f"#endif // {comment}")
        else:
            self.writeln("#endif")

    # ── Declarations ─────────────────────────────────────────────────

    def begin_struct(self, name: str) -> None:
        self.writeln(f"struct {name} {{")

    def end_struct(self) -> None:
        self.writeln("};")

    def write_typedef_struct(self, name: str) -> None:
        self.writeln(f"typedef struct {name} {name};")

    def begin_enum(self, name: str) -> None:
        self.writeln(f"enum {name} {{")

    def end_enum(self) -> None:
        self.writeln("};")

    def write_enum_member(self, name: str, value: str | None = None) -> None:
        """Write one enum member, indented one level inside the enum."""
        self.indent()
        try:
            if value is None:
                self.writeln(f"{name},")
            else:
                self.writeln(f"{name} = {value},")
        finally:
            self.dedent()

    def begin_function(
        self, ret_type: str, name: str, args: list[tuple[str, str]] | None = None,
    ) -> None:
        self.writeln(f"{ret_type} {name}{_format_args(args)} {{")

    def end_function(self) -> None:
        self.writeln("}")

    def write_function_declaration(
        self, ret_type: str, name: str, args: list[tuple[str, str]] | None = None,
    ) -> None:
        self.writeln(f"{ret_type} {name}{_format_args(args)};")

    def write_variable(self, type_name: str, var_name: str, comment: str | None = None) -> None:
        if comment:
            self.write_comment(comment)
        self.writeln(f"{type_name} {var_name};")
