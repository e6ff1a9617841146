"""Tests for the merge engine: resolution, capture lifecycle, and emission."""

import io
import warnings
from pathlib import Path

import pytest

from codegen_sections.sections.errors import (
    OrphanedSectionWarning,
    UnknownSection,
    UnterminatedSection,
)
from codegen_sections.sections.registry import SectionRegistry
from codegen_sections.sections.store import Origin, SectionStore
from codegen_sections.writer import CodeWriter

FIXTURES = Path(__file__).parent / "fixtures"

PRIOR_WITH_INCLUDES = (
    "#ifndef X_H\n"
    "/* USER CODE BEGIN Includes */\n"
    "#include <foo.h>\n"
    "/* USER CODE END Includes */\n"
    "#endif\n"
)


def emitted(store, *names, **kwargs):
    buf = io.StringIO()
    writer = CodeWriter(buf)
    for name in names:
        store.emit(writer, name, **kwargs)
    return buf.getvalue()


class TestResolve:
    def test_default_fallback(self, registry):
        store = SectionStore(registry)
        resolved = store.resolve_section("Includes")
        assert resolved.content == "// default\n"
        assert resolved.origin is Origin.DEFAULT

    def test_no_default_is_empty(self, registry):
        resolved = SectionStore(registry).resolve_section("Body")
        assert resolved.content == ""
        assert resolved.origin is Origin.EMPTY

    def test_capture_takes_precedence(self, registry):
        store = SectionStore(registry)
        store.capture_from(PRIOR_WITH_INCLUDES)
        assert store.resolve("Includes") == "#include <foo.h>\n"
        assert store.resolve_section("Includes").origin is Origin.CAPTURED
        assert store.resolve("Body") == ""
        assert store.resolve_section("Body").origin is Origin.EMPTY

    def test_unknown_name(self, registry):
        store = SectionStore(registry)
        with pytest.raises(UnknownSection):
            store.resolve("DoesNotExist")
        store.capture_from(PRIOR_WITH_INCLUDES)
        with pytest.raises(UnknownSection):
            store.resolve("DoesNotExist")

    def test_resolve_is_stable(self, registry):
        store = SectionStore(registry)
        store.capture_from(PRIOR_WITH_INCLUDES)
        assert store.resolve_section("Includes") == store.resolve_section("Includes")


class TestCaptureLifecycle:
    def test_orphan_is_reported_not_resolvable(self, registry, prior_text):
        store = SectionStore(registry)
        with pytest.warns(OrphanedSectionWarning, match="Legacy"):
            result = store.capture_from(prior_text)
        assert "Legacy" in result.orphaned
        assert "Legacy" in store.orphaned
        with pytest.raises(UnknownSection):
            store.resolve("Legacy")

    def test_orphan_registered_before_capture(self, registry, prior_text):
        registry.define("Legacy")
        registry.define("Header")
        store = SectionStore(registry)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            store.capture_from(prior_text)
        assert store.resolve("Legacy") == "int legacy_hook(void);\n\n"

    def test_adopt_orphans(self, registry, prior_text):
        store = SectionStore(registry)
        with pytest.warns(OrphanedSectionWarning):
            store.capture_from(prior_text)
        assert store.adopt_orphans() == ["Header", "Legacy"]
        assert store.orphaned == []
        assert store.resolve_section("Legacy").origin is Origin.CAPTURED

    def test_malformed_input_keeps_previous_state(self, registry, unterminated_text):
        store = SectionStore(registry)
        store.capture_from(PRIOR_WITH_INCLUDES)
        with pytest.raises(UnterminatedSection) as exc_info:
            store.capture_from(unterminated_text)
        assert exc_info.value.name == "Includes"
        assert store.resolve("Includes") == "#include <foo.h>\n"

    def test_malformed_input_gives_no_guessed_body(self, registry, unterminated_text):
        store = SectionStore(registry)
        with pytest.raises(UnterminatedSection):
            store.capture_from(unterminated_text)
        assert store.captured_names() == []
        assert store.resolve_section("Includes").origin is Origin.DEFAULT

    def test_last_capture_wins(self, registry):
        store = SectionStore(registry)
        store.capture_from(PRIOR_WITH_INCLUDES)
        store.capture_from("/* USER CODE BEGIN Body */\nnew\n/* USER CODE END Body */\n")
        assert store.resolve_section("Includes").origin is Origin.DEFAULT
        assert store.resolve("Body") == "new\n"

    def test_clear_captured(self, registry):
        store = SectionStore(registry)
        store.capture_from(PRIOR_WITH_INCLUDES)
        store.clear_captured()
        assert store.resolve("Includes") == "// default\n"

    def test_capture_from_missing_file(self, registry, tmp_path):
        store = SectionStore(registry)
        result = store.capture_from_file(tmp_path / "missing.h")
        assert len(result) == 0
        assert store.resolve_section("Includes").origin is Origin.DEFAULT

    def test_capture_from_file_keeps_line_endings(self, registry, tmp_path):
        path = tmp_path / "crlf.h"
        path.write_bytes(b"/* USER CODE BEGIN Body */\r\nint x;\r\n/* USER CODE END Body */\r\n")
        store = SectionStore(registry)
        store.capture_from_file(path)
        assert store.resolve("Body") == "int x;\r\n"

    def test_capture_from_file_fixture(self, registry):
        store = SectionStore(registry)
        with pytest.warns(OrphanedSectionWarning):
            store.capture_from_file(FIXTURES / "prior-example.h")
        assert store.resolve("Includes") == "#include <foo.h>\n"


class TestEmit:
    def test_emit_captured(self, registry):
        store = SectionStore(registry)
        store.capture_from(PRIOR_WITH_INCLUDES)
        assert emitted(store, "Includes") == (
            "/* USER CODE BEGIN Includes */\n"
            "#include <foo.h>\n"
            "/* USER CODE END Includes */\n"
        )

    def test_emit_empty(self, registry):
        assert emitted(SectionStore(registry), "Body") == (
            "/* USER CODE BEGIN Body */\n/* USER CODE END Body */\n"
        )

    def test_emit_unknown_writes_nothing(self, registry):
        buf = io.StringIO()
        with pytest.raises(UnknownSection):
            SectionStore(registry).emit(CodeWriter(buf), "Nope")
        assert buf.getvalue() == ""

    def test_default_without_newline_is_terminated(self):
        reg = SectionRegistry()
        reg.define_with_default("Body", None, "return 0;")
        assert emitted(SectionStore(reg), "Body") == (
            "/* USER CODE BEGIN Body */\nreturn 0;\n/* USER CODE END Body */\n"
        )

    def test_markers_follow_indent_body_is_verbatim(self, registry):
        store = SectionStore(registry)
        store.capture_from("/* USER CODE BEGIN Body */\nx;\n  y;\n/* USER CODE END Body */\n")
        buf = io.StringIO()
        writer = CodeWriter(buf, indent_size=4)
        writer.indent()
        store.emit(writer, "Body")
        assert buf.getvalue() == (
            "    /* USER CODE BEGIN Body */\nx;\n  y;\n    /* USER CODE END Body */\n"
        )

    def test_describe_writes_comment_before_marker(self, registry):
        out = emitted(SectionStore(registry), "Includes", describe=True)
        assert out.startswith("/* Additional includes */\n/* USER CODE BEGIN Includes */\n")

    def test_emit_order_independent_of_registration(self, registry):
        out = emitted(SectionStore(registry), "Body", "Includes")
        assert out.index("BEGIN Body") < out.index("BEGIN Includes")


class TestRoundTrip:
    def _render(self, store):
        buf = io.StringIO()
        writer = CodeWriter(buf)
        writer.write_ifndef("X_H")
        writer.newline()
        store.emit(writer, "Includes")
        writer.begin_function("void", "f")
        writer.indent()
        store.emit(writer, "Body")
        writer.dedent()
        writer.end_function()
        writer.write_endif()
        return buf.getvalue()

    def test_regenerate_without_edits_is_identical(self, registry):
        first = self._render(SectionStore(registry))
        store = SectionStore(registry)
        store.capture_from(first)
        assert self._render(store) == first

    def test_user_edits_survive_regeneration(self, registry):
        first = self._render(SectionStore(registry))
        edited = first.replace(
            "/* USER CODE BEGIN Body */\n",
            "/* USER CODE BEGIN Body */\n\tdo_work();\r\n\n",
        )
        store = SectionStore(registry)
        store.capture_from(edited)
        assert self._render(store) == edited
        assert store.resolve("Body") == "\tdo_work();\r\n\n"
