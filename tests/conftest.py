"""Shared test fixtures for codegen-sections."""

from pathlib import Path

import pytest

from codegen_sections.sections.registry import SectionRegistry

FIXTURES = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    with open(FIXTURES / name, encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def registry():
    reg = SectionRegistry()
    reg.define_with_default("Includes", "Additional includes", "// default\n")
    reg.define("Body")
    return reg


@pytest.fixture
def prior_text():
    return _read_fixture("prior-example.h")


@pytest.fixture
def unterminated_text():
    return _read_fixture("unterminated.h")
