"""
Tests for the C header generator.

These tests verify that the header declares the grade symbol extern,
carries the grade and option strings, and that the definition defines
exactly the symbol the header declares.
"""

import pytest
from gradekit.model import ConfigurationValue, GCMode
from gradekit.validator import ConfigError
from gradekit.grade import encode_grade, grade_symbol
from gradekit.backends.c_header import (
    HEADER_GUARD,
    generate_grade_definition,
    generate_grade_header,
    save_grade_header,
)


CONFIG = ConfigurationValue(
    asm_labels=True,
    nonlocal_gotos=True,
    global_registers=True,
    gc=GCMode.CONSERVATIVE,
    tag_bits=2,
)


class TestGradeHeader:

    def test_include_guard(self):
        header = generate_grade_header(CONFIG)
        assert f"#ifndef {HEADER_GUARD}" in header
        assert f"#define {HEADER_GUARD}" in header
        assert header.rstrip().endswith(f"#endif /* {HEADER_GUARD} */")

    def test_extern_declaration(self):
        header = generate_grade_header(CONFIG)
        assert "extern const char MR_grade_v1_asm_fast_gc_tags2;" in header

    def test_strings(self):
        header = generate_grade_header(CONFIG)
        assert '#define GRADE_STRING "v1_asm_fast_gc_tags2"' in header
        assert '#define GRADE_OPT "asm_fast.gc"' in header
        assert f"#define GRADE {encode_grade(CONFIG)}" in header

    def test_invalid_refused(self):
        with pytest.raises(ConfigError):
            generate_grade_header(ConfigurationValue(use_trail=True, use_minimal_model=True))


class TestGradeDefinition:

    def test_defines_declared_symbol(self):
        definition = generate_grade_definition(CONFIG)
        assert definition == f"const char {grade_symbol(CONFIG)} = 0;\n"
        assert grade_symbol(CONFIG) in generate_grade_header(CONFIG)

    def test_different_grades_different_symbols(self):
        other = ConfigurationValue(gc=GCMode.CONSERVATIVE)
        assert generate_grade_definition(CONFIG) != generate_grade_definition(other)


def test_save_grade_header(tmp_path):
    path = tmp_path / "grade.h"
    save_grade_header(CONFIG, str(path))
    assert path.read_text() == generate_grade_header(CONFIG)


def test_definition_is_initialized():
    """The definition carries an initializer so C++ accepts it too."""
    assert generate_grade_definition(CONFIG) == "const char MR_grade_v1_asm_fast_gc_tags2 = 0;\n"
