"""
gradekit — Build Grade Encoding Package

Encodes the binary-compatibility-relevant build choices of a compiled
program into two canonical strings:

    - the GRADE: a compact identifier, pasted onto a fixed prefix to form
      the link symbol every object file of one program must agree on
    - the OPTION STRING: a readable spelling of the same choices, used for
      display and for rebuilding an equivalent command line

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Command-line flag parsing
    - Code generation
    - The linker itself

It encodes and validates combinations only.
"""

from gradekit.model import (
    ConfigurationValue,
    DiagnosticMode,
    GCMode,
    ProfilingMode,
    TransferMode,
)
from gradekit.validator import ConfigError, GradeKitError, find_config_warnings, validate
from gradekit.grade import GRADE_SYMBOL_PREFIX, GRADE_VERSION, encode_grade, grade_symbol
from gradekit.options import encode_options

__version__ = "0.1.0"

__all__ = [
    "ConfigurationValue",
    "DiagnosticMode",
    "GCMode",
    "ProfilingMode",
    "TransferMode",
    "ConfigError",
    "GradeKitError",
    "find_config_warnings",
    "validate",
    "GRADE_SYMBOL_PREFIX",
    "GRADE_VERSION",
    "encode_grade",
    "grade_symbol",
    "encode_options",
]
