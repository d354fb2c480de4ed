"""Backends for grade output generation (C header, etc.)."""

from .c_header import generate_grade_definition, generate_grade_header, save_grade_header

__all__ = ["generate_grade_definition", "generate_grade_header", "save_grade_header"]
