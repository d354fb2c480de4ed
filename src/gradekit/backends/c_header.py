"""
C header generator for the grade link symbol.

Every translation unit compiled under a configuration includes the
header, which declares the grade symbol extern. Exactly one unit (the
runtime) includes the definition. A unit built under a different grade
references a symbol nobody defines, and the link fails.

Output:
    - header:      include guard, grade/option string defines,
                   `extern const char <symbol>;`
    - definition:  `const char <symbol> = 0;`
"""

from gradekit.model import ConfigurationValue
from gradekit.grade import GRADE_SYMBOL_PREFIX, encode_grade, grade_symbol
from gradekit.options import encode_options


HEADER_GUARD = "GRADEKIT_GRADE_H"


def _escape_c_string(s: str) -> str:
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    return f'"{s}"'


def generate_grade_header(config: ConfigurationValue) -> str:
    """
    Generate the grade header for a configuration.

    Args:
        config: Configuration to describe

    Returns:
        String containing the C header text

    Raises:
        ConfigError: if the configuration is invalid
    """
    grade = encode_grade(config)
    symbol = GRADE_SYMBOL_PREFIX + grade
    options = encode_options(config)

    lines = [
        "/* Generated by gradekit. Do not edit. */",
        "",
        f"#ifndef {HEADER_GUARD}",
        f"#define {HEADER_GUARD}",
        "",
        f"#define GRADE {grade}",
        f"#define GRADE_VAR {symbol}",
        f"#define GRADE_STRING {_escape_c_string(grade)}",
        f"#define GRADE_OPT {_escape_c_string(options)}",
        "",
        f"extern const char {symbol};",
        "",
        f"#endif /* {HEADER_GUARD} */",
    ]
    return "\n".join(lines) + "\n"


def generate_grade_definition(config: ConfigurationValue) -> str:
    """Generate the one line that defines the grade symbol."""
    return f"const char {grade_symbol(config)} = 0;\n"


def save_grade_header(config: ConfigurationValue, filename: str) -> None:
    """
    Generate the grade header and save it to a file.

    Args:
        config: Configuration to describe
        filename: Output file path (.h extension recommended)
    """
    header = generate_grade_header(config)
    with open(filename, 'w') as f:
        f.write(header)


__all__ = ["generate_grade_header", "generate_grade_definition", "save_grade_header"]
