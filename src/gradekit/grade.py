"""
Grade Encoder — compact grade identifier and link symbol.

The grade is built up one stage at a time, each stage appending the
suffix for one group of fields to the token built so far:

     1. version       v1_
     2. labels        asm_
     3. transfer      fast | jump | reg | none        (always one)
     4. concurrency   _par
     5. gc            _gc | _agc
     6. profiling     _profall | _prof | _memprof | _profcalls
     7. trail         _tr
     8. tabling       _mm
     9. tags          _notags | _hightags<N> | _tags<N> (always one)
    10. float         _ubf
    11. pic           _picreg
    12. diagnostics   _debug | _strce | _trace

The order is fixed. Changing it, or the spelling of any suffix, changes
every grade and breaks link compatibility with everything built before.

The link symbol is GRADE_SYMBOL_PREFIX pasted directly onto the grade.
Every compiled unit defines it; units of different grades carry
different symbols, so mixing them fails at link time.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from gradekit.model import (
    ConfigurationValue,
    DiagnosticMode,
    GCMode,
    ProfilingMode,
    TransferMode,
)
from gradekit.validator import validate


log = logging.getLogger(__name__)

# Binary compatibility version. Bump on any change that breaks binary
# backwards compatibility; it is unrelated to the release number.
GRADE_VERSION = "v1_"

GRADE_SYMBOL_PREFIX = "MR_grade_"


_TRANSFER_SUFFIX = {
    TransferMode.FAST: "fast",
    TransferMode.JUMP: "jump",
    TransferMode.REG: "reg",
    TransferMode.NONE: "none",
}

_GC_SUFFIX = {
    GCMode.CONSERVATIVE: "_gc",
    GCMode.NATIVE: "_agc",
    GCMode.NONE: "",
}

_PROFILING_SUFFIX = {
    ProfilingMode.ALL: "_profall",
    ProfilingMode.TIME_CALLS: "_prof",
    ProfilingMode.MEMORY: "_memprof",
    ProfilingMode.CALLS: "_profcalls",
    ProfilingMode.NONE: "",
}

_DIAGNOSTIC_SUFFIX = {
    DiagnosticMode.DEBUG: "_debug",
    DiagnosticMode.STACK_TRACE: "_strce",
    DiagnosticMode.TRACE: "_trace",
    DiagnosticMode.NONE: "",
}


# =========================================================================
# STAGES
# =========================================================================

def _version(config: ConfigurationValue) -> str:
    return GRADE_VERSION


def _labels(config: ConfigurationValue) -> str:
    return "asm_" if config.asm_labels else ""


def _transfer(config: ConfigurationValue) -> str:
    return _TRANSFER_SUFFIX[config.transfer]


def _concurrency(config: ConfigurationValue) -> str:
    return "_par" if config.thread_safe else ""


def _gc(config: ConfigurationValue) -> str:
    return _GC_SUFFIX[config.gc]


def _profiling(config: ConfigurationValue) -> str:
    return _PROFILING_SUFFIX[config.profiling]


def _trail(config: ConfigurationValue) -> str:
    return "_tr" if config.use_trail else ""


def _tabling(config: ConfigurationValue) -> str:
    return "_mm" if config.use_minimal_model else ""


def _tags(config: ConfigurationValue) -> str:
    if config.tag_bits == 0:
        return "_notags"
    scheme = "_hightags" if config.high_tags else "_tags"
    return f"{scheme}{config.tag_bits}"


def _float(config: ConfigurationValue) -> str:
    return "_ubf" if config.unboxed_float else ""


def _pic(config: ConfigurationValue) -> str:
    return "_picreg" if config.uses_pic_register else ""


def _diagnostics(config: ConfigurationValue) -> str:
    return _DIAGNOSTIC_SUFFIX[config.diagnostics]


GRADE_STAGES: Tuple[Tuple[str, Callable[[ConfigurationValue], str]], ...] = (
    ("version", _version),
    ("labels", _labels),
    ("transfer", _transfer),
    ("concurrency", _concurrency),
    ("gc", _gc),
    ("profiling", _profiling),
    ("trail", _trail),
    ("tabling", _tabling),
    ("tags", _tags),
    ("float", _float),
    ("pic", _pic),
    ("diagnostics", _diagnostics),
)


def grade_segments(config: ConfigurationValue) -> List[Tuple[str, str]]:
    """
    Per-stage grade suffixes, in grade order.

    Args:
        config: Configuration to encode

    Returns:
        List of (stage name, suffix) pairs; suffix may be empty

    Raises:
        ConfigError: if the configuration is invalid
    """
    validate(config)
    return [(name, stage(config)) for name, stage in GRADE_STAGES]


def encode_grade(config: ConfigurationValue) -> str:
    """
    Encode a configuration as its grade token.

    Example:
        ConfigurationValue() -> "v1_none_notags"

    Raises:
        ConfigError: if the configuration is invalid
    """
    grade = "".join(suffix for _, suffix in grade_segments(config))
    log.debug("Encoded grade %s", grade)
    return grade


def grade_symbol(config: ConfigurationValue) -> str:
    """
    Link symbol name for a configuration: prefix pasted onto the grade.

    Raises:
        ConfigError: if the configuration is invalid
    """
    return GRADE_SYMBOL_PREFIX + encode_grade(config)
