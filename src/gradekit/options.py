"""
Option String Encoder — readable spelling of a grade.

Mirrors the grade stage order, spelling each choice the way it is given
to the `--grade` option (e.g. "asm_fast.gc.prof") instead of as an
identifier fragment.

Tag bits and float boxing are not selectable through `--grade`, so
those two stages are left out here even though they are part of the
grade itself. The version marker is left out as well.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

from gradekit.model import (
    ConfigurationValue,
    DiagnosticMode,
    GCMode,
    ProfilingMode,
    TransferMode,
)
from gradekit.validator import validate


_TRANSFER_OPTION = {
    TransferMode.FAST: "fast",
    TransferMode.JUMP: "jump",
    TransferMode.REG: "reg",
    TransferMode.NONE: "none",
}

_GC_OPTION = {
    GCMode.CONSERVATIVE: ".gc",
    GCMode.NATIVE: ".agc",
    GCMode.NONE: "",
}

_PROFILING_OPTION = {
    ProfilingMode.ALL: ".profall",
    ProfilingMode.TIME_CALLS: ".prof",
    ProfilingMode.MEMORY: ".memprof",
    ProfilingMode.CALLS: ".profcalls",
    ProfilingMode.NONE: "",
}

_DIAGNOSTIC_OPTION = {
    DiagnosticMode.DEBUG: ".debug",
    DiagnosticMode.STACK_TRACE: ".strce",
    DiagnosticMode.TRACE: ".trace",
    DiagnosticMode.NONE: "",
}


# =========================================================================
# STAGES
# =========================================================================

def _labels(config: ConfigurationValue) -> str:
    return "asm_" if config.asm_labels else ""


def _transfer(config: ConfigurationValue) -> str:
    return _TRANSFER_OPTION[config.transfer]


def _concurrency(config: ConfigurationValue) -> str:
    return ".par" if config.thread_safe else ""


def _gc(config: ConfigurationValue) -> str:
    return _GC_OPTION[config.gc]


def _profiling(config: ConfigurationValue) -> str:
    return _PROFILING_OPTION[config.profiling]


def _trail(config: ConfigurationValue) -> str:
    return ".tr" if config.use_trail else ""


def _tabling(config: ConfigurationValue) -> str:
    return ".mm" if config.use_minimal_model else ""


def _pic(config: ConfigurationValue) -> str:
    return ".picreg" if config.uses_pic_register else ""


def _diagnostics(config: ConfigurationValue) -> str:
    return _DIAGNOSTIC_OPTION[config.diagnostics]


OPTION_STAGES: Tuple[Tuple[str, Callable[[ConfigurationValue], str]], ...] = (
    ("labels", _labels),
    ("transfer", _transfer),
    ("concurrency", _concurrency),
    ("gc", _gc),
    ("profiling", _profiling),
    ("trail", _trail),
    ("tabling", _tabling),
    ("pic", _pic),
    ("diagnostics", _diagnostics),
)


def option_segments(config: ConfigurationValue) -> List[Tuple[str, str]]:
    """Per-stage option spellings, in option string order."""
    validate(config)
    return [(name, stage(config)) for name, stage in OPTION_STAGES]


def encode_options(config: ConfigurationValue) -> str:
    """
    Encode a configuration as its option string.

    Example:
        ConfigurationValue(asm_labels=True, nonlocal_gotos=True,
                           global_registers=True, gc=GCMode.CONSERVATIVE)
            -> "asm_fast.gc"

    Raises:
        ConfigError: if the configuration is invalid
    """
    return "".join(suffix for _, suffix in option_segments(config))


def grade_option(config: ConfigurationValue) -> str:
    """Command-line spelling that selects this configuration's grade."""
    return f"--grade {encode_options(config)}"
