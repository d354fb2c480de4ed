"""
Standard grade catalogue.

Builds the commonly used configurations, keyed by the option string
that selects them. Every entry's encode_options() equals its key.
"""
from dataclasses import replace
from typing import Dict

from gradekit.model import ConfigurationValue, GCMode


_NONE = ConfigurationValue()
_REG = ConfigurationValue(global_registers=True)
_JUMP = ConfigurationValue(nonlocal_gotos=True)
_FAST = ConfigurationValue(nonlocal_gotos=True, global_registers=True)
_ASM_JUMP = replace(_JUMP, asm_labels=True)
_ASM_FAST = replace(_FAST, asm_labels=True)
_ASM_FAST_GC = replace(_ASM_FAST, gc=GCMode.CONSERVATIVE)


STANDARD_CONFIGS: Dict[str, ConfigurationValue] = {
    "none": _NONE,
    "reg": _REG,
    "jump": _JUMP,
    "fast": _FAST,
    "asm_jump": _ASM_JUMP,
    "asm_fast": _ASM_FAST,
    "none.gc": replace(_NONE, gc=GCMode.CONSERVATIVE),
    "asm_jump.gc": replace(_ASM_JUMP, gc=GCMode.CONSERVATIVE),
    "asm_fast.gc": _ASM_FAST_GC,
    "asm_fast.agc": replace(_ASM_FAST, gc=GCMode.NATIVE),
    "asm_fast.par.gc": replace(_ASM_FAST_GC, thread_safe=True),
    "asm_fast.gc.prof": replace(_ASM_FAST_GC, profile_time=True, profile_calls=True),
    "asm_fast.gc.profcalls": replace(_ASM_FAST_GC, profile_calls=True),
    "asm_fast.gc.memprof": replace(_ASM_FAST_GC, profile_calls=True, profile_memory=True),
    "asm_fast.gc.profall": replace(
        _ASM_FAST_GC, profile_time=True, profile_calls=True, profile_memory=True
    ),
    "asm_fast.gc.tr": replace(_ASM_FAST_GC, use_trail=True),
    "asm_fast.gc.mm": replace(_ASM_FAST_GC, use_minimal_model=True),
    "asm_fast.gc.strce": replace(_ASM_FAST_GC, stack_trace=True),
    "asm_fast.gc.debug": replace(_ASM_FAST_GC, stack_trace=True, require_tracing=True),
    "asm_fast.gc.tr.debug": replace(
        _ASM_FAST_GC, use_trail=True, stack_trace=True, require_tracing=True
    ),
}


def build_config(name: str) -> ConfigurationValue:
    """
    Look up a standard configuration by option string.

    Raises:
        KeyError: if no standard configuration has that name
    """
    try:
        return STANDARD_CONFIGS[name]
    except KeyError:
        raise KeyError(f"Unknown standard grade: {name!r}") from None
