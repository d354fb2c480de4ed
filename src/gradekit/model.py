"""
Core Configuration Model

Defines the immutable record of every build choice that affects binary
compatibility between compiled units, plus the small enumerations that
name the combined modes derived from it.

The record is one flat set of toggles. Some toggles only mean something
in combination:
    - nonlocal_gotos x global_registers   -> TransferMode
    - profile_time/calls/memory           -> ProfilingMode
    - stack_trace x require_tracing       -> DiagnosticMode

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about grade or option spelling
        - Are immutable (frozen dataclasses)
        - Are fully serializable
        - Represent choices, not behavior
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Architectures where the PIC register is a scarce general register and
# reserving it changes the calling convention.
I386_ARCHES = frozenset({"i386", "i486", "i586", "i686", "x86"})


class GCMode(Enum):
    """Memory-management strategy."""
    NONE = "none"
    CONSERVATIVE = "conservative"
    NATIVE = "native"


class TransferMode(Enum):
    """
    Control-transfer mechanism crossed with register allocation.

    nonlocal_gotos  global_registers  ->  mode
    --------------  ----------------      ----
         yes              yes             FAST
         yes              no              JUMP
         no               yes             REG
         no               no              NONE
    """
    FAST = "fast"
    JUMP = "jump"
    REG = "reg"
    NONE = "none"


class ProfilingMode(Enum):
    """
    The five valid profiling combinations.

    Time-only and memory-without-calls are not members; a configuration
    with those toggles has no ProfilingMode and fails validation.
    """
    NONE = "none"
    CALLS = "calls"
    TIME_CALLS = "time_calls"
    ALL = "all"
    MEMORY = "memory"


class DiagnosticMode(Enum):
    """Stack-trace capability crossed with mandatory call tracing."""
    NONE = "none"
    STACK_TRACE = "stack_trace"
    TRACE = "trace"
    DEBUG = "debug"


@dataclass(frozen=True)
class ConfigurationValue:
    """
    Immutable snapshot of all compatibility-relevant build flags.

    One instance describes one compiled program configuration. It is
    constructed once from resolved build settings and never mutated;
    use dataclasses.replace() to derive a variant.

    Properties:
        asm_labels:
            Symbolic (assembler) call-site labels instead of numeric ones

        nonlocal_gotos, global_registers:
            Jointly select the TransferMode

        thread_safe:
            Thread-safe runtime instead of single-threaded

        gc:
            Memory-management mode (GCMode)

        profile_time, profile_calls, profile_memory:
            Independent profiling toggles, combined into a ProfilingMode

        use_trail:
            Trail (undo-log) based backtracking state

        use_minimal_model:
            Minimal-model tabling. Incompatible with use_trail.

        tag_bits:
            Number of tag bits in a word; 0 means no tags

        high_tags:
            Tags occupy the high bits. Ignored when tag_bits == 0.

        unboxed_float:
            Floats stored unboxed. Boxed is the default.

        pic_register:
            Reserve the PIC register. Only takes effect with global
            registers on the i386 family.

        target_arch:
            Target architecture name

        stack_trace, require_tracing:
            Jointly select the DiagnosticMode

    INVARIANTS:
        - Only values accepted by gradekit.validator.validate may be encoded
        - Equality is field-wise
    """

    asm_labels: bool = False
    nonlocal_gotos: bool = False
    global_registers: bool = False
    thread_safe: bool = False
    gc: GCMode = GCMode.NONE
    profile_time: bool = False
    profile_calls: bool = False
    profile_memory: bool = False
    use_trail: bool = False
    use_minimal_model: bool = False
    tag_bits: int = 0
    high_tags: bool = False
    unboxed_float: bool = False
    pic_register: bool = False
    target_arch: str = "x86_64"
    stack_trace: bool = False
    require_tracing: bool = False

    @property
    def transfer(self) -> TransferMode:
        if self.nonlocal_gotos:
            return TransferMode.FAST if self.global_registers else TransferMode.JUMP
        return TransferMode.REG if self.global_registers else TransferMode.NONE

    @property
    def profiling(self) -> Optional[ProfilingMode]:
        """
        Combined profiling mode, or None for an invalid combination.

        Returns:
            ProfilingMode, or None if time profiling is requested without
            call profiling, or memory profiling without call profiling
        """
        if not self.profile_calls:
            if self.profile_time or self.profile_memory:
                return None
            return ProfilingMode.NONE
        if self.profile_time:
            return ProfilingMode.ALL if self.profile_memory else ProfilingMode.TIME_CALLS
        return ProfilingMode.MEMORY if self.profile_memory else ProfilingMode.CALLS

    @property
    def diagnostics(self) -> DiagnosticMode:
        if self.stack_trace:
            return DiagnosticMode.DEBUG if self.require_tracing else DiagnosticMode.STACK_TRACE
        return DiagnosticMode.TRACE if self.require_tracing else DiagnosticMode.NONE

    @property
    def uses_pic_register(self) -> bool:
        """True if the PIC register request actually changes the code."""
        return (
            self.pic_register
            and self.global_registers
            and self.target_arch in I386_ARCHES
        )
