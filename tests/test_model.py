"""
Tests for the Configuration Model

These tests verify:
    - Default construction
    - Immutability and equality
    - Derived transfer, profiling and diagnostic modes
    - PIC register applicability
"""

import dataclasses

import pytest
from gradekit.model import (
    ConfigurationValue,
    DiagnosticMode,
    GCMode,
    ProfilingMode,
    TransferMode,
)


class TestConfigurationValue:
    """Test construction, equality and immutability."""

    def test_defaults(self):
        """Default value is the plainest configuration."""
        config = ConfigurationValue()
        assert config.asm_labels is False
        assert config.gc == GCMode.NONE
        assert config.tag_bits == 0
        assert config.unboxed_float is False

    def test_equal_when_all_fields_equal(self):
        a = ConfigurationValue(thread_safe=True, tag_bits=2)
        b = ConfigurationValue(thread_safe=True, tag_bits=2)
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_when_one_field_differs(self):
        a = ConfigurationValue(thread_safe=True)
        b = ConfigurationValue(thread_safe=False)
        assert a != b

    def test_frozen(self):
        """Fields cannot be reassigned after construction."""
        config = ConfigurationValue()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.thread_safe = True

    def test_replace_returns_new_value(self):
        config = ConfigurationValue()
        variant = dataclasses.replace(config, use_trail=True)
        assert variant.use_trail is True
        assert config.use_trail is False


class TestTransferMode:
    """The 2x2 of nonlocal gotos and global registers."""

    @pytest.mark.parametrize("gotos, regs, expected", [
        (True, True, TransferMode.FAST),
        (True, False, TransferMode.JUMP),
        (False, True, TransferMode.REG),
        (False, False, TransferMode.NONE),
    ])
    def test_transfer(self, gotos, regs, expected):
        config = ConfigurationValue(nonlocal_gotos=gotos, global_registers=regs)
        assert config.transfer == expected


class TestProfilingMode:
    """Combining the three profiling toggles."""

    @pytest.mark.parametrize("time, calls, memory, expected", [
        (False, False, False, ProfilingMode.NONE),
        (False, True, False, ProfilingMode.CALLS),
        (True, True, False, ProfilingMode.TIME_CALLS),
        (True, True, True, ProfilingMode.ALL),
        (False, True, True, ProfilingMode.MEMORY),
    ])
    def test_valid_combinations(self, time, calls, memory, expected):
        config = ConfigurationValue(
            profile_time=time, profile_calls=calls, profile_memory=memory
        )
        assert config.profiling == expected

    @pytest.mark.parametrize("time, memory", [
        (True, False),
        (False, True),
        (True, True),
    ])
    def test_invalid_combinations_have_no_mode(self, time, memory):
        """Without call profiling, time or memory profiling is meaningless."""
        config = ConfigurationValue(profile_time=time, profile_memory=memory)
        assert config.profiling is None


class TestDiagnosticMode:
    """Stack traces and mandatory tracing."""

    @pytest.mark.parametrize("stack, trace, expected", [
        (False, False, DiagnosticMode.NONE),
        (True, False, DiagnosticMode.STACK_TRACE),
        (False, True, DiagnosticMode.TRACE),
        (True, True, DiagnosticMode.DEBUG),
    ])
    def test_diagnostics(self, stack, trace, expected):
        config = ConfigurationValue(stack_trace=stack, require_tracing=trace)
        assert config.diagnostics == expected


class TestPicRegister:
    """PIC register only matters with global registers on i386."""

    def test_used_on_i386_with_registers(self):
        config = ConfigurationValue(
            pic_register=True, global_registers=True, target_arch="i686"
        )
        assert config.uses_pic_register

    def test_not_used_without_registers(self):
        config = ConfigurationValue(pic_register=True, target_arch="i386")
        assert not config.uses_pic_register

    def test_not_used_on_other_arch(self):
        config = ConfigurationValue(
            pic_register=True, global_registers=True, target_arch="x86_64"
        )
        assert not config.uses_pic_register

    def test_not_used_when_not_requested(self):
        config = ConfigurationValue(global_registers=True, target_arch="i386")
        assert not config.uses_pic_register
