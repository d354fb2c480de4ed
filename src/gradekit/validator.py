"""
Configuration Validator — rejects incoherent build configurations.

A ConfigurationValue is only well-formed if it passes validate().
Nothing downstream (grade, option string, header) may be produced for a
value that fails here, and a failure is terminal for the build: the
caller must supply a corrected configuration.

Rejected combinations:
    - memory profiling without call profiling
      (call-graph attribution is undefined without call counts)
    - time profiling without call profiling
    - trailing together with minimal-model tabling
      (two incompatible state-restoration strategies)

Every field must also hold a value of its declared type: booleans must
be bool, not "false" or 0.

No other field combinations are restricted. Validation performs no I/O,
emits no warnings and never mutates its input. Requests the grade
ignores are reported separately by find_config_warnings().
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import List

from gradekit.model import ConfigurationValue, GCMode


log = logging.getLogger(__name__)


class GradeKitError(Exception):
    """Base class for gradekit errors."""
    pass


class ConfigError(GradeKitError):
    """Raised when a configuration is invalid or cannot be loaded."""

    def __init__(self, errors: List[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


_BOOL_FIELDS = tuple(f.name for f in fields(ConfigurationValue) if f.type in (bool, "bool"))


def find_config_errors(config: ConfigurationValue) -> List[str]:
    """
    Collect every problem with a configuration without raising.

    Args:
        config: Configuration to check

    Returns:
        List of error messages, empty if the configuration is valid
    """
    errors: List[str] = []

    # Field domains
    for name in _BOOL_FIELDS:
        value = getattr(config, name)
        if type(value) is not bool:
            errors.append(f"{name} must be a boolean, got {value!r}")
    if not isinstance(config.gc, GCMode):
        errors.append(f"gc must be a GCMode, got {config.gc!r}")
    if isinstance(config.tag_bits, bool) or not isinstance(config.tag_bits, int):
        errors.append(f"tag_bits must be an integer, got {config.tag_bits!r}")
    elif config.tag_bits < 0:
        errors.append(f"tag_bits must not be negative, got {config.tag_bits}")
    if not isinstance(config.target_arch, str) or not config.target_arch:
        errors.append(f"target_arch must be a non-empty string, got {config.target_arch!r}")

    # Profiling
    if config.profile_memory and not config.profile_calls:
        if config.profile_time:
            errors.append(
                "Invalid combination of profiling options: "
                "time and memory profiling require call profiling"
            )
        else:
            errors.append(
                "Invalid combination of profiling options: "
                "memory profiling requires call profiling"
            )
    elif config.profile_time and not config.profile_calls:
        errors.append(
            "Invalid combination of profiling options: "
            "time profiling requires call profiling"
        )

    # Backtracking state
    if config.use_trail and config.use_minimal_model:
        errors.append("trailing and minimal model tabling are not compatible")

    return errors


def validate(config: ConfigurationValue) -> None:
    """
    Validate a configuration before it is encoded.

    Args:
        config: Configuration to validate

    Raises:
        ConfigError: if any field combination is invalid
    """
    errors = find_config_errors(config)
    if errors:
        log.debug("Rejected configuration %r: %s", config, errors)
        raise ConfigError(errors)


def find_config_warnings(config: ConfigurationValue) -> List[str]:
    """
    Collect advisory notices about a valid configuration.

    These never make a configuration invalid; they name requests that
    the grade silently ignores.

    Returns:
        List of messages, empty if nothing is ignored or the
        configuration is invalid
    """
    if find_config_errors(config):
        return []

    notices: List[str] = []
    if config.pic_register and not config.uses_pic_register:
        notices.append(
            f"pic_register has no effect on {config.target_arch!r} "
            f"{'with' if config.global_registers else 'without'} global registers"
        )
    if config.high_tags and config.tag_bits == 0:
        notices.append("high_tags has no effect without tag bits")
    return notices
