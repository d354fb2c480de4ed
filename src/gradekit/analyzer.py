"""
Grade Analyzer — explains why two configurations would not link.

The linker only reports that a grade symbol is undefined; it cannot say
which build choice differs. This module compares two configurations
stage by stage and names the stages that disagree.

IMPORTANT: This is read-only. It never modifies either configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from gradekit.model import ConfigurationValue
from gradekit.grade import GRADE_SYMBOL_PREFIX, grade_segments
from gradekit.validator import find_config_warnings


@dataclass
class GradeComparison:
    """Stage-by-stage comparison of two grades."""

    left_grade: str
    right_grade: str

    # (stage, left suffix, right suffix) for every stage that differs
    differences: List[Tuple[str, str, str]] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    @property
    def left_symbol(self) -> str:
        return GRADE_SYMBOL_PREFIX + self.left_grade

    @property
    def right_symbol(self) -> str:
        return GRADE_SYMBOL_PREFIX + self.right_grade

    @property
    def compatible(self) -> bool:
        return self.left_symbol == self.right_symbol

    @property
    def differing_stages(self) -> List[str]:
        return [stage for stage, _, _ in self.differences]

    def add_warning(self, msg: str) -> None:
        if msg not in self.warnings:
            self.warnings.append(msg)


def _describe(suffix: str) -> str:
    return repr(suffix) if suffix else "(none)"


def compare_grades(left: ConfigurationValue, right: ConfigurationValue) -> GradeComparison:
    """
    Compare the grades of two configurations.

    Both configurations are validated first.

    Returns:
        GradeComparison; `compatible` is True iff the link symbols match

    Raises:
        ConfigError: if either configuration is invalid
    """
    left_segments = grade_segments(left)
    right_segments = grade_segments(right)

    report = GradeComparison(
        left_grade="".join(s for _, s in left_segments),
        right_grade="".join(s for _, s in right_segments),
    )

    for (stage, l_suffix), (_, r_suffix) in zip(left_segments, right_segments):
        if l_suffix != r_suffix:
            report.differences.append((stage, l_suffix, r_suffix))
            report.add_warning(
                f"Stage '{stage}' differs: {_describe(l_suffix)} vs {_describe(r_suffix)}"
            )

    if not report.compatible:
        report.add_warning(
            f"Units will not link: {report.left_symbol} vs {report.right_symbol}"
        )

    for side, config in (("left", left), ("right", right)):
        for notice in find_config_warnings(config):
            report.add_warning(f"Ignored on {side}: {notice}")

    return report
