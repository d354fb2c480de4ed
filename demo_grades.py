#!/usr/bin/env python3
"""
Demo: Encode the standard grades and compare two of them.
"""

from gradekit.examples import STANDARD_CONFIGS, build_config
from gradekit.grade import encode_grade, grade_symbol
from gradekit.options import grade_option
from gradekit.analyzer import compare_grades
from gradekit.backends import generate_grade_header


def main():
    print("=" * 80)
    print("STANDARD GRADES")
    print("=" * 80)

    for name, config in STANDARD_CONFIGS.items():
        print(f"  {name:<24} {encode_grade(config):<40} {grade_option(config)}")

    print()
    print("=" * 80)
    print("LINK CHECK: asm_fast.gc vs asm_fast.gc.tr")
    print("=" * 80)

    report = compare_grades(build_config("asm_fast.gc"), build_config("asm_fast.gc.tr"))
    print(f"  Compatible: {'YES' if report.compatible else 'NO'}")
    for warning in report.warnings:
        print(f"  - {warning}")

    print()
    print("=" * 80)
    print(f"HEADER FOR {grade_symbol(build_config('asm_fast.gc'))}")
    print("=" * 80)
    print(generate_grade_header(build_config("asm_fast.gc")))


if __name__ == "__main__":
    main()
