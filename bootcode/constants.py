"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

ACC_TOKEN = "acc"
JMP_TOKEN = "jmp"
NOP_TOKEN = "nop"

INSTRUCTION_PATTERN = r"^\s*(acc|jmp|nop)[ \t]+([+-][0-9]+)\s*$"

PART_1 = "Part 1"
PART_2 = "Part 2"
RESULT_LINE_TEMPLATE = "[{label}][{part}] {result}"
ERROR_LINE_TEMPLATE = "[{label}][{part}] Error: {error}"
DEFAULT_LABEL = "bootcode"

LOG_FORMAT = "%(levelname)s: %(message)s"

DEMO_PROGRAM = """\
nop +0
acc +1
jmp +4
acc +3
jmp -3
acc -99
acc +1
jmp -4
acc +6
"""
