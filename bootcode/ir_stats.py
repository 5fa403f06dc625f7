"""Pure functions for computing statistics over programs."""

from __future__ import annotations

from collections import Counter

from bootcode.ir import Opcode, Program


def count_opcodes(program: Program) -> dict[str, int]:
    """Return opcode token counts, keyed in Opcode declaration order.

    Opcodes absent from the program are left out, so an empty program
    yields an empty dict.
    """
    counts = Counter(inst.opcode for inst in program)
    return {op.value: counts[op] for op in Opcode if counts[op]}
