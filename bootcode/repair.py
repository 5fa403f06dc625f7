"""Repair search: find the single jmp/nop flip that lets a program halt."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .errors import NoSolutionError
from .ir import FLIPPED_OPCODES, Instruction, Program
from .run import execute_program
from .run_types import Outcome, VMConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepairResult:
    """The winning flip and the accumulator its halting run produced."""

    index: int
    original: Instruction
    replacement: Instruction
    accumulator: int
    candidates_tried: int
    program: Program

    def __str__(self) -> str:
        return (
            f"{self.index}: {self.original} -> {self.replacement} "
            f"(acc={self.accumulator}, {self.candidates_tried} candidate(s) tried)"
        )


def candidate_repairs(program: Program) -> Iterator[tuple[int, Program]]:
    """Lazily yield (index, flipped program) pairs in ascending index order.

    acc instructions are never corrupted and are skipped. Only one candidate
    program is alive at a time unless the caller holds on to them.
    """
    for index, instruction in enumerate(program):
        flipped = FLIPPED_OPCODES.get(instruction.opcode)
        if flipped is None:
            continue
        yield index, program.with_opcode_at(index, flipped)


def find_repair(program: Program, config: VMConfig = VMConfig()) -> RepairResult:
    """Return the lowest-index flip whose run halts.

    Raises:
        NoSolutionError: no jmp/nop flip produces a halting run.
    """
    tried = 0
    for index, candidate in candidate_repairs(program):
        tried += 1
        outcome, state, stats = execute_program(candidate, config)
        if outcome is not Outcome.HALTED:
            logger.debug(
                "Flip at %d rejected: %s after %d steps",
                index,
                outcome.value,
                stats.steps,
            )
            continue

        result = RepairResult(
            index=index,
            original=program[index],
            replacement=candidate[index],
            accumulator=state.accumulator,
            candidates_tried=tried,
            program=candidate,
        )
        logger.info("Repaired program: %s", result)
        return result

    raise NoSolutionError(tried)


def repair_and_run(program: Program, config: VMConfig = VMConfig()) -> int:
    """Repair search entry point: accumulator of the first halting flip."""
    return find_repair(program, config).accumulator
