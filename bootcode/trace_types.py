"""Trace data types for step-by-step execution replay."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ir import Instruction
from .run_types import ExecutionStats


@dataclass(frozen=True)
class TraceStep:
    """A single executed instruction.

    ``accumulator`` is the value after the instruction was applied;
    ``program_counter`` is where the instruction lives.
    """

    step_index: int
    program_counter: int
    instruction: Instruction
    accumulator: int


@dataclass(frozen=True)
class ExecutionTrace:
    """Complete trace of an execution run."""

    steps: list[TraceStep] = field(default_factory=list)
    stats: ExecutionStats = field(default_factory=ExecutionStats)

    def __str__(self) -> str:
        return "\n".join(
            f"[step {s.step_index}] {s.program_counter:>4}  "
            f"{str(s.instruction):<10} acc={s.accumulator}"
            for s in self.steps
        )
