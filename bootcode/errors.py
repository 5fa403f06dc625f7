"""Error types raised by the decoder, engine and repair search."""

from __future__ import annotations


class BootCodeError(Exception):
    """Base class for every error surfaced to callers of this package."""


class DecodeError(BootCodeError, ValueError):
    """A line does not match the three-opcode grammar."""

    def __init__(self, line: str, reason: str, line_number: int = 0):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number else "input"
        super().__init__(f"Parse error at {where}: {line!r}: {reason}")


class NoSolutionError(BootCodeError):
    """Repair search exhausted every jmp/nop flip without a halting run."""

    def __init__(self, candidates_tried: int):
        self.candidates_tried = candidates_tried
        super().__init__(
            f"Logic error: no repair found after {candidates_tried} candidate(s)"
        )


class StepLimitExceededError(BootCodeError):
    """A run executed more instructions than VMConfig.max_steps allows."""

    def __init__(self, max_steps: int, program_counter: int, accumulator: int):
        self.max_steps = max_steps
        self.program_counter = program_counter
        self.accumulator = accumulator
        super().__init__(
            f"Step limit of {max_steps} exceeded at pc={program_counter} "
            f"(acc={accumulator})"
        )


class IllegalOpcodeError(BootCodeError, RuntimeError):
    """An instruction reached the engine with an opcode it cannot dispatch."""
