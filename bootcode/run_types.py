"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Terminal classification of one run."""

    HALTED = "halted"
    INFINITE_LOOP = "infinite_loop"


@dataclass(frozen=True)
class VMConfig:
    """Groups VM execution configuration."""

    max_steps: int | None = None
    verbose: bool = False


@dataclass
class ExecutionStats:
    """Returned execution metrics from execute_program."""

    steps: int = 0
    visited_count: int = 0
    final_program_counter: int = 0
