"""Orchestrator — run() entry point and the decode-execute loop."""

from __future__ import annotations

import logging
from typing import Callable

from .errors import StepLimitExceededError
from .ir import Instruction, Program
from .run_types import ExecutionStats, Outcome, VMConfig
from .trace_types import ExecutionTrace, TraceStep
from .vm import execute_instruction
from .vm_types import RunState

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, int, Instruction, RunState], None]


def _run_loop(
    program: Program,
    config: VMConfig,
    on_step: StepCallback | None = None,
) -> tuple[Outcome, RunState, ExecutionStats]:
    state = RunState()
    steps = 0

    while True:
        pc = state.program_counter
        if not state.visit(pc):
            outcome = Outcome.INFINITE_LOOP
            break
        # Negative counters have left the program just like overshoots
        if not 0 <= pc < len(program):
            outcome = Outcome.HALTED
            break
        if config.max_steps is not None and steps >= config.max_steps:
            raise StepLimitExceededError(config.max_steps, pc, state.accumulator)

        instruction = program[pc]
        if config.verbose:
            print(f"[step {steps}] {pc:>4}  {instruction}")
        execute_instruction(state, instruction)
        if on_step is not None:
            on_step(steps, pc, instruction, state)
        steps += 1

    stats = ExecutionStats(
        steps=steps,
        visited_count=len(state.visited),
        final_program_counter=state.program_counter,
    )
    logger.debug(
        "Run finished: %s after %d steps (pc=%d, acc=%d)",
        outcome.value,
        stats.steps,
        state.program_counter,
        state.accumulator,
    )
    if config.verbose:
        print(f"\n({outcome.value}, {stats.steps} steps, acc={state.accumulator})")
    return outcome, state, stats


def execute_program(
    program: Program,
    config: VMConfig = VMConfig(),
) -> tuple[Outcome, RunState, ExecutionStats]:
    """Execute *program* from a fresh RunState until it halts or loops.

    Every program counter is visited at most once, so a run executes at most
    ``len(program)`` instructions before it is classified.

    Args:
        program: The program to execute; never mutated.
        config: Execution configuration (max_steps, verbose).

    Returns:
        Tuple of (Outcome, final RunState, ExecutionStats).

    Raises:
        StepLimitExceededError: config.max_steps is set and was reached
            before the run was classified.
    """
    return _run_loop(program, config)


def execute_program_traced(
    program: Program,
    config: VMConfig = VMConfig(),
) -> tuple[Outcome, RunState, ExecutionTrace]:
    """Execute *program* and record every executed instruction.

    Identical to execute_program() but returns an ExecutionTrace holding one
    TraceStep per instruction, with the accumulator as it stood afterwards.
    """
    trace_steps: list[TraceStep] = []

    def record(step: int, pc: int, instruction: Instruction, state: RunState):
        trace_steps.append(
            TraceStep(
                step_index=step,
                program_counter=pc,
                instruction=instruction,
                accumulator=state.accumulator,
            )
        )

    outcome, state, stats = _run_loop(program, config, on_step=record)
    return outcome, state, ExecutionTrace(steps=trace_steps, stats=stats)


def run(program: Program, config: VMConfig = VMConfig()) -> tuple[Outcome, int]:
    """Single execution: return (outcome, final accumulator)."""
    outcome, state, _ = execute_program(program, config)
    return outcome, state.accumulator
