"""Composable API functions over boot code source text.

Each function corresponds to a CLI workflow (--dump, --stats, --repair)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import logging
from typing import Callable

from .decoder import decode_program
from .errors import BootCodeError
from .ir import Program
from .ir_stats import count_opcodes
from .repair import RepairResult, find_repair
from .run import run
from .run_types import Outcome, VMConfig
from . import constants

logger = logging.getLogger(__name__)


def load_program(source: str, skip_malformed: bool = False) -> Program:
    """Decode source text into a Program.

    Raises:
        DecodeError: a line is malformed and *skip_malformed* is False.
    """
    program = decode_program(source, skip_malformed=skip_malformed)
    logger.info("Loaded program with %d instructions", len(program))
    return program


def dump_program(source: str, skip_malformed: bool = False) -> str:
    """Decode source and re-render it in canonical form, one line each."""
    return str(load_program(source, skip_malformed))


def program_stats(source: str, skip_malformed: bool = False) -> dict[str, int]:
    """Decode source and count its opcodes."""
    return count_opcodes(load_program(source, skip_malformed))


def run_source(
    source: str,
    config: VMConfig = VMConfig(),
    skip_malformed: bool = False,
) -> tuple[Outcome, int]:
    """Decode source and execute it once."""
    return run(load_program(source, skip_malformed), config)


def repair_source(
    source: str,
    config: VMConfig = VMConfig(),
    skip_malformed: bool = False,
) -> RepairResult:
    """Decode source and run the repair search on it."""
    return find_repair(load_program(source, skip_malformed), config)


def _report(label: str, part: str, compute: Callable[[], int]) -> str:
    try:
        result = compute()
    except BootCodeError as exc:
        line = constants.ERROR_LINE_TEMPLATE.format(label=label, part=part, error=exc)
        logger.error(line)
        return line
    line = constants.RESULT_LINE_TEMPLATE.format(label=label, part=part, result=result)
    logger.info(line)
    return line


def solve_program(
    program: Program,
    config: VMConfig = VMConfig(),
    label: str = constants.DEFAULT_LABEL,
    repair: RepairResult | BootCodeError | None = None,
) -> list[str]:
    """Produce both result lines for an already decoded program.

    Part 1 is the accumulator when the unmodified program halts or first
    repeats an instruction; Part 2 is the accumulator of the repaired program.
    A BootCodeError in either part is reported as that part's line rather
    than propagated.

    Args:
        program: The decoded program.
        config: Execution configuration.
        label: Prefix for both result lines.
        repair: The outcome of a repair search already run on *program*;
            when given, Part 2 reuses it instead of searching again.

    Returns:
        Two lines of the form ``[label][Part N] <value>`` or
        ``[label][Part N] Error: <message>``.
    """

    def part_1() -> int:
        _, accumulator = run(program, config)
        return accumulator

    def part_2() -> int:
        if isinstance(repair, BootCodeError):
            raise repair
        if repair is not None:
            return repair.accumulator
        return find_repair(program, config).accumulator

    return [
        _report(label, constants.PART_1, part_1),
        _report(label, constants.PART_2, part_2),
    ]


def solve(
    source: str,
    config: VMConfig = VMConfig(),
    label: str = constants.DEFAULT_LABEL,
    skip_malformed: bool = False,
) -> list[str]:
    """Decode source once and produce both result lines.

    A DecodeError is reported as the line for both parts.
    """
    try:
        program = load_program(source, skip_malformed)
    except BootCodeError as exc:

        def failed() -> int:
            raise exc

        return [
            _report(label, part, failed)
            for part in (constants.PART_1, constants.PART_2)
        ]
    return solve_program(program, config, label)
