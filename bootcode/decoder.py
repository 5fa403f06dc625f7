"""Text → Instruction decoding layer."""

from __future__ import annotations

import logging
import re

from .errors import DecodeError
from .ir import Instruction, Opcode, Program
from . import constants

logger = logging.getLogger(__name__)

_INSTRUCTION_RE = re.compile(constants.INSTRUCTION_PATTERN, re.ASCII)


def decode(line: str) -> Instruction:
    """Decode one ``<opcode> <signed-integer>`` line.

    The operand must carry an explicit ``+`` or ``-`` sign. Anything else
    raises DecodeError; no opcode is guessed and no operand is defaulted.
    """
    match = _INSTRUCTION_RE.match(line)
    if match is None:
        raise DecodeError(line, _explain(line))
    return Instruction(opcode=Opcode(match.group(1)), operand=int(match.group(2)))


def _explain(line: str) -> str:
    tokens = line.split()
    if not tokens:
        return "empty line"
    opcodes = {op.value for op in Opcode}
    if tokens[0] not in opcodes and tokens[0][:3] in opcodes and tokens[0][3:4] in "+-":
        return "opcode and operand must be separated by whitespace"
    if tokens[0] not in opcodes:
        return f"unknown opcode {tokens[0]!r}"
    if len(tokens) == 1:
        return "missing operand"
    return "operand must be a signed integer such as +1 or -3"


def decode_program(source: str, skip_malformed: bool = False) -> Program:
    """Decode newline-delimited source text into a Program.

    Leading and trailing blank lines are ignored. Every other line must decode,
    otherwise DecodeError is raised with its 1-based line number. With
    *skip_malformed* the offending lines are dropped instead, each with a
    warning, since dropping a line re-indexes every jmp target after it.
    """
    lines = source.splitlines()
    first = 0
    while first < len(lines) and not lines[first].strip():
        first += 1
    last = len(lines)
    while last > first and not lines[last - 1].strip():
        last -= 1

    instructions: list[Instruction] = []
    for line_number in range(first + 1, last + 1):
        line = lines[line_number - 1]
        try:
            instructions.append(decode(line))
        except DecodeError as exc:
            if not skip_malformed:
                raise DecodeError(line, exc.reason, line_number) from None
            logger.warning(
                "Skipping malformed line %d (%r): %s; later jmp offsets shift",
                line_number,
                line,
                exc.reason,
            )

    logger.debug("Decoded %d instructions", len(instructions))
    return Program(instructions=tuple(instructions))
