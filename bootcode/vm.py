"""Boot code VM — per-opcode instruction semantics."""

from __future__ import annotations

from typing import Callable

from .errors import IllegalOpcodeError
from .ir import Instruction, Opcode
from .vm_types import RunState


def _acc(state: RunState, operand: int) -> None:
    state.accumulator += operand
    state.program_counter += 1


def _jmp(state: RunState, operand: int) -> None:
    # Signed offset; the result may leave the program on either side
    state.program_counter += operand


def _nop(state: RunState, operand: int) -> None:
    state.program_counter += 1


_HANDLERS: dict[Opcode, Callable[[RunState, int], None]] = {
    Opcode.ACC: _acc,
    Opcode.JMP: _jmp,
    Opcode.NOP: _nop,
}


def execute_instruction(state: RunState, instruction: Instruction) -> None:
    """Apply one instruction to *state* in place."""
    handler = _HANDLERS.get(instruction.opcode)
    if handler is None:
        raise IllegalOpcodeError(
            f"No handler for opcode {instruction.opcode!r} at "
            f"pc={state.program_counter}"
        )
    handler(state, instruction.operand)
