"""IR Design: the three-opcode boot code instruction set."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict

from . import constants


class Opcode(str, Enum):
    ACC = constants.ACC_TOKEN
    JMP = constants.JMP_TOKEN
    NOP = constants.NOP_TOKEN


# ACC is never corrupted, so it has no entry
FLIPPED_OPCODES: dict[Opcode, Opcode] = {
    Opcode.JMP: Opcode.NOP,
    Opcode.NOP: Opcode.JMP,
}


class Instruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    opcode: Opcode
    operand: int

    def __str__(self) -> str:
        return f"{self.opcode.value} {self.operand:+d}"


class Program(BaseModel):
    """Ordered, 0-indexed, immutable sequence of instructions."""

    model_config = ConfigDict(frozen=True)

    instructions: tuple[Instruction, ...] = ()

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:  # type: ignore[override]
        return iter(self.instructions)

    def __str__(self) -> str:
        return "\n".join(str(inst) for inst in self.instructions)

    def with_opcode_at(self, index: int, opcode: Opcode) -> Program:
        """Return a copy with the opcode at *index* replaced; operand is kept."""
        if not 0 <= index < len(self.instructions):
            raise IndexError(
                f"Instruction index {index} out of range for program of "
                f"length {len(self.instructions)}"
            )
        replaced = self.instructions[index].model_copy(update={"opcode": opcode})
        return Program(
            instructions=(
                self.instructions[:index]
                + (replaced,)
                + self.instructions[index + 1 :]
            )
        )
