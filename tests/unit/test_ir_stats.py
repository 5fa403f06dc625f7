"""Tests for program statistics."""

from bootcode.constants import DEMO_PROGRAM
from bootcode.decoder import decode_program
from bootcode.ir import Instruction, Opcode, Program
from bootcode.ir_stats import count_opcodes


class TestCountOpcodes:
    def test_empty_program_returns_empty_dict(self):
        assert count_opcodes(Program()) == {}

    def test_single_instruction(self):
        program = Program(instructions=(Instruction(opcode=Opcode.ACC, operand=3),))
        assert count_opcodes(program) == {"acc": 1}

    def test_demo_program_counts(self):
        assert count_opcodes(decode_program(DEMO_PROGRAM)) == {
            "nop": 1,
            "acc": 5,
            "jmp": 3,
        }

    def test_keys_follow_opcode_order(self):
        assert list(count_opcodes(decode_program(DEMO_PROGRAM))) == [
            "acc",
            "jmp",
            "nop",
        ]

    def test_absent_opcodes_are_omitted(self):
        program = decode_program("nop +0\nnop +1\n")
        assert count_opcodes(program) == {"nop": 2}
