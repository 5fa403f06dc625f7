"""Boot code interpreter package."""

from .ir import Instruction, Opcode, Program  # noqa: F401
from .decoder import decode, decode_program  # noqa: F401
from .errors import (  # noqa: F401
    BootCodeError,
    DecodeError,
    NoSolutionError,
    StepLimitExceededError,
)
from .run import run, execute_program, execute_program_traced  # noqa: F401
from .run_types import Outcome, VMConfig  # noqa: F401
from .repair import candidate_repairs, find_repair, repair_and_run  # noqa: F401
