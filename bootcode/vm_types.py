"""Boot code VM — run state (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RunState:
    """Mutable state owned by exactly one engine invocation."""

    program_counter: int = 0
    accumulator: int = 0
    visited: set[int] = field(default_factory=set)

    def visit(self, program_counter: int) -> bool:
        """Record *program_counter*; False if it had already been reached."""
        if program_counter in self.visited:
            return False
        self.visited.add(program_counter)
        return True

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "program_counter": self.program_counter,
            "accumulator": self.accumulator,
            "visited": sorted(self.visited),
        }
        return d
