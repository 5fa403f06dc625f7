"""Command-line front end for the boot code interpreter."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import load_program, solve_program
from .errors import BootCodeError
from .ir_stats import count_opcodes
from .repair import RepairResult, find_repair
from .run import execute_program_traced
from .run_types import VMConfig
from . import constants

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bootcode",
        description="Boot code interpreter with loop detection and repair search",
    )
    parser.add_argument("file", nargs="?", help="Program file to interpret")
    parser.add_argument("--repair", "-r", action="store_true",
                        help="Print which instruction the repair search flipped")
    parser.add_argument("--trace", "-t", action="store_true",
                        help="Print every executed instruction of the unmodified run")
    parser.add_argument("--max-steps", "-n", type=int, default=None,
                        help="Abort a run after this many instructions")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging and step-by-step execution")
    parser.add_argument("--dump", action="store_true",
                        help="Only print the decoded program")
    parser.add_argument("--stats", action="store_true",
                        help="Only print opcode counts as JSON")
    parser.add_argument("--skip-malformed", action="store_true",
                        help="Drop undecodable lines instead of failing")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=constants.LOG_FORMAT,
    )

    if not args.file:
        source = constants.DEMO_PROGRAM
        label = constants.DEFAULT_LABEL
        print("No file provided. Using built-in demo:\n")
        print(source)
    else:
        try:
            with open(args.file, encoding="utf-8") as f:
                source = f.read()
        except OSError as exc:
            print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        label = args.file

    try:
        program = load_program(source, skip_malformed=args.skip_malformed)
    except BootCodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.dump:
        print(program)
        return 0

    if args.stats:
        print(json.dumps(count_opcodes(program), indent=2))
        return 0

    config = VMConfig(max_steps=args.max_steps, verbose=args.verbose)

    if args.trace:
        try:
            outcome, _, trace = execute_program_traced(program, config)
        except BootCodeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print("═══ Trace ═══")
        print(trace)
        print(f"({outcome.value}, {trace.stats.steps} steps)\n")

    repair: RepairResult | BootCodeError | None = None
    if args.repair:
        try:
            repair = find_repair(program, config)
        except BootCodeError as exc:
            repair = exc
        print(f"Repair: {repair}")

    for line in solve_program(program, config, label=label, repair=repair):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
