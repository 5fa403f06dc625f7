"""Tests for the bootcode command-line front end."""

import json
import logging

import pytest

from bootcode.cli import build_arg_parser, main
from bootcode.constants import DEMO_PROGRAM
from bootcode.run import execute_program


@pytest.fixture
def program_file(tmp_path):
    path = tmp_path / "boot.txt"
    path.write_text(DEMO_PROGRAM, encoding="utf-8")
    return path


class TestArgParser:
    def test_defaults(self):
        args = build_arg_parser().parse_args([])
        assert args.file is None
        assert args.max_steps is None
        assert not args.repair
        assert not args.trace

    def test_short_flags(self):
        args = build_arg_parser().parse_args(["-r", "-t", "-n", "50", "prog.txt"])
        assert args.repair and args.trace
        assert args.max_steps == 50
        assert args.file == "prog.txt"


class TestMain:
    def test_solves_file(self, program_file, capsys):
        assert main([str(program_file)]) == 0

        out = capsys.readouterr().out
        assert f"[{program_file}][Part 1] 5" in out
        assert f"[{program_file}][Part 2] 8" in out

    def test_demo_mode_without_file(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "built-in demo" in out
        assert "[bootcode][Part 2] 8" in out

    def test_dump(self, program_file, capsys):
        assert main([str(program_file), "--dump"]) == 0

        out = capsys.readouterr().out
        assert out.strip() == DEMO_PROGRAM.strip()

    def test_stats(self, program_file, capsys):
        assert main([str(program_file), "--stats"]) == 0

        assert json.loads(capsys.readouterr().out) == {"nop": 1, "acc": 5, "jmp": 3}

    def test_repair(self, program_file, capsys):
        assert main([str(program_file), "--repair"]) == 0

        assert "Repair: 7: jmp -4 -> nop -4" in capsys.readouterr().out

    def test_trace(self, program_file, capsys):
        assert main([str(program_file), "--trace"]) == 0

        out = capsys.readouterr().out
        assert "[step 6]" in out
        assert "(infinite_loop, 7 steps)" in out

    def test_step_limit_reported_in_result_lines(self, program_file, capsys):
        assert main([str(program_file), "--max-steps", "2"]) == 0

        out = capsys.readouterr().out
        assert "[Part 1] Error: Step limit of 2 exceeded" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("acc +1\nacc one\n", encoding="utf-8")

        assert main([str(path)]) == 1
        assert "line 2" in capsys.readouterr().err

    def test_skip_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("acc +1\nacc one\n", encoding="utf-8")

        assert main([str(path), "--skip-malformed"]) == 0
        assert "[Part 1] 1" in capsys.readouterr().out


class TestMainReusesWork:
    def test_skipped_line_warned_once(self, tmp_path, caplog):
        path = tmp_path / "bad.txt"
        path.write_text("acc +1\nbogus\njmp +1\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="bootcode.decoder"):
            assert main([str(path), "--skip-malformed"]) == 0

        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 1
        assert "line 2" in warnings[0].getMessage()

    def test_repair_search_runs_once(self, program_file, monkeypatch, capsys):
        calls = []

        def counting_execute(program, config):
            calls.append(program)
            return execute_program(program, config)

        monkeypatch.setattr("bootcode.repair.execute_program", counting_execute)

        assert main([str(program_file), "--repair"]) == 0

        # One run per flip candidate; Part 1 uses bootcode.run directly
        assert len(calls) == 4
        assert "[Part 2] 8" in capsys.readouterr().out

    def test_failed_repair_reused_for_part_2(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "loop.txt"
        path.write_text("jmp +0\njmp -1\n", encoding="utf-8")
        calls = []

        def counting_execute(program, config):
            calls.append(program)
            return execute_program(program, config)

        monkeypatch.setattr("bootcode.repair.execute_program", counting_execute)

        assert main([str(path), "--repair"]) == 0

        out = capsys.readouterr().out
        assert len(calls) == 2
        assert "Repair: Logic error: no repair found" in out
        assert "[Part 2] Error: Logic error: no repair found" in out
