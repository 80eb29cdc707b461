"""Tests for solid_examples.cli — argument parsing and the interactive pauses."""

import pydantic
import pytest

from solid_examples.cli import RunOptions, build_parser, main
from solid_examples.domain.models import Principle


class TestRunOptions:

    def test_defaults(self):
        options = RunOptions.from_args(build_parser().parse_args([]))
        assert options.principles == list(Principle)
        assert options.pause is False
        assert options.log_level == "WARNING"

    def test_principles_deduplicated(self):
        args = build_parser().parse_args(["--principle", "dip", "--principle", "ocp", "--principle", "dip"])
        assert RunOptions.from_args(args).principles == [Principle.DIP, Principle.OCP]

    def test_log_level_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug"])
        assert RunOptions.from_args(args).log_level == "DEBUG"

    def test_unknown_log_level_rejected_by_model(self):
        with pytest.raises(pydantic.ValidationError):
            RunOptions(log_level="LOUD")

    def test_unknown_principle_rejected_by_parser(self):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--principle", "xyz"])
        assert excinfo.value.code == 2


class TestMain:

    def test_no_arguments_runs_everything(self, capsys):
        main([])
        out = capsys.readouterr().out
        assert out.startswith("🎓 SOLID PRINCIPLES LEARNING DEMO")
        assert "Starting the demonstrations..." in out
        assert "Student discount: 20.00" in out
        assert "🎉 DEMONSTRATION COMPLETE!" in out
        assert out.rstrip().endswith("Done.")

    def test_single_principle(self, capsys):
        main(["--principle", "lsp"])
        out = capsys.readouterr().out
        assert "(LSP)" in out
        assert "(OCP)" not in out

    def test_list(self, capsys):
        main(["--list"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "srp  Single Responsibility Principle"
        assert len(lines) == 5

    def test_pause_waits_for_enter_twice(self, capsys, monkeypatch):
        prompts = []
        monkeypatch.setattr("builtins.input", lambda prompt="": prompts.append(prompt) or "")
        main(["--pause", "--principle", "srp"])
        assert prompts == ["Press Enter to start the demonstrations...", "Press Enter to exit..."]
        assert "Done." not in capsys.readouterr().out
