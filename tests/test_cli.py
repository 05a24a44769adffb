"""Tests for the CLI layer (cli/app.py, cli/report.py).

Output goes to stderr through the console proxy; ``capsys`` captures it
whether or not Rich renders it.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from aidd.cli import exit_codes
from aidd.cli.app import cli, main
from aidd.core.models import CloneFailure
from aidd.exceptions import CloneError, FileSystemError


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------

class TestArguments:
    def test_flags_build_options(self, tmp_path: Path) -> None:
        with patch("aidd.engine.execute_clone") as mock_clone:
            mock_clone.return_value = CloneFailure(error=CloneError("stop"))
            main([str(tmp_path), "-f", "-d", "-v", "-c"])

        options = mock_clone.call_args.args[0]
        assert options.target_directory == tmp_path
        assert options.force is True
        assert options.dry_run is True
        assert options.verbose is True
        assert options.cursor is True

    def test_target_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        with patch("aidd.engine.execute_clone") as mock_clone:
            mock_clone.return_value = CloneFailure(error=CloneError("stop"))
            main([])

        options = mock_clone.call_args.args[0]
        assert options.target_directory == Path(".")
        assert options.force is False
        assert options.cursor is False

    def test_unknown_flag_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--nope"])
        assert exc_info.value.code == 2


# ---------------------------------------------------------------------------
# Success rendering
# ---------------------------------------------------------------------------

class TestSuccessOutput:
    def test_clone_reports_target(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([str(tmp_path)])
        err = capsys.readouterr().err

        assert code == exit_codes.SUCCESS
        assert "cloned" in err
        assert "create:" in err
        assert (tmp_path / "ai").is_dir()

    def test_dry_run_message(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([str(tmp_path), "--dry-run", "--cursor"])
        err = capsys.readouterr().err

        assert code == exit_codes.SUCCESS
        assert "Dry run" in err
        assert "symlink-create: 1" in err
        assert list(tmp_path.iterdir()) == []

    def test_verbose_lists_actions(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(tmp_path), "--verbose", "--dry-run"])
        err = capsys.readouterr().err
        assert "ai/rules/" in err

    def test_conflicts_suggest_force(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main([str(tmp_path)])
        capsys.readouterr()

        code = main([str(tmp_path)])
        err = capsys.readouterr().err
        assert code == exit_codes.SUCCESS
        assert "skip-conflict" in err
        assert "--force" in err

    def test_cursor_creates_link(self, tmp_path: Path) -> None:
        assert main([str(tmp_path), "--cursor"]) == exit_codes.SUCCESS
        assert os.readlink(tmp_path / ".cursor") == "ai"


# ---------------------------------------------------------------------------
# Failure rendering
# ---------------------------------------------------------------------------

class TestFailureOutput:
    def test_validation_error_exit_one(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")

        code = main([str(blocker)])
        err = capsys.readouterr().err

        assert code == exit_codes.GENERAL_ERROR
        assert "Validation Error" in err
        assert "Hint" in err

    def test_cause_only_shown_when_verbose(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        failure = CloneFailure(
            error=FileSystemError("copy failed", cause=OSError("disk is full")),
        )
        with patch("aidd.engine.execute_clone", return_value=failure):
            assert main([str(tmp_path)]) == exit_codes.GENERAL_ERROR
            quiet = capsys.readouterr().err
            assert main([str(tmp_path), "--verbose"]) == exit_codes.GENERAL_ERROR
            loud = capsys.readouterr().err

        assert "File System Error" in quiet
        assert "disk is full" not in quiet
        assert "disk is full" in loud


# ---------------------------------------------------------------------------
# Process error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("aidd.cli.app.main", lambda: exit_codes.SUCCESS)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _raise() -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr("aidd.cli.app.main", _raise)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_exception(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _raise() -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr("aidd.cli.app.main", _raise)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "kaboom" in capsys.readouterr().err

    def test_known_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _raise() -> int:
            raise CloneError("broken install")

        monkeypatch.setattr("aidd.cli.app.main", _raise)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
