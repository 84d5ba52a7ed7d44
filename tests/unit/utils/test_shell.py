"""Unit tests for shell execution utilities."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from refctl.utils.shell import CommandResult, command_exists, run_command


class TestCommandResult:
    """Tests for CommandResult."""

    def test_success(self) -> None:
        assert CommandResult(stdout="", stderr="", returncode=0).success is True

    def test_failure(self) -> None:
        assert CommandResult(stdout="", stderr="boom", returncode=2).success is False


class TestRunCommand:
    """Tests for run_command function."""

    @patch("refctl.utils.shell.subprocess.run")
    def test_captures_output(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(stdout="42\n", stderr="", returncode=0)

        result = run_command(["wp", "post", "create", "--porcelain"])

        assert result == CommandResult(stdout="42\n", stderr="", returncode=0)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["check"] is False

    @patch("refctl.utils.shell.subprocess.run")
    def test_passes_timeout_and_cwd(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["ls"], timeout=5.0, cwd="/tmp")

        assert mock_run.call_args.kwargs["timeout"] == 5.0
        assert mock_run.call_args.kwargs["cwd"] == "/tmp"

    @patch("refctl.utils.shell.subprocess.run")
    def test_missing_executable_propagates(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = FileNotFoundError("wp")

        with pytest.raises(FileNotFoundError):
            run_command(["wp", "--info"])

    @patch("refctl.utils.shell.subprocess.run")
    def test_check_raises(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = subprocess.CalledProcessError(1, ["false"])

        with pytest.raises(subprocess.CalledProcessError):
            run_command(["false"], check=True)


class TestCommandExists:
    """Tests for command_exists function."""

    def test_found(self) -> None:
        with patch("refctl.utils.shell.shutil.which", return_value="/usr/bin/wp"):
            assert command_exists("wp") is True

    def test_not_found(self) -> None:
        with patch("refctl.utils.shell.shutil.which", return_value=None):
            assert command_exists("wp") is False
