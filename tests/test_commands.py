"""
Unit tests for networksetup/utils/commands.py

subprocess.run is patched; nothing is executed.
"""

import logging
import subprocess

import pytest
from unittest.mock import MagicMock, patch


@pytest.mark.unit
class TestBuildCommandLine:
    """Tests for build_command_line."""

    def test_default_executable(self):
        from networksetup.utils import build_command_line

        assert build_command_line(["-setdnsservers", "Wi-Fi", "Empty"]) == [
            "networksetup",
            "-setdnsservers",
            "Wi-Fi",
            "Empty",
        ]

    def test_custom_executable_and_sudo(self):
        from networksetup.utils import build_command_line

        command = build_command_line(
            ["-setwebproxystate", "Wi-Fi", "off"],
            executable="/usr/sbin/networksetup",
            sudo=True,
        )
        assert command == ["sudo", "/usr/sbin/networksetup", "-setwebproxystate", "Wi-Fi", "off"]


@pytest.mark.unit
class TestRunCommand:
    """Tests for run_command."""

    def test_output_discarded_and_status_returned(self):
        from networksetup.utils import run_command

        with patch("networksetup.utils.commands.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)

            status = run_command(["-setwebproxy", "Wi-Fi", "0.0.0.0", "80"])

        assert status == 0
        mock_run.assert_called_once_with(
            ["networksetup", "-setwebproxy", "Wi-Fi", "0.0.0.0", "80"],
            check=False,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def test_nonzero_status_is_not_an_error(self):
        from networksetup.utils import run_command

        with patch("networksetup.utils.commands.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=14)

            assert run_command(["-setdnsservers", "Bogus", "Empty"]) == 14

    def test_missing_tool_raises_launch_error(self):
        from networksetup import LaunchError
        from networksetup.utils import run_command

        with patch("networksetup.utils.commands.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

            with pytest.raises(LaunchError) as excinfo:
                run_command(["-setwebproxystate", "Wi-Fi", "on"], executable="/nope/networksetup")

        assert excinfo.value.command[0] == "/nope/networksetup"
        assert isinstance(excinfo.value, OSError)
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_permission_denied_raises_launch_error(self):
        from networksetup import LaunchError
        from networksetup.utils import run_command

        with patch("networksetup.utils.commands.subprocess.run") as mock_run:
            mock_run.side_effect = PermissionError(13, "Permission denied")

            with pytest.raises(LaunchError, match="Permission denied"):
                run_command(["-setwebproxystate", "Wi-Fi", "on"])


@pytest.mark.unit
class TestRedactCommand:
    """Proxy passwords never reach the logs."""

    def test_password_masked(self):
        from networksetup.utils import redact_command

        command = ["sudo", "networksetup", "-setwebproxy", "Wi-Fi", "h", "1", "on", "alice", "TOPSECRET"]

        assert redact_command(command) == [
            "sudo", "networksetup", "-setwebproxy", "Wi-Fi", "h", "1", "on", "alice", "****"
        ]
        assert command[-1] == "TOPSECRET"

    def test_without_credentials_unchanged(self):
        from networksetup.utils import redact_command

        command = ["networksetup", "-setsocksfirewallproxy", "Wi-Fi", "127.0.0.1", "1080"]
        assert redact_command(command) == command

    def test_other_flags_unchanged(self):
        from networksetup.utils import redact_command

        command = ["networksetup", "-setdnsservers", "Wi-Fi", "a", "b", "on", "c", "d"]
        assert redact_command(command) == command

    def test_password_kept_out_of_log_file(self, tmp_path):
        from networksetup import Address, Config, Network
        from networksetup.configuration import set_web_proxy
        from networksetup.logging_config import setup_logging

        log_file = tmp_path / "networksetup.log"
        setup_logging(debug=True, log_file=str(log_file))

        with patch("networksetup.utils.commands.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=1)

            set_web_proxy(Network.WIFI, Config.set(Address("h", "1").auth("alice", "TOPSECRET")))

        # The real password still reaches networksetup
        assert mock_run.call_args[0][0][-1] == "TOPSECRET"

        for handler in logging.getLogger().handlers:
            handler.flush()
        contents = log_file.read_text()
        assert "-setwebproxy Wi-Fi h 1 on alice" in contents
        assert "****" in contents
        assert "TOPSECRET" not in contents

    def test_launch_error_masks_password(self):
        from networksetup import LaunchError
        from networksetup.utils import run_command

        with patch("networksetup.utils.commands.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError(2, "No such file or directory")

            with pytest.raises(LaunchError) as excinfo:
                run_command(["-setftpproxy", "Wi-Fi", "h", "21", "on", "bob", "hunter2"])

        assert "hunter2" not in excinfo.value.command
