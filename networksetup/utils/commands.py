"""
Command execution utilities for networksetup.

Every operation funnels through run_command(), which launches the
networksetup tool with its output discarded and hands the exit status back
unchanged.
"""

import shlex
import subprocess

from .. import config
from ..exceptions import LaunchError
from ..logging_config import get_logger

# Get module logger
logger = get_logger(__name__)

REDACTED = "****"


def build_command_line(args, executable=None, sudo=False):
    """
    Build the full argv for a networksetup invocation.

    Args:
        args: Arguments following the executable (flag, service, values)
        executable: Path of the networksetup binary, defaults to PATH lookup
        sudo: If True, prefix the command with sudo

    Returns:
        List of strings ready for subprocess
    """
    command = [executable or config.DEFAULT_NETWORKSETUP_PATH] + [str(a) for a in args]
    if sudo:
        command.insert(0, config.SUDO_PATH)
    return command


def redact_command(command):
    """Return a copy of command with a proxy password masked, for logging."""
    redacted = list(command)
    for i, arg in enumerate(redacted):
        if arg.startswith("-set") and arg.endswith("proxy"):
            # -set<kind>proxy <service> <host> <port> on <user> <password>
            if len(redacted) == i + 7 and redacted[i + 4] == config.ON:
                redacted[-1] = REDACTED
            break
    return redacted


def run_command(args, executable=None, sudo=False):
    """
    Run networksetup and wait for it to exit.

    Standard output and standard error are discarded. A non-zero exit status
    is returned as is; only a failure to start the process raises.

    Args:
        args: Arguments following the executable
        executable: Path of the networksetup binary, defaults to PATH lookup
        sudo: If True, run through sudo

    Returns:
        The process exit status

    Raises:
        LaunchError: The executable was not found or could not be started
    """
    command = build_command_line(args, executable=executable, sudo=sudo)
    printable = shlex.join(redact_command(command))
    logger.debug(f"Running command: {printable}")

    try:
        result = subprocess.run(
            command,
            check=False,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {command[0]}")
        raise LaunchError(redact_command(command), "not found") from e
    except OSError as e:
        logger.error(f"Could not start '{command[0]}': {e}")
        raise LaunchError(redact_command(command), e.strerror or str(e)) from e

    if result.returncode != 0:
        logger.debug(f"Command '{printable}' failed with status {result.returncode}")

    return result.returncode
