"""Exceptions raised by networksetup."""


class NetworkSetupError(Exception):
    """Base exception for networksetup errors."""
    pass


class LaunchError(NetworkSetupError, OSError):
    """Raised when the networksetup tool cannot be found or started."""

    def __init__(self, command, reason):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Could not launch '{self.command[0]}': {reason}")
