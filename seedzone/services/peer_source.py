"""Peer source that runs the node's peer-info command."""

import logging
import shlex
import subprocess
from typing import Callable, Optional, Union

from seedzone.errors import NoResponseError


logger = logging.getLogger(__name__)

# Any zero-argument callable returning the raw peer-info output
PeerSource = Callable[[], Union[str, bytes]]


class CommandPeerSource:
    """Runs a local command and returns its standard output.

    The command is trusted local configuration (e.g.
    ``"/usr/local/bin/bitcoin-cli getpeerinfo"``); it is split with shlex
    and run without a shell.
    """

    def __init__(self, command: str, timeout: Optional[int] = None):
        """Initialize the peer source.

        Args:
            command: Command line to execute.
            timeout: Seconds to wait for the command, or None to wait forever.
        """
        self.command = command
        self.timeout = timeout

    def __call__(self) -> bytes:
        """Run the command and capture its output.

        Output is returned undecoded; the peer decoder owns text decoding.

        Returns:
            bytes: Raw standard output of the command.

        Raises:
            NoResponseError: If the command cannot be parsed or started,
                times out, or prints nothing.
        """
        try:
            args = shlex.split(self.command)
        except ValueError as e:
            raise NoResponseError(self.command, f"unparsable command: {e}") from e
        logger.debug(f"Running peer command: {args}")

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            raise NoResponseError(
                self.command, f"timed out after {self.timeout}s"
            ) from None
        except OSError as e:
            raise NoResponseError(self.command, str(e)) from e

        if result.returncode != 0:
            logger.warning(
                "Peer command exited with non-zero status",
                extra={
                    "command": self.command,
                    "returncode": result.returncode,
                    "stderr": (result.stderr or b"")
                    .decode("utf-8", errors="replace")
                    .strip(),
                },
            )

        if not result.stdout:
            raise NoResponseError(self.command)

        return result.stdout
