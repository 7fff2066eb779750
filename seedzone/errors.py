"""Fatal error kinds for zone generation.

Every error here aborts the run before any zone text is written.
"""


class SeedError(Exception):
    """Base class for all fatal zone generation failures."""


class NoResponseError(SeedError):
    """The peer command produced no output."""

    def __init__(self, command: str, reason: str | None = None):
        self.command = command
        self.reason = reason
        message = f"no response from {command}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class PeerDecodeError(SeedError):
    """The peer command output is not valid JSON."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"error decoding json data from daemon: {detail}")


class NotAnArrayError(SeedError):
    """The peer command output is JSON, but not a top-level array."""

    def __init__(self, json_type: str):
        self.json_type = json_type
        super().__init__(f"returned data from daemon is not an array (got {json_type})")


class NoOutboundPeersError(SeedError):
    """No peer survived filtering."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"no outbound connections found in {command}")
