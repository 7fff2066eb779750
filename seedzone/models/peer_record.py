"""Peer record model from the node's peer-info output."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PeerRecord:
    """One entry from the node's peer list.

    Only the attributes used for seeding are kept; everything else the
    node reports is ignored.

    Attributes:
        addr: Remote address in "host:port" form.
        banscore: Accumulated misbehaviour score (0 when not reported).
        inbound: True if the remote peer initiated the connection.
    """

    addr: str
    banscore: int = 0
    inbound: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PeerRecord":
        """Build a record from one decoded JSON object.

        Args:
            data: Peer object as decoded from JSON.

        Returns:
            PeerRecord: Record with defaults for missing attributes.
        """
        return cls(
            addr=data["addr"],
            banscore=data.get("banscore") or 0,
            inbound=bool(data.get("inbound")),
        )

    def is_banned(self) -> bool:
        """Check if the peer has any misbehaviour score.

        Returns:
            bool: True if banscore is positive, False otherwise.
        """
        return self.banscore > 0

    def is_outbound(self) -> bool:
        """Check if this node initiated the connection.

        Returns:
            bool: True for outbound peers, False for inbound ones.
        """
        return not self.inbound
