"""Peer filter selecting well-behaved outbound IPv4 peers."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from seedzone.errors import NoOutboundPeersError
from seedzone.models.peer_record import PeerRecord
from seedzone.utils.ip_utils import extract_ipv4


logger = logging.getLogger(__name__)

REJECT_BANNED = "banned"
REJECT_INBOUND = "inbound"
REJECT_ADDRESS = "address"


@dataclass
class FilterResult:
    """Outcome of one filter pass.

    Attributes:
        addresses: Accepted dotted-quad addresses in encounter order,
            duplicates included.
        rejections: Count of dropped peers per rejection reason.
    """

    addresses: List[str] = field(default_factory=list)
    rejections: Dict[str, int] = field(
        default_factory=lambda: {REJECT_BANNED: 0, REJECT_INBOUND: 0, REJECT_ADDRESS: 0}
    )

    def reject(self, reason: str) -> None:
        self.rejections[reason] += 1


def classify_peer(peer: PeerRecord, port: int) -> tuple[str | None, str | None]:
    """Decide whether a single peer qualifies for the seed zone.

    Checks run in order: banscore, direction, then address.

    Args:
        peer: Decoded peer record.
        port: Peer port addresses must carry.

    Returns:
        tuple[str | None, str | None]: (address, None) if accepted,
            (None, reason) if rejected.
    """
    if peer.is_banned():
        return None, REJECT_BANNED
    if not peer.is_outbound():
        return None, REJECT_INBOUND

    address = extract_ipv4(peer.addr, port)
    if address is None:
        return None, REJECT_ADDRESS
    return address, None


def filter_peers(peers: Iterable[PeerRecord], port: int) -> FilterResult:
    """Select outbound, unbanned IPv4 peers on the given port.

    Args:
        peers: Decoded peer records in source order.
        port: Peer port addresses must carry.

    Returns:
        FilterResult: Accepted addresses and rejection counts.
    """
    result = FilterResult()
    for peer in peers:
        address, reason = classify_peer(peer, port)
        if address is None:
            logger.debug(f"Dropping peer {peer.addr}: {reason}")
            result.reject(reason)
            continue
        result.addresses.append(address)
    return result


def select_seed_addresses(
    peers: Iterable[PeerRecord], port: int, command: str
) -> FilterResult:
    """Filter peers and require at least one survivor.

    Args:
        peers: Decoded peer records in source order.
        port: Peer port addresses must carry.
        command: Peer command, named in the error message.

    Returns:
        FilterResult: Non-empty filter result.

    Raises:
        NoOutboundPeersError: If no peer qualifies.
    """
    result = filter_peers(peers, port)
    if not result.addresses:
        raise NoOutboundPeersError(command)
    return result
