"""IPv4 address utilities for peer addresses."""

import re
from typing import Optional


def peer_address_pattern(port: int) -> re.Pattern:
    """Build the anchored pattern for an IPv4 peer address on a given port.

    Args:
        port: Peer port the address must carry.

    Returns:
        re.Pattern: Pattern capturing the four decimal groups.
    """
    return re.compile(rf"^(\d+)\.(\d+)\.(\d+)\.(\d+):{port}$", re.ASCII)


def extract_ipv4(addr: str, port: int) -> Optional[str]:
    """Extract a dotted-quad IPv4 address from a "host:port" peer address.

    The address must be four decimal groups on exactly the given port.
    Groups are only range-checked, so "001" is accepted and rebuilt as "1".

    Args:
        addr: Peer address as reported by the node.
        port: Expected peer port.

    Returns:
        Optional[str]: Dotted-quad address, or None if addr does not qualify.

    Examples:
        >>> extract_ipv4("203.0.113.45:7333", 7333)
        '203.0.113.45'
        >>> extract_ipv4("203.0.113.45:8333", 7333) is None
        True
        >>> extract_ipv4("999.0.113.45:7333", 7333) is None
        True
        >>> extract_ipv4("[2001:db8::1]:7333", 7333) is None
        True
    """
    match = peer_address_pattern(port).match(addr)
    if not match:
        return None

    octets = [int(group) for group in match.groups()]
    if any(octet > 255 for octet in octets):
        return None

    return ".".join(str(octet) for octet in octets)
