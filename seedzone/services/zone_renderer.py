"""BIND zone file rendering."""

from datetime import datetime
from typing import Sequence

from seedzone.config import SeedConfig


ZONE_TTL = 600

SERIAL_FORMAT = "%Y%m%d%H%M%S"


def format_serial(now: datetime) -> str:
    """Format a timestamp as a zone serial (YYYYMMDDHHmmss).

    Examples:
        >>> format_serial(datetime(2024, 3, 9, 17, 5, 1))
        '20240309170501'
    """
    return now.strftime(SERIAL_FORMAT)


def render_zone(config: SeedConfig, addresses: Sequence[str], serial: str) -> str:
    """Render the seed zone as BIND zone file text.

    Takes already-filtered addresses; no validation happens here.

    Args:
        config: Zone metadata (domain, nameservers, hostmaster, SOA timers).
        addresses: Dotted-quad addresses, one A record each, in order.
        serial: SOA serial number.

    Returns:
        str: Zone file text ending with a newline.
    """
    domain = config.domain.rstrip(".")
    lines = [
        ";",
        f"; BIND data for {domain}",
        ";",
        f"$TTL\t{ZONE_TTL}",
        f"@\tIN\tSOA {config.master_ns} {config.hostmaster} (",
        f"\t\t\t{serial} ; Serial",
        f"\t\t\t{config.refresh}\t\t; Refresh",
        f"\t\t\t{config.retry}\t\t; Retry",
        f"\t\t\t{config.expire}\t\t; Expire",
        f"\t\t\t{config.negative_ttl} )\t\t; Negative Cache TTL",
    ]
    lines.extend(f"\t\tNS\t{ns}" for ns in config.nameservers)
    lines.extend(f"\t\tA\t{address}" for address in addresses)
    return "\n".join(lines) + "\n"
