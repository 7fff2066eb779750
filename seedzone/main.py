"""Main entry point for the DNS seed zone generator."""

import logging
import sys
import time
from datetime import datetime
from typing import Callable

from seedzone.config import SeedConfig, load_config
from seedzone.errors import SeedError
from seedzone.services.logger import log_run_summary, setup_logging
from seedzone.services.peer_decoder import decode_peer_info
from seedzone.services.peer_filter import select_seed_addresses
from seedzone.services.peer_source import CommandPeerSource, PeerSource
from seedzone.services.zone_renderer import format_serial, render_zone


logger = logging.getLogger(__name__)


def local_now() -> datetime:
    return datetime.now().astimezone()


def generate_zone(
    config: SeedConfig,
    peer_source: PeerSource,
    clock: Callable[[], datetime] = local_now,
) -> str:
    """Run one fetch, decode, filter and render pass.

    Args:
        config: Generator configuration.
        peer_source: Callable returning the raw peer-info text.
        clock: Callable returning the time used for the SOA serial.

    Returns:
        str: Complete zone file text.

    Raises:
        SeedError: On any fatal condition; nothing is rendered.
    """
    start = time.time()

    raw = peer_source()
    peers = decode_peer_info(raw)
    result = select_seed_addresses(peers, config.peer_port, config.peer_command)
    zone = render_zone(config, result.addresses, format_serial(clock()))

    log_run_summary(
        command=config.peer_command,
        peers_received=len(peers),
        addresses_emitted=len(result.addresses),
        rejections=result.rejections,
        duration_sec=round(time.time() - start, 3),
    )
    return zone


def main() -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 for success, 1 for fatal error).
    """
    setup_logging()

    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if config.verbose:
        setup_logging(verbose=True)
    logger.debug(
        f"Configuration loaded: zone {config.domain}, "
        f"{len(config.nameservers)} nameservers, peer port {config.peer_port}"
    )

    try:
        zone = generate_zone(
            config, CommandPeerSource(config.peer_command, config.command_timeout)
        )
    except SeedError as e:
        logger.error(str(e), extra={"error_kind": type(e).__name__})
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    sys.stdout.write(zone)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
