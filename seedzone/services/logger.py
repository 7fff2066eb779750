"""Structured JSON logging on stderr.

Stdout carries the generated zone file, so log output never goes there.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Global run ID for correlation across log entries
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Args:
        verbose: Log at DEBUG instead of INFO.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_run_summary(
    command: str,
    peers_received: int,
    addresses_emitted: int,
    rejections: Dict[str, int],
    duration_sec: float,
) -> None:
    """Log zone generation summary.

    Args:
        command: Peer command that was queried.
        peers_received: Number of peer records decoded.
        addresses_emitted: Number of A records written.
        rejections: Count of dropped peers per rejection reason.
        duration_sec: Total run time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Zone generated",
        extra={
            "command": command,
            "peers_received": peers_received,
            "addresses_emitted": addresses_emitted,
            "rejections": rejections,
            "duration_sec": duration_sec,
        },
    )
