"""Decoder for the node's peer-info JSON output."""

import json
import logging
from typing import Any, Union

from jsonschema import Draft7Validator, ValidationError, validate

from seedzone.errors import NotAnArrayError, PeerDecodeError
from seedzone.models.peer_record import PeerRecord


logger = logging.getLogger(__name__)


PEER_LIST_SCHEMA = {"type": "array"}

PEER_RECORD_SCHEMA = {
    "type": "object",
    "required": ["addr"],
    "properties": {
        "addr": {"type": "string"},
        "banscore": {"type": ["integer", "null"]},
        "inbound": {"type": ["boolean", "null"]},
    },
}

_record_validator = Draft7Validator(PEER_RECORD_SCHEMA)


def json_type_name(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    return "array"


def decode_peer_info(raw: Union[str, bytes]) -> list[PeerRecord]:
    """Parse peer-info output into peer records.

    Elements that are not peer objects are skipped with a warning; they
    carry no usable address.

    Args:
        raw: Raw output printed by the peer command; bytes must be UTF-8.

    Returns:
        list[PeerRecord]: Records in source order.

    Raises:
        PeerDecodeError: If raw is not UTF-8 or not valid JSON.
        NotAnArrayError: If the top-level JSON value is not an array.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PeerDecodeError(str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PeerDecodeError(str(e)) from e

    try:
        validate(instance=data, schema=PEER_LIST_SCHEMA)
    except ValidationError:
        raise NotAnArrayError(json_type_name(data)) from None

    records: list[PeerRecord] = []
    for index, item in enumerate(data):
        error = next(iter(_record_validator.iter_errors(item)), None)
        if error is not None:
            logger.warning(
                "Skipping malformed peer entry",
                extra={"index": index, "error": error.message},
            )
            continue
        records.append(PeerRecord.from_dict(item))

    logger.debug(f"Decoded {len(records)} peer records from {len(data)} entries")
    return records
