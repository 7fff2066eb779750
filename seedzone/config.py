"""Configuration module for the DNS seed zone generator.

Loads and validates settings from environment variables or a YAML file.
"""

import os
import shlex
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import dns.exception
import dns.name
import yaml


DEFAULT_REFRESH = 28800
DEFAULT_RETRY = 7200
DEFAULT_EXPIRE = 2419200
DEFAULT_NEGATIVE_TTL = 86400

TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class SeedConfig:
    """Zone generator configuration, immutable for the process lifetime."""

    # Peer source
    peer_command: str
    peer_port: int
    command_timeout: Optional[int]

    # Zone metadata
    domain: str
    master_ns: str
    slave_ns: Tuple[str, ...]
    hostmaster: str

    # SOA timers (seconds)
    refresh: int
    retry: int
    expire: int
    negative_ttl: int

    # Operational
    verbose: bool

    @property
    def nameservers(self) -> List[str]:
        """All NS targets, master first, then slaves in configured order."""
        return [self.master_ns, *self.slave_ns]

    @classmethod
    def from_env(cls) -> "SeedConfig":
        """Load configuration from environment variables.

        Raises:
            ValueError: If required variables are missing or invalid.

        Returns:
            SeedConfig: Validated configuration instance.
        """
        slave_ns_str = os.getenv("SEED_SLAVE_NS", "")
        slave_ns = [ns.strip() for ns in slave_ns_str.split(",") if ns.strip()]

        raw = {
            "peer_command": cls._get_required_env("SEED_PEER_COMMAND"),
            "peer_port": cls._get_required_env("SEED_PEER_PORT"),
            "command_timeout": os.getenv("SEED_COMMAND_TIMEOUT") or None,
            "domain": cls._get_required_env("SEED_DOMAIN"),
            "master_ns": cls._get_required_env("SEED_MASTER_NS"),
            "slave_ns": slave_ns,
            "hostmaster": os.getenv("SEED_HOSTMASTER") or None,
            "refresh": os.getenv("SEED_REFRESH", str(DEFAULT_REFRESH)),
            "retry": os.getenv("SEED_RETRY", str(DEFAULT_RETRY)),
            "expire": os.getenv("SEED_EXPIRE", str(DEFAULT_EXPIRE)),
            "negative_ttl": os.getenv("SEED_NEGATIVE_TTL", str(DEFAULT_NEGATIVE_TTL)),
            "verbose": os.getenv("VERBOSE", "false").lower() in TRUE_VALUES,
        }
        return cls._build(raw, source="environment")

    @classmethod
    def from_file(cls, path: str) -> "SeedConfig":
        """Load configuration from a YAML file.

        Keys mirror the field names; ``slave_ns`` is a list.

        Args:
            path: Path to the YAML configuration file.

        Raises:
            ValueError: If the file is unreadable or values are invalid.

        Returns:
            SeedConfig: Validated configuration instance.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ValueError(f"Cannot read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        for key in ("peer_command", "peer_port", "domain", "master_ns"):
            if data.get(key) in (None, ""):
                raise ValueError(f"Required setting {key} is not set in {path}")

        slave_ns = data.get("slave_ns") or []
        if isinstance(slave_ns, str):
            slave_ns = [slave_ns]
        if not isinstance(slave_ns, list):
            raise ValueError("slave_ns must be a list of nameserver names")

        verbose = data.get("verbose", False)
        if isinstance(verbose, str):
            verbose = verbose.lower() in TRUE_VALUES

        raw = {
            "peer_command": str(data["peer_command"]),
            "peer_port": data["peer_port"],
            "command_timeout": data.get("command_timeout"),
            "domain": str(data["domain"]),
            "master_ns": str(data["master_ns"]),
            "slave_ns": [str(ns) for ns in slave_ns],
            "hostmaster": data.get("hostmaster"),
            "refresh": data.get("refresh", DEFAULT_REFRESH),
            "retry": data.get("retry", DEFAULT_RETRY),
            "expire": data.get("expire", DEFAULT_EXPIRE),
            "negative_ttl": data.get("negative_ttl", DEFAULT_NEGATIVE_TTL),
            "verbose": bool(verbose),
        }
        return cls._build(raw, source=path)

    @classmethod
    def _build(cls, raw: Dict[str, Any], source: str) -> "SeedConfig":
        """Validate raw settings and construct the configuration.

        Args:
            raw: Unvalidated settings keyed by field name.
            source: Where the settings came from, for error messages.

        Raises:
            ValueError: If any setting is invalid.

        Returns:
            SeedConfig: Validated configuration instance.
        """
        peer_command = raw["peer_command"].strip()
        if not peer_command:
            raise ValueError(f"peer_command must not be empty ({source})")
        try:
            shlex.split(peer_command)
        except ValueError as e:
            raise ValueError(f"peer_command cannot be parsed: {e} ({source})") from e

        peer_port = cls._parse_int("peer_port", raw["peer_port"])
        if not 1 <= peer_port <= 65535:
            raise ValueError("peer_port must be between 1 and 65535")

        command_timeout = None
        if raw["command_timeout"] is not None:
            command_timeout = cls._parse_positive_int(
                "command_timeout", raw["command_timeout"]
            )

        domain = normalize_dns_name(raw["domain"], "domain")
        master_ns = normalize_dns_name(raw["master_ns"], "master_ns")
        slave_ns = tuple(normalize_dns_name(ns, "slave_ns") for ns in raw["slave_ns"])

        hostmaster = raw["hostmaster"]
        if hostmaster:
            hostmaster = normalize_hostmaster(str(hostmaster))
        else:
            hostmaster = f"hostmaster.{domain}"

        return cls(
            peer_command=peer_command,
            peer_port=peer_port,
            command_timeout=command_timeout,
            domain=domain,
            master_ns=master_ns,
            slave_ns=slave_ns,
            hostmaster=hostmaster,
            refresh=cls._parse_positive_int("refresh", raw["refresh"]),
            retry=cls._parse_positive_int("retry", raw["retry"]),
            expire=cls._parse_positive_int("expire", raw["expire"]),
            negative_ttl=cls._parse_positive_int("negative_ttl", raw["negative_ttl"]),
            verbose=raw["verbose"],
        )

    @staticmethod
    def _get_required_env(key: str) -> str:
        """Get required environment variable or raise ValueError.

        Args:
            key: Environment variable name.

        Returns:
            str: Environment variable value.

        Raises:
            ValueError: If environment variable is not set or empty.
        """
        value = os.getenv(key)
        if not value:
            raise ValueError(f"Required environment variable {key} is not set")
        return value

    @staticmethod
    def _parse_int(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be an integer, got {value!r}") from None

    @classmethod
    def _parse_positive_int(cls, name: str, value: Any) -> int:
        parsed = cls._parse_int(name, value)
        if parsed <= 0:
            raise ValueError(f"{name} must be a positive integer")
        return parsed


def normalize_dns_name(value: str, setting: str) -> str:
    """Convert a domain name to absolute text form with a trailing dot.

    Args:
        value: Domain name, with or without the trailing dot.
        setting: Setting name used in the error message.

    Returns:
        str: Absolute domain name, e.g. ``"seed.example.org."``.

    Raises:
        ValueError: If the value is not a valid DNS name.

    Examples:
        >>> normalize_dns_name("ns1.example.org", "master_ns")
        'ns1.example.org.'
    """
    value = value.strip()
    if not value or value == ".":
        raise ValueError(f"{setting} must be a non-root DNS name")
    if any(ch.isspace() for ch in value):
        raise ValueError(f"{setting} must not contain whitespace: {value!r}")
    try:
        return dns.name.from_text(value).to_text()
    except dns.exception.DNSException as e:
        raise ValueError(f"{setting} is not a valid DNS name: {value!r} ({e})") from e


def normalize_hostmaster(value: str) -> str:
    """Convert a hostmaster contact into SOA RNAME form.

    A mailbox such as ``hostmaster@example.org`` becomes
    ``hostmaster.example.org.``; a name already in DNS form is only
    made absolute.

    Raises:
        ValueError: If the contact is not a valid mailbox or DNS name.
    """
    value = value.strip()
    if "@" in value:
        local, _, host = value.partition("@")
        if not local or not host or "@" in host:
            raise ValueError(f"hostmaster is not a valid mailbox: {value!r}")
        # Dots in the local part must be escaped in RNAME form
        value = local.replace(".", "\\.") + "." + host
    return normalize_dns_name(value, "hostmaster")


def load_config() -> SeedConfig:
    """Load configuration from ``SEED_CONFIG_FILE`` if set, else the environment."""
    config_file = os.getenv("SEED_CONFIG_FILE")
    if config_file:
        return SeedConfig.from_file(config_file)
    return SeedConfig.from_env()
