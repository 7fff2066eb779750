"""pytest fixtures for testing."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def seed_config():
    """Configuration matching a single-master, single-slave seed."""
    from seedzone.config import SeedConfig

    return SeedConfig(
        peer_command="/usr/local/bin/i0coind getpeerinfo",
        peer_port=7333,
        command_timeout=None,
        domain="seed.example.org.",
        master_ns="ns1.example.org.",
        slave_ns=("ns2.example.org.",),
        hostmaster="hostmaster.example.org.",
        refresh=28800,
        retry=7200,
        expire=2419200,
        negative_ttl=86400,
        verbose=False,
    )


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed instant for deterministic serials."""
    return lambda: datetime(2024, 3, 9, 17, 5, 1, tzinfo=timezone.utc)


@pytest.fixture
def seed_env(monkeypatch):
    """Minimal valid environment for SeedConfig.from_env()."""
    env_vars = {
        "SEED_PEER_COMMAND": "/usr/local/bin/i0coind getpeerinfo",
        "SEED_PEER_PORT": "7333",
        "SEED_DOMAIN": "seed.example.org",
        "SEED_MASTER_NS": "ns1.example.org",
    }
    for key in (
        "SEED_CONFIG_FILE",
        "SEED_SLAVE_NS",
        "SEED_HOSTMASTER",
        "SEED_COMMAND_TIMEOUT",
        "SEED_REFRESH",
        "SEED_RETRY",
        "SEED_EXPIRE",
        "SEED_NEGATIVE_TTL",
        "VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars
