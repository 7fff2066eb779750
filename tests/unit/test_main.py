"""Unit tests for the entry point."""

import json
from unittest.mock import patch

import pytest

from seedzone import main as main_module
from seedzone.errors import NoResponseError
from seedzone.main import generate_zone, main


PEERS = [
    {"addr": "203.0.113.45:7333", "banscore": 0, "inbound": False},
    {"addr": "198.51.100.7:7333", "banscore": 0, "inbound": True},
]


def test_generate_zone(seed_config, fixed_clock):
    """Test one full pass with an injected source and clock."""
    zone = generate_zone(seed_config, lambda: json.dumps(PEERS), fixed_clock)

    assert "\t\t\t20240309170501 ; Serial\n" in zone
    assert zone.endswith("\t\tA\t203.0.113.45\n")
    assert "198.51.100.7" not in zone


def test_generate_zone_propagates_source_error(seed_config, fixed_clock):
    """Test source failures are raised, not rendered."""

    def failing_source():
        raise NoResponseError(seed_config.peer_command)

    with pytest.raises(NoResponseError):
        generate_zone(seed_config, failing_source, fixed_clock)


@patch("seedzone.main.CommandPeerSource")
def test_main_success(mock_source_class, seed_env, capsys):
    """Test main writes the zone to stdout and returns 0."""
    mock_source_class.return_value.return_value = json.dumps(PEERS)

    exit_code = main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.startswith(";\n; BIND data for seed.example.org\n")
    assert "\t\tA\t203.0.113.45\n" in captured.out
    mock_source_class.assert_called_once_with(
        "/usr/local/bin/i0coind getpeerinfo", None
    )


@pytest.mark.parametrize(
    "output,error_kind",
    [
        ("not json", "PeerDecodeError"),
        ('{"addr": "1.2.3.4:7333"}', "NotAnArrayError"),
        ('[{"addr": "1.2.3.4:7333", "banscore": 1, "inbound": false}]', "NoOutboundPeersError"),
    ],
)
@patch("seedzone.main.CommandPeerSource")
def test_main_fatal_errors(mock_source_class, seed_env, capsys, output, error_kind):
    """Test every fatal condition exits 1 with nothing on stdout."""
    mock_source_class.return_value.return_value = output

    exit_code = main()

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert error_kind in captured.err


@patch("seedzone.main.CommandPeerSource")
def test_main_no_response(mock_source_class, seed_env, capsys):
    """Test NoResponseError exits 1 and names the command on stderr."""
    mock_source_class.return_value.side_effect = NoResponseError(
        "/usr/local/bin/i0coind getpeerinfo"
    )

    exit_code = main()

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "no response from /usr/local/bin/i0coind getpeerinfo" in captured.err


def test_main_invalid_config(seed_env, monkeypatch, capsys):
    """Test configuration errors exit 1 before running the command."""
    monkeypatch.setenv("SEED_PEER_PORT", "not-a-port")

    with patch.object(main_module, "CommandPeerSource") as mock_source_class:
        exit_code = main()

    assert exit_code == 1
    mock_source_class.assert_not_called()
    assert "Invalid configuration" in capsys.readouterr().err


def test_default_clock_uses_local_time():
    """Test the default serial clock reports the host's local offset."""
    now = main_module.local_now()

    assert now.tzinfo is not None
    assert now.utcoffset() == now.astimezone().utcoffset()
    assert generate_zone.__defaults__ == (main_module.local_now,)


def test_generate_zone_serial_uses_wall_clock(seed_config):
    """Test an aware local time gives its own wall-clock digits, not UTC's."""
    local = main_module.datetime(2024, 3, 9, 5, 5, 1).astimezone()

    zone = generate_zone(seed_config, lambda: json.dumps(PEERS), lambda: local)

    assert "\t\t\t20240309050501 ; Serial\n" in zone
