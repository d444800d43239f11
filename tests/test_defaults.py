"""Tests for default property resolution."""

from __future__ import annotations

import pytest

from tdslocator.defaults import fill_defaults
from tdslocator.errors import UnknownServerTypeError
from tdslocator.models import PropertyKey


def test_sqlserver_defaults() -> None:
    props = fill_defaults({"SERVERTYPE": "SQLSERVER", "SERVERNAME": "host"})

    assert props["PORTNUMBER"] == "1433"
    assert props["TDS"] == "8.0"
    assert props["PACKETSIZE"] == "0"
    assert props["APPNAME"] == "jTDS"
    assert props["SENDSTRINGPARAMETERSASUNICODE"] == "true"


def test_sybase_defaults() -> None:
    props = fill_defaults({"SERVERTYPE": "SYBASE"})

    assert props["PORTNUMBER"] == "7100"
    assert props["TDS"] == "5.0"


def test_packet_size_follows_protocol_version() -> None:
    props = fill_defaults({"SERVERTYPE": "SQLSERVER", "TDS": "4.2"})

    assert props["TDS"] == "4.2"
    assert props["PACKETSIZE"] == "512"


def test_existing_values_are_not_overwritten() -> None:
    props = fill_defaults({"SERVERTYPE": "SQLSERVER", "PORTNUMBER": "2000", "USER": "sa", "PACKETSIZE": "4096"})

    assert props["PORTNUMBER"] == "2000"
    assert props["USER"] == "sa"
    assert props["PACKETSIZE"] == "4096"


def test_missing_server_type_defaults_to_sqlserver() -> None:
    props = fill_defaults({})

    assert props["SERVERTYPE"] == "SQLSERVER"
    assert props["PORTNUMBER"] == "1433"


def test_legacy_numeric_server_type_is_understood() -> None:
    props = fill_defaults({"SERVERTYPE": "2"})

    assert props["SERVERTYPE"] == "2"
    assert props["PORTNUMBER"] == "7100"


def test_unknown_server_type_is_rejected() -> None:
    with pytest.raises(UnknownServerTypeError):
        fill_defaults({"SERVERTYPE": "oracle"})


def test_fill_defaults_is_pure() -> None:
    source = {"SERVERTYPE": "SYBASE", "FLAG": ""}

    first = fill_defaults(source)
    second = fill_defaults(source)

    assert first == second
    assert source == {"SERVERTYPE": "SYBASE", "FLAG": ""}
    assert first["FLAG"] == ""


def test_login_timeout_is_left_to_the_driver() -> None:
    assert PropertyKey.LOGINTIMEOUT.value not in fill_defaults({})
