"""Fallback values for connection properties the caller left unset."""

from __future__ import annotations

from typing import Mapping

from .errors import UnknownServerTypeError
from .models import ConnectionProperties, PropertyKey, ServerType, TdsVersion

_COMMON_DEFAULTS: Mapping[PropertyKey, str] = {
    PropertyKey.APPNAME: "jTDS",
    PropertyKey.CHARSET: "",
    PropertyKey.DATABASENAME: "",
    PropertyKey.DOMAIN: "",
    PropertyKey.INSTANCE: "",
    PropertyKey.LANGUAGE: "",
    PropertyKey.LASTUPDATECOUNT: "true",
    PropertyKey.MACADDRESS: "000000000000",
    PropertyKey.NAMEDPIPE: "false",
    PropertyKey.PASSWORD: "",
    PropertyKey.PREPARESQL: "true",
    PropertyKey.PROGNAME: "jTDS",
    PropertyKey.SENDSTRINGPARAMETERSASUNICODE: "true",
    PropertyKey.TCPNODELAY: "true",
    PropertyKey.USECURSORS: "false",
    PropertyKey.USELOBS: "true",
    PropertyKey.USER: "",
    PropertyKey.WSID: "",
}

_SERVER_DEFAULTS: Mapping[ServerType, Mapping[PropertyKey, str]] = {
    ServerType.SQLSERVER: {
        PropertyKey.PORTNUMBER: "1433",
        PropertyKey.TDS: TdsVersion.TDS80.value,
    },
    ServerType.SYBASE: {
        PropertyKey.PORTNUMBER: "7100",
        PropertyKey.TDS: TdsVersion.TDS50.value,
    },
}

_PACKET_SIZE_DEFAULTS: Mapping[TdsVersion, str] = {
    TdsVersion.TDS42: "512",
    TdsVersion.TDS50: "0",
    TdsVersion.TDS70: "0",
    TdsVersion.TDS80: "0",
}


def fill_defaults(props: Mapping[str, str]) -> ConnectionProperties:
    """Return a copy of ``props`` with every known default filled in.

    Keys already present are never overwritten. The server family decides the
    port and protocol version; the protocol version then decides the packet size.
    """

    result: ConnectionProperties = dict(props)
    server_type = _server_type(result)
    result.setdefault(PropertyKey.SERVERTYPE.value, server_type.value)
    for key, value in _SERVER_DEFAULTS[server_type].items():
        result.setdefault(key.value, value)
    tds = result[PropertyKey.TDS.value]
    packet_size = next(
        (size for version, size in _PACKET_SIZE_DEFAULTS.items() if version.value == tds),
        "0",
    )
    result.setdefault(PropertyKey.PACKETSIZE.value, packet_size)
    for key, value in _COMMON_DEFAULTS.items():
        result.setdefault(key.value, value)
    return result


def _server_type(props: Mapping[str, str]) -> ServerType:
    raw = props.get(PropertyKey.SERVERTYPE.value)
    if raw is None:
        return ServerType.SQLSERVER
    server_type = ServerType.from_tag(raw)
    if server_type is None:
        raise UnknownServerTypeError(f"Unknown server type '{raw}'", server_type=raw)
    return server_type


__all__ = ["fill_defaults"]
