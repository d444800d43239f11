"""Shared enums and dataclasses used across the locator modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

ConnectionProperties = Dict[str, str]


class ServerType(str, Enum):
    """Database server product addressed by a locator."""

    SQLSERVER = "SQLSERVER"
    SYBASE = "SYBASE"

    @classmethod
    def from_tag(cls, value: str) -> "ServerType | None":
        """Resolve a family tag case-insensitively; legacy numeric codes are accepted."""

        normalized = value.strip().upper()
        legacy = {"1": cls.SQLSERVER, "2": cls.SYBASE}
        if normalized in legacy:
            return legacy[normalized]
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @property
    def scheme(self) -> str:
        """Lower-case spelling used inside a locator."""

        return self.value.lower()


class TdsVersion(str, Enum):
    """Wire dialects understood by the session layer, oldest capability first."""

    TDS42 = "4.2"
    TDS50 = "5.0"
    TDS70 = "7.0"
    TDS80 = "8.0"


class PropertyKey(str, Enum):
    """Canonical upper-case keys recognised by the driver."""

    APPNAME = "APPNAME"
    CHARSET = "CHARSET"
    DATABASENAME = "DATABASENAME"
    DOMAIN = "DOMAIN"
    INSTANCE = "INSTANCE"
    LANGUAGE = "LANGUAGE"
    LASTUPDATECOUNT = "LASTUPDATECOUNT"
    LOGINTIMEOUT = "LOGINTIMEOUT"
    MACADDRESS = "MACADDRESS"
    NAMEDPIPE = "NAMEDPIPE"
    PACKETSIZE = "PACKETSIZE"
    PASSWORD = "PASSWORD"
    PORTNUMBER = "PORTNUMBER"
    PREPARESQL = "PREPARESQL"
    PROGNAME = "PROGNAME"
    SENDSTRINGPARAMETERSASUNICODE = "SENDSTRINGPARAMETERSASUNICODE"
    SERVERNAME = "SERVERNAME"
    SERVERTYPE = "SERVERTYPE"
    TCPNODELAY = "TCPNODELAY"
    TDS = "TDS"
    USECURSORS = "USECURSORS"
    USELOBS = "USELOBS"
    USER = "USER"
    WSID = "WSID"


BOOLEAN_PROPERTIES: tuple[PropertyKey, ...] = (
    PropertyKey.LASTUPDATECOUNT,
    PropertyKey.NAMEDPIPE,
    PropertyKey.PREPARESQL,
    PropertyKey.SENDSTRINGPARAMETERSASUNICODE,
    PropertyKey.TCPNODELAY,
    PropertyKey.USECURSORS,
    PropertyKey.USELOBS,
)


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Introspection record for one configurable option."""

    canonical_key: str
    display_name: str
    description: str
    current_value: str = ""
    required: bool = False
    choices: tuple[str, ...] = ()


__all__ = [
    "BOOLEAN_PROPERTIES",
    "ConnectionProperties",
    "PropertyDescriptor",
    "PropertyKey",
    "ServerType",
    "TdsVersion",
]
