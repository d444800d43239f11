"""Parsing of ``jdbc:jtds:`` connection locators into connection properties."""

from __future__ import annotations

import logging
import re
from typing import Mapping

from .catalog import PropertyCatalog, get_catalog
from .defaults import fill_defaults
from .errors import (
    InvalidLocatorError,
    InvalidPortError,
    MissingSchemeError,
    MissingServerNameError,
    MissingSubschemeError,
    UnexpectedSeparatorError,
    UnknownServerTypeError,
)
from .models import ConnectionProperties, PropertyKey, ServerType
from .tokenizer import DELIMITERS, last_delimiter, next_token

LOG = logging.getLogger(__name__)

SCHEME = "jdbc"
SUBSCHEME = "jtds"
LOCATOR_PREFIX = f"{SCHEME}:{SUBSCHEME}:"

_SERVER_FAMILIES: Mapping[str, ServerType] = {member.scheme: member for member in ServerType}
_PORT_PATTERN = re.compile(r"[+-]?[0-9]{1,10}")
_PORT_RANGE = range(-(2**31), 2**31)


def accepts_locator(candidate: str | None) -> bool:
    """Return True when ``candidate`` looks like a jTDS locator."""

    if candidate is None:
        return False
    return candidate.lower().startswith(LOCATOR_PREFIX)


def parse_locator(
    locator: str,
    overrides: Mapping[str, str | None] | None = None,
    *,
    catalog: PropertyCatalog | None = None,
) -> ConnectionProperties:
    """Resolve ``locator`` and ``overrides`` into a complete property map.

    Override keys are upper-cased and seed the result; values found in the
    locator replace them. Unset properties are filled from the defaults of the
    resolved server family. Raises a subclass of ``InvalidLocatorError`` on the
    first grammar violation.
    """

    if catalog is None:
        catalog = get_catalog()
    try:
        props = _parse(locator, _seed(overrides), catalog)
    except InvalidLocatorError as exc:
        LOG.debug(
            "Rejected connection locator",
            extra={"locator": locator, "error": type(exc).__name__},
        )
        raise
    return fill_defaults(props)


def build_locator(props: Mapping[str, str], *, include_properties: bool = True) -> str:
    """Serialise resolved properties back into locator form.

    Host, port, database and server family go into the positional part; any
    other key becomes a ``;KEY=VALUE`` segment when ``include_properties`` is set.
    """

    server_type = ServerType.from_tag(props.get(PropertyKey.SERVERTYPE.value, ServerType.SQLSERVER.value))
    if server_type is None:
        raise ValueError(f"Unknown server type '{props[PropertyKey.SERVERTYPE.value]}'")
    host = props.get(PropertyKey.SERVERNAME.value, "")
    parts = [f"{LOCATOR_PREFIX}{server_type.scheme}://", _checked(host)]
    port = props.get(PropertyKey.PORTNUMBER.value)
    if port:
        parts.append(f":{_checked(port)}")
    database = props.get(PropertyKey.DATABASENAME.value)
    if database:
        parts.append(f"/{_checked(database)}")
    if include_properties:
        positional = {
            PropertyKey.SERVERTYPE.value,
            PropertyKey.SERVERNAME.value,
            PropertyKey.PORTNUMBER.value,
            PropertyKey.DATABASENAME.value,
        }
        for key in sorted(props):
            if key in positional:
                continue
            value = props[key]
            segment = f"{key}={value}" if value else key
            parts.append(f";{_checked(segment)}")
    return "".join(parts)


def _seed(overrides: Mapping[str, str | None] | None) -> ConnectionProperties:
    props: ConnectionProperties = {}
    for key, value in (overrides or {}).items():
        if value is not None:
            props[str(key).upper()] = str(value)
    return props


def _parse(locator: str, props: ConnectionProperties, catalog: PropertyCatalog) -> ConnectionProperties:
    token, pos = next_token(locator, 0)
    if token.lower() != SCHEME:
        raise MissingSchemeError(catalog.message("missing_scheme"), locator=locator)

    token, pos = next_token(locator, pos)
    if token.lower() != SUBSCHEME:
        raise MissingSubschemeError(catalog.message("missing_subscheme"), locator=locator)

    token, pos = next_token(locator, pos)
    server_type = _SERVER_FAMILIES.get(token.lower())
    if server_type is None:
        raise UnknownServerTypeError(
            catalog.message("unknown_server_type", server_type=token),
            locator=locator,
            server_type=token,
        )
    props[PropertyKey.SERVERTYPE.value] = server_type.value

    # The empty token between "sqlserver:" and "//".
    token, pos = next_token(locator, pos)
    if token:
        raise UnexpectedSeparatorError(catalog.message("unexpected_separator", text=token), locator=locator)

    host, pos = next_token(locator, pos)
    if host:
        props[PropertyKey.SERVERNAME.value] = host
    elif PropertyKey.SERVERNAME.value not in props:
        raise MissingServerNameError(catalog.message("missing_server_name"), locator=locator)

    if last_delimiter(locator, pos) == ":":
        token, pos = next_token(locator, pos)
        port = int(token) if _PORT_PATTERN.fullmatch(token) else None
        if port is None or port not in _PORT_RANGE:
            raise InvalidPortError(catalog.message("invalid_port", port=token), locator=locator, port=token)
        props[PropertyKey.PORTNUMBER.value] = str(port)

    if last_delimiter(locator, pos) == "/":
        token, pos = next_token(locator, pos)
        props[PropertyKey.DATABASENAME.value] = token

    while last_delimiter(locator, pos) == ";":
        token, pos = next_token(locator, pos)
        key, sep, value = token.partition("=")
        if sep and key and value:
            props[key.upper()] = value
        else:
            props[token.upper()] = ""

    return props


def _checked(text: str) -> str:
    if any(ch in DELIMITERS for ch in text):
        raise ValueError(f"'{text}' cannot be written into a locator")
    return text


__all__ = ["LOCATOR_PREFIX", "accepts_locator", "build_locator", "parse_locator"]
