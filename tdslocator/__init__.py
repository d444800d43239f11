"""Connection locator resolution for SQL Server and Sybase."""

from __future__ import annotations

__version__ = "0.9.0"

from .catalog import PropertyCatalog, get_catalog
from .descriptors import describe, describe_properties
from .driver import ConnectionFactory, Driver
from .errors import (
    CatalogIntegrityError,
    DriverConfigurationError,
    InvalidLocatorError,
    InvalidPortError,
    MissingSchemeError,
    MissingServerNameError,
    MissingSubschemeError,
    UnexpectedSeparatorError,
    UnknownServerTypeError,
)
from .locator import accepts_locator, build_locator, parse_locator
from .models import ConnectionProperties, PropertyDescriptor, PropertyKey, ServerType, TdsVersion
from .registry import DriverRegistry, register

__all__ = [
    "CatalogIntegrityError",
    "ConnectionFactory",
    "ConnectionProperties",
    "Driver",
    "DriverConfigurationError",
    "DriverRegistry",
    "InvalidLocatorError",
    "InvalidPortError",
    "MissingSchemeError",
    "MissingServerNameError",
    "MissingSubschemeError",
    "PropertyCatalog",
    "PropertyDescriptor",
    "PropertyKey",
    "ServerType",
    "TdsVersion",
    "UnexpectedSeparatorError",
    "UnknownServerTypeError",
    "__version__",
    "accepts_locator",
    "build_locator",
    "describe",
    "describe_properties",
    "get_catalog",
    "parse_locator",
    "register",
]
