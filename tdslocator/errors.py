"""Error taxonomy raised while resolving connection locators."""

from __future__ import annotations

from typing import Iterable

SQLSTATE_BAD_LOCATOR = "08001"


class InvalidLocatorError(ValueError):
    """Raised when a locator cannot be resolved into connection properties.

    Every specific parse failure derives from this class, so callers that only
    care about the legacy "bad URL" outcome can catch it alone while logs and
    diagnostics still see the precise subclass.
    """

    sqlstate = SQLSTATE_BAD_LOCATOR

    def __init__(self, message: str, *, locator: str | None = None) -> None:
        super().__init__(message)
        self.locator = locator


class MissingSchemeError(InvalidLocatorError):
    """Locator does not start with the ``jdbc`` scheme."""


class MissingSubschemeError(InvalidLocatorError):
    """Locator is missing the ``jtds`` sub-scheme."""


class UnknownServerTypeError(InvalidLocatorError):
    """Server family segment names neither SQL Server nor Sybase."""

    def __init__(self, message: str, *, locator: str | None = None, server_type: str = "") -> None:
        super().__init__(message, locator=locator)
        self.server_type = server_type


class UnexpectedSeparatorError(InvalidLocatorError):
    """Text found where the ``//`` host marker was expected."""


class MissingServerNameError(InvalidLocatorError):
    """No host in the locator and no server name supplied by the caller."""


class InvalidPortError(InvalidLocatorError):
    """Port segment is not a base-10 integer."""

    def __init__(self, message: str, *, locator: str | None = None, port: str = "") -> None:
        super().__init__(message, locator=locator)
        self.port = port


class CatalogIntegrityError(RuntimeError):
    """The packaged property catalog is missing or incomplete."""

    def __init__(self, message: str, *, missing: Iterable[str] = (), unknown: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.missing = tuple(missing)
        self.unknown = tuple(unknown)


class DriverConfigurationError(RuntimeError):
    """Raised when a driver is asked to connect without a connection factory."""


__all__ = [
    "CatalogIntegrityError",
    "DriverConfigurationError",
    "InvalidLocatorError",
    "InvalidPortError",
    "MissingSchemeError",
    "MissingServerNameError",
    "MissingSubschemeError",
    "SQLSTATE_BAD_LOCATOR",
    "UnexpectedSeparatorError",
    "UnknownServerTypeError",
]
