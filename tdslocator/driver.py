"""Driver facade tying locator parsing to an external connection factory."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol, runtime_checkable

from .catalog import PropertyCatalog, get_catalog
from .config import DriverConfig
from .descriptors import describe
from .errors import DriverConfigurationError, InvalidLocatorError
from .locator import accepts_locator, parse_locator
from .models import ConnectionProperties, PropertyDescriptor, PropertyKey

LOG = logging.getLogger(__name__)

MAJOR_VERSION = 0
MINOR_VERSION = 9


@runtime_checkable
class ConnectionFactory(Protocol):
    """Session layer that opens a connection from resolved properties."""

    def open(self, locator: str, props: Mapping[str, str]) -> Any:
        """Open a connection and return it."""


class Driver:
    """Resolves jTDS locators and hands the result to a connection factory."""

    major_version = MAJOR_VERSION
    minor_version = MINOR_VERSION
    jdbc_compliant = False

    def __init__(
        self,
        connection_factory: ConnectionFactory | None = None,
        *,
        config: DriverConfig | None = None,
        catalog: PropertyCatalog | None = None,
    ) -> None:
        self._factory = connection_factory
        self._config = config or DriverConfig()
        self._catalog = catalog

    @property
    def catalog(self) -> PropertyCatalog:
        if self._catalog is None:
            return get_catalog()
        return self._catalog

    @property
    def config(self) -> DriverConfig:
        return self._config

    def accepts_locator(self, candidate: str | None) -> bool:
        return accepts_locator(candidate)

    def parse_locator(
        self, locator: str, overrides: Mapping[str, str | None] | None = None
    ) -> ConnectionProperties:
        """Parse ``locator`` on top of configured defaults and ``overrides``."""

        seeded: dict[str, str | None] = {key.upper(): value for key, value in self._config.properties.items()}
        seeded.update({str(key).upper(): value for key, value in (overrides or {}).items()})
        try:
            return parse_locator(locator, seeded, catalog=self.catalog)
        except InvalidLocatorError as exc:
            if not self._config.collapse_errors:
                raise
            raise InvalidLocatorError(
                self.catalog.message("bad_locator", locator=locator), locator=locator
            ) from exc

    def describe_properties(
        self, locator: str, overrides: Mapping[str, str | None] | None = None
    ) -> list[PropertyDescriptor]:
        """Describe every option, reporting current values resolved from ``locator``."""

        props = self.parse_locator(locator, overrides)
        return describe(props, self.catalog)

    def connect(self, locator: str, overrides: Mapping[str, str | None] | None = None) -> Any:
        """Open a connection, or return None when the locator belongs to another driver."""

        if not self.accepts_locator(locator):
            return None
        if self._factory is None:
            raise DriverConfigurationError("Driver has no connection factory configured")
        props = self.parse_locator(locator, overrides)
        props.setdefault(PropertyKey.LOGINTIMEOUT.value, str(self._config.login_timeout))
        LOG.debug(
            "Opening connection",
            extra={
                "server": props.get(PropertyKey.SERVERNAME.value),
                "server_type": props.get(PropertyKey.SERVERTYPE.value),
            },
        )
        return self._factory.open(locator, props)


__all__ = ["ConnectionFactory", "Driver", "MAJOR_VERSION", "MINOR_VERSION"]
