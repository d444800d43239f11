"""Explicit driver registration performed by the host program at start-up."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping

from .driver import Driver

LOG = logging.getLogger(__name__)

DriverFactory = Callable[[], Driver]


class DriverRegistry:
    """Holds drivers created from registered factories."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._drivers: dict[DriverFactory, Driver] = {}

    def register(self, factory: DriverFactory) -> Driver:
        """Register ``factory`` once; repeated calls return the existing driver."""

        with self._lock:
            existing = self._drivers.get(factory)
            if existing is not None:
                LOG.debug("Driver factory already registered", extra={"factory": repr(factory)})
                return existing
            driver = factory()
            if not isinstance(driver, Driver):
                raise TypeError(f"Factory {factory!r} did not return a Driver")
            self._drivers[factory] = driver
            return driver

    def deregister(self, factory: DriverFactory) -> None:
        with self._lock:
            self._drivers.pop(factory, None)

    def list_drivers(self) -> list[Driver]:
        """Return registered drivers in registration order."""

        with self._lock:
            return list(self._drivers.values())

    def driver_for(self, locator: str) -> Driver:
        """Return the first driver accepting ``locator``."""

        for driver in self.list_drivers():
            if driver.accepts_locator(locator):
                return driver
        raise LookupError(f"No registered driver accepts '{locator}'")

    def connect(self, locator: str, overrides: Mapping[str, str | None] | None = None) -> Any:
        return self.driver_for(locator).connect(locator, overrides)


DEFAULT_REGISTRY = DriverRegistry()


def register(factory: DriverFactory = Driver) -> Driver:
    """Register ``factory`` with the process default registry."""

    return DEFAULT_REGISTRY.register(factory)


__all__ = ["DEFAULT_REGISTRY", "DriverFactory", "DriverRegistry", "register"]
