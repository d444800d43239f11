"""Tests for the driver facade and registry."""

from __future__ import annotations

from typing import Mapping

import pytest

from tdslocator.config import DriverConfig
from tdslocator.driver import Driver
from tdslocator.errors import DriverConfigurationError, InvalidLocatorError, InvalidPortError
from tdslocator.registry import DriverRegistry


class _RecordingFactory:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []

    def open(self, locator: str, props: Mapping[str, str]) -> str:
        self.calls.append((locator, dict(props)))
        return "connection"


def test_driver_versions() -> None:
    driver = Driver()

    assert (driver.major_version, driver.minor_version) == (0, 9)
    assert driver.jdbc_compliant is False


def test_connect_hands_properties_to_factory() -> None:
    factory = _RecordingFactory()
    driver = Driver(factory, config=DriverConfig(login_timeout=15))

    result = driver.connect("jdbc:jtds:sqlserver://host/db", {"user": "sa"})

    assert result == "connection"
    locator, props = factory.calls[0]
    assert locator == "jdbc:jtds:sqlserver://host/db"
    assert props["SERVERNAME"] == "host"
    assert props["USER"] == "sa"
    assert props["LOGINTIMEOUT"] == "15"


def test_connect_keeps_caller_login_timeout() -> None:
    factory = _RecordingFactory()
    driver = Driver(factory, config=DriverConfig(login_timeout=15))

    driver.connect("jdbc:jtds:sqlserver://host", {"loginTimeout": "3"})

    assert factory.calls[0][1]["LOGINTIMEOUT"] == "3"


def test_connect_ignores_foreign_locators() -> None:
    factory = _RecordingFactory()

    assert Driver(factory).connect("jdbc:postgresql://host") is None
    assert factory.calls == []


def test_connect_without_factory_fails() -> None:
    with pytest.raises(DriverConfigurationError):
        Driver().connect("jdbc:jtds:sqlserver://host")


def test_config_properties_sit_beneath_overrides() -> None:
    driver = Driver(config=DriverConfig(properties={"appName": "billing", "user": "svc"}))

    props = driver.parse_locator("jdbc:jtds:sqlserver://host", {"USER": "sa"})

    assert props["APPNAME"] == "billing"
    assert props["USER"] == "sa"


def test_specific_errors_are_kept_by_default() -> None:
    with pytest.raises(InvalidPortError):
        Driver().parse_locator("jdbc:jtds:sqlserver://host:x")


def test_collapsed_errors_keep_cause() -> None:
    driver = Driver(config=DriverConfig(collapse_errors=True))

    with pytest.raises(InvalidLocatorError) as info:
        driver.parse_locator("jdbc:jtds:sqlserver://host:x")

    assert type(info.value) is InvalidLocatorError
    assert str(info.value) == "Invalid URL: jdbc:jtds:sqlserver://host:x"
    assert isinstance(info.value.__cause__, InvalidPortError)


def test_describe_properties_through_driver() -> None:
    descriptors = Driver().describe_properties("jdbc:jtds:sqlserver://host")

    assert any(item.canonical_key == "SERVERNAME" and item.required for item in descriptors)


def test_register_is_idempotent() -> None:
    registry = DriverRegistry()
    created: list[Driver] = []

    def _factory() -> Driver:
        driver = Driver()
        created.append(driver)
        return driver

    first = registry.register(_factory)
    second = registry.register(_factory)

    assert first is second
    assert len(created) == 1
    assert registry.list_drivers() == [first]


def test_register_rejects_non_drivers() -> None:
    registry = DriverRegistry()

    with pytest.raises(TypeError):
        registry.register(lambda: object())  # type: ignore[arg-type, return-value]


def test_registry_routes_connect_to_accepting_driver() -> None:
    factory = _RecordingFactory()
    registry = DriverRegistry()
    registry.register(lambda: Driver(factory))

    assert registry.connect("jdbc:jtds:sybase://host") == "connection"
    with pytest.raises(LookupError):
        registry.driver_for("jdbc:mysql://host")


def test_deregister_removes_driver() -> None:
    registry = DriverRegistry()
    registry.register(Driver)

    registry.deregister(Driver)

    assert registry.list_drivers() == []


def test_collapsed_errors_cover_oversized_ports() -> None:
    driver = Driver(config=DriverConfig(collapse_errors=True))
    locator = "jdbc:jtds:sqlserver://host:" + "9" * 5000

    with pytest.raises(InvalidLocatorError) as info:
        driver.parse_locator(locator)

    assert type(info.value) is InvalidLocatorError
    assert isinstance(info.value.__cause__, InvalidPortError)
