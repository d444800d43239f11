"""Shared fixtures for tdslocator tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from tdslocator import catalog as catalog_module
from tdslocator.catalog import CatalogEntry, PropertyCatalog
from tdslocator.models import PropertyKey


@pytest.fixture
def fresh_catalog_cache() -> Iterator[None]:
    """Reset the process-wide catalog so lazy loading can be observed."""

    previous = catalog_module._CATALOG
    catalog_module._CATALOG = None
    try:
        yield
    finally:
        catalog_module._CATALOG = previous


@pytest.fixture
def catalog_data() -> dict[str, object]:
    return {
        "messages": {"bad_locator": "Bad locator {locator}"},
        "properties": {
            key.value: {"name": key.value.lower(), "description": f"About {key.value}"}
            for key in PropertyKey
        },
    }


@pytest.fixture
def small_catalog() -> PropertyCatalog:
    return PropertyCatalog(
        {
            PropertyKey.SERVERNAME: CatalogEntry(name="serverName", description="Host"),
            PropertyKey.SERVERTYPE: CatalogEntry(name="serverType", description="Family"),
        }
    )
