"""Display names and descriptions for connection properties."""

from __future__ import annotations

import logging
import threading
import tomllib
from importlib.resources import files
from typing import Mapping

from pydantic import BaseModel, ValidationError

from .errors import CatalogIntegrityError
from .models import PropertyKey

LOG = logging.getLogger(__name__)

CATALOG_RESOURCE = "catalog.toml"


class CatalogEntry(BaseModel, frozen=True):
    """Display name and description for one property."""

    name: str
    description: str


class PropertyCatalog:
    """Read-only mapping from property keys to their display metadata."""

    def __init__(
        self,
        entries: Mapping[PropertyKey, CatalogEntry],
        messages: Mapping[str, str] | None = None,
    ) -> None:
        self._entries = dict(entries)
        self._messages = dict(messages or {})

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> PropertyCatalog:
        """Build a catalog from parsed TOML, rejecting unknown or missing keys."""

        raw_properties = data.get("properties")
        if not isinstance(raw_properties, dict):
            raise CatalogIntegrityError("Property catalog has no [properties] table")
        entries: dict[PropertyKey, CatalogEntry] = {}
        unknown: list[str] = []
        for key, value in raw_properties.items():
            try:
                prop = PropertyKey(str(key).upper())
            except ValueError:
                unknown.append(str(key))
                continue
            if not isinstance(value, dict):
                raise CatalogIntegrityError(f"Catalog entry '{key}' must be a table")
            try:
                entries[prop] = CatalogEntry(**value)
            except ValidationError as exc:
                raise CatalogIntegrityError(f"Catalog entry '{key}' is malformed: {exc}") from exc
        if unknown:
            raise CatalogIntegrityError(
                f"Catalog lists unknown properties: {', '.join(sorted(unknown))}",
                unknown=unknown,
            )
        missing = [prop.value for prop in PropertyKey if prop not in entries]
        if missing:
            LOG.error("Property catalog is incomplete", extra={"missing": missing})
            raise CatalogIntegrityError(
                f"Catalog is missing properties: {', '.join(missing)}",
                missing=missing,
            )
        raw_messages = data.get("messages")
        messages: dict[str, str] = {}
        if isinstance(raw_messages, dict):
            messages = {str(name): str(text) for name, text in raw_messages.items()}
        return cls(entries, messages)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> tuple[PropertyKey, ...]:
        """Catalog keys in canonical order."""

        return tuple(sorted(self._entries, key=lambda item: item.value))

    def entry(self, key: PropertyKey) -> CatalogEntry:
        try:
            return self._entries[key]
        except KeyError:
            raise CatalogIntegrityError(f"Catalog has no entry for '{key.value}'", missing=(key.value,)) from None

    def display_name(self, key: PropertyKey) -> str:
        return self.entry(key).name

    def message(self, name: str, **params: object) -> str:
        """Format a diagnostic message; unknown names fall back to the name itself."""

        template = self._messages.get(name)
        if template is None:
            return name
        return template.format(**params)


_LOCK = threading.Lock()
_CATALOG: PropertyCatalog | None = None


def load_catalog() -> PropertyCatalog:
    """Parse the packaged catalog resource."""

    resource = files(__package__).joinpath("resources", CATALOG_RESOURCE)
    try:
        with resource.open("rb") as handle:
            data = tomllib.load(handle)
    except (FileNotFoundError, tomllib.TOMLDecodeError) as exc:
        LOG.error("Unable to read property catalog", extra={"resource": CATALOG_RESOURCE})
        raise CatalogIntegrityError(f"Unable to read property catalog: {exc}") from exc
    catalog = PropertyCatalog.from_mapping(data)
    LOG.debug("Loaded property catalog", extra={"entries": len(catalog)})
    return catalog


def get_catalog() -> PropertyCatalog:
    """Return the process-wide catalog, loading it on first use."""

    global _CATALOG
    catalog = _CATALOG
    if catalog is not None:
        return catalog
    with _LOCK:
        if _CATALOG is None:
            _CATALOG = load_catalog()
        return _CATALOG


__all__ = ["CATALOG_RESOURCE", "CatalogEntry", "PropertyCatalog", "get_catalog", "load_catalog"]
