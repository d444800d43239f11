"""Assembly of property descriptors for introspecting tools."""

from __future__ import annotations

from typing import Mapping, Sequence

from .catalog import PropertyCatalog, get_catalog
from .errors import CatalogIntegrityError
from .locator import parse_locator
from .models import BOOLEAN_PROPERTIES, PropertyDescriptor, PropertyKey, ServerType, TdsVersion

REQUIRED_PROPERTIES: tuple[PropertyKey, ...] = (PropertyKey.SERVERNAME, PropertyKey.SERVERTYPE)

BOOLEAN_CHOICES: tuple[str, ...] = ("true", "false")


def property_choices() -> dict[PropertyKey, tuple[str, ...]]:
    """Enumerated values for properties that accept a fixed set."""

    choices: dict[PropertyKey, tuple[str, ...]] = {
        PropertyKey.SERVERTYPE: tuple(member.value for member in ServerType),
        PropertyKey.TDS: tuple(member.value for member in TdsVersion),
    }
    for key in BOOLEAN_PROPERTIES:
        choices[key] = BOOLEAN_CHOICES
    return choices


def describe(props: Mapping[str, str], catalog: PropertyCatalog) -> list[PropertyDescriptor]:
    """Return one descriptor per catalog entry, ordered by canonical key."""

    choices = property_choices()
    _ensure_present(catalog, (*REQUIRED_PROPERTIES, *choices))
    descriptors: list[PropertyDescriptor] = []
    for key in catalog.keys():
        entry = catalog.entry(key)
        descriptors.append(
            PropertyDescriptor(
                canonical_key=key.value,
                display_name=entry.name,
                description=entry.description,
                current_value=props.get(key.value, ""),
                required=key in REQUIRED_PROPERTIES,
                choices=choices.get(key, ()),
            )
        )
    return descriptors


def describe_properties(
    locator: str,
    overrides: Mapping[str, str | None] | None = None,
    *,
    catalog: PropertyCatalog | None = None,
) -> list[PropertyDescriptor]:
    """Parse ``locator`` and describe every supported property."""

    if catalog is None:
        catalog = get_catalog()
    return describe(parse_locator(locator, overrides, catalog=catalog), catalog)


def _ensure_present(catalog: PropertyCatalog, keys: Sequence[PropertyKey]) -> None:
    missing = [key.value for key in keys if key not in catalog]
    if missing:
        raise CatalogIntegrityError(
            f"Catalog has no entry for: {', '.join(sorted(set(missing)))}",
            missing=sorted(set(missing)),
        )


__all__ = ["BOOLEAN_CHOICES", "REQUIRED_PROPERTIES", "describe", "describe_properties", "property_choices"]
