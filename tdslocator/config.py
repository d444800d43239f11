"""Driver configuration loading helpers."""

from __future__ import annotations

from pathlib import Path

import tomllib

from pydantic import BaseModel, Field

CONFIG_FILE = Path.home() / ".config" / "tdslocator" / "config.toml"


class LocatorProfileConfig(BaseModel):
    """Named locator stored in config.toml."""

    name: str
    locator: str
    properties: dict[str, str] = Field(default_factory=dict)


class DriverConfig(BaseModel):
    """Shape of the driver configuration file."""

    login_timeout: int = 0
    collapse_errors: bool = False
    properties: dict[str, str] = Field(default_factory=dict)
    profiles: list[LocatorProfileConfig] = Field(default_factory=list)
    active_profile: str | None = None

    def profile(self, name: str | None = None) -> LocatorProfileConfig:
        """Return the named profile, or the active one when no name is given."""

        target = name or self.active_profile
        for profile in self.profiles:
            if profile.name == target:
                return profile
        raise ValueError(f"Profile '{target}' not found.")

    def with_active_profile(self, name: str) -> DriverConfig:
        """Return a copy with the active profile updated."""

        return self.model_copy(update={"active_profile": name})

    def with_property(self, key: str, value: str) -> DriverConfig:
        """Return a copy with a default override property set."""

        properties = dict(self.properties)
        properties[key.upper()] = value
        return self.model_copy(update={"properties": properties})


def load_config() -> DriverConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return DriverConfig()
    except (tomllib.TOMLDecodeError, OSError):
        return DriverConfig()

    return DriverConfig(
        login_timeout=data.get("login_timeout", DriverConfig.model_fields["login_timeout"].default),
        collapse_errors=data.get("collapse_errors", DriverConfig.model_fields["collapse_errors"].default),
        properties=data.get("properties", {}),
        profiles=[LocatorProfileConfig(**profile) for profile in data.get("profiles", [])],
        active_profile=data.get("active_profile"),
    )


def save_config(config: DriverConfig) -> None:
    """Persist configuration to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = [
        f"login_timeout = {config.login_timeout}",
        f"collapse_errors = {str(config.collapse_errors).lower()}",
    ]
    if config.active_profile:
        lines.append(f"active_profile = {_quote(config.active_profile)}")
    if config.properties:
        lines.append("")
        lines.append("[properties]")
        for key in sorted(config.properties):
            lines.append(f"{_quote(key)} = {_quote(config.properties[key])}")
    for profile in config.profiles:
        lines.append("")
        lines.append("[[profiles]]")
        lines.append(f"name = {_quote(profile.name)}")
        lines.append(f"locator = {_quote(profile.locator)}")
        if profile.properties:
            lines.append("")
            lines.append("[profiles.properties]")
            for key in sorted(profile.properties):
                lines.append(f"{_quote(key)} = {_quote(profile.properties[key])}")
    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    login_timeout = raw.get("login_timeout")
    if isinstance(login_timeout, int) and not isinstance(login_timeout, bool):
        data["login_timeout"] = login_timeout
    collapse_errors = raw.get("collapse_errors")
    if isinstance(collapse_errors, bool):
        data["collapse_errors"] = collapse_errors
    active_profile = raw.get("active_profile")
    if isinstance(active_profile, str):
        data["active_profile"] = active_profile
    properties = raw.get("properties")
    if isinstance(properties, dict):
        data["properties"] = _string_table(properties)
    profiles = raw.get("profiles")
    if isinstance(profiles, list):
        parsed_profiles: list[dict[str, object]] = []
        for profile in profiles:
            if not isinstance(profile, dict):
                continue
            name = profile.get("name")
            locator = profile.get("locator")
            if not isinstance(name, str) or not name or not isinstance(locator, str):
                continue
            parsed: dict[str, object] = {"name": name, "locator": locator}
            extra = profile.get("properties")
            if isinstance(extra, dict):
                parsed["properties"] = _string_table(extra)
            parsed_profiles.append(parsed)
        data["profiles"] = parsed_profiles
    return data


def _string_table(table: dict[str, object]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for key, value in table.items():
        if isinstance(value, bool):
            parsed[str(key).upper()] = str(value).lower()
        elif isinstance(value, (str, int, float)):
            parsed[str(key).upper()] = str(value)
    return parsed
