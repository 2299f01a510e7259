"""Configuration model stored as config.json."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping, Optional, Type, TypeVar

_Section = TypeVar("_Section", "DisplaySettings", "ThemeSettings")


@dataclass
class DisplaySettings:
    """Which lines of the report are hidden."""

    hide_public_ip: bool = False
    hide_private_ip: bool = False
    hide_gpu0: bool = False
    hide_gpu1: bool = False
    hide_username: bool = False
    hide_hostname: bool = False
    hide_kernel: bool = False
    hide_uptime: bool = False
    hide_resolution: bool = False
    hide_shell: bool = False
    hide_de: bool = False
    hide_wm: bool = False


@dataclass
class ThemeSettings:
    """How the report looks."""

    color_output: str = ""
    compact_mode: bool = False
    font_style: str = ""
    use_differentimg: bool = False
    image_source: str = ""


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find a key exactly, or failing that ignoring case."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return None


def _section(cls: Type[_Section], data: Any, name: str) -> _Section:
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise ValueError(f"config section {name!r} must be an object")
    values = {}
    for item in fields(cls):
        value = _lookup(data, item.name)
        if value is None:
            continue
        if not isinstance(value, item.type):
            raise ValueError(
                f"config field {name}.{item.name} must be of type {item.type.__name__}"
            )
        values[item.name] = value
    return cls(**values)


@dataclass
class Config:
    """The whole configuration file."""

    display: DisplaySettings = field(default_factory=DisplaySettings)
    theme: ThemeSettings = field(default_factory=ThemeSettings)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Config":
        """Build a configuration from decoded JSON; missing fields keep defaults."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("config must be a JSON object")
        return cls(
            display=_section(DisplaySettings, _lookup(data, "display"), "display"),
            theme=_section(ThemeSettings, _lookup(data, "theme"), "theme"),
        )

    def to_dict(self) -> dict:
        """Return the configuration in the layout of config.json."""
        return {"display": asdict(self.display), "theme": asdict(self.theme)}