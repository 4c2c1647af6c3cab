"""Configuration values and layers."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Union

# Values starting with this prefix name a Parameter Store parameter.
MARKER_PREFIX = "{ssmParameter}"

# Override layers are named after their source layer with this prefix.
OVERRIDE_PREFIX = "override-"


@dataclass(frozen=True)
class StringValue:
    """String configuration value."""

    value: str


@dataclass(frozen=True)
class NumberValue:
    """Integer or float configuration value."""

    value: Union[int, float]


@dataclass(frozen=True)
class BooleanValue:
    """Boolean configuration value."""

    value: bool


@dataclass(frozen=True)
class OtherValue:
    """Any other configuration value (lists, maps, objects)."""

    value: Any


ConfigValue = Union[StringValue, NumberValue, BooleanValue, OtherValue]


def config_value(raw: Any) -> ConfigValue:
    """Wrap a raw Python value in its ConfigValue variant."""
    if isinstance(raw, (StringValue, NumberValue, BooleanValue, OtherValue)):
        return raw
    # bool subclasses int, so it has to be checked first
    if isinstance(raw, bool):
        return BooleanValue(raw)
    if isinstance(raw, (int, float)):
        return NumberValue(raw)
    if isinstance(raw, str):
        return StringValue(raw)
    return OtherValue(raw)


class EnumerableLayer(Protocol):
    """A configuration layer that can list its keys."""

    name: str

    def get(self, key: str) -> Optional[ConfigValue]:
        """Get the value for a key, or None if absent."""
        ...

    def key_names(self) -> List[str]:
        """List the keys held by this layer."""
        ...


class ConfigLayer(Protocol):
    """A named source of configuration values."""

    name: str

    def get(self, key: str) -> Optional[ConfigValue]:
        """Get the value for a key, or None if absent."""
        ...

    def enumerable(self) -> Optional[EnumerableLayer]:
        """Return the enumerable view of this layer, or None if it has none."""
        ...


class MapLayer:
    """Layer backed by a dictionary."""

    def __init__(self, name: str, entries: Mapping[str, Any]):
        self.name = name
        self._entries: Dict[str, ConfigValue] = {
            key: config_value(raw) for key, raw in entries.items()
        }

    def get(self, key: str) -> Optional[ConfigValue]:
        return self._entries.get(key)

    def key_names(self) -> List[str]:
        return list(self._entries)

    def enumerable(self) -> Optional[EnumerableLayer]:
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return the raw values held by this layer."""
        return {key: value.value for key, value in self._entries.items()}

    def __repr__(self) -> str:
        return f"MapLayer(name={self.name!r}, keys={self.key_names()!r})"


class LookupLayer:
    """Layer backed by a lookup function.

    It can answer queries for single keys but cannot list them, so it is never
    scanned for parameter references. Environment variables are the usual
    example: ``LookupLayer("environ", os.environ.get)``.
    """

    def __init__(self, name: str, lookup: Callable[[str], Any]):
        self.name = name
        self._lookup = lookup

    def get(self, key: str) -> Optional[ConfigValue]:
        raw = self._lookup(key)
        if raw is None:
            return None
        return config_value(raw)

    def enumerable(self) -> Optional[EnumerableLayer]:
        return None

    def __repr__(self) -> str:
        return f"LookupLayer(name={self.name!r})"
