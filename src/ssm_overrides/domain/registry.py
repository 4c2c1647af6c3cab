"""Ordered registry of configuration layers."""

from typing import Any, Iterator, List, Optional

from .config import ConfigLayer, ConfigValue
from .errors import LayerError


class LayerRegistry:
    """Configuration layers in priority order, highest priority first.

    A key is looked up in each layer in turn and the first layer holding it
    wins. Layer names are unique: adding a layer under a name that is already
    registered replaces the old layer.
    """

    def __init__(self, layers: Optional[List[ConfigLayer]] = None):
        self._layers: List[ConfigLayer] = []
        for layer in layers or []:
            self.add_last(layer)

    def __iter__(self) -> Iterator[ConfigLayer]:
        return iter(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def names(self) -> List[str]:
        """Layer names in priority order."""
        return [layer.name for layer in self._layers]

    def contains(self, name: str) -> bool:
        return any(layer.name == name for layer in self._layers)

    def get(self, name: str) -> Optional[ConfigLayer]:
        for layer in self._layers:
            if layer.name == name:
                return layer
        return None

    def add_first(self, layer: ConfigLayer) -> None:
        self._remove_if_present(layer.name)
        self._layers.insert(0, layer)

    def add_last(self, layer: ConfigLayer) -> None:
        self._remove_if_present(layer.name)
        self._layers.append(layer)

    def add_before(self, relative_name: str, layer: ConfigLayer) -> None:
        """Insert a layer directly ahead of (higher priority than) another."""
        self._check_relative(relative_name, layer)
        self._remove_if_present(layer.name)
        self._layers.insert(self._index_of(relative_name), layer)

    def add_after(self, relative_name: str, layer: ConfigLayer) -> None:
        """Insert a layer directly behind (lower priority than) another."""
        self._check_relative(relative_name, layer)
        self._remove_if_present(layer.name)
        self._layers.insert(self._index_of(relative_name) + 1, layer)

    def remove(self, name: str) -> Optional[ConfigLayer]:
        """Remove a layer by name, returning it (or None if unknown)."""
        return self._remove_if_present(name)

    def lookup(self, key: str) -> Optional[ConfigValue]:
        """Get the highest-priority value for a key."""
        for layer in self._layers:
            value = layer.get(key)
            if value is not None:
                return value
        return None

    def get_property(self, key: str, default: Any = None) -> Any:
        """Get the raw highest-priority value for a key."""
        value = self.lookup(key)
        return default if value is None else value.value

    def _index_of(self, name: str) -> int:
        for index, layer in enumerate(self._layers):
            if layer.name == name:
                return index
        raise LayerError(f"Layer {name!r} does not exist")

    def _check_relative(self, relative_name: str, layer: ConfigLayer) -> None:
        if relative_name == layer.name:
            raise LayerError(f"Layer {layer.name!r} cannot be added relative to itself")
        self._index_of(relative_name)

    def _remove_if_present(self, name: str) -> Optional[ConfigLayer]:
        for index, layer in enumerate(self._layers):
            if layer.name == name:
                return self._layers.pop(index)
        return None
