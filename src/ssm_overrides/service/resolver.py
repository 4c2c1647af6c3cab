"""Configuration override resolver."""

from typing import Dict, List, Tuple

from ..domain.config import (
    MARKER_PREFIX,
    OVERRIDE_PREFIX,
    EnumerableLayer,
    MapLayer,
    StringValue,
)
from ..domain.interfaces import Logger, ParameterClient
from ..domain.registry import LayerRegistry


class ConfigOverrideResolver:
    """Replaces `{ssmParameter}` values with override layers.

    Every enumerable layer holding at least one marker-prefixed string gets
    an ``override-<name>`` layer inserted directly ahead of it, holding the
    resolved values for those keys only.
    """

    def __init__(
        self,
        parameter_client: ParameterClient,
        logger: Logger,
        atomic: bool = False,
    ):
        """Initialize resolver.

        With ``atomic`` set, override layers are only inserted once every
        parameter has been fetched, so a failed run leaves the registry as it
        was. Otherwise layers processed before a failure keep their overrides.
        """
        self.parameter_client = parameter_client
        self.logger = logger
        self.atomic = atomic

    def run(self, registry: LayerRegistry) -> List[MapLayer]:
        """Resolve all marker-prefixed values and insert the override layers.

        Returns the inserted override layers, in insertion order. Fetch errors
        propagate and abort the run.
        """
        layers = list(registry)
        self.logger.info("Resolving parameter overrides", layer_count=len(layers), atomic=self.atomic)

        pending: List[Tuple[str, MapLayer]] = []
        inserted: List[MapLayer] = []
        for layer in layers:
            source = layer.enumerable()
            if source is None:
                self.logger.info("Skipping non-enumerable layer", layer=layer.name)
                continue

            overrides = self._resolve_layer(source)
            if not overrides:
                continue

            override_layer = MapLayer(OVERRIDE_PREFIX + layer.name, overrides)
            if self.atomic:
                pending.append((layer.name, override_layer))
            else:
                self._insert(registry, layer.name, override_layer)
                inserted.append(override_layer)

        for source_name, override_layer in pending:
            self._insert(registry, source_name, override_layer)
            inserted.append(override_layer)

        self.logger.info("Parameter overrides resolved", override_count=len(inserted))
        return inserted

    def _resolve_layer(self, layer: EnumerableLayer) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for key in layer.key_names():
            value = layer.get(key)
            if not isinstance(value, StringValue) or not value.value.startswith(MARKER_PREFIX):
                continue
            try:
                overrides[key] = self.parameter_client.resolve(value.value)
            except Exception as e:
                self.logger.error(
                    "Failed to resolve parameter",
                    layer=layer.name,
                    key=key,
                    parameter=value.value[len(MARKER_PREFIX):],
                    error=str(e),
                )
                raise
        return overrides

    def _insert(self, registry: LayerRegistry, source_name: str, override_layer: MapLayer) -> None:
        registry.add_before(source_name, override_layer)
        self.logger.info(
            "Inserted override layer",
            layer=override_layer.name,
            source=source_name,
            keys=sorted(override_layer.key_names()),
        )
