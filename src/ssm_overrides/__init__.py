"""Resolve `{ssmParameter}` configuration values from AWS SSM Parameter Store."""

from .domain.config import (
    MARKER_PREFIX,
    OVERRIDE_PREFIX,
    BooleanValue,
    ConfigValue,
    LookupLayer,
    MapLayer,
    NumberValue,
    OtherValue,
    StringValue,
    config_value,
)
from .domain.errors import (
    ConnectionInitError,
    LayerError,
    OverrideResolutionError,
    ParameterFetchError,
)
from .config import Settings
from .domain.registry import LayerRegistry
from .infra.parameter_store import SSMParameterClient
from .main import resolve_overrides
from .service.resolver import ConfigOverrideResolver

__all__ = [
    "BooleanValue",
    "ConfigOverrideResolver",
    "ConfigValue",
    "ConnectionInitError",
    "LayerError",
    "LayerRegistry",
    "LookupLayer",
    "MARKER_PREFIX",
    "MapLayer",
    "NumberValue",
    "OVERRIDE_PREFIX",
    "OtherValue",
    "OverrideResolutionError",
    "ParameterFetchError",
    "SSMParameterClient",
    "Settings",
    "StringValue",
    "config_value",
    "resolve_overrides",
]
