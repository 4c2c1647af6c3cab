"""Domain errors."""

from typing import Optional


class OverrideResolutionError(RuntimeError):
    """Base error for configuration override resolution."""


class ConnectionInitError(OverrideResolutionError):
    """The Parameter Store client could not be created."""


class ParameterFetchError(OverrideResolutionError):
    """A parameter could not be fetched from Parameter Store."""

    def __init__(self, parameter_name: str, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.parameter_name = parameter_name
        self.error_code = error_code


class LayerError(OverrideResolutionError):
    """Invalid operation on the layer registry."""
