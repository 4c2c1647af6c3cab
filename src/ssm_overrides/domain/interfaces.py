"""Domain interfaces (Protocols)."""

from typing import Protocol, Any


class ParameterClient(Protocol):
    """Parameter Store client interface."""

    def resolve(self, raw_value: str) -> str:
        """Resolve a marker-prefixed value to the parameter's value."""
        ...


class Logger(Protocol):
    """Logger interface."""

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        ...

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        ...
