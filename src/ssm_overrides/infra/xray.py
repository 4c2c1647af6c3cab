"""X-Ray instrumentation setup."""

from functools import wraps
from typing import Optional
from aws_xray_sdk.core import xray_recorder
from aws_xray_sdk.core import patch as xray_patch

_tracing_enabled = False

SAMPLING_RULES = {
    "version": 2,
    "default": {"fixed_target": 1, "rate": 0.1},
    "rules": [],
}


def setup_xray(service_name: str = "ssm-overrides", endpoint_url: Optional[str] = None) -> None:
    """Enable X-Ray tracing of Parameter Store calls.

    Tracing stays off against a local endpoint (LocalStack, moto server).
    """
    global _tracing_enabled

    if endpoint_url:
        _tracing_enabled = False
        return

    # Resolution runs at startup, outside any request segment
    xray_recorder.configure(
        service=service_name,
        context_missing="LOG_ERROR",
        sampling_rules=SAMPLING_RULES,
    )
    xray_patch(["boto3"])
    _tracing_enabled = True


def tracing_enabled() -> bool:
    """Check if X-Ray tracing was enabled by setup_xray."""
    return _tracing_enabled


def xray_capture(name):
    """Conditional X-Ray subsegment decorator - no-op while tracing is off."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not _tracing_enabled:
                return func(*args, **kwargs)
            with xray_recorder.in_subsegment(name):
                return func(*args, **kwargs)
        return wrapper
    return decorator
