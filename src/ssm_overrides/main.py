"""Startup entry point: resolve parameter overrides for a layer registry."""

from typing import List, Optional

from aws_xray_sdk.core import xray_recorder

from .config import Settings
from .domain.config import MapLayer
from .domain.interfaces import Logger, ParameterClient
from .domain.registry import LayerRegistry
from .infra.logger import setup_logging, StructLogger
from .infra.parameter_store import SSMParameterClient
from .infra.xray import setup_xray, tracing_enabled
from .service.resolver import ConfigOverrideResolver

SERVICE_NAME = "ssm-overrides"


def resolve_overrides(
    registry: LayerRegistry,
    settings: Optional[Settings] = None,
    parameter_client: Optional[ParameterClient] = None,
    logger: Optional[Logger] = None,
    configure_logging: bool = False,
) -> List[MapLayer]:
    """Resolve `{ssmParameter}` values in ``registry`` once, at startup.

    Call this before the host treats its configuration as final. Any fetch
    error propagates; the host should not start with half-resolved
    configuration.

    Global logging and X-Ray setup belong to the host. structlog is only
    configured when ``configure_logging`` is set, and the X-Ray recorder only
    when tracing is enabled in ``settings``.
    """
    settings = settings or Settings.from_env()

    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)
    if logger is None:
        logger = StructLogger(SERVICE_NAME)

    if settings.tracing:
        setup_xray(SERVICE_NAME, endpoint_url=settings.endpoint_url)

    # No AWS call happens here; the boto3 client is built on the first fetch
    if parameter_client is None:
        parameter_client = SSMParameterClient(
            region=settings.region,
            endpoint_url=settings.endpoint_url,
        )

    resolver = ConfigOverrideResolver(
        parameter_client=parameter_client,
        logger=logger,
        atomic=settings.atomic,
    )

    if settings.tracing and tracing_enabled():
        with xray_recorder.in_segment(SERVICE_NAME):
            return resolver.run(registry)
    return resolver.run(registry)
