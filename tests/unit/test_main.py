"""Tests for the startup entry point."""

import pytest
import structlog
from unittest.mock import Mock, patch
from aws_xray_sdk.core import xray_recorder

from ssm_overrides import (
    LayerRegistry,
    LookupLayer,
    MapLayer,
    ParameterFetchError,
    Settings,
    SSMParameterClient,
    resolve_overrides,
)
from ssm_overrides.infra import xray
from ssm_overrides.infra.logger import StructLogger


def test_resolve_overrides_against_ssm(ssm):
    """Test a full startup run against mocked Parameter Store."""
    ssm.put_parameter(Name="/app/db/password", Value="s3cr3t", Type="SecureString")
    registry = LayerRegistry(
        [
            LookupLayer("environ", {}.get),
            MapLayer(
                "application",
                {"db.password": "{ssmParameter}/app/db/password", "db.host": "localhost"},
            ),
        ]
    )

    inserted = resolve_overrides(registry, settings=Settings(region="us-east-1"))

    assert [layer.name for layer in inserted] == ["override-application"]
    assert registry.names() == ["environ", "override-application", "application"]
    assert registry.get_property("db.password") == "s3cr3t"
    assert registry.get_property("db.host") == "localhost"


def test_resolve_overrides_missing_parameter(ssm, mock_logger):
    """Test that a missing parameter fails startup."""
    registry = LayerRegistry([MapLayer("application", {"db.password": "{ssmParameter}/app/missing"})])

    with pytest.raises(ParameterFetchError):
        resolve_overrides(registry, settings=Settings(region="us-east-1"), logger=mock_logger)

    assert registry.names() == ["application"]


def test_no_markers_never_builds_client(mock_logger):
    """Test that AWS is never touched when nothing needs resolving."""
    factory = Mock()
    registry = LayerRegistry([MapLayer("application", {"db.host": "localhost"})])

    inserted = resolve_overrides(
        registry,
        settings=Settings(),
        parameter_client=SSMParameterClient(client_factory=factory),
        logger=mock_logger,
    )

    assert inserted == []
    factory.assert_not_called()


def test_atomic_setting_is_applied(mock_logger):
    """Test that the atomic setting reaches the resolver."""
    client = Mock()
    client.resolve.side_effect = ["first", ParameterFetchError("/b", "denied")]
    registry = LayerRegistry(
        [
            MapLayer("system", {"a": "{ssmParameter}/a"}),
            MapLayer("application", {"b": "{ssmParameter}/b"}),
        ]
    )

    with pytest.raises(ParameterFetchError):
        resolve_overrides(registry, settings=Settings(atomic=True), parameter_client=client, logger=mock_logger)

    assert registry.names() == ["system", "application"]


def test_xray_capture_passthrough(monkeypatch):
    """Test that captured functions run unchanged while tracing is off."""
    monkeypatch.setattr(xray, "_tracing_enabled", False)

    @xray.xray_capture("double")
    def double(x):
        return x * 2

    assert double(21) == 42


def test_struct_logger_accepts_context():
    """Test that the logger takes keyword context."""
    logger = StructLogger("test")
    logger.info("Resolving parameter overrides", layer_count=1)
    logger.warning("warn", layer="application")
    logger.error("fail", error="boom")


def test_resolve_overrides_with_tracing(ssm, monkeypatch):
    """Test a traced run opens a subsegment around the fetch."""
    monkeypatch.setattr(xray, "_tracing_enabled", False)
    ssm.put_parameter(Name="/app/db/password", Value="s3cr3t", Type="SecureString")
    registry = LayerRegistry([MapLayer("application", {"db.password": "{ssmParameter}/app/db/password"})])

    with patch.object(xray_recorder, "in_subsegment", wraps=xray_recorder.in_subsegment) as in_subsegment:
        resolve_overrides(registry, settings=Settings(region="us-east-1", tracing=True))

    assert xray.tracing_enabled() is True
    assert registry.get_property("db.password") == "s3cr3t"
    in_subsegment.assert_any_call("ssm_get_parameter")


def test_tracing_disabled_against_local_endpoint(monkeypatch, mock_logger):
    """Test that X-Ray stays off against a local endpoint from settings."""
    monkeypatch.setattr(xray, "_tracing_enabled", False)
    registry = LayerRegistry([MapLayer("application", {"db.host": "localhost"})])

    resolve_overrides(
        registry,
        settings=Settings(endpoint_url="http://localhost:4566", tracing=True),
        parameter_client=Mock(),
        logger=mock_logger,
    )

    assert xray.tracing_enabled() is False


def test_host_logging_and_xray_left_alone(monkeypatch):
    """Test that a default run keeps the host's structlog and X-Ray setup."""
    monkeypatch.setattr(xray, "_tracing_enabled", False)

    def host_processor(logger, method_name, event_dict):
        return event_dict

    structlog.configure(processors=[host_processor, structlog.dev.ConsoleRenderer()])
    xray_recorder.configure(service="host-app")
    try:
        registry = LayerRegistry([MapLayer("application", {"db.host": "localhost"})])

        resolve_overrides(registry, settings=Settings(), parameter_client=Mock())

        assert structlog.get_config()["processors"][0] is host_processor
        assert xray_recorder.service == "host-app"
    finally:
        structlog.reset_defaults()


def test_configure_logging_on_request():
    """Test that logging is set up when asked, tolerating a bad level."""
    registry = LayerRegistry([MapLayer("application", {"db.host": "localhost"})])
    try:
        resolve_overrides(
            registry,
            settings=Settings(log_level="verbose", log_format="json"),
            parameter_client=Mock(),
            configure_logging=True,
        )

        assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)
    finally:
        structlog.reset_defaults()
