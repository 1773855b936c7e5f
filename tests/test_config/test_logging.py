"""Testes para config.logging.

Cobre: saída JSON do gateway (campos obrigatórios, escopo de operação,
mascaramento), CorrelationIdFilter com escopo, configure_logging e o
log_fallback usado por get_object.
"""

from __future__ import annotations

import io
import json
import logging
from unittest.mock import MagicMock

import pytest

from api.connectors.buckaroo.models import WireParameter
from api.normalizers.buckaroo import ParameterList
from app.observability import get_log_scope, log_scope
from config.logging import (
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    GatewayJsonFormatter,
    configure_logging,
    create_json_formatter,
    log_fallback,
)


def _record(msg: str = "buckaroo_debtor_found", **attrs: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="api.connectors.buckaroo.gateway",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


def _format(record: logging.LogRecord) -> dict[str, object]:
    return json.loads(create_json_formatter().format(record))


class TestGatewayJsonFormatter:
    """Testes para create_json_formatter / GatewayJsonFormatter."""

    def test_required_fields_are_ordered(self) -> None:
        """Ordem dos campos obrigatórios é estável (tupla)."""
        assert isinstance(REQUIRED_LOG_FIELDS, tuple)
        assert REQUIRED_LOG_FIELDS[:4] == ("asctime", "levelname", "name", "message")

    def test_output_key_order(self) -> None:
        payload = _format(
            _record(
                correlation_id="c-1",
                service="pyloto_assinaturas",
                status_code=200,
                debtor_id="d-1",
                operation="get_debtor",
            )
        )
        keys = list(payload)
        assert keys[:8] == [
            "asctime",
            "level",
            "logger",
            "message",
            "correlation_id",
            "service",
            "operation",
            "debtor_id",
        ]
        assert payload["status_code"] == 200

    def test_scope_fields_absent_outside_operation(self) -> None:
        payload = _format(_record(correlation_id="", service="svc"))
        assert "operation" not in payload
        assert payload["level"] == "INFO"
        assert payload["logger"] == "api.connectors.buckaroo.gateway"

    def test_credentials_are_redacted(self) -> None:
        payload = _format(
            _record(correlation_id="", service="svc", private_key="secret", Authorization="hmac x")
        )
        assert payload["private_key"] == "***"
        assert payload["Authorization"] == "***"
        assert "secret" not in json.dumps(payload)

    def test_factory_returns_gateway_formatter(self) -> None:
        assert isinstance(create_json_formatter(), GatewayJsonFormatter)


class TestCorrelationIdFilterScope:
    """Testes para CorrelationIdFilter com correlation_id e escopo."""

    def test_filter_adds_correlation_id_and_service(self) -> None:
        filter_ = CorrelationIdFilter("pyloto_assinaturas", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "pyloto_assinaturas"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record(correlation_id="explicit-id")
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_adds_scope_fields(self) -> None:
        filter_ = CorrelationIdFilter(
            "svc",
            scope_getter=lambda: {"operation": "get_debtor", "debtor_id": "d-1"},
        )
        record = _record()
        filter_.filter(record)
        assert record.operation == "get_debtor"
        assert record.debtor_id == "d-1"

    def test_filter_extra_takes_precedence_over_scope(self) -> None:
        filter_ = CorrelationIdFilter("svc", scope_getter=lambda: {"operation": "scope"})
        record = _record(operation="explicit")
        filter_.filter(record)
        assert record.operation == "explicit"

    def test_filter_without_getters(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""
        assert not hasattr(record, "operation")


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_single_handler_with_filter(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging(level="warning")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_scope_reaches_json_output(self) -> None:
        """Log emitido dentro de log_scope sai com operation e debtor_id."""
        configure_logging(
            level="INFO",
            service_name="pyloto_assinaturas",
            correlation_id_getter=lambda: "req-42",
            scope_getter=get_log_scope,
        )
        handler = logging.getLogger().handlers[0]
        stream = io.StringIO()
        handler.setStream(stream)  # type: ignore[attr-defined]

        with log_scope(operation="get_debtor", debtor_id="d-1"):
            logging.getLogger("api.connectors.buckaroo.gateway").info("buckaroo_debtor_found")

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "buckaroo_debtor_found"
        assert payload["correlation_id"] == "req-42"
        assert payload["service"] == "pyloto_assinaturas"
        assert payload["operation"] == "get_debtor"
        assert payload["debtor_id"] == "d-1"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_fields(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "buckaroo_get_object", reason="null_value", elapsed_ms=1.5)
        args, kwargs = logger.debug.call_args
        assert args == ("Fallback applied for %s", "buckaroo_get_object")
        assert kwargs["extra"] == {
            "fallback_used": True,
            "component": "buckaroo_get_object",
            "reason": "null_value",
            "elapsed_ms": 1.5,
        }

    def test_optional_fields_omitted(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "buckaroo_get_object")
        extra = logger.debug.call_args.kwargs["extra"]
        assert "reason" not in extra
        assert "elapsed_ms" not in extra

    def test_get_object_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        parameters = ParameterList([WireParameter(name="Plan", value=None)])

        with caplog.at_level(logging.DEBUG, logger="api.normalizers.buckaroo.parameters"):
            assert parameters.get_object("Plan", dict) is None

        record = caplog.records[-1]
        assert record.fallback_used is True
        assert record.component == "buckaroo_get_object"
        assert record.reason == "null_value"
