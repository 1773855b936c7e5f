"""Testes para app.observability (correlation_id, escopo e métricas)."""

from __future__ import annotations

import asyncio
import logging

import pytest

from app.observability import (
    get_correlation_id,
    get_log_scope,
    log_scope,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Testes para set/get/reset_correlation_id."""

    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_set_and_reset(self) -> None:
        token = set_correlation_id("req-1")
        try:
            assert get_correlation_id() == "req-1"
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_generates_uuid_when_none(self) -> None:
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)


class TestLogScope:
    """Testes para log_scope."""

    def test_fields_visible_inside_block(self) -> None:
        with log_scope(operation="get_debtor", debtor_id="d-1") as fields:
            assert get_log_scope() == {"operation": "get_debtor", "debtor_id": "d-1"}
            assert fields == get_log_scope()
        assert get_log_scope() == {}

    def test_nested_scopes_merge(self) -> None:
        with log_scope(operation="outer", a=1):
            with log_scope(operation="inner"):
                assert get_log_scope() == {"operation": "inner", "a": 1}
            assert get_log_scope() == {"operation": "outer", "a": 1}

    def test_scope_reset_on_exception(self) -> None:
        with pytest.raises(RuntimeError), log_scope(operation="boom"):
            raise RuntimeError
        assert get_log_scope() == {}

    @pytest.mark.asyncio
    async def test_scopes_isolated_between_tasks(self) -> None:
        async def run(name: str) -> dict[str, object]:
            with log_scope(operation=name):
                await asyncio.sleep(0)
                return get_log_scope()

        first, second = await asyncio.gather(run("a"), run("b"))
        assert first == {"operation": "a"}
        assert second == {"operation": "b"}


class TestRecordLatency:
    """Testes para record_latency."""

    def test_logs_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_latency("buckaroo_http_client", "DataRequest", 12.3456, correlation_id="c-1")

        record = caplog.records[-1]
        assert record.message == "metric_latency"
        assert record.metric_type == "latency"
        assert record.latency_ms == 12.35
        assert record.correlation_id == "c-1"
