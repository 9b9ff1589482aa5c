"""Unit tests for correlation ID propagation and logging configuration."""

from __future__ import annotations

import contextvars

import structlog

from taskapp.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    get_logger_for_service,
    set_correlation_id,
)


def test_processor_adds_current_correlation_id() -> None:
    def run() -> dict:
        set_correlation_id("req-1")
        return correlation_id_processor(None, "info", {"event": "x"})

    assert contextvars.Context().run(run) == {"event": "x", "correlation_id": "req-1"}


def test_processor_leaves_event_alone_without_id() -> None:
    def run() -> dict:
        return correlation_id_processor(None, "info", {"event": "x"})

    assert contextvars.Context().run(run) == {"event": "x"}
    assert contextvars.Context().run(get_correlation_id) == ""


def test_generated_ids_are_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


def test_configure_for_production_and_development() -> None:
    try:
        configure_structlog("production")
        assert structlog.is_configured()
        configure_structlog("development")
        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()


def test_service_logger_binds_context() -> None:
    log = get_logger_for_service("GroupMembershipService", component="membership")
    assert log is not None
