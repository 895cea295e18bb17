"""
OpenTelemetry tracing, disabled by default.

With ``OTEL_ENABLED=true`` the service traces incoming requests, outbound
httpx traffic (the Anthropic and Supabase clients both use httpx) and one
span per enrichment call, and prints finished spans with the console
exporter. ``OTEL_SERVICE_NAME`` overrides the resource name.

While disabled, ``get_tracer`` hands out OpenTelemetry's no-op tracer, so
instrumented code needs no checks of its own.
"""

import logging
import os
from typing import Optional

from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Tracer

logger = logging.getLogger("MindJournal.Tracing")

_provider: Optional[TracerProvider] = None
_configured = False


def is_tracing_enabled() -> bool:
    return os.getenv("OTEL_ENABLED", "false").strip().lower() in ("1", "true", "yes")


def setup_tracing(service_name: Optional[str] = None) -> Optional[TracerProvider]:
    """Install the global tracer provider once; None while tracing is off."""
    global _provider, _configured

    if _configured:
        return _provider
    _configured = True

    if not is_tracing_enabled():
        logger.info("Tracing disabled")
        return None

    name = os.getenv("OTEL_SERVICE_NAME") or service_name or "mindjournal-service"
    _provider = TracerProvider(resource=Resource.create({SERVICE_NAME: name}))
    _provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(_provider)

    logger.info("Tracing enabled for %s", name)
    return _provider


def get_tracer(name: str) -> Tracer:
    return trace.get_tracer(name)


def instrument_app(app) -> None:
    if not is_tracing_enabled():
        return

    FastAPIInstrumentor.instrument_app(app)
    instrumentor = HTTPXClientInstrumentor()
    if not instrumentor.is_instrumented_by_opentelemetry:
        instrumentor.instrument()
    logger.info("Request and httpx instrumentation installed")


def shutdown_tracing() -> None:
    """Flush pending spans; the next ``setup_tracing`` starts fresh."""
    global _provider, _configured

    if _provider is not None:
        _provider.shutdown()
        logger.info("Tracing shut down")

    _provider = None
    _configured = False
