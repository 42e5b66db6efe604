import os
import logging
import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

# OpenTelemetry
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT", "http://localhost:4317")
# Set to "false" to keep spans local (no OTLP collector in dev/CI)
OTEL_EXPORT_ENABLED = os.getenv("OTEL_EXPORT_ENABLED", "true").lower() in ("1", "true", "yes")

# Process-wide pieces; only the per-app instrumentation runs more than once
_provider: TracerProvider | None = None


def add_otel_ids(logger, log_method, event_dict):
    """Copy the active span's trace and span ids into the log event."""
    span = trace.get_current_span()
    if span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = trace.format_trace_id(ctx.trace_id)
        event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    return event_dict


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(service_name: str | None = None):
    """JSON log lines through structlog, filtered at ``LOG_LEVEL``."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_otel_ids,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(LOG_LEVEL)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if service_name:
        structlog.contextvars.bind_contextvars(service=service_name)


def get_tracer_provider(service_name: str) -> TracerProvider:
    """Install the global tracer provider once and hand it back afterwards.

    The OTel API refuses to replace a provider that is already set, and
    HTTPX instrumentation patches the library globally, so both happen on
    the first call only.
    """
    global _provider
    if _provider is not None:
        return _provider

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if OTEL_EXPORT_ENABLED:
        exporter = OTLPSpanExporter(endpoint=OTLP_ENDPOINT, insecure=True)
        provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    # Child spans for the outgoing user-service lookups
    HTTPXClientInstrumentor().instrument()

    _provider = provider
    return provider


def configure_tracing(app: FastAPI, service_name: str):
    provider = get_tracer_provider(service_name)
    # Spans for incoming order requests
    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)


def configure_metrics(app: FastAPI):
    # Request latency and status codes, exposed at /metrics
    Instrumentator().instrument(app).expose(app)


def setup_observability(app: FastAPI, service_name: str):
    """
    Bootstraps Logging, Tracing, and Metrics for a FastAPI app.
    Call this once per app in its main.py before starting the server.
    """
    configure_logging(service_name)
    configure_tracing(app, service_name)
    configure_metrics(app)
