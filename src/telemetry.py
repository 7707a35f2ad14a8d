"""OpenTelemetry configuration for the greeting service."""

import sys

from opentelemetry import metrics, trace
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from prometheus_client import start_http_server

from .config import settings
from .logging_config import get_logger

logger = get_logger(__name__)


def setup_telemetry(app) -> bool:
    """Configure OpenTelemetry tracing and metrics for the FastAPI application.

    Returns:
        True if instrumentation was installed, False if it was skipped or failed
    """
    if not settings.enable_telemetry:
        return False

    # Skip telemetry setup during tests to avoid I/O issues
    if "pytest" in sys.modules:
        logger.info("Skipping OpenTelemetry setup during tests")
        return False

    try:
        # Set up metrics provider with Prometheus exporter
        prometheus_reader = PrometheusMetricReader()
        metrics.set_meter_provider(MeterProvider(metric_readers=[prometheus_reader]))

        metrics_port = settings.metrics_port
        try:
            start_http_server(metrics_port)
        except OSError:
            # Try next port if the configured one is busy
            metrics_port += 1
            start_http_server(metrics_port)
        logger.info(f"Prometheus metrics server started on port {metrics_port}")

        trace.set_tracer_provider(TracerProvider())
        tracer_provider = trace.get_tracer_provider()

        # Console exporter until an OTLP collector is available
        span_processor = BatchSpanProcessor(ConsoleSpanExporter())
        tracer_provider.add_span_processor(span_processor)  # type: ignore[attr-defined]

        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumentation enabled")

        logger.info("OpenTelemetry tracing and metrics setup completed")
        return True

    except Exception as e:
        # Don't fail the application if telemetry setup fails
        logger.error(f"Failed to setup OpenTelemetry: {e}")
        return False
