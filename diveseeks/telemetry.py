"""OpenTelemetry configuration for the DiveSeeks API."""

import os
import sys

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .logging_config import get_logger

logger = get_logger(__name__)


def setup_telemetry(app: FastAPI, node_env: str) -> bool:
    """Configure OpenTelemetry tracing for the FastAPI application.

    Returns:
        True if instrumentation was installed
    """
    # Skip telemetry setup by default (enable with ENABLE_TELEMETRY=1)
    if not os.getenv("ENABLE_TELEMETRY"):
        return False

    # Skip telemetry setup during tests to avoid I/O issues
    if "pytest" in sys.modules or os.getenv("TESTING"):
        logger.info("Skipping OpenTelemetry setup during tests")
        return False

    try:
        resource = Resource.create(
            {"service.name": "diveseeks-api", "deployment.environment": node_env}
        )
        tracer_provider = TracerProvider(resource=resource)

        # Console exporter until an OTLP collector is deployed
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        trace.set_tracer_provider(tracer_provider)

        FastAPIInstrumentor.instrument_app(app)
        logger.info("OpenTelemetry tracing enabled", node_env=node_env)
        return True

    except Exception as e:
        # Tracing is optional; the API keeps serving without it
        logger.error("Failed to setup OpenTelemetry", error=str(e))
        return False
