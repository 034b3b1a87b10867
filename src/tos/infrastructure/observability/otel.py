from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.sdk.resources import (
    DEPLOYMENT_ENVIRONMENT,
    SERVICE_NAME,
    SERVICE_VERSION,
    Resource,
)
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from tos.core.config import DISTRIBUTION_NAME, Settings

_TRACER_PROVIDER: TracerProvider | None = None
logger = logging.getLogger(__name__)


def _service_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Source checkout without an installed distribution.
        return "unknown"


def service_resource(settings: Settings) -> Resource:
    return Resource.create(
        {
            SERVICE_NAME: settings.otel_service_name,
            SERVICE_VERSION: _service_version(),
            DEPLOYMENT_ENVIRONMENT: settings.app_env,
        }
    )


def build_tracer_provider(settings: Settings) -> TracerProvider:
    """Tracer provider for this service; spans are exported only when an OTLP endpoint is set."""
    provider = TracerProvider(resource=service_resource(settings))
    endpoint = settings.otel_exporter_otlp_endpoint
    if endpoint:
        exporter = OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info("otel_exporter_enabled")
    return provider


def configure_otel(app: FastAPI, settings: Settings) -> TracerProvider:
    global _TRACER_PROVIDER
    if _TRACER_PROVIDER is None:
        _TRACER_PROVIDER = build_tracer_provider(settings)
        trace.set_tracer_provider(_TRACER_PROVIDER)
        set_global_textmap(TraceContextTextMapPropagator())

    # One provider per process; every app from create_app is instrumented with it.
    FastAPIInstrumentor.instrument_app(app, tracer_provider=_TRACER_PROVIDER)
    return _TRACER_PROVIDER
