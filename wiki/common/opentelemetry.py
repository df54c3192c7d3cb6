import logging
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor  # type: ignore

from wiki.config import Settings

logger = logging.getLogger(__name__)

# Health probes and assets are not traced
EXCLUDED_URLS = "healthcheck,static/.*"


def setup_opentelemetry(settings: Settings, app: FastAPI) -> TracerProvider:
    logger.info("Setting up instrumentation...")

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.OTEL_SERVICE_NAME,
            SERVICE_VERSION: settings.WIKI_VERSION,
            "wiki.page_store.backend": settings.PAGE_STORE_BACKEND,
        }
    )
    trace_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(trace_provider)

    exporter = OTLPSpanExporter()
    span_processor = BatchSpanProcessor(exporter)
    trace_provider.add_span_processor(span_processor)

    FastAPIInstrumentor.instrument_app(  # type: ignore
        app, tracer_provider=trace_provider, excluded_urls=EXCLUDED_URLS
    )
    logger.info("FastAPI Instrumentation enabled.")

    return trace_provider
