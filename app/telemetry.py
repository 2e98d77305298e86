import logging
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.instrumentation.requests import RequestsInstrumentor
from opentelemetry.propagate import set_global_textmap
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator

from models import db

logger = logging.getLogger(__name__)

# The global tracer provider can only be installed once per process
_provider = None


def _install_provider(app):
    global _provider
    if _provider is not None:
        return _provider
    service_name = app.config.get("OTEL_SERVICE_NAME", "eloity-api")
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if app.config.get("OTEL_CONSOLE_EXPORT"):
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    elif not app.config.get("TESTING"):
        endpoint = app.config.get("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    trace.set_tracer_provider(provider)
    set_global_textmap(TraceContextTextMapPropagator())
    RequestsInstrumentor().instrument()
    _provider = provider
    logger.info("Tracing enabled for %s", service_name)
    return provider


def init_tracing(app):
    """Initialize OpenTelemetry tracing for the Flask app."""
    if not app.config.get("TRACING_ENABLED", True):
        return
    _install_provider(app)
    FlaskInstrumentor().instrument_app(app)
    with app.app_context():
        SQLAlchemyInstrumentor().instrument(engine=db.engine)
