"""OpenTelemetry tracing and metrics for the organizer service.

FastAPI and SQLAlchemy instrumentation is attached where the app and the
engine are built; this module only owns the providers they report to.
"""

import logging

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricExporter,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter
from opentelemetry.semconv.resource import ResourceAttributes

from organizer.config import Settings

logger = logging.getLogger(__name__)

METRIC_EXPORT_INTERVAL_MS = 60000


def signal_endpoint(base: str, path: str) -> str:
    """Append the per-signal OTLP path unless the endpoint already ends with it."""
    return base if base.endswith(path) else f"{base.rstrip('/')}{path}"


def build_span_exporter(settings: Settings) -> SpanExporter | None:
    """Span exporter selected by ``otel_traces_exporter``, or None for "none"."""
    if settings.otel_traces_exporter == "otlp":
        return OTLPSpanExporter(
            endpoint=signal_endpoint(settings.otel_exporter_otlp_endpoint, "/v1/traces"),
            headers=settings.get_otlp_headers(),
        )
    if settings.otel_traces_exporter == "console":
        return ConsoleSpanExporter()
    return None


def build_metric_exporter(settings: Settings) -> MetricExporter | None:
    """Metric exporter selected by ``otel_metrics_exporter``, or None for "none"."""
    if settings.otel_metrics_exporter == "otlp":
        return OTLPMetricExporter(
            endpoint=signal_endpoint(settings.otel_exporter_otlp_endpoint, "/v1/metrics"),
            headers=settings.get_otlp_headers(),
        )
    if settings.otel_metrics_exporter == "console":
        return ConsoleMetricExporter()
    return None


class TelemetryManager:
    """Owns the process tracer and meter providers."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.tracer_provider: TracerProvider | None = None
        self.meter_provider: MeterProvider | None = None

    def resource(self) -> Resource:
        attributes = {
            ResourceAttributes.SERVICE_NAME: self.settings.otel_service_name,
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: self.settings.environment,
        }
        attributes.update(self.settings.get_resource_attributes())
        return Resource.create(attributes)

    def setup(self) -> None:
        """Create the providers and install them globally, if telemetry is enabled."""
        if not self.settings.otel_enabled:
            logger.info("OpenTelemetry is disabled")
            return

        resource = self.resource()

        self.tracer_provider = TracerProvider(resource=resource)
        span_exporter = build_span_exporter(self.settings)
        if span_exporter is not None:
            self.tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))
        trace.set_tracer_provider(self.tracer_provider)

        metric_exporter = build_metric_exporter(self.settings)
        readers = []
        if metric_exporter is not None:
            readers.append(
                PeriodicExportingMetricReader(
                    metric_exporter, export_interval_millis=METRIC_EXPORT_INTERVAL_MS
                )
            )
        self.meter_provider = MeterProvider(resource=resource, metric_readers=readers)
        metrics.set_meter_provider(self.meter_provider)

        logger.info(
            f"OpenTelemetry initialized for {self.settings.otel_service_name}: "
            f"traces={self.settings.otel_traces_exporter} "
            f"metrics={self.settings.otel_metrics_exporter} "
            f"endpoint={self.settings.otel_exporter_otlp_endpoint}"
        )

    def shutdown(self) -> None:
        """Flush and stop the providers created by ``setup``."""
        if self.tracer_provider:
            self.tracer_provider.shutdown()
        if self.meter_provider:
            self.meter_provider.shutdown()
        logger.info("OpenTelemetry shutdown complete")
