"""
Prometheus registry owning one gauge per derivation plus the exporter's own counters.
"""
from typing import Iterable

from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

from mesos_exporter.metrics.derivations import DERIVATIONS, Derivation, derive
from mesos_exporter.schemas.state import MasterState

SCRAPE_ERROR_REASONS = ("transport", "decode")


class MasterMetrics:
    """Gauges for one exporter instance, registered on a private CollectorRegistry."""

    def __init__(
        self,
        derivations: Iterable[Derivation] = DERIVATIONS,
        registry: CollectorRegistry | None = None,
    ):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.derivations = tuple(derivations)
        self.gauges: dict[str, Gauge] = {}

        for derivation in self.derivations:
            descriptor = derivation.descriptor
            self.gauges[descriptor.full_name] = Gauge(
                descriptor.name,
                descriptor.help,
                list(descriptor.labels),
                namespace=descriptor.namespace,
                subsystem=descriptor.subsystem,
                registry=self.registry,
            )

        self.scrape_errors = Counter(
            "scrape_errors",
            "Failed /state scrapes of the Mesos master",
            ["reason"],
            namespace="mesos_exporter",
            registry=self.registry,
        )
        for reason in SCRAPE_ERROR_REASONS:
            self.scrape_errors.labels(reason=reason)

    def apply(self, state: MasterState) -> int:
        """Set gauges from a snapshot; returns the number of observations written.

        Label sets missing from the snapshot keep their previous values.
        """
        observations = derive(state, self.derivations)
        count = 0
        for name, values in observations.items():
            gauge = self.gauges[name]
            for labels, value in values:
                gauge.labels(*labels).set(value)
                count += 1
        return count

    def record_error(self, reason: str) -> None:
        self.scrape_errors.labels(reason=reason).inc()

    def render(self) -> bytes:
        return generate_latest(self.registry)
