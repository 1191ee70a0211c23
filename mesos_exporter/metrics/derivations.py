"""
Metric derivation table: how a Mesos master /state snapshot becomes gauge observations.

Every entry pairs a MetricDescriptor with a pure extractor that walks the
snapshot and yields (label_values, value) pairs. Label values come in the order
the descriptor declares its labels.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from mesos_exporter.schemas.state import MasterState, Resources, Slave

NAMESPACE = "mesos"
SUBSYSTEM = "slave"

SLAVE_LABELS = ("slave",)
TASK_LABELS = ("slave", "task", "executor", "name", "framework", "state")

# Mesos reports mem/disk in MB; the exported *_bytes values multiply by 1024
MEGABYTE = 1024

Observation = tuple[tuple[str, ...], float]
Extractor = Callable[[MasterState], Iterable[Observation]]


@dataclass(frozen=True)
class MetricDescriptor:
    name: str
    help: str
    labels: tuple[str, ...] = SLAVE_LABELS
    namespace: str = NAMESPACE
    subsystem: str = SUBSYSTEM

    @property
    def full_name(self) -> str:
        return f"{self.namespace}_{self.subsystem}_{self.name}"


@dataclass(frozen=True)
class Derivation:
    descriptor: MetricDescriptor
    extract: Extractor


# ── Slave resources ──────────────────────────────────────────────────

def _total(slave: Slave) -> Resources:
    return slave.total


def _used(slave: Slave) -> Resources:
    return slave.used


def _unreserved(slave: Slave) -> Resources:
    return slave.unreserved


def _cpus(resources: Resources) -> float:
    return resources.cpus


def _mem_bytes(resources: Resources) -> float:
    return resources.mem * MEGABYTE


def _disk_bytes(resources: Resources) -> float:
    return resources.disk * MEGABYTE


def _ports(resources: Resources) -> float:
    return float(resources.ports.size())


def slave_resource(
    view: Callable[[Slave], Resources],
    quantity: Callable[[Resources], float],
) -> Extractor:
    """Extractor emitting quantity(view(slave)) once per slave, labeled by its PID."""

    def extract(state: MasterState) -> Iterator[Observation]:
        for slave in state.slaves:
            yield (slave.pid,), quantity(view(slave))

    return extract


# ── Tasks ────────────────────────────────────────────────────────────

def task_state_times(state: MasterState) -> Iterator[Observation]:
    """Timestamp of the latest status of every completed task in active frameworks."""
    for framework in state.frameworks:
        if not framework.active:
            continue
        for task in framework.completed_tasks:
            if not task.statuses:
                continue
            # Positional against TASK_LABELS: "slave" carries the task id, "task" the slave id
            values = (
                task.id,
                task.slave_id,
                task.executor_id,
                task.name,
                task.framework_id,
                task.state,
            )
            yield values, task.statuses[0].timestamp


DERIVATIONS: tuple[Derivation, ...] = (
    Derivation(
        MetricDescriptor("cpus", "Total slave CPUs (fractional)"),
        slave_resource(_total, _cpus),
    ),
    Derivation(
        MetricDescriptor("cpus_used", "Used slave CPUs (fractional)"),
        slave_resource(_used, _cpus),
    ),
    Derivation(
        MetricDescriptor("cpus_unreserved", "Unreserved slave CPUs (fractional)"),
        slave_resource(_unreserved, _cpus),
    ),
    Derivation(
        MetricDescriptor("mem_bytes", "Total slave memory in bytes"),
        slave_resource(_total, _mem_bytes),
    ),
    Derivation(
        MetricDescriptor("mem_used_bytes", "Used slave memory in bytes"),
        slave_resource(_used, _mem_bytes),
    ),
    Derivation(
        MetricDescriptor("mem_unreserved_bytes", "Unreserved slave memory in bytes"),
        slave_resource(_unreserved, _mem_bytes),
    ),
    Derivation(
        MetricDescriptor("disk_bytes", "Total slave disk space in bytes"),
        slave_resource(_total, _disk_bytes),
    ),
    Derivation(
        MetricDescriptor("disk_used_bytes", "Used slave disk space in bytes"),
        slave_resource(_used, _disk_bytes),
    ),
    Derivation(
        MetricDescriptor("disk_unreserved_bytes", "Unreserved slave disk in bytes"),
        slave_resource(_unreserved, _disk_bytes),
    ),
    Derivation(
        MetricDescriptor("ports", "Total slave ports"),
        slave_resource(_total, _ports),
    ),
    Derivation(
        MetricDescriptor("ports_used", "Used slave ports"),
        slave_resource(_used, _ports),
    ),
    Derivation(
        MetricDescriptor("ports_unreserved", "Unreserved slave ports"),
        slave_resource(_unreserved, _ports),
    ),
    Derivation(
        MetricDescriptor("task_state_time", "Framework tasks", labels=TASK_LABELS),
        task_state_times,
    ),
)


def derive(state: MasterState, derivations: Iterable[Derivation] = DERIVATIONS) -> dict[str, list[Observation]]:
    """Evaluate every derivation against one snapshot, keyed by full metric name."""
    return {d.descriptor.full_name: list(d.extract(state)) for d in derivations}
