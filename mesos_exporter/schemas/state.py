from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictStr, model_validator

from mesos_exporter.schemas.ranges import RangeSet


class MesosModel(BaseModel):
    """Loose-schema base: unknown fields are ignored, missing or null fields take their zero value.

    Scalars are strict: "4" is not a number and 1 is not a boolean.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Resources(MesosModel):
    cpus: StrictFloat = 0.0
    mem: StrictFloat = 0.0  # MiB
    disk: StrictFloat = 0.0  # MiB
    ports: RangeSet = RangeSet()


class Label(MesosModel):
    key: StrictStr = ""
    value: StrictStr = ""


class TaskStatus(MesosModel):
    state: StrictStr = ""
    timestamp: StrictFloat = 0.0


class Task(MesosModel):
    id: StrictStr = ""
    name: StrictStr = ""
    executor_id: StrictStr = ""
    framework_id: StrictStr = ""
    slave_id: StrictStr = ""
    state: StrictStr = ""
    labels: list[Label] = []
    resources: Resources = Resources()
    statuses: list[TaskStatus] = []  # most recent first


class Slave(MesosModel):
    pid: StrictStr = ""
    resources: Resources = Resources()
    used_resources: Resources = Resources()
    unreserved_resources: Resources = Resources()

    @property
    def total(self) -> Resources:
        return self.resources

    @property
    def used(self) -> Resources:
        return self.used_resources

    @property
    def unreserved(self) -> Resources:
        return self.unreserved_resources


class Framework(MesosModel):
    id: StrictStr = ""
    name: StrictStr = ""
    active: StrictBool = False
    tasks: list[Task] = []
    completed_tasks: list[Task] = []


class MasterState(MesosModel):
    """One decoded /state document, valid for a single collection cycle."""

    slaves: list[Slave] = []
    frameworks: list[Framework] = []
