from typing import Annotated

from fastapi import Depends, Request

from mesos_exporter.services.collector import MasterStateCollector


def get_collector(request: Request) -> MasterStateCollector:
    return request.app.state.collector


CollectorDep = Annotated[MasterStateCollector, Depends(get_collector)]
