from fastapi import APIRouter

from mesos_exporter.api.dependencies import CollectorDep
from mesos_exporter.schemas.health import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
async def get_health(collector: CollectorDep):
    # Liveness only; scrape failures never mark the exporter unhealthy
    return HealthStatus(status="ok", master_url=collector.client.master_url)
