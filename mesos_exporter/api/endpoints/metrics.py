from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST

from mesos_exporter.api.dependencies import CollectorDep

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def get_metrics(collector: CollectorDep):
    """Scrape the Mesos master and expose the derived gauges"""
    await collector.collect()
    return Response(collector.metrics.render(), media_type=CONTENT_TYPE_LATEST)
