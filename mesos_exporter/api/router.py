from fastapi import APIRouter

from mesos_exporter.api.endpoints import health, metrics

api_router = APIRouter()
api_router.include_router(metrics.router)
api_router.include_router(health.router)
