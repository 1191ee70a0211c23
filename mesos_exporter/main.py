import logging

import uvicorn
from fastapi import FastAPI

from mesos_exporter.api.router import api_router
from mesos_exporter.core.config import Settings, settings
from mesos_exporter.metrics.registry import MasterMetrics
from mesos_exporter.services.collector import MasterStateCollector
from mesos_exporter.services.master_client import MasterClient

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def create_app(config: Settings = settings) -> FastAPI:
    """Build the exporter app with its own metric registry and collector."""
    app = FastAPI(title=config.app_name, debug=config.debug)

    metrics = MasterMetrics()
    client = MasterClient(config.mesos_master_url, config.scrape_timeout)
    app.state.metrics = metrics
    app.state.collector = MasterStateCollector(client, metrics)

    app.include_router(api_router)
    return app


app = create_app()


def run():
    configure_logging(settings.log_level)
    host, port = settings.listen_host_port()
    logger.info(f"Exporting metrics for {settings.mesos_master_url} on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
