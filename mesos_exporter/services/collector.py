import logging

from mesos_exporter.core.exceptions import DecodeError, TransportError
from mesos_exporter.metrics.registry import MasterMetrics
from mesos_exporter.services.master_client import MasterClient

logger = logging.getLogger(__name__)


class MasterStateCollector:
    """Runs one fetch -> derive -> set cycle per scrape.

    A failed fetch is logged and skipped; gauges keep whatever the last
    successful cycle set.
    """

    def __init__(self, client: MasterClient, metrics: MasterMetrics):
        self.client = client
        self.metrics = metrics

    async def collect(self) -> bool:
        try:
            state = await self.client.get_state()
        except TransportError as e:
            logger.error(str(e))
            self.metrics.record_error("transport")
            return False
        except DecodeError as e:
            logger.error(str(e))
            self.metrics.record_error("decode")
            return False

        count = self.metrics.apply(state)
        logger.debug(
            f"Collected {count} observations from {self.client.state_url} "
            f"({len(state.slaves)} slaves, {len(state.frameworks)} frameworks)"
        )
        return True
