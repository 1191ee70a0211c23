import httpx
from pydantic import ValidationError

from mesos_exporter.core.config import settings
from mesos_exporter.core.exceptions import DecodeError, TransportError
from mesos_exporter.schemas.state import MasterState


class MasterClient:
    def __init__(self, master_url: str | None = None, timeout: float | None = None):
        self.master_url = (master_url or settings.mesos_master_url).removesuffix("/")
        self.timeout = settings.scrape_timeout if timeout is None else timeout

    @property
    def state_url(self) -> str:
        return f"{self.master_url}/state"

    async def get_state(self) -> MasterState:
        """Fetch and decode one /state snapshot. No retries."""
        url = self.state_url
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(url, e) from e

        try:
            return MasterState.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(url, e) from e


async def fetch_state(base_url: str, timeout: float) -> MasterState:
    return await MasterClient(base_url, timeout).get_state()
