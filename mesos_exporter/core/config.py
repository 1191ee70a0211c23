from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    app_name: str = "Mesos Exporter"
    debug: bool = False
    log_level: str = "INFO"

    mesos_master_url: str = "http://localhost:5050"
    scrape_timeout: float = 5.0  # seconds
    listen_address: str = "0.0.0.0:9105"

    class Config:
        env_file = ".env"

    def listen_host_port(self) -> tuple[str, int]:
        """Split listen_address into (host, port); an empty host binds all interfaces"""
        host, _, port = self.listen_address.rpartition(":")
        return host or "0.0.0.0", int(port)


settings = Settings()
