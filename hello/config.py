from pydantic import BaseModel, ConfigDict


class ServerSettings(BaseModel):
    """Fixed listener parameters. Nothing here is read from the environment."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"  # Listen on all interfaces for Docker
    port: int = 3000
    log_level: str = "info"


settings = ServerSettings()
