from typing import Annotated, Any, List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STORECONF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Source Settings
    CONFIG_PATHS: Annotated[List[str], NoDecode] = []
    CONFIG_DIR: Optional[str] = None
    CONFIG_PATTERN: str = "*.config.*"

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Redis Pool Settings
    REDIS_MAX_CONNECTIONS: int = 50
    REDIS_SOCKET_CONNECT_TIMEOUT: float = 5.0
    REDIS_HEALTH_CHECK_INTERVAL: int = 30  # seconds

    @field_validator("CONFIG_PATHS", mode="before")
    @classmethod
    def _split_paths(cls, value: Any) -> Any:
        """Comma separated paths, as given in the environment"""
        if isinstance(value, str):
            return [path.strip() for path in value.split(",") if path.strip()]
        return value
