from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MCP_SEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    # "docker", a file path, or an http(s) URL
    catalog_source: str = "docker"
    catalog_name: Optional[str] = None
    docker_bin: str = "docker"
    catalog_timeout: float = 60.0

    output_path: str = "seed.json"
    registry_namespace: str = "com.docker.mcp"
    include_remote: bool = False
    sort_entries: bool = False

    log_level: str = "INFO"

settings = Settings()
