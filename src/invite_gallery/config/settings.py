"""Settings model — pydantic-settings with env var support."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

ENV_PREFIX = "GALLERY_"


class Settings(BaseSettings):
    """Server settings.

    Use ``ConfigLoader.load_settings()`` to build with YAML + env var layering.
    Direct construction (e.g. in tests) skips YAML loading.
    """

    environment: str = "development"
    public_dir: Path = Path("public")
    data_url: str = ""
    data_timeout: float = 10.0
    default_page_size: int = 6
    max_page_size: int = 100
    preload_on_startup: bool = True
    log_level: str = "INFO"

    model_config = {"env_prefix": ENV_PREFIX}

    @property
    def is_production(self) -> bool:
        """True when running with production error handling and routing."""
        return self.environment.lower() in {"production", "prod"}

    @property
    def data_path(self) -> Path:
        """Location of data.json inside the public directory."""
        return self.public_dir / "data.json"
