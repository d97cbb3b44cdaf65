"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    pages_dir: Path = Path("pages")
    templates_dir: Path = TEMPLATES_DIR
    app_title: str = "FlatWiki"
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    reload_templates: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="FLATWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
