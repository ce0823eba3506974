"""Configuration management."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel


class Config(BaseModel):
    """Application configuration."""

    submit_url: str
    remote_backend: Literal["webhook", "sheets"] = "webhook"
    spreadsheet_id: Optional[str] = None
    sheet_name: str = "Арыздар"
    google_credentials_file: Path = Path("config/credentials.json")
    google_token_file: Path = Path("config/sheets_token.json")
    storage_dir: Path = Path("data")
    storage_key: str = "sales_apps_kg_v1"
    export_dir: Path = Path("exports")
    hr_passphrase: str = "hr2024"
    timezone: str = "Asia/Bishkek"
    request_timeout: Optional[float] = None
    log_level: str = "INFO"


_config: Optional[Config] = None


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file."""
    global _config

    if _config is not None:
        return _config

    if config_path is None:
        config_path = Path(__file__).parent.parent / "config" / "config.yaml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}. "
            "Copy config/config.yaml.example to config/config.yaml and fill in your settings."
        )

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    _config = Config(**data)
    return _config


def get_config() -> Config:
    """Get the loaded configuration."""
    if _config is None:
        return load_config()
    return _config
