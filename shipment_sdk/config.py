"""
Configuration loader for the shipment SDK client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "client_config.yml"

ENV_OVERRIDES = {
    "EASYPOST_API_KEY": "api_key",
    "EASYPOST_BASE_URL": "base_url",
    "EASYPOST_TIMEOUT_SECONDS": "timeout_seconds",
}


class ClientSettings(BaseModel):
    """Connection settings for the API client"""

    model_config = ConfigDict(extra="ignore")

    api_key: Optional[str] = None
    base_url: str = Field(default="https://api.easypost.com/v2", min_length=8)
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="shipment-sdk/0.1.0", min_length=1)


def load_settings(config_path: Optional[Path] = None) -> ClientSettings:
    """
    Load and validate client settings

    Values come from the YAML file (a top-level `client:` mapping, or a flat
    mapping), then environment variables (and `.env`) override them.

    Args:
        config_path: Path to config file. Defaults to $SHIPMENT_SDK_CONFIG,
            then config/client_config.yml. Only an explicit path must exist.

    Returns:
        Validated ClientSettings object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValueError: If the config file is not a mapping
        ValidationError: If settings don't match schema
    """
    load_dotenv()

    explicit = config_path is not None or bool(os.getenv("SHIPMENT_SDK_CONFIG"))
    if config_path is None:
        env_path = os.getenv("SHIPMENT_SDK_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        config_data = _read_yaml(config_path)
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config_data[field_name] = value

    try:
        settings = ClientSettings(**config_data)
        logger.info(f"Loaded client settings (base_url={settings.base_url})")
        return settings
    except ValidationError as e:
        logger.error(f"Client settings validation failed: {e}")
        raise


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    section = loaded.get("client", loaded)
    if not isinstance(section, dict):
        raise ValueError(f"'client' section must be a mapping: {config_path}")
    return dict(section)
