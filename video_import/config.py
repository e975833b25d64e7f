"""Configuration management with environment variable and file support"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any, List

import yaml
from dotenv import load_dotenv

from .contentful_publisher import DEFAULT_API_URL as CONTENTFUL_API_URL
from .youtube_client import DEFAULT_API_URL as YOUTUBE_API_URL


class ConfigError(Exception):
    pass


class Config:
    def __init__(self, config_file: Optional[str] = None, env_file: Optional[str] = None):
        self.config_file = config_file or "config.yaml"
        self._config: Dict[str, Any] = {}
        load_dotenv(env_file or ".env")
        self._load_config()

    def _load_config(self):
        config_path = Path(self.config_file)
        if not config_path.exists():
            self._config = {}
            return
        try:
            with open(config_path, 'r') as f:
                self._config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not load config file {config_path}: {e}") from e
        if not isinstance(self._config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        env_key = env_var or key.upper().replace('.', '_')
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        if '.' in key:
            keys = key.split('.')
            value = self._config
            for k in keys:
                if isinstance(value, dict):
                    value = value.get(k)
                else:
                    value = None
                    break
            if value is not None:
                return value
        else:
            if key in self._config:
                return self._config[key]

        return default

    def get_bool(self, key: str, default: bool = False, env_var: Optional[str] = None) -> bool:
        value = self.get(key, default, env_var)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return bool(value)

    def get_float(self, key: str, default: float = 0.0, env_var: Optional[str] = None) -> float:
        value = self.get(key, default, env_var)
        try:
            return float(value)
        except (ValueError, TypeError):
            return default


@dataclass(frozen=True)
class ImportSettings:
    """Everything a run needs, resolved once at startup."""

    youtube_api_key: str
    contentful_token: str
    contentful_space_id: str
    csv_file: str = 'data.csv'
    url_column: str = 'youtubeUrl'
    youtube_api_url: str = YOUTUBE_API_URL
    contentful_environment: str = 'master'
    content_type: str = 'video'
    locale: str = 'en-US'
    contentful_api_url: str = CONTENTFUL_API_URL
    timeout: float = 60.0
    dry_run: bool = False

    @classmethod
    def from_config(cls, config: Config) -> "ImportSettings":
        return cls(
            youtube_api_key=config.get('youtube.api_key', ''),
            contentful_token=config.get('contentful.management_token', '', env_var='CONTENTFUL_MANAGEMENT_API_KEY'),
            contentful_space_id=config.get('contentful.space_id', ''),
            csv_file=config.get('processing.csv_file', 'data.csv'),
            url_column=config.get('processing.url_column', 'youtubeUrl'),
            youtube_api_url=config.get('youtube.api_url', YOUTUBE_API_URL),
            contentful_environment=config.get('contentful.environment', 'master'),
            content_type=config.get('contentful.content_type', 'video'),
            locale=config.get('contentful.locale', 'en-US'),
            contentful_api_url=config.get('contentful.api_url', CONTENTFUL_API_URL),
            timeout=config.get_float('http.timeout', 60.0),
            dry_run=config.get_bool('modes.dry_run', False),
        )

    def validate(self):
        missing: List[str] = []
        if not self.youtube_api_key:
            missing.append('YOUTUBE_API_KEY (youtube.api_key)')
        if not self.dry_run:
            if not self.contentful_token:
                missing.append('CONTENTFUL_MANAGEMENT_API_KEY (contentful.management_token)')
            if not self.contentful_space_id:
                missing.append('CONTENTFUL_SPACE_ID (contentful.space_id)')
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
