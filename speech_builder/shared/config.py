"""
Configuration management for the speech builder.
"""

import os
from typing import Any

import yaml

from dotenv import load_dotenv


class SpeechConfig:
    """Configuration management for the builder using environment variables."""

    def __init__(self) -> None:
        """Initialize configuration by loading environment variables."""
        # .env is looked up at the project root, next to setup.py
        env_path = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../.env"))
        load_dotenv(dotenv_path=env_path, override=False)
        self.config: dict[str, Any] = {}
        self.file_config: dict[str, Any] = {}
        self.config_path = os.getenv("SSML_CONFIG_PATH")
        self.load_from_env()
        self.load_file_config()

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        self.config = {
            "log_level": os.getenv("SSML_LOG_LEVEL", "WARNING").strip().upper(),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self.config[key] = value

    def reload(self) -> None:
        """Reload configuration from environment variables and the YAML file."""
        self.config_path = os.getenv("SSML_CONFIG_PATH")
        self.load_from_env()
        self.load_file_config()

    def load_file_config(self) -> None:
        """Load optional YAML configuration; file values override environment defaults."""
        if not self.config_path:
            self.file_config = {}
            return
        path = os.path.abspath(self.config_path)
        try:
            with open(path, "r", encoding="utf-8") as stream:
                data = yaml.safe_load(stream) or {}
        except FileNotFoundError:
            data = {}
        self.file_config = data

        log_level = self.get_file_value("builder.log_level")
        if log_level is not None:
            self.config["log_level"] = str(log_level).strip().upper()

    def get_file_value(self, path: str, default: Any = None) -> Any:
        """Retrieve a YAML configuration value via dotted path."""
        node: Any = self.file_config
        for part in path.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node if node is not None else default

    def set_file_config(self, file_config: dict[str, Any]) -> None:
        """Override file configuration (useful for tests)."""
        self.file_config = file_config


# Global configuration instance
config = SpeechConfig()
