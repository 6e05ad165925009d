"""Shell settings file loading

The optional YAML settings file tunes the shell itself (logging and webview
options). Launch options such as server, path and window size are never read
from it; those come from the environment and command line only.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

ENV_SHELL_CONFIG: str = "FLAPPYBINGUS_CLIENT_CONFIG"

DEFAULT_LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class LoggingConfig:
    """Logging configuration settings"""
    level: str = "WARNING"
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class WebviewConfig:
    """Embedded webview runtime settings"""
    debug: bool = False
    gui: Optional[str] = None    # pywebview GUI backend, None lets pywebview choose
    private_mode: bool = True


@dataclass
class ShellConfig:
    """Complete shell configuration"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    webview: WebviewConfig = field(default_factory=WebviewConfig)


class ShellConfigLoader:
    """Loads and parses shell settings from YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "flappybingus-client.yml",
        "~/.config/flappybingus/client.yml",
    ]

    @staticmethod
    def configFile_find() -> Optional[Path]:
        """
        Find settings file in standard locations

        Returns:
            Path to settings file, or None if not found
        """
        for config_path in ShellConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                return path
        return None

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML settings file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed settings dictionary; an empty file yields an empty dict

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
            ValueError: If the document is not a mapping
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> ShellConfig:
        """
        Parse settings dictionary into ShellConfig object

        Every section and key is optional; missing values take defaults.

        Args:
            data: Raw settings dictionary

        Returns:
            Parsed ShellConfig object

        Raises:
            ValueError: If a section is present but is not a mapping
        """
        logging_data = ShellConfigLoader._section_get(data, "logging")
        defaults = LoggingConfig()
        logging = LoggingConfig(
            level=str(logging_data.get("level", defaults.level)),
            file=logging_data.get("file"),
            format=str(logging_data.get("format", defaults.format)),
        )

        webview_data = ShellConfigLoader._section_get(data, "webview")
        webview = WebviewConfig(
            debug=bool(webview_data.get("debug", False)),
            gui=webview_data.get("gui"),
            private_mode=bool(webview_data.get("private_mode", True)),
        )

        return ShellConfig(logging=logging, webview=webview)

    @staticmethod
    def config_load(
        file_path: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> ShellConfig:
        """
        Load shell settings

        Args:
            file_path: Optional explicit path. If None, the
                FLAPPYBINGUS_CLIENT_CONFIG variable is consulted, then the
                standard locations.
            env: Environment mapping used for the path variable.

        Returns:
            Parsed ShellConfig, or defaults when no file is found

        Raises:
            FileNotFoundError: If an explicitly named file does not exist
            ValueError: If the settings file is invalid
        """
        if file_path is None and env is not None and env.get(ENV_SHELL_CONFIG):
            file_path = Path(env[ENV_SHELL_CONFIG]).expanduser()

        if file_path is None:
            file_path = ShellConfigLoader.configFile_find()
            if file_path is None:
                return ShellConfig()

        data = ShellConfigLoader.yaml_load(file_path)
        return ShellConfigLoader.config_parse(data)

    @staticmethod
    def _section_get(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Return a settings section, treating an absent or empty one as {}"""
        section = data.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(f"Settings section '{name}' must be a YAML dictionary")
        return section
