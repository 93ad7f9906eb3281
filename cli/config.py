"""Configuration management for the OTA sender CLI."""

import json
import os
import shutil
from pathlib import Path
from typing import Optional

from common.constants import (
    CHUNK_SIZE_BYTES,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_TARGET_HOST,
    DEFAULT_TARGET_PORT,
    ENV_CONFIG_PATH,
    ENV_TARGET_HOST,
    ENV_TARGET_PORT,
    READ_ERRORS_STRICT,
)
from common.logging_config import get_logger
from transfer.settings import TransferSettings

logger = get_logger(__name__)


def default_config_path() -> Path:
    """
    Get config file location.

    Returns:
        OTA_CONFIG_PATH if set, else ~/.ota-sender/config.json
    """
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class Config:
    """Manages sender configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "target_host": DEFAULT_TARGET_HOST,
        "target_port": DEFAULT_TARGET_PORT,
        "chunk_size": CHUNK_SIZE_BYTES,
        "timeout": None,
        "read_errors": READ_ERRORS_STRICT,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.ota-sender/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level JSON value must be an object")
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (ValueError, OSError) as e:
                backup_path = self.config_path.with_suffix('.json.bak')
                logger.warning(f"Unreadable config {self.config_path} ({e}), backing up to {backup_path}")
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Config backup failed: {copy_error}")
                return self.DEFAULT_CONFIG.copy()

        config = self.DEFAULT_CONFIG.copy()
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                json.dump(config, f, indent=2)
            logger.info(f"Created default config at {self.config_path}")
        except OSError as e:
            logger.warning(f"Could not write default config {self.config_path}: {e}")
        return config

    def get_target_host(self) -> str:
        """
        Get target host; OTA_TARGET_HOST overrides the file.

        Returns:
            Host name or address
        """
        return os.environ.get(ENV_TARGET_HOST) or self.data.get('target_host', DEFAULT_TARGET_HOST)

    def get_target_port(self):
        """
        Get target port; OTA_TARGET_PORT overrides the file.

        Returns:
            Port as stored (validated when settings are built)
        """
        return os.environ.get(ENV_TARGET_PORT) or self.data.get('target_port', DEFAULT_TARGET_PORT)

    def get_settings(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        chunk_size: Optional[int] = None,
        timeout: Optional[float] = None,
        read_errors: Optional[str] = None,
    ) -> TransferSettings:
        """
        Build validated transfer settings, command-line values first.

        Args:
            host: Target host override
            port: Target port override
            chunk_size: Chunk size override
            timeout: Timeout override in seconds
            read_errors: 'strict' or 'lenient' override

        Returns:
            TransferSettings instance

        Raises:
            pydantic.ValidationError: If any merged value is out of range
        """
        return TransferSettings(
            host=host if host is not None else self.get_target_host(),
            port=port if port is not None else self.get_target_port(),
            chunk_size=chunk_size if chunk_size is not None else self.data.get('chunk_size', CHUNK_SIZE_BYTES),
            timeout=timeout if timeout is not None else self.data.get('timeout'),
            read_errors=read_errors if read_errors is not None else self.data.get('read_errors', READ_ERRORS_STRICT),
        )
