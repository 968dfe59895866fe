"""Encrypted configuration management for Ad Format Dimensions.

This module provides secure storage and retrieval of the MongoDB
connection string using Fernet symmetric encryption. Configuration is
stored in the ~/.adformats/ directory. Environment variables
(MONGODB_URI, MONGODB_DB_NAME) override the stored values, which is how
the scripts are usually run in deployment shells.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from cryptography.fernet import Fernet, InvalidToken
from pydantic import BaseModel, SecretStr

logger = logging.getLogger(__name__)

ENV_MONGODB_URI = "MONGODB_URI"
ENV_MONGODB_DB_NAME = "MONGODB_DB_NAME"


class ConfigError(Exception):
    """Raised when configuration operations fail."""

    pass


class MongoConfig(BaseModel):
    """MongoDB connection configuration."""

    uri: SecretStr
    database: str = "chicago-hub"
    publications_collection: str = "publications"


class AppConfig(BaseModel):
    """Application configuration."""

    mongodb: Optional[MongoConfig] = None
    log_level: str = "INFO"


class ConfigManager:
    """Manages encrypted configuration storage.

    Configuration is stored in ~/.adformats/ with the encryption key
    kept in a separate file.

    Attributes:
        config_dir: Path to the configuration directory.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".adformats"
    CONFIG_FILE = "config.enc"
    KEY_FILE = ".key"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize the configuration manager.

        Args:
            config_dir: Custom configuration directory path.
        """
        self.config_dir = config_dir or self.DEFAULT_CONFIG_DIR
        self._fernet: Optional[Fernet] = None
        self._config: Optional[AppConfig] = None

    def _ensure_config_dir(self) -> None:
        """Create the configuration directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        os.chmod(self.config_dir, 0o700)

    @property
    def key_path(self) -> Path:
        """Path to the encryption key file."""
        return self.config_dir / self.KEY_FILE

    @property
    def config_path(self) -> Path:
        """Path to the encrypted configuration file."""
        return self.config_dir / self.CONFIG_FILE

    def _get_fernet(self) -> Fernet:
        """Get or create the Fernet cipher, generating a key on first use."""
        if self._fernet is None:
            self._ensure_config_dir()
            if self.key_path.exists():
                key = self.key_path.read_bytes()
            else:
                key = Fernet.generate_key()
                self.key_path.write_bytes(key)
                os.chmod(self.key_path, 0o600)
                logger.info(f"Generated new encryption key at {self.key_path}")
            self._fernet = Fernet(key)
        return self._fernet

    def _serialize_config(self, config: AppConfig) -> str:
        """Serialize configuration to JSON with secrets exposed."""
        data = config.model_dump()
        if config.mongodb is not None:
            data["mongodb"]["uri"] = config.mongodb.uri.get_secret_value()
        return json.dumps(data, indent=2)

    def save(self, config: AppConfig) -> None:
        """Save configuration to encrypted storage.

        Args:
            config: The configuration to save.

        Raises:
            ConfigError: If save operation fails.
        """
        try:
            encrypted = self._get_fernet().encrypt(self._serialize_config(config).encode("utf-8"))
            self.config_path.write_bytes(encrypted)
            os.chmod(self.config_path, 0o600)
            self._config = config
            logger.info(f"Configuration saved to {self.config_path}")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e

    def load(self) -> AppConfig:
        """Load configuration from encrypted storage.

        Returns:
            The loaded AppConfig.

        Raises:
            ConfigError: If configuration doesn't exist or can't be loaded.
        """
        if not self.config_path.exists():
            raise ConfigError(f"Configuration not found at {self.config_path}.")

        try:
            decrypted = self._get_fernet().decrypt(self.config_path.read_bytes())
        except InvalidToken as e:
            raise ConfigError("Failed to decrypt configuration. Invalid key.") from e

        try:
            self._config = AppConfig(**json.loads(decrypted.decode("utf-8")))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration format: {e}") from e
        return self._config

    def get_config(self) -> AppConfig:
        """Get the current configuration, loading it if necessary.

        A missing configuration file yields the defaults.
        """
        if self._config is None:
            self._config = self.load() if self.is_configured() else AppConfig()
        return self._config

    def update(self, **kwargs: Any) -> AppConfig:
        """Update specific configuration values and save.

        Args:
            **kwargs: Configuration fields to update.

        Returns:
            The updated AppConfig.
        """
        config_dict = self.get_config().model_dump()
        if config_dict.get("mongodb"):
            config_dict["mongodb"]["uri"] = self.get_config().mongodb.uri.get_secret_value()

        for key, value in kwargs.items():
            if key in config_dict:
                config_dict[key] = value

        new_config = AppConfig(**config_dict)
        self.save(new_config)
        return new_config

    def resolve_mongo_config(
        self,
        uri: Optional[str] = None,
        database: Optional[str] = None,
        collection: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> MongoConfig:
        """Build the effective MongoDB configuration.

        Precedence: explicit arguments, then environment variables, then
        the stored configuration.

        Raises:
            ConfigError: If no connection URI is available.
        """
        env = os.environ if environ is None else environ
        stored = self.get_config().mongodb

        resolved_uri = uri or env.get(ENV_MONGODB_URI)
        if not resolved_uri and stored is not None:
            resolved_uri = stored.uri.get_secret_value()
        if not resolved_uri:
            raise ConfigError(
                f"{ENV_MONGODB_URI} is not set and no stored configuration found "
                f"in {self.config_dir}"
            )

        defaults = stored or MongoConfig(uri=resolved_uri)
        return MongoConfig(
            uri=resolved_uri,
            database=database or env.get(ENV_MONGODB_DB_NAME) or defaults.database,
            publications_collection=collection or defaults.publications_collection,
        )

    def is_configured(self) -> bool:
        """Check if a configuration file exists."""
        return self.config_path.exists()

    def reset(self) -> None:
        """Delete the configuration file and encryption key."""
        if self.config_path.exists():
            self.config_path.unlink()
        if self.key_path.exists():
            self.key_path.unlink()
        self._config = None
        self._fernet = None
        logger.info("Configuration reset complete")
