"""Ad Format Dimensions - Configuration Module.

This module provides configuration management with Fernet encryption
for the stored MongoDB connection string.
"""

from .config_manager import AppConfig, ConfigError, ConfigManager, MongoConfig

__all__ = ["AppConfig", "ConfigManager", "ConfigError", "MongoConfig"]
