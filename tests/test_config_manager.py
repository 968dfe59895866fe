"""Tests for encrypted configuration and MongoDB settings resolution.

Run with: pytest tests/test_config_manager.py -v
"""

import pytest

from config import AppConfig, ConfigError, ConfigManager, MongoConfig


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(tmp_path / "config")


def stored_config():
    return AppConfig(
        mongodb=MongoConfig(
            uri="mongodb://admin:pw@db.internal:27017",
            database="staging-hub",
            publications_collection="pubs",
        ),
        log_level="DEBUG",
    )


class TestConfigStorage:
    """Tests for save, load and reset."""

    def test_missing_config_gives_defaults(self, manager):
        config = manager.get_config()
        assert config.mongodb is None
        assert config.log_level == "INFO"
        assert not manager.is_configured()

    def test_load_without_file_raises(self, manager):
        with pytest.raises(ConfigError, match="not found"):
            manager.load()

    def test_save_and_load_roundtrip(self, manager):
        manager.save(stored_config())

        loaded = ConfigManager(manager.config_dir).load()

        assert loaded.mongodb.uri.get_secret_value() == "mongodb://admin:pw@db.internal:27017"
        assert loaded.mongodb.database == "staging-hub"
        assert loaded.log_level == "DEBUG"

    def test_saved_file_is_encrypted(self, manager):
        manager.save(stored_config())
        raw = manager.config_path.read_bytes()
        assert b"admin:pw" not in raw
        assert b"staging-hub" not in raw

    def test_wrong_key_raises(self, manager):
        manager.save(stored_config())
        manager.key_path.write_bytes(b"A" * 43 + b"=")

        with pytest.raises(ConfigError, match="Invalid key"):
            ConfigManager(manager.config_dir).load()

    def test_update_keeps_secret(self, manager):
        manager.save(stored_config())

        updated = ConfigManager(manager.config_dir).update(log_level="WARNING")

        assert updated.log_level == "WARNING"
        assert updated.mongodb.uri.get_secret_value() == "mongodb://admin:pw@db.internal:27017"

    def test_reset(self, manager):
        manager.save(stored_config())
        manager.reset()
        assert not manager.config_path.exists()
        assert not manager.key_path.exists()
        assert manager.get_config().mongodb is None


class TestResolveMongoConfig:
    """Tests for argument, environment and stored precedence."""

    def test_environment_only(self, manager):
        mongo = manager.resolve_mongo_config(
            environ={"MONGODB_URI": "mongodb://env:27017", "MONGODB_DB_NAME": "env-db"}
        )
        assert mongo.uri.get_secret_value() == "mongodb://env:27017"
        assert mongo.database == "env-db"
        assert mongo.publications_collection == "publications"

    def test_default_database_name(self, manager):
        mongo = manager.resolve_mongo_config(environ={"MONGODB_URI": "mongodb://env:27017"})
        assert mongo.database == "chicago-hub"

    def test_arguments_win(self, manager):
        manager.save(stored_config())
        mongo = manager.resolve_mongo_config(
            uri="mongodb://cli:27017",
            database="cli-db",
            collection="cli-pubs",
            environ={"MONGODB_URI": "mongodb://env:27017", "MONGODB_DB_NAME": "env-db"},
        )
        assert mongo.uri.get_secret_value() == "mongodb://cli:27017"
        assert mongo.database == "cli-db"
        assert mongo.publications_collection == "cli-pubs"

    def test_stored_config_fallback(self, manager):
        manager.save(stored_config())
        mongo = ConfigManager(manager.config_dir).resolve_mongo_config(environ={})
        assert mongo.uri.get_secret_value() == "mongodb://admin:pw@db.internal:27017"
        assert mongo.database == "staging-hub"
        assert mongo.publications_collection == "pubs"

    def test_missing_uri_raises(self, manager):
        with pytest.raises(ConfigError, match="MONGODB_URI"):
            manager.resolve_mongo_config(environ={})
