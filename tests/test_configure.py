"""Tests for the settings script.

Run with: pytest tests/test_configure.py -v
"""

from config import ConfigManager
from scripts.configure import main


class TestConfigureScript:
    """Tests for set, show and reset."""

    def test_set_then_resolve(self, tmp_path):
        code = main([
            "--config-dir", str(tmp_path),
            "set", "--uri", "mongodb://admin:pw@db:27017", "--database", "staging-hub",
        ])

        assert code == 0
        mongo = ConfigManager(tmp_path).resolve_mongo_config(environ={})
        assert mongo.uri.get_secret_value() == "mongodb://admin:pw@db:27017"
        assert mongo.database == "staging-hub"
        assert mongo.publications_collection == "publications"

    def test_set_keeps_stored_values(self, tmp_path):
        main(["--config-dir", str(tmp_path), "set", "--uri", "mongodb://db:27017", "--collection", "pubs"])
        main(["--config-dir", str(tmp_path), "set", "--log-level", "debug"])

        config = ConfigManager(tmp_path).load()
        assert config.mongodb.uri.get_secret_value() == "mongodb://db:27017"
        assert config.mongodb.publications_collection == "pubs"
        assert config.log_level == "DEBUG"

    def test_set_without_uri_fails_when_empty(self, tmp_path):
        assert main(["--config-dir", str(tmp_path), "set", "--database", "x"]) == 1
        assert not ConfigManager(tmp_path).is_configured()

    def test_show_masks_credentials(self, tmp_path, capsys):
        main(["--config-dir", str(tmp_path), "set", "--uri", "mongodb://admin:pw@db:27017"])
        capsys.readouterr()

        assert main(["--config-dir", str(tmp_path), "show"]) == 0
        output = capsys.readouterr().out
        assert "mongodb://***:***@db:27017" in output
        assert "admin:pw" not in output

    def test_show_without_config(self, tmp_path):
        assert main(["--config-dir", str(tmp_path), "show"]) == 1

    def test_reset(self, tmp_path):
        main(["--config-dir", str(tmp_path), "set", "--uri", "mongodb://db:27017"])
        assert main(["--config-dir", str(tmp_path), "reset"]) == 0
        assert not ConfigManager(tmp_path).is_configured()

    def test_no_command(self):
        assert main([]) == 1
