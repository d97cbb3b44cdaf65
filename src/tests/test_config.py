"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

from flatwiki.config import TEMPLATES_DIR, Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.pages_dir == Path("pages")
            assert s.templates_dir == TEMPLATES_DIR
            assert s.app_title == "FlatWiki"
            assert s.host == "127.0.0.1"
            assert s.port == 8080
            assert s.debug is False
            assert s.reload_templates is True
            assert s.log_level == "INFO"

    def test_from_env(self):
        env = {
            "FLATWIKI_PAGES_DIR": "/tmp/wiki",
            "FLATWIKI_APP_TITLE": "MyWiki",
            "FLATWIKI_PORT": "9000",
            "FLATWIKI_DEBUG": "true",
            "FLATWIKI_RELOAD_TEMPLATES": "false",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.pages_dir == Path("/tmp/wiki")
            assert s.app_title == "MyWiki"
            assert s.port == 9000
            assert s.debug is True
            assert s.reload_templates is False

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("FLATWIKI_APP_TITLE=FromFile\n")
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=env_file)
            assert s.app_title == "FromFile"

    def test_templates_dir_is_bundled(self):
        assert (TEMPLATES_DIR / "_base.html").is_file()
