"""
Tests for project bootstrap.
"""

import pytest

from envkit.bootstrap import bootstrap
from envkit.exceptions import ConfigurationError, FileNotReadableError, MissingRequiredVariablesError
from envkit.store import MemoryStore, get_store


class TestBootstrap:
    """Tests for bootstrap()."""

    def test_loads_files_in_order(self, tmp_path, environ):
        (tmp_path / "envkit.yaml").write_text("files: [.env, .env.local]\nrequired: [A, B]\n")
        (tmp_path / ".env").write_text("A=from_env\n")
        (tmp_path / ".env.local").write_text("A=from_local\nB=${A}-b\n")
        store = MemoryStore()

        loaded = bootstrap(tmp_path, store=store, environ=environ)

        assert [d.path.name for d in loaded] == [".env", ".env.local"]
        assert store["A"] == "from_env"
        assert store["B"] == "from_env-b"
        assert loaded[1].discarded == ["A"]

    def test_default_config_loads_dotenv(self, tmp_path, environ):
        (tmp_path / ".env").write_text("PORT=8000\n")
        bootstrap(tmp_path, environ=environ)
        assert get_store()["PORT"] == 8000

    def test_env_overlay(self, tmp_path, store, environ):
        (tmp_path / "envkit.yaml").write_text("files: [.env]\n")
        (tmp_path / "envkit.test.yaml").write_text("files: [.env.test]\n")
        (tmp_path / ".env.test").write_text("MODE=test\n")
        bootstrap(tmp_path, "test", store=store, environ=environ)
        assert store["MODE"] == "test"

    def test_absolute_file_path(self, tmp_path, store, environ):
        other = tmp_path / "elsewhere.env"
        other.write_text("X=1\n")
        project = tmp_path / "project"
        project.mkdir()
        (project / "envkit.yaml").write_text(f"files: ['{other}']\n")
        bootstrap(project, store=store, environ=environ)
        assert store["X"] == 1

    def test_missing_required(self, tmp_path, store, environ):
        (tmp_path / "envkit.yaml").write_text("required: [A, MISSING]\n")
        (tmp_path / ".env").write_text("A=1\n")
        with pytest.raises(MissingRequiredVariablesError, match="MISSING"):
            bootstrap(tmp_path, store=store, environ=environ)
        # Values loaded before validation stay
        assert store["A"] == 1

    def test_missing_file(self, tmp_path, store, environ):
        with pytest.raises(FileNotReadableError):
            bootstrap(tmp_path, store=store, environ=environ)

    def test_invalid_config(self, tmp_path, store, environ):
        (tmp_path / "envkit.yaml").write_text("files: .env\n")
        with pytest.raises(ConfigurationError):
            bootstrap(tmp_path, store=store, environ=environ)
