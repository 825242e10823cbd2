"""Tests for funnelwind.toml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from funnelwind.config import CONFIG_FILENAME, LOG_LEVEL_ENV, FunnelWindConfig, load_config
from funnelwind.errors import ConfigError


@pytest.fixture(autouse=True)
def _no_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.toml")
        assert config == FunnelWindConfig()
        assert config.render.inject_css
        assert config.logging.level == "WARNING"

    def test_full_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / CONFIG_FILENAME,
            "\n".join(
                [
                    "[render]",
                    'styleguide = "design/styleguide.json"',
                    'brand_assets = "/srv/assets.json"',
                    "inject_css = false",
                    'document_title = "Launch Page"',
                    "",
                    "[logging]",
                    'level = "debug"',
                    'file = "logs/funnelwind.log"',
                    "json = true",
                ]
            ),
        )
        config = load_config(path)
        assert config.render.styleguide == tmp_path / "design" / "styleguide.json"
        assert config.render.brand_assets == Path("/srv/assets.json")
        assert config.render.inject_css is False
        assert config.render.load_fonts is True
        assert config.render.document_title == "Launch Page"
        assert config.logging.level == "DEBUG"
        assert config.logging.file == tmp_path / "logs" / "funnelwind.log"
        assert config.logging.json is True

    def test_default_path_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write(tmp_path / CONFIG_FILENAME, '[render]\ndocument_title = "From cwd"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().render.document_title == "From cwd"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / CONFIG_FILENAME, "[render\n")
        with pytest.raises(ConfigError, match="Invalid TOML") as exc_info:
            load_config(path)
        assert exc_info.value.context is not None
        assert exc_info.value.context.file == path

    def test_section_must_be_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path / CONFIG_FILENAME, "render = 1\n")
        with pytest.raises(ConfigError, match=r"\[render\] must be a table"):
            load_config(path)

    def test_path_must_be_string(self, tmp_path: Path) -> None:
        path = _write(tmp_path / CONFIG_FILENAME, "[render]\nstyleguide = 5\n")
        with pytest.raises(ConfigError, match="render.styleguide must be a string path") as exc_info:
            load_config(path)
        assert "(render.styleguide)" in str(exc_info.value)


class TestLogLevelOverride:
    def test_env_overrides_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert load_config(tmp_path / "absent.toml").logging.level == "INFO"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _write(tmp_path / CONFIG_FILENAME, '[logging]\nlevel = "ERROR"\n')
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert load_config(path).logging.level == "DEBUG"
