"""
funnelwind.toml configuration.

Example::

    [render]
    styleguide = "styleguide.json"
    brand_assets = "brand-assets.json"
    inject_css = true
    load_fonts = true
    document_title = "Launch Page"

    [logging]
    level = "INFO"
    file = "funnelwind.log"
    json = false
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from funnelwind.errors import ConfigError, ErrorContext

CONFIG_FILENAME = "funnelwind.toml"
LOG_LEVEL_ENV = "FUNNELWIND_LOG_LEVEL"


@dataclass
class RenderConfig:
    """Render defaults for the CLI."""

    styleguide: Path | None = None
    brand_assets: Path | None = None
    inject_css: bool = True
    load_fonts: bool = True
    document_title: str = "FunnelWind Page"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: Path | None = None
    json: bool = False


@dataclass
class FunnelWindConfig:
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table", ErrorContext(file=path, key=name))
    return section


def _path(value: Any, base: Path, *, key: str, path: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string path", ErrorContext(file=path, key=key))
    resolved = Path(value)
    return resolved if resolved.is_absolute() else base / resolved


def load_config(path: Path | None = None) -> FunnelWindConfig:
    """
    Load configuration from a funnelwind.toml file.

    Args:
        path: Config file; defaults to ./funnelwind.toml

    Returns:
        FunnelWindConfig. Defaults when the file does not exist.

    Raises:
        ConfigError: If the file is not valid TOML or a section is malformed
    """
    path = path or Path(CONFIG_FILENAME)
    config = FunnelWindConfig()

    if path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e

        base = path.parent
        render = _section(data, "render", path)
        log = _section(data, "logging", path)

        config.render = RenderConfig(
            styleguide=_path(render.get("styleguide"), base, key="render.styleguide", path=path),
            brand_assets=_path(
                render.get("brand_assets"), base, key="render.brand_assets", path=path
            ),
            inject_css=bool(render.get("inject_css", True)),
            load_fonts=bool(render.get("load_fonts", True)),
            document_title=str(render.get("document_title", "FunnelWind Page")),
        )
        config.logging = LoggingConfig(
            level=str(log.get("level", "WARNING")).upper(),
            file=_path(log.get("file"), base, key="logging.file", path=path),
            json=bool(log.get("json", False)),
        )

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        config.logging.level = env_level.upper()

    return config
