"""
Styleguide and brand-asset loading.

Payloads come from JSON strings (embedded script blocks), already-decoded
mappings, or files (.json, .yaml/.yml). In the default lenient mode any
malformed payload is logged and treated as "not loaded" so rendering carries
on with the preset tables only. strict=True raises StyleguideError instead.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from funnelwind.errors import ErrorContext, StyleguideError
from funnelwind.specs.styleguide import BRAND_ASSET_TYPES, BrandAssetsSpec, StyleguideSpec

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _fail(message: str, *, strict: bool, path: Path | None = None) -> None:
    if strict:
        context = ErrorContext(file=path) if path else None
        raise StyleguideError(message, context)
    logger.warning(message)


def _decode(payload: str | Mapping[str, Any], *, what: str, strict: bool) -> Any:
    if not isinstance(payload, str):
        return payload
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        _fail(f"Failed to parse {what} data: {e}", strict=strict)
        return None


def _validate(
    model: type[BaseModel], data: Any, *, what: str, strict: bool
) -> BaseModel | None:
    if not isinstance(data, Mapping):
        _fail(f"Invalid {what} data: expected an object", strict=strict)
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        _fail(f"Invalid {what} schema: {e}", strict=strict)
        return None


def parse_styleguide(
    payload: str | Mapping[str, Any] | None, *, strict: bool = False
) -> StyleguideSpec | None:
    """Parse a styleguide from a JSON string or mapping.

    Args:
        payload: JSON text or decoded mapping. None or blank means no styleguide.
        strict: Raise StyleguideError on malformed input instead of degrading.

    Returns:
        StyleguideSpec, or None when no usable styleguide was supplied.
    """
    if payload is None or (isinstance(payload, str) and not payload.strip()):
        return None
    data = _decode(payload, what="styleguide", strict=strict)
    if data is None:
        return None
    spec = _validate(StyleguideSpec, data, what="styleguide", strict=strict)
    return spec if isinstance(spec, StyleguideSpec) else None


def parse_brand_assets(
    payload: str | Mapping[str, Any] | None, *, strict: bool = False
) -> BrandAssetsSpec | None:
    """Parse brand assets (asset type -> URL list) from JSON text or a mapping."""
    if payload is None or (isinstance(payload, str) and not payload.strip()):
        return None
    data = _decode(payload, what="brand assets", strict=strict)
    if data is None:
        return None
    if isinstance(data, Mapping) and "assets" not in data:
        data = {"assets": dict(data)}
    spec = _validate(BrandAssetsSpec, data, what="brand assets", strict=strict)
    if not isinstance(spec, BrandAssetsSpec):
        return None
    for asset_type in spec.assets:
        if asset_type not in BRAND_ASSET_TYPES:
            logger.debug(f"Unrecognised brand asset type {asset_type!r}")
    return spec


def _read_file(path: Path, *, what: str, strict: bool) -> Any:
    if not path.exists():
        _fail(f"{what.capitalize()} file not found: {path}", strict=strict, path=path)
        return None
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            _fail(f"Invalid YAML in {path}: {e}", strict=strict, path=path)
            return None
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {path}: {e}", strict=strict, path=path)
        return None


def load_styleguide_file(path: Path, *, strict: bool = False) -> StyleguideSpec | None:
    """Load a styleguide from a .json or .yaml file."""
    data = _read_file(path, what="styleguide", strict=strict)
    if data is None:
        return None
    try:
        return parse_styleguide(data, strict=strict)
    except StyleguideError as e:
        raise StyleguideError(e.message, ErrorContext(file=path)) from e


def load_brand_assets_file(path: Path, *, strict: bool = False) -> BrandAssetsSpec | None:
    """Load brand assets from a .json or .yaml file."""
    data = _read_file(path, what="brand assets", strict=strict)
    if data is None:
        return None
    try:
        return parse_brand_assets(data, strict=strict)
    except StyleguideError as e:
        raise StyleguideError(e.message, ErrorContext(file=path)) from e
