"""
Render session context.

One RenderContext is created per render session and passed explicitly to
every renderer and pass. It owns the write-once stores and the session
memos; nothing here is process-global.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from funnelwind.styleguide.store import BrandAssetsStore, StyleguideStore

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """Session state shared by the two render passes."""

    styleguide: StyleguideStore = field(default_factory=StyleguideStore)
    brand_assets: BrandAssetsStore = field(default_factory=BrandAssetsStore)
    loaded_fonts: set[str] = field(default_factory=set)
    unknown_tags: set[str] = field(default_factory=set)

    def is_ref(self, value: str | None, category: str) -> bool:
        return self.styleguide.is_styleguide_ref(value, category)

    def brand_asset_url(self, asset_type: str | None) -> str | None:
        return self.brand_assets.asset_url(asset_type)

    def note_unknown_tag(self, tag: str) -> None:
        if tag not in self.unknown_tags:
            self.unknown_tags.add(tag)
            logger.debug(f"No renderer for <{tag}>, leaving it as raw markup")

    def reset(self) -> None:
        """Drop session memos (stores are kept)."""
        self.loaded_fonts.clear()
        self.unknown_tags.clear()
