#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Schema-version transforms for the guide corpus."""

from __future__ import annotations

from typing import List

from ..base import BaseTransform, Guide
from ..registry import register_transform
from .scripts.enrich_guides import enrich_enhanced_schema, enrich_guide_depth, enrich_legal_safe_depth
from .scripts.overrides_guides import missing_handcrafted
from .scripts.text_utils_guides import normalize


@register_transform
class EnhancedSchemaTransform(BaseTransform):
    """Version 1: display title, composition, taxonomy, voice, hero copy and base dosing section."""

    name = "enhanced_schema"
    schema_version = 1
    display_name = "migrate-guides-schema"
    description = "Derives the enhanced display schema from seed guide fields."
    preflight_heading = "Missing handcrafted priority entries:"

    def preflight(self) -> List[str]:
        return missing_handcrafted()

    def apply(self, guide: Guide) -> Guide:
        return enrich_enhanced_schema(guide)

    def finalize(self, guides: List[Guide]) -> List[Guide]:
        return sorted(guides, key=lambda guide: normalize(guide.get("slug")))


@register_transform
class GuideDepthTransform(BaseTransform):
    """Version 2: use cases, candidate and avoidance profiles, side effects, real-world patterns."""

    name = "guide_depth"
    schema_version = 2
    display_name = "enrich-guide-depth"
    description = "Adds practical depth blocks from the guide's template profile."

    def apply(self, guide: Guide) -> Guide:
        return enrich_guide_depth(guide)


@register_transform
class LegalSafeDepthTransform(BaseTransform):
    """Version 3: regulatory context, dosing framework, risk screen, evidence and community blocks."""

    name = "legal_safe_depth"
    schema_version = 3
    display_name = "migrate-legal-safe-depth"
    description = "Adds legal-safe framing and evidence metadata, linting every generated line."

    def apply(self, guide: Guide) -> Guide:
        return enrich_legal_safe_depth(guide)


__all__ = ["EnhancedSchemaTransform", "GuideDepthTransform", "LegalSafeDepthTransform"]
