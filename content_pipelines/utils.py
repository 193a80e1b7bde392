#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Utility helpers shared across transform and runner entry points."""

from __future__ import annotations

import re

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def is_valid_slug(slug: object) -> bool:
    """True when ``slug`` is a lowercase, hyphen-delimited token string like 'bpc-157'."""
    return isinstance(slug, str) and bool(SLUG_RE.match(slug))


def slug_stage_name(stage: str) -> str:
    """Convert a CLI stage like 'migrate-legal-safe-depth' into a registry key ('legal_safe_depth')."""
    if not stage:
        raise ValueError("stage must be a non-empty string.")
    key = stage.strip().lower().replace("-", "_")
    for prefix in ("migrate_", "enrich_"):
        if key.startswith(prefix):
            key = key[len(prefix):]
    return STAGE_ALIASES.get(key, key)


STAGE_ALIASES = {
    "guides_schema": "enhanced_schema",
    "guide_depth": "guide_depth",
    "legal_safe_depth": "legal_safe_depth",
}


__all__ = ["SLUG_RE", "is_valid_slug", "slug_stage_name", "STAGE_ALIASES"]
