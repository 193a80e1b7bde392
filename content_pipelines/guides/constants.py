#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared constants for the guide corpus pipeline."""

from __future__ import annotations

from pathlib import Path

PIPELINE_SLUG: str = "guides"
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]
CONTENT_DIR: Path = PROJECT_ROOT / "content"
GUIDES_JSON: Path = CONTENT_DIR / "guides.json"
UPDATES_JSON: Path = CONTENT_DIR / "updates.json"
PIPELINE_OUTPUTS_DIR: Path = PROJECT_ROOT / "outputs" / PIPELINE_SLUG
METRICS_HISTORY_CSV: Path = PIPELINE_OUTPUTS_DIR / "metrics_history.csv"
TAXONOMY_AUDIT_CSV: Path = PIPELINE_OUTPUTS_DIR / "taxonomy_audit.csv"

# Highest schemaVersion produced by the registered transforms.
CURRENT_SCHEMA_VERSION: int = 3

DISPLAY_TITLE_MAX_CHARS: int = 58

ALLOWED_STATUS = frozenset({
    "approved",
    "experimental",
    "discontinued",
    "nutrient",
    "support",
    "regional-approval",
})

CLASS_TAG_ORDER = (
    "Peptide",
    "GLP-1/GIP",
    "Hormone",
    "Injectable Compound",
    "Oral Compound",
    "Vitamin",
    "Mineral",
    "Supportive",
)
ALLOWED_CLASS_TAGS = frozenset(CLASS_TAG_ORDER)

STATUS_TAG_MAP = {
    "approved": "Approved",
    "experimental": "Experimental",
    "regional-approval": "Regional Approval",
    "discontinued": "Discontinued",
    "support": "Support/Nutrient",
    "nutrient": "Support/Nutrient",
}
ALLOWED_STATUS_TAGS = frozenset(STATUS_TAG_MAP.values())

ALLOWED_ROUTE_TAGS = frozenset({"Injectable", "Oral", "Mixed/Unknown"})
ALLOWED_FORMAT_TAGS = frozenset({"Single Compound", "Blend"})
ALLOWED_VOICE_PROFILES = ("clinical", "coach", "caution", "support")


ALLOWED_REGULATORY_CLASSIFICATIONS = frozenset({
    "approved_label",
    "regional_label",
    "off_label_context",
    "investigational",
    "unregulated_market",
    "nutrient_support",
})

ALLOWED_EVIDENCE_CONFIDENCE = ("high", "moderate", "low", "insufficient")

EVIDENCE_SECTION_KEYS = (
    "use_cases",
    "risk_screen",
    "dosing_framework",
    "dosing_pace",
    "dosing_hold",
    "dosing_resume",
    "dosing_tracking",
    "community_reports",
    "sources",
)

COMMUNITY_CONFIDENCE = "low"
COMMUNITY_SOURCE_POLICY = "summarized_nonlinked"

# Slugs that must exist in the corpus and carry handcrafted hero/subtitle copy.
PRIORITY_SLUGS = (
    "aod-9604", "b12", "beinaglutide", "bpc-157", "cagrisema", "cjc-1295", "cjc-dac", "danuglipron",
    "dulaglutide", "ecnoglutide", "efpeglenatide", "epithalon", "exenatide", "fragment-176-191",
    "ghrp-2", "ghrp-6", "glutathione", "hcg", "hexarelin", "insulin", "ipamorelin", "l-carnitine",
    "liraglutide", "lixisenatide", "mazdutide", "melanotan-2", "metformin", "mic", "nad-plus",
    "orforglipron", "pt-141", "retatrutide", "selank", "semaglutide", "sermorelin", "survodutide",
    "tb-500", "tesamorelin", "tirzepatide", "vitamin-d3", "cagrilintide", "ghk-cu", "kpv", "semax",
    "mots-c", "tesofensine", "kisspeptin-10", "gonadorelin",
    "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend",
    "klow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-plus-kpv-10mg-blend",
)

ACRONYM_GUIDES = {
    "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend": "GLOW",
    "klow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-plus-kpv-10mg-blend": "KLOW",
}

__all__ = [
    "PIPELINE_SLUG",
    "PROJECT_ROOT",
    "CONTENT_DIR",
    "GUIDES_JSON",
    "UPDATES_JSON",
    "PIPELINE_OUTPUTS_DIR",
    "METRICS_HISTORY_CSV",
    "TAXONOMY_AUDIT_CSV",
    "CURRENT_SCHEMA_VERSION",
    "DISPLAY_TITLE_MAX_CHARS",
    "ALLOWED_STATUS",
    "CLASS_TAG_ORDER",
    "ALLOWED_CLASS_TAGS",
    "STATUS_TAG_MAP",
    "ALLOWED_STATUS_TAGS",
    "ALLOWED_ROUTE_TAGS",
    "ALLOWED_FORMAT_TAGS",
    "ALLOWED_VOICE_PROFILES",
    "ALLOWED_REGULATORY_CLASSIFICATIONS",
    "ALLOWED_EVIDENCE_CONFIDENCE",
    "EVIDENCE_SECTION_KEYS",
    "COMMUNITY_CONFIDENCE",
    "COMMUNITY_SOURCE_POLICY",
    "PRIORITY_SLUGS",
    "ACRONYM_GUIDES",
]
