#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for the taxonomy rule table and the profile/voice/regulatory mappings."""

from __future__ import annotations

import pytest

from content_pipelines.guides.constants import CLASS_TAG_ORDER
from content_pipelines.guides.scripts.classify_guides import (
    GuideSignals,
    classify_profile,
    detect_taxonomy,
    determine_voice_profile,
    evaluate_rules,
    overall_confidence,
    regulatory_classification,
)
from content_pipelines.guides.scripts.combos_guides import parse_composition


def _guide(slug: str, title: str, category: str, status: str) -> dict:
    return {"slug": slug, "title": title, "category": category, "status": status, "aliases": []}


def test_glp_peptide_is_injectable() -> None:
    guide = _guide("semaglutide", "Semaglutide", "GLP-1 Agonist", "approved")
    taxonomy = detect_taxonomy(guide, parse_composition(guide))
    assert taxonomy["classTags"] == ["Peptide", "GLP-1/GIP", "Injectable Compound"]
    assert taxonomy["routeTags"] == ["Injectable"]
    assert taxonomy["statusTags"] == ["Approved"]
    assert taxonomy["formatTags"] == ["Single Compound"]
    assert taxonomy["isPeptideLike"] is True


def test_oral_hint_slug_routes_oral() -> None:
    guide = _guide("metformin", "Metformin", "Metabolic", "approved")
    taxonomy = detect_taxonomy(guide, [])
    assert taxonomy["classTags"] == ["Oral Compound"]
    assert taxonomy["routeTags"] == ["Oral"]
    assert classify_profile(taxonomy, "approved") == "oral"


def test_oral_incretin_reads_glp_flag() -> None:
    guide = _guide("orforglipron", "Orforglipron", "Oral GLP-1 Agonist", "experimental")
    signals = GuideSignals.from_guide(guide, [])
    flags = evaluate_rules(signals)
    assert flags["glp"] and flags["oral"]
    assert not flags["injectable"]


def test_mineral_is_supportive_nutrient() -> None:
    guide = _guide("magnesium", "Magnesium Glycinate", "Mineral", "nutrient")
    taxonomy = detect_taxonomy(guide, [])
    assert taxonomy["classTags"] == ["Mineral", "Supportive"]
    assert taxonomy["routeTags"] == ["Mixed/Unknown"]
    assert taxonomy["statusTags"] == ["Support/Nutrient"]
    assert classify_profile(taxonomy, "nutrient") == "nutrient"
    assert determine_voice_profile("nutrient", taxonomy) == "support"


def test_unknown_guide_defaults_to_supportive() -> None:
    guide = _guide("mystery-compound", "Mystery Compound", "Misc", "approved")
    taxonomy = detect_taxonomy(guide, [])
    assert taxonomy["classTags"] == ["Supportive"]
    assert classify_profile(taxonomy) == "supportive"


def test_class_tags_follow_enum_order() -> None:
    guide = _guide("hcg", "hCG", "Hormone", "approved")
    tags = detect_taxonomy(guide, [])["classTags"]
    assert tags == [tag for tag in CLASS_TAG_ORDER if tag in tags]


def test_blend_format_follows_composition_length() -> None:
    guide = _guide(
        "cagrilintide-5mg-plus-semaglutide-5mg-blend",
        "Cagrilintide 5mg + Semaglutide 5mg Blend",
        "Research Blend",
        "experimental",
    )
    composition = parse_composition(guide)
    assert len(composition) == 2
    assert detect_taxonomy(guide, composition)["formatTags"] == ["Blend"]
    assert detect_taxonomy(guide, composition[:1])["formatTags"] == ["Single Compound"]


def test_classification_is_deterministic() -> None:
    guide = _guide("bpc-157", "BPC-157", "Research Peptide", "experimental")
    first = detect_taxonomy(guide, parse_composition(guide))
    second = detect_taxonomy(dict(guide), parse_composition(guide))
    assert first == second


@pytest.mark.parametrize(
    "status, category, expected",
    [
        ("approved", "GLP-1 Agonist", "approved_label"),
        ("regional-approval", "Peptide", "regional_label"),
        ("nutrient", "Vitamin", "nutrient_support"),
        ("discontinued", "Peptide", "off_label_context"),
        ("experimental", "Research Peptide", "unregulated_market"),
        ("experimental", "Triple Agonist", "investigational"),
        ("support", "Antioxidant Support", "off_label_context"),
    ],
)
def test_regulatory_classification(status: str, category: str, expected: str) -> None:
    assert regulatory_classification(status, category) == expected


def test_overall_confidence_tiers() -> None:
    assert overall_confidence("approved_label") == "moderate"
    assert overall_confidence("nutrient_support") == "moderate"
    assert overall_confidence("unregulated_market") == "insufficient"
    assert overall_confidence("investigational") == "low"


def test_caution_voice_for_experimental_status() -> None:
    taxonomy = {"classTags": ["GLP-1/GIP"]}
    assert determine_voice_profile("experimental", taxonomy) == "caution"
    assert determine_voice_profile("approved", taxonomy) == "clinical"
    assert determine_voice_profile("approved", {"classTags": ["Peptide"]}) == "coach"
