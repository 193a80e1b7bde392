#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared fixtures: a seed corpus covering every priority slug plus a few unprioritized guides."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Dict, List

import pytest

from content_pipelines import get_transform

GLOW_SLUG = "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend"
KLOW_SLUG = "klow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-plus-kpv-10mg-blend"
BLEND_SLUG = "cagrilintide-5mg-plus-semaglutide-5mg-blend"

# slug -> (title, category, status)
SEED_ROWS = {
    "aod-9604": ("AOD-9604", "Research Peptide", "experimental"),
    "b12": ("Vitamin B12 (Methylcobalamin)", "Vitamin", "nutrient"),
    "beinaglutide": ("Beinaglutide", "GLP-1 Agonist", "regional-approval"),
    "bpc-157": ("BPC-157", "Research Peptide", "experimental"),
    "cagrisema": ("CagriSema", "Incretin Combination", "experimental"),
    "cjc-1295": ("CJC-1295", "Research Peptide", "experimental"),
    "cjc-dac": ("CJC-1295 with DAC", "Research Peptide", "experimental"),
    "danuglipron": ("Danuglipron", "Oral GLP-1 Agonist", "discontinued"),
    "dulaglutide": ("Dulaglutide", "GLP-1 Agonist", "approved"),
    "ecnoglutide": ("Ecnoglutide", "GLP-1 Agonist", "experimental"),
    "efpeglenatide": ("Efpeglenatide", "GLP-1 Agonist", "experimental"),
    "epithalon": ("Epithalon", "Research Peptide", "experimental"),
    "exenatide": ("Exenatide", "GLP-1 Agonist", "approved"),
    "fragment-176-191": ("Fragment 176-191", "Research Peptide", "experimental"),
    "ghrp-2": ("GHRP-2", "Research Peptide", "experimental"),
    "ghrp-6": ("GHRP-6", "Research Peptide", "experimental"),
    "glutathione": ("Glutathione", "Antioxidant Support", "support"),
    "hcg": ("hCG (Human Chorionic Gonadotropin)", "Hormone", "approved"),
    "hexarelin": ("Hexarelin", "Research Peptide", "experimental"),
    "insulin": ("Insulin", "Hormone", "approved"),
    "ipamorelin": ("Ipamorelin", "Research Peptide", "experimental"),
    "l-carnitine": ("L-Carnitine", "Amino Acid Support", "support"),
    "liraglutide": ("Liraglutide", "GLP-1 Agonist", "approved"),
    "lixisenatide": ("Lixisenatide", "GLP-1 Agonist", "approved"),
    "mazdutide": ("Mazdutide", "GLP-1/Glucagon Agonist", "experimental"),
    "melanotan-2": ("Melanotan 2", "Research Peptide", "experimental"),
    "metformin": ("Metformin 500 mg", "Metabolic", "approved"),
    "mic": ("MIC Injection", "Weight Loss Blend", "support"),
    "nad-plus": ("NAD+", "Coenzyme Support", "support"),
    "orforglipron": ("Orforglipron", "Oral GLP-1 Agonist", "experimental"),
    "pt-141": ("PT-141 (Bremelanotide)", "Peptide", "approved"),
    "retatrutide": ("Retatrutide", "Triple Agonist", "experimental"),
    "selank": ("Selank", "Research Peptide", "experimental"),
    "semaglutide": ("Semaglutide", "GLP-1 Agonist", "approved"),
    "sermorelin": ("Sermorelin", "Peptide", "discontinued"),
    "survodutide": ("Survodutide", "GLP-1/Glucagon Agonist", "experimental"),
    "tb-500": ("TB-500", "Research Peptide", "experimental"),
    "tesamorelin": ("Tesamorelin", "Peptide", "approved"),
    "tirzepatide": ("Tirzepatide", "GIP/GLP-1 Agonist", "approved"),
    "vitamin-d3": ("Vitamin D3 5000 IU", "Vitamin", "nutrient"),
    "cagrilintide": ("Cagrilintide", "Amylin Analog", "experimental"),
    "ghk-cu": ("GHK-Cu", "Research Peptide", "experimental"),
    "kpv": ("KPV", "Research Peptide", "experimental"),
    "semax": ("Semax", "Research Peptide", "regional-approval"),
    "mots-c": ("MOTS-c", "Research Peptide", "experimental"),
    "tesofensine": ("Tesofensine", "Oral Compound", "experimental"),
    "kisspeptin-10": ("Kisspeptin-10", "Research Peptide", "experimental"),
    "gonadorelin": ("Gonadorelin", "Hormone", "approved"),
    GLOW_SLUG: ("GLOW (GHK-Cu 50mg + TB-500 10mg + BPC-157 10mg) Blend", "Research Blend", "experimental"),
    KLOW_SLUG: (
        "KLOW (GHK-Cu 50mg + TB-500 10mg + BPC-157 10mg + KPV 10mg) Blend",
        "Research Blend",
        "experimental",
    ),
    "magnesium": ("Magnesium Glycinate", "Mineral", "nutrient"),
    BLEND_SLUG: ("Cagrilintide 5mg + Semaglutide 5mg Blend", "Research Blend", "experimental"),
    "ss-31": ("SS-31 (Elamipretide)", "Research Peptide", "experimental"),
}


def make_citations(count: int = 4) -> List[Dict[str, str]]:
    return [
        {
            "id": f"C{index}",
            "title": f"Reference document {index}",
            "url": f"https://example.org/reference/{index}",
            "sourceType": "label" if index == 1 else "review",
            "publisher": "Example Publisher",
            "publishedDate": "2023-05-01",
            "accessedDate": "2024-01-15",
        }
        for index in range(1, count + 1)
    ]


def make_seed_guide(slug: str, title: str, category: str, status: str) -> Dict[str, object]:
    return {
        "slug": slug,
        "title": title,
        "aliases": [],
        "category": category,
        "status": status,
        "statusLabel": status.replace("-", " ").title(),
        "metaDescription": f"{title} overview for structured tracking and clinician conversations.",
        "citations": make_citations(),
        "lastReviewed": "2024-02-01",
        "version": "1.0.0",
    }


def build_seed_corpus() -> List[Dict[str, object]]:
    return [make_seed_guide(slug, *row) for slug, row in SEED_ROWS.items()]


def enrich_corpus(guides: List[Dict[str, object]]) -> List[Dict[str, object]]:
    for name in ("enhanced_schema", "guide_depth", "legal_safe_depth"):
        get_transform(name).run(guides)
    return guides


_ENRICHED_CACHE: List[Dict[str, object]] = []


@pytest.fixture
def seed_corpus() -> List[Dict[str, object]]:
    return build_seed_corpus()


@pytest.fixture
def enriched_corpus() -> List[Dict[str, object]]:
    """Fully migrated corpus; each test receives its own copy."""
    if not _ENRICHED_CACHE:
        _ENRICHED_CACHE.extend(enrich_corpus(build_seed_corpus()))
    return copy.deepcopy(_ENRICHED_CACHE)


@pytest.fixture
def guide_by_slug():
    def _find(guides: List[Dict[str, object]], slug: str) -> Dict[str, object]:
        for guide in guides:
            if guide.get("slug") == slug:
                return guide
        raise KeyError(slug)

    return _find


@pytest.fixture
def seed_file(tmp_path: Path, seed_corpus: List[Dict[str, object]]) -> Path:
    path = tmp_path / "guides.json"
    path.write_text(json.dumps(seed_corpus, indent=2) + "\n", encoding="utf-8")
    return path
