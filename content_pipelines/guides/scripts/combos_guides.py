#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re
from typing import Any, Dict, List, Mapping, Optional

from .dose_guides import extract_component_amount, strip_component_amount
from .overrides_guides import COMPOSITION_OVERRIDES
from .text_utils_guides import normalize, to_title_token

# Compacted component spellings -> canonical display names.
COMPONENT_NAME_OVERRIDES = {
    "ghk-cu": "GHK-CU",
    "ghkcu": "GHK-CU",
    "tb500": "TB-500",
    "tb": "TB-500",
    "bpc157": "BPC-157",
    "bpc": "BPC-157",
    "kpv": "KPV",
    "mic": "MIC",
    "nad": "NAD+",
    "ipa": "Ipamorelin",
    "cjc": "CJC-1295",
    "semaglutide": "Semaglutide",
    "cagrilintide": "Cagrilintide",
    "retatrutide": "Retatrutide",
    "tesamorelin": "Tesamorelin",
    "selank": "Selank",
    "semax": "Semax",
    "mots": "MOTS-c",
}

BLEND_WORD_RX = re.compile(r"blend", re.I)
PLUS_WORD_RX = re.compile(r"\bplus\b", re.I)
SPACED_PLUS_RX = re.compile(r"\s\+\s")
TITLE_SPLIT_RX = re.compile(r"\s\+\s|\bplus\b", re.I)


def is_likely_blend(guide: Mapping[str, Any]) -> bool:
    """Blend-looking title ('blend', 'plus', ' + ') or a '-plus-' slug."""
    title = normalize(guide.get("title"))
    slug = normalize(guide.get("slug"))
    return bool(
        BLEND_WORD_RX.search(title)
        or "-plus-" in slug
        or PLUS_WORD_RX.search(title)
        or SPACED_PLUS_RX.search(title)
    )


def normalize_component_name(raw: str) -> str:
    compact = re.sub(r"[^a-z0-9+-]", "", raw.lower())
    if compact in COMPONENT_NAME_OVERRIDES:
        return COMPONENT_NAME_OVERRIDES[compact]
    if compact.replace("+", "") in COMPONENT_NAME_OVERRIDES:
        return COMPONENT_NAME_OVERRIDES[compact.replace("+", "")]
    tokens = [to_title_token(part) for part in re.split(r"[-\s]+", raw) if part]
    return " ".join(token for token in tokens if token)


def _candidate_parts(guide: Mapping[str, Any]) -> List[str]:
    slug = normalize(guide.get("slug"))
    if "-plus-" in slug:
        return re.sub(r"-blend$", "", slug).split("-plus-")
    title = normalize(guide.get("title"))
    if not TITLE_SPLIT_RX.search(title):
        return []
    cleaned = re.sub(r"\(.*?\)", " ", title)
    cleaned = re.sub(r"\bblend\b", " ", cleaned, flags=re.I)
    return [part.strip() for part in TITLE_SPLIT_RX.split(cleaned) if part and part.strip()]


def parse_composition(guide: Mapping[str, Any]) -> List[Dict[str, Optional[str]]]:
    """
    Component list ``[{name, amount}]`` for a guide.

    Override table first; otherwise only blend-looking guides are split, preferring
    the ``-plus-`` slug segments over the title. Duplicate (name, amount) pairs are dropped.
    """
    slug = normalize(guide.get("slug"))
    if slug in COMPOSITION_OVERRIDES:
        return [dict(part) for part in COMPOSITION_OVERRIDES[slug]]
    if not is_likely_blend(guide):
        return []

    composition: List[Dict[str, Optional[str]]] = []
    seen = set()
    for part in _candidate_parts(guide):
        source = re.sub(r"-blend$", "", part).replace("_", "-").strip()
        if not source:
            continue
        amount = extract_component_amount(source)
        name_raw = strip_component_amount(source)
        name_raw = re.sub(r"\bblend\b", "", name_raw, flags=re.I).replace("-", " ").strip()
        if not name_raw:
            continue
        name = normalize_component_name(name_raw)
        key = (name, amount or "")
        if key in seen:
            continue
        seen.add(key)
        composition.append({"name": name, "amount": amount})
    return composition


def compose_blend_title(composition: List[Mapping[str, Any]], max_chars: int) -> Optional[str]:
    """'A + B + C Blend', clipped to the first two components when too long."""
    if len(composition) <= 1:
        return None
    names = [normalize(part.get("name")) for part in composition]
    full = f"{' + '.join(names)} Blend"
    if len(full) <= max_chars:
        return full
    clipped = f"{names[0]} + {names[1]} Blend"
    if len(clipped) <= max_chars:
        return clipped
    return None


__all__ = [
    "COMPONENT_NAME_OVERRIDES",
    "is_likely_blend",
    "normalize_component_name",
    "parse_composition",
    "compose_blend_title",
]
