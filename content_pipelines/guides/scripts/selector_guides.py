#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Deterministic template selection and citation-marker rotation."""

from typing import List, Sequence, TypeVar

from .text_utils_guides import CITATION_MARKER_RX, tidy

T = TypeVar("T")

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
FALLBACK_CITATION_IDS = ("C1", "C2", "C3")

# Per-block offsets keep neighbouring blocks from starting on the same citation.
BLOCK_OFFSETS = {
    "overview": 0,
    "protocolPatterns": 1,
    "monitoringWindows": 2,
    "realWorldPatterns": 3,
    "escalationBoundaries": 4,
    "pacePrinciples": 5,
    "holdTriggers": 6,
    "resumeCriteria": 7,
    "trackingFocus": 8,
}


def stable_hash(key: str) -> int:
    """32-bit FNV-1a over the characters of ``key``; identical on every run and machine."""
    h = FNV_OFFSET_BASIS
    for ch in str(key or ""):
        h ^= ord(ch)
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return h


def pick(menu: Sequence[T], key: str) -> T:
    """Select one entry of ``menu`` for ``key``."""
    if not menu:
        raise ValueError("pick() needs a non-empty menu.")
    return menu[stable_hash(key) % len(menu)]


def add_citation(line: str, citation_id: str) -> str:
    """Append ``[citation_id]`` unless the line already carries a marker."""
    if CITATION_MARKER_RX.search(line):
        return line
    return f"{tidy(line)} [{citation_id}]".strip()


def rotate_citations(lines: Sequence[str], seed: int, available_ids: Sequence[str]) -> List[str]:
    """Give each line one marker, cycling through the guide's ids starting at ``seed``."""
    cycle = list(available_ids) or list(FALLBACK_CITATION_IDS)
    offset = seed % len(cycle)
    return [add_citation(line, cycle[(offset + index) % len(cycle)]) for index, line in enumerate(lines)]


def block_seed(slug: str, block: str) -> int:
    """Hash seed for one content block of one guide."""
    return stable_hash(slug) + BLOCK_OFFSETS.get(block, 0)
