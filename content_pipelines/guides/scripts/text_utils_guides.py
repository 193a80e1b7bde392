#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Shared text patterns and normalization helpers used by enrichment, linting and validation.

The linter and the validator both import their patterns from here; a rewrite
rule and the check that guards it must never drift apart.
"""

import re
from typing import Callable, Iterable, List, Optional

CITATION_MARKER_RX = re.compile(r"\[(C\d+)\]")
CITATION_ID_RX = re.compile(r"^C\d+$")
DATE_RX = re.compile(r"^\d{4}-\d{2}-\d{2}$")
URL_RX = re.compile(r"^https?://", re.I)

# Dosage-unit language, including bare unit words ("units", "ml").
DOSAGE_UNIT_RX = re.compile(r"\b(?:\d+(?:\.\d+)?\s*)?(?:mg|mcg|iu|ml|units?)\b", re.I)
WEEKLY_X_RX = re.compile(r"\bweekly\s*x\s*\d+", re.I)
PRESCRIPTIVE_RX = re.compile(r"\b(?:start at|increase to|take|inject|dose at|titrate to)\b", re.I)
SOCIAL_LINK_RX = re.compile(
    r"\bhttps?://\S*(?:reddit\.com|tiktok\.com|x\.com|twitter\.com|discord\.gg)\S*",
    re.I,
)

BANNED_PHRASES = (
    "appears in the supplier catalog list",
    "documented here for educational orientation",
    "copying vendor-table schedules",
    "commercial listings show multiple strengths and formats",
)

BANNED_PHRASE_REPLACEMENT = "is included here as an educational reference"
DOSAGE_REPLACEMENT = "structured amount"
WEEKLY_X_REPLACEMENT = "weekly review cadence"
PRESCRIPTIVE_REPLACEMENT = "review with your clinician"
SOCIAL_LINK_REPLACEMENT = "a community discussion (link removed)"

PAREN_CONTENT_RX = re.compile(r"\s*\(.*?\)\s*")


def normalize(value: object) -> str:
    """String-cast and strip; ``None`` becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def tidy(value: object) -> str:
    """Strip and collapse runs of whitespace."""
    return re.sub(r"\s{2,}", " ", normalize(value))


def collapse_whitespace(value: object) -> str:
    return re.sub(r"\s+", " ", normalize(value)).strip()


def strip_citations(value: object) -> str:
    return CITATION_MARKER_RX.sub("", normalize(value)).strip()


def to_title_token(token: str) -> str:
    """Title-case one slug token; short tokens are treated as acronyms."""
    clean = re.sub(r"[^a-zA-Z0-9+]", "", token)
    if not clean:
        return ""
    if clean[0].isdigit():
        return clean
    if len(clean) <= 4:
        return clean.upper()
    return clean[0].upper() + clean[1:].lower()


def slug_to_title(slug: str) -> str:
    """'bpc-157' -> 'BPC 157'; 'semaglutide' -> 'Semaglutide'."""
    tokens = [to_title_token(part) for part in str(slug or "").split("-") if part]
    return " ".join(token for token in tokens if token)


def unique(values: Iterable[object], clean: Optional[Callable[[object], str]] = None) -> List[str]:
    """Order-preserving de-duplication of cleaned, non-empty strings."""
    cleaner = clean or normalize
    result: List[str] = []
    for value in values:
        cleaned = cleaner(value)
        if not cleaned or cleaned in result:
            continue
        result.append(cleaned)
    return result


def as_list(value: object) -> list:
    """Treat anything that is not a list as empty."""
    return value if isinstance(value, list) else []


def as_dict(value: object) -> dict:
    return value if isinstance(value, dict) else {}


def signal_blob(*parts: object) -> str:
    """Lowercased space-joined text used for classification regexes."""
    flat: List[str] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            flat.extend(normalize(item) for item in part)
        else:
            flat.append(normalize(part))
    return " ".join(flat).lower()
