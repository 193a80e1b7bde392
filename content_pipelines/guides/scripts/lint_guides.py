#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Content-safety linter.

Rewrites risky wording into neutral phrasing: banned boilerplate, direct
social/forum links, weekly-x schedules, dosage-unit notation and prescriptive
verbs. Every rewrite is a fixed point of itself, so cleaning an already clean
line returns it unchanged. Citation markers are stripped before rewriting; the
enrichment engine rotates them back in afterwards.
"""

from typing import Iterable, List

from .aho_guides import find_banned_phrases, replace_banned_phrases
from .text_utils_guides import (
    DOSAGE_REPLACEMENT,
    DOSAGE_UNIT_RX,
    PRESCRIPTIVE_REPLACEMENT,
    PRESCRIPTIVE_RX,
    SOCIAL_LINK_REPLACEMENT,
    SOCIAL_LINK_RX,
    WEEKLY_X_REPLACEMENT,
    WEEKLY_X_RX,
    collapse_whitespace,
    normalize,
    strip_citations,
    tidy,
    unique,
)

ISSUE_DOSAGE = "dosage-unit language"
ISSUE_PRESCRIPTIVE = "prescriptive dosing wording"


def remove_banned_phrases(value: object) -> str:
    """Light pass used on editorial copy: banned boilerplate only, markers kept."""
    return replace_banned_phrases(value)


def clean_line(value: object) -> str:
    """Full legal-safe rewrite of one line (markers removed)."""
    text = strip_citations(value)
    text = replace_banned_phrases(text)
    text = SOCIAL_LINK_RX.sub(SOCIAL_LINK_REPLACEMENT, text)
    text = WEEKLY_X_RX.sub(WEEKLY_X_REPLACEMENT, text)
    text = DOSAGE_UNIT_RX.sub(DOSAGE_REPLACEMENT, text)
    text = PRESCRIPTIVE_RX.sub(PRESCRIPTIVE_REPLACEMENT, text)
    return collapse_whitespace(text)


def clean_list(values: Iterable[object]) -> List[str]:
    """Clean, drop empties and de-duplicate while keeping first-seen order."""
    return unique(values, clean=clean_line)


def clean_editorial(values: Iterable[object]) -> List[str]:
    return unique(values, clean=lambda value: tidy(remove_banned_phrases(value)))


def legal_issues(line: object) -> List[str]:
    """Legal-lint problems in one line; empty when the line is clean."""
    text = normalize(line)
    issues: List[str] = []
    if DOSAGE_UNIT_RX.search(text) or WEEKLY_X_RX.search(text):
        issues.append(ISSUE_DOSAGE)
    if PRESCRIPTIVE_RX.search(text):
        issues.append(ISSUE_PRESCRIPTIVE)
    return issues


def has_social_link(text: object) -> bool:
    return bool(SOCIAL_LINK_RX.search(normalize(text)))


def first_banned_phrase(text: object) -> str:
    hits = find_banned_phrases(text)
    return hits[0] if hits else ""


__all__ = [
    "ISSUE_DOSAGE",
    "ISSUE_PRESCRIPTIVE",
    "remove_banned_phrases",
    "clean_line",
    "clean_list",
    "clean_editorial",
    "legal_issues",
    "has_social_link",
    "first_banned_phrase",
]
