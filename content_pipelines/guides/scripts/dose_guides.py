#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re
from typing import Optional

from .text_utils_guides import PAREN_CONTENT_RX, collapse_whitespace, tidy

# Strength notation as it appears in display text (e.g. "10 mg", "2.5mL").
DOSE_NOTATION_RX = re.compile(r"\b\d+(?:\.\d+)?\s*(?:mg|mcg|iu|ml)\b", re.I)
# Slug-encoded strengths use "p" as the decimal point ("2p5mg").
SLUG_AMOUNT_RX = re.compile(r"(\d+(?:p\d+)?(?:mg|mcg|iu|ml))", re.I)
TEXT_AMOUNT_RX = re.compile(r"(\d+(?:\.\d+)?\s*(?:mg|mcg|iu|ml))", re.I)


def has_dose_notation(value: object) -> bool:
    """True when display text carries a numeric strength such as '10mg'."""
    return bool(DOSE_NOTATION_RX.search(str(value or "")))


def strip_dose_notation(value: object) -> str:
    """Drop strengths and parentheticals from a title: 'BPC-157 (10 mg vial)' -> 'BPC-157'."""
    text = DOSE_NOTATION_RX.sub("", tidy(value))
    text = re.sub(r"\s{2,}", " ", text)
    text = PAREN_CONTENT_RX.sub(" ", text)
    return collapse_whitespace(text)


def extract_component_amount(source: str) -> Optional[str]:
    """Amount token of one blend component: '2p5mg' -> '2.5mg', '10 mg' -> '10 mg'."""
    slug_match = SLUG_AMOUNT_RX.search(source)
    if slug_match and "p" in slug_match.group(1).lower():
        return slug_match.group(1).lower().replace("p", ".", 1)
    text_match = TEXT_AMOUNT_RX.search(source)
    if text_match:
        return text_match.group(1)
    return None


def strip_component_amount(source: str) -> str:
    """Remove both slug-form and text-form amount tokens from a component fragment."""
    text = SLUG_AMOUNT_RX.sub("", source)
    return TEXT_AMOUNT_RX.sub("", text)


__all__ = [
    "DOSE_NOTATION_RX",
    "SLUG_AMOUNT_RX",
    "TEXT_AMOUNT_RX",
    "has_dose_notation",
    "strip_dose_notation",
    "extract_component_amount",
    "strip_component_amount",
]
