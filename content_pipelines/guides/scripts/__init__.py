#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Exports convenience aliases for guide pipeline modules."""

from .enrich_guides import enrich_enhanced_schema, enrich_guide_depth, enrich_legal_safe_depth
from .lint_guides import clean_line, clean_list, legal_issues
from .validate_guides import validate_guide, validate_guides

__all__ = [
    "enrich_enhanced_schema",
    "enrich_guide_depth",
    "enrich_legal_safe_depth",
    "clean_line",
    "clean_list",
    "legal_issues",
    "validate_guide",
    "validate_guides",
]
