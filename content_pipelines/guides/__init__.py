#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Guide corpus enrichment and validation."""

from .pipeline import EnhancedSchemaTransform, GuideDepthTransform, LegalSafeDepthTransform

__all__ = ["EnhancedSchemaTransform", "GuideDepthTransform", "LegalSafeDepthTransform"]
