#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""High-level transform registry that exposes the guide corpus enrichment stages."""

from .base import (
    BaseTransform,
    StageAborted,
    TransformContext,
    TransformOptions,
    TransformResult,
    current_schema_version,
)
from .registry import (
    TRANSFORM_REGISTRY,
    get_transform,
    latest_schema_version,
    list_transforms,
    pending_transforms,
)
from .utils import is_valid_slug, slug_stage_name

__all__ = [
    "BaseTransform",
    "StageAborted",
    "TransformContext",
    "TransformOptions",
    "TransformResult",
    "current_schema_version",
    "TRANSFORM_REGISTRY",
    "get_transform",
    "latest_schema_version",
    "list_transforms",
    "pending_transforms",
    "is_valid_slug",
    "slug_stage_name",
]
