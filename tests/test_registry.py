#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Unit tests for stage-name mapping and the transform registry."""

from __future__ import annotations

import unittest

from content_pipelines import (
    BaseTransform,
    TRANSFORM_REGISTRY,
    get_transform,
    is_valid_slug,
    latest_schema_version,
    list_transforms,
    slug_stage_name,
)
from content_pipelines.registry import register_transform


class TransformRegistryTests(unittest.TestCase):
    def assertStage(self, stage: str, expected: str) -> None:
        self.assertEqual(slug_stage_name(stage), expected)

    def test_cli_names_map_to_registry_keys(self) -> None:
        self.assertStage("migrate-guides-schema", "enhanced_schema")
        self.assertStage("enrich-guide-depth", "guide_depth")
        self.assertStage("migrate-legal-safe-depth", "legal_safe_depth")
        self.assertStage("legal_safe_depth", "legal_safe_depth")
        self.assertStage("  Enrich-Guide-Depth ", "guide_depth")

    def test_empty_stage_rejected(self) -> None:
        with self.assertRaises(ValueError):
            slug_stage_name("")

    def test_transforms_ordered_by_version(self) -> None:
        self.assertEqual([t.schema_version for t in list_transforms()], [1, 2, 3])
        self.assertEqual(latest_schema_version(), 3)

    def test_unknown_transform(self) -> None:
        with self.assertRaises(KeyError):
            get_transform("compile_everything")

    def test_schema_version_must_be_unique(self) -> None:
        class Clash(BaseTransform):
            name = "clash"
            schema_version = 2

        with self.assertRaises(ValueError):
            register_transform(Clash)
        self.assertNotIn("clash", TRANSFORM_REGISTRY)

    def test_schema_version_must_be_positive(self) -> None:
        class Unversioned(BaseTransform):
            name = "unversioned"

        with self.assertRaises(ValueError):
            register_transform(Unversioned)

    def test_slug_shape(self) -> None:
        self.assertTrue(is_valid_slug("bpc-157"))
        self.assertFalse(is_valid_slug("BPC-157"))
        self.assertFalse(is_valid_slug("bpc--157"))
        self.assertFalse(is_valid_slug(157))


if __name__ == "__main__":
    unittest.main()
