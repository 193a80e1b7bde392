#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Common dataclasses and base class used by schema-version transforms."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, MutableMapping, Optional

Guide = MutableMapping[str, Any]


class StageAborted(RuntimeError):
    """Raised when a stage cannot start because a required static table is incomplete."""

    def __init__(self, heading: str, problems: List[str]) -> None:
        super().__init__(heading)
        self.heading = heading
        self.problems = list(problems)


@dataclass(frozen=True)
class TransformContext:
    """Resolved corpus paths that transforms and runners can rely on."""

    guides_json: Path
    outputs_dir: Path
    updates_json: Optional[Path] = None


@dataclass
class TransformOptions:
    """Optional switches controlling transform behaviour."""

    force: bool = False
    verbose: bool = True


@dataclass
class TransformResult:
    """Unified return object for a transform applied across the corpus."""

    name: str
    schema_version: int
    processed: int
    skipped: int = 0


class BaseTransform:
    """Schema-version transform contract.

    A transform with ``schema_version == n`` derives the fields introduced at
    version ``n``. It stamps ``schemaVersion = n`` on a guide only when that
    guide already sits at ``n - 1`` or later, so the stamp always records the
    highest contiguous transform applied and a later ``run_pending`` still
    fills in any earlier gap.
    """

    name: str = ""
    schema_version: int = 0
    display_name: str = ""
    description: str = ""
    preflight_heading: str = ""

    def preflight(self) -> List[str]:
        """Return every missing precondition; an empty list means the transform may run."""
        return []

    def apply(self, guide: Guide) -> Guide:
        """Derive this version's fields on ``guide`` in place and return it."""
        raise NotImplementedError

    def finalize(self, guides: List[Guide]) -> List[Guide]:
        """Optional corpus-level step executed after every guide was transformed."""
        return guides

    def needs(self, guide: Guide) -> bool:
        return current_schema_version(guide) < self.schema_version

    def stamp(self, guide: Guide) -> None:
        current = current_schema_version(guide)
        if current >= self.schema_version - 1:
            guide["schemaVersion"] = max(current, self.schema_version)
        else:
            guide["schemaVersion"] = current

    def run(
        self,
        guides: List[Guide],
        options: Optional[TransformOptions] = None,
    ) -> TransformResult:
        """Apply the transform to every guide (``force``) or only to guides that need it."""
        opts = options or TransformOptions(force=True)
        problems = self.preflight()
        if problems:
            heading = self.preflight_heading or f"{self.display_name or self.name} preconditions are incomplete:"
            raise StageAborted(heading, problems)
        for index, guide in enumerate(guides):
            if not isinstance(guide, dict):
                raise ValueError(f"guide[{index}] must be an object, got {type(guide).__name__}.")
        processed = 0
        skipped = 0
        for guide in guides:
            if not opts.force and not self.needs(guide):
                skipped += 1
                continue
            self.apply(guide)
            self.stamp(guide)
            processed += 1
        guides[:] = self.finalize(guides)
        return TransformResult(
            name=self.name,
            schema_version=self.schema_version,
            processed=processed,
            skipped=skipped,
        )


def current_schema_version(guide: Guide) -> int:
    """Read a guide's schemaVersion, treating missing or malformed values as 0."""
    value = guide.get("schemaVersion", 0)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


__all__ = [
    "BaseTransform",
    "Guide",
    "StageAborted",
    "TransformContext",
    "TransformOptions",
    "TransformResult",
    "current_schema_version",
]
