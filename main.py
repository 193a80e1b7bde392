#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
main.py: stage-aware loader around the guide enrichment transforms.

Exports:
- validate_guides (re-export from content_pipelines.guides.scripts)
- run_stage(stage, guides_path, outputs_dir, force) -> exit code
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from content_pipelines import TRANSFORM_REGISTRY, slug_stage_name
from content_pipelines.guides.scripts import validate_guides  # re-exported for convenience
from content_pipelines.guides.scripts.runners import build_context, run_stage_cli, run_validation_cli

VALIDATE_STAGES = ("validate", "validate-guides", "validate_guides")


def run_stage(
    stage: str,
    guides_path: str | os.PathLike[str] | None = None,
    outputs_dir: str | os.PathLike[str] | None = None,
    *,
    updates_path: str | os.PathLike[str] | None = None,
    force: bool = True,
    verbose: bool = True,
) -> int:
    """Run one stage by CLI name ('migrate-legal-safe-depth') or registry key ('legal_safe_depth')."""
    context = build_context(
        Path(guides_path) if guides_path else None,
        Path(updates_path) if updates_path else None,
        Path(outputs_dir) if outputs_dir else None,
    )
    if stage.strip().lower() in VALIDATE_STAGES:
        return run_validation_cli(context, verbose=verbose)
    name = slug_stage_name(stage)
    if name not in TRANSFORM_REGISTRY:
        known = ", ".join(sorted(TRANSFORM_REGISTRY))
        raise KeyError(f"Unknown stage {stage!r}; expected validate or one of: {known}")
    return run_stage_cli(name, context, force=force, verbose=verbose)


def _cli() -> int:
    """Parse CLI arguments and run the requested stage."""
    parser = argparse.ArgumentParser(description="Guide corpus stage runner")
    parser.add_argument(
        "--stage",
        required=True,
        help="Stage to run: migrate-guides-schema, enrich-guide-depth, migrate-legal-safe-depth or validate",
    )
    parser.add_argument("--guides", required=False)
    parser.add_argument("--updates", required=False)
    parser.add_argument("--outdir", required=False)
    parser.add_argument("--pending-only", action="store_true", help="Skip guides already at the stage's schemaVersion")
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args()

    return run_stage(
        args.stage,
        args.guides,
        args.outdir,
        updates_path=args.updates,
        force=not args.pending_only,
        verbose=not args.quiet,
    )


__all__ = ["run_stage", "validate_guides"]


if __name__ == "__main__":
    raise SystemExit(_cli())
