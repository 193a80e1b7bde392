#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the complete guide pipeline:

Part 1: Migrate guides to the enhanced display schema (schemaVersion 1)
Part 2: Enrich guides with practical depth (schemaVersion 2)
Part 3: Migrate guides to the legal-safe depth schema (schemaVersion 3)
Part 4: Validate the corpus and write the taxonomy audit CSV

Only the transforms a guide is still missing are applied unless --force is given.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from content_pipelines import StageAborted
from content_pipelines.guides.constants import GUIDES_JSON, PIPELINE_OUTPUTS_DIR, UPDATES_JSON
from content_pipelines.guides.scripts.runners import (
    build_context,
    print_problems,
    run_pending_stages,
    run_validation,
    write_taxonomy_audit,
)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run every pending guide transform, then validate and audit the corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--guides", type=Path, default=GUIDES_JSON, help="Guide corpus JSON array.")
    parser.add_argument("--updates", type=Path, default=UPDATES_JSON, help="Optional updates feed JSON array.")
    parser.add_argument(
        "--outputs-dir",
        type=Path,
        default=PIPELINE_OUTPUTS_DIR,
        help="Directory for metrics history and the taxonomy audit CSV.",
    )
    parser.add_argument("--force", action="store_true", help="Re-run every transform on every guide.")
    parser.add_argument("--skip-audit", action="store_true", help="Do not write the taxonomy audit CSV.")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output.")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    verbose = not args.quiet
    context = build_context(args.guides, args.updates, args.outputs_dir)

    try:
        run_pending_stages(context, force=args.force, verbose=verbose)
        guides, errors = run_validation(context, verbose=verbose)
    except StageAborted as exc:
        print_problems(exc.heading, exc.problems)
        return 1
    except (FileNotFoundError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    if not args.skip_audit:
        audit_path = write_taxonomy_audit(guides, context.outputs_dir / "taxonomy_audit.csv")
        if verbose:
            print(f"[OK] Taxonomy audit -> {audit_path}")

    if errors:
        print_problems("Validation failed with the following issues:", errors)
        return 1
    print(f"Validation passed: {len(guides)} guides are schema-complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
