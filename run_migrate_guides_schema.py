#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Migration pass: display title, composition, taxonomy, voice and hero copy (schemaVersion 1).

Aborts before writing when the handcrafted priority table is incomplete.

Rewrites the corpus in place; run validate-guides afterwards.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional

from content_pipelines.guides.constants import GUIDES_JSON, PIPELINE_OUTPUTS_DIR
from content_pipelines.guides.scripts.runners import build_context, run_stage_cli


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Migrate guides to the enhanced display schema.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--guides", type=Path, default=GUIDES_JSON, help="Guide corpus JSON array.")
    parser.add_argument(
        "--outputs-dir",
        type=Path,
        default=PIPELINE_OUTPUTS_DIR,
        help="Directory for the metrics history CSV.",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output.")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    context = build_context(args.guides, outputs_dir=args.outputs_dir)
    return run_stage_cli("enhanced_schema", context, verbose=not args.quiet)


if __name__ == "__main__":
    raise SystemExit(main())
