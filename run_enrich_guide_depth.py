#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth pass: use cases, candidate/avoidance profiles, side effects and real-world patterns (schemaVersion 2).

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
        description="Enrich guides with practical depth blocks.",
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
    return run_stage_cli("guide_depth", context, verbose=not args.quiet)


if __name__ == "__main__":
    raise SystemExit(main())
