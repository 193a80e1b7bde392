#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Validate the guide corpus before rendering.

Checks schema completeness, controlled vocabularies, citation cross-references
and content safety. Exit 0 when clean, 1 with one line per issue otherwise,
2 when the corpus cannot be read.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional

from content_pipelines.guides.constants import (
    CURRENT_SCHEMA_VERSION,
    GUIDES_JSON,
    PIPELINE_OUTPUTS_DIR,
    UPDATES_JSON,
)
from content_pipelines.guides.scripts.runners import build_context, run_validation_cli


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate guides.json (and updates.json when present).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--guides", type=Path, default=GUIDES_JSON, help="Guide corpus JSON array.")
    parser.add_argument("--updates", type=Path, default=UPDATES_JSON, help="Optional updates feed JSON array.")
    parser.add_argument(
        "--outputs-dir",
        type=Path,
        default=PIPELINE_OUTPUTS_DIR,
        help="Directory for the metrics history CSV.",
    )
    parser.add_argument(
        "--min-schema-version",
        type=int,
        default=CURRENT_SCHEMA_VERSION,
        choices=range(0, CURRENT_SCHEMA_VERSION + 1),
        help="Require every guide to carry the fields of at least this schema version.",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output.")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    context = build_context(args.guides, args.updates, args.outputs_dir)
    return run_validation_cli(context, min_schema_version=args.min_schema_version, verbose=not args.quiet)


if __name__ == "__main__":
    raise SystemExit(main())
