"""
Pipeline runner functions for the guide corpus.

These functions are called by the run_* scripts in the project root. Each
stage reads the whole corpus, transforms it in memory and rewrites it once.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from ...base import StageAborted, TransformContext, TransformOptions, TransformResult, current_schema_version
from ...registry import get_transform, list_transforms
from ..constants import (
    CURRENT_SCHEMA_VERSION,
    GUIDES_JSON,
    METRICS_HISTORY_CSV,
    PIPELINE_OUTPUTS_DIR,
    TAXONOMY_AUDIT_CSV,
    UPDATES_JSON,
)
from .classify_guides import determine_voice_profile, overall_confidence, regulatory_classification
from .enrich_guides import ensure_taxonomy, guide_profile
from .io_utils import read_json_array, read_optional_json_array, write_csv, write_json_atomic
from .text_utils_guides import as_dict, as_list, normalize
from .validate_guides import validate_guides

METRIC_COLUMNS = ("guides", "processed", "skipped", "errors")


def _log(msg: str, verbose: bool) -> None:
    if verbose:
        print(msg)


def build_context(
    guides_path: Optional[Path] = None,
    updates_path: Optional[Path] = None,
    outputs_dir: Optional[Path] = None,
) -> TransformContext:
    """Resolve corpus paths, falling back to the project defaults."""
    return TransformContext(
        guides_json=Path(guides_path or GUIDES_JSON),
        outputs_dir=Path(outputs_dir or PIPELINE_OUTPUTS_DIR),
        updates_json=Path(updates_path or UPDATES_JSON),
    )


def run_transform_stage(
    name: str,
    context: Optional[TransformContext] = None,
    force: bool = True,
    verbose: bool = True,
) -> TransformResult:
    """
    Run one registered transform over the corpus and rewrite it.

    Raises ``StageAborted`` before anything is written when the transform's
    static tables are incomplete.
    """
    context = context or build_context()
    transform = get_transform(name)
    guides = read_json_array(context.guides_json)

    result = transform.run(guides, TransformOptions(force=force, verbose=verbose))
    write_json_atomic(context.guides_json, guides)
    _log(
        f"[OK] {transform.display_name}: {result.processed:,} guides updated, "
        f"{result.skipped:,} already at schemaVersion {transform.schema_version} -> {context.guides_json}",
        verbose,
    )

    log_metrics(
        transform.name,
        {"guides": len(guides), "processed": result.processed, "skipped": result.skipped, "errors": 0},
        metrics_path=context.outputs_dir / "metrics_history.csv",
    )
    return result


def run_pending_stages(
    context: Optional[TransformContext] = None,
    force: bool = False,
    verbose: bool = True,
) -> List[TransformResult]:
    """
    Apply every registered transform in schema-version order.

    Without ``force`` each guide only receives the transforms its
    ``schemaVersion`` says it is missing. The corpus is written once, after the
    last transform, so an aborted stage leaves the file untouched.
    """
    context = context or build_context()
    guides = read_json_array(context.guides_json)
    options = TransformOptions(force=force, verbose=verbose)

    results: List[TransformResult] = []
    for transform in list_transforms():
        result = transform.run(guides, options)
        _log(
            f"[OK] {transform.display_name}: {result.processed:,} updated, {result.skipped:,} skipped",
            verbose,
        )
        results.append(result)

    write_json_atomic(context.guides_json, guides)
    _log(f"[OK] Corpus written -> {context.guides_json}", verbose)

    log_metrics(
        "pending",
        {
            "guides": len(guides),
            "processed": sum(result.processed for result in results),
            "skipped": sum(result.skipped for result in results),
            "errors": 0,
        },
        metrics_path=context.outputs_dir / "metrics_history.csv",
    )
    return results


def run_validation(
    context: Optional[TransformContext] = None,
    min_schema_version: int = CURRENT_SCHEMA_VERSION,
    verbose: bool = True,
) -> Tuple[List[Dict[str, Any]], List[str]]:
    """Validate the corpus (and the updates feed when present); returns ``(guides, errors)``."""
    context = context or build_context()
    guides = read_json_array(context.guides_json)
    updates = read_optional_json_array(context.updates_json)
    if updates is None:
        _log(f"[SKIP] No updates feed at {context.updates_json}", verbose)

    errors = validate_guides(guides, updates, min_schema_version=min_schema_version)
    log_metrics(
        "validate",
        {"guides": len(guides), "processed": len(guides), "skipped": 0, "errors": len(errors)},
        metrics_path=context.outputs_dir / "metrics_history.csv",
    )
    return guides, errors


def taxonomy_audit_frame(guides: List[Dict[str, Any]]) -> pd.DataFrame:
    """One row per guide describing how the rule table classified it."""
    rows = []
    for guide in guides:
        if not isinstance(guide, dict):
            continue
        taxonomy = ensure_taxonomy(guide)
        regulatory = as_dict(guide.get("regulatoryContext")).get("classification") or regulatory_classification(
            guide.get("status"), guide.get("category")
        )
        evidence = as_dict(guide.get("evidenceProfile")).get("overall") or overall_confidence(regulatory)
        rows.append({
            "slug": normalize(guide.get("slug")),
            "class_tags": "|".join(as_list(taxonomy.get("classTags"))),
            "route_tags": "|".join(as_list(taxonomy.get("routeTags"))),
            "format_tags": "|".join(as_list(taxonomy.get("formatTags"))),
            "profile": guide_profile(guide),
            "voice_profile": guide.get("voiceProfile") or determine_voice_profile(guide.get("status"), taxonomy),
            "regulatory_classification": regulatory,
            "evidence_tier": evidence,
            "schema_version": current_schema_version(guide),
        })
    return pd.DataFrame(rows, columns=[
        "slug",
        "class_tags",
        "route_tags",
        "format_tags",
        "profile",
        "voice_profile",
        "regulatory_classification",
        "evidence_tier",
        "schema_version",
    ])


def write_taxonomy_audit(
    guides: List[Dict[str, Any]],
    output_path: Optional[Path] = None,
) -> Path:
    if output_path is None:
        output_path = TAXONOMY_AUDIT_CSV
    output_path = Path(output_path)
    write_csv(taxonomy_audit_frame(guides), output_path)
    return output_path


def print_problems(heading: str, problems: List[str]) -> None:
    print(heading, file=sys.stderr)
    for problem in problems:
        print(f"- {problem}", file=sys.stderr)


def run_stage_cli(name: str, context: TransformContext, force: bool = True, verbose: bool = True) -> int:
    """Exit code for a single-stage entry point: 0 ok, 1 aborted, 2 unreadable corpus."""
    try:
        run_transform_stage(name, context, force=force, verbose=verbose)
    except StageAborted as exc:
        print_problems(exc.heading, exc.problems)
        return 1
    except (FileNotFoundError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    return 0


def run_validation_cli(
    context: TransformContext,
    min_schema_version: int = CURRENT_SCHEMA_VERSION,
    verbose: bool = True,
) -> int:
    try:
        guides, errors = run_validation(context, min_schema_version=min_schema_version, verbose=verbose)
    except (FileNotFoundError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    if errors:
        print_problems("Validation failed with the following issues:", errors)
        return 1
    print(f"Validation passed: {len(guides)} guides are schema-complete.")
    return 0


def log_metrics(
    run_type: str,
    metrics: dict,
    metrics_path: Optional[Path] = None,
) -> None:
    """
    Log pipeline run metrics to history file.

    Args:
        run_type: Type of run (enhanced_schema, guide_depth, legal_safe_depth, pending, validate)
        metrics: Dict with metric values
        metrics_path: Path to metrics history file
    """
    from datetime import datetime

    if metrics_path is None:
        metrics_path = METRICS_HISTORY_CSV
    metrics_path = Path(metrics_path)

    # Build row with a fixed column order so appended rows line up
    row = {
        "timestamp": datetime.now().isoformat(),
        "run_type": run_type,
        **{column: metrics.get(column, 0) for column in METRIC_COLUMNS},
    }

    # Append to CSV
    file_exists = metrics_path.exists()

    metrics_df = pd.DataFrame([row])
    if file_exists:
        metrics_df.to_csv(metrics_path, mode='a', header=False, index=False)
    else:
        metrics_path.parent.mkdir(parents=True, exist_ok=True)
        metrics_df.to_csv(metrics_path, index=False)


__all__ = [
    "StageAborted",
    "build_context",
    "run_transform_stage",
    "run_pending_stages",
    "run_validation",
    "taxonomy_audit_frame",
    "write_taxonomy_audit",
    "print_problems",
    "run_stage_cli",
    "run_validation_cli",
    "log_metrics",
]
