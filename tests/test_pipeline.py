#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""End-to-end tests for the transforms, the stage runners and the root CLIs."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pandas as pd
import pytest

import main as stage_main
import run_all
import run_enrich_guide_depth
import run_migrate_guides_schema
import run_migrate_legal_safe_depth
import run_validate_guides
from content_pipelines import StageAborted, get_transform, list_transforms, pending_transforms
from content_pipelines.guides.scripts import overrides_guides
from content_pipelines.guides.scripts.runners import build_context, run_pending_stages, taxonomy_audit_frame
from content_pipelines.guides.scripts.validate_guides import validate_guides


def _read(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def _common_args(seed_file: Path, tmp_path: Path):
    return ["--guides", str(seed_file), "--outputs-dir", str(tmp_path / "outputs"), "--quiet"]


def test_stamp_requires_the_previous_version(seed_corpus) -> None:
    guide = seed_corpus[0]
    get_transform("guide_depth").run([guide])
    assert guide["schemaVersion"] == 0
    assert [transform.name for transform in pending_transforms(guide)] == [
        "enhanced_schema",
        "guide_depth",
        "legal_safe_depth",
    ]

    get_transform("enhanced_schema").run([guide])
    assert guide["schemaVersion"] == 1
    assert [transform.name for transform in pending_transforms(guide)] == ["guide_depth", "legal_safe_depth"]


def test_schema_pass_sorts_by_slug(seed_corpus) -> None:
    shuffled = list(reversed(seed_corpus))
    get_transform("enhanced_schema").run(shuffled)
    slugs = [guide["slug"] for guide in shuffled]
    assert slugs == sorted(slugs)


def test_missing_handcrafted_entry_aborts_without_changes(seed_corpus, monkeypatch) -> None:
    monkeypatch.delitem(overrides_guides.HANDCRAFTED_PRIORITY, "semaglutide")
    before = copy.deepcopy(seed_corpus)
    with pytest.raises(StageAborted) as excinfo:
        get_transform("enhanced_schema").run(seed_corpus)
    assert excinfo.value.problems == ["semaglutide"]
    assert excinfo.value.heading == "Missing handcrafted priority entries:"
    assert seed_corpus == before


def test_rerunning_every_pass_still_validates(enriched_corpus) -> None:
    for transform in list_transforms():
        transform.run(enriched_corpus)
    assert validate_guides(enriched_corpus) == []


def test_pending_run_on_mixed_corpus(seed_file, tmp_path) -> None:
    guides = _read(seed_file)
    get_transform("enhanced_schema").run(guides[:10])
    seed_file.write_text(json.dumps(guides), encoding="utf-8")

    context = build_context(seed_file, tmp_path / "updates.json", tmp_path / "outputs")
    results = run_pending_stages(context, verbose=False)
    assert [result.name for result in results] == ["enhanced_schema", "guide_depth", "legal_safe_depth"]
    assert results[0].processed == len(guides) - 10
    assert results[0].skipped == 10
    assert results[1].processed == len(guides)

    written = _read(seed_file)
    assert {guide["schemaVersion"] for guide in written} == {3}
    assert validate_guides(written) == []


def test_stage_clis_then_validate(seed_file, tmp_path, capsys) -> None:
    args = _common_args(seed_file, tmp_path)
    assert run_migrate_guides_schema.main(args) == 0
    assert run_enrich_guide_depth.main(args) == 0
    assert run_migrate_legal_safe_depth.main(args) == 0

    assert run_validate_guides.main(args + ["--updates", str(tmp_path / "updates.json")]) == 0
    assert "Validation passed" in capsys.readouterr().out

    metrics = pd.read_csv(tmp_path / "outputs" / "metrics_history.csv")
    assert list(metrics["run_type"]) == ["enhanced_schema", "guide_depth", "legal_safe_depth", "validate"]
    assert list(metrics.columns) == ["timestamp", "run_type", "guides", "processed", "skipped", "errors"]


def test_validate_cli_reports_issues(seed_file, tmp_path, capsys) -> None:
    args = _common_args(seed_file, tmp_path) + ["--updates", str(tmp_path / "updates.json")]
    assert run_validate_guides.main(args) == 1
    err = capsys.readouterr().err
    assert "Validation failed with the following issues:" in err
    assert "missing required field: displayTitle" in err

    assert run_validate_guides.main(args + ["--min-schema-version", "0"]) == 0


def test_unreadable_corpus_exits_with_two(tmp_path, capsys) -> None:
    missing = tmp_path / "missing.json"
    assert run_migrate_guides_schema.main(["--guides", str(missing), "--outputs-dir", str(tmp_path), "--quiet"]) == 2
    assert "[ERROR]" in capsys.readouterr().err

    not_array = tmp_path / "object.json"
    not_array.write_text('{"slug": "semaglutide"}', encoding="utf-8")
    assert run_validate_guides.main(["--guides", str(not_array), "--outputs-dir", str(tmp_path), "--quiet"]) == 2
    assert "[ERROR]" in capsys.readouterr().err


def test_aborted_stage_cli_leaves_file_untouched(seed_file, tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.delitem(overrides_guides.HANDCRAFTED_PRIORITY, "tirzepatide")
    before = seed_file.read_text(encoding="utf-8")
    assert run_migrate_guides_schema.main(_common_args(seed_file, tmp_path)) == 1
    assert seed_file.read_text(encoding="utf-8") == before
    err = capsys.readouterr().err
    assert "Missing handcrafted priority entries:" in err
    assert "- tirzepatide" in err


def test_run_all_writes_corpus_and_audit(seed_file, tmp_path, capsys) -> None:
    args = _common_args(seed_file, tmp_path) + ["--updates", str(tmp_path / "updates.json")]
    assert run_all.main(args) == 0
    assert "Validation passed" in capsys.readouterr().out

    guides = _read(seed_file)
    audit = pd.read_csv(tmp_path / "outputs" / "taxonomy_audit.csv")
    assert len(audit) == len(guides)
    assert set(audit["schema_version"]) == {3}

    # Everything is current now, so a second run has nothing pending.
    assert run_all.main(args) == 0
    assert _read(seed_file) == guides


def test_taxonomy_audit_frame_columns(enriched_corpus) -> None:
    frame = taxonomy_audit_frame(enriched_corpus)
    assert list(frame.columns) == [
        "slug",
        "class_tags",
        "route_tags",
        "format_tags",
        "profile",
        "voice_profile",
        "regulatory_classification",
        "evidence_tier",
        "schema_version",
    ]
    row = frame[frame["slug"] == "semaglutide"].iloc[0]
    assert row["class_tags"] == "Peptide|GLP-1/GIP|Injectable Compound"
    assert row["regulatory_classification"] == "approved_label"


def test_run_stage_by_cli_or_registry_name(seed_file, tmp_path) -> None:
    outputs = tmp_path / "outputs"
    assert stage_main.run_stage("migrate-guides-schema", seed_file, outputs, verbose=False) == 0
    assert stage_main.run_stage("guide_depth", seed_file, outputs, verbose=False) == 0
    assert stage_main.run_stage("migrate-legal-safe-depth", seed_file, outputs, verbose=False) == 0
    assert stage_main.run_stage(
        "validate", seed_file, outputs, updates_path=tmp_path / "updates.json", verbose=False
    ) == 0

    with pytest.raises(KeyError):
        stage_main.run_stage("compile-everything", seed_file, outputs)


def test_non_object_guide_is_an_input_error(seed_corpus, seed_file, tmp_path, capsys) -> None:
    with pytest.raises(ValueError, match=r"guide\[1\] must be an object"):
        get_transform("guide_depth").run([seed_corpus[0], "semaglutide"])
    assert "useCases" not in seed_corpus[0]

    seed_file.write_text(json.dumps([seed_corpus[0], 42]), encoding="utf-8")
    before = seed_file.read_text(encoding="utf-8")
    assert run_enrich_guide_depth.main(_common_args(seed_file, tmp_path)) == 2
    assert "guide[1] must be an object" in capsys.readouterr().err
    assert seed_file.read_text(encoding="utf-8") == before
