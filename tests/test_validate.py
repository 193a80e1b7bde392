#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for the corpus validator: schema shape, cross-references and content safety."""

from __future__ import annotations

import copy

from content_pipelines.guides.scripts.validate_guides import (
    is_iso_date,
    required_fields,
    validate_guide,
    validate_guides,
    validate_updates,
)

GLOW_SLUG = "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend"


def _errors_for(guides, slug):
    return [error for error in validate_guides(guides) if f"({slug})" in error]


def test_enriched_corpus_is_clean(enriched_corpus) -> None:
    assert validate_guides(enriched_corpus) == []


def test_seed_corpus_is_clean_at_seed_level(seed_corpus) -> None:
    assert validate_guides(seed_corpus, min_schema_version=0) == []


def test_seed_corpus_fails_at_current_level(seed_corpus) -> None:
    errors = validate_guides(seed_corpus)
    assert any("missing required field: displayTitle" in error for error in errors)
    assert any("missing required field: riskScreen" in error for error in errors)


def test_validator_does_not_mutate_input(enriched_corpus) -> None:
    before = copy.deepcopy(enriched_corpus)
    enriched_corpus[0]["displayTitle"] = "x" * 80
    snapshot = copy.deepcopy(enriched_corpus)
    validate_guides(enriched_corpus)
    assert enriched_corpus == snapshot
    assert before != snapshot


def test_non_array_or_empty_corpus() -> None:
    assert validate_guides([]) == ["guides.json must be a non-empty array."]
    assert validate_guides({"slug": "x"}) == ["guides.json must be a non-empty array."]


def test_glow_acronym_code_must_match(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, GLOW_SLUG)
    assert guide["displayTitle"] == "GLOW"
    guide["acronymInfo"]["code"] = "GLW"
    errors = _errors_for(enriched_corpus, GLOW_SLUG)
    assert any("acronymInfo.code must be GLOW" in error for error in errors)


def test_display_title_length_and_notation(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "bpc-157")
    guide["displayTitle"] = "B" * 59
    assert any("displayTitle is too long (59 chars)" in error for error in _errors_for(enriched_corpus, "bpc-157"))
    guide["displayTitle"] = "BPC-157 10mg"
    assert any("dosage notation" in error for error in _errors_for(enriched_corpus, "bpc-157"))


def test_removing_a_referenced_citation_names_guide_and_field(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "semaglutide")
    guide["citations"] = [citation for citation in guide["citations"] if citation["id"] != "C2"]
    errors = _errors_for(enriched_corpus, "semaglutide")
    assert errors
    assert any("C2" in error and ("dosingSection" in error or "dosingFramework" in error) for error in errors)
    assert any("evidenceProfile.bySection" in error and "C2" in error for error in errors)


def test_dosing_line_without_marker(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "tirzepatide")
    guide["dosingSection"]["protocolPatterns"][0] = "Keep the cadence steady."
    guide["dosingFramework"]["holdTriggers"][0] = "Pause and review. [C1] [C2]"
    errors = _errors_for(enriched_corpus, "tirzepatide")
    assert any("dosingSection.protocolPatterns[0] is missing citation marker" in error for error in errors)
    assert any("dosingFramework.holdTriggers[0] carries more than one citation marker" in error for error in errors)


def test_legal_lint_on_framework_lines(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "semaglutide")
    guide["dosingFramework"]["pacePrinciples"][0] = "Start at 0.25 mg for four weeks. [C1]"
    errors = _errors_for(enriched_corpus, "semaglutide")
    assert any("pacePrinciples[0] contains dosage-unit language" in error for error in errors)
    assert any("pacePrinciples[0] contains prescriptive dosing wording" in error for error in errors)


def test_banned_phrase_and_social_link(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "magnesium")
    guide["heroSummary"] += " It appears in the supplier catalog list."
    guide["communityReports"]["summary"].append("Thread: https://reddit.com/r/supplements/abc")
    errors = _errors_for(enriched_corpus, "magnesium")
    assert any('banned boilerplate phrase: "appears in the supplier catalog list"' in error for error in errors)
    assert any("direct social/forum links" in error for error in errors)


def test_blend_format_must_match_composition(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "bpc-157")
    guide["taxonomy"]["formatTags"] = ["Blend"]
    errors = _errors_for(enriched_corpus, "bpc-157")
    assert any("formatTags must be Blend exactly when composition has more than one part" in error for error in errors)


def test_priority_checks(enriched_corpus, guide_by_slug) -> None:
    semaglutide = guide_by_slug(enriched_corpus, "semaglutide")
    guide_by_slug(enriched_corpus, "tirzepatide")["heroSummary"] = semaglutide["heroSummary"]
    errors = validate_guides(enriched_corpus)
    assert "Priority hero intro is duplicated between semaglutide and tirzepatide." in errors

    remaining = [guide for guide in enriched_corpus if guide["slug"] != "semaglutide"]
    assert "Priority slug missing from guides.json: semaglutide" in validate_guides(remaining)


def test_evidence_section_keys(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "insulin")
    sections = guide["evidenceProfile"]["bySection"]
    sections[1] = dict(sections[0])
    errors = _errors_for(enriched_corpus, "insulin")
    assert any("repeats sectionKey: use_cases" in error for error in errors)
    assert any("missing required sectionKey: risk_screen" in error for error in errors)


def test_community_reports_fixed_values(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "ss-31")
    guide["communityReports"]["confidence"] = "moderate"
    guide["communityReports"]["sourcePolicy"] = "linked"
    errors = _errors_for(enriched_corpus, "ss-31")
    assert any('communityReports.confidence must be fixed to "low"' in error for error in errors)
    assert any('communityReports.sourcePolicy must be "summarized_nonlinked"' in error for error in errors)


def test_duplicate_and_invalid_slugs(enriched_corpus) -> None:
    enriched_corpus.append(copy.deepcopy(enriched_corpus[0]))
    broken = copy.deepcopy(enriched_corpus[1])
    broken["slug"] = "Not A Slug"
    enriched_corpus.append(broken)
    errors = validate_guides(enriched_corpus)
    assert any(f"has duplicate slug: {enriched_corpus[0]['slug']}" in error for error in errors)
    assert any("has invalid slug: Not A Slug" in error for error in errors)


def test_schema_version_range(enriched_corpus) -> None:
    enriched_corpus[0]["schemaVersion"] = 7
    errors = validate_guide(enriched_corpus[0], 0)
    assert any("schemaVersion must be an integer between 0 and 3" in error for error in errors)


def test_required_fields_accumulate_by_level() -> None:
    assert "slug" in required_fields(0)
    assert "displayTitle" not in required_fields(0)
    assert {"displayTitle", "useCases", "riskScreen"} <= set(required_fields(3))


def test_iso_dates_must_exist_on_the_calendar() -> None:
    assert is_iso_date("2024-02-29")
    assert not is_iso_date("2023-02-29")
    assert not is_iso_date("2024-2-01")
    assert not is_iso_date(20240201)


def test_updates_feed() -> None:
    slugs = {"semaglutide", "bpc-157"}
    good = [{
        "id": "2024-02-semaglutide",
        "date": "2024-02-01",
        "title": "Semaglutide refresh",
        "summary": "Refreshed pacing notes.",
        "version": "1.1.0",
        "impactedGuides": ["semaglutide"],
    }]
    assert validate_updates(good, slugs) == []

    bad = copy.deepcopy(good) + copy.deepcopy(good)
    bad[1]["date"] = "2024-13-01"
    bad[1]["impactedGuides"] = ["unknown-guide"]
    errors = validate_updates(bad, slugs)
    assert "update[1] has duplicate id: 2024-02-semaglutide" in errors
    assert "update[1] date must be YYYY-MM-DD." in errors
    assert "update[1] impactedGuides references unknown guide slug: unknown-guide" in errors
    assert validate_updates({"id": "x"}, slugs) == ["updates.json must be an array."]


def test_updates_are_validated_with_the_corpus(enriched_corpus) -> None:
    updates = [{"id": "u1", "date": "2024-02-01", "title": "t", "summary": "s", "version": "1", "impactedGuides": []}]
    assert validate_guides(enriched_corpus, updates) == ["update[0] impactedGuides must be a non-empty array."]


def test_duplicate_citation_id(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "semaglutide")
    guide["citations"][1]["id"] = guide["citations"][0]["id"]
    errors = _errors_for(enriched_corpus, "semaglutide")
    assert any(error.endswith("(semaglutide) has duplicate citation id: C1") for error in errors)


def test_wrongly_typed_values_are_reported_not_raised(enriched_corpus, guide_by_slug) -> None:
    guide = guide_by_slug(enriched_corpus, "bpc-157")
    guide["status"] = ["approved"]
    guide["voiceProfile"] = {"tone": "coach"}
    guide["taxonomy"]["classTags"] = [["Peptide"]]
    guide["regulatoryContext"]["classification"] = {"label": "approved"}
    guide["evidenceProfile"]["overall"] = ["low"]
    guide["evidenceProfile"]["bySection"][0]["citationIds"] = [["C1"]]
    unnamed = guide_by_slug(enriched_corpus, "magnesium")
    unnamed["slug"] = ["magnesium"]
    updates = [{
        "id": "u1",
        "date": "2024-02-01",
        "title": "t",
        "summary": "s",
        "version": "1",
        "impactedGuides": [["bpc-157"]],
    }]

    errors = validate_guides(enriched_corpus, updates)
    bpc = [error for error in errors if "(bpc-157)" in error]
    assert any("has unsupported status: ['approved']" in error for error in bpc)
    assert any("voiceProfile must be one of" in error for error in bpc)
    assert any("taxonomy.classTags has unsupported value: ['Peptide']" in error for error in bpc)
    assert any("regulatoryContext.classification is invalid" in error for error in bpc)
    assert any("evidenceProfile.overall must be one of" in error for error in bpc)
    assert any("references missing citation id: ['C1']" in error for error in bpc)
    assert any("has invalid slug: ['magnesium']" in error for error in errors)
    assert "update[0] impactedGuides references unknown guide slug: ['bpc-157']" in errors
