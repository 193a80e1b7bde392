#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Regression tests for the content-safety rewrites."""

import pytest

from content_pipelines.guides.scripts.aho_guides import find_banned_phrases, replace_banned_phrases
from content_pipelines.guides.scripts.lint_guides import (
    ISSUE_DOSAGE,
    ISSUE_PRESCRIPTIVE,
    clean_line,
    clean_list,
    first_banned_phrase,
    has_social_link,
    legal_issues,
)

RISKY_LINES = [
    "Take 5 mg weekly x 4 at https://reddit.com/r/peptides [C1]",
    "Start at 0.25 mg, then increase to 0.5mg after four weeks.",
    "Inject 10 units before meals.",
    "Titrate to 2 ml as tolerated.",
    "This compound appears in the supplier catalog list for reference.",
]


def test_combined_rewrite() -> None:
    cleaned = clean_line(RISKY_LINES[0])
    assert cleaned == (
        "review with your clinician structured amount weekly review cadence "
        "at a community discussion (link removed)"
    )


@pytest.mark.parametrize("line", RISKY_LINES)
def test_cleaned_lines_pass_the_legal_lint(line: str) -> None:
    cleaned = clean_line(line)
    assert legal_issues(cleaned) == []
    assert find_banned_phrases(cleaned) == []
    assert "[C" not in cleaned


@pytest.mark.parametrize("line", RISKY_LINES)
def test_clean_line_is_idempotent(line: str) -> None:
    once = clean_line(line)
    assert clean_line(once) == once


def test_clean_line_leaves_safe_text_alone() -> None:
    line = "Escalation should follow tolerability recovery and documented symptom stability."
    assert clean_line(line) == line


def test_intake_and_injection_are_not_prescriptive() -> None:
    assert legal_issues("Poor oral intake after injection-site irritation.") == []


def test_legal_issues_reports_both_kinds() -> None:
    assert legal_issues("Start at 10 mg daily.") == [ISSUE_DOSAGE, ISSUE_PRESCRIPTIVE]
    assert legal_issues("Follow a weekly x 3 plan.") == [ISSUE_DOSAGE]


def test_clean_list_deduplicates_after_cleaning() -> None:
    lines = ["Inject 5 mg.", "Inject 10 mg.", "", "Keep notes. [C2]", "Keep notes."]
    assert clean_list(lines) == ["review with your clinician structured amount.", "Keep notes."]


def test_banned_phrases_are_case_insensitive_and_ordered() -> None:
    text = "Commercial listings show multiple strengths and formats. It Appears In The Supplier Catalog List."
    assert find_banned_phrases(text) == [
        "appears in the supplier catalog list",
        "commercial listings show multiple strengths and formats",
    ]
    assert first_banned_phrase(text) == "appears in the supplier catalog list"
    assert find_banned_phrases(replace_banned_phrases(text)) == []


def test_social_links_detected() -> None:
    assert has_social_link("see https://www.reddit.com/r/Semaglutide/comments/abc")
    assert has_social_link("https://discord.gg/invite")
    assert not has_social_link("https://www.fda.gov/drugs")
