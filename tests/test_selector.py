#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for deterministic template selection and citation rotation."""

import pytest

from content_pipelines.guides.scripts.selector_guides import (
    FNV_OFFSET_BASIS,
    add_citation,
    block_seed,
    pick,
    rotate_citations,
    stable_hash,
)


def test_stable_hash_matches_fnv1a_reference_values() -> None:
    assert stable_hash("") == FNV_OFFSET_BASIS
    assert stable_hash("a") == 0xE40C292C


def test_stable_hash_is_32_bit() -> None:
    for key in ("semaglutide", "bpc-157", "x" * 500):
        assert 0 <= stable_hash(key) <= 0xFFFFFFFF


def test_pick_is_deterministic_and_in_menu() -> None:
    menu = ("first", "second", "third")
    chosen = pick(menu, "tirzepatide")
    assert chosen in menu
    assert all(pick(menu, "tirzepatide") == chosen for _ in range(5))
    assert chosen == menu[stable_hash("tirzepatide") % 3]


def test_pick_rejects_empty_menu() -> None:
    with pytest.raises(ValueError):
        pick((), "anything")


def test_add_citation_appends_once() -> None:
    assert add_citation("Track  appetite trends.", "C2") == "Track appetite trends. [C2]"
    assert add_citation("Already cited. [C1]", "C3") == "Already cited. [C1]"


def test_rotate_citations_cycles_from_seed() -> None:
    lines = ["one", "two", "three"]
    assert rotate_citations(lines, 0, ["C1", "C2"]) == ["one [C1]", "two [C2]", "three [C1]"]
    assert rotate_citations(lines, 1, ["C1", "C2"]) == ["one [C2]", "two [C1]", "three [C2]"]


def test_rotate_citations_falls_back_when_guide_has_no_ids() -> None:
    assert rotate_citations(["only"], 0, []) == ["only [C1]"]


def test_block_seed_offsets_differ_per_block() -> None:
    base = stable_hash("semaglutide")
    assert block_seed("semaglutide", "overview") == base
    assert block_seed("semaglutide", "protocolPatterns") == base + 1
    assert block_seed("semaglutide", "trackingFocus") == base + 8
