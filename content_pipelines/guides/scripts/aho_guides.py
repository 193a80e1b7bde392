#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re
from functools import lru_cache
from typing import List, Sequence, Tuple

import ahocorasick  # type: ignore

from .text_utils_guides import BANNED_PHRASES, BANNED_PHRASE_REPLACEMENT, normalize, tidy


@lru_cache(maxsize=None)
def build_phrase_automaton(phrases: Tuple[str, ...] = BANNED_PHRASES) -> ahocorasick.Automaton:
    """Automaton keyed on lowercased phrases; values are ``(index, phrase)`` so hits sort by table order."""
    A = ahocorasick.Automaton()
    for index, phrase in enumerate(phrases):
        key = phrase.lower().strip()
        if key:
            A.add_word(key, (index, phrase))
    A.make_automaton()
    return A


def find_banned_phrases(text: object, phrases: Sequence[str] = BANNED_PHRASES) -> List[str]:
    """Distinct banned phrases present in ``text`` (case-insensitive), in table order."""
    lowered = normalize(text).lower()
    if not lowered:
        return []
    A = build_phrase_automaton(tuple(phrases))
    hits = {}
    for _, (index, phrase) in A.iter(lowered):
        hits[index] = phrase
    return [hits[index] for index in sorted(hits)]


def replace_banned_phrases(
    text: object,
    replacement: str = BANNED_PHRASE_REPLACEMENT,
    phrases: Sequence[str] = BANNED_PHRASES,
) -> str:
    """Rewrite every banned phrase occurrence to ``replacement`` and collapse whitespace."""
    value = normalize(text)
    for phrase in find_banned_phrases(value, phrases):
        value = re.sub(re.escape(phrase), replacement, value, flags=re.I)
    return tidy(value)


__all__ = ["build_phrase_automaton", "find_banned_phrases", "replace_banned_phrases"]
