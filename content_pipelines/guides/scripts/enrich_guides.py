#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Enrichment engine for the three schema-version passes.

Every block resolves in the same order: per-slug override, then the profile
template set (variants picked by the deterministic selector), then the generic
fallback. Dosing-adjacent lines receive exactly one citation marker each, rotated
through the guide's own citation ids. All functions mutate the guide in place and
return it.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableMapping, Optional, Sequence

from ..constants import COMMUNITY_CONFIDENCE, COMMUNITY_SOURCE_POLICY, DISPLAY_TITLE_MAX_CHARS
from .classify_guides import (
    classify_profile,
    detect_taxonomy,
    determine_voice_profile,
    overall_confidence,
    regulatory_classification,
)
from .combos_guides import compose_blend_title, parse_composition
from .dose_guides import has_dose_notation, strip_dose_notation
from .lint_guides import clean_editorial, clean_line, clean_list, remove_banned_phrases
from .overrides_guides import (
    ACRONYM_INFO,
    DEFAULT_ACRONYM_INFO,
    DEPTH_OVERRIDES,
    HANDCRAFTED_PRIORITY,
    LEGAL_SAFE_OVERRIDES,
)
from .selector_guides import block_seed, rotate_citations
from .templates_guides import (
    COMMUNITY_SAFETY_CAUTION,
    COMMUNITY_SUMMARY,
    DATA_GAPS,
    EMERGENCY_SIGNALS,
    EVIDENCE_SECTIONS,
    LEGAL_NOTICES,
    OVERALL_RATIONALES,
    PAUSE_LINE,
    PROVIDER_DISCUSSION_LINE,
    TRACKING_FOCUS_EXTRAS,
    UNCERTAINTY_STATEMENTS,
    build_dosing_section,
    build_hero,
    build_meta_description,
    build_provider_questions,
    build_safety_flags,
    build_subtitle,
    build_tracking_signals,
    dosing_framework_templates,
    fill_all,
    profile_avoidance,
    profile_candidates,
    profile_escalation_boundaries,
    profile_real_world_patterns,
    profile_side_effects,
    profile_use_cases,
    tier_key,
)
from .text_utils_guides import as_dict, as_list, normalize, slug_to_title, tidy, unique

Guide = MutableMapping[str, Any]

FRAMEWORK_PROFILES = ("glp", "nutrient", "peptide")


def citation_ids(guide: Guide) -> List[str]:
    """The guide's own citation ids, first-seen order."""
    return unique(as_dict(citation).get("id") for citation in as_list(guide.get("citations")))


def display_name(guide: Guide) -> str:
    return normalize(guide.get("displayTitle")) or normalize(guide.get("title")) or normalize(guide.get("slug"))


def ensure_taxonomy(guide: Guide) -> Dict[str, Any]:
    """Stored taxonomy when usable, otherwise re-derived from the seed fields."""
    taxonomy = guide.get("taxonomy")
    if isinstance(taxonomy, dict) and as_list(taxonomy.get("classTags")):
        return taxonomy
    return detect_taxonomy(guide, parse_composition(guide))


def is_blend(taxonomy: Dict[str, Any]) -> bool:
    return "blend" in {normalize(tag).lower() for tag in as_list(taxonomy.get("formatTags"))}


def _clip_words(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    clipped = text[:limit].rsplit(" ", 1)[0]
    return clipped.rstrip(" +-") or text[:limit]


def _fits(title: str) -> bool:
    return bool(title) and len(title) <= DISPLAY_TITLE_MAX_CHARS and not has_dose_notation(title)


def resolve_display_title(guide: Guide, composition: Sequence[Dict[str, Any]]) -> str:
    """Override, seeded value, stripped title, composed blend name, then the slug."""
    slug = normalize(guide.get("slug"))
    handcrafted = HANDCRAFTED_PRIORITY.get(slug, {}).get("displayTitle")
    if handcrafted:
        return handcrafted

    seeded = normalize(guide.get("displayTitle"))
    if _fits(seeded):
        return seeded

    stripped = strip_dose_notation(guide.get("title"))
    if _fits(stripped):
        return stripped

    blend_title = compose_blend_title(list(composition), DISPLAY_TITLE_MAX_CHARS)
    if blend_title and _fits(blend_title):
        return blend_title

    fallback = strip_dose_notation(slug_to_title(slug)) or slug
    return _clip_words(fallback, DISPLAY_TITLE_MAX_CHARS)


def _rotate(lines: Sequence[str], slug: str, block: str, ids: Sequence[str]) -> List[str]:
    return rotate_citations(list(lines), block_seed(slug, block), ids)


# --- pass 1 -------------------------------------------------------------------

def enrich_enhanced_schema(guide: Guide) -> Guide:
    """Composition, display title, taxonomy, voice, hero copy and the base dosing section."""
    slug = normalize(guide.get("slug"))
    composition = parse_composition(guide)
    title = resolve_display_title(guide, composition)
    taxonomy = detect_taxonomy(guide, composition)
    voice = determine_voice_profile(guide.get("status"), taxonomy)
    handcrafted = HANDCRAFTED_PRIORITY.get(slug, {})
    ids = citation_ids(guide)

    subtitle = handcrafted.get("subtitle") or build_subtitle(taxonomy, composition)
    hero = handcrafted.get("hero") or build_hero(slug, title, taxonomy, voice)
    dosing = build_dosing_section(slug, title, taxonomy, voice)

    guide["displayTitle"] = title
    guide["subtitle"] = remove_banned_phrases(subtitle)
    guide["heroSummary"] = remove_banned_phrases(hero)
    guide["acronymInfo"] = dict(ACRONYM_INFO.get(slug, DEFAULT_ACRONYM_INFO))
    guide["composition"] = composition
    guide["taxonomy"] = taxonomy
    guide["voiceProfile"] = voice

    section = dict(as_dict(guide.get("dosingSection")))
    section["overview"] = _rotate([remove_banned_phrases(dosing["overview"])], slug, "overview", ids)[0]
    section["protocolPatterns"] = _rotate(
        clean_editorial(dosing["protocolPatterns"]), slug, "protocolPatterns", ids
    )
    section["monitoringWindows"] = _rotate(
        clean_editorial(dosing["monitoringWindows"]), slug, "monitoringWindows", ids
    )
    guide["dosingSection"] = section

    guide["trackingSignals"] = clean_editorial(build_tracking_signals(title, taxonomy))
    guide["safetyFlags"] = clean_editorial(build_safety_flags(title, taxonomy, normalize(guide.get("status"))))
    guide["providerQuestions"] = clean_editorial(build_provider_questions(title, taxonomy))

    if not normalize(guide.get("metaDescription")):
        guide["metaDescription"] = build_meta_description(title, taxonomy)

    old_title = normalize(guide.get("title"))
    if old_title and old_title != title:
        aliases = list(as_list(guide.get("aliases")))
        if old_title not in aliases:
            aliases.append(old_title)
        guide["aliases"] = aliases
    elif not isinstance(guide.get("aliases"), list):
        guide["aliases"] = []
    return guide


# --- pass 2 -------------------------------------------------------------------

def enrich_guide_depth(guide: Guide) -> Guide:
    """Use cases, candidate/avoidance profiles, side effects and real-world dosing context."""
    slug = normalize(guide.get("slug"))
    taxonomy = ensure_taxonomy(guide)
    profile = classify_profile(taxonomy, guide.get("status"))
    name = display_name(guide)
    blend = is_blend(taxonomy)
    override = DEPTH_OVERRIDES.get(slug, {})
    ids = citation_ids(guide)

    side_effects = override.get("sideEffects") or profile_side_effects(profile)
    guide["useCases"] = unique(override.get("useCases") or profile_use_cases(name, profile, blend), clean=tidy)
    guide["candidateProfile"] = unique(override.get("candidateProfile") or profile_candidates(profile), clean=tidy)
    guide["avoidanceFlags"] = unique(override.get("avoidanceFlags") or profile_avoidance(profile), clean=tidy)
    guide["sideEffects"] = {
        "common": unique(side_effects.get("common") or [], clean=tidy),
        "serious": unique(side_effects.get("serious") or [], clean=tidy),
    }

    real_world = unique(
        override.get("realWorldPatterns") or profile_real_world_patterns(name, profile, blend), clean=tidy
    )
    boundaries = unique(override.get("escalationBoundaries") or profile_escalation_boundaries(profile), clean=tidy)

    section = dict(as_dict(guide.get("dosingSection")))
    section["realWorldPatterns"] = _rotate(real_world, slug, "realWorldPatterns", ids)
    section["escalationBoundaries"] = _rotate(boundaries, slug, "escalationBoundaries", ids)
    guide["dosingSection"] = section
    return guide


# --- pass 3 -------------------------------------------------------------------

def _section_confidence(rule: str, overall: str, citation_count: int) -> str:
    if rule == "overall":
        return overall
    if rule == "capped":
        return "moderate" if overall == "moderate" else "low"
    if rule == "sources":
        return "moderate" if citation_count >= 4 else "low"
    return "low"


def build_evidence_profile(overall: str, ids: Sequence[str]) -> Dict[str, Any]:
    pair = list(ids[:2])
    single = list(ids[:1])
    tier = tier_key(overall)
    by_section = []
    for key, rule, rationale in EVIDENCE_SECTIONS:
        by_section.append({
            "sectionKey": key,
            "confidence": _section_confidence(rule, overall, len(ids)),
            "rationale": rationale,
            "citationIds": single if key == "community_reports" else (pair or single),
        })
    return {
        "overall": overall,
        "overallRationale": OVERALL_RATIONALES[tier],
        "bySection": by_section,
        "dataGaps": unique([DATA_GAPS["shared_first"], DATA_GAPS[tier], DATA_GAPS["shared_last"]]),
    }


def enrich_legal_safe_depth(guide: Guide) -> Guide:
    """Regulatory context, dosing framework, risk screen, evidence profile and community reports."""
    slug = normalize(guide.get("slug"))
    taxonomy = ensure_taxonomy(guide)
    profile = classify_profile(taxonomy, guide.get("status"))
    name = display_name(guide)
    classification = regulatory_classification(guide.get("status"), guide.get("category"))
    overall = overall_confidence(classification)
    ids = citation_ids(guide)

    base = dosing_framework_templates(profile if profile in FRAMEWORK_PROFILES else "default", name)
    override = LEGAL_SAFE_OVERRIDES.get(slug, {})

    def framework_block(key: str, lines: Sequence[str]) -> List[str]:
        return _rotate(clean_list(lines), slug, key, ids)

    tracking = as_list(guide.get("trackingSignals")) or build_tracking_signals(name, taxonomy)
    guide["regulatoryContext"] = {
        "classification": classification,
        "plainLanguageStatus": normalize(guide.get("statusLabel")) or normalize(guide.get("status")),
        "legalNotice": LEGAL_NOTICES[classification],
    }
    guide["dosingFramework"] = {
        "pacePrinciples": framework_block("pacePrinciples", override.get("pacePrinciples") or base["pacePrinciples"]),
        "holdTriggers": framework_block("holdTriggers", override.get("holdTriggers") or base["holdTriggers"]),
        "resumeCriteria": framework_block("resumeCriteria", override.get("resumeCriteria") or base["resumeCriteria"]),
        "trackingFocus": framework_block("trackingFocus", list(tracking) + list(TRACKING_FOCUS_EXTRAS)),
        "uncertaintyStatement": clean_line(UNCERTAINTY_STATEMENTS[tier_key(overall)]),
    }

    candidates = as_list(guide.get("candidateProfile")) or profile_candidates(profile)
    avoidance = as_list(guide.get("avoidanceFlags")) or profile_avoidance(profile)
    side_effects = as_dict(guide.get("sideEffects"))
    fallback_effects = profile_side_effects(profile)
    guide["riskScreen"] = {
        "whoMayDiscussWithProvider": clean_list(list(candidates) + [PROVIDER_DISCUSSION_LINE]),
        "whoShouldAvoidOrPause": clean_list(list(avoidance) + [PAUSE_LINE]),
        "sideEffectsCommon": clean_list(as_list(side_effects.get("common")) or fallback_effects["common"]),
        "sideEffectsSerious": clean_list(as_list(side_effects.get("serious")) or fallback_effects["serious"]),
        "emergencySignals": clean_list(EMERGENCY_SIGNALS),
    }

    guide["evidenceProfile"] = build_evidence_profile(overall, ids)
    guide["communityReports"] = {
        "included": True,
        "confidence": COMMUNITY_CONFIDENCE,
        "summary": clean_list(fill_all(COMMUNITY_SUMMARY, name)),
        "safetyCaution": clean_line(COMMUNITY_SAFETY_CAUTION),
        "sourcePolicy": COMMUNITY_SOURCE_POLICY,
    }
    return guide


def guide_profile(guide: Guide) -> Optional[str]:
    """Template profile for reporting; ``None`` when the guide has no slug."""
    if not normalize(guide.get("slug")):
        return None
    return classify_profile(ensure_taxonomy(guide), guide.get("status"))


__all__ = [
    "citation_ids",
    "display_name",
    "ensure_taxonomy",
    "is_blend",
    "resolve_display_title",
    "enrich_enhanced_schema",
    "enrich_guide_depth",
    "build_evidence_profile",
    "enrich_legal_safe_depth",
    "guide_profile",
]
