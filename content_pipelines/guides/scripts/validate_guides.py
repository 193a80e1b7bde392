#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Schema and content-safety validator for the guide corpus.

``validate_guides`` is pure: it never mutates its input, never short-circuits, and
returns every violation as an ordered list of human-readable strings. An empty
list means the corpus may be handed to the renderer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Container, Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from ..constants import (
    ACRONYM_GUIDES,
    ALLOWED_CLASS_TAGS,
    ALLOWED_EVIDENCE_CONFIDENCE,
    ALLOWED_FORMAT_TAGS,
    ALLOWED_REGULATORY_CLASSIFICATIONS,
    ALLOWED_ROUTE_TAGS,
    ALLOWED_STATUS,
    ALLOWED_STATUS_TAGS,
    ALLOWED_VOICE_PROFILES,
    COMMUNITY_CONFIDENCE,
    COMMUNITY_SOURCE_POLICY,
    CURRENT_SCHEMA_VERSION,
    DISPLAY_TITLE_MAX_CHARS,
    EVIDENCE_SECTION_KEYS,
    PRIORITY_SLUGS,
)
from ...base import current_schema_version
from ...utils import is_valid_slug
from .aho_guides import find_banned_phrases
from .dose_guides import has_dose_notation
from .lint_guides import has_social_link, legal_issues
from .text_utils_guides import CITATION_ID_RX, CITATION_MARKER_RX, DATE_RX, URL_RX, as_dict, as_list

# Fields each schema version introduces; a guide at version n needs every list up to n.
REQUIRED_FIELDS_BY_VERSION: Dict[int, Tuple[str, ...]] = {
    0: ("slug", "title", "aliases", "category", "status", "metaDescription", "citations", "lastReviewed", "version"),
    1: (
        "displayTitle", "subtitle", "heroSummary", "acronymInfo", "composition", "taxonomy",
        "voiceProfile", "dosingSection", "trackingSignals", "safetyFlags", "providerQuestions",
    ),
    2: ("useCases", "candidateProfile", "avoidanceFlags", "sideEffects"),
    3: ("regulatoryContext", "dosingFramework", "evidenceProfile", "communityReports", "riskScreen"),
}

MIN_LENGTHS = {
    "subtitle": 12,
    "heroSummary": 40,
    "legalNotice": 20,
    "uncertaintyStatement": 20,
    "safetyCaution": 20,
    "rationale": 12,
}

CITATION_FIELDS = ("id", "title", "url", "sourceType", "publisher", "publishedDate", "accessedDate")
DOSING_SECTION_LISTS = ("protocolPatterns", "monitoringWindows", "realWorldPatterns", "escalationBoundaries")
FRAMEWORK_LISTS = ("pacePrinciples", "holdTriggers", "resumeCriteria", "trackingFocus")
RISK_SCREEN_LISTS = (
    "whoMayDiscussWithProvider",
    "whoShouldAvoidOrPause",
    "sideEffectsCommon",
    "sideEffectsSerious",
    "emergencySignals",
)
TAXONOMY_CHECKS = (
    ("classTags", ALLOWED_CLASS_TAGS),
    ("statusTags", ALLOWED_STATUS_TAGS),
    ("routeTags", ALLOWED_ROUTE_TAGS),
    ("formatTags", ALLOWED_FORMAT_TAGS),
)


def is_iso_date(value: object) -> bool:
    """``YYYY-MM-DD`` that is also a real calendar date."""
    if not isinstance(value, str) or not DATE_RX.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def required_fields(level: int) -> List[str]:
    fields: List[str] = []
    for version in sorted(REQUIRED_FIELDS_BY_VERSION):
        if version <= level:
            fields.extend(REQUIRED_FIELDS_BY_VERSION[version])
    return fields


def _nonempty_str(value: object, min_len: int = 1) -> bool:
    return isinstance(value, str) and len(value.strip()) >= min_len


def _nonempty_list(value: object) -> bool:
    return isinstance(value, list) and len(value) > 0


def _is_one_of(value: object, allowed: Container[str]) -> bool:
    return isinstance(value, str) and value in allowed


def _label(index: int, guide: Mapping[str, Any]) -> str:
    slug = guide.get("slug")
    if isinstance(slug, str) and slug:
        return f"guide[{index}] ({slug})"
    return f"guide[{index}]"


def _walk_strings(value: Any, path: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(path, text)`` for every string nested in ``value``."""
    if isinstance(value, str):
        yield path, value
    elif isinstance(value, Mapping):
        for key, item in value.items():
            yield from _walk_strings(item, f"{path}.{key}" if path else str(key))
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _walk_strings(item, f"{path}[{index}]")


def dosing_adjacent_lines(guide: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """Every line that must carry exactly one citation marker, with its field path."""
    lines: List[Tuple[str, Any]] = []
    section = as_dict(guide.get("dosingSection"))
    if "overview" in section:
        lines.append(("dosingSection.overview", section.get("overview")))
    for key in DOSING_SECTION_LISTS:
        for index, line in enumerate(as_list(section.get(key))):
            lines.append((f"dosingSection.{key}[{index}]", line))
    framework = as_dict(guide.get("dosingFramework"))
    for key in FRAMEWORK_LISTS:
        for index, line in enumerate(as_list(framework.get(key))):
            lines.append((f"dosingFramework.{key}[{index}]", line))
    return [(path, line if isinstance(line, str) else "") for path, line in lines]


def legal_lint_lines(guide: Mapping[str, Any]) -> List[Tuple[str, str]]:
    framework = as_dict(guide.get("dosingFramework"))
    community = as_dict(guide.get("communityReports"))
    risk = as_dict(guide.get("riskScreen"))
    lines: List[Tuple[str, Any]] = []
    for key in FRAMEWORK_LISTS:
        lines.extend((f"dosingFramework.{key}[{i}]", line) for i, line in enumerate(as_list(framework.get(key))))
    lines.append(("dosingFramework.uncertaintyStatement", framework.get("uncertaintyStatement")))
    lines.extend((f"communityReports.summary[{i}]", line) for i, line in enumerate(as_list(community.get("summary"))))
    lines.append(("communityReports.safetyCaution", community.get("safetyCaution")))
    for key in RISK_SCREEN_LISTS:
        lines.extend((f"riskScreen.{key}[{i}]", line) for i, line in enumerate(as_list(risk.get(key))))
    return [(path, line if isinstance(line, str) else "") for path, line in lines]


def composed_text(guide: Mapping[str, Any]) -> str:
    """Editorial text blob scanned for banned boilerplate."""
    parts: List[Any] = [guide.get("displayTitle"), guide.get("subtitle"), guide.get("heroSummary")]
    for key in ("useCases", "candidateProfile", "avoidanceFlags", "trackingSignals", "safetyFlags", "providerQuestions"):
        parts.extend(as_list(guide.get(key)))
    side_effects = as_dict(guide.get("sideEffects"))
    parts.extend(as_list(side_effects.get("common")))
    parts.extend(as_list(side_effects.get("serious")))
    parts.extend(line for _, line in legal_lint_lines(guide))
    parts.extend(line for _, line in dosing_adjacent_lines(guide))
    return " ".join(part for part in parts if isinstance(part, str))


# --- per-block checks ---------------------------------------------------------

def _check_identity(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    if not _nonempty_str(guide.get("title")):
        errors.append(f"{label} title must be a non-empty string.")
    if not isinstance(guide.get("aliases"), list):
        errors.append(f"{label} aliases must be an array.")
    if not _is_one_of(guide.get("status"), ALLOWED_STATUS):
        errors.append(f"{label} has unsupported status: {guide.get('status')}")
    if not is_iso_date(guide.get("lastReviewed")):
        errors.append(f"{label} lastReviewed must be YYYY-MM-DD.")
    if "schemaVersion" in guide:
        value = guide.get("schemaVersion")
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= CURRENT_SCHEMA_VERSION:
            errors.append(f"{label} schemaVersion must be an integer between 0 and {CURRENT_SCHEMA_VERSION}.")


def _check_display(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    title = guide.get("displayTitle")
    if not _nonempty_str(title):
        errors.append(f"{label} displayTitle must be a non-empty string.")
    else:
        if len(title) > DISPLAY_TITLE_MAX_CHARS:
            errors.append(f"{label} displayTitle is too long ({len(title)} chars).")
        if has_dose_notation(title):
            errors.append(f"{label} displayTitle includes dosage notation and should be cleaned.")
    if not _nonempty_str(guide.get("subtitle"), MIN_LENGTHS["subtitle"]):
        errors.append(f"{label} subtitle must be a readable non-empty sentence.")
    if not _nonempty_str(guide.get("heroSummary"), MIN_LENGTHS["heroSummary"]):
        errors.append(f"{label} heroSummary must be at least {MIN_LENGTHS['heroSummary']} characters.")
    if not _is_one_of(guide.get("voiceProfile"), ALLOWED_VOICE_PROFILES):
        errors.append(f"{label} voiceProfile must be one of: {', '.join(ALLOWED_VOICE_PROFILES)}.")


def _check_acronym(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    info = guide.get("acronymInfo")
    if not isinstance(info, dict):
        errors.append(f"{label} acronymInfo must be an object.")
        return
    if not isinstance(info.get("isVendorDefined"), bool):
        errors.append(f"{label} acronymInfo.isVendorDefined must be boolean.")
    slug = guide.get("slug")
    expected = ACRONYM_GUIDES.get(slug) if isinstance(slug, str) else None
    if not expected:
        return
    if guide.get("displayTitle") != expected:
        errors.append(f"{label} expected displayTitle to be {expected}.")
    if info.get("code") != expected:
        errors.append(f"{label} acronymInfo.code must be {expected}.")
    if info.get("isVendorDefined") is not True:
        errors.append(f"{label} acronymInfo.isVendorDefined must be true for {expected}.")
    note = info.get("note")
    if not isinstance(note, str) or "vendor acronym" not in note.lower():
        errors.append(f"{label} acronymInfo.note must explain vendor-defined/undisclosed meaning.")


def _check_composition_and_taxonomy(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    composition = guide.get("composition")
    if not isinstance(composition, list):
        errors.append(f"{label} composition must be an array.")
        composition = None
    else:
        for index, part in enumerate(composition):
            part_label = f"{label}.composition[{index}]"
            if not isinstance(part, dict):
                errors.append(f"{part_label} must be an object.")
                continue
            if not _nonempty_str(part.get("name")):
                errors.append(f"{part_label}.name must be a non-empty string.")
            if part.get("amount") is not None and not isinstance(part.get("amount"), str):
                errors.append(f"{part_label}.amount must be string or null.")

    taxonomy = guide.get("taxonomy")
    if not isinstance(taxonomy, dict):
        errors.append(f"{label} taxonomy must be an object.")
        return
    for field, allowed in TAXONOMY_CHECKS:
        values = taxonomy.get(field)
        if not _nonempty_list(values):
            errors.append(f"{label}.taxonomy.{field} must be a non-empty array.")
            continue
        for value in values:
            if not _is_one_of(value, allowed):
                errors.append(f"{label}.taxonomy.{field} has unsupported value: {value}")
    for field in ("routeTags", "formatTags"):
        values = taxonomy.get(field)
        if _nonempty_list(values) and len(values) != 1:
            errors.append(f"{label}.taxonomy.{field} must hold exactly one value.")
    if not isinstance(taxonomy.get("isPeptideLike"), bool):
        errors.append(f"{label}.taxonomy.isPeptideLike must be boolean.")
    if composition is not None and _nonempty_list(taxonomy.get("formatTags")):
        blend = "Blend" in taxonomy["formatTags"]
        if blend != (len(composition) > 1):
            errors.append(f"{label}.taxonomy.formatTags must be Blend exactly when composition has more than one part.")


def _check_dosing_section(guide: Mapping[str, Any], label: str, level: int, errors: List[str]) -> None:
    section = guide.get("dosingSection")
    if not isinstance(section, dict):
        errors.append(f"{label} dosingSection must be an object.")
        return
    if not _nonempty_str(section.get("overview")):
        errors.append(f"{label} dosingSection.overview must be a non-empty string.")
    keys = list(DOSING_SECTION_LISTS[:2])
    if level >= 2 or any(key in section for key in DOSING_SECTION_LISTS[2:]):
        keys.extend(DOSING_SECTION_LISTS[2:])
    for key in keys:
        if not _nonempty_list(section.get(key)):
            errors.append(f"{label} dosingSection.{key} must be a non-empty array.")


def _check_lists(guide: Mapping[str, Any], label: str, fields: Sequence[str], errors: List[str]) -> None:
    for field in fields:
        if not _nonempty_list(guide.get(field)):
            errors.append(f"{label} {field} must be a non-empty array.")


def _check_side_effects(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    side_effects = guide.get("sideEffects")
    if not isinstance(side_effects, dict):
        errors.append(f"{label} sideEffects must be an object.")
        return
    for key in ("common", "serious"):
        if not _nonempty_list(side_effects.get(key)):
            errors.append(f"{label} sideEffects.{key} must be a non-empty array.")


def _check_regulatory(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    context = guide.get("regulatoryContext")
    if not isinstance(context, dict):
        errors.append(f"{label} regulatoryContext must be an object.")
        return
    if not _is_one_of(context.get("classification"), ALLOWED_REGULATORY_CLASSIFICATIONS):
        errors.append(f"{label}.regulatoryContext.classification is invalid: {context.get('classification')}")
    if not _nonempty_str(context.get("plainLanguageStatus")):
        errors.append(f"{label}.regulatoryContext.plainLanguageStatus must be a non-empty string.")
    if not _nonempty_str(context.get("legalNotice"), MIN_LENGTHS["legalNotice"]):
        errors.append(f"{label}.regulatoryContext.legalNotice must be a readable sentence.")


def _check_framework(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    framework = guide.get("dosingFramework")
    if not isinstance(framework, dict):
        errors.append(f"{label} dosingFramework must be an object.")
        return
    for key in FRAMEWORK_LISTS:
        if not _nonempty_list(framework.get(key)):
            errors.append(f"{label}.dosingFramework.{key} must be a non-empty array.")
    if not _nonempty_str(framework.get("uncertaintyStatement"), MIN_LENGTHS["uncertaintyStatement"]):
        errors.append(f"{label}.dosingFramework.uncertaintyStatement must be a readable sentence.")


def _check_evidence(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    profile = guide.get("evidenceProfile")
    if not isinstance(profile, dict):
        errors.append(f"{label} evidenceProfile must be an object.")
        return
    allowed = ", ".join(ALLOWED_EVIDENCE_CONFIDENCE)
    if not _is_one_of(profile.get("overall"), ALLOWED_EVIDENCE_CONFIDENCE):
        errors.append(f"{label}.evidenceProfile.overall must be one of {allowed}")
    sections = profile.get("bySection")
    if not _nonempty_list(sections):
        errors.append(f"{label}.evidenceProfile.bySection must be a non-empty array.")
    else:
        seen: Dict[str, int] = {}
        for index, entry in enumerate(sections):
            section_label = f"{label}.evidenceProfile.bySection[{index}]"
            if not isinstance(entry, dict):
                errors.append(f"{section_label} must be an object.")
                continue
            key = entry.get("sectionKey")
            if not _nonempty_str(key):
                errors.append(f"{section_label}.sectionKey must be a non-empty string.")
            else:
                seen[key] = seen.get(key, 0) + 1
                if key not in EVIDENCE_SECTION_KEYS:
                    errors.append(f"{section_label}.sectionKey is unsupported: {key}")
            if not _is_one_of(entry.get("confidence"), ALLOWED_EVIDENCE_CONFIDENCE):
                errors.append(f"{section_label}.confidence must be one of {allowed}")
            if not _nonempty_str(entry.get("rationale"), MIN_LENGTHS["rationale"]):
                errors.append(f"{section_label}.rationale must be a readable sentence.")
            if not _nonempty_list(entry.get("citationIds")):
                errors.append(f"{section_label}.citationIds must be a non-empty array.")
        for key in EVIDENCE_SECTION_KEYS:
            if key not in seen:
                errors.append(f"{label}.evidenceProfile.bySection is missing required sectionKey: {key}")
            elif seen[key] > 1:
                errors.append(f"{label}.evidenceProfile.bySection repeats sectionKey: {key}")
    if not _nonempty_list(profile.get("dataGaps")):
        errors.append(f"{label}.evidenceProfile.dataGaps must be a non-empty array.")
    if profile.get("overall") in ("low", "insufficient"):
        statement = as_dict(guide.get("dosingFramework")).get("uncertaintyStatement")
        if not _nonempty_str(statement, MIN_LENGTHS["uncertaintyStatement"]):
            errors.append(f"{label} low/insufficient evidence requires a non-empty dosingFramework.uncertaintyStatement.")


def _check_community(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    reports = guide.get("communityReports")
    if not isinstance(reports, dict):
        errors.append(f"{label} communityReports must be an object.")
        return
    included = reports.get("included")
    if not isinstance(included, bool):
        errors.append(f"{label}.communityReports.included must be boolean.")
    if reports.get("confidence") != COMMUNITY_CONFIDENCE:
        errors.append(f'{label}.communityReports.confidence must be fixed to "{COMMUNITY_CONFIDENCE}".')
    summary = reports.get("summary")
    if not isinstance(summary, list):
        errors.append(f"{label}.communityReports.summary must be an array.")
    elif included and not summary:
        errors.append(f"{label}.communityReports.summary must be non-empty when included is true.")
    if included and not _nonempty_str(reports.get("safetyCaution"), MIN_LENGTHS["safetyCaution"]):
        errors.append(f"{label}.communityReports.safetyCaution must be present when included is true.")
    if reports.get("sourcePolicy") != COMMUNITY_SOURCE_POLICY:
        errors.append(f'{label}.communityReports.sourcePolicy must be "{COMMUNITY_SOURCE_POLICY}".')
    text = " ".join(line for line in as_list(summary) + [reports.get("safetyCaution")] if isinstance(line, str))
    if has_social_link(text):
        errors.append(f"{label}.communityReports contains direct social/forum links which are disallowed.")


def _check_risk_screen(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    risk = guide.get("riskScreen")
    if not isinstance(risk, dict):
        errors.append(f"{label} riskScreen must be an object.")
        return
    for key in RISK_SCREEN_LISTS:
        if not _nonempty_list(risk.get(key)):
            errors.append(f"{label}.riskScreen.{key} must be a non-empty array.")


def _check_citations(guide: Mapping[str, Any], label: str, errors: List[str]) -> Set[str]:
    """Citation shape checks; returns the ids usable for cross-reference resolution."""
    citations = guide.get("citations")
    ids: Set[str] = set()
    if not _nonempty_list(citations):
        errors.append(f"{label} citations must be a non-empty array.")
        return ids
    for index, citation in enumerate(citations):
        citation_label = f"{label}.citations[{index}]"
        if not isinstance(citation, dict):
            errors.append(f"{citation_label} must be an object.")
            continue
        for field in CITATION_FIELDS:
            if not citation.get(field):
                errors.append(f"{citation_label} missing field: {field}")
        citation_id = citation.get("id")
        if citation_id:
            if not isinstance(citation_id, str) or not CITATION_ID_RX.match(citation_id):
                errors.append(f"{citation_label} id must look like C<n>: {citation_id}")
            elif citation_id in ids:
                errors.append(f"{label} has duplicate citation id: {citation_id}")
            else:
                ids.add(citation_id)
        url = citation.get("url")
        if url and (not isinstance(url, str) or not URL_RX.match(url)):
            errors.append(f"{citation_label} url must be absolute http(s): {url}")
        for field in ("publishedDate", "accessedDate"):
            if citation.get(field) and not is_iso_date(citation.get(field)):
                errors.append(f"{citation_label} {field} must be YYYY-MM-DD.")
    return ids


def _check_cross_references(guide: Mapping[str, Any], label: str, ids: Set[str], errors: List[str]) -> None:
    for path, text in _walk_strings({k: v for k, v in guide.items() if k != "citations"}, ""):
        for marker in dict.fromkeys(CITATION_MARKER_RX.findall(text)):
            if marker not in ids:
                errors.append(f"{label} {path} references {marker} but no matching citation exists.")

    sections = as_list(as_dict(guide.get("evidenceProfile")).get("bySection"))
    for index, section in enumerate(sections):
        for citation_id in as_list(as_dict(section).get("citationIds")):
            if not _is_one_of(citation_id, ids):
                errors.append(
                    f"{label}.evidenceProfile.bySection[{index}] references missing citation id: {citation_id}"
                )

    for path, line in dosing_adjacent_lines(guide):
        markers = CITATION_MARKER_RX.findall(line)
        if not markers:
            errors.append(f"{label} {path} is missing citation marker [C#].")
        elif len(markers) > 1:
            errors.append(f"{label} {path} carries more than one citation marker.")


def _check_content_safety(guide: Mapping[str, Any], label: str, errors: List[str]) -> None:
    for path, line in legal_lint_lines(guide):
        for issue in legal_issues(line):
            errors.append(f"{label} {path} contains {issue}.")
    for phrase in find_banned_phrases(composed_text(guide)):
        errors.append(f'{label} contains banned boilerplate phrase: "{phrase}"')


def validate_guide(
    guide: Mapping[str, Any],
    index: int,
    min_schema_version: int = CURRENT_SCHEMA_VERSION,
) -> List[str]:
    """Every single-guide violation, in check order."""
    label = _label(index, guide)
    errors: List[str] = []
    level = min(max(min_schema_version, current_schema_version(guide)), CURRENT_SCHEMA_VERSION)

    for field in required_fields(level):
        if field not in guide:
            errors.append(f"{label} missing required field: {field}")

    def wanted(version: int, *fields: str) -> bool:
        return level >= version or any(field in guide for field in fields)

    _check_identity(guide, label, errors)
    if wanted(1, "displayTitle", "subtitle", "heroSummary", "voiceProfile"):
        _check_display(guide, label, errors)
    if wanted(1, "acronymInfo"):
        _check_acronym(guide, label, errors)
    if wanted(1, "composition", "taxonomy"):
        _check_composition_and_taxonomy(guide, label, errors)
    if wanted(1, "dosingSection"):
        _check_dosing_section(guide, label, level, errors)
    if wanted(1, "trackingSignals", "safetyFlags", "providerQuestions"):
        _check_lists(guide, label, ("trackingSignals", "safetyFlags", "providerQuestions"), errors)
    if wanted(2, "useCases", "candidateProfile", "avoidanceFlags"):
        _check_lists(guide, label, ("useCases", "candidateProfile", "avoidanceFlags"), errors)
    if wanted(2, "sideEffects"):
        _check_side_effects(guide, label, errors)
    if wanted(3, "regulatoryContext"):
        _check_regulatory(guide, label, errors)
    if wanted(3, "dosingFramework"):
        _check_framework(guide, label, errors)
    if wanted(3, "evidenceProfile"):
        _check_evidence(guide, label, errors)
    if wanted(3, "communityReports"):
        _check_community(guide, label, errors)
    if wanted(3, "riskScreen"):
        _check_risk_screen(guide, label, errors)

    ids = _check_citations(guide, label, errors)
    _check_cross_references(guide, label, ids, errors)
    _check_content_safety(guide, label, errors)
    return errors


def validate_updates(updates: Any, slugs: Set[str]) -> List[str]:
    """Checks for the optional updates feed."""
    if not isinstance(updates, list):
        return ["updates.json must be an array."]
    errors: List[str] = []
    seen: Set[str] = set()
    for index, update in enumerate(updates):
        label = f"update[{index}]"
        if not isinstance(update, dict):
            errors.append(f"{label} must be an object.")
            continue
        update_id = update.get("id")
        if not _nonempty_str(update_id):
            errors.append(f"{label} id must be a non-empty string.")
        elif update_id in seen:
            errors.append(f"{label} has duplicate id: {update_id}")
        else:
            seen.add(update_id)
        if not is_iso_date(update.get("date")):
            errors.append(f"{label} date must be YYYY-MM-DD.")
        for field in ("title", "summary", "version"):
            if not _nonempty_str(update.get(field)):
                errors.append(f"{label} {field} must be a non-empty string.")
        impacted = update.get("impactedGuides")
        if not _nonempty_list(impacted):
            errors.append(f"{label} impactedGuides must be a non-empty array.")
            continue
        for slug in impacted:
            if not _is_one_of(slug, slugs):
                errors.append(f"{label} impactedGuides references unknown guide slug: {slug}")
    return errors


def validate_guides(
    guides: Any,
    updates: Optional[Any] = None,
    min_schema_version: int = CURRENT_SCHEMA_VERSION,
    priority_slugs: Sequence[str] = PRIORITY_SLUGS,
) -> List[str]:
    """
    Validate the whole corpus and return the ordered list of violations.

    Per-guide checks run first (in corpus order), then the cross-guide priority
    checks, then the updates feed when one is supplied.
    """
    if not isinstance(guides, list) or not guides:
        return ["guides.json must be a non-empty array."]

    errors: List[str] = []
    slugs: Set[str] = set()
    priority = set(priority_slugs)
    hero_owner: Dict[str, str] = {}

    for index, guide in enumerate(guides):
        if not isinstance(guide, dict):
            errors.append(f"guide[{index}] must be an object.")
            continue
        label = _label(index, guide)
        slug = guide.get("slug")
        if not is_valid_slug(slug):
            errors.append(f"{label} has invalid slug: {slug}")
        elif slug in slugs:
            errors.append(f"{label} has duplicate slug: {slug}")
        else:
            slugs.add(slug)

        errors.extend(validate_guide(guide, index, min_schema_version))

        hero = guide.get("heroSummary")
        if _is_one_of(slug, priority) and isinstance(hero, str) and hero.strip():
            key = hero.strip().lower()
            owner = hero_owner.get(key)
            if owner and owner != slug:
                errors.append(f"Priority hero intro is duplicated between {owner} and {slug}.")
            hero_owner.setdefault(key, slug)

    for slug in priority_slugs:
        if slug not in slugs:
            errors.append(f"Priority slug missing from guides.json: {slug}")

    if updates is not None:
        errors.extend(validate_updates(updates, slugs))
    return errors


__all__ = [
    "REQUIRED_FIELDS_BY_VERSION",
    "MIN_LENGTHS",
    "is_iso_date",
    "required_fields",
    "dosing_adjacent_lines",
    "legal_lint_lines",
    "composed_text",
    "validate_guide",
    "validate_updates",
    "validate_guides",
]
