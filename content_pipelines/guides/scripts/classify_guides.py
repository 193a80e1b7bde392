#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Rule-table classifier for guide taxonomy, template profile, voice and regulatory context.

Rules are evaluated top to bottom and record a boolean flag each; later rules may
read flags written by earlier ones (the injectable rule consults the peptide,
hormone, GLP and oral flags). Class tags are then emitted in the fixed enum order,
so the output never depends on rule evaluation order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..constants import CLASS_TAG_ORDER, STATUS_TAG_MAP
from .text_utils_guides import as_list, normalize, signal_blob

MINERAL_SLUGS = frozenset({
    "magnesium", "zinc", "iron", "selenium", "iodine", "calcium", "potassium", "chromium",
    "copper", "manganese", "molybdenum", "phosphorus", "sodium", "chloride", "boron",
})

VITAMIN_SLUGS = frozenset({"b12", "vitamin-d3", "melatonin"})

GLP_FAMILY_SLUGS = frozenset({
    "semaglutide", "tirzepatide", "retatrutide", "cagrisema", "dulaglutide", "liraglutide",
    "lixisenatide", "exenatide", "beinaglutide", "orforglipron", "danuglipron", "ecnoglutide",
    "efpeglenatide", "mazdutide", "survodutide", "cagrilintide",
    "cagrilintide-5mg-plus-semaglutide-5mg-blend", "retatrutide-5mg-plus-cagrilintide-5mg-blend",
})

ORAL_HINT_SLUGS = frozenset({
    "orforglipron", "danuglipron", "metformin", "tesofensine", "anavar", "anadrol", "arimidex",
    "clomid", "letrozole", "telmisartan", "finasteride", "fluoxymesterone-halotestin",
    "fluoxymesterone", "dianabol", "turinabol", "superdrol", "sildenafil-viagra", "tadalafil-cialis",
    "tamoxifen-nolvadex", "androxal-enclomiphene", "isotretinoin", "dutasteride", "minoxidil",
})

HORMONE_HINT_SLUGS = frozenset({
    "hcg", "hmg", "gonadorelin", "insulin", "kisspeptin-10", "oxytocin-acetate", "t3", "t4",
})

GLP_NAME_RX = re.compile(
    r"(semaglutide|tirzepatide|retatrutide|cagrilintide|dulaglutide|liraglutide|lixisenatide|"
    r"exenatide|orforglipron|danuglipron|mazdutide|survodutide|beinaglutide|ecnoglutide|"
    r"efpeglenatide|cagrisema)"
)
GLP_CATEGORY_RX = re.compile(r"(glp|gip|incretin)")
HORMONE_NAME_RX = re.compile(r"(gonadorelin|oxytocin|hcg|hmg|insulin|kisspeptin)")
PEPTIDE_NAME_RX = re.compile(
    r"(peptide|ghrp|cjc|ipamorelin|tesamorelin|sermorelin|tb-?500|bpc|selank|semax|thymosin|"
    r"thymulin|epithalon|mots-c|ss-31|kisspeptin|kpv|foxo4|dsip|pnc-?27|ll37|adipotide|ara-290|"
    r"ace-031|melanotan|pt-141|ghk|aod-?9604|fragment-?176-?191|gonadorelin|cagrilintide|"
    r"retatrutide|survodutide|mazdutide|tirzepatide|semaglutide|dulaglutide|liraglutide|"
    r"lixisenatide|exenatide|ecnoglutide|efpeglenatide|beinaglutide|hexarelin|epo)",
    re.I,
)
PEPTIDE_COMPONENT_RX = re.compile(r"\b(bpc|tb|ghk|kpv|cjc|ipamorelin|semax|selank|tesamorelin)\b", re.I)
ORAL_FORM_RX = re.compile(r"(capsule|tablet|oral)")
ORAL_INCRETIN_RX = re.compile(r"(orforglipron|danuglipron|metformin)")
INJECTABLE_FORM_RX = re.compile(r"(inject|vial|suspension)")
SUPPORT_CATEGORY_RX = re.compile(r"support|antioxidant|coenzyme|amino acid|weight loss blend")
UNREGULATED_CATEGORY_RX = re.compile(r"(sarm|anabolic|steroid|stack|blend|research|performance)")

CAUTION_STATUSES = frozenset({"experimental", "discontinued", "regional-approval"})


@dataclass
class GuideSignals:
    """Classifier input distilled from one guide record."""

    slug: str
    title: str
    category: str
    status: str
    aliases: Sequence[str] = ()
    composition: Sequence[Mapping[str, Any]] = ()
    flags: Dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_guide(cls, guide: Mapping[str, Any], composition: Sequence[Mapping[str, Any]]) -> "GuideSignals":
        return cls(
            slug=normalize(guide.get("slug")),
            title=normalize(guide.get("title")),
            category=normalize(guide.get("category")).lower(),
            status=normalize(guide.get("status")),
            aliases=[normalize(alias) for alias in as_list(guide.get("aliases"))],
            composition=list(composition or []),
        )

    @property
    def text(self) -> str:
        return signal_blob(self.slug, self.title, self.category, list(self.aliases))

    def has(self, flag: str) -> bool:
        return self.flags.get(flag, False)


@dataclass(frozen=True)
class ClassRule:
    """Sets ``flag`` from ``predicate``; ``tag`` is the class tag the flag emits (if any)."""

    flag: str
    predicate: Callable[[GuideSignals], bool]
    tag: Optional[str] = None


def _is_mineral(s: GuideSignals) -> bool:
    return s.slug in MINERAL_SLUGS or bool(re.search(r"\bmineral\b", s.category))


def _is_vitamin(s: GuideSignals) -> bool:
    return s.slug in VITAMIN_SLUGS or bool(re.search(r"\bvitamin\b", s.category))


def _is_glp(s: GuideSignals) -> bool:
    return (
        s.slug in GLP_FAMILY_SLUGS
        or bool(GLP_CATEGORY_RX.search(s.category))
        or bool(GLP_NAME_RX.search(s.text))
    )


def _is_hormone(s: GuideSignals) -> bool:
    return (
        s.slug in HORMONE_HINT_SLUGS
        or bool(re.search(r"\bhormone\b", s.category))
        or bool(HORMONE_NAME_RX.search(s.text))
    )


def _is_peptide(s: GuideSignals) -> bool:
    if re.search(r"\bpeptide\b", s.category) or PEPTIDE_NAME_RX.search(s.text):
        return True
    return any(PEPTIDE_COMPONENT_RX.search(normalize(part.get("name"))) for part in s.composition)


def _is_oral(s: GuideSignals) -> bool:
    text = s.text
    return (
        s.slug in ORAL_HINT_SLUGS
        or bool(re.search(r"\boral compound\b", s.category))
        or bool(ORAL_FORM_RX.search(text))
        or (s.has("glp") and bool(ORAL_INCRETIN_RX.search(text)))
    )


def _is_injectable(s: GuideSignals) -> bool:
    oral = s.has("oral")
    return (
        bool(re.search(r"\binjectable compound\b", s.category))
        or (s.has("peptide") and not oral)
        or (s.has("hormone") and not oral)
        or (s.has("glp") and not oral)
        or bool(INJECTABLE_FORM_RX.search(s.text))
    )


def _is_supportive(s: GuideSignals) -> bool:
    return (
        s.status in ("support", "nutrient")
        or bool(SUPPORT_CATEGORY_RX.search(s.category))
        or s.has("vitamin")
        or s.has("mineral")
    )


CLASS_RULES: List[ClassRule] = [
    ClassRule("mineral", _is_mineral, "Mineral"),
    ClassRule("vitamin", _is_vitamin, "Vitamin"),
    ClassRule("glp", _is_glp, "GLP-1/GIP"),
    ClassRule("hormone", _is_hormone, "Hormone"),
    ClassRule("peptide", _is_peptide, "Peptide"),
    ClassRule("oral", _is_oral, "Oral Compound"),
    ClassRule("injectable", _is_injectable, "Injectable Compound"),
    ClassRule("supportive", _is_supportive, "Supportive"),
]


def evaluate_rules(signals: GuideSignals, rules: Sequence[ClassRule] = CLASS_RULES) -> Dict[str, bool]:
    """Run the rule table in order, recording every flag on ``signals``."""
    for rule in rules:
        signals.flags[rule.flag] = bool(rule.predicate(signals))
    return dict(signals.flags)


def detect_taxonomy(guide: Mapping[str, Any], composition: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    """Taxonomy block: class/status/route/format tags plus the peptide-like flag."""
    signals = GuideSignals.from_guide(guide, composition)
    flags = evaluate_rules(signals)
    matched = {rule.tag for rule in CLASS_RULES if rule.tag and flags.get(rule.flag)}
    class_tags = [tag for tag in CLASS_TAG_ORDER if tag in matched] or ["Supportive"]

    route = "Mixed/Unknown"
    if flags["injectable"] and not flags["oral"]:
        route = "Injectable"
    elif flags["oral"] and not flags["injectable"]:
        route = "Oral"

    return {
        "classTags": class_tags,
        "routeTags": [route],
        "statusTags": [STATUS_TAG_MAP.get(signals.status, "Support/Nutrient")],
        "formatTags": ["Blend" if len(composition or []) > 1 else "Single Compound"],
        "isPeptideLike": flags["peptide"],
    }


def _tag_set(taxonomy: Optional[Mapping[str, Any]]) -> set:
    tags = as_list((taxonomy or {}).get("classTags"))
    return {normalize(tag).lower() for tag in tags}


def classify_profile(taxonomy: Optional[Mapping[str, Any]], status: object = "") -> str:
    """Template profile used by the depth and legal-safe passes."""
    tags = _tag_set(taxonomy)
    peptide_like = "peptide" in tags or bool((taxonomy or {}).get("isPeptideLike"))
    if "glp-1/gip" in tags:
        return "glp"
    if "mineral" in tags or "vitamin" in tags:
        return "nutrient"
    if "hormone" in tags:
        return "hormone"
    if normalize(status).lower() == "experimental" and peptide_like:
        return "peptide"
    if peptide_like:
        return "peptide"
    if "oral compound" in tags:
        return "oral"
    if "injectable compound" in tags:
        return "injectable"
    return "supportive"


def determine_voice_profile(status: object, taxonomy: Optional[Mapping[str, Any]]) -> str:
    if normalize(status) in CAUTION_STATUSES:
        return "caution"
    tags = _tag_set(taxonomy)
    if "glp-1/gip" in tags or "hormone" in tags:
        return "clinical"
    if tags & {"vitamin", "mineral", "supportive"}:
        return "support"
    return "coach"


def regulatory_classification(status: object, category: object) -> str:
    status = normalize(status)
    if status == "approved":
        return "approved_label"
    if status == "regional-approval":
        return "regional_label"
    if status == "nutrient":
        return "nutrient_support"
    if status == "discontinued":
        return "off_label_context"
    if status == "experimental":
        if UNREGULATED_CATEGORY_RX.search(normalize(category).lower()):
            return "unregulated_market"
        return "investigational"
    return "off_label_context"


def overall_confidence(classification: str) -> str:
    if classification in ("approved_label", "nutrient_support"):
        return "moderate"
    if classification == "unregulated_market":
        return "insufficient"
    return "low"


__all__ = [
    "MINERAL_SLUGS",
    "VITAMIN_SLUGS",
    "GLP_FAMILY_SLUGS",
    "ORAL_HINT_SLUGS",
    "HORMONE_HINT_SLUGS",
    "GuideSignals",
    "ClassRule",
    "CLASS_RULES",
    "evaluate_rules",
    "detect_taxonomy",
    "classify_profile",
    "determine_voice_profile",
    "regulatory_classification",
    "overall_confidence",
]
