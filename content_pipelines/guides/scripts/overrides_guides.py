#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Per-slug editorial overrides. Override text always wins over generated templates."""

from typing import Dict, Iterable, List

from ..constants import PRIORITY_SLUGS

# Priority slugs must all carry handcrafted subtitle + hero copy (checked before the schema pass writes).
HANDCRAFTED_PRIORITY: Dict[str, Dict[str, str]] = {
    "semaglutide": {
        "subtitle": "Weekly GLP-1 anchor protocol with appetite and GI trend tracking.",
        "hero": "Semaglutide works best when the weekly rhythm is boringly consistent. This guide focuses on the real-world cadence: dose day, appetite curve, GI tolerance windows, and clean notes your clinician can act on.",
    },
    "tirzepatide": {
        "subtitle": "Dual GIP/GLP-1 weekly protocol with phase-aware response tracking.",
        "hero": "Tirzepatide has a bigger response range than most people expect. The difference between noise and clarity is how you log week-to-week appetite return, GI tolerance, and energy shifts around each escalation step.",
    },
    "retatrutide": {
        "subtitle": "Investigational triple-agonist context with strict safety framing.",
        "hero": "Retatrutide conversation should start with uncertainty, not hype. Treat it like a high-variance investigational signal: conservative expectations, documented side effects, and zero self-directed escalation.",
    },
    "cagrisema": {
        "subtitle": "Combination pathway guide for layered appetite and tolerance patterns.",
        "hero": "CagriSema is not just Semaglutide plus one more thing. Combination therapies can change both appetite dynamics and side-effect profile, so this guide emphasizes structured comparison across cycles.",
    },
    "dulaglutide": {
        "subtitle": "Long-acting weekly GLP-1 with consistency-first tracking priorities.",
        "hero": "Dulaglutide rewards routine. If your logs keep shifting day-to-day, you lose the trend. This guide helps you keep adherence, GI response, and weight trajectory readable over long windows.",
    },
    "liraglutide": {
        "subtitle": "Daily GLP-1 protocol guide centered on adherence and site rotation.",
        "hero": "Liraglutide is a daily discipline game. The value is in repetition: same timing strategy, clean injection-site rotation, and symptom notes that do not blur into generic felt off entries.",
    },
    "lixisenatide": {
        "subtitle": "Shorter-acting GLP-1 daily guide with meal-timing awareness.",
        "hero": "With lixisenatide, meal timing and symptom timing can overlap fast. This page helps you separate drug effect from meal context so follow-up conversations stay concrete.",
    },
    "exenatide": {
        "subtitle": "Immediate vs extended-release GLP-1 workflow distinctions.",
        "hero": "Exenatide has two very different use patterns. If your notes do not reflect formulation and schedule differences, trend interpretation breaks. This guide keeps those pathways separate and clear.",
    },
    "beinaglutide": {
        "subtitle": "Region-specific GLP-1 context with approval-boundary cautions.",
        "hero": "Beinaglutide sits in a regional context, so good guidance means regulatory clarity first. This page frames what to verify before discussing protocol details.",
    },
    "orforglipron": {
        "subtitle": "Oral investigational incretin profile with cautious expectation setting.",
        "hero": "Orforglipron discussions usually fail when people treat trial headlines like finished clinical guidance. This guide keeps the focus on uncertainty, tolerability, and disciplined monitoring.",
    },
    "danuglipron": {
        "subtitle": "Investigational oral incretin context and adherence framing.",
        "hero": "Danuglipron has generated interest because it is oral, but route convenience does not reduce uncertainty. Log adherence and side effects tightly if it ever enters your care discussions.",
    },
    "ecnoglutide": {
        "subtitle": "Research-stage metabolic peptide with protocol-boundary emphasis.",
        "hero": "Ecnoglutide belongs in a risk-managed conversation, not a shortcut conversation. Keep objective markers and escalation boundaries explicit.",
    },
    "efpeglenatide": {
        "subtitle": "Legacy/discontinued pathway with source-verification focus.",
        "hero": "Efpeglenatide is best handled as a historical or legacy reference. Verify what is current, what is discontinued, and what is still clinically relevant before drawing conclusions.",
    },
    "bpc-157": {
        "subtitle": "Recovery-focused peptide logging with context-rich progress notes.",
        "hero": "BPC-157 notes are only useful when they tie symptoms to location, timeline, and load. Vague better or worse entries hide patterns. This guide pushes objective context over wishful interpretation.",
    },
    "tb-500": {
        "subtitle": "TB-500 recovery-cycle guide with phase-based monitoring.",
        "hero": "TB-500 is often discussed in loading and maintenance phases. If you do not segment your log by phase, you cannot tell what changed or why.",
    },
    "fragment-176-191": {
        "subtitle": "Fat-loss peptide context with strict expectation management.",
        "hero": "Fragment 176-191 is often marketed aggressively. This guide is built to keep claims grounded and to separate tracking evidence from narrative momentum.",
    },
    "aod-9604": {
        "subtitle": "AOD-9604 practical guide for conservative protocol interpretation.",
        "hero": "AOD-9604 conversations can drift into easy cut promises. The better approach is tight logging, stable baseline habits, and honest separation of signal from routine variability.",
    },
    "ipamorelin": {
        "subtitle": "GH secretagogue use-pattern guide with timing discipline.",
        "hero": "Ipamorelin logs get messy when timing floats. This guide centers dosing-window discipline and outcome notes that can survive clinician scrutiny.",
    },
    "cjc-1295": {
        "subtitle": "CJC-1295 non-DAC cadence guide for stack-aware tracking.",
        "hero": "Non-DAC CJC-1295 is timing-sensitive in practice. If you stack it, you need explicit stack metadata in every meaningful note.",
    },
    "cjc-dac": {
        "subtitle": "Longer-acting CJC-DAC overview with cycle-boundary safeguards.",
        "hero": "CJC-DAC discussions should include cycle boundaries up front. Longer-acting compounds demand cleaner stop criteria and clearer reassessment checkpoints.",
    },
    "ghrp-2": {
        "subtitle": "GHRP-2 context with appetite and tolerance monitoring priorities.",
        "hero": "GHRP-2 can shift appetite and stress-response perception quickly. This guide emphasizes structured symptom timing so interpretation stays anchored.",
    },
    "ghrp-6": {
        "subtitle": "GHRP-6 tracking guide with hunger-signal framing.",
        "hero": "GHRP-6 often changes hunger signaling in ways users underestimate. Good logs here are about timing and magnitude, not just yes or no effects.",
    },
    "hexarelin": {
        "subtitle": "Potent secretagogue context with desensitization caution framing.",
        "hero": "Hexarelin gets attention for potency, but that is exactly why the risk conversation matters. This guide favors conservative cycles and clear reassessment points.",
    },
    "sermorelin": {
        "subtitle": "Sermorelin practical tracking guide for nightly protocol routines.",
        "hero": "Sermorelin outcomes are hard to read without consistent nighttime routine context. This page helps keep sleep, timing, and next-day markers aligned.",
    },
    "tesamorelin": {
        "subtitle": "Tesamorelin guide with indication-aware safety boundaries.",
        "hero": "Tesamorelin is one of the few entries here with clearer clinical pathway context. Still, better outcomes come from indication-aware logging and disciplined follow-up.",
    },
    "selank": {
        "subtitle": "Nootropic peptide context with day-function tracking cues.",
        "hero": "Selank logs tend to over-index on subjective mood snapshots. This guide pushes a more useful approach: day-function markers, consistency, and timing clarity.",
    },
    "semax": {
        "subtitle": "Semax cognitive-support tracking guide with structured notes.",
        "hero": "Semax discussions improve when cognitive claims are tied to repeatable tasks and routine windows, not one-off impressions.",
    },
    "mots-c": {
        "subtitle": "MOTS-c metabolic-support context with realistic trend windows.",
        "hero": "MOTS-c is frequently discussed in performance circles. This guide keeps expectations grounded and pushes for trend windows long enough to mean something.",
    },
    "cagrilintide": {
        "subtitle": "Amylin-pathway peptide context with appetite-pattern emphasis.",
        "hero": "Cagrilintide changes appetite patterns in ways that can be subtle at first. Better logs capture timing and meal context, not just total intake.",
    },
    "ghk-cu": {
        "subtitle": "GHK-CU support guide with route and response-context tracking.",
        "hero": "GHK-CU appears in many formulations. The useful work is documenting route, formulation, and response timeline clearly enough to compare cycles.",
    },
    "kpv": {
        "subtitle": "KPV peptide context with symptom-window tracking priorities.",
        "hero": "KPV claims are broad and often loosely defined. This guide keeps your notes actionable by anchoring symptom windows and protocol boundaries.",
    },
    "kisspeptin-10": {
        "subtitle": "Kisspeptin-10 reference guide for hormone-axis discussions.",
        "hero": "Kisspeptin-10 should be treated as endocrine-context sensitive. This page emphasizes clinician-led interpretation and careful biomarker follow-up.",
    },
    "gonadorelin": {
        "subtitle": "Gonadorelin guide with hormone-axis monitoring checkpoints.",
        "hero": "With gonadorelin, context is everything: baseline axis status, intended objective, and lab timing all matter more than anecdote quality.",
    },
    "melanotan-2": {
        "subtitle": "Melanotan II context with side-effect-first logging approach.",
        "hero": "Melanotan II conversations should start with tolerability and risk, not cosmetic outcomes. This guide prioritizes side-effect surveillance and escalation thresholds.",
    },
    "epithalon": {
        "subtitle": "Epithalon anti-aging peptide context with evidence realism.",
        "hero": "Epithalon is often discussed with sweeping longevity claims. This page is intentionally practical: track what can be observed and avoid storytelling leaps.",
    },
    "survodutide": {
        "subtitle": "Investigational metabolic therapy with strong caution posture.",
        "hero": "Survodutide should be handled like a high-uncertainty candidate. The right posture is conservative assumptions, explicit stop rules, and source-backed review.",
    },
    "mazdutide": {
        "subtitle": "Mazdutide investigational profile with careful progression tracking.",
        "hero": "Mazdutide discussions improve when progression is documented in small, interpretable steps rather than broad felt better summaries.",
    },
    "pt-141": {
        "subtitle": "PT-141 on-demand context with timing and response structure.",
        "hero": "PT-141 is typically discussed as-needed, which makes logs messy fast. This guide helps you structure timing, trigger context, and response windows.",
    },
    "hcg": {
        "subtitle": "HCG hormone-support workflow with schedule and lab alignment.",
        "hero": "HCG tracking only becomes useful when dose schedule and lab cadence are aligned. This page keeps those two systems connected so trend review stays meaningful.",
    },
    "insulin": {
        "subtitle": "Insulin high-stakes tracking guide with safety-first guardrails.",
        "hero": "Insulin belongs to a high-consequence category. This guide is built around safety infrastructure: glucose context, hypoglycemia handling, and clinician-directed adjustments.",
    },
    "metformin": {
        "subtitle": "Metformin daily routine guide with meal and GI pattern clarity.",
        "hero": "Metformin is simple to prescribe but easy to log badly. Cleaner meal-context and GI timing notes make dose-tolerance decisions much safer.",
    },
    "l-carnitine": {
        "subtitle": "L-carnitine support guide with route-tolerance focus.",
        "hero": "L-carnitine can look straightforward until route-specific tolerance becomes the limiting factor. This page centers practical logging around that reality.",
    },
    "glutathione": {
        "subtitle": "Glutathione support guide with formulation and handling context.",
        "hero": "Glutathione tracking is most useful when you include formulation, handling, and timing details that usually get skipped in casual notes.",
    },
    "nad-plus": {
        "subtitle": "NAD+ support context with administration-rate awareness.",
        "hero": "NAD+ experiences are highly rate-sensitive for many users. This guide helps you log administration pace and symptom response in a way that supports safer conversations.",
    },
    "mic": {
        "subtitle": "MIC blend workflow guide with composition-aware tracking.",
        "hero": "MIC blends are often treated as generic fat-loss shots. This page keeps the log specific: blend context, schedule, and realistic outcome windows.",
    },
    "vitamin-d3": {
        "subtitle": "Vitamin D3 guide with lab-first supplementation strategy.",
        "hero": "Vitamin D3 looks simple, but good decisions are lab-driven. This guide favors measured recheck intervals over long blind supplementation runs.",
    },
    "b12": {
        "subtitle": "Vitamin B12 support guide with form and symptom-context notes.",
        "hero": "B12 support works best when form, timing, and symptom context are tracked together. This page helps you avoid generic energy felt better logs.",
    },
    "tesofensine": {
        "subtitle": "Tesofensine oral context with appetite and side-effect structure.",
        "hero": "Tesofensine discussions can drift into expectation-heavy narratives. This guide emphasizes appetite, sleep, and tolerability tracking with clean temporal context.",
    },
    "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend": {
        "displayTitle": "GLOW",
        "subtitle": "GHK-CU + TB-500 + BPC-157 blend.",
        "hero": "GLOW is a vendor-named blend, so clarity comes from component-level tracking. Treat it as three interacting signals, not one monolithic effect.",
    },
    "klow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-plus-kpv-10mg-blend": {
        "displayTitle": "KLOW",
        "subtitle": "GHK-CU + TB-500 + BPC-157 + KPV blend.",
        "hero": "KLOW adds KPV into an already stacked blend, which increases interpretation complexity. This guide prioritizes disciplined logging and conservative conclusions.",
    },
}

VENDOR_ACRONYM_NOTE = "Vendor acronym; full expansion not published in source material."

ACRONYM_INFO: Dict[str, Dict[str, object]] = {
    "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend": {
        "code": "GLOW",
        "meaning": None,
        "isVendorDefined": True,
        "note": VENDOR_ACRONYM_NOTE,
    },
    "klow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-plus-kpv-10mg-blend": {
        "code": "KLOW",
        "meaning": None,
        "isVendorDefined": True,
        "note": VENDOR_ACRONYM_NOTE,
    },
}

DEFAULT_ACRONYM_INFO: Dict[str, object] = {
    "code": None,
    "meaning": None,
    "isVendorDefined": False,
    "note": None,
}

COMPOSITION_OVERRIDES: Dict[str, List[Dict[str, str]]] = {
    "glow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-blend": [
        {"name": "GHK-CU", "amount": "50mg"},
        {"name": "TB-500", "amount": "10mg"},
        {"name": "BPC-157", "amount": "10mg"},
    ],
    "klow-ghk-cu-50mg-plus-tb500-10mg-plus-bpc157-10mg-plus-kpv-10mg-blend": [
        {"name": "GHK-CU", "amount": "50mg"},
        {"name": "TB-500", "amount": "10mg"},
        {"name": "BPC-157", "amount": "10mg"},
        {"name": "KPV", "amount": "10mg"},
    ],
}

# guide_depth pass: high-traffic slugs with hand-written dosing context.
DEPTH_OVERRIDES: Dict[str, Dict[str, List[str]]] = {
    "semaglutide": {
        "realWorldPatterns": [
            "Semaglutide protocols are commonly reviewed week-by-week, with step-ups only after stable tolerance windows.",
            "In practice, dose-day meal size and hydration strategy are often adjusted before changing the dose itself.",
            "Appetite-return timing, GI score trends, and hydration logs are the highest-yield inputs at titration visits.",
        ],
    },
    "tirzepatide": {
        "realWorldPatterns": [
            "Tirzepatide is often paced conservatively because response intensity varies significantly across individuals.",
            "Real-world teams commonly hold dose progression when GI burden clusters instead of pushing escalation timelines.",
            "Weekly appetite-return and bowel-pattern trend logs usually drive cleaner titration decisions than scale-only data.",
        ],
    },
    "liraglutide": {
        "realWorldPatterns": [
            "Liraglutide pacing usually depends on daily-tolerance consistency rather than calendar pressure to increase.",
            "People often improve adherence by pairing administration with a fixed daily routine and meal plan.",
            "GI trend logs over consecutive days are commonly used before any escalation decision.",
        ],
    },
    "metformin": {
        "realWorldPatterns": [
            "Metformin tolerance is often improved when doses stay tied to meals and increases are spread out over review windows.",
            "GI pattern logs in the first month are frequently the deciding factor for pacing or formulation changes.",
            "Daily routine consistency usually matters more than frequent short-term dose edits.",
        ],
    },
    "insulin": {
        "realWorldPatterns": [
            "Insulin dosing is individualized around glucose data, meals, activity, and concurrent therapy context.",
            "Most safe insulin workflows use structured glucose logs before making any meaningful dose adjustment.",
            "Pattern-based review (same time windows across multiple days) is typically favored over isolated readings.",
        ],
        "escalationBoundaries": [
            "Treat recurrent low-glucose episodes as an immediate hold-and-review event, not a signal to continue escalation.",
            "Do not apply catch-up bolus corrections without a clinician-approved correction framework.",
            "Rapid glucose instability with neurologic or cardiopulmonary symptoms needs urgent medical evaluation.",
        ],
    },
}

# legal_safe_depth pass: dosing-framework overrides.
LEGAL_SAFE_OVERRIDES: Dict[str, Dict[str, List[str]]] = {
    "semaglutide": {
        "pacePrinciples": [
            "Semaglutide trend review is strongest when appetite-return, hydration, and GI tolerance are logged in a consistent weekly rhythm.",
            "Escalation timing should follow tolerance stability and clinician review, not calendar pressure.",
            "Single-variable adjustments protect signal quality during protocol review.",
        ],
    },
    "tirzepatide": {
        "pacePrinciples": [
            "Tirzepatide response intensity varies significantly, so pacing should remain conservative and trend-driven.",
            "Escalation should follow tolerability recovery and documented symptom stability.",
            "Weekly pattern review usually outperforms single-day reactions for protocol decisions.",
        ],
    },
    "metformin": {
        "pacePrinciples": [
            "Metformin trend quality improves when timing, meal context, and tolerance logs are kept consistent.",
            "Adjustment pace should follow sustained symptom patterns rather than short-term fluctuations.",
            "Protocol review should prioritize tolerability and objective metabolic goals together.",
        ],
    },
    "insulin": {
        "holdTriggers": [
            "Recurrent low-glucose risk signals or severe symptomatic instability require immediate hold-and-review with a clinician.",
            "Rapid glucose volatility with neurologic or cardiopulmonary symptoms requires urgent evaluation.",
        ],
    },
}


def missing_handcrafted(slugs: Iterable[str] = PRIORITY_SLUGS) -> List[str]:
    """Priority slugs without complete handcrafted subtitle/hero copy, in input order."""
    missing: List[str] = []
    for slug in slugs:
        entry = HANDCRAFTED_PRIORITY.get(slug) or {}
        if not entry.get("subtitle") or not entry.get("hero"):
            missing.append(slug)
    return missing


__all__ = [
    "HANDCRAFTED_PRIORITY",
    "VENDOR_ACRONYM_NOTE",
    "ACRONYM_INFO",
    "DEFAULT_ACRONYM_INFO",
    "COMPOSITION_OVERRIDES",
    "DEPTH_OVERRIDES",
    "LEGAL_SAFE_OVERRIDES",
    "missing_handcrafted",
]
