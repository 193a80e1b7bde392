#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Editorial template sets for the three enrichment passes.

Templates carry a ``{name}`` placeholder for the guide's display name. Nothing in
here adds citation markers; the enrichment engine rotates those in afterwards.
Wording must stay clear of the legal-lint patterns (unit notation, weekly-x
schedules, prescriptive verbs) because the linter would otherwise rewrite it.
"""

from typing import Dict, List, Mapping, Sequence, Tuple

from .selector_guides import pick

# --- pass 1: enhanced schema -------------------------------------------------

VOICE_TEMPLATES: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "clinical": {
        "hero": (
            "{name} becomes easier to evaluate when you keep cadence and symptom notes stable across full review windows.",
            "{name} works best when each change has a reason, a timestamp, and a follow-up checkpoint in your log.",
            "{name} tracking should emphasize repeatability so your clinician can separate trend from noise quickly.",
        ),
        "dosing": (
            "{name} should be reviewed over structured intervals, not single difficult days.",
            "For {name}, protocol moves are safer when escalation is tied to documented tolerance windows.",
            "{name} decisions should follow objective trend checks, not reactive day-to-day interpretation.",
        ),
    },
    "coach": {
        "hero": (
            "{name} is easier to judge when your notes read like a timeline instead of scattered snapshots.",
            "Treat {name} as a consistency challenge: same routine, same markers, fewer assumptions.",
            "{name} tracking improves fast once you define one clear objective and log against it every week.",
        ),
        "dosing": (
            "With {name}, consistency beats complexity. Hold one clean routine long enough to produce signal.",
            "{name} protocols are easier to interpret when you avoid changing multiple variables at once.",
            "For {name}, stable cadence is the foundation for any useful adjustment discussion.",
        ),
    },
    "caution": {
        "hero": (
            "{name} belongs in a conservative conversation where uncertainty is documented, not glossed over.",
            "For {name}, risk control comes from explicit stop criteria and disciplined adverse-effect logging.",
            "{name} should be treated as high-uncertainty: cautious expectations, source-backed decisions, and early escalation of concerns.",
        ),
        "dosing": (
            "{name} requires conservative interpretation and explicit stop criteria before any protocol progression.",
            "For {name}, uncertainty should lead to tighter monitoring, not faster escalation.",
            "{name} should only be discussed with strong risk framing and clinician-led decision checkpoints.",
        ),
    },
    "support": {
        "hero": (
            "{name} looks simple, but better results usually come from routine, timing consistency, and objective follow-up.",
            "{name} tracking is most useful when you link dose timing, tolerance, and symptom context in one log entry.",
            "{name} works best as a steady support protocol with measured check-ins rather than short reactive cycles.",
        ),
        "dosing": (
            "{name} should follow a steady cadence with periodic tolerance and response review.",
            "For {name}, conservative adjustments and measured rechecks are safer than abrupt protocol jumps.",
            "{name} decisions should be tied to objective follow-up markers whenever possible.",
        ),
    },
}


def fill(template: str, name: str) -> str:
    return template.replace("{name}", name)


def fill_all(templates: Sequence[str], name: str) -> List[str]:
    return [fill(template, name) for template in templates]


def _classes(taxonomy: Mapping) -> set:
    return set(taxonomy.get("classTags") or [])


def _is_micronutrient(classes: set) -> bool:
    return "Vitamin" in classes or "Mineral" in classes


def build_subtitle(taxonomy: Mapping, composition: Sequence[Mapping]) -> str:
    classes = _classes(taxonomy)
    if len(composition) > 1:
        names = " + ".join(str(part.get("name")) for part in composition)
        return f"{names} blend with component-aware tracking context."
    if "Peptide" in classes:
        return "Peptide guide focused on real-world tracking, risk framing, and clinician-ready notes."
    if "GLP-1/GIP" in classes:
        return "Metabolic therapy guide centered on cadence, tolerability, and objective trend review."
    if _is_micronutrient(classes):
        return "Micronutrient guide with lab-aware context and conservative safety boundaries."
    if "Oral Compound" in classes:
        return "Oral compound guide for adherence quality, side-effect timing, and escalation decisions."
    return "Reference guide for structured tracking and safer provider conversations."


def build_hero(slug: str, name: str, taxonomy: Mapping, voice_profile: str) -> str:
    classes = _classes(taxonomy)
    line = fill(pick(VOICE_TEMPLATES[voice_profile]["hero"], slug), name)
    if "Peptide" in classes:
        hint = "Use this page to keep cycle notes specific enough to compare across phases."
    elif "GLP-1/GIP" in classes:
        hint = "Use this page to align appetite, GI, and adherence patterns with dose decisions."
    elif _is_micronutrient(classes):
        hint = "Use this page to connect symptom notes to lab timing and supplementation cadence."
    else:
        hint = "Use this page to keep protocol conversations clear, conservative, and evidence-aware."
    return f"{line} {hint}"


def build_dosing_section(slug: str, name: str, taxonomy: Mapping, voice_profile: str) -> Dict[str, object]:
    """Overview + protocol patterns + monitoring windows, uncited."""
    classes = _classes(taxonomy)
    overview = fill(pick(VOICE_TEMPLATES[voice_profile]["dosing"], f"{slug}-dosing"), name)

    if "GLP-1/GIP" in classes:
        protocol = [
            f"Use fixed weekly checkpoints for {name} so appetite and GI trends stay comparable across titration steps.",
            "Avoid escalation decisions based on one difficult day; use full trend windows before protocol changes.",
        ]
        monitoring = [
            "Track nausea, satiety, bowel pattern, and hydration in relation to dose day and meal timing.",
            "Document escalation pauses and symptom recovery before any further dose progression.",
        ]
    elif _is_micronutrient(classes):
        protocol = [
            f"Keep {name} schedule consistent and tie changes to objective follow-up markers when available.",
            "Avoid aggressive jumps in intake without clinician guidance, especially when overlapping other supplements.",
        ]
        monitoring = [
            "Log dose timing, meals, and symptom context so tolerance patterns are interpretable.",
            "Recheck labs on a planned cadence and document how values map to symptom changes.",
        ]
    elif "Blend" in (taxonomy.get("formatTags") or []):
        protocol = [
            f"Treat {name} as a multi-signal protocol and define what each component is expected to influence.",
            "Do not add new stacked compounds mid-cycle unless you can isolate effects clearly.",
        ]
        monitoring = [
            "Log component-related outcomes separately before making blend-level conclusions.",
            "Escalate unusual reactions quickly since blend attribution is inherently less precise.",
        ]
    else:
        protocol = [
            f"Set one protocol objective for {name} and avoid changing multiple variables in the same week.",
            "Write down the reason for every adjustment so retrospective reviews are evidence-based, not memory-based.",
        ]
        monitoring = [
            "Track symptom onset, peak, and resolution timing to improve safety signal quality.",
            "Escalate persistent or severe adverse effects early and document any intervention timing clearly.",
        ]
    return {"overview": overview, "protocolPatterns": protocol, "monitoringWindows": monitoring}


def build_tracking_signals(name: str, taxonomy: Mapping) -> List[str]:
    classes = _classes(taxonomy)
    if "GLP-1/GIP" in classes:
        return [
            f"Track appetite return, meal size tolerance, and GI patterns around each {name} dose window.",
            "Log dose timing, hydration, and bowel pattern in a consistent format for week-to-week comparison.",
            "Document adherence breaks and restart effects so your clinician can adjust escalation pacing safely.",
        ]
    if "Peptide" in classes:
        return [
            f"Log {name} timing with target-domain notes such as recovery, tissue response, sleep, or mood changes.",
            "Mark stack composition clearly whenever additional compounds are used in the same cycle.",
            "Use consistent checkpoints so subjective effects are anchored to repeatable observations.",
        ]
    if _is_micronutrient(classes):
        return [
            f"Track {name} timing, meal context, and any tolerance issues in the same daily format.",
            "Record relevant labs and symptoms side by side so supplementation effects are easier to interpret.",
            "Note changes in other supplements or medications that could confound trend interpretation.",
        ]
    return [
        f"Document exact {name} timing and whether it was used solo or as part of a broader stack.",
        "Track target outcomes with date-stamped notes and at least one objective marker where possible.",
        "Log side effects by onset and resolution to improve follow-up decisions.",
    ]


def build_safety_flags(name: str, taxonomy: Mapping, status: str) -> List[str]:
    classes = _classes(taxonomy)
    flags: List[str] = []
    if status in ("experimental", "regional-approval", "discontinued"):
        flags.append(f"{name} may have incomplete long-term safety evidence; keep expectations conservative.")
    if "GLP-1/GIP" in classes:
        flags.append("Escalating GI symptoms, severe dehydration, or persistent intolerance should trigger rapid clinical review.")
    elif _is_micronutrient(classes):
        flags.append("Excess supplementation can create unintended toxicity or interactions; avoid unsupervised high-dose changes.")
    else:
        flags.append("Avoid self-directed escalation or high-risk stacking without explicit medical supervision.")
    flags.append("Stop use and seek clinical guidance if unexpected adverse events occur.")
    return flags


def build_provider_questions(name: str, taxonomy: Mapping) -> List[str]:
    classes = _classes(taxonomy)
    if "GLP-1/GIP" in classes:
        return [
            f"How should {name} titration be paced based on my tolerance history and current goals?",
            "Which side effects should trigger immediate contact versus routine follow-up?",
            "What objective checkpoints should we use before increasing, holding, or decreasing dose?",
        ]
    if "Peptide" in classes:
        return [
            f"What is the clinical rationale for {name} versus better-established alternatives?",
            "Which biomarkers or symptom markers should define continuation versus discontinuation?",
            "How should stack complexity be reduced if signal quality is poor or adverse effects appear?",
        ]
    if _is_micronutrient(classes):
        return [
            f"Do my current labs support using {name}, and what target range should we monitor?",
            "What dosing ceiling should I avoid without additional testing?",
            "How should this fit with my current medications and supplement stack?",
        ]
    return [
        f"Is {name} appropriate for my goals and risk profile compared with established options?",
        "Which baseline and follow-up checks should be tracked, and at what cadence?",
        "What adverse-effect thresholds should trigger urgent contact?",
    ]


def build_meta_description(name: str, taxonomy: Mapping) -> str:
    classes = [tag for tag in taxonomy.get("classTags") or []]
    kind = classes[0].lower() if classes else "reference"
    return (
        f"{name} {kind} guide: tracking signals, safety flags, and questions to review with a licensed clinician."
    )


# --- pass 2: guide depth -----------------------------------------------------

USE_CASES: Dict[str, Tuple[str, ...]] = {
    "glp": (
        "{name} is mainly discussed for glucose and/or weight-management goals under licensed clinical supervision.",
        "It is usually considered when lifestyle work alone is not giving stable metabolic outcomes.",
        "Tracking adherence, appetite curve, hydration, and GI tolerance is central to safe pacing.",
    ),
    "nutrient": (
        "{name} is generally used to correct or prevent a confirmed nutrient gap, not as open-ended high-dose therapy.",
        "Best decisions come from lab context, symptom context, and a defined re-check window.",
        "Use should be goal-oriented, with clear criteria for tapering, maintenance, or stop.",
    ),
    "hormone": (
        "{name} is typically discussed for endocrine goals that require baseline labs and regular follow-up.",
        "Benefit and risk are driven by how well labs, symptoms, and timing are tracked together.",
        "Dose changes usually belong inside a supervised plan rather than ad-hoc cycle edits.",
    ),
    "oral": (
        "{name} is usually used for symptom- or condition-focused goals where oral adherence is practical.",
        "Meal timing, sleep, and co-medication context often determine whether tolerance stays stable.",
        "Progress is cleaner when one protocol variable is changed at a time.",
    ),
    "injectable": (
        "{name} is generally used in protocols where injection timing and site quality materially affect outcomes.",
        "Benefit interpretation improves when symptom logs are tied directly to injection windows.",
        "A sterile technique checklist and site-rotation plan are core parts of safe use.",
    ),
    "peptide": (
        "{name} is often approached as investigational support with variable evidence depth and variable product quality.",
        "{blend}",
        "Use is safest when there are pre-defined continuation and stop criteria before escalation.",
    ),
    "supportive": (
        "{name} should be framed as a targeted support tool with explicit goals and an exit plan.",
        "The protocol should be reviewed against objective logs rather than day-to-day mood shifts.",
        "Most users benefit from conservative pacing and early review when side effects cluster.",
    ),
}

BLEND_USE_CASE = (
    "{name} is a blend, so interpretation should stay component-aware instead of treating every response as one signal."
)
SINGLE_USE_CASE = (
    "{name} is usually tracked as a single active signal so dose-response trends remain interpretable."
)

CANDIDATE_PROFILES: Dict[str, Tuple[str, ...]] = {
    "glp": (
        "Adults with clinician-defined metabolic goals and a follow-up cadence that includes trend review.",
        "People willing to log weekly appetite return, bowel pattern, hydration, and adherence consistency.",
        "Users prepared for slow titration and occasional holds rather than forced escalation.",
    ),
    "nutrient": (
        "People with confirmed deficiency risk, low intake, or objective clinical reason for targeted support.",
        "Users who can re-check labs/symptoms on schedule instead of extending high doses indefinitely.",
        "Patients whose medication list has been reviewed for interaction or absorption conflicts.",
    ),
    "hormone": (
        "Patients with a clear endocrine objective and baseline lab panel before protocol decisions.",
        "People able to complete repeat labs and clinical follow-up on schedule.",
        "Users who can avoid stacking multiple endocrine-active compounds at the same time.",
    ),
    "injectable": (
        "People who can maintain sterile prep, site rotation, and date/time injection logs consistently.",
        "Users with a defined objective and a clear review interval for benefit and tolerance.",
        "Patients ready to stop and reassess quickly if local or systemic reactions appear.",
    ),
    "oral": (
        "People who can maintain consistent daily timing and document meal/medication context.",
        "Users with a specific symptom or lab objective and objective follow-up checkpoints.",
        "Patients who can avoid self-directed escalation when short-term results fluctuate.",
    ),
    "peptide": (
        "Users with specialist oversight who understand evidence uncertainty and product-quality variability.",
        "People who can define one primary endpoint and track it consistently before changing variables.",
        "Patients who can commit to stop rules if side effects rise or no objective signal emerges.",
    ),
    "supportive": (
        "Users with a clear reason for use and clinician oversight for higher-risk decisions.",
        "People who can keep objective logs and review them on a fixed schedule.",
        "Patients ready to de-escalate when risk rises faster than benefit.",
    ),
}

SHARED_AVOIDANCE = (
    "Pregnancy, breastfeeding, and active conception planning should be reviewed with a specialist before use.",
    "Prior severe hypersensitivity reaction to related compounds is a strong caution signal.",
    "Rapidly worsening symptoms after dose changes should trigger immediate hold and clinical review.",
)

AVOIDANCE_FLAGS: Dict[str, Tuple[str, ...]] = {
    "glp": (
        "Active severe GI symptoms, persistent poor oral intake, or dehydration signs should pause escalation.",
        "Complex polypharmacy or unstable chronic disease raises interaction risk and needs tailored review.",
    ),
    "nutrient": (
        "Renal impairment, absorption disorders, or known mineral balance disorders need individualized dosing plans.",
        "Stacking multiple products with overlapping micronutrients can raise toxicity risk unexpectedly.",
    ),
    "hormone": (
        "Unmonitored hormone-active stacks can produce unstable labs and misleading symptom interpretation.",
        "Cardiometabolic risk factors or thrombotic risk require tighter clinical monitoring.",
    ),
    "peptide": (
        "Unknown source quality or poor storage/handling substantially increases avoidable risk.",
        "Do not combine multiple investigational compounds unless each signal can be tracked separately.",
    ),
}

SIDE_EFFECTS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "glp": {
        "common": (
            "Nausea, early satiety, reflux, constipation, or loose stool during adjustment windows.",
            "Temporary appetite suppression and reduced meal volume tolerance.",
            "Fatigue or low-energy days while hydration and intake patterns are still stabilizing.",
        ),
        "serious": (
            "Persistent vomiting, dehydration signs, or inability to maintain oral intake.",
            "Severe abdominal pain, escalating weakness, or unexpected symptom spikes after escalation.",
            "Allergic-type reactions such as facial swelling, breathing difficulty, or rapidly spreading rash.",
        ),
    },
    "nutrient": {
        "common": (
            "GI upset, stool changes, or nausea when timing/formulation does not fit tolerance.",
            "Mild headache or taste changes depending on formulation and co-supplement stack.",
            "Variable symptom response when baseline deficiency status is unclear.",
        ),
        "serious": (
            "Signs of over-correction or imbalance when high doses are continued without re-checks.",
            "Worsening neurologic, cardiac, or severe GI symptoms after dose increases.",
            "Allergic-type reactions, including swelling, rash progression, or breathing symptoms.",
        ),
    },
    "hormone": {
        "common": (
            "Fluid shifts, mood variability, appetite changes, or sleep disturbance.",
            "Acne/oily skin, libido shifts, or cycle-related changes depending on protocol context.",
            "Injection-site irritation for injectable formulations.",
        ),
        "serious": (
            "Rapid blood-pressure changes, chest symptoms, neurologic symptoms, or syncope.",
            "Escalating edema, severe mood destabilization, or persistent severe headache.",
            "Thrombotic or cardiometabolic red flags requiring urgent medical review.",
        ),
    },
    "injectable": {
        "common": (
            "Injection-site soreness, redness, or transient swelling.",
            "Headache, mild nausea, or short-term fatigue after administration windows.",
            "Short-lived appetite, sleep, or energy variability while adapting.",
        ),
        "serious": (
            "Spreading redness, fever, or progressive pain suggesting injection-site infection.",
            "Systemic reactions such as generalized rash, wheeze, or facial swelling.",
            "Persistent neurologic or cardiopulmonary symptoms after administration.",
        ),
    },
    "oral": {
        "common": (
            "Stomach discomfort, bowel-pattern changes, or appetite variability.",
            "Headache, mild dizziness, or transient sleep disturbance.",
            "Tolerance swings linked to meal timing or co-medication timing.",
        ),
        "serious": (
            "Escalating abdominal pain, persistent vomiting, or severe dehydration signs.",
            "Confusion, severe weakness, or rapid deterioration after dose changes.",
            "Allergic reactions with breathing, swelling, or widespread rash.",
        ),
    },
    "peptide": {
        "common": (
            "Injection-site irritation, transient headache, or short-term fatigue.",
            "Sleep, appetite, or mood shifts that can be hard to interpret in stacked protocols.",
            "Variable perceived response because product quality and handling may differ by source.",
        ),
        "serious": (
            "Progressive local reaction, fever, or severe pain at injection area.",
            "Unexpected neurologic, cardiovascular, or systemic symptoms after dosing windows.",
            "Any severe hypersensitivity-type reaction requiring urgent assessment.",
        ),
    },
    "supportive": {
        "common": (
            "GI or appetite shifts during early adaptation windows.",
            "Mild headache, fatigue, or day-to-day symptom variability.",
            "Transient tolerance changes when schedule consistency drops.",
        ),
        "serious": (
            "Rapidly escalating symptoms after dose changes.",
            "Severe dehydration, confusion, or inability to maintain intake.",
            "Allergic reactions with breathing difficulty or swelling.",
        ),
    },
}

REAL_WORLD_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "glp": (
        "Most {name} protocols are paced slowly, with escalation only after multi-week tolerance review.",
        "Many clinicians prioritize hydration and smaller meal structure around dose day to reduce avoidable GI burden.",
        "Weekly trend reviews usually outperform day-by-day reaction decisions when choosing hold vs. step-up.",
    ),
    "nutrient": (
        "For {name}, real-world dosing usually works best when baseline status is measured before aggressive correction.",
        "Practitioners often reassess labs or symptom markers before moving from correction to maintenance.",
        "Stack simplification (one variable change at a time) is commonly used to avoid attribution errors.",
    ),
    "hormone": (
        "{name} plans are commonly anchored to regular lab checkpoints rather than symptom-only adjustments.",
        "Real-world teams often avoid simultaneous multi-compound changes so response remains interpretable.",
        "Dose timing consistency is a major determinant of stable trend interpretation.",
    ),
    "injectable": (
        "{name} outcomes are usually easier to interpret when site rotation and administration timing are standardized.",
        "Many users log local reaction quality and onset/offset timing as the first safety signal layer.",
        "Conservative pacing with predefined review windows is commonly used before escalation.",
    ),
    "oral": (
        "Most {name} users do better when administration timing is anchored to a stable daily routine.",
        "Meal context and co-medication timing are commonly tracked because they strongly influence tolerance.",
        "Dose adjustments are usually safer when based on multi-day patterns instead of single outlier days.",
    ),
    "peptide": (
        "{name} is usually paced conservatively in real-world use due to evidence and quality variability.",
        "{blend}",
        "Users with the cleanest outcomes tend to document exact timing, site quality, and symptom onset/offset windows.",
    ),
    "supportive": (
        "{name} is usually handled with conservative adjustments and scheduled trend reviews.",
        "Keeping one-variable changes per review window is a common tactic to protect interpretation quality.",
        "Consistent logging windows are typically more useful than high-volume unscheduled notes.",
    ),
}

BLEND_REAL_WORLD = (
    "Blend protocols are typically interpreted component-by-component so one reaction does not misclassify the entire stack."
)
SINGLE_REAL_WORLD = "Single-compound peptide protocols are usually reviewed against one primary endpoint at a time."

ESCALATION_BOUNDARIES: Dict[str, Tuple[str, ...]] = {
    "glp": (
        "Hold escalation if repeated vomiting, dehydration signs, or persistent inability to tolerate intake appears.",
        "Use product-specific missed-dose instructions rather than doubling a later dose to catch up.",
        "If side effects remain high across multiple weeks, reassess target dose and pace with your clinician.",
    ),
    "nutrient": (
        "Pause aggressive correction when side effects rise faster than objective benefit markers.",
        "Do not layer overlapping nutrient products without reconciling total intake and review windows.",
        "Re-check objective markers before extending high-intensity phases.",
    ),
    "hormone": (
        "Stop ad-hoc escalation when lab trends or blood-pressure/symptom signals become unstable.",
        "Avoid adding new hormone-active agents in the same window as dose escalation.",
        "Escalate only after objective review confirms benefit exceeds current risk.",
    ),
    "peptide": (
        "Any severe or atypical systemic reaction should trigger immediate hold and medical review.",
        "Avoid escalating dose while simultaneously adding stacked compounds.",
        "If objective benefit is absent by the predefined review milestone, reassess continuation criteria.",
    ),
    "supportive": (
        "Pause escalation when adverse effects cluster or intensify after adjustments.",
        "Avoid catch-up dosing patterns after missed doses.",
        "Resume progression only after risk/benefit review with your provider.",
    ),
}


def _with_blend_line(templates: Sequence[str], name: str, blend_line: str) -> List[str]:
    return [fill(blend_line if template == "{blend}" else template, name) for template in templates]


def profile_use_cases(name: str, profile: str, is_blend: bool) -> List[str]:
    blend_line = BLEND_USE_CASE if is_blend else SINGLE_USE_CASE
    return _with_blend_line(USE_CASES.get(profile, USE_CASES["supportive"]), name, blend_line)


def profile_candidates(profile: str) -> List[str]:
    return list(CANDIDATE_PROFILES.get(profile, CANDIDATE_PROFILES["supportive"]))


def profile_avoidance(profile: str) -> List[str]:
    return list(AVOIDANCE_FLAGS.get(profile, ())) + list(SHARED_AVOIDANCE)


def profile_side_effects(profile: str) -> Dict[str, List[str]]:
    entry = SIDE_EFFECTS.get(profile, SIDE_EFFECTS["supportive"])
    return {"common": list(entry["common"]), "serious": list(entry["serious"])}


def profile_real_world_patterns(name: str, profile: str, is_blend: bool) -> List[str]:
    blend_line = BLEND_REAL_WORLD if is_blend else SINGLE_REAL_WORLD
    return _with_blend_line(REAL_WORLD_PATTERNS.get(profile, REAL_WORLD_PATTERNS["supportive"]), name, blend_line)


def profile_escalation_boundaries(profile: str) -> List[str]:
    return list(ESCALATION_BOUNDARIES.get(profile, ESCALATION_BOUNDARIES["supportive"]))


# --- pass 3: legal-safe depth ------------------------------------------------

LEGAL_NOTICES = {
    "approved_label": "Approved-label context may exist, but this page is educational only and not a dosing instruction.",
    "nutrient_support": "Nutrient context should be personalized to labs and clinical history; this page is educational only.",
    "regional_label": "Regional-label status varies by jurisdiction; this page is educational only and not treatment guidance.",
    "off_label_context": "Off-label or limited-label context can vary by clinician judgment and region; this page is educational only.",
    "unregulated_market": "Unregulated-market compounds may lack standardized oversight; this page is educational only and not a usage directive.",
    "investigational": "Investigational context means uncertainty remains high; this page is educational only and not a dosing directive.",
}

DOSING_FRAMEWORKS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "glp": {
        "pacePrinciples": (
            "{name} is usually reviewed over consistent multi-week trend windows before any protocol adjustment.",
            "Tolerance, hydration, and symptom trajectory should be interpreted together rather than from a single difficult day.",
            "One variable change per review window improves safety interpretation quality.",
        ),
        "holdTriggers": (
            "Escalating intolerance, repeated poor oral intake, or worsening functional symptoms should prompt an immediate hold and clinical review.",
            "Any severe new symptom cluster after protocol changes should pause progression until evaluated.",
        ),
        "resumeCriteria": (
            "Resume decisions are safer after symptoms stabilize and trend logs are reviewed with a licensed clinician.",
            "Progression should only continue when risk signals have eased and goals remain clinically appropriate.",
        ),
    },
    "nutrient": {
        "pacePrinciples": (
            "{name} should be framed as targeted support with objective re-check windows, not open-ended escalation.",
            "Adjustment pace should follow symptom and laboratory context reviewed by a qualified clinician.",
            "Stack complexity should stay low so changes remain interpretable.",
        ),
        "holdTriggers": (
            "Worsening intolerance or imbalance symptoms should pause progression pending medical review.",
            "Any severe new symptom pattern during a support phase should trigger prompt clinical evaluation.",
        ),
        "resumeCriteria": (
            "Resume only after symptom stabilization and updated clinical context confirm benefit-to-risk remains acceptable.",
            "Continue with conservative pacing and clear stop criteria discussed with your clinician.",
        ),
    },
    "peptide": {
        "pacePrinciples": (
            "{name} should be interpreted conservatively because evidence quality and product consistency can vary.",
            "Avoid changing multiple compounds in the same review window so signal quality is preserved.",
            "Use pre-defined continuation and stop criteria before considering protocol progression.",
        ),
        "holdTriggers": (
            "Unexpected systemic symptoms or rapidly worsening local reactions should trigger immediate hold and urgent clinical review.",
            "Any unclear adverse pattern in a stacked protocol should pause progression until attribution is clarified.",
        ),
        "resumeCriteria": (
            "Resume only after clinical review confirms symptoms have stabilized and risk has been reassessed.",
            "Restart decisions should favor simpler protocols with clearer monitoring windows.",
        ),
    },
    "default": {
        "pacePrinciples": (
            "{name} should be paced conservatively with one protocol variable reviewed at a time.",
            "Trend quality improves when logs are captured consistently across comparable windows.",
            "Escalation decisions should be anchored to objective review rather than day-to-day variability.",
        ),
        "holdTriggers": (
            "Rapidly worsening side effects or new severe symptoms should trigger immediate hold and clinician review.",
            "If risk signals rise faster than benefit signals, pause progression and reassess.",
        ),
        "resumeCriteria": (
            "Resume after stability returns and a clinician confirms the risk-benefit balance remains acceptable.",
            "Continue with conservative pacing and explicit monitoring checkpoints.",
        ),
    },
}

TRACKING_FOCUS_EXTRAS = (
    "Capture symptom timing relative to protocol windows so trend review stays objective.",
    "Document holds, restarts, and clinically significant events in the same structured format.",
)

UNCERTAINTY_STATEMENTS = {
    "moderate": "Evidence quality is moderate and still requires individualized clinical interpretation for safe decision-making.",
    "limited": "Evidence confidence is limited, so this section should be treated as educational context rather than dosing instruction.",
}

PROVIDER_DISCUSSION_LINE = (
    "People who can review risks, interactions, and goals with a licensed clinician before protocol changes."
)
PAUSE_LINE = "Anyone with severe new symptoms should pause and seek urgent medical review."

EMERGENCY_SIGNALS = (
    "Trouble breathing, facial swelling, chest pain, severe neurologic symptoms, or fainting requires emergency care.",
    "Persistent inability to keep fluids down with worsening weakness requires urgent evaluation.",
    "Any severe rapid-onset reaction after use should be treated as an emergency signal.",
)

OVERALL_RATIONALES = {
    "moderate": "Confidence is moderate based on authoritative sources, but personalization and clinical review are still required.",
    "limited": "Confidence is limited due to variability in source quality, population fit, or regulatory standardization.",
}

# (sectionKey, confidence rule, rationale). Rules: "overall" copies the guide tier,
# "capped" is moderate only when the tier is moderate, "low" is fixed, "sources" depends on citation count.
EVIDENCE_SECTIONS: Tuple[Tuple[str, str, str], ...] = (
    ("use_cases", "overall", "Use-case framing is based on source summaries and clinical context."),
    ("risk_screen", "capped", "Risk framing prioritizes safety signals and conservative escalation language."),
    ("dosing_framework", "overall", "Framework focuses on non-prescriptive pacing and hold/resume boundaries."),
    ("dosing_pace", "overall", "Pace principles are trend-based and avoid numerical protocol instructions."),
    ("dosing_hold", "capped", "Hold triggers emphasize early escalation of concerning symptoms."),
    ("dosing_resume", "capped", "Resume criteria require stability and clinician review before progression."),
    ("dosing_tracking", "capped", "Tracking focus is designed for structured clinical discussions and safer trend interpretation."),
    ("community_reports", "low", "Community summaries are observational and non-standardized by design."),
    ("sources", "sources", "Source confidence depends on the quality and breadth of cited references."),
)

DATA_GAPS = {
    "shared_first": "No universal protocol fits every risk profile, comorbidity pattern, or co-medication context.",
    "moderate": "Most evidence still requires individualized interpretation and clinician review for safe application.",
    "limited": "No broadly standardized regulated dosing protocol is available for many real-world contexts.",
    "shared_last": "Long-term comparative data may be limited for specific populations and combination protocols.",
}

COMMUNITY_SUMMARY = (
    "Community logs for {name} often emphasize pacing decisions around tolerability trends rather than rapid progression.",
    "Reports frequently describe better signal quality when one protocol variable is changed per review window.",
    "Community observations vary widely and may be influenced by source quality, expectation effects, and incomplete tracking.",
)

COMMUNITY_SAFETY_CAUTION = (
    "Community summaries are low-confidence observations and should never replace individualized medical guidance."
)


def dosing_framework_templates(profile: str, name: str) -> Dict[str, List[str]]:
    entry = DOSING_FRAMEWORKS.get(profile, DOSING_FRAMEWORKS["default"])
    return {key: fill_all(lines, name) for key, lines in entry.items()}


def tier_key(overall: str) -> str:
    return "moderate" if overall == "moderate" else "limited"


__all__ = [
    "VOICE_TEMPLATES",
    "fill",
    "fill_all",
    "build_subtitle",
    "build_hero",
    "build_dosing_section",
    "build_tracking_signals",
    "build_safety_flags",
    "build_provider_questions",
    "build_meta_description",
    "profile_use_cases",
    "profile_candidates",
    "profile_avoidance",
    "profile_side_effects",
    "profile_real_world_patterns",
    "profile_escalation_boundaries",
    "LEGAL_NOTICES",
    "DOSING_FRAMEWORKS",
    "TRACKING_FOCUS_EXTRAS",
    "UNCERTAINTY_STATEMENTS",
    "PROVIDER_DISCUSSION_LINE",
    "PAUSE_LINE",
    "EMERGENCY_SIGNALS",
    "OVERALL_RATIONALES",
    "EVIDENCE_SECTIONS",
    "DATA_GAPS",
    "COMMUNITY_SUMMARY",
    "COMMUNITY_SAFETY_CAUTION",
    "dosing_framework_templates",
    "tier_key",
]
