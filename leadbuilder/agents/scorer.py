"""
Lead Builder - Insight Engine
Deterministic lead scoring (1-100) with a narrative rationale, the list of
missing inputs, and the personalized outreach message.

Pure and total: every record, including an empty one, produces a valid
insight. Safe to call on every keystroke.
"""

import logging

from leadbuilder.agents.message_writer import build_personalized_message

logger = logging.getLogger("leadbuilder.agents.scorer")


# ─── SCORING RULES ───────────────────────────────────────────

BASE_SCORE = 25
MISSING_FIELD_PENALTY = 4
MIN_SCORE = 1
MAX_SCORE = 100

# Scored fields in evaluation order: (record key, display label)
REQUIRED_FIELDS = (
    ("company_name", "Company Name"),
    ("contact_name", "Contact Name"),
    ("job_title", "Job Title"),
    ("linkedin_url", "LinkedIn URL"),
    ("company_size", "Company Size"),
    ("pain_points", "Pain Points"),
)

FIELD_POINTS = {
    "company_name": 8,
    "contact_name": 8,
    "job_title": 5,
    "decision_maker_bonus": 10,
    "linkedin_url": 6,
    "company_size_qualitative": 6,
    "pain_points_generic": 10,
}

DECISION_MAKER_TITLES = ("founder", "chief", "vp", "head", "director")

# (minimum headcount, points), checked top-down
COMPANY_SIZE_BANDS = (
    (1000, 15),
    (300, 12),
    (50, 8),
    (0, 4),
)
MID_MARKET_THRESHOLD = 300

# Substring matches on the lowercased pain text, all checked independently
PAIN_KEYWORD_WEIGHTS = {
    "churn": 16,
    "conversion": 14,
    "retention": 12,
    "automation": 10,
    "manual": 8,
    "outdated": 8,
    "slow": 6,
    "compliance": 14,
    "security": 12,
    "integration": 10,
    "scaling": 10,
    "growth": 8,
}

TIER_THRESHOLDS = (
    ("hot", 80),
    ("warm", 60),
    ("nurture", 0),
)


def _text(value) -> str:
    return "" if value is None else str(value)


def clamp(value: float, low: int, high: int) -> float:
    return min(max(value, low), high)


def lead_tier(score: int) -> str:
    """Map a lead score to 'hot' (80+), 'warm' (60+) or 'nurture'."""
    # the last tier catches everything below the others
    for tier, threshold in TIER_THRESHOLDS[:-1]:
        if score >= threshold:
            return tier
    return TIER_THRESHOLDS[-1][0]


def is_decision_maker(job_title: str) -> bool:
    title = (job_title or "").lower()
    return any(keyword in title for keyword in DECISION_MAKER_TITLES)


def parse_headcount(company_size: str):
    """Pull a headcount out of free text by dropping every non-digit.

    "1,500 employees" -> 1500, "abc" -> None. Digits are concatenated, so a
    range like "50-200" reads as 50200.
    """
    digits = "".join(ch for ch in (company_size or "") if "0" <= ch <= "9")
    if not digits:
        return None
    return int(digits)


def company_size_points(headcount: int) -> int:
    for minimum, points in COMPANY_SIZE_BANDS[:-1]:
        if headcount >= minimum:
            return points
    return COMPANY_SIZE_BANDS[-1][1]


def match_pain_keywords(pain_points: str) -> list:
    """Return [(keyword, weight)] for every keyword found in the pain text."""
    text = (pain_points or "").lower()
    return [(kw, weight) for kw, weight in PAIN_KEYWORD_WEIGHTS.items() if kw in text]


def compute_insight(record: dict) -> dict:
    """Score a lead record. Deterministic and explainable.

    Args:
        record: LeadRecord dict. Missing keys and None values count as empty.
            The override fields (lead_score, score_reason,
            personalized_message, email_guess) are never read.

    Returns:
        Insight: {lead_score, tier, score_reason, reasons, feature_scores,
                  penalty, personalized_message, missing_fields}
    """
    values = {key: _text(record.get(key)) for key, _ in REQUIRED_FIELDS}
    score = BASE_SCORE
    reasons = []
    missing = []
    feature_scores = {}

    # 1. Company name
    company = values["company_name"]
    if company:
        feature_scores["company_name"] = FIELD_POINTS["company_name"]
        reasons.append(f"Company identified as {company}.")
    else:
        missing.append("Company Name")

    # 2. Contact name
    contact = values["contact_name"]
    if contact:
        feature_scores["contact_name"] = FIELD_POINTS["contact_name"]
        reasons.append(f"Contact identified as {contact}.")
    else:
        missing.append("Contact Name")

    # 3. Job title, with a bonus for decision makers
    title = values["job_title"]
    if title:
        pts = FIELD_POINTS["job_title"]
        if is_decision_maker(title):
            pts += FIELD_POINTS["decision_maker_bonus"]
            reasons.append("Decision-maker level job title detected.")
        else:
            reasons.append("Relevant job title provided.")
        feature_scores["job_title"] = pts
    else:
        missing.append("Job Title")

    # 4. LinkedIn
    if values["linkedin_url"]:
        feature_scores["linkedin_url"] = FIELD_POINTS["linkedin_url"]
        reasons.append("LinkedIn profile supplied for deeper research.")
    else:
        missing.append("LinkedIn URL")

    # 5. Company size
    size_text = values["company_size"]
    if size_text:
        headcount = parse_headcount(size_text)
        if headcount is not None:
            feature_scores["company_size"] = company_size_points(headcount)
            segment = "mid-market/enterprise" if headcount >= MID_MARKET_THRESHOLD else "SMB"
            reasons.append(f"Company size suggests {segment} potential.")
        else:
            feature_scores["company_size"] = FIELD_POINTS["company_size_qualitative"]
            reasons.append("Company size provided qualitatively.")
    else:
        missing.append("Company Size")

    # 6. Pain points
    pains = values["pain_points"]
    if pains:
        matches = match_pain_keywords(pains)
        keyword_score = sum(weight for _, weight in matches)
        for keyword, _ in matches:
            reasons.append(f'Mentions "{keyword}" as a pain point.')
        if keyword_score:
            feature_scores["pain_points"] = keyword_score
        else:
            feature_scores["pain_points"] = FIELD_POINTS["pain_points_generic"]
            reasons.append("Pain points captured for personalization.")
    else:
        missing.append("Pain Points")

    score += sum(feature_scores.values())
    penalty = len(missing) * MISSING_FIELD_PENALTY
    score -= penalty
    final_score = int(clamp(round(score), MIN_SCORE, MAX_SCORE))

    if missing:
        reasons.append(f"Missing context for: {', '.join(missing)}.")
    else:
        reasons.append("Key fields are complete for outreach.")

    tier = lead_tier(final_score)
    logger.debug("Scored lead %s", final_score,
                 extra={"lead_score": final_score, "missing_count": len(missing), "tier": tier})

    return {
        "lead_score": final_score,
        "tier": tier,
        "score_reason": " ".join(reasons),
        "reasons": reasons,
        "feature_scores": feature_scores,
        "penalty": penalty,
        "personalized_message": build_personalized_message(values),
        "missing_fields": missing,
    }
