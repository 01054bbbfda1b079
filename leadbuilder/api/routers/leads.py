"""Lead insight routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from leadbuilder.agents.email_guesser import guess_email
from leadbuilder.workspace import apply_overrides, build_insight

router = APIRouter(prefix="/api/leads", tags=["leads"])


class LeadRecord(BaseModel):
    company_name: str = ""
    contact_name: str = ""
    job_title: str = ""
    email_guess: str = ""
    linkedin_url: str = ""
    company_size: str = ""
    pain_points: str = ""
    lead_score: str = ""
    score_reason: str = ""
    personalized_message: str = ""


class EmailGuessRequest(BaseModel):
    contact_name: str = ""
    company_name: str = ""


@router.post("/insight")
def lead_insight(lead: LeadRecord):
    record = lead.model_dump()
    insight = build_insight(record)
    return {
        "email": insight["email"],
        "lead_score": insight["lead_score"],
        "tier": insight["tier"],
        "score_reason": insight["score_reason"],
        "reasons": insight["reasons"],
        "feature_scores": insight["feature_scores"],
        "penalty": insight["penalty"],
        "personalized_message": insight["personalized_message"],
        "missing_fields": insight["missing_fields"],
        "display": apply_overrides(record, insight),
    }


@router.post("/email-guess")
def email_guess(req: EmailGuessRequest):
    return {"email": guess_email(req.contact_name, req.company_name)}
