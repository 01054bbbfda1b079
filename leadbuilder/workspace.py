"""
Lead Builder - Workspace
Headless form state for the lead builder: the LeadRecord is the single
source of truth, and the insight is recomputed from it on demand.

User-edited override fields win for display but never feed back into
scoring. Copy acknowledgments expire after COPY_ACK_SECONDS.

Usage:
    from leadbuilder.workspace import LeadWorkspace

    ws = LeadWorkspace()
    ws.update("contact_name", "Jane Doe")
    ws.update("company_name", "Acme Inc")
    ws.display()["email_guess"]   # "jane.doe@acme.com"
"""

import copy
import logging
import time
from collections import OrderedDict
from typing import Callable

from leadbuilder import config
from leadbuilder.agents.email_guesser import guess_email
from leadbuilder.agents.error_handler import safe_execute
from leadbuilder.agents.scorer import compute_insight, lead_tier

logger = logging.getLogger("leadbuilder.workspace")

LEAD_FIELDS = (
    "company_name",
    "contact_name",
    "job_title",
    "email_guess",
    "linkedin_url",
    "company_size",
    "pain_points",
    "lead_score",
    "score_reason",
    "personalized_message",
)

SUMMARY_PLACEHOLDER = "—"

# copy target -> displayed field it copies
COPY_TARGETS = {
    "email": "email_guess",
    "reason": "score_reason",
    "message": "personalized_message",
}


def empty_record() -> dict:
    return {f: "" for f in LEAD_FIELDS}


def resolve_email(record: dict) -> str:
    """The user's email override if set, otherwise a fresh guess."""
    return record.get("email_guess") or guess_email(
        record.get("contact_name") or "", record.get("company_name") or ""
    )


def build_insight(record: dict) -> dict:
    """Guess the email, then score the record augmented with it."""
    email = resolve_email(record)
    insight = compute_insight({**record, "email_guess": email})
    insight["email"] = email
    return insight


def apply_overrides(record: dict, insight: dict) -> dict:
    """Displayed values: a non-empty override beats the computed value."""
    return {
        "email_guess": record.get("email_guess") or insight["email"],
        "lead_score": record.get("lead_score") or str(insight["lead_score"]),
        "score_reason": record.get("score_reason") or insight["score_reason"],
        "personalized_message": record.get("personalized_message") or insight["personalized_message"],
        "computed_score": insight["lead_score"],
        "tier": lead_tier(insight["lead_score"]),
        "missing_fields": list(insight["missing_fields"]),
    }


class LeadWorkspace:
    """Holds one lead record and derives everything else from it."""

    def __init__(self, clock: Callable[[], float] = None,
                 cache_size: int = None, ack_seconds: float = None):
        self._record = empty_record()
        self._clock = clock or time.monotonic
        self._cache_size = config.INSIGHT_CACHE_SIZE if cache_size is None else cache_size
        self._ack_seconds = config.COPY_ACK_SECONDS if ack_seconds is None else ack_seconds
        self._cache = OrderedDict()
        self._copied = ""
        self._copied_at = 0.0

    @property
    def record(self) -> dict:
        """A copy of the current record snapshot."""
        return dict(self._record)

    def update(self, field: str, value) -> None:
        if field not in self._record:
            raise KeyError(f"Unknown lead field: {field}")
        self._record[field] = "" if value is None else str(value)
        self._copied = ""
        logger.debug("Field updated", extra={"field": field, "action": "update"})

    def reset(self) -> None:
        # the copy ack is left to expire on its own timer
        self._record = empty_record()
        logger.debug("Workspace reset", extra={"action": "reset"})

    def insight(self) -> dict:
        if self._cache_size <= 0:
            return build_insight(self._record)

        key = tuple(self._record[f] for f in LEAD_FIELDS)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return copy.deepcopy(cached)

        result = build_insight(self._record)
        self._cache[key] = copy.deepcopy(result)
        if len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
        return result

    def display(self) -> dict:
        return apply_overrides(self._record, self.insight())

    def summary(self) -> dict:
        """Quick summary of the raw inputs, with a placeholder for blanks."""
        r = self._record
        return {
            "company": r["company_name"] or SUMMARY_PLACEHOLDER,
            "contact": r["contact_name"] or SUMMARY_PLACEHOLDER,
            "role": r["job_title"] or SUMMARY_PLACEHOLDER,
            "linkedin": r["linkedin_url"] or SUMMARY_PLACEHOLDER,
            "company_size": r["company_size"] or SUMMARY_PLACEHOLDER,
        }

    def copy(self, target: str, writer: Callable[[str], object]) -> bool:
        """Hand the displayed text for target to a clipboard writer.

        Returns True when the writer succeeded. A failing writer is logged
        and leaves the workspace untouched.
        """
        if target not in COPY_TARGETS:
            raise ValueError(f"Unknown copy target: {target}")
        text = self.display()[COPY_TARGETS[target]]

        def _write():
            writer(text)
            return True

        ok = safe_execute(_write, phase="copy", action=target, fallback=False)
        if ok:
            self._copied = target
            self._copied_at = self._clock()
        return ok

    def copied_field(self) -> str:
        """The target acknowledged by the last successful copy, or ""."""
        if self._copied and self._clock() - self._copied_at >= self._ack_seconds:
            self._copied = ""
        return self._copied
