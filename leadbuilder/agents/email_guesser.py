"""
Lead Builder - Email Guesser
Derives a plausible work address (first.last@company.com) from a contact
name and company name. Returns "" when there is no usable guess.
"""

import re

CORPORATE_SUFFIXES = ("inc", "llc", "ltd", "corp", "co")
FALLBACK_DOMAIN = "example"

_NON_NAME_CHARS = re.compile(r"[^a-z\s]")
_NON_DOMAIN_CHARS = re.compile(r"[^a-z0-9]")
_SUFFIX_RE = re.compile(r"(" + "|".join(CORPORATE_SUFFIXES) + r")\Z")


def name_parts(contact_name: str) -> tuple:
    """Return (first, last) lowercase name tokens. last is "" for single names."""
    normalized = _NON_NAME_CHARS.sub("", (contact_name or "").lower()).strip()
    parts = normalized.split()
    first = parts[0] if parts else ""
    last = parts[-1] if len(parts) > 1 else ""
    return first, last


def normalize_company(company_name: str) -> str:
    """Lowercase alphanumerics with one trailing corporate suffix removed.

    "Acme Inc" -> "acme", "Acme Co." -> "acme". Note the suffix match is on
    the collapsed string, so "Costco" also loses its "co".
    """
    collapsed = _NON_DOMAIN_CHARS.sub("", (company_name or "").lower())
    return _SUFFIX_RE.sub("", collapsed, count=1).strip()


def guess_email(contact_name: str, company_name: str) -> str:
    """Guess an email address for a contact at a company.

    Args:
        contact_name: Free-text full name ("Jane Doe", "Cher").
        company_name: Free-text company name ("Acme Inc").

    Returns:
        "first.last@company.com", "first@company.com" for single names,
        "first@example.com" when the company is only a corporate suffix,
        or "" when either the name or the company has nothing usable.

    A company that is nothing but a corporate suffix ("Inc", "LLC") still
    counts as a company and gets the example.com domain rather than no guess.
    """
    contact_name = contact_name or ""
    company_name = company_name or ""
    if not contact_name and not company_name:
        return ""

    first, last = name_parts(contact_name)
    collapsed = _NON_DOMAIN_CHARS.sub("", company_name.lower())
    if not first or not collapsed:
        return ""

    domain = normalize_company(company_name) or FALLBACK_DOMAIN
    handle = f"{first}.{last}" if last else first
    return f"{handle}@{domain}.com"
