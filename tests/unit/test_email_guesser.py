"""
Unit tests for the email guesser.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

import pytest

from leadbuilder.agents.email_guesser import guess_email, name_parts, normalize_company


def test_both_empty():
    assert guess_email("", "") == ""


def test_first_last_with_suffix():
    assert guess_email("Jane Doe", "Acme Inc") == "jane.doe@acme.com"


def test_single_name():
    assert guess_email("Cher", "Acme") == "cher@acme.com"


def test_middle_names_use_first_and_last():
    """Punctuation is dropped before tokenizing."""
    assert guess_email("Mary Ann O'Neil", "Globex Corp.") == "mary.oneil@globex.com"


@pytest.mark.parametrize("contact,company", [
    ("Jane Doe", ""),
    ("", "Acme"),
    ("1234", "Acme"),
    ("Jane Doe", "!!!"),
])
def test_no_partial_guesses(contact, company):
    assert guess_email(contact, company) == "", f"Expected no guess for {contact!r} @ {company!r}"


def test_suffix_only_company_falls_back_to_example():
    assert guess_email("Jane Doe", "Inc") == "jane.doe@example.com"
    assert guess_email("Cher", "LLC") == "cher@example.com"


def test_digits_kept_in_company():
    assert guess_email("Jane Doe", "3M") == "jane.doe@3m.com"


def test_none_inputs_treated_as_empty():
    assert guess_email(None, None) == ""
    assert guess_email("Jane Doe", None) == ""


def test_name_parts():
    assert name_parts("  Jane   Q.  Doe ") == ("jane", "doe")
    assert name_parts("Cher") == ("cher", "")
    assert name_parts("") == ("", "")


def test_normalize_company_strips_one_trailing_suffix():
    assert normalize_company("Acme Co.") == "acme"
    assert normalize_company("Acme LLC Inc") == "acmellc"
    assert normalize_company("Initech") == "initech"


def test_suffix_match_is_on_collapsed_text():
    """'Costco' ends in 'co', so it loses it like 'Acme Co' would."""
    assert normalize_company("Costco") == "cost"


def test_guess_is_idempotent():
    assert guess_email("Jane Doe", "Acme Inc") == guess_email("Jane Doe", "Acme Inc")
