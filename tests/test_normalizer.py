"""
tests/test_normalizer.py — Raw row to Country normalization.

Covers legality classification, data-quality parsing, legal document
zipping, and the defaults applied to absent fields.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from models.country import (
    Allowed,
    AllowedConditional,
    DataQuality,
    Disallowed,
    Uncertain,
)
from services.normalizer import (
    normalize_country,
    parse_data_quality,
    parse_dual_citizenship_status,
    parse_legal_documents,
)
from tests.conftest import make_record


# ---------------------------------------------------------------------------
# Legality text
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["Yes", "yes", "  YES  "])
def test_yes_is_allowed(text):
    assert isinstance(parse_dual_citizenship_status(text), Allowed)


@pytest.mark.parametrize("text", ["No", "no", " no "])
def test_no_is_disallowed(text):
    assert isinstance(parse_dual_citizenship_status(text), Disallowed)


@pytest.mark.parametrize("text", ["No, but yes with", "no but yes with", "No, but yes with partner states"])
def test_conditional_variants(text):
    status = parse_dual_citizenship_status(text, "Italy, France")
    assert isinstance(status, AllowedConditional)
    assert status.with_countries == ("Italy", "France")


def test_conditional_partner_list_drops_blank_entries():
    status = parse_dual_citizenship_status("No, but yes with", " Spain ,, Portugal, ")
    assert status.with_countries == ("Spain", "Portugal")


def test_conditional_without_partner_field_has_empty_list():
    status = parse_dual_citizenship_status("No, but yes with", None)
    assert isinstance(status, AllowedConditional)
    assert status.with_countries == ()


@pytest.mark.parametrize("text", ["", "???", None, "maybe", "Yes (pending reform)"])
def test_unrecognised_text_is_uncertain(text):
    assert isinstance(parse_dual_citizenship_status(text), Uncertain)


# ---------------------------------------------------------------------------
# Data quality
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (None, DataQuality.VERIFIED),
        ("", DataQuality.VERIFIED),
        ("Overridden 2021", DataQuality.OVERRIDDEN),
        ("overrridden", DataQuality.OVERRIDDEN),
        ("???", DataQuality.UNCERTAIN),
        ("checked", DataQuality.VERIFIED),
    ],
)
def test_data_quality(status, expected):
    assert parse_data_quality(status) == expected


# ---------------------------------------------------------------------------
# Legal documents
# ---------------------------------------------------------------------------

def test_documents_padded_to_longer_array():
    docs = parse_legal_documents(["https://a", "https://b", "https://c"], ["Act"])
    assert [d.title for d in docs] == ["Act", "Document 2", "Document 3"]
    assert [d.url for d in docs] == ["https://a", "https://b", "https://c"]


def test_missing_urls_become_none():
    docs = parse_legal_documents([None], ["Act", "Decree"])
    assert [(d.title, d.url) for d in docs] == [("Act", None), ("Decree", None)]


def test_no_documents():
    assert parse_legal_documents([], []) == ()


# ---------------------------------------------------------------------------
# Full record
# ---------------------------------------------------------------------------

def test_normalize_country_fields():
    record = make_record(
        "esp", "Spain",
        allows_dual="No, but yes with",
        column1="Argentina, Brazil",
        status="Overridden",
        world_region=3,
        urls=["https://www.boe.es/"],
        documents=["Civil Code"],
        visa=["France", "Italy"],
    )
    country = normalize_country(record)

    assert country.iso3 == "ESP"
    assert country.name == "Spain"
    assert country.is_conditional
    assert country.allows_dual
    assert country.dual_status_label == "Conditional"
    assert country.data_quality == DataQuality.OVERRIDDEN
    assert country.region_name == "Europe"
    assert country.visa_free_access == ("France", "Italy")
    assert country.has_document_urls


def test_absent_visa_list_defaults_to_empty():
    country = normalize_country(make_record("MEX", "Mexico"))
    assert country.visa_free_access == ()
    assert not country.has_visa_data


def test_absent_year_defaults():
    country = normalize_country(make_record("MEX", "Mexico"))
    assert country.data_year == 2020


def test_unknown_region_name():
    country = normalize_country(make_record("XXX", "Nowhere", world_region=9))
    assert country.region_name == "Unknown"


def test_country_is_immutable():
    country = normalize_country(make_record("MEX", "Mexico"))
    with pytest.raises(ValidationError):
        country.name = "Other"


def test_dual_citizenship_status_is_immutable():
    country = normalize_country(
        make_record("XXX", "Xland", allows_dual="No, but yes with", column1="Italy")
    )
    with pytest.raises(ValidationError):
        country.dual_citizenship.with_countries = ("Italy", "Germany")
    with pytest.raises(AttributeError):
        country.dual_citizenship.with_countries.append("Germany")
    assert country.dual_citizenship.with_countries == ("Italy",)


@pytest.mark.parametrize("status", [Allowed(), Disallowed(), Uncertain(), AllowedConditional()])
def test_status_tag_cannot_change(status):
    with pytest.raises(ValidationError):
        status.kind = "allowed"
