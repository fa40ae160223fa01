"""Shared factories for building raw rows and normalized countries in memory."""

from __future__ import annotations

from models.country import Country
from models.raw_record import RawRecord
from services.normalizer import normalize_country


def make_record(
    iso3: str,
    name: str,
    *,
    allows_dual: str = "Yes",
    column1: str | None = None,
    status: str | None = None,
    world_region: int = 3,
    urls: list | None = None,
    documents: list | None = None,
    visa: list[str] | None = None,
    iso2: str | None = None,
) -> RawRecord:
    row = {
        "ISO3": iso3,
        "ISO2": iso2 if iso2 is not None else iso3[:2],
        "country": name,
        "country_code": 1,
        "world_region": world_region,
        "Allows_dual": allows_dual,
        "Column1": column1,
        "Status": status,
        "urls": urls or [],
        "documents": documents or [],
    }
    if visa is not None:
        row["visaFreeAccess"] = visa
    return RawRecord.model_validate(row)


def make_country(iso3: str, name: str, **kwargs) -> Country:
    return normalize_country(make_record(iso3, name, **kwargs))

