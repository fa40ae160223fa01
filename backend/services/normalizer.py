"""Turn raw dataset rows into clean ``Country`` entities.

Every function here is total: unrecognised text degrades to the most
conservative classification instead of raising.
"""

import logging
from typing import Callable

from models.country import (
    Allowed,
    AllowedConditional,
    Country,
    DataQuality,
    Disallowed,
    DualCitizenshipStatus,
    LegalDocument,
    Uncertain,
)
from models.raw_record import RawRecord

logger = logging.getLogger(__name__)

DEFAULT_DATA_YEAR = 2020
UNKNOWN_MARKER = "???"

_CONDITIONAL_PHRASES = ("no, but yes with", "no but yes with")
_OVERRIDDEN_SPELLINGS = ("overrid", "overrrid")


def parse_partner_countries(column1: str | None) -> tuple[str, ...]:
    if not column1:
        return ()
    return tuple(c.strip() for c in column1.split(",") if c.strip())


# Ordered (predicate, builder) pairs; the first matching predicate wins.
LegalityRule = tuple[Callable[[str], bool], Callable[[str | None], DualCitizenshipStatus]]

LEGALITY_RULES: list[LegalityRule] = [
    (lambda text: text == "yes", lambda _: Allowed()),
    (lambda text: text == "no", lambda _: Disallowed()),
    (
        lambda text: any(phrase in text for phrase in _CONDITIONAL_PHRASES),
        lambda column1: AllowedConditional(with_countries=parse_partner_countries(column1)),
    ),
    (lambda text: text in ("", UNKNOWN_MARKER), lambda _: Uncertain()),
]


def parse_dual_citizenship_status(
    allows_dual: str | None, column1: str | None = None
) -> DualCitizenshipStatus:
    text = (allows_dual or "").strip().lower()
    for matches, build in LEGALITY_RULES:
        if matches(text):
            return build(column1)

    logger.debug("Unrecognised legality text %r, treating as uncertain", allows_dual)
    return Uncertain()


def parse_data_quality(status: str | None) -> DataQuality:
    if not status:
        return DataQuality.VERIFIED

    text = status.strip().lower()
    if any(spelling in text for spelling in _OVERRIDDEN_SPELLINGS):
        return DataQuality.OVERRIDDEN
    if text == UNKNOWN_MARKER:
        return DataQuality.UNCERTAIN
    return DataQuality.VERIFIED


def parse_legal_documents(
    urls: list[str | None], documents: list[str | None]
) -> tuple[LegalDocument, ...]:
    """Zip titles with URLs, padding whichever array is shorter.

    A missing title becomes ``Document {n}`` (1-based); a missing URL is None.
    """
    length = max(len(urls), len(documents))
    result = []
    for i in range(length):
        title = documents[i] if i < len(documents) else None
        url = urls[i] if i < len(urls) else None
        result.append(LegalDocument(title=title or f"Document {i + 1}", url=url or None))
    return tuple(result)


def normalize_country(raw: RawRecord) -> Country:
    return Country(
        iso3=raw.iso3.strip().upper(),
        iso2=raw.iso2.strip().upper(),
        name=raw.country.strip(),
        country_code=raw.country_code or 0,
        dependency_code=raw.dependency_code,
        world_region=raw.world_region or 0,
        data_year=raw.year or DEFAULT_DATA_YEAR,
        dual_citizenship=parse_dual_citizenship_status(raw.allows_dual, raw.column1),
        data_quality=parse_data_quality(raw.status),
        comment=raw.comment,
        legal_documents=parse_legal_documents(raw.urls, raw.documents),
        visa_free_access=tuple(raw.visa_free_access or ()),
    )
