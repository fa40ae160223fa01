from typing import Sequence

from config import settings
from models.country import Country
from models.synergy import CombinedVisaAccess


class SelectionError(ValueError):
    """A passport selection that breaks the size or uniqueness rules."""


def validate_selection(selection: Sequence[Country], max_passports: int | None = None) -> None:
    limit = settings.max_passports if max_passports is None else max_passports
    if len(selection) > limit:
        raise SelectionError(f"At most {limit} passports can be combined, got {len(selection)}")

    seen: set[str] = set()
    for country in selection:
        if country.iso3 in seen:
            raise SelectionError(f"Passport {country.iso3} selected more than once")
        seen.add(country.iso3)


def combined_access(selection: Sequence[Country]) -> CombinedVisaAccess:
    """Visa-free coverage across an ordered passport selection.

    The first passport is the baseline and is credited with its whole list.
    Each later passport is credited only with destinations not already
    covered when it is reached, so attribution depends on selection order
    while the total does not.
    """
    validate_selection(selection)

    total: set[str] = set()
    newly_unlocked: dict[str, list[str]] = {}
    by_passport: dict[str, list[str]] = {}

    for index, passport in enumerate(selection):
        by_passport[passport.iso3] = list(passport.visa_free_access)

        if index == 0:
            newly_unlocked[passport.iso3] = list(passport.visa_free_access)
            total.update(d.lower() for d in passport.visa_free_access)
            continue

        unlocked = []
        for destination in passport.visa_free_access:
            key = destination.lower()
            if key not in total:
                total.add(key)
                unlocked.append(destination)
        newly_unlocked[passport.iso3] = unlocked

    return CombinedVisaAccess(
        total=sorted(total),
        newly_unlocked=newly_unlocked,
        by_passport=by_passport,
    )
