from typing import Iterable

from config import settings
from models.country import Country
from models.synergy import CountrySynergy, SynergyScore
from services import country_service
from services.scoring_service import calculate_synergy


def _candidates(primary: Country, countries: Iterable[Country] | None) -> list[Country]:
    pool = country_service.get_all() if countries is None else countries
    return [c for c in pool if c.iso3 != primary.iso3]


def top_synergies(
    primary: Country,
    limit: int | None = None,
    countries: Iterable[Country] | None = None,
) -> list[CountrySynergy]:
    """Compatible partners for ``primary``, best first.

    Ties keep registry order since ``list.sort`` is stable.
    """
    if limit is None:
        limit = settings.default_top_limit
    if limit <= 0:
        return []

    scored = [
        CountrySynergy(country=c, synergy=calculate_synergy(primary, c))
        for c in _candidates(primary, countries)
    ]
    scored = [s for s in scored if s.synergy.compatible]
    scored.sort(key=lambda s: s.synergy.score, reverse=True)
    return scored[:limit]


def all_synergies(
    primary: Country, countries: Iterable[Country] | None = None
) -> dict[str, SynergyScore]:
    return {c.iso3: calculate_synergy(primary, c) for c in _candidates(primary, countries)}
