import logging
from typing import Iterable, Iterator

from config import settings
from models.country import Country
from models.raw_record import RawRecord
from services.normalizer import normalize_country
from utils.dataset import load_raw_records

logger = logging.getLogger(__name__)


class DuplicateCountryError(ValueError):
    """Two source rows share the same ISO3 code."""


class CountryRegistry:
    """Read-only set of normalized countries with ISO3/ISO2/name indices."""

    def __init__(self, countries: Iterable[Country]):
        self._countries: tuple[Country, ...] = tuple(countries)
        self._by_iso3: dict[str, Country] = {}
        for country in self._countries:
            if country.iso3 in self._by_iso3:
                logger.error(
                    "Duplicate ISO3 %s (%s and %s) in dataset",
                    country.iso3, self._by_iso3[country.iso3].name, country.name,
                )
                raise DuplicateCountryError(f"Duplicate ISO3 code: {country.iso3}")
            self._by_iso3[country.iso3] = country

        # First occurrence wins for the non-unique indices
        self._by_iso2: dict[str, Country] = {}
        self._by_name: dict[str, Country] = {}
        for country in self._countries:
            if country.iso2:
                self._by_iso2.setdefault(country.iso2, country)
            self._by_name.setdefault(country.name.lower(), country)

    @classmethod
    def from_records(cls, records: Iterable[RawRecord]) -> "CountryRegistry":
        return cls(normalize_country(r) for r in records)

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    def __len__(self) -> int:
        return len(self._countries)

    def __iter__(self) -> Iterator[Country]:
        return iter(self._countries)

    def __contains__(self, iso3: object) -> bool:
        return isinstance(iso3, str) and iso3.upper() in self._by_iso3

    def get_by_iso3(self, code: str) -> Country | None:
        return self._by_iso3.get(code.strip().upper())

    def find_country(self, query: str) -> Country | None:
        """Resolve ISO3, then ISO2, then exact name, then name substring.

        A blank query is treated as absent and returns None rather than
        substring-matching the first country.
        """
        normalized = query.strip()
        if not normalized:
            return None
        upper = normalized.upper()
        lower = normalized.lower()

        return (
            self._by_iso3.get(upper)
            or self._by_iso2.get(upper)
            or self._by_name.get(lower)
            or next((c for c in self._countries if lower in c.name.lower()), None)
        )

    def countries_allowing_dual(self) -> list[Country]:
        return [c for c in self._countries if c.allows_dual]

    def countries_with_visa_data(self) -> list[Country]:
        return [c for c in self._countries if c.has_visa_data]


_registry: CountryRegistry | None = None


def _load() -> CountryRegistry:
    global _registry
    if _registry is None:
        _registry = CountryRegistry.from_records(load_raw_records(settings.dataset_path))
        logger.info("Country registry built with %d countries", len(_registry))
    return _registry


def get_registry() -> CountryRegistry:
    return _load()


def get_all() -> list[Country]:
    return list(_load().countries)


def get_by_code(code: str) -> Country | None:
    return _load().get_by_iso3(code)


def find_country(query: str) -> Country | None:
    return _load().find_country(query)
