import logging

from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from models.country import Country
from models.synergy import CountrySynergy, SynergyScore
from services import country_service
from services.ranking_service import all_synergies, top_synergies
from services.scoring_service import calculate_synergy

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/synergy", tags=["synergy"])

limiter = Limiter(key_func=get_remote_address)


def _require(iso3: str) -> Country:
    country = country_service.get_by_code(iso3)
    if not country:
        raise HTTPException(status_code=404, detail=f"Country not found: {iso3}")
    return country


@router.get("/{primary}/top", response_model=list[CountrySynergy])
async def get_top_synergies(primary: str, limit: int | None = Query(None, ge=1, le=250)):
    return top_synergies(_require(primary), limit)


@router.get("/{primary}/all", response_model=dict[str, SynergyScore])
@limiter.limit("30/minute")
async def get_all_synergies(request: Request, primary: str):
    country = _require(primary)
    synergies = all_synergies(country)
    logger.debug(
        "Computed %d synergies for %s (%d compatible)",
        len(synergies), country.iso3, sum(s.compatible for s in synergies.values()),
    )
    return synergies


@router.get("/{primary}/{candidate}", response_model=SynergyScore)
async def get_synergy(primary: str, candidate: str):
    return calculate_synergy(_require(primary), _require(candidate))
