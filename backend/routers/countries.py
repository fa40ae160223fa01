from fastapi import APIRouter, HTTPException, Query

from models.country import Country
from services import country_service

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[Country])
async def list_countries(
    allows_dual: bool | None = None,
    has_visa_data: bool | None = None,
):
    countries = country_service.get_all()
    if allows_dual is not None:
        countries = [c for c in countries if c.allows_dual == allows_dual]
    if has_visa_data is not None:
        countries = [c for c in countries if c.has_visa_data == has_visa_data]
    return countries


@router.get("/search", response_model=Country)
async def search_country(q: str = Query(..., min_length=1)):
    country = country_service.find_country(q)
    if not country:
        raise HTTPException(status_code=404, detail=f"No country matches '{q}'")
    return country


@router.get("/{iso3}", response_model=Country)
async def get_country(iso3: str):
    country = country_service.get_by_code(iso3)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country
