from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from config import settings
from models.synergy import CombinedVisaAccess
from services import country_service
from services.visa_access_service import combined_access

router = APIRouter(prefix="/access", tags=["access"])


class CombinedAccessRequest(BaseModel):
    passports: list[str] = Field(default_factory=list)

    @field_validator("passports")
    @classmethod
    def _check_selection(cls, v: list[str]) -> list[str]:
        codes = [code.strip().upper() for code in v]
        if len(codes) > settings.max_passports:
            raise ValueError(f"At most {settings.max_passports} passports can be combined")
        if len(set(codes)) != len(codes):
            raise ValueError("Each passport can only be selected once")
        return codes


@router.post("/combined", response_model=CombinedVisaAccess)
async def get_combined_access(req: CombinedAccessRequest):
    selection = []
    for code in req.passports:
        country = country_service.get_by_code(code)
        if not country:
            raise HTTPException(status_code=404, detail=f"Country not found: {code}")
        selection.append(country)
    return combined_access(selection)
