from pydantic import BaseModel, model_validator

from models.country import Country


class SynergyBreakdown(BaseModel):
    visa_expansion: int = 0
    legal_clarity: int = 0
    geo_diversity: int = 0
    data_confidence: int = 0


class SynergyScore(BaseModel):
    score: int
    breakdown: SynergyBreakdown
    compatible: bool
    reason: str | None = None
    has_visa_data: bool = False

    @model_validator(mode="after")
    def _reason_iff_incompatible(self) -> "SynergyScore":
        if self.compatible and self.reason is not None:
            raise ValueError("compatible synergy cannot carry an incompatibility reason")
        if not self.compatible and not self.reason:
            raise ValueError("incompatible synergy requires a reason")
        return self


class CountrySynergy(BaseModel):
    country: Country
    synergy: SynergyScore


class CombinedVisaAccess(BaseModel):
    total: list[str] = []
    newly_unlocked: dict[str, list[str]] = {}
    by_passport: dict[str, list[str]] = {}
