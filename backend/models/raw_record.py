from pydantic import BaseModel, Field


class RawRecord(BaseModel):
    """One row of the source dual-citizenship dataset, columns as published."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    status: str | None = Field(default=None, alias="Status")
    comment: str | None = Field(default=None, alias="Comment")
    iso3: str = Field(alias="ISO3")
    iso2: str = Field(default="", alias="ISO2")
    country: str
    country_code: int | None = None
    dependency_code: int | None = None
    world_region: int | None = None
    year: int | None = Field(default=None, alias="Year")
    allows_dual: str | None = Field(default="", alias="Allows_dual")
    column1: str | None = Field(default=None, alias="Column1")
    urls: list[str | None] = []
    documents: list[str | None] = []
    visa_free_access: list[str] | None = Field(default=None, alias="visaFreeAccess")
