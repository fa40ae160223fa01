from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field

REGION_NAMES: dict[int, str] = {
    1: "Africa",
    2: "Asia",
    3: "Europe",
    4: "Latin America & Caribbean",
    5: "North America",
    6: "Oceania",
}


class DataQuality(str, Enum):
    VERIFIED = "verified"
    OVERRIDDEN = "overridden"
    UNCERTAIN = "uncertain"


class Allowed(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["allowed"] = "allowed"


class AllowedConditional(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["conditional"] = "conditional"
    with_countries: tuple[str, ...] = ()

    def permits(self, partner_name: str) -> bool:
        # Partner name appearing anywhere inside a listed entry counts as a match
        target = partner_name.lower()
        return any(target in entry.lower() for entry in self.with_countries)


class Disallowed(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["disallowed"] = "disallowed"


class Uncertain(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["uncertain"] = "uncertain"


DualCitizenshipStatus = Annotated[
    Union[Allowed, AllowedConditional, Disallowed, Uncertain],
    Field(discriminator="kind"),
]


class LegalDocument(BaseModel):
    model_config = {"frozen": True}

    title: str
    url: str | None = None


class Country(BaseModel):
    model_config = {"frozen": True}

    iso3: str
    iso2: str
    name: str
    country_code: int
    dependency_code: int | None = None
    world_region: int
    data_year: int = 2020
    dual_citizenship: DualCitizenshipStatus
    data_quality: DataQuality = DataQuality.VERIFIED
    comment: str | None = None
    legal_documents: tuple[LegalDocument, ...] = ()
    visa_free_access: tuple[str, ...] = ()

    @computed_field
    @property
    def region_name(self) -> str:
        return REGION_NAMES.get(self.world_region, "Unknown")

    @property
    def allows_dual(self) -> bool:
        return isinstance(self.dual_citizenship, (Allowed, AllowedConditional))

    @property
    def is_conditional(self) -> bool:
        return isinstance(self.dual_citizenship, AllowedConditional)

    @property
    def has_visa_data(self) -> bool:
        return len(self.visa_free_access) > 0

    @property
    def has_document_urls(self) -> bool:
        return any(doc.url for doc in self.legal_documents)

    @computed_field
    @property
    def dual_status_label(self) -> str:
        if self.is_conditional:
            return "Conditional"
        if isinstance(self.dual_citizenship, Allowed):
            return "Yes"
        if isinstance(self.dual_citizenship, Disallowed):
            return "No"
        return "Unknown"
