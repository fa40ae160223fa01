import math
from typing import NamedTuple

from models.country import AllowedConditional, Country, DataQuality
from models.synergy import SynergyBreakdown, SynergyScore

NEUTRAL_VISA_SCORE = 50.0
NEW_DESTINATIONS_CAP = 50  # realistic ceiling on destinations a second passport adds
COMBINED_DESTINATIONS_CAP = 200  # realistic ceiling on total visa-free destinations

CONDITIONAL_CLARITY_PENALTY = 20
UNCERTAIN_CLARITY_PENALTY = 25
OVERRIDDEN_CLARITY_PENALTY = 5

SAME_REGION_DIVERSITY = 30.0
MAX_REGION_DISTANCE = 5

UNCERTAIN_CONFIDENCE_PENALTY = 40
OVERRIDDEN_CONFIDENCE_PENALTY = 10
CONFIDENCE_BONUS = 5

# (visa expansion, legal clarity, geo diversity, data confidence)
WEIGHTS_WITH_VISA_DATA = (0.4, 0.3, 0.2, 0.1)
WEIGHTS_WITHOUT_VISA_DATA = (0.2, 0.4, 0.3, 0.1)

CONDITIONAL_RESTRICTION_REASON = "Conditional restrictions prevent this pairing"


class VisaExpansion(NamedTuple):
    score: float
    has_data: bool


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def _round(value: float) -> int:
    # Half-up, so 62.5 scores 63 rather than banker's 62
    return int(math.floor(value + 0.5))


def allows_dual(country: Country) -> bool:
    return country.allows_dual


def _conditional_permits(country: Country, partner: Country) -> bool:
    status = country.dual_citizenship
    if isinstance(status, AllowedConditional):
        return status.permits(partner.name)
    return True


def can_pair(a: Country, b: Country) -> bool:
    if not allows_dual(a) or not allows_dual(b):
        return False
    return _conditional_permits(a, b) and _conditional_permits(b, a)


def calculate_visa_expansion(a: Country, b: Country) -> VisaExpansion:
    """How much ``b`` widens ``a``'s visa-free reach.

    Neutral when either side has no recorded destinations: missing data is
    neither rewarded nor penalised.
    """
    a_access = {d.lower() for d in a.visa_free_access}
    b_access = {d.lower() for d in b.visa_free_access}

    if not a_access or not b_access:
        return VisaExpansion(NEUTRAL_VISA_SCORE, False)

    new_from_b = len(b_access - a_access)
    combined = len(a_access | b_access)

    expansion = min(50.0, new_from_b / NEW_DESTINATIONS_CAP * 50)
    coverage = min(50.0, combined / COMBINED_DESTINATIONS_CAP * 50)
    return VisaExpansion(_clamp(expansion + coverage), True)


def calculate_legal_clarity(a: Country, b: Country) -> float:
    score = 100.0
    for country in (a, b):
        if country.is_conditional:
            score -= CONDITIONAL_CLARITY_PENALTY
        if country.data_quality == DataQuality.UNCERTAIN:
            score -= UNCERTAIN_CLARITY_PENALTY
        elif country.data_quality == DataQuality.OVERRIDDEN:
            score -= OVERRIDDEN_CLARITY_PENALTY
    return _clamp(score)


def calculate_geo_diversity(a: Country, b: Country) -> float:
    if a.world_region == b.world_region:
        return SAME_REGION_DIVERSITY

    distance = abs(a.world_region - b.world_region)
    return _clamp(50 + distance / MAX_REGION_DISTANCE * 50)


def calculate_data_confidence(a: Country, b: Country) -> float:
    score = 100.0
    for country in (a, b):
        if country.data_quality == DataQuality.UNCERTAIN:
            score -= UNCERTAIN_CONFIDENCE_PENALTY
        elif country.data_quality == DataQuality.OVERRIDDEN:
            score -= OVERRIDDEN_CONFIDENCE_PENALTY
        if country.has_visa_data:
            score += CONFIDENCE_BONUS
        if country.has_document_urls:
            score += CONFIDENCE_BONUS
    return _clamp(score)


def _incompatible(reason: str) -> SynergyScore:
    return SynergyScore(
        score=0,
        breakdown=SynergyBreakdown(),
        compatible=False,
        reason=reason,
    )


def compatibility_reason(a: Country, b: Country) -> str | None:
    """Why ``a`` and ``b`` cannot be held together, or None if they can."""
    if not allows_dual(a):
        return f"{a.name} does not allow dual citizenship"
    if not allows_dual(b):
        return f"{b.name} does not allow dual citizenship"
    if not can_pair(a, b):
        return CONDITIONAL_RESTRICTION_REASON
    return None


def calculate_synergy(a: Country, b: Country) -> SynergyScore:
    """Score holding ``b`` alongside primary passport ``a`` on a 0-100 scale."""
    reason = compatibility_reason(a, b)
    if reason is not None:
        return _incompatible(reason)

    visa = calculate_visa_expansion(a, b)
    legal_clarity = calculate_legal_clarity(a, b)
    geo_diversity = calculate_geo_diversity(a, b)
    data_confidence = calculate_data_confidence(a, b)

    weights = WEIGHTS_WITH_VISA_DATA if visa.has_data else WEIGHTS_WITHOUT_VISA_DATA
    factors = (visa.score, legal_clarity, geo_diversity, data_confidence)
    total = sum(value * weight for value, weight in zip(factors, weights))

    return SynergyScore(
        score=_round(_clamp(total)),
        breakdown=SynergyBreakdown(
            visa_expansion=_round(visa.score),
            legal_clarity=_round(legal_clarity),
            geo_diversity=_round(geo_diversity),
            data_confidence=_round(data_confidence),
        ),
        compatible=True,
        has_visa_data=visa.has_data,
    )
