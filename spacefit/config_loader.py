import yaml
import os
from typing import List
from pydantic import BaseModel, Field, field_validator, model_validator


class ComponentWeights(BaseModel):
    """Weights for the four sub-scores in a composite fit index."""
    location: float = Field(ge=0, le=1)
    size: float = Field(ge=0, le=1)
    budget: float = Field(ge=0, le=1)
    property_type: float = Field(ge=0, le=1)

    @model_validator(mode='after')
    def check_total(self) -> 'ComponentWeights':
        total = self.location + self.size + self.budget + self.property_type
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Component weights must sum to 1.0, got {total:.3f}")
        return self


def default_bfi_weights() -> ComponentWeights:
    return ComponentWeights(location=0.30, size=0.25, budget=0.25, property_type=0.20)


def default_pfi_weights() -> ComponentWeights:
    return ComponentWeights(location=0.25, size=0.30, budget=0.30, property_type=0.15)


class ScorerConfig(BaseModel):
    """
    Configuration for the Score Composer (BFI / PFI).

    BFI: how well a listing fits a brand's requirements.
    PFI: how well a brand fits a listing, from the owner's side.
    """
    bfi_weights: ComponentWeights = Field(default_factory=default_bfi_weights)
    pfi_weights: ComponentWeights = Field(default_factory=default_pfi_weights)

    # Location score when the requester names no preferred locations
    bfi_location_neutral: int = Field(default=50, ge=0, le=100)
    pfi_location_neutral: int = Field(default=60, ge=0, le=100)  # "flexible" brand

    # Substituted when scoring fails (per sub-score / per candidate)
    component_fault_score: int = Field(default=20, ge=0, le=100)
    fault_score: int = Field(default=20, ge=0, le=100)


class MatcherConfig(BaseModel):
    """Configuration for the Match Finder."""
    skip_unavailable: bool = True  # Drop listings flagged unavailable before scoring


class ResultPolicy(BaseModel):
    """Post-scoring filtering, relaxation and truncation policy.

    min_score is the quality floor enforced by the Match Finder; the
    relaxation ladder never goes below it.
    """
    min_score: int = Field(default=30, ge=0, le=100)
    top_k: int = Field(default=50, ge=1, le=500)
    relaxation_thresholds: List[int] = Field(default_factory=lambda: [60, 50, 40, 30])

    @field_validator('relaxation_thresholds')
    @classmethod
    def check_descending(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("relaxation_thresholds must not be empty")
        if any(t < 0 or t > 100 for t in value):
            raise ValueError("relaxation_thresholds must be within 0-100")
        if any(a <= b for a, b in zip(value, value[1:])):
            raise ValueError("relaxation_thresholds must be strictly descending")
        return value


class ExplainabilityConfig(BaseModel):
    """Rationale strings attached to ranked matches."""
    max_reasons: int = Field(default=5, ge=0, le=20)
    currency_symbol: str = "₹"
    area_unit: str = "sqft"


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    matcher: MatcherConfig = Field(default_factory=MatcherConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    explainability: ExplainabilityConfig = Field(default_factory=ExplainabilityConfig)


class AppConfig(BaseModel):
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), use the repo-level file
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var overrides for the result policy
    env_top_k = os.environ.get("SPACEFIT_TOP_K")
    if env_top_k:
        data.setdefault('matching', {}).setdefault('result_policy', {})['top_k'] = int(env_top_k)

    env_min_score = os.environ.get("SPACEFIT_MIN_SCORE")
    if env_min_score:
        data.setdefault('matching', {}).setdefault('result_policy', {})['min_score'] = int(env_min_score)

    env_currency = os.environ.get("SPACEFIT_CURRENCY_SYMBOL")
    if env_currency:
        data.setdefault('matching', {}).setdefault('explainability', {})['currency_symbol'] = env_currency

    return AppConfig(**data)
