from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class AgeGap(BaseModel):
    """Admissible range (in years) for parent minus child age"""
    min: int = Field(default=15, ge=0)
    max: int = Field(default=50, ge=0)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min > self.max:
            raise ValueError(f"age gap min ({self.min}) is greater than max ({self.max})")
        return self

    class Config:
        frozen = True
        extra = "forbid"
        alias_generator = to_camel
        populate_by_name = True


class RuleWeights(BaseModel):
    """Score added by each satisfied check of a relationship rule"""
    surname: float = Field(ge=0)
    age: float = Field(ge=0)
    location: float = Field(ge=0)

    class Config:
        frozen = True
        extra = "forbid"
        alias_generator = to_camel
        populate_by_name = True


class MatcherConfig(BaseModel):
    """Thresholds for the relationship rules, fixed for the lifetime of a matcher"""

    # Reserved for a full-name check, the current rules compare surnames only
    name_similarity_threshold: float = Field(default=0.7, ge=0, le=1)
    surname_similarity_threshold: float = Field(default=0.8, ge=0, le=1)
    location_exact_required: bool = True
    sibling_max_age_gap: int = Field(default=15, ge=0)
    parent_child_age_gap: AgeGap = AgeGap()

    sibling_weights: RuleWeights = RuleWeights(surname=0.5, age=0.3, location=0.2)
    parent_child_weights: RuleWeights = RuleWeights(surname=0.4, age=0.4, location=0.2)
    likely_threshold: float = Field(default=0.7, ge=0)

    class Config:
        frozen = True
        extra = "forbid"
        alias_generator = to_camel
        populate_by_name = True


class Settings(BaseSettings):
    people_data_file: str = "sample_data/people.json"
    log_level: str = "INFO"

    # Matching thresholds
    name_similarity_threshold: float = 0.7
    surname_similarity_threshold: float = 0.8
    location_exact_required: bool = True
    sibling_max_age_gap: int = 15
    parent_child_min_age_gap: int = 15
    parent_child_max_age_gap: int = 50

    class Config:
        env_file = ".env"
        case_sensitive = False

    def people_data_path(self) -> Path:
        """Data file location, relative paths taken from the project root"""
        path = Path(self.people_data_file)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    def matcher_config(self) -> MatcherConfig:
        return MatcherConfig(
            name_similarity_threshold=self.name_similarity_threshold,
            surname_similarity_threshold=self.surname_similarity_threshold,
            location_exact_required=self.location_exact_required,
            sibling_max_age_gap=self.sibling_max_age_gap,
            parent_child_age_gap=AgeGap(
                min=self.parent_child_min_age_gap,
                max=self.parent_child_max_age_gap,
            ),
        )


@lru_cache()
def get_settings():
    return Settings()
