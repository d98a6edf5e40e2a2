"""Profile Schemas — search filter and profile response models for API boundaries.

Invariants:
    - ProfileSearch mirrors core FilterCriteria field-for-field; every field optional
    - An omitted field and an explicit null both mean "no constraint"
    - Empty-string enum values (unselected <select>) are normalised to None
    - minimum_* bounded -10..100; 0 is a real value, distinct from None
    - ProfileSearchRequest.query: at most 200 chars, surrounding whitespace kept

Design Decisions:
    - to_criteria() is the only bridge from wire format to the core dataclass
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roommates.core.domain_types import School, Sex, Status, Volume
from roommates.core.snapshots import FilterCriteria, ProfileSnapshot


class ProfileSearch(BaseModel):
    """Structured filter criteria for profile search."""
    model_config = ConfigDict(extra="forbid")

    alcohol: bool | None = None
    committed: bool | None = None
    drugs: bool | None = None
    snore: bool | None = None

    assigned_sex: Sex | None = None
    day_volume: Volume | None = None
    night_volume: Volume | None = None
    school: School | None = None
    status: Status | None = None

    minimum_neatness: int | None = Field(None, ge=-10, le=100)
    minimum_social_energy_level: int | None = Field(None, ge=-10, le=100)

    @field_validator(
        "assigned_sex", "day_volume", "night_volume", "school", "status",
        mode="before",
    )
    @classmethod
    def blank_enum_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(**self.model_dump())


class ProfileSearchRequest(BaseModel):
    """Free-text query plus structured filter."""
    query: str = Field("", max_length=200)
    filter: ProfileSearch = Field(default_factory=ProfileSearch)


class UserResponse(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None
    image: str | None = None


class ProfileResponse(BaseModel):
    """Profile card data — public-facing profile attributes."""
    id: str
    user_id: str
    user: UserResponse
    school: School
    assigned_sex: Sex
    pronouns: str | None = None
    alcohol: bool
    committed: bool
    day_volume: Volume
    night_volume: Volume
    drugs: bool
    neatness: int
    snore: bool
    social_energy_level: int
    status: Status

    @classmethod
    def from_snapshot(cls, profile: ProfileSnapshot) -> "ProfileResponse":
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            user=UserResponse(
                id=profile.user.id,
                name=profile.user.name,
                email=profile.user.email,
                image=profile.user.image,
            ),
            school=profile.school,
            assigned_sex=profile.assigned_sex,
            pronouns=profile.pronouns,
            alcohol=profile.alcohol,
            committed=profile.committed,
            day_volume=profile.day_volume,
            night_volume=profile.night_volume,
            drugs=profile.drugs,
            neatness=profile.neatness,
            snore=profile.snore,
            social_energy_level=profile.social_energy_level,
            status=profile.status,
        )


class ProfileSearchResponse(BaseModel):
    profiles: list[ProfileResponse]
    total: int
