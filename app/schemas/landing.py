from pydantic import BaseModel, ConfigDict, Field, conint, constr, field_validator
from typing import Any, Dict, List, Literal, Optional

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class WaitlistSignupRequest(BaseModel):
    email: constr(strip_whitespace=True, min_length=1, pattern=EMAIL_PATTERN)
    name: constr(strip_whitespace=True, min_length=1)
    user_type_interested: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    source: Optional[str] = None


class TestimonialCreateRequest(BaseModel):
    name: constr(min_length=1)
    title: constr(min_length=1)
    quote: constr(min_length=1)
    user_id: Optional[str] = None
    image_url: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    category: str = "general"
    rating: int = Field(default=5, ge=1, le=5)
    is_verified: bool = False
    is_featured: bool = True
    order: int = 0


class FAQCreateRequest(BaseModel):
    question: constr(min_length=1)
    answer: constr(min_length=1)
    category: str = "general"
    order: int = 0
    is_active: bool = True


class UseCaseCreateRequest(BaseModel):
    user_type: constr(min_length=1)
    title: constr(min_length=1)
    description: constr(min_length=1)
    avatar_url: Optional[str] = None
    results: Dict[str, Any] = Field(default_factory=dict)
    timeline_weeks: Optional[int] = None
    image_url: Optional[str] = None
    is_featured: bool = True
    order: int = 0


class SocialProofStatCreateRequest(BaseModel):
    metric_name: constr(min_length=1)
    current_value: int = Field(ge=0)
    unit: str
    label: str
    display_format: str = "number"
    icon: Optional[str] = None
    order: int = 0


class ComparisonCreateRequest(BaseModel):
    feature_name: constr(min_length=1)
    category: constr(min_length=1)
    eloity_has: bool = True
    feature_description: Optional[str] = None
    competitors: Dict[str, bool] = Field(default_factory=dict)
    order: int = 0
    is_active: bool = True


class ReorderEntry(BaseModel):
    id: str
    order: int


class ReorderRequest(BaseModel):
    orders: List[ReorderEntry]


class WaitlistExportRequest(BaseModel):
    status: Optional[str] = None
    format: Literal["json", "csv"] = "json"
    limit: int = Field(default=1000, ge=1)

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v):
        return v.lower() if isinstance(v, str) else v


# PATCH bodies: every field optional, but a field that is sent must have the
# column's type. Columns that are NOT NULL are typed without Optional so an
# explicit null is rejected.
class _PartialUpdate(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


class TestimonialUpdateRequest(_PartialUpdate):
    name: constr(min_length=1) = None
    title: constr(min_length=1) = None
    quote: constr(min_length=1) = None
    user_id: Optional[str] = None
    image_url: Optional[str] = None
    metrics: Dict[str, Any] = None
    category: constr(min_length=1) = None
    rating: conint(ge=1, le=5) = None
    is_verified: bool = None
    is_featured: bool = None
    order: int = None


class FAQUpdateRequest(_PartialUpdate):
    question: constr(min_length=1) = None
    answer: constr(min_length=1) = None
    category: constr(min_length=1) = None
    order: int = None
    is_active: bool = None


class UseCaseUpdateRequest(_PartialUpdate):
    user_type: constr(min_length=1) = None
    title: constr(min_length=1) = None
    description: constr(min_length=1) = None
    avatar_url: Optional[str] = None
    results: Dict[str, Any] = None
    timeline_weeks: Optional[conint(ge=0)] = None
    image_url: Optional[str] = None
    is_featured: bool = None
    order: int = None


class ComparisonUpdateRequest(_PartialUpdate):
    feature_name: constr(min_length=1) = None
    category: constr(min_length=1) = None
    eloity_has: bool = None
    feature_description: Optional[str] = None
    competitors: Dict[str, bool] = None
    order: int = None
    is_active: bool = None


class WaitlistLeadUpdateRequest(_PartialUpdate):
    conversion_status: Literal["waitlist", "contacted", "converted", "rejected"] = None
    is_verified: bool = None
    lead_score: conint(ge=0) = None
    name: constr(strip_whitespace=True, min_length=1) = None
    country: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
