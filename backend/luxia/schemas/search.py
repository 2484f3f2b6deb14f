from pydantic import BaseModel, Field


class HotelSearchRequest(BaseModel):
    """Search criteria posted by the frontend (camelCase on the wire)."""

    destination: str | None = None
    travel_type: str | None = Field(None, alias="travelType")
    checkin: str | None = None
    checkout: str | None = None
    rooms: int | None = None
    adults: int | None = None
    children: int | None = None
    children_ages: list[int] | None = Field(None, alias="childrenAges")
    budget_min: float | None = Field(None, alias="budgetMin")
    budget_max: float | None = Field(None, alias="budgetMax")
    stars: float | None = None
    amenities: list[str] | None = None
    ai_prompt: str | None = Field(None, alias="aiPrompt")

    model_config = {"populate_by_name": True}

    def missing_required(self) -> list[str]:
        return [
            name for name in ("destination", "checkin", "checkout")
            if not (getattr(self, name) or "").strip()
        ]


class HotelSuggestion(BaseModel):
    name: str | None = None
    stars: int | float | None = None
    address: str | None = None
    price_per_night: int | float | None = None
    currency: str | None = None
    description: str | None = None
    highlights: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    rating: int | float | None = None
    image_url: str | None = None
    booking_link: str | None = None

    # Keys the model adds beyond the requested schema are passed through
    model_config = {"extra": "allow"}


class HotelSearchResponse(BaseModel):
    hotels: list[HotelSuggestion]


class ErrorResponse(BaseModel):
    error: str
    raw: str | None = None
