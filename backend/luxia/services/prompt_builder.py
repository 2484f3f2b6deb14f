"""Prompt builder — renders search criteria into the hotel suggestion prompt."""

from luxia.schemas.search import HotelSearchRequest

NOT_SPECIFIED = "not specified"
NONE = "none"

SYSTEM_PROMPT = (
    "You are a hotel expert. You answer ONLY with valid JSON, "
    "with no surrounding text and no backticks."
)

PROMPT_TEMPLATE = """You are a hotel expert. Suggest exactly 3 REAL hotels that actually exist in {destination}.

Criteria:
- Destination: {destination}
- Travel type: {travel_type}
- Check-in: {checkin} / Check-out: {checkout}
- Rooms: {rooms}
- Adults: {adults}
- Children: {children}{children_ages}
- Budget: {budget_min} to {budget_max} {currency}/night
- Minimum stars: {stars}
- Amenities: {amenities}
- Request: {ai_prompt}

JSON ONLY, no text around it:
[
  {{
    "name": "Exact hotel name",
    "stars": 4,
    "address": "Full address",
    "price_per_night": 250,
    "currency": "{currency}",
    "description": "Two-sentence description.",
    "highlights": ["Highlight 1", "Highlight 2", "Highlight 3"],
    "amenities": ["Pool", "Spa"],
    "rating": 8.5,
    "image_url": ""
  }}
]"""


def _fmt_number(value: float | int | None) -> str:
    if value is None:
        return NOT_SPECIFIED
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_prompt(criteria: HotelSearchRequest, currency: str = "DT") -> str:
    children_ages = ""
    if criteria.children_ages:
        children_ages = f" (ages: {', '.join(str(age) for age in criteria.children_ages)} years)"

    return PROMPT_TEMPLATE.format(
        destination=criteria.destination,
        travel_type=criteria.travel_type or NOT_SPECIFIED,
        checkin=criteria.checkin,
        checkout=criteria.checkout,
        rooms=criteria.rooms or 1,
        adults=criteria.adults or 2,
        children=criteria.children or 0,
        children_ages=children_ages,
        budget_min=_fmt_number(criteria.budget_min),
        budget_max=_fmt_number(criteria.budget_max),
        currency=currency,
        stars=_fmt_number(criteria.stars),
        amenities=", ".join(criteria.amenities) if criteria.amenities else NONE,
        ai_prompt=criteria.ai_prompt or NONE,
    )
