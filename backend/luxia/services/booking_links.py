"""Fallback booking link — deterministic booking.com search URL."""

from urllib.parse import quote

# Same safe set as encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

DEFAULT_BASE_URL = "https://www.booking.com/search.html"
DEFAULT_LANG = "fr"


def _date_parts(value: str | None) -> list[str]:
    parts = (value or "").split("-")
    parts += ["undefined"] * (3 - len(parts))
    return parts[:3]


def build_fallback_link(
    hotel_name: str | None,
    destination: str | None,
    checkin: str | None,
    checkout: str | None,
    rooms: int | None = None,
    adults: int | None = None,
    children: int | None = None,
    *,
    base_url: str = DEFAULT_BASE_URL,
    lang: str = DEFAULT_LANG,
) -> str:
    """Build the search URL used when no real booking link was found.

    Dates are expected as YYYY-MM-DD; missing parts are rendered as
    ``undefined`` rather than rejected. Falsy counts default to
    1 room, 2 adults, 0 children.
    """
    query = quote(f"{hotel_name or ''} {destination or ''}".strip(), safe=_URI_COMPONENT_SAFE)
    cy, cm, cd = _date_parts(checkin)
    oy, om, od = _date_parts(checkout)

    url = f"{base_url}?ss={query}&lang={lang}"
    url += f"&checkin_year={cy}&checkin_month={cm}&checkin_monthday={cd}"
    url += f"&checkout_year={oy}&checkout_month={om}&checkout_monthday={od}"
    url += f"&no_rooms={rooms or 1}&group_adults={adults or 2}&group_children={children or 0}"
    return url
