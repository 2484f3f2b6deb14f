"""Recover a JSON array from free-form model output.

Heuristic only: code fences are stripped and the greedy ``[ ... ]`` span is
parsed. Truncated or adversarial output is expected to fail.
"""

import json
import re

from luxia.exceptions import HotelShapeError, JsonArrayNotFoundError, JsonArrayParseError

_FENCE_JSON_RE = re.compile(r"```json", re.IGNORECASE)
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


def strip_code_fences(text: str) -> str:
    return _FENCE_JSON_RE.sub("", text).replace("```", "").strip()


def find_json_array(text: str) -> str | None:
    """Return the span from the first ``[`` to the last ``]``, if any."""
    match = _ARRAY_RE.search(text)
    return match.group(0) if match else None


def recover_json_array(text: str) -> list:
    """Parse the JSON array embedded in ``text``.

    Raises:
        JsonArrayNotFoundError: no bracketed span exists; ``raw`` holds ``text``.
        JsonArrayParseError: the span is not valid JSON.
    """
    candidate = find_json_array(strip_code_fences(text))
    if candidate is None:
        raise JsonArrayNotFoundError("Model response did not contain a JSON array.", raw=text)

    try:
        return json.loads(candidate)
    except json.JSONDecodeError as e:
        raise JsonArrayParseError(f"Invalid JSON in model response: {e}", raw=text) from e


def recover_hotels(text: str) -> list[dict]:
    """Recover the hotel array; every entry must be a JSON object.

    Raises:
        RecoveryError subclasses, all carrying ``text`` as ``raw``.
    """
    hotels = recover_json_array(text)
    if any(not isinstance(hotel, dict) for hotel in hotels):
        raise HotelShapeError("Model response contained a non-object hotel entry.", raw=text)
    return hotels
