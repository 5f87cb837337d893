"""Parsing of ``allowable_values`` constraint strings.

Three forms are recognised, case-insensitively:

- ``range[min,max]``: an inclusive range
- ``rangeExclusive[min,max]``: an exclusive range
- ``a,b,c``: an enumerated list

An empty or missing string means no constraint.
"""

from .base import AllowableListValues, AllowableRangeValues

RANGE_PREFIX = "range["
RANGE_EXCLUSIVE_PREFIX = "rangeexclusive["

_INFINITIES = {"infinity": float("inf"), "-infinity": float("-inf")}


def convert_to_allowable_values(raw: str | None) -> AllowableListValues | AllowableRangeValues | None:
    """Convert a constraint string into allowable values, or None."""
    if not raw:
        return None
    lowered = raw.lower()
    if lowered.startswith(RANGE_PREFIX):
        tokens = raw[len(RANGE_PREFIX):-1].split(",")
        return build_allowable_range_values(tokens, raw)
    if lowered.startswith(RANGE_EXCLUSIVE_PREFIX):
        tokens = raw[len(RANGE_EXCLUSIVE_PREFIX):-1].split(",")
        return build_allowable_range_values(tokens, raw)
    return AllowableListValues(values=raw.split(","))


def build_allowable_range_values(tokens: list[str], raw: str) -> AllowableRangeValues:
    """Build a range from its ``[min, max]`` tokens.

    ``raw`` is the full constraint string; it decides inclusivity and is
    quoted in the error for a malformed range.
    """
    if len(tokens) != 2:
        raise ValueError(f"Allowable values format {raw!r} is incorrect, expected two range bounds")
    low, high = (_parse_bound(token, raw) for token in tokens)
    return AllowableRangeValues(
        min=low,
        max=high,
        exclusive=raw.lower().startswith(RANGE_EXCLUSIVE_PREFIX),
    )


def _parse_bound(token: str, raw: str) -> float:
    token = token.strip()
    if token.lower() in _INFINITIES:
        return _INFINITIES[token.lower()]
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"Allowable values format {raw!r} has a non-numeric bound {token!r}") from None
