"""
Drop rate parsing for wiki rarity strings.

Converts the free-text rarity notation published on the wiki ("1/128",
"1/1,092.3", "1 in 256", "1:50") into a probability. Textual rarities such as
"Common" or "Always" are not resolved and yield None. Only the first
recognizable notation in a string is considered, so multi-rate strings like
"1/128; 1/65" resolve to their first rate.
"""

import re

_NUMBER = r"\d+(?:,\d{3})*(?:\.\d+)?"

_FRACTION_RE = re.compile(rf"({_NUMBER})\s*/\s*({_NUMBER})")
_ONE_IN_RE = re.compile(rf"(?<![\d.,])1\s*(?:in|:)\s*({_NUMBER})", re.IGNORECASE)


def _to_float(text: str) -> float | None:
    try:
        return float(text.replace(",", ""))
    except ValueError:
        return None


def _as_probability(numerator: float | None, denominator: float | None) -> float | None:
    if numerator is None or denominator is None or denominator <= 0:
        return None
    value = numerator / denominator
    if not 0 < value <= 1:
        return None
    return value


def parse_rate(raw: str | None) -> float | None:
    if not raw or not raw.strip():
        return None

    match = _FRACTION_RE.search(raw)
    if match:
        rate = _as_probability(_to_float(match.group(1)), _to_float(match.group(2)))
        if rate is not None:
            return rate

    match = _ONE_IN_RE.search(raw)
    if match:
        return _as_probability(1.0, _to_float(match.group(1)))

    return None
