"""Free-text grocery entry parsing.

Turns input such as ``"2 litros de leche"`` or ``"1/2 kg de pollo"`` into a
:class:`ParsedGroceryEntry`. Extraction runs in a fixed order, each step
removing what it matched before the next one scans the text:

1. quantity (integer, dot decimal or ``a/b`` fraction)
2. unit (from :data:`UNIT_KEYWORDS`, optional trailing plural ``s``)
3. name cleanup (drop the linking word ``de``, collapse spaces, capitalize)

Only the first quantity and the first unit are taken; anything after that
stays in the name. The parser never raises. Whether the result is usable
(non-empty name, positive quantity) is decided by the caller.
"""
import re
from typing import Optional, Tuple

from .types import ParsedGroceryEntry

DEFAULT_QUANTITY = 1.0

# Mass, volume and count units, in the singular/abbreviated form
UNIT_KEYWORDS: Tuple[str, ...] = (
    # mass
    "kg", "kilo", "gramo", "gr", "g",
    # volume
    "litro", "lts", "lt", "l", "ml",
    # count
    "unidad", "unidades", "caja", "botella", "paquete",
)

LINKING_WORDS: Tuple[str, ...] = ("de",)

# ASCII digits only, at most nine per part; longer tokens stay in the name
_QUANTITY_PATTERN = re.compile(
    r"(?<=\s)(?:(?P<num>[0-9]{1,9})/(?P<den>[0-9]{1,9})"
    r"|(?P<number>[0-9]{1,9}(?:\.[0-9]{1,9})?))(?=\s)"
)

# Longest keywords first so "unidades" wins over "unidad" at the same position
_UNIT_PATTERN = re.compile(
    r"(?<=\s)(?:%s)s?(?=\s)"
    % "|".join(re.escape(k) for k in sorted(UNIT_KEYWORDS, key=len, reverse=True))
)

_LINKING_PATTERN = re.compile(
    r"(?<=\s)(?:%s)(?=\s)" % "|".join(re.escape(w) for w in LINKING_WORDS)
)


def _cut(text: str, match: re.Match) -> str:
    return f"{text[:match.start()]} {text[match.end():]}"


def _normalize(text: str) -> str:
    return f" {text.lower()} "


def _extract_quantity(text: str) -> Tuple[float, str]:
    for match in _QUANTITY_PATTERN.finditer(text):
        if match.group("number") is not None:
            return float(match.group("number")), _cut(text, match)
        try:
            quantity = int(match.group("num")) / int(match.group("den"))
        except (ZeroDivisionError, OverflowError, ValueError):
            continue  # not a quantity; stays part of the name
        return quantity, _cut(text, match)
    return DEFAULT_QUANTITY, text


def _extract_unit(text: str) -> Tuple[Optional[str], str]:
    match = _UNIT_PATTERN.search(text)
    if not match:
        return None, text
    return match.group(0), _cut(text, match)


def _clean_name(text: str) -> str:
    text = _LINKING_PATTERN.sub(" ", text)
    text = " ".join(text.split())
    return text[:1].upper() + text[1:]


def parse_grocery_entry(text: str) -> ParsedGroceryEntry:
    """
    Parse a free-text grocery entry into name, quantity and unit.

    Args:
        text: What the user typed, e.g. ``"2 litros de leche"``

    Returns:
        ParsedGroceryEntry with quantity 1 and no unit when none were found
    """
    working = _normalize(text if isinstance(text, str) else "")
    quantity, working = _extract_quantity(working)
    unit, working = _extract_unit(working)
    return ParsedGroceryEntry(
        name=_clean_name(working),
        quantity=quantity,
        unit=unit,
    )
