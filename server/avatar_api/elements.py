"""Deterministic element assignment.

Every identifier is mapped to one of four elements by hashing it and taking the
result modulo 4. The hash, the modulus and the order of ``ELEMENTS`` are part of
the public contract: changing any of them reassigns every existing user.
"""

from enum import Enum
from typing import Any, Iterator


class Element(str, Enum):
    """Thematic element assigned to a user."""

    EARTH = "earth"
    WATER = "water"
    FIRE = "fire"
    AIR = "air"


ELEMENTS = (Element.EARTH, Element.WATER, Element.FIRE, Element.AIR)
ELEMENT_NAMES = tuple(element.value for element in ELEMENTS)
DEFAULT_ELEMENT = Element.EARTH

# Slugs used by the community front-end
TERRETA_SLUGS = {
    Element.EARTH: "tierra",
    Element.WATER: "agua",
    Element.FIRE: "fuego",
    Element.AIR: "aire",
}

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def utf16_units(value: str) -> Iterator[int]:
    """Yield the UTF-16 code units of a string."""
    data = value.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_string(value: str) -> int:
    """Stable string hash.

    Java-style ``h * 31 + c`` over UTF-16 code units with 32-bit signed
    overflow, returned as an absolute value.

    Args:
        value: The string to hash

    Returns:
        Non-negative integer, at most 2**31
    """
    h = 0
    for unit in utf16_units(value):
        h = (h * 31 + unit) & _INT32_MASK
    if h & _INT32_SIGN:
        h -= _INT32_MASK + 1
    return abs(h)


def is_valid_element(value: Any) -> bool:
    """Check if a value names one of the four elements."""
    return isinstance(value, str) and value in ELEMENT_NAMES


def get_element_for_user(id_or_seed: Any) -> Element:
    """Return the element assigned to a user id or seed.

    Empty or non-string input falls back to earth.
    """
    if not id_or_seed or not isinstance(id_or_seed, str):
        return DEFAULT_ELEMENT
    return ELEMENTS[hash_string(id_or_seed) % len(ELEMENTS)]


def to_terreta_slug(element: Any) -> str:
    """Map an API element name to the front-end slug, defaulting to tierra."""
    if not is_valid_element(element):
        return TERRETA_SLUGS[DEFAULT_ELEMENT]
    return TERRETA_SLUGS[Element(element)]
