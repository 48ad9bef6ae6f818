"""Visual styles per element.

A user's style is derived from ``hash(seed + ":" + element)``, so it is fixed
for the user but not chosen by them.
"""

from typing import Any, Dict, List, Optional, Tuple

from avatar_api.elements import ELEMENTS, Element, hash_string, is_valid_element
from avatar_api.models.avatar import Style


def _style(
    style_id: str, name: str, element: Element, palette: Tuple[str, ...], prompt: str
) -> Style:
    return Style(
        id=style_id, name=name, element=element, palette=palette, promptDescription=prompt
    )


STYLES_BY_ELEMENT: Dict[Element, Tuple[Style, ...]] = {
    Element.EARTH: (
        _style(
            "earth_terracotta",
            "Terracotta",
            Element.EARTH,
            ("#8B4513", "#D2691E", "#F4A460"),
            "Warm clay, amber, organic textures",
        ),
        _style(
            "earth_forest",
            "Bosque",
            Element.EARTH,
            ("#2C3328", "#556B2F", "#8FBC8F"),
            "Deep forest, moss, roots",
        ),
        _style(
            "earth_sand",
            "Arena",
            Element.EARTH,
            ("#C2B280", "#DEB887", "#F5DEB3"),
            "Sand, stone, desert warmth",
        ),
        _style(
            "earth_clay",
            "Arcilla",
            Element.EARTH,
            ("#A65D46", "#D4B896", "#EBE5DA"),
            "Clay, ceramic, handcrafted",
        ),
    ),
    Element.WATER: (
        _style(
            "water_ocean",
            "Océano",
            Element.WATER,
            ("#1e3a5f", "#4a90d9", "#87ceeb"),
            "Deep ocean, waves, aquamarine",
        ),
        _style(
            "water_ice",
            "Hielo",
            Element.WATER,
            ("#e0f4fc", "#b0e0e6", "#7eb8d4"),
            "Ice, frost, crystalline",
        ),
        _style(
            "water_rain",
            "Lluvia",
            Element.WATER,
            ("#4682b4", "#6a9fb5", "#b0c4de"),
            "Rain, mist, soft grey-blue",
        ),
        _style(
            "water_spring",
            "Manantial",
            Element.WATER,
            ("#20b2aa", "#48d1cc", "#afeeee"),
            "Spring water, clear, fresh",
        ),
    ),
    Element.FIRE: (
        _style(
            "fire_ember",
            "Brasa",
            Element.FIRE,
            ("#8b0000", "#dc143c", "#ff6347"),
            "Embers, coal, dark red",
        ),
        _style(
            "fire_sunset",
            "Atardecer",
            Element.FIRE,
            ("#ff4500", "#ff8c00", "#ffd700"),
            "Sunset, orange, golden",
        ),
        _style(
            "fire_flame",
            "Llama",
            Element.FIRE,
            ("#b22222", "#ff6b35", "#ffb347"),
            "Flame, dynamic, warm",
        ),
        _style(
            "fire_volcano",
            "Volcán",
            Element.FIRE,
            ("#2d1b1b", "#8b4513", "#cd5c5c"),
            "Lava, magma, raw power",
        ),
    ),
    Element.AIR: (
        _style(
            "air_sky",
            "Cielo",
            Element.AIR,
            ("#87ceeb", "#b0e0e6", "#e0ffff"),
            "Clear sky, clouds, light",
        ),
        _style(
            "air_wind",
            "Viento",
            Element.AIR,
            ("#e8e8e8", "#a9a9a9", "#708090"),
            "Wind, motion, silver grey",
        ),
        _style(
            "air_dawn",
            "Alba",
            Element.AIR,
            ("#ffefd5", "#ffdab9", "#f0e68c"),
            "Dawn, soft yellow, pastel",
        ),
        _style(
            "air_storm",
            "Tormenta",
            Element.AIR,
            ("#2f4f4f", "#696969", "#a9a9a9"),
            "Storm clouds, dramatic grey",
        ),
    ),
}


def get_style_for_user(id_or_seed: str, element: Any) -> Optional[Style]:
    """
    Get the style assigned to a user within an element.

    Args:
        id_or_seed: User id or seed, must be a string
        element: One of earth, water, fire, air

    Returns:
        The assigned style, or None when the element has no styles

    Raises:
        TypeError: If the id is not a string
    """
    if not isinstance(id_or_seed, str):
        raise TypeError(f"id_or_seed must be a string, got {type(id_or_seed).__name__}")
    if not is_valid_element(element):
        return None
    element = Element(element)
    styles = STYLES_BY_ELEMENT.get(element)
    if not styles:
        return None
    combined = f"{id_or_seed}:{element.value}"
    return styles[hash_string(combined) % len(styles)]


def list_styles(element: Any = None) -> List[Style]:
    """List styles for one element, or every style in catalog order."""
    if element and is_valid_element(element):
        return list(STYLES_BY_ELEMENT.get(Element(element), ()))
    return [style for key in ELEMENTS for style in STYLES_BY_ELEMENT.get(key, ())]
