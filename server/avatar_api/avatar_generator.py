"""Deterministic avatar URLs.

The image currently comes from a placeholder generator keyed by
``element + user id``. Callers only rely on getting the same URL for the same
(identifier, element) pair, so the provider can be swapped for a generative
model prompted from the element and style.
"""

import re
from typing import Optional
from urllib.parse import quote

from config import settings
from avatar_api.elements import Element, get_element_for_user, utf16_units
from avatar_api.models.avatar import AvatarResponse
from avatar_api.styles import get_style_for_user

_UNSAFE_SEED_CHARS = re.compile(r"[^A-Za-z0-9-]")


def sanitize_seed(seed: str) -> str:
    """Replace every UTF-16 code unit outside ``[a-zA-Z0-9-]`` with ``-``."""
    return _UNSAFE_SEED_CHARS.sub(lambda m: "-" * sum(1 for _ in utf16_units(m.group())), seed)


def get_avatar_url(id_or_seed: str, element: Element, base_url: Optional[str] = None) -> str:
    """
    Build the avatar URL for a user.

    Args:
        id_or_seed: User id or seed, must be a string
        element: Element assigned to the user
        base_url: Image service endpoint, defaults to the configured one

    Returns:
        Image URL, identical for identical inputs

    Raises:
        TypeError: If the id is not a string
    """
    if not isinstance(id_or_seed, str):
        raise TypeError(f"id_or_seed must be a string, got {type(id_or_seed).__name__}")
    element = Element(element)
    seed = sanitize_seed(f"{element.value}-{id_or_seed}")
    return f"{base_url or settings.AVATAR_BASE_URL}?seed={quote(seed, safe='')}"


def build_avatar_response(id_or_seed: str, base_url: Optional[str] = None) -> AvatarResponse:
    """Compute element, style and avatar URL for a string user id."""
    element = get_element_for_user(id_or_seed)
    style = get_style_for_user(id_or_seed, element)
    return AvatarResponse(
        avatarUrl=get_avatar_url(id_or_seed, element, base_url),
        element=element,
        styleId=style.id if style else None,
        styleName=style.name if style else None,
    )
