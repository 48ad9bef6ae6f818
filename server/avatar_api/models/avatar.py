"""Pydantic models for derived avatar identities."""

from typing import Tuple, Union

from pydantic import ConfigDict, Field

from avatar_api.elements import Element
from .base import CustomBaseModel


class Style(CustomBaseModel):
    """Visual style within an element."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(json_schema_extra={"example": "water_ocean"})
    name: str = Field(json_schema_extra={"example": "Océano"})
    element: Element = Field()
    palette: Tuple[str, ...] = Field(
        json_schema_extra={"example": ["#1e3a5f", "#4a90d9", "#87ceeb"]}
    )
    promptDescription: str = Field(
        json_schema_extra={"example": "Deep ocean, waves, aquamarine"}
    )


class AvatarResponse(CustomBaseModel):
    """Composite avatar identity for one user."""

    model_config = ConfigDict(frozen=True)

    avatarUrl: str = Field(
        json_schema_extra={"example": "https://api.dicebear.com/7.x/avataaars/svg?seed=water-a"}
    )
    element: Element = Field()
    styleId: Union[str, None] = Field(None)
    styleName: Union[str, None] = Field(None)
