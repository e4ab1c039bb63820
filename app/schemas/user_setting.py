"""
User settings API schemas.
"""

from pydantic import BaseModel, Field

from app.tracking.theme import HEX_COLOR_PATTERN


class ThemeUpdate(BaseModel):
    primary_hex: str = Field(
        ..., pattern=HEX_COLOR_PATTERN,
        description="Primary colour as #rrggbb",
    )


class ThemeResponse(BaseModel):
    primary_hex: str
    primary_hsl: str = Field(..., description="Same colour as 'H S% L%' for CSS variables")
    is_default: bool
