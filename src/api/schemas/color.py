"""
Color schemas - Pydantic models for color parsing and palette responses
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from models.enums import ColorNotation


class ColorTextRequest(BaseModel):
    """Color in any supported notation"""
    text: str = Field(description='"#9333EA", "rgb(147, 51, 234)", "rgba(147, 51, 234, 0.5)" or "hsl(271, 81%, 56%)"')


class PrimaryColorRequest(BaseModel):
    """New primary color in any supported notation"""
    value: str = Field(description="Color text; unparsable input keeps the previous value")


class ColorRepresentations(BaseModel):
    """All four live representations of one canonical value"""
    hex: str
    rgb: str
    rgba: str
    hsl: str


class ParsedColorResponse(BaseModel):
    """Parse result (representations are None when not recognized)"""
    recognized: bool
    notation: str = Field(description=f"One of: {', '.join(n.name for n in ColorNotation)}")
    representations: Optional[ColorRepresentations] = None
    preset: Optional[str] = Field(None, description="Matching palette preset, if any")


class PrimaryColorResponse(BaseModel):
    """Primary color after an update attempt"""
    changed: bool
    primary_color: str
    representations: ColorRepresentations


class PresetResponse(BaseModel):
    """One palette entry"""
    name: str
    hex: str
    active: bool = Field(description="True if it matches the current primary color")


class PresetListResponse(BaseModel):
    presets: List[PresetResponse]
    count: int
