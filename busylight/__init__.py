"""
Busylight - async client for the Busylight HTTP status light server.
"""
from .colors import COLOR_RGB, RGB, ColorName, keyword_to_rgb, list_colors, parse_color
from .integration import BaseLight, Busylight, BusylightError, Voidlight
from .models import (
    Action,
    BusylightResponse,
    InputValues,
    Sound,
    SoundInput,
    StatusResult,
)

__all__ = [
    "Action",
    "BaseLight",
    "Busylight",
    "BusylightError",
    "BusylightResponse",
    "COLOR_RGB",
    "ColorName",
    "InputValues",
    "RGB",
    "Sound",
    "SoundInput",
    "StatusResult",
    "Voidlight",
    "keyword_to_rgb",
    "list_colors",
    "parse_color",
]
