"""
Data models for Busylight commands and server responses.
"""
from enum import Enum, IntEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .colors import ColorName

DEFAULT_SOUND = 3
DEFAULT_VOLUME = 75
VOLUME_LEVELS = (0, 25, 50, 75, 100)


class Action(str, Enum):
    """Commands understood by the Busylight HTTP server."""
    LIGHT = "light"
    ALERT = "alert"
    JINGLE = "jingle"
    OFF = "off"
    PULSE = "pulse"
    BLINK = "blink"
    COLORS_WITH_FLASH = "colorswithFlash"


class Sound(IntEnum):
    """Built-in ringtones, by the number the server expects."""
    NO_SOUND = 0
    FAIRY_TALE = 1
    FUNKY = 2
    KUANDO_TRAIN = 3
    OPEN_OFFICE = 4
    QUIET = 5
    TELEPHONE_NORDIC = 6
    TELEPHONE_ORIGINAL = 7
    TELEPHONE_PICK_ME_UP = 8


class SoundInput(BaseModel):
    """Color, sound and volume for an alert or jingle."""
    color: ColorName = Field(..., description="The color to set the light to.")
    sound: int = Field(DEFAULT_SOUND, ge=0, le=8, description="Ringtone number, see Sound")
    volume: int = Field(
        DEFAULT_VOLUME, ge=0, le=100, description="Volume; the device steps are 0, 25, 50, 75 and 100"
    )


class InputValues(BaseModel):
    """
    Parameters for a single request to the Busylight server.

    Only the action is validated; any other keys are passed through as
    query parameters.
    """
    action: Action

    model_config = ConfigDict(extra="allow")

    def to_query(self) -> Dict[str, str]:
        """Flatten into query string parameters, dropping unset values."""
        query: Dict[str, str] = {}
        for key, value in self.model_dump(mode="json").items():
            if value is None:
                continue
            query[key] = value if isinstance(value, str) else str(value)
        return query


class StatusResult(BaseModel):
    """Status check outcome when the server does not answer 200."""
    status: int
    status_text: Optional[str] = None


class BusylightResponse(BaseModel):
    """Response returned by the Busylight server for a command."""
    status: int
    status_text: Optional[str] = None
    body: str = ""
    params: Dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == 200
