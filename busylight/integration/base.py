"""
Base client for the Busylight HTTP server.
Busylight and Voidlight inherit from BaseLight and differ only in how they
report the outcome of a request.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

import aiohttp

from ..colors import ColorName, keyword_to_rgb
from ..config import settings
from ..models import (
    DEFAULT_SOUND,
    DEFAULT_VOLUME,
    Action,
    BusylightResponse,
    InputValues,
    SoundInput,
)

logger = logging.getLogger(__name__)

ColorInput = Union[str, ColorName]
Params = Union[InputValues, Dict[str, Any]]

# Errors raised by aiohttp for unreachable servers and timeouts.
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class BusylightError(Exception):
    """Raised when the Busylight server rejects a request or cannot be reached."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        status_text: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
    ):
        self.status = status
        self.status_text = status_text
        self.params = params or {}
        super().__init__(message)


class BaseLight(ABC):
    """Abstract base class for Busylight clients."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            base_url: URL of the Busylight HTTP server, e.g. http://localhost:8989;
                may include a path prefix such as http://host/busylight
            timeout: Total timeout per request in seconds
        """
        self.base_url = base_url or settings.base_url
        self.timeout = timeout if timeout is not None else settings.timeout
        self.session: Optional[aiohttp.ClientSession] = None
        self.name = self.__class__.__name__

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                base_url=self.base_url if self.base_url.endswith("/") else self.base_url + "/",
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self.session

    async def close(self):
        """Close aiohttp session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def _request(self, query: Dict[str, str]) -> BusylightResponse:
        """Issue a single GET with the given query string parameters."""
        session = await self._get_session()
        logger.debug(f"{self.name} GET {self.base_url} params={query}")

        # Relative path so any prefix in base_url is kept.
        async with session.get("", params=query) as response:
            body = await response.text()
            return BusylightResponse(
                status=response.status,
                status_text=response.reason,
                body=body,
                params=query,
            )

    @abstractmethod
    async def send(self, params: Params) -> Any:
        """
        Validate the parameters and send them to the Busylight server as a
        query string.

        Args:
            params: Mapping with an "action" key plus action specific fields

        Raises:
            pydantic.ValidationError: if the action is not a known Action
        """
        pass

    @abstractmethod
    async def status(self) -> Any:
        """Check whether the Busylight HTTP server is answering."""
        pass

    @staticmethod
    def _color_params(color: ColorInput, prefix: str = "") -> Dict[str, int]:
        rgb = keyword_to_rgb(color)
        return {
            f"{prefix}red": rgb.red,
            f"{prefix}green": rgb.green,
            f"{prefix}blue": rgb.blue,
        }

    @staticmethod
    def _sound_input(
        color: Union[ColorInput, SoundInput], sound: int, volume: int
    ) -> SoundInput:
        if isinstance(color, SoundInput):
            return color
        return SoundInput(color=color, sound=sound, volume=volume)

    async def on(self, color: ColorInput):
        """Turn the Busylight on with the given color."""
        return await self.send({"action": Action.LIGHT, **self._color_params(color)})

    async def alert(
        self,
        color: Union[ColorInput, SoundInput],
        sound: int = DEFAULT_SOUND,
        volume: int = DEFAULT_VOLUME,
    ):
        """
        Play an alert with the given color, sound and volume.

        Sounds are numbered 0-8 (see models.Sound, 0 is silent). Volume is
        0-100; the device steps are 0, 25, 50, 75 and 100.

        Args:
            color: Color keyword, or a complete SoundInput
            sound: Ringtone number
            volume: Volume level
        """
        parsed = self._sound_input(color, sound, volume)
        return await self.send({
            "action": Action.ALERT,
            **self._color_params(parsed.color),
            "sound": parsed.sound,
            "volume": parsed.volume,
        })

    async def blink(self, color: ColorInput):
        """Blink the Busylight on and off with the given color."""
        return await self.send({"action": Action.BLINK, **self._color_params(color)})

    async def jingle(
        self,
        color: Union[ColorInput, SoundInput],
        sound: int = DEFAULT_SOUND,
        volume: int = DEFAULT_VOLUME,
    ):
        """Play a jingle; takes the same arguments as alert()."""
        parsed = self._sound_input(color, sound, volume)
        return await self.send({
            "action": Action.JINGLE,
            **self._color_params(parsed.color),
            "sound": parsed.sound,
            "volume": parsed.volume,
        })

    async def pulse(self, color: ColorInput):
        """Pulse the given color."""
        return await self.send({"action": Action.PULSE, **self._color_params(color)})

    async def flash_colors(self, color_a: ColorInput, color_b: ColorInput):
        """Flash between two colors."""
        # Both colors are validated before anything is sent.
        params = {
            "action": Action.COLORS_WITH_FLASH,
            **self._color_params(color_a),
            **self._color_params(color_b, prefix="flash"),
        }
        return await self.send(params)

    async def off(self):
        """Turn the Busylight off."""
        return await self.send({"action": Action.OFF})

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
