"""
Busylight client that returns the server's response for every call.
"""
import logging
from typing import Union

from ..models import BusylightResponse, InputValues, StatusResult
from .base import BaseLight, Params

logger = logging.getLogger(__name__)


class Busylight(BaseLight):
    """Client returning a BusylightResponse from every command."""

    async def send(self, params: Params) -> BusylightResponse:
        """
        Validate params and send them to the Busylight server.

        Non-200 responses are returned, not raised; check ``response.ok``.
        """
        values = InputValues.model_validate(params)
        response = await self._request(values.to_query())
        if not response.ok:
            logger.warning(
                f"Busylight server answered {response.status} {response.status_text} "
                f"for action={values.action.value}"
            )
        return response

    async def status(self) -> Union[str, StatusResult]:
        """Return "OK" if the server answers 200, otherwise the status and its text."""
        response = await self._request({"action": "status"})
        if response.ok:
            return "OK"
        return StatusResult(status=response.status, status_text=response.status_text)
