"""
Busylight client that discards responses.

Every command either completes silently or logs the failure and raises
BusylightError.
"""
import logging

from ..models import InputValues
from .base import TRANSPORT_ERRORS, BaseLight, BusylightError, Params

logger = logging.getLogger(__name__)


class Voidlight(BaseLight):
    """Fire-and-forget variant of Busylight."""

    async def send(self, params: Params) -> None:
        """
        Validate params and send them to the Busylight server.

        Raises:
            pydantic.ValidationError: if the action is not a known Action
            BusylightError: if the server is unreachable or does not answer 200
        """
        query = InputValues.model_validate(params).to_query()

        try:
            response = await self._request(query)
        except TRANSPORT_ERRORS as e:
            logger.error(f"Failed to reach Busylight server at {self.base_url}: {e!r}")
            raise BusylightError(
                f"Failed to send request to Busylight server: {e!r}", params=query
            ) from e

        if response.ok:
            return

        logger.error(f"Failed to send input to Busylight server: {response.status_text}")
        logger.error(f"Request params: {query}")
        raise BusylightError(
            f"Failed to send request to Busylight server: {response.status_text}",
            status=response.status,
            status_text=response.status_text,
            params=query,
        )

    async def status(self) -> bool:
        """Log whether the Busylight HTTP server is running and return the result."""
        try:
            response = await self._request({"action": "status"})
        except TRANSPORT_ERRORS as e:
            logger.error(f"Busylight HTTP server is not running: {e!r}")
            return False

        if response.ok:
            logger.info("Busylight HTTP server is running.")
            return True

        logger.error("Busylight HTTP server is not running.")
        logger.error(f"{response.status} {response.status_text}")
        return False
